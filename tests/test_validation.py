import pytest

from modelmeta.validation import (
    clean_extracted_value,
    contains_metadata_field,
    is_valid_value,
    parse_date_to_epoch,
    parse_time_to_epoch,
    sanitize_manifest_ref,
)

JAN_15_2024_MS = 1705276800000
JAN_15_2024_1030_MS = 1705314600000


@pytest.mark.parametrize(
    "value, min_length, max_length, patterns, expected",
    [
        ("test", 1, 10, None, True),
        ("a", 2, 10, None, False),
        ("this is a very long string that exceeds the limit", 1, 10, None, False),
        ("test123", 1, 10, [r"^[a-z]+\d+$"], True),
        ("TEST123", 1, 10, [r"^[a-z]+\d+$"], False),
    ],
)
def test_is_valid_value(value, min_length, max_length, patterns, expected):
    assert is_valid_value(value, min_length, max_length, patterns) is expected


def test_is_valid_value_rejects_control_characters():
    assert is_valid_value("bad\tvalue", 1, 20, []) is False


def test_is_valid_value_rejects_non_ascii():
    assert is_valid_value("café", 1, 20, []) is False


def test_is_valid_value_any_pattern_suffices():
    assert is_valid_value("abc", 1, 10, [r"^\d+$", r"b"]) is True


def test_is_valid_value_invalid_pattern_never_matches():
    assert is_valid_value("abc", 1, 10, ["("]) is False


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("  test value  ", "test value"),
        ("**bold text**", "bold text"),
        ("test value:", "test value"),
        ('  *_`"test value`"_*:  ', 'test value`"_*'),
    ],
)
def test_clean_extracted_value(raw, expected):
    assert clean_extracted_value(raw) == expected


def test_contains_metadata_field():
    assert contains_metadata_field("License: MIT", ["Provider", "License"]) is True
    assert contains_metadata_field("nothing here", ["Provider", "License"]) is False
    assert contains_metadata_field("anything", []) is False


@pytest.mark.parametrize(
    "ref, expected",
    [
        (
            "registry.redhat.io/rhelai1/modelcar-granite:1.0",
            "registry.redhat.io_rhelai1_modelcar-granite_1.0",
        ),
        (
            "registry.io/path/with:colon/and\\backslash?question",
            "registry.io_path_with_colon_and_backslash_question",
        ),
        ("test///multiple\\\\\\slashes", "test_multiple_slashes"),
        ("/leading/and/trailing/", "leading_and_trailing"),
    ],
)
def test_sanitize_manifest_ref(ref, expected):
    assert sanitize_manifest_ref(ref) == expected


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("01/15/2024", JAN_15_2024_MS),
        ("2024-01-15", JAN_15_2024_MS),
        ("1/15/2024", JAN_15_2024_MS),
        ("15/01/2024", JAN_15_2024_MS),
        ("15-1-2024", JAN_15_2024_MS),
        ("**2024-01-15**.", JAN_15_2024_MS),
        ("invalid-date", None),
        ("", None),
        ("02/30/2024", None),
    ],
)
def test_parse_date_to_epoch(raw, expected):
    assert parse_date_to_epoch(raw) == expected


def test_parse_date_month_first_wins_when_ambiguous():
    # 02/03/2024 reads as February 3rd.
    assert parse_date_to_epoch("02/03/2024") == 1706918400000


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("2024-01-15T10:30:00Z", JAN_15_2024_1030_MS),
        ("2024-01-15T10:30:00.123Z", JAN_15_2024_1030_MS),
        ("2024-01-15T12:30:00+02:00", JAN_15_2024_1030_MS),
        ("2024-01-15T05:30:00-05:00", JAN_15_2024_1030_MS),
        ("", None),
        ("invalid-time", None),
        ("2024-01-15 10:30:00", None),
        ("2024-13-15T10:30:00Z", None),
    ],
)
def test_parse_time_to_epoch(raw, expected):
    assert parse_time_to_epoch(raw) == expected