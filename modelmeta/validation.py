"""Checks and clean-up for values extracted from modelcards."""

from __future__ import annotations

import re
from collections.abc import Iterable
from datetime import datetime, timedelta, timezone

_INVALID_PATH_CHARS = re.compile(r'[/\\:*?"<>|]')
_UNDERSCORE_RUNS = re.compile(r"_+")

# Date layouts tried in order: month-first, ISO, then day-first.
_DATE_LAYOUTS = (
    (re.compile(r"(\d{1,2})/(\d{1,2})/(\d{4})"), "mdy"),
    (re.compile(r"(\d{1,2})-(\d{1,2})-(\d{4})"), "mdy"),
    (re.compile(r"(\d{4})-(\d{2})-(\d{2})"), "ymd"),
    (re.compile(r"(\d{1,2})/(\d{1,2})/(\d{4})"), "dmy"),
    (re.compile(r"(\d{1,2})-(\d{1,2})-(\d{4})"), "dmy"),
)

_TIMESTAMP = re.compile(
    r"(\d{4})-(\d{2})-(\d{2})T(\d{2}):(\d{2}):(\d{2})(?:\.\d+)?(Z|[+-]\d{2}:\d{2})"
)


def is_valid_value(
    value: str,
    min_length: int,
    max_length: int,
    allowed_patterns: Iterable[str] | None = None,
) -> bool:
    """Return True if value has a sane length, printable ASCII only, and matches a pattern.

    When no patterns are given any value passing the other checks is valid.
    Patterns that are not valid regular expressions never match.
    """
    if not min_length <= len(value) <= max_length:
        return False
    if any(not 32 <= ord(ch) <= 126 for ch in value):
        return False
    patterns = list(allowed_patterns or ())
    if not patterns:
        return True
    for pattern in patterns:
        try:
            if re.search(pattern, value):
                return True
        except re.error:
            continue
    return False


def clean_extracted_value(value: str) -> str:
    """Strip whitespace, markdown emphasis, quotes and trailing colons or periods."""
    return value.strip().strip('*_`"').rstrip(":.")


def contains_metadata_field(content: str, indicators: Iterable[str]) -> bool:
    """Return True if any indicator occurs in content."""
    return any(indicator in content for indicator in indicators)


def sanitize_manifest_ref(manifest_ref: str) -> str:
    """Turn a manifest reference into a safe directory name."""
    sanitized = _INVALID_PATH_CHARS.sub("_", manifest_ref)
    sanitized = _UNDERSCORE_RUNS.sub("_", sanitized)
    return sanitized.strip("_")


def _epoch_millis(moment: datetime) -> int:
    delta = moment - datetime(1970, 1, 1, tzinfo=timezone.utc)
    return (delta.days * 86400 + delta.seconds) * 1000


def parse_date_to_epoch(date_str: str) -> int | None:
    """Parse a calendar date to epoch milliseconds at UTC midnight, or None."""
    date_str = clean_extracted_value(date_str)
    for pattern, order in _DATE_LAYOUTS:
        match = pattern.fullmatch(date_str)
        if not match:
            continue
        first, second, third = (int(g) for g in match.groups())
        if order == "mdy":
            year, month, day = third, first, second
        elif order == "dmy":
            year, month, day = third, second, first
        else:
            year, month, day = first, second, third
        try:
            moment = datetime(year, month, day, tzinfo=timezone.utc)
        except ValueError:
            continue
        return _epoch_millis(moment)
    return None


def parse_time_to_epoch(time_str: str) -> int | None:
    """Parse an RFC 3339 timestamp to epoch milliseconds (whole seconds), or None."""
    if not time_str:
        return None
    match = _TIMESTAMP.fullmatch(time_str)
    if not match:
        return None
    year, month, day, hour, minute, second = (int(g) for g in match.groups()[:6])
    zone = match.group(7)
    if zone == "Z":
        tz = timezone.utc
    else:
        hours, minutes = int(zone[1:3]), int(zone[4:6])
        if hours > 23 or minutes > 59:
            return None
        offset = timedelta(hours=hours, minutes=minutes)
        tz = timezone(-offset if zone[0] == "-" else offset)
    try:
        moment = datetime(year, month, day, hour, minute, second, tzinfo=tz)
    except ValueError:
        return None
    return _epoch_millis(moment)