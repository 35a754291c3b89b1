import pytest

from modelmeta.servingruntime import (
    ServingRuntimeOverrideConfig,
    ServingRuntimeOverrideError,
)


@pytest.mark.parametrize(
    "config, message",
    [
        (ServingRuntimeOverrideConfig(), "preview_image is required"),
        (
            ServingRuntimeOverrideConfig(
                reason="test reason", runtime_name="test-runtime", display_name="Test Runtime"
            ),
            "preview_image is required",
        ),
        (
            ServingRuntimeOverrideConfig(
                preview_image="registry.example.com/image:tag",
                reason="test reason",
                display_name="Test Runtime",
            ),
            "runtime_name is required",
        ),
        (
            ServingRuntimeOverrideConfig(
                preview_image="registry.example.com/image:tag",
                reason="test reason",
                runtime_name="test-runtime",
            ),
            "display_name is required",
        ),
    ],
)
def test_validate_errors(config, message):
    with pytest.raises(ServingRuntimeOverrideError, match=message):
        config.validate()


def test_validate_valid_config():
    config = ServingRuntimeOverrideConfig(
        preview_image="registry.example.com/image:tag",
        reason="test reason",
        runtime_name="test-runtime",
        display_name="Test Runtime",
    )
    assert config.validate() is None
    assert config.runtime_name == "test-runtime"


def test_reason_is_optional():
    config = ServingRuntimeOverrideConfig(
        preview_image="registry.example.com/image:tag",
        runtime_name="test-runtime",
        display_name="Test Runtime",
    )
    assert config.validate() is None
    assert config.reason == ""


def test_from_dict():
    config = ServingRuntimeOverrideConfig.from_dict(
        {
            "preview_image": "registry.example.com/image:tag",
            "reason": "needs newer libraries",
            "runtime_name": "preview-runtime",
            "display_name": "Preview Runtime",
            "note": "temporary",
        }
    )
    assert config == ServingRuntimeOverrideConfig(
        preview_image="registry.example.com/image:tag",
        reason="needs newer libraries",
        runtime_name="preview-runtime",
        display_name="Preview Runtime",
        note="temporary",
    )


def test_from_dict_none_fails_validation():
    config = ServingRuntimeOverrideConfig.from_dict(None)
    with pytest.raises(ServingRuntimeOverrideError):
        config.validate()


def test_from_dict_rejects_non_mapping():
    with pytest.raises(TypeError):
        ServingRuntimeOverrideConfig.from_dict("image")