"""Configuration for models that need a preview serving runtime image."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any


class ServingRuntimeOverrideError(ValueError):
    """Raised when a serving runtime override lacks a required field."""


def _str(value: Any) -> str:
    return "" if value is None else str(value)


@dataclass
class ServingRuntimeOverrideConfig:
    """A custom serving runtime used instead of the default image."""

    preview_image: str = ""
    reason: str = ""
    runtime_name: str = ""
    display_name: str = ""
    note: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> ServingRuntimeOverrideConfig:
        if data is None:
            data = {}
        if not isinstance(data, Mapping):
            raise TypeError(
                f"serving runtime override: expected a mapping, got {type(data).__name__}"
            )
        return cls(
            preview_image=_str(data.get("preview_image")),
            reason=_str(data.get("reason")),
            runtime_name=_str(data.get("runtime_name")),
            display_name=_str(data.get("display_name")),
            note=_str(data.get("note")),
        )

    def validate(self) -> None:
        """Raise ServingRuntimeOverrideError if a required field is empty."""
        if not self.preview_image:
            raise ServingRuntimeOverrideError("preview_image is required")
        if not self.runtime_name:
            raise ServingRuntimeOverrideError("runtime_name is required")
        if not self.display_name:
            raise ServingRuntimeOverrideError("display_name is required")