"""YAML output helpers."""

from __future__ import annotations

import dataclasses
import sys
from typing import Any

import yaml

# Large enough that long plain scalars such as base64 logos are never folded.
_NO_WRAP = sys.maxsize


def _plain(value: Any) -> Any:
    to_dict = getattr(value, "to_dict", None)
    if callable(to_dict):
        return to_dict()
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    return value


def marshal_yaml_with_newline(value: Any) -> str:
    """Serialise value as block YAML text that always ends with a newline.

    Keys keep their order and long strings are written on one line. Objects
    with a ``to_dict`` method, and dataclasses, are converted first.
    """
    text = yaml.dump(
        _plain(value),
        Dumper=yaml.SafeDumper,
        sort_keys=False,
        allow_unicode=True,
        default_flow_style=False,
        width=_NO_WRAP,
    )
    if text and not text.endswith("\n"):
        text += "\n"
    return text