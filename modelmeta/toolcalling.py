"""Tool-calling configuration read from modelcard frontmatter."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

KNOWN_TOOL_CALL_PARSERS = (
    "mistral",
    "hermes",
    "llama3_json",
    "internlm2",
    "granite",
    "jamba",
    "llama",
    "functionary",
    "qwen",
    "metamath",
    "openai",
    "internlm",
    "deepseek_v2.5",
)
_VALID_PARSERS = frozenset(KNOWN_TOOL_CALL_PARSERS)

TEMPLATE_DIR = "opt/app-root/template/"
_EXAMPLES_DIR = "examples/"


class ToolCallingError(ValueError):
    """Raised when a tool-calling configuration is invalid."""


def _mapping(data: Any) -> Mapping[str, Any]:
    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise TypeError(f"tool calling config: expected a mapping, got {type(data).__name__}")
    return data


def _str(value: Any) -> str:
    return "" if value is None else str(value)


def _base_name(path: str) -> str:
    """Return the last element of a slash-separated path."""
    stripped = path.rstrip("/")
    if not stripped:
        return "/"
    return stripped.rsplit("/", 1)[-1]


def _is_set(value: str) -> bool:
    return bool(value) and value != "None"


@dataclass
class ToolCallingConfig:
    """How a model is served with tool calling enabled."""

    supported: bool = False
    required_cli_args: list[str] = field(default_factory=list)
    chat_template_file: str = ""
    chat_template_path: str = ""
    tool_call_parser: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> ToolCallingConfig:
        data = _mapping(data)
        args = data.get("required_cli_args")
        if args is None:
            args = []
        elif not isinstance(args, (list, tuple)):
            raise TypeError("required_cli_args: expected a sequence")
        return cls(
            supported=bool(data.get("tool_calling_supported", False)),
            required_cli_args=[str(a) for a in args],
            chat_template_file=_str(data.get("chat_template_file_name")),
            chat_template_path=_str(data.get("chat_template_path")),
            tool_call_parser=_str(data.get("tool_call_parser")),
        )

    def has_tool_calling(self) -> bool:
        """Return True if the model supports tool calling."""
        return self.supported or bool(self.required_cli_args) or bool(self.tool_call_parser)

    def validate(self) -> None:
        """Raise ToolCallingError if the tool call parser is not a known one."""
        parser = self.tool_call_parser
        if parser and parser not in _VALID_PARSERS:
            raise ToolCallingError(
                f"unknown tool_call_parser: {json.dumps(parser)} "
                f"(known parsers: {', '.join(KNOWN_TOOL_CALL_PARSERS)})"
            )

    def processed_template_path(self) -> str:
        """Return the chat template path as located inside the serving image.

        The directory and file name are joined when both are given; paths under
        ``examples/`` move to ``opt/app-root/template/``, and any other path keeps
        only its base name under that directory.
        """
        full_path = self.chat_template_path
        if _is_set(self.chat_template_file):
            if _is_set(full_path):
                if not full_path.endswith("/"):
                    full_path += "/"
                full_path += self.chat_template_file
            else:
                full_path = self.chat_template_file

        if not _is_set(full_path):
            return ""
        if full_path.startswith(_EXAMPLES_DIR):
            return TEMPLATE_DIR + full_path[len(_EXAMPLES_DIR):]
        if full_path.startswith(TEMPLATE_DIR):
            return full_path
        return TEMPLATE_DIR + _base_name(full_path)