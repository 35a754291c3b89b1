"""Recommended vLLM serving configurations for a model."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

_OPERATOR_TEXT = {
    "<=": "less than or equal to",
    ">=": "greater than or equal to",
    "<": "less than",
    ">": "greater than",
    "==": "equal to",
}


class VLLMConfigError(ValueError):
    """Raised when a vLLM configuration is structurally invalid."""


def _mapping(data: Any, kind: str) -> Mapping[str, Any]:
    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise TypeError(f"{kind}: expected a mapping, got {type(data).__name__}")
    return data


def _list(value: Any, kind: str) -> list[Any]:
    if value is None:
        return []
    if not isinstance(value, (list, tuple)):
        raise TypeError(f"{kind}: expected a sequence, got {type(value).__name__}")
    return list(value)


def _str(value: Any) -> str:
    return "" if value is None else str(value)


def _str_list(value: Any, kind: str) -> list[str]:
    return [str(v) for v in _list(value, kind)]


@dataclass
class VLLMModelRef:
    """The model name used for exact-match lookup."""

    name: str = ""


@dataclass
class VLLMConstraint:
    """A performance constraint such as TTFT <= 10ms."""

    name: str = ""
    value: str = ""
    operator: str = ""

    def format_constraint(self) -> str:
        """Return the constraint as readable text."""
        operator = _OPERATOR_TEXT.get(self.operator, self.operator)
        return f"{self.name} {operator} {self.value}"


@dataclass
class VLLMOptimization:
    """An optimization for specific hardware."""

    optimization: str = ""
    hardware: str = ""
    description: str = ""
    cli_args: list[str] = field(default_factory=list)
    env_vars: list[str] = field(default_factory=list)
    constraints: list[VLLMConstraint] = field(default_factory=list)
    recommendations: list[str] = field(default_factory=list)


@dataclass
class VLLMPreset:
    """A serving mode preset such as online-serving."""

    mode: str = ""
    optimizations: list[VLLMOptimization] = field(default_factory=list)


def _constraint(data: Any) -> VLLMConstraint:
    data = _mapping(data, "constraint")
    return VLLMConstraint(
        name=_str(data.get("name")),
        value=_str(data.get("value")),
        operator=_str(data.get("operator")),
    )


def _optimization(data: Any) -> VLLMOptimization:
    data = _mapping(data, "optimization")
    return VLLMOptimization(
        optimization=_str(data.get("optimization")),
        hardware=_str(data.get("hardware")),
        description=_str(data.get("description")),
        cli_args=_str_list(data.get("cli-args"), "cli-args"),
        env_vars=_str_list(data.get("env-vars"), "env-vars"),
        constraints=[_constraint(c) for c in _list(data.get("constraints"), "constraints")],
        recommendations=_str_list(data.get("recommendations"), "recommendations"),
    )


def _preset(data: Any) -> VLLMPreset:
    data = _mapping(data, "preset")
    return VLLMPreset(
        mode=_str(data.get("mode")),
        optimizations=[
            _optimization(o) for o in _list(data.get("optimizations"), "optimizations")
        ],
    )


@dataclass
class VLLMRecommendedConfig:
    """The full vLLM recommended configuration for a model."""

    model: VLLMModelRef = field(default_factory=VLLMModelRef)
    presets: list[VLLMPreset] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> VLLMRecommendedConfig:
        data = _mapping(data, "vllm config")
        model = _mapping(data.get("model"), "model")
        return cls(
            model=VLLMModelRef(name=_str(model.get("name"))),
            presets=[_preset(p) for p in _list(data.get("presets"), "presets")],
        )

    def has_presets(self) -> bool:
        """Return True if any preset is defined."""
        return bool(self.presets)

    def validate(self) -> None:
        """Raise VLLMConfigError on the first missing required field."""
        if not self.model.name:
            raise VLLMConfigError("vllm config: model.name is required")
        for i, preset in enumerate(self.presets):
            if not preset.mode:
                raise VLLMConfigError(f"vllm config: preset[{i}].mode is required")
            for j, opt in enumerate(preset.optimizations):
                where = f"vllm config: preset[{i}].optimizations[{j}]"
                if not opt.optimization:
                    raise VLLMConfigError(f"{where}.optimization is required")
                if not opt.hardware:
                    raise VLLMConfigError(f"{where}.hardware is required")
                if not opt.cli_args:
                    raise VLLMConfigError(f"{where}.cli-args is required")