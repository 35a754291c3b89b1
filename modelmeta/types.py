"""Records for model indexes, extracted modelcard metadata and catalogs."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

import yaml

MODEL_TYPE_GENERATIVE = "generative"
MODEL_TYPE_PREDICTIVE = "predictive"
MODEL_TYPE_UNKNOWN = "unknown"
MODEL_TYPES = (MODEL_TYPE_GENERATIVE, MODEL_TYPE_PREDICTIVE, MODEL_TYPE_UNKNOWN)


class ModelTypeError(ValueError):
    """Raised when a model_type is not one of the allowed values."""


def validate_model_type(model_type: str) -> None:
    """Raise ModelTypeError unless model_type is an allowed value."""
    if model_type not in MODEL_TYPES:
        allowed = ", ".join(json.dumps(t) for t in MODEL_TYPES)
        raise ModelTypeError(
            f"invalid model_type: {json.dumps(model_type)} (allowed values: {allowed})"
        )


def default_model_type() -> str:
    """Return the model type used when an index entry omits one."""
    return MODEL_TYPE_GENERATIVE


class _QuotedStr(str):
    """A string that YAML output always writes double-quoted."""


def _represent_quoted(dumper: yaml.BaseDumper, data: _QuotedStr) -> yaml.Node:
    return dumper.represent_scalar("tag:yaml.org,2002:str", str(data), style='"')


for _dumper in (yaml.Dumper, yaml.SafeDumper):
    yaml.add_representer(_QuotedStr, _represent_quoted, Dumper=_dumper)


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


def _opt_str(value: Any) -> str | None:
    return None if value is None else str(value)


def _str_list(value: Any, kind: str) -> list[str]:
    return [str(item) for item in _list(value, kind)]


def _opt_epoch(value: Any, kind: str) -> int | None:
    """Accept an epoch given as an integer or as a string of digits."""
    if value is None:
        return None
    if isinstance(value, bool):
        raise TypeError(f"{kind}: expected an epoch timestamp, got a boolean")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            return int(text)
        except ValueError:
            raise TypeError(f"{kind}: invalid epoch timestamp {value!r}") from None
    raise TypeError(f"{kind}: expected an epoch timestamp, got {type(value).__name__}")


@dataclass
class ModelEntry:
    """One entry of a models index: an OCI modelcar or a HuggingFace model."""

    type: str = ""
    uri: str = ""
    labels: list[str] = field(default_factory=list)
    model_type: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> ModelEntry:
        data = _mapping(data, "model entry")
        return cls(
            type=_str(data.get("type")),
            uri=_str(data.get("uri")),
            labels=_str_list(data.get("labels"), "labels"),
            model_type=_str(data.get("model_type")),
        )


@dataclass
class ModelsConfig:
    """The list of models to process."""

    models: list[ModelEntry] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> ModelsConfig:
        data = _mapping(data, "models config")
        return cls(models=[ModelEntry.from_dict(m) for m in _list(data.get("models"), "models")])


@dataclass
class OCIArtifact:
    """An OCI artifact with integer epoch timestamps."""

    uri: str = ""
    create_time_since_epoch: int | None = None
    last_update_time_since_epoch: int | None = None
    custom_properties: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Any) -> OCIArtifact:
        data = _mapping(data, "artifact")
        return cls(
            uri=_str(data.get("uri")),
            create_time_since_epoch=_opt_epoch(
                data.get("createTimeSinceEpoch"), "createTimeSinceEpoch"
            ),
            last_update_time_since_epoch=_opt_epoch(
                data.get("lastUpdateTimeSinceEpoch"), "lastUpdateTimeSinceEpoch"
            ),
            custom_properties=dict(_mapping(data.get("customProperties"), "customProperties")),
        )

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "uri": self.uri,
            "createTimeSinceEpoch": self.create_time_since_epoch,
            "lastUpdateTimeSinceEpoch": self.last_update_time_since_epoch,
        }
        if self.custom_properties:
            result["customProperties"] = dict(self.custom_properties)
        return result


def _artifact(item: Any) -> OCIArtifact:
    # Older metadata files list artifacts as plain URI strings.
    if isinstance(item, str):
        return OCIArtifact(uri=item)
    return OCIArtifact.from_dict(item)


@dataclass
class ExtractedMetadata:
    """Values extracted from a modelcard."""

    name: str | None = None
    provider: str | None = None
    description: str | None = None
    readme: str | None = None
    language: list[str] = field(default_factory=list)
    license: str | None = None
    license_link: str | None = None
    tags: list[str] = field(default_factory=list)
    tasks: list[str] = field(default_factory=list)
    create_time_since_epoch: int | None = None
    last_update_time_since_epoch: int | None = None
    validated_on: list[str] = field(default_factory=list)
    artifacts: list[OCIArtifact] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> ExtractedMetadata:
        """Read metadata, accepting string or integer timestamps and string artifacts."""
        data = _mapping(data, "extracted metadata")
        return cls(
            name=_opt_str(data.get("name")),
            provider=_opt_str(data.get("provider")),
            description=_opt_str(data.get("description")),
            readme=_opt_str(data.get("readme")),
            language=_str_list(data.get("language"), "language"),
            license=_opt_str(data.get("license")),
            license_link=_opt_str(data.get("licenseLink")),
            tags=_str_list(data.get("tags"), "tags"),
            tasks=_str_list(data.get("tasks"), "tasks"),
            create_time_since_epoch=_opt_epoch(
                data.get("createTimeSinceEpoch"), "createTimeSinceEpoch"
            ),
            last_update_time_since_epoch=_opt_epoch(
                data.get("lastUpdateTimeSinceEpoch"), "lastUpdateTimeSinceEpoch"
            ),
            validated_on=_str_list(data.get("validatedOn"), "validatedOn"),
            artifacts=[_artifact(a) for a in _list(data.get("artifacts"), "artifacts")],
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "provider": self.provider,
            "description": self.description,
            "readme": self.readme,
            "language": list(self.language),
            "license": self.license,
            "licenseLink": self.license_link,
            "tags": list(self.tags),
            "tasks": list(self.tasks),
            "createTimeSinceEpoch": self.create_time_since_epoch,
            "lastUpdateTimeSinceEpoch": self.last_update_time_since_epoch,
            "validatedOn": list(self.validated_on),
            "artifacts": [a.to_dict() for a in self.artifacts],
        }


@dataclass
class MetadataSource:
    """A metadata value together with where it came from."""

    value: Any = None
    source: str = ""


@dataclass
class MetadataValue:
    """A typed custom property value."""

    metadata_type: str = ""
    string_value: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> MetadataValue:
        data = _mapping(data, "metadata value")
        return cls(
            metadata_type=_str(data.get("metadataType")),
            string_value=_str(data.get("string_value")),
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the mapping form; a non-empty string_value is written double-quoted."""
        value: str = _QuotedStr(self.string_value) if self.string_value else self.string_value
        return {"metadataType": self.metadata_type, "string_value": value}


@dataclass
class CatalogOCIArtifact:
    """An OCI artifact in catalog output, with string timestamps."""

    uri: str = ""
    create_time_since_epoch: str | None = None
    last_update_time_since_epoch: str | None = None
    custom_properties: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Any) -> CatalogOCIArtifact:
        data = _mapping(data, "catalog artifact")
        return cls(
            uri=_str(data.get("uri")),
            create_time_since_epoch=_opt_str(data.get("createTimeSinceEpoch")),
            last_update_time_since_epoch=_opt_str(data.get("lastUpdateTimeSinceEpoch")),
            custom_properties=dict(_mapping(data.get("customProperties"), "customProperties")),
        )

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "uri": self.uri,
            "createTimeSinceEpoch": self.create_time_since_epoch,
            "lastUpdateTimeSinceEpoch": self.last_update_time_since_epoch,
        }
        if self.custom_properties:
            result["customProperties"] = dict(self.custom_properties)
        return result


@dataclass
class CatalogMetadata:
    """Metadata of one model as written to a catalog."""

    name: str | None = None
    provider: str | None = None
    description: str | None = None
    readme: str | None = None
    language: list[str] = field(default_factory=list)
    license: str | None = None
    license_link: str | None = None
    tasks: list[str] = field(default_factory=list)
    create_time_since_epoch: str | None = None
    last_update_time_since_epoch: str | None = None
    custom_properties: dict[str, MetadataValue] = field(default_factory=dict)
    artifacts: list[CatalogOCIArtifact] = field(default_factory=list)
    logo: str | None = None

    @classmethod
    def from_dict(cls, data: Any) -> CatalogMetadata:
        data = _mapping(data, "catalog metadata")
        props = _mapping(data.get("customProperties"), "customProperties")
        return cls(
            name=_opt_str(data.get("name")),
            provider=_opt_str(data.get("provider")),
            description=_opt_str(data.get("description")),
            readme=_opt_str(data.get("readme")),
            language=_str_list(data.get("language"), "language"),
            license=_opt_str(data.get("license")),
            license_link=_opt_str(data.get("licenseLink")),
            tasks=_str_list(data.get("tasks"), "tasks"),
            create_time_since_epoch=_opt_str(data.get("createTimeSinceEpoch")),
            last_update_time_since_epoch=_opt_str(data.get("lastUpdateTimeSinceEpoch")),
            custom_properties={str(k): MetadataValue.from_dict(v) for k, v in props.items()},
            artifacts=[
                CatalogOCIArtifact.from_dict(a) for a in _list(data.get("artifacts"), "artifacts")
            ],
            logo=_opt_str(data.get("logo")),
        )

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "name": self.name,
            "provider": self.provider,
            "description": self.description,
            "readme": self.readme,
            "language": list(self.language),
            "license": self.license,
            "licenseLink": self.license_link,
            "tasks": list(self.tasks),
            "createTimeSinceEpoch": self.create_time_since_epoch,
            "lastUpdateTimeSinceEpoch": self.last_update_time_since_epoch,
        }
        if self.custom_properties:
            result["customProperties"] = {
                k: v.to_dict() for k, v in self.custom_properties.items()
            }
        result["artifacts"] = [a.to_dict() for a in self.artifacts]
        if self.logo is not None:
            result["logo"] = self.logo
        return result


@dataclass
class ModelsCatalog:
    """The aggregated catalog of all models."""

    source: str = ""
    models: list[CatalogMetadata] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> ModelsCatalog:
        data = _mapping(data, "models catalog")
        return cls(
            source=_str(data.get("source")),
            models=[CatalogMetadata.from_dict(m) for m in _list(data.get("models"), "models")],
        )

    def to_dict(self) -> dict[str, Any]:
        return {"source": self.source, "models": [m.to_dict() for m in self.models]}