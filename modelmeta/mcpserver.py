"""Records for MCP server indexes and catalogs."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from modelmeta.types import MetadataValue


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


def _bool(value: Any, kind: str) -> bool:
    if value is None:
        return False
    if not isinstance(value, bool):
        raise TypeError(f"{kind}: expected a boolean, got {type(value).__name__}")
    return value


@dataclass
class MCPServerEntry:
    """An entry of an MCP servers index file."""

    name: str = ""
    input_path: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> MCPServerEntry:
        data = _mapping(data, "mcp server entry")
        return cls(name=_str(data.get("name")), input_path=_str(data.get("input_path")))


@dataclass
class MCPServersIndex:
    """An MCP servers index file."""

    source: str = ""
    mcp_servers: list[MCPServerEntry] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> MCPServersIndex:
        data = _mapping(data, "mcp servers index")
        return cls(
            source=_str(data.get("source")),
            mcp_servers=[
                MCPServerEntry.from_dict(e) for e in _list(data.get("mcp_servers"), "mcp_servers")
            ],
        )


@dataclass
class MCPParameter:
    """A parameter of an MCP tool."""

    name: str = ""
    type: str = ""
    description: str = ""
    required: bool = False

    @classmethod
    def from_dict(cls, data: Any) -> MCPParameter:
        data = _mapping(data, "mcp parameter")
        return cls(
            name=_str(data.get("name")),
            type=_str(data.get("type")),
            description=_str(data.get("description")),
            required=_bool(data.get("required"), "required"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "type": self.type,
            "description": self.description,
            "required": self.required,
        }


@dataclass
class MCPTool:
    """A tool exposed by an MCP server."""

    name: str = ""
    description: str = ""
    access_type: str = ""
    parameters: list[MCPParameter] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> MCPTool:
        data = _mapping(data, "mcp tool")
        return cls(
            name=_str(data.get("name")),
            description=_str(data.get("description")),
            access_type=_str(data.get("accessType")),
            parameters=[
                MCPParameter.from_dict(p) for p in _list(data.get("parameters"), "parameters")
            ],
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "accessType": self.access_type,
            "parameters": [p.to_dict() for p in self.parameters],
        }


@dataclass
class MCPArtifact:
    """A container artifact of an MCP server."""

    uri: str = ""
    create_time_since_epoch: str = ""
    last_update_time_since_epoch: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> MCPArtifact:
        data = _mapping(data, "mcp artifact")
        return cls(
            uri=_str(data.get("uri")),
            create_time_since_epoch=_str(data.get("createTimeSinceEpoch")),
            last_update_time_since_epoch=_str(data.get("lastUpdateTimeSinceEpoch")),
        )

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"uri": self.uri}
        if self.create_time_since_epoch:
            result["createTimeSinceEpoch"] = self.create_time_since_epoch
        if self.last_update_time_since_epoch:
            result["lastUpdateTimeSinceEpoch"] = self.last_update_time_since_epoch
        return result


# Optional keys and their attribute names; each is left out of output when empty.
_OPTIONAL_STRINGS = (
    ("readme", "readme"),
    ("logo", "logo"),
    ("documentationUrl", "documentation_url"),
    ("repositoryUrl", "repository_url"),
    ("sourceCode", "source_code"),
    ("publishedDate", "published_date"),
    ("deploymentMode", "deployment_mode"),
)


@dataclass
class MCPServerMetadata:
    """Full metadata of one MCP server."""

    name: str = ""
    provider: str = ""
    license: str = ""
    license_link: str = ""
    description: str = ""
    readme: str = ""
    version: str = ""
    transports: list[str] = field(default_factory=list)
    logo: str = ""
    documentation_url: str = ""
    repository_url: str = ""
    source_code: str = ""
    published_date: str = ""
    deployment_mode: str = ""
    tags: list[str] = field(default_factory=list)
    tools: list[MCPTool] = field(default_factory=list)
    artifacts: list[MCPArtifact] = field(default_factory=list)
    runtime_metadata: dict[str, Any] = field(default_factory=dict)
    security_indicators: dict[str, Any] = field(default_factory=dict)
    custom_properties: dict[str, MetadataValue] = field(default_factory=dict)
    create_time_since_epoch: str = ""
    last_update_time_since_epoch: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> MCPServerMetadata:
        data = _mapping(data, "mcp server metadata")
        props = _mapping(data.get("customProperties"), "customProperties")
        return cls(
            name=_str(data.get("name")),
            provider=_str(data.get("provider")),
            license=_str(data.get("license")),
            license_link=_str(data.get("license_link")),
            description=_str(data.get("description")),
            readme=_str(data.get("readme")),
            version=_str(data.get("version")),
            transports=[str(t) for t in _list(data.get("transports"), "transports")],
            logo=_str(data.get("logo")),
            documentation_url=_str(data.get("documentationUrl")),
            repository_url=_str(data.get("repositoryUrl")),
            source_code=_str(data.get("sourceCode")),
            published_date=_str(data.get("publishedDate")),
            deployment_mode=_str(data.get("deploymentMode")),
            tags=[str(t) for t in _list(data.get("tags"), "tags")],
            tools=[MCPTool.from_dict(t) for t in _list(data.get("tools"), "tools")],
            artifacts=[MCPArtifact.from_dict(a) for a in _list(data.get("artifacts"), "artifacts")],
            runtime_metadata=dict(_mapping(data.get("runtimeMetadata"), "runtimeMetadata")),
            security_indicators=dict(
                _mapping(data.get("securityIndicators"), "securityIndicators")
            ),
            custom_properties={str(k): MetadataValue.from_dict(v) for k, v in props.items()},
            create_time_since_epoch=_str(data.get("createTimeSinceEpoch")),
            last_update_time_since_epoch=_str(data.get("lastUpdateTimeSinceEpoch")),
        )

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "name": self.name,
            "provider": self.provider,
            "license": self.license,
            "license_link": self.license_link,
            "description": self.description,
            "version": self.version,
        }
        for key, attr in _OPTIONAL_STRINGS:
            value = getattr(self, attr)
            if value:
                result[key] = value
        if self.transports:
            result["transports"] = list(self.transports)
        if self.tags:
            result["tags"] = list(self.tags)
        if self.tools:
            result["tools"] = [t.to_dict() for t in self.tools]
        if self.artifacts:
            result["artifacts"] = [a.to_dict() for a in self.artifacts]
        if self.runtime_metadata:
            result["runtimeMetadata"] = dict(self.runtime_metadata)
        if self.security_indicators:
            result["securityIndicators"] = dict(self.security_indicators)
        if self.custom_properties:
            result["customProperties"] = {
                k: v.to_dict() for k, v in self.custom_properties.items()
            }
        if self.create_time_since_epoch:
            result["createTimeSinceEpoch"] = self.create_time_since_epoch
        if self.last_update_time_since_epoch:
            result["lastUpdateTimeSinceEpoch"] = self.last_update_time_since_epoch
        return result


@dataclass
class MCPServersCatalog:
    """The aggregated catalog of MCP servers."""

    source: str = ""
    mcp_servers: list[MCPServerMetadata] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> MCPServersCatalog:
        data = _mapping(data, "mcp servers catalog")
        return cls(
            source=_str(data.get("source")),
            mcp_servers=[
                MCPServerMetadata.from_dict(s)
                for s in _list(data.get("mcp_servers"), "mcp_servers")
            ],
        )

    def to_dict(self) -> dict[str, Any]:
        return {"source": self.source, "mcp_servers": [s.to_dict() for s in self.mcp_servers]}