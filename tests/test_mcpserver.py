import pytest
import yaml

from modelmeta.mcpserver import (
    MCPArtifact,
    MCPParameter,
    MCPServerEntry,
    MCPServerMetadata,
    MCPServersCatalog,
    MCPServersIndex,
    MCPTool,
)
from modelmeta.types import MetadataValue


def _full_server():
    return MCPServerMetadata(
        name="kubernetes-mcp",
        provider="Red Hat",
        license="apache-2.0",
        license_link="https://www.apache.org/licenses/LICENSE-2.0",
        description="Manage clusters",
        readme="# Readme",
        version="1.0.0",
        transports=["stdio", "http"],
        logo="data:image/svg+xml;base64,AAAA",
        documentation_url="https://docs.example.com",
        repository_url="https://repo.example.com",
        source_code="https://repo.example.com/src",
        published_date="2025-01-01",
        deployment_mode="remote",
        tags=["k8s"],
        tools=[
            MCPTool(
                name="list_pods",
                description="List pods",
                access_type="read_only",
                parameters=[MCPParameter("namespace", "string", "Namespace", True)],
            )
        ],
        artifacts=[MCPArtifact(uri="oci://registry.example.com/mcp:1", create_time_since_epoch="1")],
        runtime_metadata={"port": 8080},
        security_indicators={"verified": True},
        custom_properties={"featured": MetadataValue("MetadataStringValue", "")},
        create_time_since_epoch="1700000000000",
        last_update_time_since_epoch="1700000001000",
    )


def test_index_from_yaml():
    text = """
source: Red Hat
mcp_servers:
  - name: kubernetes-mcp
    input_path: data/mcp/kubernetes.yaml
"""
    index = MCPServersIndex.from_dict(yaml.safe_load(text))
    assert index.source == "Red Hat"
    assert index.mcp_servers == [
        MCPServerEntry(name="kubernetes-mcp", input_path="data/mcp/kubernetes.yaml")
    ]


def test_index_rejects_non_list_servers():
    with pytest.raises(TypeError):
        MCPServersIndex.from_dict({"mcp_servers": {"name": "x"}})


def test_parameter_round_trip():
    param = MCPParameter("query", "string", "Search query", True)
    assert MCPParameter.from_dict(param.to_dict()) == param


def test_parameter_required_defaults_false():
    assert MCPParameter.from_dict({"name": "x"}).required is False


def test_parameter_rejects_non_boolean_required():
    with pytest.raises(TypeError):
        MCPParameter.from_dict({"name": "x", "required": "yes"})


def test_tool_reads_access_type():
    tool = MCPTool.from_dict({"name": "t", "accessType": "read_write", "parameters": None})
    assert tool.access_type == "read_write"
    assert tool.parameters == []
    assert tool.to_dict()["accessType"] == "read_write"


def test_artifact_omits_empty_timestamps():
    assert MCPArtifact(uri="oci://x").to_dict() == {"uri": "oci://x"}


def test_artifact_round_trip():
    artifact = MCPArtifact("oci://x", "1700000000000", "1700000001000")
    assert MCPArtifact.from_dict(artifact.to_dict()) == artifact


def test_minimal_server_has_only_required_keys():
    data = MCPServerMetadata(name="m").to_dict()
    assert set(data) == {"name", "provider", "license", "license_link", "description", "version"}


def test_full_server_round_trip_through_yaml():
    server = _full_server()
    loaded = MCPServerMetadata.from_dict(yaml.safe_load(yaml.safe_dump(server.to_dict())))
    assert loaded == server


def test_server_custom_property_is_quoted():
    server = MCPServerMetadata(
        name="m", custom_properties={"version": MetadataValue("MetadataStringValue", "2.0")}
    )
    text = yaml.safe_dump(server.to_dict())
    assert 'string_value: "2.0"' in text


def test_catalog_round_trip():
    catalog = MCPServersCatalog(source="Partner", mcp_servers=[_full_server(), MCPServerMetadata(name="b")])
    loaded = MCPServersCatalog.from_dict(yaml.safe_load(yaml.safe_dump(catalog.to_dict())))
    assert loaded == catalog


def test_catalog_rejects_non_mapping():
    with pytest.raises(TypeError):
        MCPServersCatalog.from_dict("catalog")