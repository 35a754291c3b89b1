"""Metadata types, helpers and completeness reports for model and MCP server catalogs."""

__version__ = "0.1.0"