"""Serialise server mappings for printing — JSON or YAML."""

import json
from collections.abc import Mapping
from typing import Any, TypeAlias

import yaml

from agent_mcp.cli.output.errors import UnsupportedOutputFormatError
from agent_mcp.registry.domain.mcp_server import McpServer, ServerName

JsonRecord: TypeAlias = dict[str, Any]


def servers_to_records(
    servers: Mapping[ServerName, McpServer],
) -> dict[str, JsonRecord]:
    """Dump each descriptor, dropping empty optional fields but keeping `type`."""
    return {
        name: server.model_dump(exclude_defaults=True)
        for name, server in servers.items()
    }


def render_servers(servers: Mapping[ServerName, McpServer], output_format: str) -> str:
    """Render *servers* as a JSON or YAML document.

    Raises:
        UnsupportedOutputFormatError: if output_format is not 'json' or 'yaml'.
    """
    records = servers_to_records(servers=servers)
    if output_format == "json":
        return json.dumps(records, indent=2)
    if output_format == "yaml":
        return yaml.safe_dump(records, sort_keys=False).rstrip("\n")
    raise UnsupportedOutputFormatError(output_format=output_format)
