"""ProviderToolRegistry — read-only lookup of MCP servers and allowed tools."""

from collections.abc import Mapping
from types import MappingProxyType

from agent_mcp.provider.domain.provider import Provider, parse_provider
from agent_mcp.registry.domain.mcp_server import McpServer, ServerName
from agent_mcp.registry.domain.tools import SERVER_TOOLS, ToolId


class ProviderToolRegistry:
    """Holds the server table for every known provider.

    The table is copied on construction and never written afterwards, so one
    instance can be shared freely across threads. Lookups for unknown
    providers return empty results instead of raising.
    """

    def __init__(
        self, servers: Mapping[Provider, Mapping[ServerName, McpServer]]
    ) -> None:
        self._servers: dict[Provider, dict[ServerName, McpServer]] = {
            provider: dict(table) for provider, table in servers.items()
        }

    @property
    def providers(self) -> list[Provider]:
        """Providers that have at least one server, in table order."""
        return [provider for provider, table in self._servers.items() if table]

    def get_servers(
        self, provider: Provider | str, model_id: str | None = None
    ) -> Mapping[ServerName, McpServer]:
        """Return the servers an agent session for *provider* should use.

        The result is a read-only view over deep copies; changing a returned
        descriptor's headers or env does not reach the registry.

        model_id is accepted for per-model restrictions and currently ignored.
        """
        known = parse_provider(provider)
        table = self._servers.get(known, {}) if known is not None else {}
        return MappingProxyType(
            {name: server.model_copy(deep=True) for name, server in table.items()}
        )

    def get_allowed_tools(
        self, provider: Provider | str, model_id: str | None = None
    ) -> list[ToolId]:
        """Return the tool identifiers permitted for *provider*.

        Only servers this registry holds for the provider contribute tools, in
        table order. model_id is accepted and currently ignored.
        """
        known = parse_provider(provider)
        table = self._servers.get(known, {}) if known is not None else {}
        return [tool for name in table for tool in SERVER_TOOLS.get(name, ())]
