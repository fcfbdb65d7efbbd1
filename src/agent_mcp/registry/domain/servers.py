"""Compiled-in MCP server table — which servers each provider's sessions get."""

from typing import TypeAlias

from agent_mcp.provider.domain.provider import Provider
from agent_mcp.registry.domain.mcp_server import (
    HttpMcpServer,
    McpServer,
    ServerName,
    StdioMcpServer,
)
from agent_mcp.registry.domain.secrets import RegistrySecrets

ServerTable: TypeAlias = dict[Provider, dict[ServerName, McpServer]]

GREP_URL = "https://mcp.grep.app"
WEB_SEARCH_PRIME_URL = "https://api.z.ai/api/mcp/web_search_prime/mcp"
WEB_READER_URL = "https://api.z.ai/api/mcp/web_reader/mcp"


def _bearer(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


def grep_server() -> HttpMcpServer:
    """Grep.app code search across public GitHub repositories."""
    return HttpMcpServer(type="http", url=GREP_URL)


def supabase_server(secrets: RegistrySecrets) -> StdioMcpServer:
    """Supabase database operations, migrations and Edge Functions."""
    return StdioMcpServer(
        type="stdio",
        command="npx",
        args=["-y", "@supabase/mcp-server-supabase@latest"],
        env={"SUPABASE_ACCESS_TOKEN": secrets.supabase_access_token},
    )


def sequential_thinking_server() -> StdioMcpServer:
    """Step-by-step structured reasoning."""
    return StdioMcpServer(
        type="stdio",
        command="npx",
        args=["-y", "@modelcontextprotocol/server-sequential-thinking"],
    )


def web_search_prime_server(secrets: RegistrySecrets) -> HttpMcpServer:
    return HttpMcpServer(
        type="http",
        url=WEB_SEARCH_PRIME_URL,
        headers=_bearer(secrets.zai_api_key),
    )


def zai_mcp_server(secrets: RegistrySecrets) -> StdioMcpServer:
    """Z.AI image and video analysis."""
    return StdioMcpServer(
        type="stdio",
        command="npx",
        args=["-y", "@z_ai/mcp-server"],
        env={"Z_AI_API_KEY": secrets.zai_api_key, "Z_AI_MODE": "ZAI"},
    )


def web_reader_server(secrets: RegistrySecrets) -> HttpMcpServer:
    """Z.AI webpage fetching with structured content extraction."""
    return HttpMcpServer(
        type="http",
        url=WEB_READER_URL,
        headers=_bearer(secrets.zai_api_key),
    )


def build_server_table(secrets: RegistrySecrets) -> ServerTable:
    """Build the provider -> server name -> descriptor table.

    Every provider gets code search, database and reasoning servers; Z.AI
    sessions additionally get the Z.AI web and media servers.
    """
    return {
        Provider.ANTHROPIC: {
            "grep": grep_server(),
            "supabase": supabase_server(secrets=secrets),
            "sequential-thinking": sequential_thinking_server(),
        },
        Provider.Z_AI: {
            "grep": grep_server(),
            "web-search-prime": web_search_prime_server(secrets=secrets),
            "zai-mcp-server": zai_mcp_server(secrets=secrets),
            "web-reader": web_reader_server(secrets=secrets),
            "supabase": supabase_server(secrets=secrets),
            "sequential-thinking": sequential_thinking_server(),
        },
        Provider.MOONSHOT: {
            "grep": grep_server(),
            "supabase": supabase_server(secrets=secrets),
            "sequential-thinking": sequential_thinking_server(),
        },
    }
