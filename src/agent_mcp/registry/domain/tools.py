"""Tool allow-lists — fully-qualified MCP tool identifiers per provider."""

from typing import TypeAlias

from agent_mcp.provider.domain.provider import Provider, parse_provider
from agent_mcp.registry.domain.mcp_server import ServerName

ToolId: TypeAlias = str

_TOOL_ID_PREFIX = "mcp"


def tool_id(server: ServerName, tool: str) -> ToolId:
    """Return the namespaced identifier the agent runtime permission-checks."""
    return f"{_TOOL_ID_PREFIX}__{server}__{tool}"


def _tool_ids(server: ServerName, tools: list[str]) -> tuple[ToolId, ...]:
    return tuple(tool_id(server=server, tool=tool) for tool in tools)


GREP_TOOLS: tuple[ToolId, ...] = _tool_ids("grep", ["searchGitHub"])

SUPABASE_TOOLS: tuple[ToolId, ...] = _tool_ids(
    "supabase",
    [
        "search_docs",
        "list_organizations",
        "get_organization",
        "list_projects",
        "get_project",
        "list_tables",
        "list_extensions",
        "list_migrations",
        "apply_migration",
        "execute_sql",
        "get_logs",
        "get_advisors",
        "get_project_url",
        "get_publishable_keys",
        "generate_typescript_types",
        "list_edge_functions",
        "get_edge_function",
        "deploy_edge_function",
    ],
)

SEQUENTIAL_THINKING_TOOLS: tuple[ToolId, ...] = _tool_ids(
    "sequential-thinking", ["sequentialthinking_tools"]
)

SERVER_TOOLS: dict[ServerName, tuple[ToolId, ...]] = {
    "grep": GREP_TOOLS,
    "web-search-prime": _tool_ids("web-search-prime", ["search"]),
    "zai-mcp-server": _tool_ids(
        "zai-mcp-server", ["image_analysis", "video_analysis"]
    ),
    "web-reader": _tool_ids("web-reader", ["webReader"]),
    "supabase": SUPABASE_TOOLS,
    "sequential-thinking": SEQUENTIAL_THINKING_TOOLS,
}

# Z.AI web search, media analysis and web reader, in the order they are offered.
ZAI_TOOLS: tuple[ToolId, ...] = (
    *SERVER_TOOLS["web-search-prime"],
    *SERVER_TOOLS["zai-mcp-server"],
    *SERVER_TOOLS["web-reader"],
)

_PROVIDER_EXTRAS: dict[Provider, tuple[ToolId, ...]] = {
    Provider.ANTHROPIC: (),
    Provider.Z_AI: ZAI_TOOLS,
    Provider.MOONSHOT: (),
}


def allowed_tools(
    provider: Provider | str, model_id: str | None = None
) -> list[ToolId]:
    """Return the tool identifiers the agent may invoke for *provider*.

    Order is code search, provider extras, database, then reasoning tools.
    Unknown providers get an empty list.

    model_id is accepted so callers can pass it today; every model of a
    provider currently shares one list.
    """
    known = parse_provider(provider)
    if known is None or known not in _PROVIDER_EXTRAS:
        return []

    return [
        *GREP_TOOLS,
        *_PROVIDER_EXTRAS[known],
        *SUPABASE_TOOLS,
        *SEQUENTIAL_THINKING_TOOLS,
    ]
