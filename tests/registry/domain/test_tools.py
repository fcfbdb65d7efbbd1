"""Tests for tool identifiers and per-provider allow-lists."""

from agent_mcp.provider.domain.provider import Provider
from agent_mcp.registry.domain.tools import (
    GREP_TOOLS,
    SEQUENTIAL_THINKING_TOOLS,
    SERVER_TOOLS,
    SUPABASE_TOOLS,
    ZAI_TOOLS,
    allowed_tools,
    tool_id,
)

_SUPABASE_EXPECTED = [
    "mcp__supabase__search_docs",
    "mcp__supabase__list_organizations",
    "mcp__supabase__get_organization",
    "mcp__supabase__list_projects",
    "mcp__supabase__get_project",
    "mcp__supabase__list_tables",
    "mcp__supabase__list_extensions",
    "mcp__supabase__list_migrations",
    "mcp__supabase__apply_migration",
    "mcp__supabase__execute_sql",
    "mcp__supabase__get_logs",
    "mcp__supabase__get_advisors",
    "mcp__supabase__get_project_url",
    "mcp__supabase__get_publishable_keys",
    "mcp__supabase__generate_typescript_types",
    "mcp__supabase__list_edge_functions",
    "mcp__supabase__get_edge_function",
    "mcp__supabase__deploy_edge_function",
]

_BASE_EXPECTED = [
    "mcp__grep__searchGitHub",
    *_SUPABASE_EXPECTED,
    "mcp__sequential-thinking__sequentialthinking_tools",
]

_ZAI_EXPECTED = [
    "mcp__grep__searchGitHub",
    "mcp__web-search-prime__search",
    "mcp__zai-mcp-server__image_analysis",
    "mcp__zai-mcp-server__video_analysis",
    "mcp__web-reader__webReader",
    *_SUPABASE_EXPECTED,
    "mcp__sequential-thinking__sequentialthinking_tools",
]


class TestToolId:
    def test_formats_namespaced_identifier(self) -> None:
        assert tool_id(server="grep", tool="searchGitHub") == "mcp__grep__searchGitHub"

    def test_keeps_hyphens_in_server_name(self) -> None:
        assert (
            tool_id(server="web-reader", tool="webReader")
            == "mcp__web-reader__webReader"
        )


class TestToolSets:
    def test_grep_has_one_tool(self) -> None:
        assert len(GREP_TOOLS) == 1

    def test_supabase_has_eighteen_tools(self) -> None:
        assert list(SUPABASE_TOOLS) == _SUPABASE_EXPECTED

    def test_sequential_thinking_has_one_tool(self) -> None:
        assert len(SEQUENTIAL_THINKING_TOOLS) == 1

    def test_zai_extras_are_four_tools(self) -> None:
        assert len(ZAI_TOOLS) == 4

    def test_server_tools_cover_every_table_server(self) -> None:
        assert list(SERVER_TOOLS) == [
            "grep",
            "web-search-prime",
            "zai-mcp-server",
            "web-reader",
            "supabase",
            "sequential-thinking",
        ]

    def test_server_tools_zai_order_matches_extras(self) -> None:
        assert (
            SERVER_TOOLS["web-search-prime"]
            + SERVER_TOOLS["zai-mcp-server"]
            + SERVER_TOOLS["web-reader"]
        ) == ZAI_TOOLS


class TestAllowedTools:
    """allowed_tools composes the base set with provider-specific extras."""

    def test_anthropic_exact_sequence(self) -> None:
        assert allowed_tools(Provider.ANTHROPIC) == _BASE_EXPECTED

    def test_anthropic_has_twenty_tools(self) -> None:
        assert len(allowed_tools("anthropic")) == 20

    def test_moonshot_identical_to_anthropic(self) -> None:
        assert allowed_tools("moonshot") == allowed_tools("anthropic")

    def test_zai_exact_sequence(self) -> None:
        assert allowed_tools("z-ai") == _ZAI_EXPECTED

    def test_zai_has_twenty_four_tools(self) -> None:
        assert len(allowed_tools(Provider.Z_AI)) == 24

    def test_unknown_provider_returns_empty_list(self) -> None:
        assert allowed_tools("openai") == []

    def test_model_id_does_not_change_result(self) -> None:
        assert allowed_tools("z-ai", model_id="glm-4.6") == allowed_tools("z-ai")

    def test_repeated_calls_are_equal(self) -> None:
        assert allowed_tools("anthropic") == allowed_tools("anthropic")

    def test_returns_fresh_list_each_call(self) -> None:
        first = allowed_tools("anthropic")
        first.append("mcp__evil__tool")

        assert "mcp__evil__tool" not in allowed_tools("anthropic")
