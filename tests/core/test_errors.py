"""Tests verifying the AgentMcpError type hierarchy."""

from agent_mcp.cli.output.errors import UnsupportedOutputFormatError
from agent_mcp.core.errors import AgentMcpError


class TestAgentMcpErrorHierarchy:
    """All agent-mcp-specific exceptions inherit from AgentMcpError."""

    def test_unsupported_output_format_error_is_agent_mcp_error(self) -> None:
        error = UnsupportedOutputFormatError(output_format="xml")
        assert isinstance(error, AgentMcpError)

    def test_agent_mcp_error_is_exception(self) -> None:
        error = AgentMcpError("test")
        assert isinstance(error, Exception)


class TestUnsupportedOutputFormatError:
    def test_message_starts_with_failed(self) -> None:
        error = UnsupportedOutputFormatError(output_format="xml")
        assert str(error).startswith("Failed to ")

    def test_message_includes_format(self) -> None:
        error = UnsupportedOutputFormatError(output_format="toml")
        assert "toml" in str(error)
        assert error.output_format == "toml"
