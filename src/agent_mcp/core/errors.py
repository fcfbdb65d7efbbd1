"""Base exception class for all agent-mcp-specific errors."""


class AgentMcpError(Exception):
    """Base class for all agent-mcp errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
