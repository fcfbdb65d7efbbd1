"""Error types raised by CLI output rendering."""

from agent_mcp.core.errors import AgentMcpError


class UnsupportedOutputFormatError(AgentMcpError):
    """Raised when an output format other than json or yaml is requested."""

    def __init__(self, output_format: str) -> None:
        self.output_format = output_format
        super().__init__(
            f"Failed to render servers: unsupported output format '{output_format}'"
        )
