"""Claude Agent SDK adapter — registry output in the SDK's option shapes."""

from collections.abc import Mapping
from typing import TypeAlias, assert_never

from claude_agent_sdk.types import (
    ClaudeAgentOptions,
    McpHttpServerConfig,
    McpStdioServerConfig,
)

from agent_mcp.provider.domain.provider import Provider
from agent_mcp.registry.domain.mcp_server import (
    HttpMcpServer,
    McpServer,
    ServerName,
    StdioMcpServer,
)
from agent_mcp.registry.domain.registry import ProviderToolRegistry

McpServerConfigMap: TypeAlias = dict[str, McpStdioServerConfig | McpHttpServerConfig]


def to_sdk_mcp_servers(servers: Mapping[ServerName, McpServer]) -> McpServerConfigMap:
    """Convert registry descriptors to the SDK's TypedDict format."""
    sdk_servers: McpServerConfigMap = {}

    for name, server in servers.items():
        match server:
            case StdioMcpServer():
                sdk_servers[name] = _build_stdio_server(config=server)
            case HttpMcpServer():
                sdk_servers[name] = _build_http_server(config=server)
            case _:
                assert_never(server)

    return sdk_servers


def build_agent_options(
    registry: ProviderToolRegistry,
    provider: Provider | str,
    model: str | None = None,
) -> ClaudeAgentOptions:
    """Return ClaudeAgentOptions wired with the provider's servers and allow-list.

    Nothing is connected or launched here; the SDK does that when a query runs.
    """
    return ClaudeAgentOptions(
        model=model,
        mcp_servers=to_sdk_mcp_servers(
            servers=registry.get_servers(provider=provider, model_id=model)
        ),
        allowed_tools=registry.get_allowed_tools(provider=provider, model_id=model),
    )


def _build_stdio_server(config: StdioMcpServer) -> McpStdioServerConfig:
    """Build a McpStdioServerConfig TypedDict from a StdioMcpServer model."""
    server: McpStdioServerConfig = McpStdioServerConfig(
        type="stdio", command=config.command
    )
    if config.args:
        server["args"] = list(config.args)
    # An env of empty-string credentials is still passed through.
    if config.env:
        server["env"] = dict(config.env)
    return server


def _build_http_server(config: HttpMcpServer) -> McpHttpServerConfig:
    """Build a McpHttpServerConfig TypedDict from an HttpMcpServer model."""
    server: McpHttpServerConfig = McpHttpServerConfig(type="http", url=config.url)
    if config.headers:
        server["headers"] = dict(config.headers)
    return server
