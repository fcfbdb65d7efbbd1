"""CLI entrypoint for agent-mcp — typer app printing MCP servers and tools."""

import sys
from typing import assert_never

import structlog
import typer
from rich.console import Console
from rich.table import Table

from agent_mcp.cli.output.render import render_servers
from agent_mcp.core.errors import AgentMcpError
from agent_mcp.provider.domain.provider import parse_provider
from agent_mcp.registry.domain.mcp_server import HttpMcpServer, StdioMcpServer
from agent_mcp.registry.domain.registry import ProviderToolRegistry
from agent_mcp.registry.infrastructure.env_secrets import secrets_from_env
from agent_mcp.registry.infrastructure.factory import build_registry
from agent_mcp.registry.infrastructure.observer import StructlogRegistryObserver

app = typer.Typer(add_completion=False)

_PROVIDER_ARG = typer.Argument(..., help="Provider: anthropic, z-ai or moonshot")
_MODEL_OPT = typer.Option(None, "--model", "-m", help="Model identifier")
_LOG_FORMAT_OPT = typer.Option(
    "console", "--log-format", help="Log format: 'console' or 'json'"
)


def _configure_structlog(log_format: str) -> None:
    """Configure structlog based on the requested format."""
    if log_format == "console":
        renderer: structlog.types.Processor = structlog.dev.ConsoleRenderer()
    elif log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        typer.echo(f"Invalid log format: {log_format!r}. Must be 'console' or 'json'.")
        raise typer.Exit(code=1)

    # Logs go to stderr so stdout can be piped into other tools.
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(0),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


def _load_registry(provider: str, log_format: str) -> ProviderToolRegistry:
    """Configure logging, read secrets and build the registry for one command."""
    _configure_structlog(log_format=log_format)
    observer = StructlogRegistryObserver()
    registry = build_registry(
        secrets=secrets_from_env(observer=observer), observer=observer
    )
    if parse_provider(provider) is None:
        observer.provider_unknown(provider=provider)
    return registry


@app.command()
def servers(
    provider: str = _PROVIDER_ARG,
    model: str | None = _MODEL_OPT,
    output_format: str = typer.Option(
        "json", "--format", "-f", help="Output format: 'json' or 'yaml'"
    ),
    log_format: str = _LOG_FORMAT_OPT,
) -> None:
    """Print the MCP servers configured for a provider."""
    registry = _load_registry(provider=provider, log_format=log_format)
    try:
        rendered = render_servers(
            servers=registry.get_servers(provider=provider, model_id=model),
            output_format=output_format,
        )
    except AgentMcpError as exc:
        typer.echo(str(exc))
        raise typer.Exit(code=1) from exc
    typer.echo(rendered)


@app.command()
def tools(
    provider: str = _PROVIDER_ARG,
    model: str | None = _MODEL_OPT,
    log_format: str = _LOG_FORMAT_OPT,
) -> None:
    """Print the tool identifiers allowed for a provider, one per line."""
    registry = _load_registry(provider=provider, log_format=log_format)
    for tool in registry.get_allowed_tools(provider=provider, model_id=model):
        typer.echo(tool)


@app.command()
def show(
    provider: str = _PROVIDER_ARG,
    model: str | None = _MODEL_OPT,
    log_format: str = _LOG_FORMAT_OPT,
) -> None:
    """Render a table of a provider's servers and its allowed tool count."""
    registry = _load_registry(provider=provider, log_format=log_format)

    table = Table(title=f"MCP servers for {provider}")
    table.add_column("Server", style="cyan", no_wrap=True)
    table.add_column("Type")
    table.add_column("Target", overflow="fold")

    for name, server in registry.get_servers(provider=provider, model_id=model).items():
        match server:
            case HttpMcpServer():
                table.add_row(name, server.type, server.url)
            case StdioMcpServer():
                table.add_row(
                    name, server.type, " ".join([server.command, *server.args])
                )
            case _:
                assert_never(server)

    console = Console()
    console.print(table)
    tool_count = len(registry.get_allowed_tools(provider=provider, model_id=model))
    console.print(f"{tool_count} allowed tools")


if __name__ == "__main__":
    app()
