"""MCP server descriptors — discriminated union on the `type` field."""

from typing import Annotated, Literal, TypeAlias

from pydantic import BaseModel, Field


class StdioMcpServer(BaseModel, frozen=True, extra="forbid"):
    """MCP server launched as a subprocess speaking stdio."""

    type: Literal["stdio"]
    command: str = Field(min_length=1)
    args: list[str] = Field(default_factory=list)
    env: dict[str, str] = Field(default_factory=dict)


class HttpMcpServer(BaseModel, frozen=True, extra="forbid"):
    """MCP server reachable over HTTP."""

    type: Literal["http"]
    url: str = Field(min_length=1)
    headers: dict[str, str] = Field(default_factory=dict)


# extra="forbid" keeps url/headers off stdio descriptors and command/args/env
# off http descriptors.
McpServer: TypeAlias = Annotated[
    StdioMcpServer | HttpMcpServer,
    Field(discriminator="type"),
]

ServerName: TypeAlias = str
