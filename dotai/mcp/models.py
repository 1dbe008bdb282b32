"""MCP server entries as a tagged union.

On disk an entry is discriminated by the presence of ``command`` or ``url``;
in memory the ``kind`` field says which shape it is.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Literal, Union


class McpServerKind(str, Enum):
    STDIO = "stdio"
    REMOTE = "remote"


class RemoteTransport(str, Enum):
    HTTP = "http"
    SSE = "sse"


@dataclass(frozen=True)
class StdioServer:
    command: str
    args: list[str] = field(default_factory=list)
    env: dict[str, str] = field(default_factory=dict)
    kind: Literal[McpServerKind.STDIO] = McpServerKind.STDIO

    def summary(self) -> str:
        return " ".join([self.command, *self.args])


@dataclass(frozen=True)
class RemoteServer:
    url: str
    headers: dict[str, str] = field(default_factory=dict)
    transport: RemoteTransport | None = None
    kind: Literal[McpServerKind.REMOTE] = McpServerKind.REMOTE

    def summary(self) -> str:
        return self.url


McpServer = Union[StdioServer, RemoteServer]


def _string_map(value: Any) -> dict[str, str]:
    if not isinstance(value, dict):
        return {}
    return {str(k): str(v) for k, v in value.items()}


def server_from_dict(raw: Any) -> McpServer | None:
    if not isinstance(raw, dict):
        return None

    command = raw.get("command")
    if isinstance(command, str):
        args = raw.get("args")
        return StdioServer(
            command=command,
            args=[str(item) for item in args] if isinstance(args, list) else [],
            env=_string_map(raw.get("env")),
        )

    url = raw.get("url")
    if isinstance(url, str):
        transport = raw.get("type")
        return RemoteServer(
            url=url,
            headers=_string_map(raw.get("headers")),
            transport=RemoteTransport(transport)
            if transport in (item.value for item in RemoteTransport)
            else None,
        )
    return None


def server_to_dict(server: McpServer) -> dict[str, Any]:
    item: dict[str, Any] = {}
    if server.kind == McpServerKind.STDIO:
        item["command"] = server.command
        item["args"] = list(server.args)
        if server.env:
            item["env"] = dict(server.env)
        return item

    if server.transport is not None:
        item["type"] = server.transport.value
    item["url"] = server.url
    if server.headers:
        item["headers"] = dict(server.headers)
    return item


def servers_from_mapping(raw: dict[str, Any]) -> dict[str, McpServer]:
    mapped: dict[str, McpServer] = {}
    for name, entry in raw.items():
        server = server_from_dict(entry)
        if server is not None:
            mapped[name] = server
    return mapped
