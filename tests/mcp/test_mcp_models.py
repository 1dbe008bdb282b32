from dotai.mcp.models import (
    McpServerKind,
    RemoteServer,
    RemoteTransport,
    StdioServer,
    server_from_dict,
    server_to_dict,
    servers_from_mapping,
)


def test_command_entry_is_stdio() -> None:
    server = server_from_dict(
        {"command": "npx", "args": ["-y", "pkg"], "env": {"TOKEN": "abc"}}
    )

    assert isinstance(server, StdioServer)
    assert server.kind == McpServerKind.STDIO
    assert server.args == ["-y", "pkg"]
    assert server.env == {"TOKEN": "abc"}
    assert server.summary() == "npx -y pkg"


def test_url_entry_is_remote() -> None:
    server = server_from_dict(
        {"type": "sse", "url": "https://example.com/mcp", "headers": {"A": "1"}}
    )

    assert isinstance(server, RemoteServer)
    assert server.kind == McpServerKind.REMOTE
    assert server.transport == RemoteTransport.SSE
    assert server.summary() == "https://example.com/mcp"


def test_unknown_transport_is_dropped() -> None:
    server = server_from_dict({"type": "websocket", "url": "wss://x"})

    assert isinstance(server, RemoteServer)
    assert server.transport is None


def test_unrecognised_entries_are_none() -> None:
    assert server_from_dict({"name": "nothing"}) is None
    assert server_from_dict("npx") is None


def test_stdio_to_dict_always_has_args() -> None:
    assert server_to_dict(StdioServer(command="uvx")) == {"command": "uvx", "args": []}


def test_remote_to_dict_writes_type_only_when_set() -> None:
    assert server_to_dict(RemoteServer(url="https://a")) == {"url": "https://a"}
    assert server_to_dict(
        RemoteServer(url="https://a", transport=RemoteTransport.HTTP)
    ) == {"type": "http", "url": "https://a"}


def test_servers_from_mapping_skips_garbage() -> None:
    mapped = servers_from_mapping(
        {"fs": {"command": "npx"}, "broken": 42, "api": {"url": "https://a"}}
    )

    assert list(mapped) == ["fs", "api"]
