"""Central MCP server store backed by a single JSON document."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from dotai.constants import MCP_SERVERS_KEY
from dotai.mcp.models import (
    McpServer,
    server_from_dict,
    server_to_dict,
    servers_from_mapping,
)
from dotai.mcp.schema import validate_server_entry
from dotai.paths import mcp_config_path
from dotai.utils import read_json_object, write_json


def parse_env_pairs(value: str | None) -> dict[str, str]:
    """Parse ``KEY=value,KEY2=value2`` input; ``=`` inside values is kept."""
    pairs: dict[str, str] = {}
    if not value:
        return pairs
    for chunk in value.split(","):
        key, sep, rest = chunk.partition("=")
        if not key.strip() or not sep:
            continue
        pairs[key.strip()] = rest.strip()
    return pairs


class McpRepository:
    def __init__(self, path: Path | None = None) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path if self._path is not None else mcp_config_path()

    def load_document(self) -> tuple[dict[str, Any], str | None]:
        payload, error = read_json_object(self.path)
        if error is not None:
            return {MCP_SERVERS_KEY: {}}, error
        if not isinstance(payload.get(MCP_SERVERS_KEY), dict):
            payload[MCP_SERVERS_KEY] = {}
        return payload, None

    def load_config(self) -> dict[str, Any]:
        payload, _ = self.load_document()
        return payload

    def save_config(self, payload: dict[str, Any]) -> None:
        write_json(self.path, payload)

    def list_servers(self) -> dict[str, Any]:
        return self.load_config()[MCP_SERVERS_KEY]

    def servers(self) -> dict[str, McpServer]:
        return servers_from_mapping(self.list_servers())

    def get_server(self, name: str) -> McpServer | None:
        return server_from_dict(self.list_servers().get(name))

    def add_server(self, name: str, entry: McpServer | dict[str, Any]) -> None:
        raw = entry if isinstance(entry, dict) else server_to_dict(entry)
        validate_server_entry(name, raw)

        payload = self.load_config()
        payload[MCP_SERVERS_KEY][name] = raw
        self.save_config(payload)

    def remove_server(self, name: str) -> bool:
        payload = self.load_config()
        servers = payload[MCP_SERVERS_KEY]
        if name not in servers:
            return False
        del servers[name]
        self.save_config(payload)
        return True
