"""MCP fan-out: merge central servers into each provider's own config file.

Only the provider's server key is owned here. Every other key in the file
is foreign and must survive a sync untouched.
"""

from pathlib import Path
from typing import Any, Iterable, Optional

from dotai.errors import UnknownProviderError
from dotai.mcp.repository import McpRepository
from dotai.providers.mcp import (
    MCP_PROVIDERS,
    McpProvider,
    get_mcp_provider,
    mcp_provider_ids,
)
from dotai.sync.models import McpInstallStatus, McpSyncResult
from dotai.utils import backup_file, read_json_object, write_json


class McpSyncService:
    def __init__(self, store: McpRepository) -> None:
        self.store = store

    @staticmethod
    def _provider(provider_id: str) -> McpProvider:
        provider = get_mcp_provider(provider_id)
        if provider is None:
            raise UnknownProviderError(provider_id)
        return provider

    def read_provider_config(
        self, provider_id: str
    ) -> tuple[dict[str, Any], Optional[str]]:
        provider = self._provider(provider_id)
        return read_json_object(provider.global_path())

    def load_provider_config(self, provider_id: str) -> dict[str, Any]:
        payload, _ = self.read_provider_config(provider_id)
        return payload

    def write_provider_config(self, provider_id: str, servers: dict[str, Any]) -> Path:
        provider = self._provider(provider_id)
        config_path = provider.global_path()
        existing, error = self.read_provider_config(provider_id)
        if error is not None:
            backup_file(config_path)

        current = existing.get(provider.global_key)
        merged = dict(current) if isinstance(current, dict) else {}
        merged.update(servers)
        existing[provider.global_key] = merged

        write_json(config_path, existing)
        return config_path

    def sync_to_provider(self, provider_id: str) -> McpSyncResult:
        self._provider(provider_id)
        servers = self.store.list_servers()
        if not servers:
            return McpSyncResult(provider_id=provider_id, success=True, synced=0)

        path = self.write_provider_config(provider_id, servers)
        return McpSyncResult(
            provider_id=provider_id, success=True, synced=len(servers), path=path
        )

    def sync_to_all(
        self, provider_ids: Optional[Iterable[str]] = None
    ) -> list[McpSyncResult]:
        targets = list(provider_ids) if provider_ids is not None else mcp_provider_ids()
        results: list[McpSyncResult] = []
        for provider_id in targets:
            try:
                results.append(self.sync_to_provider(provider_id))
            except Exception as exc:
                results.append(
                    McpSyncResult(provider_id=provider_id, success=False, error=str(exc))
                )
        return results

    def install_status(self, server_name: str) -> dict[str, McpInstallStatus]:
        status: dict[str, McpInstallStatus] = {}
        for provider_id, provider in MCP_PROVIDERS.items():
            path = provider.global_path()
            try:
                payload = self.load_provider_config(provider_id)
                servers = payload.get(provider.global_key)
                installed = isinstance(servers, dict) and server_name in servers
                status[provider_id] = McpInstallStatus(
                    provider_id=provider_id,
                    name=provider.name,
                    installed=installed,
                    path=path,
                )
            except OSError as exc:
                status[provider_id] = McpInstallStatus(
                    provider_id=provider_id,
                    name=provider.name,
                    installed=False,
                    path=path,
                    error=str(exc),
                )
        return status
