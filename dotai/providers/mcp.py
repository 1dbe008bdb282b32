from dataclasses import dataclass
from pathlib import Path
from typing import Callable

from dotai.constants import MCP_SERVERS_KEY
from dotai.paths import app_data_dir, home_dir, is_macos, is_windows


@dataclass(frozen=True)
class McpProvider:
    id: str
    name: str
    description: str
    project_path: str | None
    config_key: str = MCP_SERVERS_KEY
    global_config_key: str | None = None
    note: str | None = None

    def global_path(self) -> Path:
        return _GLOBAL_CONFIG_FILES[self.id]()

    @property
    def global_key(self) -> str:
        """Key under which servers live in the global config file."""
        return self.global_config_key or self.config_key


def _vscode_user_dir() -> Path:
    if is_windows():
        return app_data_dir() / "Code" / "User"
    if is_macos():
        return home_dir() / "Library" / "Application Support" / "Code" / "User"
    return home_dir() / ".config" / "Code" / "User"


def _claude_desktop_config() -> Path:
    if is_windows():
        return app_data_dir() / "Claude" / "claude_desktop_config.json"
    if is_macos():
        return (
            home_dir()
            / "Library"
            / "Application Support"
            / "Claude"
            / "claude_desktop_config.json"
        )
    return home_dir() / ".config" / "Claude" / "claude_desktop_config.json"


def _extension_settings(extension: str, filename: str) -> Path:
    return _vscode_user_dir() / "globalStorage" / extension / "settings" / filename


_GLOBAL_CONFIG_FILES: dict[str, Callable[[], Path]] = {
    "claude-code": lambda: home_dir() / ".claude.json",
    "claude-desktop": _claude_desktop_config,
    "cursor": lambda: home_dir() / ".cursor" / "mcp.json",
    "windsurf": lambda: home_dir() / ".codeium" / "windsurf" / "mcp_config.json",
    "vscode": lambda: _vscode_user_dir() / "settings.json",
    "cline": lambda: _extension_settings(
        "saoudrizwan.claude-dev", "cline_mcp_settings.json"
    ),
    "zed": lambda: home_dir() / ".config" / "zed" / "settings.json",
    "roo-code": lambda: _extension_settings(
        "rooveterinaryinc.roo-cline", "mcp_settings.json"
    ),
    "antigravity": lambda: home_dir() / ".antigravity" / "mcp_config.json",
}


MCP_PROVIDERS: dict[str, McpProvider] = {
    "claude-code": McpProvider(
        id="claude-code",
        name="Claude Code",
        description="Anthropic Claude Code CLI",
        project_path=".mcp.json",
    ),
    "claude-desktop": McpProvider(
        id="claude-desktop",
        name="Claude Desktop",
        description="Claude Desktop App",
        project_path=None,
    ),
    "cursor": McpProvider(
        id="cursor",
        name="Cursor",
        description="Cursor AI IDE",
        project_path=".cursor/mcp.json",
    ),
    "windsurf": McpProvider(
        id="windsurf",
        name="Windsurf",
        description="Windsurf IDE by Codeium",
        project_path=None,
    ),
    "vscode": McpProvider(
        id="vscode",
        name="VS Code",
        description="Visual Studio Code with GitHub Copilot",
        project_path=".vscode/mcp.json",
        global_config_key="mcp.servers",
    ),
    "cline": McpProvider(
        id="cline",
        name="Cline",
        description="Cline VS Code Extension",
        project_path=None,
    ),
    "zed": McpProvider(
        id="zed",
        name="Zed",
        description="Zed Editor",
        project_path=None,
        config_key="context_servers",
    ),
    "roo-code": McpProvider(
        id="roo-code",
        name="Roo Code",
        description="Roo Code VS Code Extension",
        project_path=".roo/mcp.json",
    ),
    "antigravity": McpProvider(
        id="antigravity",
        name="Antigravity",
        description="Antigravity Editor",
        project_path=None,
        note="Config accessible via MCP Store > Manage MCP Servers > View raw config",
    ),
}


def mcp_provider_ids() -> list[str]:
    return list(MCP_PROVIDERS)


def get_mcp_provider(provider_id: str) -> McpProvider | None:
    return MCP_PROVIDERS.get(provider_id)
