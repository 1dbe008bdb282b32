from typing import Final


CONFIG_DIRNAME: Final[str] = ".dotai"
SKILLS_DIRNAME: Final[str] = "skills"
CONFIG_FILENAME: Final[str] = "config.json"
MCP_CONFIG_FILENAME: Final[str] = "mcp_servers.json"

SKILL_FILENAME: Final[str] = "SKILL.md"
MCP_SERVERS_KEY: Final[str] = "mcpServers"

SKILL_NAME_PATTERN: Final[str] = r"^[a-z0-9-]+$"
SERVER_NAME_PATTERN: Final[str] = r"^[A-Za-z0-9_-]+$"
DESCRIPTION_MAX_LENGTH: Final[int] = 200
