from dotai.providers.mcp import (
    MCP_PROVIDERS,
    McpProvider,
    get_mcp_provider,
    mcp_provider_ids,
)
from dotai.providers.skills import (
    SKILL_PROVIDERS,
    SkillProvider,
    get_skill_provider,
    global_skill_path,
    project_skill_path,
    project_skill_root,
    skill_provider_ids,
)

__all__ = [
    "MCP_PROVIDERS",
    "McpProvider",
    "get_mcp_provider",
    "mcp_provider_ids",
    "SKILL_PROVIDERS",
    "SkillProvider",
    "get_skill_provider",
    "global_skill_path",
    "project_skill_path",
    "project_skill_root",
    "skill_provider_ids",
]
