from dataclasses import dataclass
from pathlib import Path
from typing import Callable

from dotai.constants import SKILL_FILENAME
from dotai.paths import home_dir


@dataclass(frozen=True)
class SkillProvider:
    id: str
    name: str
    description: str
    website: str
    project_path: str | None
    skill_file: str = SKILL_FILENAME

    def global_path(self) -> Path:
        return _GLOBAL_SKILL_DIRS[self.id]()


_GLOBAL_SKILL_DIRS: dict[str, Callable[[], Path]] = {
    "claude-code": lambda: home_dir() / ".claude" / "skills",
    "cursor": lambda: home_dir() / ".cursor" / "skills",
    "gemini-cli": lambda: home_dir() / ".gemini" / "skills",
    "opencode": lambda: home_dir() / ".config" / "opencode" / "skill",
    "codex-cli": lambda: home_dir() / ".codex" / "skills",
    "antigravity": lambda: home_dir() / ".gemini" / "antigravity" / "skills",
}


SKILL_PROVIDERS: dict[str, SkillProvider] = {
    "claude-code": SkillProvider(
        id="claude-code",
        name="Claude Code",
        description="Anthropic Claude Code CLI",
        website="https://claude.ai/code",
        project_path=".claude/skills",
    ),
    "cursor": SkillProvider(
        id="cursor",
        name="Cursor",
        description="Cursor AI IDE",
        website="https://cursor.com",
        project_path=".cursor/skills",
    ),
    "gemini-cli": SkillProvider(
        id="gemini-cli",
        name="Gemini CLI",
        description="Google Gemini CLI",
        website="https://geminicli.com",
        project_path=".gemini/skills",
    ),
    "opencode": SkillProvider(
        id="opencode",
        name="OpenCode",
        description="OpenCode AI coding agent",
        website="https://opencode.ai",
        project_path=".opencode/skill",
    ),
    "codex-cli": SkillProvider(
        id="codex-cli",
        name="Codex CLI",
        description="OpenAI Codex CLI",
        website="https://openai.com/codex",
        project_path="skills",
    ),
    "antigravity": SkillProvider(
        id="antigravity",
        name="Antigravity",
        description="Antigravity agentic system",
        website="https://github.com/vuralserhat86/antigravity-agentic-skills",
        project_path=".agent/skills",
    ),
}


def skill_provider_ids() -> list[str]:
    return list(SKILL_PROVIDERS)


def get_skill_provider(provider_id: str) -> SkillProvider | None:
    return SKILL_PROVIDERS.get(provider_id)


def project_skill_root(
    provider_id: str, project_root: Path | None = None
) -> Path | None:
    provider = get_skill_provider(provider_id)
    if provider is None or provider.project_path is None:
        return None
    root = project_root if project_root is not None else Path.cwd()
    return root / provider.project_path


def global_skill_path(provider_id: str, skill_name: str) -> Path | None:
    provider = get_skill_provider(provider_id)
    if provider is None:
        return None
    return provider.global_path() / skill_name


def project_skill_path(
    provider_id: str, skill_name: str, project_root: Path | None = None
) -> Path | None:
    root = project_skill_root(provider_id, project_root)
    return root / skill_name if root is not None else None
