"""Parse and render SKILL.md documents with YAML frontmatter."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any

import yaml

from dotai.errors import InvalidSkillError
from dotai.skills.models import Skill

_FRONTMATTER_RE = re.compile(r"^---\s*\n(.*?)\n---[ \t]*(?:\n|$)", re.DOTALL)

_DEFAULT_INSTRUCTIONS = """Instructions for the {name} skill.

## When to use this skill

- Use this when...
- This is helpful for...

## How to use it

Step-by-step guidance, conventions, and patterns the agent should follow.

## Examples

Include examples to help the agent understand expected behavior.
"""


def split_frontmatter(text: str) -> tuple[dict[str, Any], str]:
    match = _FRONTMATTER_RE.match(text)
    if not match:
        return {}, text
    raw = yaml.safe_load(match.group(1))
    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ValueError("frontmatter must be a mapping")
    return raw, text[match.end() :]


def parse_skill(path: Path) -> Skill:
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise InvalidSkillError(path, str(exc)) from exc

    try:
        metadata, body = split_frontmatter(text)
    except (yaml.YAMLError, ValueError) as exc:
        raise InvalidSkillError(path, str(exc)) from exc

    name = metadata.get("name") or path.parent.name
    description = metadata.get("description") or ""
    return Skill(
        name=str(name),
        description=str(description),
        body=body,
        file_path=path,
        metadata=metadata,
    )


def parse_skill_safe(path: Path) -> tuple[Skill | None, str | None]:
    if not path.is_file():
        return None, None
    try:
        return parse_skill(path), None
    except InvalidSkillError as exc:
        return None, exc.detail


def render_skill_template(name: str, description: str, instructions: str = "") -> str:
    frontmatter = yaml.safe_dump(
        {"name": name, "description": description},
        default_flow_style=False,
        sort_keys=False,
        allow_unicode=True,
    ).rstrip()
    body = instructions.strip() or _DEFAULT_INSTRUCTIONS.format(name=name).rstrip()
    return f"---\n{frontmatter}\n---\n\n# {name}\n\n{body}\n"
