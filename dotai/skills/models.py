"""Skill data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any


@dataclass(frozen=True)
class Skill:
    name: str
    description: str
    body: str
    file_path: Path
    metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def path(self) -> Path:
        return self.file_path.parent

    @property
    def folder(self) -> str:
        return self.path.name


@dataclass(frozen=True)
class CreatedSkill:
    name: str
    description: str
    path: Path
    skill_file: Path
