from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Optional


class Scope(str, Enum):
    GLOBAL = "global"
    PROJECT = "project"


@dataclass(frozen=True)
class SkillInstallResult:
    skill_name: str
    provider_id: str
    scope: Scope
    success: bool
    target_path: Optional[Path] = None
    error: Optional[str] = None

    def as_dict(self) -> dict[str, Any]:
        return {
            "skill": self.skill_name,
            "provider": self.provider_id,
            "scope": self.scope.value,
            "success": self.success,
            "target_path": str(self.target_path) if self.target_path else None,
            "error": self.error,
        }


@dataclass(frozen=True)
class SkillUninstallResult:
    skill_name: str
    provider_id: str
    scope: Scope
    success: bool
    removed: bool = False
    path: Optional[Path] = None
    error: Optional[str] = None

    def as_dict(self) -> dict[str, Any]:
        return {
            "skill": self.skill_name,
            "provider": self.provider_id,
            "scope": self.scope.value,
            "success": self.success,
            "removed": self.removed,
            "path": str(self.path) if self.path else None,
            "error": self.error,
        }


@dataclass(frozen=True)
class SkillSyncSummary:
    skill_name: str
    results: list[SkillInstallResult] = field(default_factory=list)

    @property
    def installed(self) -> int:
        return sum(1 for item in self.results if item.success)

    @property
    def failed(self) -> int:
        return sum(1 for item in self.results if not item.success)

    def as_dict(self) -> dict[str, Any]:
        return {
            "skill": self.skill_name,
            "installed": self.installed,
            "failed": self.failed,
            "results": [item.as_dict() for item in self.results],
        }


@dataclass(frozen=True)
class SkillInstallStatus:
    provider_id: str
    name: str
    global_installed: bool
    global_path: Optional[Path]
    project_installed: bool
    project_path: Optional[Path]

    @property
    def installed(self) -> bool:
        return self.global_installed or self.project_installed

    def scopes(self) -> list[str]:
        scopes: list[str] = []
        if self.global_installed:
            scopes.append(Scope.GLOBAL.value)
        if self.project_installed:
            scopes.append(Scope.PROJECT.value)
        return scopes

    def as_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "global": self.global_installed,
            "global_path": str(self.global_path) if self.global_path else None,
            "project": self.project_installed,
            "project_path": str(self.project_path) if self.project_path else None,
        }


@dataclass(frozen=True)
class McpSyncResult:
    provider_id: str
    success: bool
    synced: int = 0
    path: Optional[Path] = None
    error: Optional[str] = None

    def as_dict(self) -> dict[str, Any]:
        return {
            "provider": self.provider_id,
            "success": self.success,
            "synced": self.synced,
            "path": str(self.path) if self.path else None,
            "error": self.error,
        }


@dataclass(frozen=True)
class McpInstallStatus:
    provider_id: str
    name: str
    installed: bool
    path: Optional[Path] = None
    error: Optional[str] = None

    def as_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "installed": self.installed,
            "path": str(self.path) if self.path else None,
            "error": self.error,
        }
