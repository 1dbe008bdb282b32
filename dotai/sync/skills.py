"""Skill fan-out: copy central skill folders into provider skill directories.

A provider target folder is owned by this tool and replaced wholesale on
every install.
"""

from pathlib import Path
from typing import Iterable, Optional

from dotai.errors import InvalidSkillNameError, UnknownProviderError
from dotai.providers.skills import (
    SKILL_PROVIDERS,
    get_skill_provider,
    global_skill_path,
    project_skill_path,
    project_skill_root,
)
from dotai.skills.repository import SkillRepository, validate_skill_name
from dotai.sync.models import (
    Scope,
    SkillInstallResult,
    SkillInstallStatus,
    SkillSyncSummary,
    SkillUninstallResult,
)
from dotai.utils import is_under, remove_path, replace_tree


class SkillSyncService:
    def __init__(self, skills: SkillRepository) -> None:
        self.skills = skills

    def target_path(
        self,
        skill_name: str,
        provider_id: str,
        scope: Scope = Scope.GLOBAL,
        project_root: Optional[Path] = None,
    ) -> Path:
        provider = get_skill_provider(provider_id)
        if provider is None:
            raise UnknownProviderError(provider_id)
        if Scope(scope) == Scope.GLOBAL:
            root = provider.global_path()
        else:
            root = project_skill_root(provider_id, project_root)
        if root is None:
            raise UnknownProviderError(provider_id)

        target = root / validate_skill_name(skill_name)
        if not is_under(target, root):
            raise InvalidSkillNameError(skill_name)
        return target

    def install_to_provider(
        self,
        skill_name: str,
        provider_id: str,
        scope: Scope = Scope.GLOBAL,
        project_root: Optional[Path] = None,
    ) -> SkillInstallResult:
        target = self.target_path(skill_name, provider_id, scope, project_root)
        skill = self.skills.require_skill(skill_name)
        replace_tree(skill.path, target)
        return SkillInstallResult(
            skill_name=skill_name,
            provider_id=provider_id,
            scope=Scope(scope),
            success=True,
            target_path=target,
        )

    def install(
        self,
        skill_name: str,
        provider_ids: Iterable[str],
        scope: Scope = Scope.GLOBAL,
        project_root: Optional[Path] = None,
    ) -> list[SkillInstallResult]:
        results: list[SkillInstallResult] = []
        for provider_id in provider_ids:
            try:
                results.append(
                    self.install_to_provider(
                        skill_name, provider_id, scope, project_root
                    )
                )
            except Exception as exc:
                results.append(
                    SkillInstallResult(
                        skill_name=skill_name,
                        provider_id=provider_id,
                        scope=Scope(scope),
                        success=False,
                        error=str(exc),
                    )
                )
        return results

    def uninstall_from_provider(
        self,
        skill_name: str,
        provider_id: str,
        scope: Scope = Scope.GLOBAL,
        project_root: Optional[Path] = None,
    ) -> SkillUninstallResult:
        target = self.target_path(skill_name, provider_id, scope, project_root)
        removed = remove_path(target)
        return SkillUninstallResult(
            skill_name=skill_name,
            provider_id=provider_id,
            scope=Scope(scope),
            success=True,
            removed=removed,
            path=target,
        )

    def uninstall(
        self,
        skill_name: str,
        provider_ids: Iterable[str],
        scope: Scope = Scope.GLOBAL,
        project_root: Optional[Path] = None,
    ) -> list[SkillUninstallResult]:
        results: list[SkillUninstallResult] = []
        for provider_id in provider_ids:
            try:
                results.append(
                    self.uninstall_from_provider(
                        skill_name, provider_id, scope, project_root
                    )
                )
            except Exception as exc:
                results.append(
                    SkillUninstallResult(
                        skill_name=skill_name,
                        provider_id=provider_id,
                        scope=Scope(scope),
                        success=False,
                        error=str(exc),
                    )
                )
        return results

    def sync_all(
        self,
        provider_ids: Iterable[str],
        scope: Scope = Scope.GLOBAL,
        project_root: Optional[Path] = None,
    ) -> list[SkillSyncSummary]:
        targets = list(provider_ids)
        return [
            SkillSyncSummary(
                skill_name=skill.folder,
                results=self.install(skill.folder, targets, scope, project_root),
            )
            for skill in self.skills.iter_skills()
        ]

    def install_status(
        self, skill_name: str, project_root: Optional[Path] = None
    ) -> dict[str, SkillInstallStatus]:
        status: dict[str, SkillInstallStatus] = {}
        for provider_id, provider in SKILL_PROVIDERS.items():
            global_path = global_skill_path(provider_id, skill_name)
            project_path = project_skill_path(provider_id, skill_name, project_root)
            status[provider_id] = SkillInstallStatus(
                provider_id=provider_id,
                name=provider.name,
                global_installed=global_path is not None and global_path.exists(),
                global_path=global_path,
                project_installed=project_path is not None and project_path.exists(),
                project_path=project_path,
            )
        return status
