from pathlib import Path

import pytest

from dotai.skills.repository import SkillRepository
from dotai.sync.models import Scope
from dotai.sync.skills import SkillSyncService


def _service() -> SkillSyncService:
    return SkillSyncService(SkillRepository())


def _snapshot(root: Path) -> dict[str, bytes]:
    return {
        str(path.relative_to(root)): path.read_bytes()
        for path in sorted(root.rglob("*"))
        if path.is_file()
    }


def test_install_global_copies_folder_byte_for_byte(tmp_path: Path, make_skill) -> None:
    source = make_skill("reviewer")
    (source / "scripts").mkdir()
    (source / "scripts" / "run.sh").write_bytes(b"#!/bin/sh\necho hi\n")

    results = _service().install("reviewer", ["claude-code"])

    target = tmp_path / ".claude" / "skills" / "reviewer"
    assert results[0].success is True
    assert results[0].target_path == target
    assert _snapshot(target) == _snapshot(source)


def test_reinstall_replaces_stale_files(tmp_path: Path, make_skill) -> None:
    make_skill("reviewer")
    service = _service()
    service.install("reviewer", ["cursor"])
    target = tmp_path / ".cursor" / "skills" / "reviewer"
    (target / "stale.md").write_text("stale", encoding="utf-8")

    service.install("reviewer", ["cursor"])
    first = _snapshot(target)
    service.install("reviewer", ["cursor"])

    assert not (target / "stale.md").exists()
    assert _snapshot(target) == first


def test_install_project_scope(project_root: Path, make_skill) -> None:
    make_skill("reviewer")

    results = _service().install(
        "reviewer", ["opencode", "codex-cli"], scope=Scope.PROJECT
    )

    assert [item.target_path for item in results] == [
        project_root / ".opencode" / "skill" / "reviewer",
        project_root / "skills" / "reviewer",
    ]
    assert all(item.scope == Scope.PROJECT for item in results)


def test_install_isolates_failures_and_keeps_order(tmp_path: Path, make_skill) -> None:
    make_skill("reviewer")

    results = _service().install("reviewer", ["cursor", "nope", "gemini-cli"])

    assert [item.provider_id for item in results] == ["cursor", "nope", "gemini-cli"]
    assert [item.success for item in results] == [True, False, True]
    assert "Unknown provider" in results[1].error
    assert (tmp_path / ".gemini" / "skills" / "reviewer" / "SKILL.md").is_file()


def test_install_missing_skill_fails_per_provider() -> None:
    results = _service().install("ghost", ["cursor"])

    assert results[0].success is False
    assert "not found" in results[0].error


def test_uninstall_reports_removed_flag(tmp_path: Path, make_skill) -> None:
    make_skill("reviewer")
    service = _service()
    service.install("reviewer", ["claude-code"])

    first = service.uninstall("reviewer", ["claude-code", "cursor"])
    second = service.uninstall("reviewer", ["claude-code"])

    assert [(item.success, item.removed) for item in first] == [
        (True, True),
        (True, False),
    ]
    assert second[0].removed is False
    assert not (tmp_path / ".claude" / "skills" / "reviewer").exists()


def test_uninstall_unknown_provider(make_skill) -> None:
    results = _service().uninstall("reviewer", ["nope"])

    assert results[0].success is False
    assert results[0].removed is False


def test_sync_all_installs_every_skill(tmp_path: Path, make_skill) -> None:
    make_skill("alpha")
    make_skill("beta")

    summaries = _service().sync_all(["claude-code", "antigravity"])

    assert [summary.skill_name for summary in summaries] == ["alpha", "beta"]
    assert all(summary.installed == 2 and summary.failed == 0 for summary in summaries)
    assert (tmp_path / ".gemini" / "antigravity" / "skills" / "beta").is_dir()


def test_sync_all_with_empty_repo() -> None:
    assert _service().sync_all(["cursor"]) == []


def test_install_status_by_scope(project_root: Path, make_skill) -> None:
    make_skill("reviewer")
    service = _service()
    service.install("reviewer", ["cursor"], scope=Scope.PROJECT)
    service.install("reviewer", ["claude-code"])

    status = service.install_status("reviewer")

    assert status["cursor"].project_installed is True
    assert status["cursor"].global_installed is False
    assert status["cursor"].scopes() == ["project"]
    assert status["claude-code"].scopes() == ["global"]
    assert status["gemini-cli"].installed is False
    assert set(status) == {
        "claude-code",
        "cursor",
        "gemini-cli",
        "opencode",
        "codex-cli",
        "antigravity",
    }


def test_results_serialise(tmp_path: Path, make_skill) -> None:
    make_skill("reviewer")

    result = _service().install("reviewer", ["cursor"])[0]

    assert result.as_dict() == {
        "skill": "reviewer",
        "provider": "cursor",
        "scope": "global",
        "success": True,
        "target_path": str(tmp_path / ".cursor" / "skills" / "reviewer"),
        "error": None,
    }


def test_install_status_project_only(project_root: Path, make_skill) -> None:
    make_skill("reviewer")
    service = _service()
    service.install("reviewer", ["gemini-cli"], scope=Scope.PROJECT)

    status = service.install_status("reviewer")

    assert (status["gemini-cli"].global_installed, status["gemini-cli"].project_installed) == (
        False,
        True,
    )
    for provider_id, item in status.items():
        if provider_id != "gemini-cli":
            assert (item.global_installed, item.project_installed) == (False, False)


@pytest.mark.parametrize("name", ["", "..", "a/b"])
def test_uninstall_refuses_unsafe_names(tmp_path: Path, make_skill, name: str) -> None:
    make_skill("keep-me")
    service = _service()
    service.install("keep-me", ["claude-code"])

    results = service.uninstall(name, ["claude-code"])

    assert results[0].success is False
    assert results[0].removed is False
    assert "Invalid skill name" in results[0].error
    assert (tmp_path / ".claude" / "skills" / "keep-me" / "SKILL.md").is_file()


def test_install_refuses_unsafe_names(tmp_path: Path) -> None:
    results = _service().install("..", ["cursor"], scope=Scope.PROJECT, project_root=tmp_path)

    assert results[0].success is False
    assert not (tmp_path / ".cursor").exists()


def test_target_path_stays_inside_provider_root(tmp_path: Path) -> None:
    target = _service().target_path("reviewer", "claude-code")

    assert target == tmp_path / ".claude" / "skills" / "reviewer"
