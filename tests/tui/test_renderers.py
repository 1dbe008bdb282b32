from pathlib import Path

from rich.console import Console

from dotai.mcp.models import RemoteServer
from dotai.sync.models import McpSyncResult, Scope, SkillInstallResult
from dotai.tui import DotaiConsoleUI
from dotai.tui.enums import UIStyle
from dotai.tui.sections import UISection


def _ui() -> tuple[DotaiConsoleUI, Console]:
    console = Console(record=True, width=160)
    return DotaiConsoleUI(console), console


def test_install_results_show_names_and_paths(tmp_path: Path) -> None:
    ui, console = _ui()

    ui.render_install_results(
        "reviewer",
        "global",
        [
            SkillInstallResult(
                skill_name="reviewer",
                provider_id="claude-code",
                scope=Scope.GLOBAL,
                success=True,
                target_path=tmp_path / ".claude" / "skills" / "reviewer",
            ),
            SkillInstallResult(
                skill_name="reviewer",
                provider_id="nope",
                scope=Scope.GLOBAL,
                success=False,
                error="Unknown provider: nope",
            ),
        ],
    )

    text = console.export_text()
    assert "Claude Code" in text
    assert "~/.claude/skills/reviewer" in text
    assert "Unknown provider: nope" in text
    assert "Installed to 1 provider(s)" in text
    assert "Failed for 1 provider(s)" in text


def test_mcp_sync_marks_skipped_providers() -> None:
    ui, console = _ui()

    ui.render_mcp_sync([McpSyncResult(provider_id="zed", success=True, synced=0)])

    text = console.export_text()
    assert "Zed" in text
    assert "no servers" in text
    assert "Nothing to do" in text


def test_mcp_servers_table() -> None:
    ui, console = _ui()

    ui.render_mcp_servers({"api": RemoteServer(url="https://example.com")}, "/x.json")

    text = console.export_text()
    assert "remote" in text
    assert "https://example.com" in text


def test_render_message_escapes_markup() -> None:
    ui, console = _ui()

    ui.render_message("skill", "Opening: [bold]literal[/bold]")

    assert "[bold]literal[/bold]" in console.export_text()


def test_removed_server_shows_its_target() -> None:
    ui, console = _ui()

    ui.render_mcp_removed("api", RemoteServer(url="https://example.com"))

    text = console.export_text()
    assert "Removed 'api' (https://example.com)" in text
    assert "keep their copy" in text


def test_sections_take_style_members() -> None:
    panel = UISection.note("skill", "done", style=UIStyle.YELLOW)

    assert panel.border_style == "yellow"
    assert panel.title_align == "left"
