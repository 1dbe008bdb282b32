from typing import Any

from rich.console import Console
from rich.markup import escape

from dotai.mcp.models import McpServer
from dotai.providers.mcp import MCP_PROVIDERS
from dotai.providers.skills import SKILL_PROVIDERS
from dotai.skills.models import CreatedSkill, Skill
from dotai.sync.models import (
    McpInstallStatus,
    McpSyncResult,
    SkillInstallResult,
    SkillInstallStatus,
    SkillSyncSummary,
    SkillUninstallResult,
)
from dotai.tui.enums import UIStyle
from dotai.tui.sections import UISection
from dotai.tui.tables import (
    ConfigTable,
    McpTable,
    ProviderTable,
    ResultTable,
    SkillTable,
)
from dotai.utils import compact_home_path


SKILL_PROVIDER_NAMES = {key: value.name for key, value in SKILL_PROVIDERS.items()}
MCP_PROVIDER_NAMES = {key: value.name for key, value in MCP_PROVIDERS.items()}


class DotaiConsoleUI:
    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def _counts_note(self, ok: int, failed: int, verb: str, noun: str) -> None:
        lines: list[str] = []
        if ok:
            lines.append(f"[{UIStyle.GREEN.value}]{verb} {ok} {noun}(s)[/{UIStyle.GREEN.value}]")
        if failed:
            lines.append(f"[{UIStyle.RED.value}]Failed for {failed} {noun}(s)[/{UIStyle.RED.value}]")
        if not lines:
            lines.append(f"[{UIStyle.YELLOW.value}]Nothing to do[/{UIStyle.YELLOW.value}]")
        style = UIStyle.RED if failed else UIStyle.GREEN
        self.console.print(UISection.note("summary", "\n".join(lines), style=style))

    def render_skill_created(self, created: CreatedSkill) -> None:
        self.console.print(
            UISection.note(
                "skill",
                f"Skill created: [bold]{created.name}[/bold]\n"
                f"{compact_home_path(created.path)}\n\n"
                f"Install with: dotai skill install {created.name}",
                style=UIStyle.GREEN,
            )
        )

    def render_skill_imported(self, skill: Skill) -> None:
        self.console.print(
            UISection.note(
                "import",
                f"Imported skill '{skill.name}'\n{compact_home_path(skill.path)}",
                style=UIStyle.GREEN,
            )
        )

    def render_skills(
        self,
        skills: list[Skill],
        location: str,
        statuses: dict[str, dict[str, SkillInstallStatus]] | None = None,
    ) -> None:
        if not skills:
            self.console.print(
                UISection.note(
                    "skills",
                    "No skills found in your repository.\n"
                    f"Location: {compact_home_path(location)}\n"
                    "Create one with: dotai skill create",
                    style=UIStyle.YELLOW,
                )
            )
            return
        self.console.print(
            UISection.wrap(
                "skills",
                SkillTable.skills_table(skills, statuses),
                style=UIStyle.BLUE,
                subtitle=f"{len(skills)} skill(s) in {compact_home_path(location)}",
            )
        )

    def render_install_results(
        self, skill_name: str, scope: str, results: list[SkillInstallResult]
    ) -> None:
        self.console.print(
            UISection.wrap(
                f"install {skill_name} ({scope})",
                ResultTable.install_table(results, SKILL_PROVIDER_NAMES),
                style=UIStyle.CYAN,
            )
        )
        ok = sum(1 for item in results if item.success)
        self._counts_note(ok, len(results) - ok, "Installed to", "provider")

    def render_uninstall_results(
        self, skill_name: str, scope: str, results: list[SkillUninstallResult]
    ) -> None:
        self.console.print(
            UISection.wrap(
                f"uninstall {skill_name} ({scope})",
                ResultTable.uninstall_table(results, SKILL_PROVIDER_NAMES),
                style=UIStyle.MAGENTA,
            )
        )
        removed = sum(1 for item in results if item.success and item.removed)
        failed = sum(1 for item in results if not item.success)
        self._counts_note(removed, failed, "Removed from", "provider")

    def render_skill_sync(self, scope: str, summaries: list[SkillSyncSummary]) -> None:
        if not summaries:
            self.console.print(
                UISection.note(
                    "sync",
                    "No skills to sync.\nCreate skills with: dotai skill create",
                    style=UIStyle.YELLOW,
                )
            )
            return
        self.console.print(
            UISection.wrap(
                f"skill sync ({scope})",
                ResultTable.sync_summary_table(summaries),
                style=UIStyle.CYAN,
            )
        )
        installed = sum(item.installed for item in summaries)
        failed = sum(item.failed for item in summaries)
        self._counts_note(installed, failed, "Installed", "copy")

    def render_mcp_servers(
        self,
        servers: dict[str, McpServer],
        location: str,
        statuses: dict[str, dict[str, McpInstallStatus]] | None = None,
    ) -> None:
        if not servers:
            self.console.print(
                UISection.note(
                    "mcp",
                    "No MCP servers configured.\nAdd one with: dotai mcp add",
                    style=UIStyle.YELLOW,
                )
            )
            return
        self.console.print(
            UISection.wrap(
                "mcp servers",
                McpTable.servers_table(servers, statuses),
                style=UIStyle.BLUE,
                subtitle=f"{len(servers)} server(s) in {compact_home_path(location)}",
            )
        )

    def render_mcp_sync(self, results: list[McpSyncResult]) -> None:
        self.console.print(
            UISection.wrap(
                "mcp sync",
                ResultTable.mcp_sync_table(results, MCP_PROVIDER_NAMES),
                style=UIStyle.CYAN,
            )
        )
        synced = sum(1 for item in results if item.success and item.synced > 0)
        failed = sum(1 for item in results if not item.success)
        self._counts_note(synced, failed, "Synced to", "app")

    def render_mcp_removed(self, name: str, server: McpServer | None) -> None:
        detail = f" ({escape(server.summary())})" if server is not None else ""
        self.console.print(
            UISection.note(
                "mcp",
                f"Removed '{name}'{detail} from central config\n"
                "Already-synced providers keep their copy; "
                "remove it from each app manually.",
                style=UIStyle.YELLOW,
            )
        )

    def render_mcp_saved(self, name: str, location: str) -> None:
        self.console.print(
            UISection.note(
                "mcp",
                f"Added '{name}'\nStored in: {compact_home_path(location)}\n"
                "Run dotai mcp sync to deploy to all apps",
                style=UIStyle.GREEN,
            )
        )

    def render_skill_providers(self, enabled: list[str]) -> None:
        self.console.print(
            UISection.wrap(
                "skill providers",
                ProviderTable.skill_providers_table(
                    list(SKILL_PROVIDERS.values()), set(enabled)
                ),
                style=UIStyle.BLUE,
            )
        )

    def render_mcp_providers(self) -> None:
        self.console.print(
            UISection.wrap(
                "mcp providers",
                ProviderTable.mcp_providers_table(list(MCP_PROVIDERS.values())),
                style=UIStyle.BLUE,
            )
        )

    def render_config(self, config: dict[str, Any], path: str, skills_dir: str) -> None:
        self.console.print(
            UISection.wrap(
                "config",
                ConfigTable.config_table(config),
                style=UIStyle.BLUE,
                subtitle=f"{compact_home_path(path)} | skills: {compact_home_path(skills_dir)}",
            )
        )

    def render_message(self, title: str, message: str, style: UIStyle = UIStyle.GREEN) -> None:
        self.console.print(UISection.note(title, escape(message), style=style))
