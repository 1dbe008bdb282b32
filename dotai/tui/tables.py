from typing import Any

from rich.table import Column, Table

from dotai.mcp.models import McpServer
from dotai.providers.mcp import McpProvider
from dotai.providers.skills import SkillProvider
from dotai.skills.models import Skill
from dotai.sync.models import (
    McpInstallStatus,
    McpSyncResult,
    SkillInstallResult,
    SkillInstallStatus,
    SkillSyncSummary,
    SkillUninstallResult,
)
from dotai.tui.enums import ResultMark, UIStyle
from dotai.utils import compact_home_path, compact_home_paths_in_text


def _mark(mark: ResultMark, style: UIStyle) -> str:
    return f"[{style.value}]{mark.value}[/{style.value}]"


def _provider_label(provider_id: str, names: dict[str, str]) -> str:
    return names.get(provider_id, provider_id)


class ResultTable:
    @staticmethod
    def install_table(
        results: list[SkillInstallResult], names: dict[str, str]
    ) -> Table:
        table = Table(
            Column(header="", width=2),
            Column(header="Provider", width=16),
            Column(header="Detail", overflow="fold"),
            expand=True,
            header_style="bold",
        )
        for result in results:
            if result.success:
                table.add_row(
                    _mark(ResultMark.OK, UIStyle.GREEN),
                    _provider_label(result.provider_id, names),
                    compact_home_path(result.target_path or ""),
                )
            else:
                table.add_row(
                    _mark(ResultMark.FAIL, UIStyle.RED),
                    _provider_label(result.provider_id, names),
                    compact_home_paths_in_text(result.error or ""),
                )
        return table

    @staticmethod
    def uninstall_table(
        results: list[SkillUninstallResult], names: dict[str, str]
    ) -> Table:
        table = Table(
            Column(header="", width=2),
            Column(header="Provider", width=16),
            Column(header="Detail", overflow="fold"),
            expand=True,
            header_style="bold",
        )
        for result in results:
            label = _provider_label(result.provider_id, names)
            if not result.success:
                table.add_row(
                    _mark(ResultMark.FAIL, UIStyle.RED),
                    label,
                    compact_home_paths_in_text(result.error or ""),
                )
            elif result.removed:
                table.add_row(
                    _mark(ResultMark.OK, UIStyle.GREEN),
                    label,
                    compact_home_path(result.path or ""),
                )
            else:
                table.add_row(
                    _mark(ResultMark.SKIP, UIStyle.DIM), label, "not installed"
                )
        return table

    @staticmethod
    def sync_summary_table(summaries: list[SkillSyncSummary]) -> Table:
        table = Table(
            Column(header="", width=2),
            Column(header="Skill", width=24),
            Column(header="Installed", width=10, justify="right"),
            Column(header="Failed", width=8, justify="right"),
            Column(header="Errors", overflow="fold"),
            expand=True,
            header_style="bold",
        )
        for summary in summaries:
            mark = (
                _mark(ResultMark.OK, UIStyle.GREEN)
                if summary.failed == 0
                else _mark(ResultMark.FAIL, UIStyle.YELLOW)
            )
            errors = "; ".join(
                f"{item.provider_id}: {item.error}"
                for item in summary.results
                if not item.success
            )
            table.add_row(
                mark,
                summary.skill_name,
                str(summary.installed),
                str(summary.failed),
                compact_home_paths_in_text(errors),
            )
        return table

    @staticmethod
    def mcp_sync_table(results: list[McpSyncResult], names: dict[str, str]) -> Table:
        table = Table(
            Column(header="", width=2),
            Column(header="App", width=16),
            Column(header="Servers", width=8, justify="right"),
            Column(header="Detail", overflow="fold"),
            expand=True,
            header_style="bold",
        )
        for result in results:
            label = _provider_label(result.provider_id, names)
            if not result.success:
                table.add_row(
                    _mark(ResultMark.FAIL, UIStyle.RED),
                    label,
                    "",
                    compact_home_paths_in_text(result.error or ""),
                )
            elif result.synced == 0:
                table.add_row(
                    _mark(ResultMark.SKIP, UIStyle.DIM), label, "0", "no servers"
                )
            else:
                table.add_row(
                    _mark(ResultMark.OK, UIStyle.GREEN),
                    label,
                    str(result.synced),
                    compact_home_path(result.path or ""),
                )
        return table


class SkillTable:
    @staticmethod
    def skills_table(
        skills: list[Skill],
        statuses: dict[str, dict[str, SkillInstallStatus]] | None = None,
    ) -> Table:
        columns = [
            Column(header="Skill", width=24),
            Column(header="Description", overflow="fold"),
        ]
        if statuses is not None:
            columns.append(Column(header="Installed", overflow="fold"))
        table = Table(*columns, expand=True, header_style="bold")

        for skill in skills:
            row = [skill.name, skill.description or "[dim]No description[/dim]"]
            if statuses is not None:
                installed = [
                    f"{item.name} ({', '.join(item.scopes())})"
                    for item in statuses.get(skill.folder, {}).values()
                    if item.installed
                ]
                row.append(
                    f"[{UIStyle.GREEN.value}]{', '.join(installed)}[/{UIStyle.GREEN.value}]"
                    if installed
                    else f"[{UIStyle.YELLOW.value}]Not installed anywhere[/{UIStyle.YELLOW.value}]"
                )
            table.add_row(*row)
        return table


class McpTable:
    @staticmethod
    def servers_table(
        servers: dict[str, McpServer],
        statuses: dict[str, dict[str, McpInstallStatus]] | None = None,
    ) -> Table:
        columns = [
            Column(header="Server", width=20),
            Column(header="Kind", width=8),
            Column(header="Target", overflow="fold"),
        ]
        if statuses is not None:
            columns.append(Column(header="Synced to", overflow="fold"))
        table = Table(*columns, expand=True, header_style="bold")

        for name, server in servers.items():
            row = [name, server.kind.value, server.summary()]
            if statuses is not None:
                synced = [
                    item.name
                    for item in statuses.get(name, {}).values()
                    if item.installed
                ]
                row.append(
                    f"[{UIStyle.GREEN.value}]{', '.join(synced)}[/{UIStyle.GREEN.value}]"
                    if synced
                    else f"[{UIStyle.YELLOW.value}]Not synced yet[/{UIStyle.YELLOW.value}]"
                )
            table.add_row(*row)
        return table


class ProviderTable:
    @staticmethod
    def skill_providers_table(
        providers: list[SkillProvider], enabled: set[str]
    ) -> Table:
        table = Table(
            Column(header="Provider", width=14),
            Column(header="Name", width=14),
            Column(header="Status", width=9),
            Column(header="Global", overflow="fold"),
            Column(header="Project", overflow="fold"),
            expand=True,
            header_style="bold",
        )
        for provider in providers:
            if provider.id in enabled:
                status = f"[{UIStyle.GREEN.value}]enabled[/{UIStyle.GREEN.value}]"
            else:
                status = f"[{UIStyle.YELLOW.value}]disabled[/{UIStyle.YELLOW.value}]"
            table.add_row(
                provider.id,
                provider.name,
                status,
                compact_home_path(provider.global_path()),
                f"{provider.project_path}/" if provider.project_path else "",
            )
        return table

    @staticmethod
    def mcp_providers_table(providers: list[McpProvider]) -> Table:
        table = Table(
            Column(header="Provider", width=14),
            Column(header="Name", width=14),
            Column(header="Key", width=16),
            Column(header="Config", overflow="fold"),
            expand=True,
            header_style="bold",
        )
        for provider in providers:
            config = compact_home_path(provider.global_path())
            if provider.note:
                config = f"{config}\n[{UIStyle.YELLOW.value}]{provider.note}[/{UIStyle.YELLOW.value}]"
            table.add_row(provider.id, provider.name, provider.global_key, config)
        return table


class ConfigTable:
    @staticmethod
    def config_table(config: dict[str, Any]) -> Table:
        table = Table.grid(padding=(0, 2))
        table.add_column(style="bold")
        table.add_column()
        for key, value in config.items():
            if isinstance(value, list):
                text = ", ".join(str(item) for item in value) or "(none)"
            elif value is None:
                text = "(default)"
            else:
                text = str(value)
            table.add_row(key, text)
        return table
