from pathlib import Path
from typing import Any, Callable, Dict, Optional

import click
from rich.console import Console

from dotai import __version__
from dotai.config import ConfigService
from dotai.errors import DotaiError, ServerNotFoundError, SkillNotFoundError
from dotai.launcher import copy_to_clipboard, open_in_editor, open_path
from dotai.mcp.models import RemoteServer, RemoteTransport, StdioServer
from dotai.mcp.repository import McpRepository, parse_env_pairs
from dotai.providers.skills import get_skill_provider, skill_provider_ids
from dotai.skills.repository import SkillRepository
from dotai.sync.mcp import McpSyncService
from dotai.sync.models import Scope
from dotai.sync.skills import SkillSyncService
from dotai.tui import DotaiConsoleUI
from dotai.tui.enums import UIStyle
from dotai.utils import split_csv


SCOPE_VALUES = [scope.value for scope in Scope]


def _providers_options(func: Callable) -> Callable:
    func = click.option(
        "-a", "--all", "all_providers", is_flag=True, help="Target every provider."
    )(func)
    func = click.option(
        "-p", "--providers", default=None, help="Comma-separated list of providers."
    )(func)
    return func


def _scope_options(func: Callable) -> Callable:
    return click.option(
        "--project/--global",
        "project",
        default=None,
        help="Install to project scope (current directory) or global scope.",
    )(func)


def _ui() -> DotaiConsoleUI:
    return DotaiConsoleUI(Console())


def _config(obj: Dict[str, Any]) -> ConfigService:
    return obj["config"]


def _skills(obj: Dict[str, Any]) -> SkillRepository:
    return SkillRepository(root=_config(obj).skills_repo_dir())


def _resolve_scope(obj: Dict[str, Any], project: Optional[bool]) -> Scope:
    if project is not None:
        return Scope.PROJECT if project else Scope.GLOBAL
    return _config(obj).default_scope()


def _resolve_skill_providers(
    obj: Dict[str, Any], providers: Optional[str], all_providers: bool
) -> list[str]:
    if all_providers:
        return skill_provider_ids()
    if providers:
        return split_csv(providers)
    return _config(obj).enabled_providers()


def _fail(exc: Exception) -> click.ClickException:
    return click.ClickException(str(exc))


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(__version__, prog_name="dotai")
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Dotfiles for AI: manage skills and MCP servers across AI coding assistants."""
    config = ConfigService()
    config.init_config()
    ctx.obj = {"config": config}


@cli.group(help="Manage AI agent skills.")
def skill() -> None:
    pass


@skill.command("create", help="Create a new skill in the central repository.")
@click.argument("name")
@click.option("-d", "--description", required=True, help="Short description (max 200 chars).")
@click.option("-i", "--instructions", default="", help="Instruction body for SKILL.md.")
@click.option("-e", "--edit", is_flag=True, help="Open SKILL.md in $EDITOR afterwards.")
@click.pass_obj
def skill_create(
    obj: Dict[str, Any], name: str, description: str, instructions: str, edit: bool
) -> None:
    ui = _ui()
    try:
        created = _skills(obj).create_skill(name, description, instructions)
    except DotaiError as exc:
        raise _fail(exc)
    ui.render_skill_created(created)
    if edit:
        try:
            open_in_editor(created.skill_file)
        except DotaiError as exc:
            raise _fail(exc)


@skill.command("install", help="Install a skill (or a skill folder path) to providers.")
@click.argument("skill_name")
@_providers_options
@_scope_options
@click.pass_obj
def skill_install(
    obj: Dict[str, Any],
    skill_name: str,
    providers: Optional[str],
    all_providers: bool,
    project: Optional[bool],
) -> None:
    ui = _ui()
    skills = _skills(obj)

    source = Path(skill_name).expanduser()
    if source.is_dir():
        try:
            imported = skills.import_skill(source)
        except DotaiError as exc:
            raise click.ClickException(f"Failed to import: {exc}")
        ui.render_skill_imported(imported)
        skill_name = imported.folder

    resolved_scope = _resolve_scope(obj, project)
    targets = _resolve_skill_providers(obj, providers, all_providers)
    results = SkillSyncService(skills).install(
        skill_name, targets, resolved_scope, Path.cwd()
    )
    ui.render_install_results(skill_name, resolved_scope.value, results)
    if any(not item.success for item in results):
        raise click.exceptions.Exit(1)


@skill.command("uninstall", help="Remove an installed skill from providers.")
@click.argument("skill_name")
@_providers_options
@_scope_options
@click.option("-y", "--yes", is_flag=True, help="Skip confirmation.")
@click.pass_obj
def skill_uninstall(
    obj: Dict[str, Any],
    skill_name: str,
    providers: Optional[str],
    all_providers: bool,
    project: Optional[bool],
    yes: bool,
) -> None:
    ui = _ui()
    resolved_scope = _resolve_scope(obj, project)
    targets = _resolve_skill_providers(obj, providers, all_providers)

    if not yes:
        names = ", ".join(
            getattr(get_skill_provider(item), "name", item) for item in targets
        )
        if not click.confirm(f"Uninstall '{skill_name}' from {names}?", default=False):
            ui.render_message("uninstall", "Cancelled.", style=UIStyle.YELLOW)
            return

    results = SkillSyncService(_skills(obj)).uninstall(
        skill_name, targets, resolved_scope, Path.cwd()
    )
    ui.render_uninstall_results(skill_name, resolved_scope.value, results)
    if any(not item.success for item in results):
        raise click.exceptions.Exit(1)


@skill.command("list", help="List skills in the central repository.")
@click.option("-v", "--verbose", is_flag=True, help="Show installation status.")
@click.pass_obj
def skill_list(obj: Dict[str, Any], verbose: bool) -> None:
    skills = _skills(obj)
    items = skills.list_skills()
    statuses = None
    if verbose:
        service = SkillSyncService(skills)
        statuses = {
            item.folder: service.install_status(item.folder, Path.cwd())
            for item in items
        }
    _ui().render_skills(items, str(skills.root), statuses)


skill.add_command(skill_list, "ls")


@skill.command("sync", help="Install every central skill to providers.")
@_providers_options
@_scope_options
@click.pass_obj
def skill_sync(
    obj: Dict[str, Any],
    providers: Optional[str],
    all_providers: bool,
    project: Optional[bool],
) -> None:
    resolved_scope = _resolve_scope(obj, project)
    targets = _resolve_skill_providers(obj, providers, all_providers)
    summaries = SkillSyncService(_skills(obj)).sync_all(
        targets, resolved_scope, Path.cwd()
    )
    _ui().render_skill_sync(resolved_scope.value, summaries)
    if any(item.failed for item in summaries):
        raise click.exceptions.Exit(1)


@skill.command("open", help="Open a skill folder or its SKILL.md.")
@click.argument("skill_name")
@click.option("-f", "--file", "open_file", is_flag=True, help="Open SKILL.md directly.")
@click.option("-c", "--copy", "copy", is_flag=True, help="Copy SKILL.md to the clipboard.")
@click.pass_obj
def skill_open(obj: Dict[str, Any], skill_name: str, open_file: bool, copy: bool) -> None:
    ui = _ui()
    try:
        found = _skills(obj).require_skill(skill_name)
    except DotaiError as exc:
        raise _fail(exc)

    if copy:
        text = found.file_path.read_text(encoding="utf-8")
        if not copy_to_clipboard(text):
            raise click.ClickException("Clipboard copy failed")
        ui.render_message("skill", f"Copied {found.file_path.name} of '{found.name}'")
        return

    target = found.file_path if open_file else found.path
    try:
        open_path(target)
    except DotaiError as exc:
        raise _fail(exc)
    ui.render_message("skill", f"Opening: {target}", style=UIStyle.DIM)


@skill.command("remove", help="Delete a skill from the central repository.")
@click.argument("skill_name")
@click.option("-y", "--yes", is_flag=True, help="Skip confirmation.")
@click.pass_obj
def skill_remove(obj: Dict[str, Any], skill_name: str, yes: bool) -> None:
    ui = _ui()
    if not yes and not click.confirm(
        f"Delete '{skill_name}' from the central repository?", default=False
    ):
        ui.render_message("skill", "Cancelled.", style=UIStyle.YELLOW)
        return
    try:
        removed = _skills(obj).remove_skill(skill_name)
    except DotaiError as exc:
        raise _fail(exc)
    if not removed:
        raise _fail(SkillNotFoundError(skill_name))
    ui.render_message("skill", f"Removed '{skill_name}'", style=UIStyle.YELLOW)


@cli.group(help="Manage MCP servers.")
def mcp() -> None:
    pass


@mcp.command("add", help="Add or replace an MCP server in the central config.")
@click.argument("name")
@click.option("--command", "command", default=None, help="Command for a stdio server.")
@click.option("--args", "args", default=None, help="Comma-separated arguments.")
@click.option("--env", "env", default=None, help="Environment, KEY=value,KEY2=value2.")
@click.option("--url", "url", default=None, help="URL for a remote server.")
@click.option("--headers", "headers", default=None, help="Headers, KEY=value,KEY2=value2.")
@click.option(
    "--transport",
    type=click.Choice([item.value for item in RemoteTransport], case_sensitive=False),
    default=None,
    help="Remote transport.",
)
@click.option("--sync", "sync_now", is_flag=True, help="Sync to all apps right away.")
@click.pass_obj
def mcp_add(
    obj: Dict[str, Any],
    name: str,
    command: Optional[str],
    args: Optional[str],
    env: Optional[str],
    url: Optional[str],
    headers: Optional[str],
    transport: Optional[str],
    sync_now: bool,
) -> None:
    if (command is None) == (url is None):
        raise click.UsageError("Provide exactly one of --command or --url")

    if command is not None:
        server: StdioServer | RemoteServer = StdioServer(
            command=command, args=split_csv(args), env=parse_env_pairs(env)
        )
    else:
        server = RemoteServer(
            url=url or "",
            headers=parse_env_pairs(headers),
            transport=RemoteTransport(transport.lower()) if transport else None,
        )

    ui = _ui()
    store = McpRepository()
    try:
        store.add_server(name, server)
    except DotaiError as exc:
        raise _fail(exc)
    ui.render_mcp_saved(name, str(store.path))

    if sync_now:
        results = McpSyncService(store).sync_to_all()
        ui.render_mcp_sync(results)
        if any(not item.success for item in results):
            raise click.exceptions.Exit(1)


@mcp.command("list", help="List MCP servers in the central config.")
@click.option("-v", "--verbose", is_flag=True, help="Show sync status per app.")
def mcp_list(verbose: bool) -> None:
    store = McpRepository()
    servers = store.servers()
    statuses = None
    if verbose:
        service = McpSyncService(store)
        statuses = {name: service.install_status(name) for name in servers}
    _ui().render_mcp_servers(servers, str(store.path), statuses)


@mcp.command("sync", help="Merge central MCP servers into each app's config.")
@click.option("-p", "--providers", default=None, help="Comma-separated list of apps.")
def mcp_sync(providers: Optional[str]) -> None:
    ui = _ui()
    store = McpRepository()
    if not store.list_servers():
        ui.render_mcp_servers({}, str(store.path))
        return
    targets = split_csv(providers) if providers else None
    results = McpSyncService(store).sync_to_all(targets)
    ui.render_mcp_sync(results)
    if any(not item.success for item in results):
        raise click.exceptions.Exit(1)


@mcp.command("remove", help="Remove an MCP server from the central config.")
@click.argument("name")
@click.option("-y", "--yes", is_flag=True, help="Skip confirmation.")
def mcp_remove(name: str, yes: bool) -> None:
    ui = _ui()
    if not yes and not click.confirm(
        f"Remove '{name}' from central config?", default=False
    ):
        ui.render_message("mcp", "Cancelled.", style=UIStyle.YELLOW)
        return
    store = McpRepository()
    server = store.get_server(name)
    if not store.remove_server(name):
        raise _fail(ServerNotFoundError(name))
    ui.render_mcp_removed(name, server)


@mcp.command("providers", help="List supported MCP apps.")
def mcp_providers() -> None:
    _ui().render_mcp_providers()


@cli.command(help="List supported skill providers.")
@click.pass_obj
def providers(obj: Dict[str, Any]) -> None:
    _ui().render_skill_providers(_config(obj).enabled_providers())


@cli.command("config", help="Show or change dotai settings.")
@click.option(
    "--scope",
    type=click.Choice(SCOPE_VALUES, case_sensitive=False),
    default=None,
    help="Default install scope.",
)
@click.option(
    "--repo",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Custom central skills directory.",
)
@click.option("--reset-repo", is_flag=True, help="Use the default skills directory.")
@click.pass_obj
def config_command(
    obj: Dict[str, Any], scope: Optional[str], repo: Optional[Path], reset_repo: bool
) -> None:
    service = _config(obj)
    if scope is not None:
        service.set_default_scope(scope.lower())
    if repo is not None:
        service.set_skills_repo(repo)
    elif reset_repo:
        service.set_skills_repo(None)

    current = service.load_config()
    _ui().render_config(current, str(service.path), str(service.skills_repo_dir(current)))


@cli.command(help="Enable a skill provider.")
@click.argument("provider_id")
@click.pass_obj
def enable(obj: Dict[str, Any], provider_id: str) -> None:
    try:
        _config(obj).enable_provider(provider_id)
    except DotaiError as exc:
        raise click.ClickException(
            f"{exc}\nAvailable providers: {', '.join(skill_provider_ids())}"
        )
    provider = get_skill_provider(provider_id)
    _ui().render_message("providers", f"Enabled {provider.name if provider else provider_id}")


@cli.command(help="Disable a skill provider.")
@click.argument("provider_id")
@click.pass_obj
def disable(obj: Dict[str, Any], provider_id: str) -> None:
    provider = get_skill_provider(provider_id)
    if provider is None:
        raise click.ClickException(
            f"Unknown provider: {provider_id}\n"
            f"Available providers: {', '.join(skill_provider_ids())}"
        )
    _config(obj).disable_provider(provider_id)
    _ui().render_message("providers", f"Disabled {provider.name}", style=UIStyle.YELLOW)


@cli.command(help="Open the central skills repository folder.")
@click.pass_obj
def repo(obj: Dict[str, Any]) -> None:
    path = _config(obj).skills_repo_dir()
    try:
        open_path(path)
    except DotaiError as exc:
        raise _fail(exc)
    _ui().render_message("repo", f"Opening skills repository: {path}", style=UIStyle.DIM)


def main() -> int:
    try:
        cli(standalone_mode=False)
    except click.exceptions.Abort:
        return 1
    except click.exceptions.Exit as exc:
        code = exc.exit_code
        return code if isinstance(code, int) else 1
    except click.ClickException as exc:
        exc.show()
        return 2
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
