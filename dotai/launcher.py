"""Platform helpers for opening files, editors and the clipboard."""

import os
import shlex
import subprocess
from pathlib import Path

from dotai.errors import LaunchError
from dotai.paths import is_macos, is_windows

CLIPBOARD_TIMEOUT_SECONDS = 5


def editor_command() -> list[str]:
    for variable in ("EDITOR", "VISUAL"):
        value = os.environ.get(variable, "").strip()
        if value:
            return shlex.split(value)
    if is_macos():
        return ["open", "-t"]
    if is_windows():
        return ["notepad"]
    return ["xdg-open"]


def open_command() -> list[str]:
    if is_macos():
        return ["open"]
    if is_windows():
        return ["explorer"]
    return ["xdg-open"]


def clipboard_command() -> list[str]:
    if is_macos():
        return ["pbcopy"]
    if is_windows():
        return ["clip"]
    return ["xclip", "-selection", "clipboard"]


def _spawn_detached(command: list[str]) -> None:
    kwargs: dict = {
        "stdin": subprocess.DEVNULL,
        "stdout": subprocess.DEVNULL,
        "stderr": subprocess.DEVNULL,
    }
    if is_windows():
        kwargs["creationflags"] = getattr(subprocess, "DETACHED_PROCESS", 0)
    else:
        kwargs["start_new_session"] = True
    try:
        subprocess.Popen(command, **kwargs)
    except OSError as exc:
        raise LaunchError(command, exc.strerror or str(exc)) from exc


def open_path(path: Path) -> list[str]:
    command = [*open_command(), str(path)]
    _spawn_detached(command)
    return command


def open_in_editor(path: Path) -> list[str]:
    command = [*editor_command(), str(path)]
    _spawn_detached(command)
    return command


def copy_to_clipboard(text: str) -> bool:
    try:
        completed = subprocess.run(
            clipboard_command(),
            input=text,
            text=True,
            capture_output=True,
            timeout=CLIPBOARD_TIMEOUT_SECONDS,
            check=False,
        )
    except (OSError, subprocess.TimeoutExpired):
        return False
    return completed.returncode == 0
