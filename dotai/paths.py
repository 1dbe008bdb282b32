"""Filesystem locations for the central repository.

Every function reads the environment on each call; nothing is cached and
nothing checks that the returned paths exist.
"""

import os
import sys
from pathlib import Path

from dotai.constants import (
    CONFIG_DIRNAME,
    CONFIG_FILENAME,
    MCP_CONFIG_FILENAME,
    SKILLS_DIRNAME,
)


def home_dir() -> Path:
    return Path.home()


def config_dir() -> Path:
    return home_dir() / CONFIG_DIRNAME


def skills_repo_dir() -> Path:
    return config_dir() / SKILLS_DIRNAME


def config_file_path() -> Path:
    return config_dir() / CONFIG_FILENAME


def mcp_config_path() -> Path:
    return config_dir() / MCP_CONFIG_FILENAME


def is_windows() -> bool:
    return sys.platform == "win32"


def is_macos() -> bool:
    return sys.platform == "darwin"


def app_data_dir() -> Path:
    return Path(os.environ.get("APPDATA", ""))


def expand_home(path: str | Path) -> Path:
    text = str(path)
    if text == "~" or text.startswith("~/") or text.startswith("~\\"):
        return home_dir() / text[2:]
    return Path(text)
