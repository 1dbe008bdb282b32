import json
import shutil
from datetime import datetime, timezone
from pathlib import Path
from typing import Any


def now_stamp() -> str:
    return datetime.now().strftime("%Y%m%d-%H%M%S")


def now_iso() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="seconds")


def read_json(path: Path) -> Any:
    with path.open("r", encoding="utf-8") as handle:
        return json.load(handle)


def read_json_safe(path: Path) -> tuple[Any | None, str | None]:
    if not path.exists():
        return None, None
    if path.stat().st_size == 0:
        return None, None
    try:
        return read_json(path), None
    except Exception as exc:
        return None, str(exc)


def read_json_object(path: Path) -> tuple[dict[str, Any], str | None]:
    """Read a JSON object, collapsing absent, empty or broken files to ``{}``.

    The error text is returned alongside so callers that care can tell a
    missing file from a corrupt one.
    """
    payload, error = read_json_safe(path)
    if error is not None:
        return {}, error
    if payload is None:
        return {}, None
    if not isinstance(payload, dict):
        return {}, "must be a JSON object"
    return payload, None


def write_json(path: Path, payload: Any) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as handle:
        json.dump(payload, handle, indent=2, sort_keys=False)
        handle.write("\n")


def backup_file(path: Path) -> Path:
    backup_path = Path(f"{path}.bak-{now_stamp()}")
    shutil.copy2(path, backup_path)
    return backup_path


def replace_tree(source: Path, target: Path) -> None:
    """Make ``target`` an exact recursive copy of ``source``."""
    if target.is_symlink() or target.is_file():
        target.unlink()
    elif target.exists():
        shutil.rmtree(target)
    target.parent.mkdir(parents=True, exist_ok=True)
    shutil.copytree(source, target)


def remove_path(path: Path) -> bool:
    if path.is_symlink() or path.is_file():
        path.unlink()
        return True
    if path.exists():
        shutil.rmtree(path)
        return True
    return False


def split_csv(value: str | None) -> list[str]:
    if not value:
        return []
    return [item.strip() for item in value.split(",") if item.strip()]


def compact_home_path(path: str | Path) -> str:
    text = str(path)
    home = str(Path.home())
    if text == home:
        return "~"
    home_prefix = f"{home}/"
    if text.startswith(home_prefix):
        return f"~/{text[len(home_prefix):]}"
    return text


def compact_home_paths_in_text(text: str) -> str:
    home = str(Path.home())
    if text == home:
        return "~"
    return text.replace(f"{home}/", "~/")


def is_under(path: Path, root: Path) -> bool:
    """True when ``path`` sits strictly inside ``root``.

    The last component is not followed, so a symlinked entry still counts as
    inside the directory that holds it.
    """
    try:
        relative = (path.parent.resolve() / path.name).relative_to(root.resolve())
    except ValueError:
        return False
    return bool(relative.parts) and ".." not in relative.parts
