import json
import re
from functools import lru_cache
from pathlib import Path
from typing import Any

from jsonschema import Draft7Validator

from dotai.constants import SERVER_NAME_PATTERN
from dotai.errors import InvalidServerError

_SCHEMA_PATH = Path(__file__).resolve().parent / "server.schema.json"
_SERVER_NAME_RE = re.compile(SERVER_NAME_PATTERN)


def format_schema_error(error: Any) -> str:
    path = ".".join([str(part) for part in error.path])
    return f"{error.message} at {path}" if path else str(error.message)


@lru_cache(maxsize=1)
def server_validator() -> Draft7Validator:
    schema = json.loads(_SCHEMA_PATH.read_text(encoding="utf-8"))
    return Draft7Validator(schema)


def validate_server_entry(name: str, entry: Any) -> None:
    if not _SERVER_NAME_RE.fullmatch(name):
        raise InvalidServerError(
            name, "name must be alphanumeric with hyphens/underscores"
        )
    error = next(iter(server_validator().iter_errors(entry)), None)
    if error is not None:
        raise InvalidServerError(name, format_schema_error(error))
