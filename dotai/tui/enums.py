from enum import Enum


class UIStyle(str, Enum):
    BLUE = "blue"
    GREEN = "green"
    YELLOW = "yellow"
    RED = "red"
    CYAN = "cyan"
    MAGENTA = "magenta"
    DIM = "dim"


class ResultMark(str, Enum):
    OK = "✓"
    SKIP = "-"
    FAIL = "✗"
