"""Constants used throughout the termlog package."""

from enum import Enum
from typing import Dict, Mapping, Type


class LogType(str, Enum):
    """Categories a log line can belong to."""
    INFO = "info"
    WARN = "warn"
    ERROR = "error"
    DEBUG = "debug"
    SUCCESS = "success"
    MISC = "misc"


class LineType(str, Enum):
    """Escape sequence written in front of a message."""
    NEW = "new"
    CURRENT = "current"
    OVERLAP = "overlap"
    DOUBLE_NEW = "double_new"
    SPACE = "space"
    REPLACE = "replace"


# Escape Sequences
ESCAPE_SEQUENCES: Dict[LineType, str] = {
    LineType.NEW: "\n",
    LineType.CURRENT: "",
    LineType.OVERLAP: "\r",
    LineType.DOUBLE_NEW: "\n\n",
    LineType.SPACE: " ",
    LineType.REPLACE: "\u001b[2K\r",
}

# ANSI Colors
RESET = "\x1b[0m"
BLUE = "\x1b[34m"
YELLOW = "\x1b[33m"
RED = "\x1b[31m"
CYAN = "\x1b[36m"
GREEN = "\x1b[32m"
WHITE = "\x1b[37m"

COLORS: Dict[LogType, str] = {
    LogType.INFO: BLUE,
    LogType.WARN: YELLOW,
    LogType.ERROR: RED,
    LogType.DEBUG: CYAN,
    LogType.SUCCESS: GREEN,
    LogType.MISC: WHITE,
}

LABELS: Dict[LogType, str] = {log_type: log_type.value for log_type in LogType}

# JSON syntax colors
JSON_KEY_COLOR = BLUE
JSON_STRING_COLOR = GREEN
JSON_LITERAL_COLOR = YELLOW  # numbers, booleans and null

PREFIX_SEPARATOR = " |"


def _check_table(name: str, table: Mapping, enum_type: Type[Enum]) -> None:
    """Raise if a lookup table does not cover every member of its enum."""
    missing = [member.value for member in enum_type if member not in table]
    if missing:
        raise RuntimeError(f"{name} is missing entries for: {', '.join(missing)}")


_check_table("ESCAPE_SEQUENCES", ESCAPE_SEQUENCES, LineType)
_check_table("COLORS", COLORS, LogType)
_check_table("LABELS", LABELS, LogType)

LABEL_WIDTH = max(len(label) for label in LABELS.values())
MIN_LABEL_WIDTH = min(len(label) for label in LABELS.values())
