"""Syntax coloring for serialized JSON documents."""

import re

from .constants import JSON_KEY_COLOR, JSON_LITERAL_COLOR, JSON_STRING_COLOR, RESET

# Strings are tried first so digits and literals inside them are never matched.
_TOKEN_PATTERN = re.compile(
    r"""
    (?P<string>"(?:\\.|[^"\\])*")(?P<colon>\s*:)?
    | (?P<number>-?\d+(?:\.\d+)?(?:[eE][+-]?\d+)?)
    | (?P<literal>true|false|null)
    """,
    re.VERBOSE,
)

_ANSI_PATTERN = re.compile(r"\x1b\[[0-9;]*[A-Za-z]")


def _paint(color: str, text: str) -> str:
    return f"{color}{text}{RESET}"


def _color_token(match: "re.Match[str]") -> str:
    string = match.group("string")
    if string is not None:
        colon = match.group("colon")
        if colon is not None:
            return _paint(JSON_KEY_COLOR, string) + colon
        return _paint(JSON_STRING_COLOR, string)
    return _paint(JSON_LITERAL_COLOR, match.group(0))


def colorize_json(text: str) -> str:
    """Color keys, strings, numbers, booleans and null in a JSON document.

    The document is scanned once from left to right and each token span is
    wrapped in place, so a value that repeats the text of another token
    (a string "42" next to a number 42, or a repeated key name) only colors
    its own occurrence.

    Args:
        text: Serialized JSON, compact or pretty-printed

    Returns:
        The same document with ANSI color codes around each token
    """
    return _TOKEN_PATTERN.sub(_color_token, text)


def strip_ansi(text: str) -> str:
    """Remove ANSI escape sequences from text."""
    return _ANSI_PATTERN.sub("", text)
