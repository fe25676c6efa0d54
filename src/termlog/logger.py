"""Console logger with typed, prefixed and colored output."""

import json
from typing import Any, Callable, Optional, Union

from .constants import (
    COLORS,
    ESCAPE_SEQUENCES,
    LABEL_WIDTH,
    LABELS,
    PREFIX_SEPARATOR,
    RESET,
    LineType,
    LogType,
)
from .json_colorizer import colorize_json
from .sinks import OutputSink, detect_output_sink

LogCallback = Callable[[LogType, str], None]
PrefixOverride = Callable[[LogType, Optional[bool], Optional[str]], str]

MAX_JSON_INDENT = 10


def dump_json(value: Any, indent: Optional[int] = None) -> str:
    """Serialize a value, compact when indent is missing or below 1.

    Indents wider than MAX_JSON_INDENT are clamped.
    """
    if indent is None or indent < 1:
        return json.dumps(value, separators=(",", ":"), ensure_ascii=False, allow_nan=False)
    return json.dumps(value, indent=min(indent, MAX_JSON_INDENT),
                      ensure_ascii=False, allow_nan=False)


class Logger:
    """Formats typed messages and hands them to an output sink.

    Attributes:
        use_color: Whether prefixes and JSON are colored by default
        output_sink: Callable that performs the actual write
        on_log: Optional callback receiving the raw message of every
            ``log`` and ``log_json`` call before it is written
        prefix_override: Optional replacement for ``get_prefix_for_type``
    """

    def __init__(self,
                 use_color: bool = True,
                 output_sink: Optional[OutputSink] = None,
                 on_log: Optional[LogCallback] = None,
                 prefix_override: Optional[PrefixOverride] = None):
        self.use_color = use_color
        self.output_sink = output_sink if output_sink is not None else detect_output_sink()
        self.on_log = on_log
        self.prefix_override = prefix_override

    def plain(self, message: str, line_type: Union[LineType, str] = LineType.NEW) -> None:
        """Write a message after the escape sequence of ``line_type``.

        This does not call ``on_log``.
        """
        escape_sequence = ESCAPE_SEQUENCES[LineType(line_type)]
        self.output_sink(f"{escape_sequence}{message}")

    def color_type(self, log_type: Union[LogType, str], text: str) -> str:
        """Wrap text in the color of a log type."""
        return f"{COLORS[LogType(log_type)]}{text}{RESET}"

    def get_prefix_for_type(self,
                            log_type: Union[LogType, str],
                            color_override: Optional[bool] = None,
                            text_override: Optional[str] = None) -> str:
        """Build the aligned prefix of a log type.

        Args:
            log_type: The log type
            color_override: Color the prefix regardless of ``use_color``
                when not None
            text_override: Label to show instead of the type name

        Returns:
            The label, upper-cased and padded to the widest type name,
            followed by " |"
        """
        log_type = LogType(log_type)
        if self.prefix_override:
            return self.prefix_override(log_type, color_override, text_override)

        label = LABELS[log_type] if text_override is None else text_override
        prefix = label.upper().ljust(LABEL_WIDTH) + PREFIX_SEPARATOR
        use_color = self.use_color if color_override is None else color_override
        return self.color_type(log_type, prefix) if use_color else prefix

    def log(self, log_type: Union[LogType, str], message: str) -> None:
        """Log a message with the prefix of its type."""
        log_type = LogType(log_type)
        if self.on_log:
            self.on_log(log_type, message)
        self.plain(f"{self.get_prefix_for_type(log_type)} {message}")

    def log_json(self, log_type: Union[LogType, str], value: Any, indent: int = 4) -> None:
        """Pretty-print a JSON-serializable value under the prefix of its type.

        ``on_log`` receives the compact serialization. An indent below 1
        writes the compact form on a single line. Continuation lines are
        aligned under the prefix column with an uncolored, empty label.

        Raises:
            TypeError: If the value is not JSON serializable
            ValueError: If the value contains NaN or infinite floats
        """
        log_type = LogType(log_type)
        if self.on_log:
            self.on_log(log_type, dump_json(value))

        text = dump_json(value, indent)
        if self.use_color:
            text = colorize_json(text)

        continuation = self.get_prefix_for_type(log_type, False, "")
        text = text.replace("\n", f"\n{continuation}")
        self.plain(f"{self.get_prefix_for_type(log_type)} {text}")

    def info(self, message: str) -> None:
        """Log a message as info."""
        self.log(LogType.INFO, message)

    def warn(self, message: str) -> None:
        """Log a message as a warning."""
        self.log(LogType.WARN, message)

    def error(self, message: str) -> None:
        """Log a message as an error."""
        self.log(LogType.ERROR, message)

    def debug(self, message: str) -> None:
        """Log a message as debug output."""
        self.log(LogType.DEBUG, message)

    def success(self, message: str) -> None:
        """Log a message as a success."""
        self.log(LogType.SUCCESS, message)

    def misc(self, message: str) -> None:
        """Log a message as miscellaneous."""
        self.log(LogType.MISC, message)


# Logger with default settings
default_logger = Logger()
