"""termlog - typed, prefixed and colored console logging."""

__version__ = "0.1.0"

from .constants import LineType, LogType
from .json_colorizer import colorize_json, strip_ansi
from .logger import Logger, default_logger
from .sinks import BufferSink, detect_output_sink
from .factory import create_logger

__all__ = [
    "Logger",
    "LogType",
    "LineType",
    "default_logger",
    "create_logger",
    "colorize_json",
    "strip_ansi",
    "BufferSink",
    "detect_output_sink",
    "__version__",
]
