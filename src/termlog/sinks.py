"""Output sinks and default sink detection."""

import sys
from typing import Callable, List, TextIO

from .logging_config import get_logger

OutputSink = Callable[[str], None]


def stdout_sink(text: str) -> None:
    """Write text straight to the current ``sys.stdout`` and flush it."""
    stream = sys.stdout
    stream.write(text)
    stream.flush()


def console_sink(text: str) -> None:
    """Write text through ``print``; a no-op when the process has no stdout."""
    print(text, end="", flush=True)


def stream_sink(stream: TextIO) -> OutputSink:
    """Create a sink bound to a text stream."""
    def write(text: str) -> None:
        stream.write(text)
        stream.flush()

    return write


def detect_output_sink() -> OutputSink:
    """Pick the default sink for the running environment."""
    logger = get_logger('sinks')
    stream = sys.stdout
    if stream is not None and callable(getattr(stream, "write", None)):
        logger.debug("Using raw stdout writer")
        return stdout_sink
    logger.debug("No usable stdout, falling back to console writer")
    return console_sink


class BufferSink:
    """Sink that keeps every write in memory."""

    def __init__(self):
        self.writes: List[str] = []

    def __call__(self, text: str) -> None:
        self.writes.append(text)

    def getvalue(self) -> str:
        return "".join(self.writes)

    def clear(self) -> None:
        self.writes.clear()
