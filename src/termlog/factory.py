"""Factory functions for creating configured loggers."""

from typing import Optional

from .config import LoggerSettings, settings as global_settings
from .logger import LogCallback, Logger, PrefixOverride
from .logging_config import get_logger
from .sinks import OutputSink


def create_logger(settings: Optional[LoggerSettings] = None,
                  use_color: Optional[bool] = None,
                  output_sink: Optional[OutputSink] = None,
                  on_log: Optional[LogCallback] = None,
                  prefix_override: Optional[PrefixOverride] = None) -> Logger:
    """Create a logger from settings, letting explicit arguments win.

    Args:
        settings: Settings to read defaults from (defaults to the global settings)
        use_color: Color flag, overriding the settings when given
        output_sink: Sink to write to (defaults to the detected sink)
        on_log: Optional observer callback
        prefix_override: Optional prefix builder

    Returns:
        Configured Logger instance
    """
    logger = get_logger('factory')
    settings = settings or global_settings
    if use_color is None:
        use_color = settings.effective_use_color()
    logger.debug(f"Creating logger with use_color={use_color}")
    logger.debug(f"Custom sink provided: {'Yes' if output_sink is not None else 'No'}")

    return Logger(
        use_color=use_color,
        output_sink=output_sink,
        on_log=on_log,
        prefix_override=prefix_override,
    )
