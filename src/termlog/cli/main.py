"""Main CLI entry point for termlog."""

import json
from typing import Optional, Tuple

import click

from termlog import __version__
from termlog.config import LoggerSettings
from termlog.constants import LineType, LogType
from termlog.factory import create_logger
from termlog.logger import Logger
from termlog.logging_config import setup_logging, get_logger

LOG_TYPES = [log_type.value for log_type in LogType]
LINE_TYPES = [line_type.value for line_type in LineType]

color_option = click.option(
    "--color/--no-color", default=None,
    help="Force colored output on or off (default: from settings)",
)


def make_logger(use_color: Optional[bool]) -> Logger:
    """Create a logger that writes through click."""
    if use_color is None:
        use_color = LoggerSettings.from_env().effective_use_color()

    def sink(text: str) -> None:
        click.echo(text, nl=False, color=use_color)

    return create_logger(use_color=use_color, output_sink=sink)


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.pass_context
def main(ctx: click.Context, verbose: bool) -> None:
    """termlog - typed, prefixed and colored console logging."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose

    # Set up logging
    setup_logging(verbose)


@main.command()
@click.argument("log_type", type=click.Choice(LOG_TYPES))
@click.argument("message", nargs=-1, required=True)
@color_option
def log(log_type: str, message: Tuple[str, ...], color: Optional[bool]) -> None:
    """Log a MESSAGE with the prefix of LOG_TYPE."""
    logger = make_logger(color)
    logger.log(log_type, " ".join(message))
    click.echo()


@main.command()
@click.argument("message", nargs=-1, required=True)
@click.option("--line", "-l", "line_type", type=click.Choice(LINE_TYPES),
              default=LineType.NEW.value, help="Escape sequence to write first (default: new)")
def plain(message: Tuple[str, ...], line_type: str) -> None:
    """Write a MESSAGE without a prefix."""
    logger = make_logger(False)
    logger.plain(" ".join(message), line_type)
    click.echo()


@main.command("json")
@click.argument("log_type", type=click.Choice(LOG_TYPES))
@click.argument("source", type=click.File("r"), default="-")
@click.option("--indent", "-i", type=click.IntRange(min=0), default=None,
              help="Indent width (default: from settings)")
@color_option
def json_command(log_type: str, source, indent: Optional[int], color: Optional[bool]) -> None:
    """Pretty-print a JSON document read from SOURCE (default: stdin)."""
    logger = get_logger('cli')
    if indent is None:
        indent = LoggerSettings.from_env().json_indent

    try:
        value = json.load(source)
    except json.JSONDecodeError as e:
        logger.error(f"Invalid JSON input: {e}")
        raise click.ClickException(f"Invalid JSON input: {e}")

    logger.debug(f"Loaded JSON document of type {type(value).__name__}")
    try:
        make_logger(color).log_json(log_type, value, indent)
    except ValueError as e:
        logger.error(f"Cannot serialize JSON input: {e}")
        raise click.ClickException(f"Cannot serialize JSON input: {e}")
    click.echo()


@main.command()
@color_option
def types(color: Optional[bool]) -> None:
    """Show the prefix of every log type."""
    logger = make_logger(color)
    for log_type in LogType:
        logger.plain(logger.get_prefix_for_type(log_type), LineType.CURRENT)
        click.echo()


if __name__ == "__main__":
    main()
