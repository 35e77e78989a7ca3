"""Main CLI entry point."""

import logging
import logging.handlers
from pathlib import Path
from typing import Optional

import click

from .commands import evaluate, export, presets, tree
from .commands.common import CliState

logger = logging.getLogger(__name__)

LOG_DIR = Path.home() / ".controlshaper" / "logs"


def get_log_path(debug: bool, log_file: Optional[Path]) -> Path:
    """Resolve where log records go for the given flags."""
    if log_file:
        return log_file
    if debug:
        return Path.cwd() / "controlshaper-debug.log"
    return LOG_DIR / "controlshaper.log"


def setup_logging(verbose: int, debug: bool, log_file: Optional[Path], log_level: str) -> None:
    """
    Configure logging for the application.

    Args:
        verbose: Verbosity count (0 = WARNING, 1 = INFO, 2+ = DEBUG)
        debug: If True, enable debug mode with file logging
        log_file: Custom log file path (optional)
        log_level: Log level for file logging (DEBUG/INFO/WARNING/ERROR)
    """
    # Determine log level based on flags
    if debug or verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    # Override with explicit log level if provided
    if log_file:
        level = getattr(logging, log_level.upper())

    log_path = get_log_path(debug, log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    # Create rotating file handler (keeps last 5 files, max 10MB each)
    file_handler = logging.handlers.RotatingFileHandler(
        log_path,
        maxBytes=10 * 1024 * 1024,  # 10MB
        backupCount=5
    )
    file_handler.setLevel(level)
    file_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.addHandler(file_handler)

    logger.info(f"Logging configured: level={logging.getLevelName(level)}, file={log_path}")


@click.group()
@click.pass_context
@click.version_option(version="0.1.0", prog_name="controlshaper")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Editor config file (default: ~/.controlshaper/config.json)"
)
@click.option(
    '-v', '--verbose',
    count=True,
    help='Increase verbosity (-v: INFO, -vv: DEBUG)'
)
@click.option(
    '--debug',
    is_flag=True,
    help='Enable debug mode (DEBUG level, logs to ./controlshaper-debug.log)'
)
@click.option(
    '--log-file',
    type=click.Path(path_type=Path),
    default=None,
    help='Custom log file path'
)
@click.option(
    '--log-level',
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
    default='INFO',
    help='Log level for file logging (default: INFO)'
)
def cli(
    ctx,
    config_path: Optional[Path],
    verbose: int,
    debug: bool,
    log_file: Optional[Path],
    log_level: str
):
    """
    Controlshaper - inspect option trees and shape control responses.

    \b
    Examples:
      # Show the joystick options of a definitions file
      controlshaper tree controls.xml --device joystick

      # Sample a preset curve
      controlshaper evaluate --preset smooth --steps 10

      # Export saved overrides of joystick 2
      controlshaper export settings.json --device joystick --instance 2
    """
    setup_logging(verbose, debug, log_file, log_level)
    ctx.obj = CliState(config_path=config_path, log_path=get_log_path(debug, log_file))


cli.add_command(tree)
cli.add_command(presets)
cli.add_command(evaluate)
cli.add_command(export)

if __name__ == "__main__":
    cli()
