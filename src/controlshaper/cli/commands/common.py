"""Shared helpers for CLI commands."""

import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import NoReturn, Optional

import click

from controlshaper.exceptions import format_error_for_display
from controlshaper.models import DeviceType, EditorConfig

logger = logging.getLogger(__name__)

DEVICE_CHOICE = click.Choice([dt.value for dt in DeviceType], case_sensitive=False)


@dataclass
class CliState:
    """Options of the top-level command, shared with subcommands."""

    config_path: Optional[Path] = None
    log_path: Optional[Path] = None

    def load_config(self) -> EditorConfig:
        """Load the editor config (defaults when the file is missing)."""
        return EditorConfig.load_or_default(self.config_path)


def get_state(ctx: click.Context) -> CliState:
    """Get the shared state, creating a default one for standalone invocation."""
    if not isinstance(ctx.obj, CliState):
        ctx.obj = CliState()
    return ctx.obj


def fail(error: Exception, state: Optional[CliState] = None) -> NoReturn:
    """Report an error without a traceback and exit with status 1."""
    logger.error(f"Command failed: {error}", exc_info=True)
    user_message, recovery_hint = format_error_for_display(error)

    click.echo(f"ERROR: {user_message}", err=True)
    if recovery_hint:
        click.echo(f"\n{recovery_hint}", err=True)
    if state is not None and state.log_path is not None:
        click.echo(f"\nFor details, check the log file: {state.log_path}", err=True)
    sys.exit(1)
