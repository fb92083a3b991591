"""Error boundary handling for CLI commands.

This module provides a decorator to catch well-known exceptions at CLI entry
points and display a single [ERROR] line instead of a stack trace.
"""

import functools
import logging
from collections.abc import Callable
from typing import Any

import click

from nex.cli.output import error_line, user_output
from nex.core.errors import NexError

logger = logging.getLogger(__name__)


def _debug_enabled() -> bool:
    ctx = click.get_current_context(silent=True)
    if ctx is None:
        return False
    return bool(getattr(ctx.find_root().obj, "debug", False))


def cli_error_boundary[T: Callable[..., Any]](func: T) -> T:
    """Decorator that catches well-known exceptions and displays clean error messages.

    Catches:
        - NexError: Every engine failure (resolution, install, execution)
        - FileNotFoundError: Missing files/directories
        - PermissionError: Permission denied errors
        - ValueError: Invalid input

    With --debug the exception propagates with its full stack trace.
    All other exceptions bubble up normally.

    Example:
        @click.command()
        @click.pass_obj
        @cli_error_boundary
        def my_command(ctx: NexContext):
            ...
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except (NexError, FileNotFoundError, PermissionError, ValueError) as e:
            if _debug_enabled():
                raise
            logger.debug("Command failed", exc_info=True)
            user_output(error_line(str(e)))
            for note in getattr(e, "__notes__", []):
                user_output(f"  {note}")
            raise SystemExit(1) from None

    return wrapper  # type: ignore[return-value]
