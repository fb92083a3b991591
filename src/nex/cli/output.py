"""Output utilities for CLI commands with clear intent.

user_output() is for messages meant for a person and goes to stderr.
machine_output() is for results a script may consume and goes to stdout.
"""

from typing import Any

import click


def user_output(message: Any = "", nl: bool = True, color: bool | None = None) -> None:
    """Output informational message for human users (stderr)."""
    click.echo(message, nl=nl, err=True, color=color)


def machine_output(message: Any = "", nl: bool = True, color: bool | None = None) -> None:
    """Output structured data for scripts (stdout)."""
    click.echo(message, nl=nl, err=False, color=color)


def error_line(message: str) -> str:
    return click.style("[ERROR]", fg="red", bold=True) + f" {message}"


def ok_line(message: str) -> str:
    return click.style("[OK]", fg="green") + f" {message}"


def info_line(message: str) -> str:
    return click.style("[INFO]", fg="blue") + f" {message}"
