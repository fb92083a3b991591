"""User-facing progress output for engine operations."""

from abc import ABC, abstractmethod

import click

from nex.cli.output import user_output


class UserFeedback(ABC):
    """Progress and status messages emitted by core operations.

    Core code calls ctx.feedback instead of printing, so commands and tests
    decide where the messages go.

    Usage:
        ctx.feedback.info("Cloning from https://...")
        ctx.feedback.success("Installed alice.hello v1.0.0")
        ctx.feedback.warning("Install command failed (exit code 1)")
    """

    @abstractmethod
    def info(self, message: str) -> None:
        """Show informational message."""

    @abstractmethod
    def success(self, message: str) -> None:
        """Show success message."""

    @abstractmethod
    def warning(self, message: str) -> None:
        """Show non-fatal problem."""


class InteractiveFeedback(UserFeedback):
    """Tagged, coloured messages on stderr."""

    def info(self, message: str) -> None:
        user_output(click.style("[INFO]", fg="blue") + f" {message}")

    def success(self, message: str) -> None:
        user_output(click.style("[OK]", fg="green") + f" {message}")

    def warning(self, message: str) -> None:
        user_output(click.style("[WARN]", fg="yellow") + f" {message}")


class FakeUserFeedback(UserFeedback):
    """Records messages for test assertions instead of printing."""

    def __init__(self) -> None:
        self._messages: list[tuple[str, str]] = []

    def info(self, message: str) -> None:
        self._messages.append(("info", message))

    def success(self, message: str) -> None:
        self._messages.append(("success", message))

    def warning(self, message: str) -> None:
        self._messages.append(("warning", message))

    @property
    def messages(self) -> list[tuple[str, str]]:
        """Get recorded (level, message) pairs.

        This property is for test assertions only.
        """
        return self._messages.copy()

    def messages_at(self, level: str) -> list[str]:
        return [message for lvl, message in self._messages if lvl == level]
