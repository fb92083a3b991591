"""CLI argument checks with consistent [ERROR] output."""

from nex.cli.output import error_line, user_output


class Ensure:
    """Helper class for asserting invariants with consistent error handling."""

    @staticmethod
    def invariant(condition: bool, error_message: str) -> None:
        """Ensure condition is true, otherwise output styled error and exit.

        Raises:
            SystemExit: If condition is false (with exit code 1)
        """
        if not condition:
            user_output(error_line(error_message))
            raise SystemExit(1)

    @staticmethod
    def not_none[T](value: T | None, error_message: str) -> T:
        """Ensure value is not None, otherwise output styled error and exit.

        Returns:
            The value unchanged if not None (with narrowed type T)

        Raises:
            SystemExit: If value is None (with exit code 1)
        """
        if value is None:
            user_output(error_line(error_message))
            raise SystemExit(1)
        return value
