"""Fake Shell implementation for testing.

This fake enables testing runtime probing and command execution without
requiring specific tools to be installed.
"""

from pathlib import Path

from nex.core.shell.abc import Shell


class FakeShell(Shell):
    """In-memory fake implementation of shell operations.

    Constructor Injection:
    - All state is provided via constructor parameters
    - Only call tracking mutates after construction

    Examples:
        # Only python3 on PATH
        >>> shell = FakeShell(installed_tools={"python3": "/usr/bin/python3"})
        >>> shell.which("python") is None
        True

        # Install hook that always fails
        >>> shell = FakeShell(command_exit_codes={"false": 1})
    """

    def __init__(
        self,
        *,
        installed_tools: dict[str, str] | None = None,
        command_exit_codes: dict[str, int] | None = None,
        default_exit_code: int = 0,
    ) -> None:
        """Initialize fake with predetermined tool availability.

        Args:
            installed_tools: Mapping of tool name to executable path. Tools not in
                this mapping are reported as missing by which()
            command_exit_codes: Exit code per command line. A command matches when
                it ends with the key, so the "cd <path> &&" prefix can be omitted
            default_exit_code: Exit code for commands without an entry
        """
        self._installed_tools = installed_tools or {}
        self._command_exit_codes = command_exit_codes or {}
        self._default_exit_code = default_exit_code
        self._command_calls: list[tuple[str, Path | None]] = []

    def which(self, name: str) -> str | None:
        return self._installed_tools.get(name)

    def run(self, command: str, cwd: Path | None = None) -> int:
        """Track call to run and return the configured exit code.

        It does not execute any actual subprocess operations.
        """
        self._command_calls.append((command, cwd))
        for suffix, code in self._command_exit_codes.items():
            if command.endswith(suffix):
                return code
        return self._default_exit_code

    @property
    def command_calls(self) -> list[tuple[str, Path | None]]:
        """Get the list of run() calls as (command, cwd) tuples.

        This property is for test assertions only.
        """
        return self._command_calls.copy()
