"""Error kinds distinguished by the package lifecycle engine.

Every error raised by ``nex.core`` derives from NexError so the CLI error
boundary can render it as a single ``[ERROR]`` line.
"""


class NexError(Exception):
    """Base class for all engine errors."""


class TransportError(NexError):
    """Raised when an HTTP request fails to complete."""

    def __init__(self, url: str, reason: str) -> None:
        self.url = url
        self.reason = reason
        super().__init__(f"Failed to fetch {url}: {reason}")


class HttpStatusError(NexError):
    """Raised when an HTTP request completes with a non-2xx status."""

    def __init__(self, url: str, status_code: int, message: str | None = None) -> None:
        self.url = url
        self.status_code = status_code
        super().__init__(message or f"Request to {url} failed (HTTP {status_code})")


class ParseError(NexError):
    """Raised when a manifest, index or identifier is malformed."""


class ManifestParseError(ParseError):
    """Raised when a package manifest is malformed or missing required fields."""


class RegistryParseError(ParseError):
    """Raised when the registry index is malformed."""


class InvalidPackageIdError(ParseError):
    """Raised when a string is not a valid author.name identifier."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(
            f"Invalid package ID '{value}'. Expected: author.package-name "
            "(lowercase letters, digits and '-')"
        )


class PackageNotFoundError(NexError):
    """Raised when a short name matches nothing in the registry."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Package '{name}' not found in registry")


class AmbiguousPackageError(NexError):
    """Raised when a short name matches more than one registry entry."""

    def __init__(self, name: str, candidates: list[str]) -> None:
        self.name = name
        self.candidates = candidates
        super().__init__(
            f"Multiple packages match '{name}': {', '.join(candidates)}. "
            "Use full ID (author.package-name)"
        )


class NotInstalledError(NexError):
    """Raised when an operation needs a package that is not installed."""

    def __init__(self, package_id: str) -> None:
        self.package_id = package_id
        super().__init__(f"Package '{package_id}' is not installed")


class AlreadyInstalledError(NexError):
    """Raised when the install directory for a package already exists."""

    def __init__(self, package_id: str) -> None:
        self.package_id = package_id
        super().__init__(f"Package '{package_id}' is already installed")


class NoSuchCommandError(NexError):
    """Raised when the requested command is not declared and has no fallback."""

    def __init__(self, package_id: str, command: str, available: list[str]) -> None:
        self.package_id = package_id
        self.command = command
        self.available = available
        message = f"No command '{command}' found for package {package_id}"
        if available:
            message += f" (available: {', '.join(available)})"
        super().__init__(message)


class RuntimeMissingError(NexError):
    """Raised when a required runtime binary is not on PATH."""

    def __init__(self, runtime: str, instructions: str) -> None:
        self.runtime = runtime
        self.instructions = instructions
        super().__init__(f"Required runtime '{runtime}' is not installed.\n{instructions}")


class SubprocessFailedError(NexError):
    """Raised when git or an executed command exits non-zero."""

    def __init__(self, command: str, returncode: int, operation: str) -> None:
        self.command = command
        self.returncode = returncode
        self.operation = operation
        super().__init__(f"Failed to {operation} (exit code {returncode})\nCommand: {command}")


class InvalidAliasError(NexError):
    """Raised when an alias shortcut is not acceptable."""


class InvalidConfigValueError(NexError):
    """Raised when a config value does not fit its key."""
