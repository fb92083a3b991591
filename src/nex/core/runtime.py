"""Language runtimes a package can declare, and probing for them on PATH."""

from dataclasses import dataclass
from enum import StrEnum

from nex.core.shell.abc import Shell


class RuntimeType(StrEnum):
    PYTHON = "python"
    NODE = "node"
    BASH = "bash"
    POWERSHELL = "powershell"
    BINARY = "binary"
    GO = "go"
    UNKNOWN = "unknown"


_SYNONYMS = {"nodejs": RuntimeType.NODE}

# Executables that satisfy each runtime, in preference order
RUNTIME_BINARIES: dict[RuntimeType, tuple[str, ...]] = {
    RuntimeType.PYTHON: ("python", "python3"),
    RuntimeType.NODE: ("node",),
    RuntimeType.BASH: ("bash",),
    RuntimeType.POWERSHELL: ("powershell", "pwsh"),
    RuntimeType.GO: ("go",),
}

DISPLAY_NAMES: dict[RuntimeType, str] = {
    RuntimeType.PYTHON: "Python",
    RuntimeType.NODE: "Node.js",
    RuntimeType.BASH: "Bash",
    RuntimeType.POWERSHELL: "PowerShell",
    RuntimeType.BINARY: "Binary",
    RuntimeType.GO: "Go",
    RuntimeType.UNKNOWN: "Unknown",
}

_INSTRUCTIONS: dict[str, str] = {
    "python": (
        "Install Python from https://www.python.org/downloads/\n"
        "  macOS:   brew install python\n"
        "  Debian:  sudo apt install python3\n"
        "  Windows: winget install Python.Python.3.12"
    ),
    "node": (
        "Install Node.js from https://nodejs.org/\n"
        "  macOS:   brew install node\n"
        "  Debian:  sudo apt install nodejs\n"
        "  Windows: winget install OpenJS.NodeJS.LTS"
    ),
    "bash": (
        "Install bash with your system package manager\n"
        "  Windows: use Git Bash (https://git-scm.com/) or WSL"
    ),
    "powershell": (
        "Install PowerShell from "
        "https://learn.microsoft.com/powershell/scripting/install/installing-powershell"
    ),
    "go": (
        "Install Go from https://go.dev/dl/\n"
        "  macOS:   brew install go\n"
        "  Debian:  sudo apt install golang"
    ),
    "git": (
        "Install Git from https://git-scm.com/downloads\n"
        "  macOS:   brew install git\n"
        "  Debian:  sudo apt install git\n"
        "  Windows: winget install Git.Git"
    ),
}


def parse_runtime_type(value: str | None) -> RuntimeType:
    """Parse a runtime tag case-insensitively. Unrecognised tags map to UNKNOWN."""
    if not value:
        return RuntimeType.UNKNOWN
    lowered = value.strip().lower()
    if lowered in _SYNONYMS:
        return _SYNONYMS[lowered]
    try:
        return RuntimeType(lowered)
    except ValueError:
        return RuntimeType.UNKNOWN


def install_instructions(name: str) -> str:
    """Human instructions for installing a runtime or tool."""
    return _INSTRUCTIONS.get(name, f"Install '{name}' and make sure it is on your PATH")


def find_runtime_binary(runtime: RuntimeType, shell: Shell) -> str | None:
    """Return the path of the first executable satisfying a runtime, or None."""
    for binary in RUNTIME_BINARIES.get(runtime, ()):
        path = shell.which(binary)
        if path is not None:
            return path
    return None


def launcher_command(runtime: RuntimeType, entrypoint: str) -> str:
    """Command line that launches an entrypoint under a runtime."""
    match runtime:
        case RuntimeType.PYTHON:
            return f'python "{entrypoint}"'
        case RuntimeType.NODE:
            return f'node "{entrypoint}"'
        case RuntimeType.POWERSHELL:
            return f'powershell -File "{entrypoint}"'
        case RuntimeType.BASH:
            return f'bash "{entrypoint}"'
        case _:
            return f'"{entrypoint}"'


@dataclass(frozen=True)
class ToolStatus:
    """Availability of one tool on PATH."""

    name: str
    path: str | None

    @property
    def found(self) -> bool:
        return self.path is not None


def probe_tools(shell: Shell) -> list[ToolStatus]:
    """Probe PATH for every known runtime plus git."""
    statuses = [
        ToolStatus(name=DISPLAY_NAMES[runtime], path=find_runtime_binary(runtime, shell))
        for runtime in RUNTIME_BINARIES
    ]
    statuses.append(ToolStatus(name="Git", path=shell.which("git")))
    return statuses
