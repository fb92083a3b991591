from nex.core.shell.abc import Shell
from nex.core.shell.real import RealShell

__all__ = [
    "RealShell",
    "Shell",
]
