from nex.core.git.abc import Git
from nex.core.git.real import RealGit

__all__ = [
    "Git",
    "RealGit",
]
