"""nex: Nimble Executor, a lightweight package manager for developer tools.

Import from submodules:
- cli: Click entry point (``nex.cli.cli:main``)
- core: Package lifecycle engine (resolve, install, execute)
"""

__version__ = "1.8.1"
