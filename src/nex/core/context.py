"""Engine context with dependency injection.

The NexContext dataclass holds every collaborator of the package lifecycle
engine (HTTP, git, shell, stores, registry) and is created once at the CLI
entry point, then threaded through the application. There are no
process-wide singletons.
"""

import os
from dataclasses import dataclass
from pathlib import Path

from nex.core.alias_store import AliasStore
from nex.core.config_store import DEFAULT_REGISTRY_URL, ConfigStore
from nex.core.git.abc import Git
from nex.core.http.abc import HttpFetcher
from nex.core.installed_store import InstalledStore
from nex.core.paths import NexPaths, discover_home
from nex.core.registry import Registry
from nex.core.resolver import Resolver
from nex.core.shell.abc import Shell
from nex.core.user_feedback import UserFeedback


@dataclass(frozen=True)
class NexContext:
    """Immutable context holding all dependencies for nex operations.

    Attributes:
        http: HTTP fetcher used for registry access
        git: Git integration used to clone and update packages
        shell: PATH probing and command execution
        feedback: User-facing progress output
        paths: Layout of the Nex home directory
        config_store: config.json
        alias_store: aliases.json
        installed_store: installed.json
        registry: Registry client bound to the configured base URL
        os_name: Value of os.name the engine behaves as ("posix" or "nt")
        debug: Show full stack traces for errors
    """

    http: HttpFetcher
    git: Git
    shell: Shell
    feedback: UserFeedback
    paths: NexPaths
    config_store: ConfigStore
    alias_store: AliasStore
    installed_store: InstalledStore
    registry: Registry
    os_name: str
    debug: bool

    @property
    def resolver(self) -> Resolver:
        return Resolver(self.alias_store, self.registry)

    @staticmethod
    def for_test(
        home: Path,
        http: HttpFetcher | None = None,
        git: Git | None = None,
        shell: Shell | None = None,
        feedback: UserFeedback | None = None,
        registry_url: str = DEFAULT_REGISTRY_URL,
        os_name: str = "posix",
        debug: bool = False,
    ) -> "NexContext":
        """Create test context with fakes for any unspecified integration.

        Args:
            home: Nex home directory (usually under pytest's tmp_path)
            http: Optional HttpFetcher. If None, creates empty FakeHttpFetcher.
            git: Optional Git. If None, creates empty FakeGit.
            shell: Optional Shell. If None, creates empty FakeShell (nothing on PATH).
            feedback: Optional UserFeedback. If None, creates FakeUserFeedback.
            registry_url: Registry base URL
            os_name: Platform to behave as
            debug: Whether to enable debug mode

        Example:
            >>> http = FakeHttpFetcher(responses={index_url: index_json})
            >>> ctx = NexContext.for_test(tmp_path / ".nex", http=http)
        """
        from nex.core.git.fake import FakeGit
        from nex.core.http.fake import FakeHttpFetcher
        from nex.core.shell.fake import FakeShell
        from nex.core.user_feedback import FakeUserFeedback

        resolved_http: HttpFetcher = http if http is not None else FakeHttpFetcher()
        paths = NexPaths(home)
        paths.ensure_directories()

        return NexContext(
            http=resolved_http,
            git=git if git is not None else FakeGit(),
            shell=shell if shell is not None else FakeShell(),
            feedback=feedback if feedback is not None else FakeUserFeedback(),
            paths=paths,
            config_store=ConfigStore(paths.config_file),
            alias_store=AliasStore(paths.aliases_file),
            installed_store=InstalledStore(paths.installed_file),
            registry=Registry(registry_url, resolved_http),
            os_name=os_name,
            debug=debug,
        )


def create_context(*, debug: bool) -> NexContext:
    """Create production context with real implementations.

    Called once at CLI entry point. Creates the Nex home directories and
    reads the registry URL from config.json.
    """
    from nex.core.git.real import RealGit
    from nex.core.http.real import RealHttpFetcher
    from nex.core.shell.real import RealShell
    from nex.core.user_feedback import InteractiveFeedback

    paths = NexPaths(discover_home())
    paths.ensure_directories()

    config_store = ConfigStore(paths.config_file)
    http = RealHttpFetcher()

    return NexContext(
        http=http,
        git=RealGit(),
        shell=RealShell(),
        feedback=InteractiveFeedback(),
        paths=paths,
        config_store=config_store,
        alias_store=AliasStore(paths.aliases_file),
        installed_store=InstalledStore(paths.installed_file),
        registry=Registry(config_store.registry_url(), http),
        os_name=os.name,
        debug=debug,
    )
