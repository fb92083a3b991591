"""Tests for command selection, the python3 fall-back and package execution."""

import shlex
from pathlib import Path

import pytest

from nex.core.context import NexContext
from nex.core.errors import (
    AmbiguousPackageError,
    InvalidPackageIdError,
    ManifestParseError,
    NoSuchCommandError,
    NotInstalledError,
    RuntimeMissingError,
)
from nex.core.executor import (
    apply_python_fallback,
    build_shell_invocation,
    ensure_runtime,
    execute_package,
    load_local_manifest,
    run_package,
    select_command_template,
)
from nex.core.git.fake import FakeGit
from nex.core.manifest import parse_manifest
from nex.core.shell.fake import FakeShell
from tests.test_utils.registry import REGISTRY_URL, make_manifest, registry_http

ONLY_PYTHON3 = {"python3": "/usr/bin/python3"}


def _install_locally(home: Path, package_id: str, manifest_text: str) -> Path:
    """Materialise an installed package without going through the installer."""
    install_path = home / "packages" / package_id
    install_path.mkdir(parents=True)
    (install_path / "manifest.json").write_text(manifest_text, encoding="utf-8")
    return install_path


# ============================================================================
# load_local_manifest
# ============================================================================


def test_load_local_manifest_prefers_manifest_json(tmp_path: Path) -> None:
    (tmp_path / "manifest.json").write_text(make_manifest(version="2.0.0"), encoding="utf-8")
    (tmp_path / "nex.json").write_text(make_manifest(version="1.0.0"), encoding="utf-8")

    assert load_local_manifest(tmp_path).version == "2.0.0"


def test_load_local_manifest_falls_back_to_nex_json(tmp_path: Path) -> None:
    (tmp_path / "nex.json").write_text(make_manifest(version="1.0.0"), encoding="utf-8")

    assert load_local_manifest(tmp_path).version == "1.0.0"


def test_load_local_manifest_missing(tmp_path: Path) -> None:
    with pytest.raises(ManifestParseError, match="No manifest.json or nex.json"):
        load_local_manifest(tmp_path)


# ============================================================================
# ensure_runtime
# ============================================================================


def test_python_runtime_satisfied_by_python3() -> None:
    manifest = parse_manifest(make_manifest(runtime="python"))

    ensure_runtime(manifest, FakeShell(installed_tools=ONLY_PYTHON3))


def test_powershell_runtime_satisfied_by_pwsh() -> None:
    manifest = parse_manifest(make_manifest(runtime="powershell"))

    ensure_runtime(manifest, FakeShell(installed_tools={"pwsh": "/usr/bin/pwsh"}))


@pytest.mark.parametrize("runtime", ["binary", "unknown", None])
def test_unprobed_runtimes(runtime: str | None) -> None:
    ensure_runtime(parse_manifest(make_manifest(runtime=runtime)), FakeShell())


def test_missing_runtime_carries_instructions() -> None:
    manifest = parse_manifest(make_manifest(runtime="node"))

    with pytest.raises(RuntimeMissingError) as exc_info:
        ensure_runtime(manifest, FakeShell(installed_tools=ONLY_PYTHON3))

    assert exc_info.value.runtime == "node"
    assert "https://nodejs.org/" in exc_info.value.instructions


# ============================================================================
# select_command_template
# ============================================================================


def test_explicit_command_wins_over_entrypoint() -> None:
    manifest = parse_manifest(
        make_manifest(entrypoint="main.py", runtime="python", commands={"default": "make run"})
    )

    assert select_command_template(manifest, "default") == "make run"


@pytest.mark.parametrize(
    ("runtime", "expected"),
    [
        ("python", 'python "main.x"'),
        ("node", 'node "main.x"'),
        ("powershell", 'powershell -File "main.x"'),
        ("bash", 'bash "main.x"'),
        ("binary", '"main.x"'),
        ("go", '"main.x"'),
    ],
)
def test_default_falls_back_to_entrypoint_launcher(runtime: str, expected: str) -> None:
    manifest = parse_manifest(make_manifest(entrypoint="main.x", runtime=runtime))

    assert select_command_template(manifest, "default") == expected


def test_entrypoint_fallback_only_for_default() -> None:
    manifest = parse_manifest(
        make_manifest(entrypoint="main.py", runtime="python", commands={"lint": "ruff ."})
    )

    with pytest.raises(NoSuchCommandError) as exc_info:
        select_command_template(manifest, "test")

    assert exc_info.value.available == ["lint"]
    assert "available: lint" in str(exc_info.value)


def test_no_default_and_no_entrypoint() -> None:
    with pytest.raises(NoSuchCommandError, match="No command 'default'"):
        select_command_template(parse_manifest(make_manifest()), "default")


# ============================================================================
# apply_python_fallback
# ============================================================================


@pytest.mark.parametrize(
    ("template", "expected"),
    [
        ("python app.py", "python3 app.py"),
        ("  python app.py", "  python3 app.py"),
        ("python", "python3"),
        ("pip install . && python app.py", "pip install . && python3 app.py"),
        ("python a.py&&python b.py", "python3 a.py&&python3 b.py"),
        ('python app.py "python inside quotes"', 'python3 app.py "python inside quotes"'),
        ("echo 'x & python y'", "echo 'x & python y'"),
        ("python3 app.py", "python3 app.py"),
        ("pythonw app.py", "pythonw app.py"),
        ("echo python", "echo python"),
        ("./python app.py", "./python app.py"),
    ],
)
def test_python_fallback_rewrites_command_positions(template: str, expected: str) -> None:
    shell = FakeShell(installed_tools=ONLY_PYTHON3)

    assert apply_python_fallback(template, shell, "posix") == expected


def test_python_fallback_not_applied_when_python_exists() -> None:
    shell = FakeShell(installed_tools={"python": "/usr/bin/python", **ONLY_PYTHON3})

    assert apply_python_fallback("python app.py", shell, "posix") == "python app.py"


def test_python_fallback_not_applied_without_python3() -> None:
    assert apply_python_fallback("python app.py", FakeShell(), "posix") == "python app.py"


def test_python_fallback_not_applied_on_windows() -> None:
    shell = FakeShell(installed_tools=ONLY_PYTHON3)

    assert apply_python_fallback("python app.py", shell, "nt") == "python app.py"


# ============================================================================
# build_shell_invocation
# ============================================================================


def test_space_containing_argument_survives_shell_parsing() -> None:
    invocation = build_shell_invocation(
        Path("/home/ada/.nex/packages/alice.hello"), "python app.py", ["a b", "c"]
    )

    assert invocation == 'cd "/home/ada/.nex/packages/alice.hello" && python app.py "a b" c'
    assert shlex.split(invocation)[-2:] == ["a b", "c"]


def test_invocation_without_arguments() -> None:
    invocation = build_shell_invocation(Path("/pkgs/alice.hello"), "make", [])

    assert invocation == 'cd "/pkgs/alice.hello" && make'


# ============================================================================
# execute_package / run_package
# ============================================================================


def test_execute_returns_child_exit_code(nex_home: Path) -> None:
    install_path = _install_locally(
        nex_home, "alice.hello", make_manifest(commands={"default": "make run"})
    )
    shell = FakeShell(command_exit_codes={"make run --fast": 3})
    ctx = NexContext.for_test(nex_home, shell=shell)

    exit_code = execute_package(ctx, "alice.hello", "default", ["--fast"])

    assert exit_code == 3
    assert shell.command_calls == [(f'cd "{install_path}" && make run --fast', None)]


def test_execute_requires_installed_package(nex_home: Path) -> None:
    ctx = NexContext.for_test(nex_home)

    with pytest.raises(NotInstalledError):
        execute_package(ctx, "alice.hello", "default", [])


def test_execute_rejects_path_like_ids(nex_home: Path) -> None:
    shell = FakeShell()
    ctx = NexContext.for_test(nex_home, shell=shell)

    with pytest.raises(InvalidPackageIdError):
        execute_package(ctx, "../..", "default", [])

    assert shell.command_calls == []


def test_run_auto_installs_and_uses_python3(nex_home: Path) -> None:
    manifest = make_manifest(
        "alice.hello", runtime="python", commands={"default": "python hello.py"}
    )
    git = FakeGit()
    shell = FakeShell(installed_tools=ONLY_PYTHON3)
    ctx = NexContext.for_test(
        nex_home,
        http=registry_http({"alice.hello": manifest}),
        git=git,
        shell=shell,
        registry_url=REGISTRY_URL,
    )

    exit_code = run_package(ctx, "hello")

    install_path = nex_home / "packages" / "alice.hello"
    assert exit_code == 0
    assert len(git.clone_calls) == 1
    assert shell.command_calls == [(f'cd "{install_path}" && python3 hello.py', None)]


def test_run_installed_package_skips_registry(nex_home: Path) -> None:
    _install_locally(nex_home, "alice.hello", make_manifest(commands={"greet": "echo hi"}))
    http = registry_http({})
    shell = FakeShell()
    ctx = NexContext.for_test(nex_home, http=http, shell=shell, registry_url=REGISTRY_URL)

    run_package(ctx, "alice.hello", "greet", ["Ada Lovelace"])

    assert http.requested_urls == []
    assert shell.command_calls[0][0].endswith('echo hi "Ada Lovelace"')


def test_run_ambiguous_name_attempts_nothing(nex_home: Path) -> None:
    git = FakeGit()
    shell = FakeShell()
    http = registry_http(
        {
            "alice.tool": make_manifest("alice.tool"),
            "bob.tool": make_manifest("bob.tool"),
        }
    )
    ctx = NexContext.for_test(nex_home, http=http, git=git, shell=shell, registry_url=REGISTRY_URL)

    with pytest.raises(AmbiguousPackageError):
        run_package(ctx, "tool")

    assert git.clone_calls == []
    assert shell.command_calls == []


def test_run_missing_runtime_spawns_nothing(nex_home: Path) -> None:
    _install_locally(
        nex_home,
        "alice.hello",
        make_manifest(runtime="python", commands={"default": "python hello.py"}),
    )
    shell = FakeShell()
    ctx = NexContext.for_test(nex_home, shell=shell)

    with pytest.raises(RuntimeMissingError) as exc_info:
        run_package(ctx, "alice.hello")

    assert exc_info.value.runtime == "python"
    assert shell.command_calls == []


def test_run_mixed_case_id_uses_canonical_directory(nex_home: Path) -> None:
    install_path = _install_locally(
        nex_home, "alice.hello", make_manifest(commands={"default": "make run"})
    )
    git = FakeGit()
    shell = FakeShell()
    ctx = NexContext.for_test(
        nex_home, http=registry_http({}), git=git, shell=shell, registry_url=REGISTRY_URL
    )

    assert run_package(ctx, "Alice.Hello") == 0

    assert git.clone_calls == []
    assert shell.command_calls == [(f'cd "{install_path}" && make run', None)]
