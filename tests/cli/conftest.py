"""Shared fixtures for end-to-end CLI tests.

Every CLI e2e test gets an isolated temporary directory to work in,
so tests never pollute each other or the real workspace.

``run_qsite`` drives the real entry point (``commands.main``) in-process
with a patched ``sys.argv``. This covers the full chain: ``qsite`` entry
point → click dispatch → ``scaffold_command`` → scaffolding → materializer.

``run_qsite_subprocess`` runs the installed ``qsite`` script in a child
process, exactly as a user would type it. If the entry point is not
installed (e.g. running from a bare checkout), tests that depend on it are
automatically skipped with a clear reason.

``run_qsite_completion`` uses Click's ``ShellComplete`` API to query
completions at the Python level, the same logic that drives the runtime
``_QSITE_COMPLETE`` protocol.
"""

import os
import shlex
import shutil
import subprocess
from collections.abc import Callable, Iterator
from pathlib import Path
from unittest.mock import patch

import pytest
from click.shell_completion import ShellComplete

# Type aliases for the callable fixtures.
RunQsite = Callable[..., subprocess.CompletedProcess[str]]
RunQsiteCompletion = Callable[[str], subprocess.CompletedProcess[str]]

# ---------------------------------------------------------------------------
# Pre-flight checks (evaluated once at import time)
# ---------------------------------------------------------------------------

_QSITE_AVAILABLE = shutil.which("qsite") is not None

_SKIP_REASON_QSITE = "qsite entry point is not installed (run: pip install -e .)"


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def isolated_project(tmp_path: Path) -> Iterator[Path]:
    """Create an isolated empty project directory and cd into it.

    Yields:
        Path to the temporary project root.

    After the test, the working directory is restored.
    """
    original_cwd = Path.cwd()
    os.chdir(tmp_path)
    try:
        yield tmp_path
    finally:
        os.chdir(original_cwd)


@pytest.fixture()
def run_qsite(
    isolated_project: Path,
    capsys: pytest.CaptureFixture[str],
) -> RunQsite:
    """Return a helper that invokes ``qsite <args>`` in-process.

    Usage in tests::

        def test_scaffold(run_qsite: RunQsite) -> None:
            result = run_qsite("scaffold", "cfa", "--yes")
            assert result.returncode == 0

    Returns:
        A callable ``(*args) -> CompletedProcess[str]``.
    """
    from site_generator.cli import commands

    def _run(*args: str) -> subprocess.CompletedProcess[str]:
        capsys.readouterr()
        with patch("sys.argv", ["qsite", *args]):
            try:
                returncode = commands.main()
            except SystemExit as exc:
                # argparse exits on --help and usage errors
                code = exc.code
                returncode = code if isinstance(code, int) else 1
        captured = capsys.readouterr()
        return subprocess.CompletedProcess(
            args=["qsite", *args],
            returncode=returncode,
            stdout=captured.out,
            stderr=captured.err,
        )

    return _run


@pytest.fixture()
def run_qsite_subprocess(isolated_project: Path) -> RunQsite:
    """Return a helper that runs the installed ``qsite`` script.

    Tests that use this fixture are **automatically skipped** when the
    ``qsite`` entry point is not on PATH.

    The optional ``input`` keyword is fed to stdin, e.g. ``input="no\\n"``.

    Returns:
        A callable ``(*args, input=None) -> CompletedProcess[str]``.
    """
    if not _QSITE_AVAILABLE:
        pytest.skip(_SKIP_REASON_QSITE)

    def _run(*args: str, input: str | None = None) -> subprocess.CompletedProcess[str]:
        env = {**os.environ, "PYTHONIOENCODING": "utf-8"}
        env.pop("_QSITE_COMPLETE", None)
        return subprocess.run(
            ["qsite", *args],
            cwd=isolated_project,
            input=input,
            capture_output=True,
            text=True,
            encoding="utf-8",
            env=env,
            check=False,
        )

    return _run


@pytest.fixture()
def run_qsite_completion() -> RunQsiteCompletion:
    """Return a helper that queries Click completions for ``qsite``.

    The returned callable accepts a partial command string (e.g.
    ``"qsite sc"``) and returns a ``CompletedProcess``-like object whose
    ``.stdout`` contains one completion per line (``value\\thelp``).

    Returns:
        A callable ``(partial_cmd) -> CompletedProcess[str]``.
    """
    from site_generator.cli.commands import _click_cli

    def _complete(partial_cmd: str) -> subprocess.CompletedProcess[str]:
        parts = shlex.split(partial_cmd)
        # Drop the program name; Click handles it via prog_name.
        if parts and parts[0] == "qsite":
            parts = parts[1:]

        # A trailing space means a new, empty word is being typed.
        if partial_cmd.endswith(" "):
            incomplete = ""
            args = parts
        elif parts:
            incomplete = parts[-1]
            args = parts[:-1]
        else:
            incomplete = ""
            args = []

        comp = ShellComplete(_click_cli, {}, "qsite", "_QSITE_COMPLETE")
        completions = comp.get_completions(args, incomplete)
        lines = [
            f"{c.value}\t{c.help or ''}" if c.help else c.value
            for c in completions
        ]
        stdout = "\n".join(lines) + "\n" if lines else ""
        return subprocess.CompletedProcess(
            args=["click-complete", partial_cmd],
            returncode=0,
            stdout=stdout,
            stderr="",
        )

    return _complete

