from __future__ import annotations

import os
import subprocess
import sys
import tempfile
import traceback
from pathlib import Path

import pytest

REPO_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", ".."))
if REPO_ROOT not in sys.path:
    sys.path.insert(0, REPO_ROOT)


_GUARDED_BINARIES = {"asusctl", "busctl", "powerprofilesctl"}


def _hardware_opted_in() -> bool:
    return os.environ.get("ASUSCTL_GUI_ALLOW_HARDWARE") == "1"


# Safety default: during pytest, never read the real /etc/asusd/slash.ron and
# never reach the real tools. Un-mocked calls then fail with NotInstalledError.
if not _hardware_opted_in():
    _scratch = Path(tempfile.mkdtemp(prefix="asusctl-gui-test-"))
    os.environ.setdefault("ASUSCTL_GUI_SLASH_CONFIG", str(_scratch / "slash.ron"))
    os.environ.setdefault("ASUSCTL_GUI_ASUSCTL_PATH", str(_scratch / "bin" / "asusctl"))
    os.environ.setdefault("ASUSCTL_GUI_BUSCTL_PATH", str(_scratch / "bin" / "busctl"))
    os.environ.setdefault("ASUSCTL_GUI_POWERPROFILESCTL_PATH", str(_scratch / "bin" / "powerprofilesctl"))


def _install_tripwire() -> None:
    """Fail loudly if a test spawns one of the real device tools.

    Only enabled when ASUSCTL_GUI_TEST_TRIPWIRE=1 and hardware is NOT opted in.
    """

    if os.environ.get("ASUSCTL_GUI_TEST_TRIPWIRE") != "1":
        return
    if _hardware_opted_in():
        return

    _orig_run = subprocess.run

    def _tripwire_run(args, *a, **kw):  # type: ignore[no-untyped-def]
        argv0 = args[0] if isinstance(args, (list, tuple)) and args else args
        if (
            isinstance(argv0, str)
            and os.path.basename(argv0) in _GUARDED_BINARIES
            and not argv0.startswith(tempfile.gettempdir())
        ):
            raise RuntimeError(
                f"Tripwire: attempted to run {argv0} during pytest\n\n" + "".join(traceback.format_stack(limit=50))
            )
        return _orig_run(args, *a, **kw)

    subprocess.run = _tripwire_run  # type: ignore[assignment]


_install_tripwire()


class FakeRun:
    """Stand-in for subprocess.run that records argv and replays canned results."""

    def __init__(self) -> None:
        self.calls: list[list[str]] = []
        self.kwargs: list[dict] = []
        self._results: list[object] = []

    def queue(self, *, stdout: str = "", stderr: str = "", returncode: int = 0) -> "FakeRun":
        self._results.append((stdout, stderr, returncode))
        return self

    def queue_exc(self, exc: BaseException) -> "FakeRun":
        self._results.append(exc)
        return self

    def __call__(self, args, **kwargs):  # type: ignore[no-untyped-def]
        self.calls.append(list(args))
        self.kwargs.append(kwargs)
        result = self._results.pop(0) if self._results else ("", "", 0)
        if isinstance(result, BaseException):
            raise result
        stdout, stderr, returncode = result
        return subprocess.CompletedProcess(
            args=list(args),
            returncode=returncode,
            stdout=stdout.encode("utf-8"),
            stderr=stderr.encode("utf-8"),
        )


@pytest.fixture
def fake_run() -> FakeRun:
    return FakeRun()


@pytest.fixture
def slash_config_factory(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """Write a slash.ron with the given content and point the config at it."""

    def _make(content: str) -> Path:
        path = tmp_path / "slash.ron"
        path.write_text(content, encoding="utf-8")
        monkeypatch.setenv("ASUSCTL_GUI_SLASH_CONFIG", str(path))
        return path

    return _make
