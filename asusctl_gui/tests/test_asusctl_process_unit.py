from __future__ import annotations

import subprocess

import pytest

import asusctl_gui.core.asusctl.process as process
from asusctl_gui.core.asusctl import CommandFailedError, NotInstalledError, ServiceNotRunningError


def test_run_command_returns_stdout(monkeypatch: pytest.MonkeyPatch, fake_run) -> None:
    fake_run.queue(stdout="asusctl version: 6.2.0\n")
    monkeypatch.setattr(process.subprocess, "run", fake_run)

    assert process.run_command("asusctl", ["--version"]) == "asusctl version: 6.2.0\n"
    assert fake_run.calls == [["asusctl", "--version"]]
    assert fake_run.kwargs[0]["capture_output"] is True
    assert fake_run.kwargs[0]["check"] is False


def test_run_command_keeps_stdout_on_nonzero_exit(monkeypatch: pytest.MonkeyPatch, fake_run) -> None:
    fake_run.queue(stdout="Active profile is Quiet\n", stderr="some warning\n", returncode=1)
    monkeypatch.setattr(process.subprocess, "run", fake_run)

    assert process.run_command("asusctl", ["profile", "--profile-get"]) == "Active profile is Quiet\n"


@pytest.mark.parametrize("returncode", [0, 1])
def test_run_command_service_token_in_stderr_means_service_down(
    monkeypatch: pytest.MonkeyPatch, fake_run, returncode: int
) -> None:
    fake_run.queue(stdout="partial\n", stderr="Error: could not reach asusd\n", returncode=returncode)
    monkeypatch.setattr(process.subprocess, "run", fake_run)

    with pytest.raises(ServiceNotRunningError):
        process.run_command("asusctl", ["--version"])


def test_run_command_connection_refused_means_service_down(monkeypatch: pytest.MonkeyPatch, fake_run) -> None:
    fake_run.queue(stderr="zbus: Connection refused (os error 111)\n")
    monkeypatch.setattr(process.subprocess, "run", fake_run)

    with pytest.raises(ServiceNotRunningError):
        process.run_command("asusctl", ["--version"])


def test_run_command_missing_binary_is_not_installed(monkeypatch: pytest.MonkeyPatch, fake_run) -> None:
    fake_run.queue_exc(FileNotFoundError(2, "No such file or directory"))
    monkeypatch.setattr(process.subprocess, "run", fake_run)

    with pytest.raises(NotInstalledError) as excinfo:
        process.run_command("asusctl", ["--version"])
    assert str(excinfo.value) == "asusctl is not installed"


def test_run_command_real_missing_binary_is_not_installed(tmp_path) -> None:
    with pytest.raises(NotInstalledError):
        process.run_command(str(tmp_path / "does-not-exist"), [])


def test_run_command_other_os_error_is_command_failed(monkeypatch: pytest.MonkeyPatch, fake_run) -> None:
    fake_run.queue_exc(PermissionError(13, "Permission denied"))
    monkeypatch.setattr(process.subprocess, "run", fake_run)

    with pytest.raises(CommandFailedError, match="Permission denied"):
        process.run_command("asusctl", ["--version"])


def test_run_command_timeout_is_command_failed(monkeypatch: pytest.MonkeyPatch, fake_run) -> None:
    fake_run.queue_exc(subprocess.TimeoutExpired(cmd=["asusctl"], timeout=1.5))
    monkeypatch.setattr(process.subprocess, "run", fake_run)

    with pytest.raises(CommandFailedError, match="timed out"):
        process.run_command("asusctl", ["--version"], timeout_s=1.5)


def test_run_command_uses_configured_timeout(monkeypatch: pytest.MonkeyPatch, fake_run) -> None:
    monkeypatch.setattr(process.subprocess, "run", fake_run)

    monkeypatch.delenv("ASUSCTL_GUI_COMMAND_TIMEOUT", raising=False)
    process.run_command("asusctl", ["--version"])
    assert fake_run.kwargs[-1]["timeout"] is None

    monkeypatch.setenv("ASUSCTL_GUI_COMMAND_TIMEOUT", "2.5")
    process.run_command("asusctl", ["--version"])
    assert fake_run.kwargs[-1]["timeout"] == 2.5


def test_run_command_replaces_invalid_utf8(monkeypatch: pytest.MonkeyPatch) -> None:
    def fake(args, **kwargs):
        return subprocess.CompletedProcess(args=args, returncode=0, stdout=b"Board name: GA\xff403\n", stderr=b"")

    monkeypatch.setattr(process.subprocess, "run", fake)

    assert process.run_command("asusctl", ["--version"]) == "Board name: GA�403\n"


def test_run_command_checked_rejects_nonzero_exit(monkeypatch: pytest.MonkeyPatch, fake_run) -> None:
    fake_run.queue(stderr="No such profile\n", returncode=1)
    monkeypatch.setattr(process.subprocess, "run", fake_run)

    with pytest.raises(CommandFailedError, match="No such profile"):
        process.run_command_checked("powerprofilesctl", ["set", "turbo"])


def test_run_asusctl_uses_configured_binary(monkeypatch: pytest.MonkeyPatch, fake_run) -> None:
    monkeypatch.setenv("ASUSCTL_GUI_ASUSCTL_PATH", "/opt/asus/bin/asusctl")
    monkeypatch.setattr(process.subprocess, "run", fake_run)

    process.run_asusctl(["--kbd-bright", "low"])

    assert fake_run.calls == [["/opt/asus/bin/asusctl", "--kbd-bright", "low"]]
