from __future__ import annotations

import pytest

from asusctl_gui.core.asusctl import NotInstalledError, ServiceNotRunningError, SystemInfo
from asusctl_gui.core.asusctl.probe import ProbeResult, probe


def _which(resolved):
    seen: list[str] = []

    def which(name: str):
        seen.append(name)
        return resolved

    which.seen = seen  # type: ignore[attr-defined]
    return which


def test_probe_reports_missing_binary(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ASUSCTL_GUI_ASUSCTL_PATH", "asusctl")

    def get_system_info():
        raise AssertionError("must not run asusctl when it is not on PATH")

    which = _which(None)
    result = probe(which_fn=which, get_system_info_fn=get_system_info)

    assert result == ProbeResult(available=False, reason="asusctl not found")
    assert which.seen == ["asusctl"]


def test_probe_unavailable_when_service_down() -> None:
    def get_system_info():
        raise ServiceNotRunningError()

    result = probe(which_fn=_which("/usr/bin/asusctl"), get_system_info_fn=get_system_info)

    assert result.available is False
    assert result.reason == "asusd service is not running"
    assert result.identifiers == {"asusctl": "/usr/bin/asusctl"}


def test_probe_unavailable_when_binary_vanishes() -> None:
    def get_system_info():
        raise NotInstalledError()

    result = probe(which_fn=_which("/usr/bin/asusctl"), get_system_info_fn=get_system_info)

    assert result.available is False
    assert "not installed" in result.reason


def test_probe_collects_identifiers() -> None:
    info = SystemInfo(asusctl_version="6.2.0", product_family="ROG Zephyrus G14", board_name="")

    result = probe(which_fn=_which("/usr/bin/asusctl"), get_system_info_fn=lambda: info)

    assert result.available is True
    assert result.reason == "asusctl present"
    assert result.identifiers == {
        "asusctl": "/usr/bin/asusctl",
        "version": "6.2.0",
        "product_family": "ROG Zephyrus G14",
    }
