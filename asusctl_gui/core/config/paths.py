"""Locations of the external tools and files the asusctl layer talks to.

Each value can be overridden through the environment, which is how tests and
non-standard installs point the layer elsewhere. Values are read at call time.
"""

from __future__ import annotations

import os
from pathlib import Path


SLASH_CONFIG_PATH_DEFAULT = Path("/etc/asusd/slash.ron")


def _env_or(name: str, default: str) -> str:
    v = os.environ.get(name, "").strip()
    return v or default


def asusctl_path() -> str:
    return _env_or("ASUSCTL_GUI_ASUSCTL_PATH", "asusctl")


def busctl_path() -> str:
    return _env_or("ASUSCTL_GUI_BUSCTL_PATH", "busctl")


def powerprofilesctl_path() -> str:
    return _env_or("ASUSCTL_GUI_POWERPROFILESCTL_PATH", "powerprofilesctl")


def slash_config_path() -> Path:
    """Return the asusd slash config path.

    Priority:
    - ASUSCTL_GUI_SLASH_CONFIG
    - /etc/asusd/slash.ron
    """

    p = os.environ.get("ASUSCTL_GUI_SLASH_CONFIG")
    if p:
        return Path(p)
    return SLASH_CONFIG_PATH_DEFAULT
