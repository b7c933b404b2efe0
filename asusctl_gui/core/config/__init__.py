"""Environment-driven configuration for the asusctl layer."""

from __future__ import annotations

from .paths import (
    SLASH_CONFIG_PATH_DEFAULT,
    asusctl_path,
    busctl_path,
    powerprofilesctl_path,
    slash_config_path,
)
from .runtime import command_timeout_s, debug_enabled, env_flag


__all__ = [
    "SLASH_CONFIG_PATH_DEFAULT",
    "asusctl_path",
    "busctl_path",
    "command_timeout_s",
    "debug_enabled",
    "env_flag",
    "powerprofilesctl_path",
    "slash_config_path",
]
