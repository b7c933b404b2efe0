"""Read operations.

Source policy per field:
- keyboard brightness, charge limit, slash show-on flags: bus only;
- slash enabled/brightness/interval: bus, falling back to the slash config on
  any bus error (the bus error is dropped);
- slash mode: slash config only;
- system info, supported features, profile state: asusctl text output.

Collaborators are keyword arguments so tests can substitute them.
"""

from __future__ import annotations

import logging

from .busctl import (
    AURA_INTERFACE,
    AURA_PATH,
    PLATFORM_INTERFACE,
    PLATFORM_PATH,
    SLASH_INTERFACE,
    SLASH_PATH,
    decode_bool,
    decode_byte,
    decode_uint,
    read_property,
)
from .errors import AsusctlError
from .models import KeyboardBrightness, ProfileState, SlashMode, SlashState, SupportedFeatures, SystemInfo
from .parsers import parse_profile_state, parse_supported_features, parse_system_info
from .process import run_asusctl
from .slash_config import parse_slash_config


logger = logging.getLogger(__name__)


# ---- asusctl text commands


def get_system_info(*, run_asusctl_fn=run_asusctl) -> SystemInfo:
    return parse_system_info(run_asusctl_fn(["--version"]))


def get_supported_features(*, run_asusctl_fn=run_asusctl) -> SupportedFeatures:
    return parse_supported_features(run_asusctl_fn(["--show-supported"]))


def get_profile_state(*, run_asusctl_fn=run_asusctl) -> ProfileState:
    return parse_profile_state(run_asusctl_fn(["profile", "--profile-get"]))


# ---- bus-only reads


def get_keyboard_brightness(*, read_property_fn=read_property) -> KeyboardBrightness:
    reply = read_property_fn(AURA_PATH, AURA_INTERFACE, "Brightness")
    return KeyboardBrightness.from_bus(decode_uint(reply))


def get_charge_limit(*, read_property_fn=read_property) -> int:
    reply = read_property_fn(PLATFORM_PATH, PLATFORM_INTERFACE, "ChargeControlEndThreshold")
    return decode_byte(reply)


def _slash_bool(prop: str, *, read_property_fn=read_property) -> bool:
    return decode_bool(read_property_fn(SLASH_PATH, SLASH_INTERFACE, prop))


def _slash_byte(prop: str, *, read_property_fn=read_property) -> int:
    return decode_byte(read_property_fn(SLASH_PATH, SLASH_INTERFACE, prop))


def get_slash_show_on_boot(*, read_property_fn=read_property) -> bool:
    return _slash_bool("ShowOnBoot", read_property_fn=read_property_fn)


def get_slash_show_on_shutdown(*, read_property_fn=read_property) -> bool:
    return _slash_bool("ShowOnShutdown", read_property_fn=read_property_fn)


def get_slash_show_on_sleep(*, read_property_fn=read_property) -> bool:
    return _slash_bool("ShowOnSleep", read_property_fn=read_property_fn)


def get_slash_show_on_battery(*, read_property_fn=read_property) -> bool:
    return _slash_bool("ShowOnBattery", read_property_fn=read_property_fn)


def get_slash_show_battery_warning(*, read_property_fn=read_property) -> bool:
    return _slash_bool("ShowBatteryWarning", read_property_fn=read_property_fn)


# ---- bus with slash config fallback


def get_slash_enabled(*, read_property_fn=read_property, parse_slash_config_fn=parse_slash_config) -> bool:
    try:
        return _slash_bool("Enabled", read_property_fn=read_property_fn)
    except AsusctlError:
        return parse_slash_config_fn().enabled


def get_slash_brightness(*, read_property_fn=read_property, parse_slash_config_fn=parse_slash_config) -> int:
    try:
        return _slash_byte("Brightness", read_property_fn=read_property_fn)
    except AsusctlError:
        return parse_slash_config_fn().brightness


def get_slash_interval(*, read_property_fn=read_property, parse_slash_config_fn=parse_slash_config) -> int:
    try:
        return _slash_byte("Interval", read_property_fn=read_property_fn)
    except AsusctlError:
        return parse_slash_config_fn().interval


def get_slash_mode(*, parse_slash_config_fn=parse_slash_config) -> SlashMode:
    # The bus exposes the mode only as a numeric code; the config name is used instead.
    return parse_slash_config_fn().mode


def get_slash_state(*, read_property_fn=read_property, parse_slash_config_fn=parse_slash_config) -> SlashState:
    """Return enabled/brightness/interval from the bus and mode from the config.

    If any of the bus reads fails, the whole state comes from the config file.
    If the bus reads succeed but the config cannot be read, the mode is the
    default one.
    """

    try:
        enabled = _slash_bool("Enabled", read_property_fn=read_property_fn)
        brightness = _slash_byte("Brightness", read_property_fn=read_property_fn)
        interval = _slash_byte("Interval", read_property_fn=read_property_fn)
    except AsusctlError:
        return parse_slash_config_fn()

    try:
        mode = parse_slash_config_fn().mode
    except AsusctlError as exc:
        logger.debug("Slash config unavailable, using default mode: %s", exc)
        mode = SlashMode.default()

    return SlashState(enabled=enabled, brightness=brightness, interval=interval, mode=mode)
