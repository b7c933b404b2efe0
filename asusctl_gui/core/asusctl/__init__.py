"""ASUS laptop state via `asusctl`, `busctl` and asusd's config files.

This package shells out to the system `asusctl` utility (asusd) for commands
and text reports, reads live asusd properties with `busctl get-property`, and
falls back to `/etc/asusd/slash.ron` for LED bar settings the bus cannot
provide. Every read is a fresh subprocess; nothing is cached.

All failures are raised as `AsusctlError` subclasses.
"""

from .errors import (
    AsusctlError,
    CommandFailedError,
    NotInstalledError,
    OutOfRangeError,
    ParseError,
    ServiceNotRunningError,
)
from .models import (
    AuraMode,
    KeyboardBrightness,
    PowerProfile,
    ProfileState,
    SlashMode,
    SlashState,
    SupportedFeatures,
    SystemInfo,
)
from .ops_read import (
    get_charge_limit,
    get_keyboard_brightness,
    get_profile_state,
    get_slash_brightness,
    get_slash_enabled,
    get_slash_interval,
    get_slash_mode,
    get_slash_show_battery_warning,
    get_slash_show_on_battery,
    get_slash_show_on_boot,
    get_slash_show_on_shutdown,
    get_slash_show_on_sleep,
    get_slash_state,
    get_supported_features,
    get_system_info,
)
from .ops_write import (
    ProfileSetter,
    default_profile_setters,
    disable_slash,
    enable_slash,
    set_charge_limit,
    set_keyboard_brightness,
    set_profile,
    set_slash_brightness,
    set_slash_enabled,
    set_slash_interval,
    set_slash_mode,
    set_slash_show_battery_warning,
    set_slash_show_on_battery,
    set_slash_show_on_boot,
    set_slash_show_on_shutdown,
    set_slash_show_on_sleep,
)
from .probe import ProbeResult, probe

__all__ = [
    "AsusctlError",
    "AuraMode",
    "CommandFailedError",
    "KeyboardBrightness",
    "NotInstalledError",
    "OutOfRangeError",
    "ParseError",
    "PowerProfile",
    "ProbeResult",
    "ProfileSetter",
    "ProfileState",
    "ServiceNotRunningError",
    "SlashMode",
    "SlashState",
    "SupportedFeatures",
    "SystemInfo",
    "default_profile_setters",
    "disable_slash",
    "enable_slash",
    "get_charge_limit",
    "get_keyboard_brightness",
    "get_profile_state",
    "get_slash_brightness",
    "get_slash_enabled",
    "get_slash_interval",
    "get_slash_mode",
    "get_slash_show_battery_warning",
    "get_slash_show_on_battery",
    "get_slash_show_on_boot",
    "get_slash_show_on_shutdown",
    "get_slash_show_on_sleep",
    "get_slash_state",
    "get_supported_features",
    "get_system_info",
    "probe",
    "set_charge_limit",
    "set_keyboard_brightness",
    "set_profile",
    "set_slash_brightness",
    "set_slash_enabled",
    "set_slash_interval",
    "set_slash_mode",
    "set_slash_show_battery_warning",
    "set_slash_show_on_battery",
    "set_slash_show_on_boot",
    "set_slash_show_on_shutdown",
    "set_slash_show_on_sleep",
]
