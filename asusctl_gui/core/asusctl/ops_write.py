"""Write operations.

Each write builds an asusctl argument vector and runs it once. Nothing is read
back afterwards. Documented ranges are checked before anything is spawned.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Sequence, Union

from ..config import powerprofilesctl_path
from ..logging_utils import log_throttled
from .errors import AsusctlError, CommandFailedError, OutOfRangeError
from .models import KeyboardBrightness, PowerProfile, SlashMode
from .process import run_asusctl, run_command_checked


logger = logging.getLogger(__name__)


CHARGE_LIMIT_RANGE = (20, 100)
SLASH_BRIGHTNESS_RANGE = (0, 255)
SLASH_INTERVAL_RANGE = (0, 5)


def _check_range(what: str, value: int, bounds: tuple[int, int]) -> int:
    lo, hi = bounds
    if isinstance(value, bool) or not isinstance(value, int):
        raise OutOfRangeError(f"{what} must be an integer, got {value!r}")
    if not lo <= value <= hi:
        raise OutOfRangeError(f"{what} must be between {lo} and {hi}, got {value}")
    return value


def _bool_arg(value: bool) -> str:
    return "true" if value else "false"


# ---- keyboard / platform


def set_keyboard_brightness(level: Union[KeyboardBrightness, str], *, run_asusctl_fn=run_asusctl) -> None:
    if not isinstance(level, KeyboardBrightness):
        level = KeyboardBrightness.parse(level)
    run_asusctl_fn(["--kbd-bright", level.cli_name])


def set_charge_limit(limit: int, *, run_asusctl_fn=run_asusctl) -> None:
    limit = _check_range("Charge limit", limit, CHARGE_LIMIT_RANGE)
    run_asusctl_fn(["--chg-limit", str(limit)])


# ---- power profile


@dataclass(frozen=True)
class ProfileSetter:
    """One way of applying a power profile.

    `apply` raises AsusctlError on failure.
    """

    name: str
    apply: Callable[[PowerProfile], None]


def _set_profile_powerprofilesctl(profile: PowerProfile, *, run_checked_fn=run_command_checked) -> None:
    # power-profiles-daemon keeps desktop power indicators in sync.
    run_checked_fn(powerprofilesctl_path(), ["set", profile.ppd_name])


def _set_profile_asusctl(profile: PowerProfile, *, run_asusctl_fn=run_asusctl) -> None:
    run_asusctl_fn(["profile", "--profile-set", profile.display_name])


def default_profile_setters() -> tuple[ProfileSetter, ...]:
    return (
        ProfileSetter("powerprofilesctl", _set_profile_powerprofilesctl),
        ProfileSetter("asusctl", _set_profile_asusctl),
    )


def set_profile(
    profile: Union[PowerProfile, str],
    *,
    setters: Optional[Sequence[ProfileSetter]] = None,
) -> str:
    """Apply *profile* using the first setter that succeeds.

    Failures of earlier setters are not reported; if every setter fails, the
    last error is raised. Returns the name of the setter that was used.
    """

    if not isinstance(profile, PowerProfile):
        profile = PowerProfile.parse(profile)

    if setters is None:
        setters = default_profile_setters()

    last_exc: Optional[AsusctlError] = None
    for setter in setters:
        try:
            setter.apply(profile)
        except AsusctlError as exc:
            last_exc = exc
            log_throttled(
                logger,
                f"ops_write.set_profile.{setter.name}",
                interval_s=60,
                level=logging.DEBUG,
                msg=f"Setting power profile via {setter.name} failed: {exc}",
            )
            continue

        logger.info("Set power profile to %s, using %s", profile, setter.name)
        return setter.name

    if last_exc is None:
        raise CommandFailedError("no power profile setter configured")
    raise last_exc


# ---- slash (LED bar)


def enable_slash(*, run_asusctl_fn=run_asusctl) -> None:
    run_asusctl_fn(["slash", "--enable"])


def disable_slash(*, run_asusctl_fn=run_asusctl) -> None:
    run_asusctl_fn(["slash", "--disable"])


def set_slash_enabled(enabled: bool, *, run_asusctl_fn=run_asusctl) -> None:
    if enabled:
        enable_slash(run_asusctl_fn=run_asusctl_fn)
    else:
        disable_slash(run_asusctl_fn=run_asusctl_fn)


def set_slash_brightness(brightness: int, *, run_asusctl_fn=run_asusctl) -> None:
    brightness = _check_range("Slash brightness", brightness, SLASH_BRIGHTNESS_RANGE)
    run_asusctl_fn(["slash", "--brightness", str(brightness)])


def set_slash_mode(mode: Union[SlashMode, str], *, run_asusctl_fn=run_asusctl) -> None:
    if not isinstance(mode, SlashMode):
        mode = SlashMode.parse(mode)
    run_asusctl_fn(["slash", "--mode", mode.value])


def set_slash_interval(interval: int, *, run_asusctl_fn=run_asusctl) -> None:
    interval = _check_range("Slash interval", interval, SLASH_INTERVAL_RANGE)
    run_asusctl_fn(["slash", "--interval", str(interval)])


def _set_slash_flag(flag: str, value: bool, *, run_asusctl_fn) -> None:
    run_asusctl_fn(["slash", flag, _bool_arg(value)])


def set_slash_show_on_boot(value: bool, *, run_asusctl_fn=run_asusctl) -> None:
    _set_slash_flag("--show-on-boot", value, run_asusctl_fn=run_asusctl_fn)


def set_slash_show_on_shutdown(value: bool, *, run_asusctl_fn=run_asusctl) -> None:
    _set_slash_flag("--show-on-shutdown", value, run_asusctl_fn=run_asusctl_fn)


def set_slash_show_on_sleep(value: bool, *, run_asusctl_fn=run_asusctl) -> None:
    _set_slash_flag("--show-on-sleep", value, run_asusctl_fn=run_asusctl_fn)


def set_slash_show_on_battery(value: bool, *, run_asusctl_fn=run_asusctl) -> None:
    _set_slash_flag("--show-on-battery", value, run_asusctl_fn=run_asusctl_fn)


def set_slash_show_battery_warning(value: bool, *, run_asusctl_fn=run_asusctl) -> None:
    _set_slash_flag("--show-battery-warning", value, run_asusctl_fn=run_asusctl_fn)
