"""Command-line front end for the asusctl layer.

Useful for scripting and for checking what the control panel would see:

    asusctl-gui-core status
    asusctl-gui-core profile performance
    asusctl-gui-core slash --brightness 120 --mode BitStream
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable, Iterable, TextIO

from .core import asusctl
from .core.asusctl import AsusctlError, KeyboardBrightness, PowerProfile, SlashMode
from .core.logging_utils import configure_logging


logger = logging.getLogger(__name__)


def _parse_bool(raw: str) -> bool:
    v = raw.strip().lower()
    if v in {"1", "true", "yes", "on"}:
        return True
    if v in {"0", "false", "no", "off"}:
        return False
    raise argparse.ArgumentTypeError(f"expected true/false, got {raw!r}")


def _field(out: TextIO, label: str, read: Callable[[], object]) -> None:
    # One failing source should not hide the others.
    try:
        value = read()
    except AsusctlError as exc:
        value = f"<{exc}>"
    print(f"{label:<24} {value}", file=out)


def _cmd_status(args: argparse.Namespace, out: TextIO) -> int:
    info = asusctl.get_system_info()
    print(f"{'asusctl version':<24} {info.asusctl_version}", file=out)
    print(f"{'Product family':<24} {info.product_family}", file=out)
    print(f"{'Board name':<24} {info.board_name}", file=out)

    try:
        state = asusctl.get_profile_state()
        profiles: tuple[object, ...] = (state.active, state.on_ac, state.on_battery)
    except AsusctlError as exc:
        profiles = (f"<{exc}>",) * 3
    for label, value in zip(("Active profile", "Profile on AC", "Profile on battery"), profiles):
        print(f"{label:<24} {value}", file=out)

    _field(out, "Charge limit", asusctl.get_charge_limit)
    _field(out, "Keyboard brightness", lambda: asusctl.get_keyboard_brightness().display_name)
    _field(out, "Slash enabled", asusctl.get_slash_enabled)
    _field(out, "Slash brightness", asusctl.get_slash_brightness)
    _field(out, "Slash interval", asusctl.get_slash_interval)
    _field(out, "Slash mode", asusctl.get_slash_mode)
    return 0


def _cmd_features(args: argparse.Namespace, out: TextIO) -> int:
    features = asusctl.get_supported_features()
    for label, supported in (
        ("Aura (keyboard lighting)", features.has_aura),
        ("Platform control", features.has_platform),
        ("Fan curves", features.has_fan_curves),
        ("Slash (LED bar)", features.has_slash),
        ("Charge control", features.has_charge_control),
        ("Throttle policy", features.has_throttle_policy),
    ):
        print(f"{label:<26} {'yes' if supported else 'no'}", file=out)

    levels = ", ".join(level.display_name for level in features.keyboard_brightness_levels)
    modes = ", ".join(str(mode) for mode in features.aura_modes)
    print(f"{'Keyboard brightness':<26} {levels or '-'}", file=out)
    print(f"{'Aura modes':<26} {modes or '-'}", file=out)
    return 0


def _cmd_probe(args: argparse.Namespace, out: TextIO) -> int:
    result = asusctl.probe()
    print(f"available: {str(result.available).lower()} ({result.reason})", file=out)
    for key, value in sorted(result.identifiers.items()):
        print(f"  {key}: {value}", file=out)
    return 0 if result.available else 1


def _cmd_kbd_bright(args: argparse.Namespace, out: TextIO) -> int:
    if args.level is None:
        print(asusctl.get_keyboard_brightness(), file=out)
        return 0
    asusctl.set_keyboard_brightness(KeyboardBrightness.parse(args.level))
    return 0


def _cmd_profile(args: argparse.Namespace, out: TextIO) -> int:
    if args.profile is None:
        state = asusctl.get_profile_state()
        print(f"active: {state.active}", file=out)
        print(f"on AC: {state.on_ac}", file=out)
        print(f"on battery: {state.on_battery}", file=out)
        return 0
    used = asusctl.set_profile(PowerProfile.parse(args.profile))
    print(f"profile set via {used}", file=out)
    return 0


def _cmd_charge_limit(args: argparse.Namespace, out: TextIO) -> int:
    if args.limit is None:
        print(asusctl.get_charge_limit(), file=out)
        return 0
    asusctl.set_charge_limit(args.limit)
    return 0


_SLASH_FLAG_SETTERS = (
    ("show_on_boot", "set_slash_show_on_boot"),
    ("show_on_shutdown", "set_slash_show_on_shutdown"),
    ("show_on_sleep", "set_slash_show_on_sleep"),
    ("show_on_battery", "set_slash_show_on_battery"),
    ("show_battery_warning", "set_slash_show_battery_warning"),
)


def _cmd_slash(args: argparse.Namespace, out: TextIO) -> int:
    changed = False

    if args.enabled is not None:
        asusctl.set_slash_enabled(args.enabled)
        changed = True
    if args.brightness is not None:
        asusctl.set_slash_brightness(args.brightness)
        changed = True
    if args.mode is not None:
        asusctl.set_slash_mode(SlashMode.parse(args.mode))
        changed = True
    if args.interval is not None:
        asusctl.set_slash_interval(args.interval)
        changed = True
    for dest, setter_name in _SLASH_FLAG_SETTERS:
        value = getattr(args, dest)
        if value is not None:
            getattr(asusctl, setter_name)(value)
            changed = True

    if changed:
        return 0

    state = asusctl.get_slash_state()
    print(f"{'enabled':<22} {str(state.enabled).lower()}", file=out)
    print(f"{'brightness':<22} {state.brightness}", file=out)
    print(f"{'interval':<22} {state.interval}", file=out)
    print(f"{'mode':<22} {state.mode}", file=out)
    _field(out, "show on boot", asusctl.get_slash_show_on_boot)
    _field(out, "show on shutdown", asusctl.get_slash_show_on_shutdown)
    _field(out, "show on sleep", asusctl.get_slash_show_on_sleep)
    _field(out, "show on battery", asusctl.get_slash_show_on_battery)
    _field(out, "show battery warning", asusctl.get_slash_show_battery_warning)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="asusctl-gui-core", description="Inspect and change ASUS laptop settings")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command")

    p = sub.add_parser("status", help="Show a summary of the current state")
    p.set_defaults(func=_cmd_status)

    p = sub.add_parser("features", help="Show features reported by asusctl --show-supported")
    p.set_defaults(func=_cmd_features)

    p = sub.add_parser("probe", help="Check whether asusctl is usable")
    p.set_defaults(func=_cmd_probe)

    p = sub.add_parser("kbd-bright", help="Get or set keyboard brightness")
    p.add_argument("level", nargs="?", help="off, low, med or high")
    p.set_defaults(func=_cmd_kbd_bright)

    p = sub.add_parser("profile", help="Get or set the power profile")
    p.add_argument("profile", nargs="?", help="quiet, balanced or performance")
    p.set_defaults(func=_cmd_profile)

    p = sub.add_parser("charge-limit", help="Get or set the battery charge limit")
    p.add_argument("limit", nargs="?", type=int)
    p.set_defaults(func=_cmd_charge_limit)

    p = sub.add_parser("slash", help="Get or set LED bar settings")
    group = p.add_mutually_exclusive_group()
    group.add_argument("--enable", dest="enabled", action="store_const", const=True, default=None)
    group.add_argument("--disable", dest="enabled", action="store_const", const=False)
    p.add_argument("--brightness", type=int)
    p.add_argument("--mode", choices=[m.value for m in SlashMode])
    p.add_argument("--interval", type=int)
    for dest, _setter_name in _SLASH_FLAG_SETTERS:
        p.add_argument(f"--{dest.replace('_', '-')}", dest=dest, type=_parse_bool, metavar="BOOL")
    p.set_defaults(func=_cmd_slash)

    return parser


def main(argv: Iterable[str] | None = None, *, out: TextIO | None = None, err: TextIO | None = None) -> int:
    out = out or sys.stdout
    err = err or sys.stderr

    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)

    configure_logging()
    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    func = getattr(args, "func", _cmd_status)
    try:
        return func(args, out)
    except AsusctlError as exc:
        print(f"error: {exc}", file=err)
        return 1
    except KeyboardInterrupt:
        return 130
    except Exception as exc:
        logger.exception("Unhandled error: %s", exc)
        return 1
