"""Parsers for asusctl's human-readable output.

asusctl prints banners and free-form reports rather than structured data, so
these work line-by-line on label prefixes, or by plain substring presence for
the `--show-supported` dump.
"""

from __future__ import annotations

from dataclasses import replace

from .errors import ParseError
from .models import AuraMode, KeyboardBrightness, PowerProfile, ProfileState, SupportedFeatures, SystemInfo


_SYSTEM_INFO_LABELS = (
    ("asusctl version:", "asusctl_version"),
    ("Product family:", "product_family"),
    ("Board name:", "board_name"),
)

_PROFILE_LABELS = (
    ("Active profile is", "active"),
    ("Profile on AC is", "on_ac"),
    ("Profile on Battery is", "on_battery"),
)

_BRIGHTNESS_LINE_LABEL = "Current keyboard led brightness:"

_BRIGHTNESS_HEADER = "Supported Keyboard Brightness:"
_AURA_MODES_HEADER = "Supported Aura Modes:"

# Probe order defines the order of the discovered lists.
_BRIGHTNESS_PROBES = ("Off", "Low", "Med", "High")
_AURA_MODE_PROBES = ("Static", "Breathe", "Pulse")


def _lines(text: str) -> list[str]:
    return [line.strip() for line in (text or "").splitlines()]


def parse_system_info(text: str) -> SystemInfo:
    """Parse `asusctl --version` output.

    Example:
        asusctl version: 6.2.0
         Product family: ROG Zephyrus G14
             Board name: GA403UV
    """

    found: dict[str, str] = {}
    for line in _lines(text):
        for label, attr in _SYSTEM_INFO_LABELS:
            if attr not in found and line.startswith(label):
                found[attr] = line[len(label) :].strip()
                break
    return SystemInfo(**found)


def parse_profile_state(text: str) -> ProfileState:
    """Parse `asusctl profile --profile-get` output.

    Missing lines keep the default profile; a present line with an unknown
    profile name raises ParseError.
    """

    state = ProfileState()
    for line in _lines(text):
        for label, attr in _PROFILE_LABELS:
            if line.startswith(label):
                state = replace(state, **{attr: PowerProfile.parse(line[len(label) :].strip())})
                break
    return state


def parse_keyboard_brightness(text: str) -> KeyboardBrightness:
    for line in (text or "").splitlines():
        if _BRIGHTNESS_LINE_LABEL not in line:
            continue
        parts = line.split(":")
        if len(parts) < 2:
            raise ParseError("Missing brightness value")
        return KeyboardBrightness.parse(parts[1].strip())
    raise ParseError("Could not find brightness level in output")


def extract_section(text: str, header: str) -> str:
    """Return the bracketed block that follows *header*.

    Collects every line after the first line containing *header*, up to and
    including the first line where the running `[` minus `]` count drops to
    zero or below and the line itself contains `]`. Each collected line is
    newline-terminated.

    If the block opens on the header line itself (`Header: [a, b]`), the text
    after the header is treated as the first line of the block. Returns "" if
    the header is absent; an unclosed block runs to the end of *text*.
    """

    section: list[str] = []
    in_section = False
    depth = 0

    for line in (text or "").splitlines():
        if not in_section:
            if header not in line:
                continue
            in_section = True
            line = line.split(header, 1)[1]
            if "[" not in line:
                continue

        depth += line.count("[")
        depth -= line.count("]")
        section.append(line + "\n")

        if depth <= 0 and "]" in line:
            break

    return "".join(section)


def parse_supported_features(text: str) -> SupportedFeatures:
    """Derive capability flags from `asusctl --show-supported`.

    This is a presence test over the whole dump, not a structured parse.
    """

    text = text or ""

    brightness_section = extract_section(text, _BRIGHTNESS_HEADER)
    levels = tuple(KeyboardBrightness.parse(name) for name in _BRIGHTNESS_PROBES if name in brightness_section)

    aura_section = extract_section(text, _AURA_MODES_HEADER)
    modes = tuple(AuraMode.parse(name) for name in _AURA_MODE_PROBES if name in aura_section)

    return SupportedFeatures(
        has_aura="xyz.ljones.Aura" in text,
        has_platform="xyz.ljones.Platform" in text,
        has_fan_curves="xyz.ljones.FanCurves" in text,
        has_slash="xyz.ljones.Slash" in text,
        has_charge_control="ChargeControlEndThreshold" in text,
        has_throttle_policy="ThrottlePolicy" in text,
        keyboard_brightness_levels=levels,
        aura_modes=modes,
    )
