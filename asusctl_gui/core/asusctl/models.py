from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum

from .errors import ParseError


class KeyboardBrightness(IntEnum):
    """Keyboard backlight level.

    The integer value is the encoding used by the Aura `Brightness` bus
    property. `str()` yields the lowercase form `asusctl --kbd-bright` expects.
    """

    OFF = 0
    LOW = 1
    MED = 2
    HIGH = 3

    def __str__(self) -> str:
        return self.cli_name

    def __format__(self, format_spec: str) -> str:
        return format(str(self), format_spec)

    @property
    def cli_name(self) -> str:
        return self.name.lower()

    @property
    def display_name(self) -> str:
        return self.name.capitalize()

    @classmethod
    def default(cls) -> "KeyboardBrightness":
        return cls.HIGH

    @classmethod
    def parse(cls, text: str) -> "KeyboardBrightness":
        t = str(text).strip().lower()
        for level in cls:
            if level.cli_name == t:
                return level
        raise ParseError(f"Unknown brightness level: {text}")

    @classmethod
    def from_bus(cls, value: int) -> "KeyboardBrightness":
        try:
            return cls(int(value))
        except ValueError:
            raise ParseError(f"Unknown brightness value: {value}") from None


_PPD_NAMES = {
    0: "power-saver",
    1: "balanced",
    2: "performance",
}


class PowerProfile(IntEnum):
    """Platform power profile.

    `str()` is the capitalized name `asusctl profile --profile-set` expects;
    `ppd_name` is the power-profiles-daemon vocabulary.
    """

    QUIET = 0
    BALANCED = 1
    PERFORMANCE = 2

    def __str__(self) -> str:
        return self.display_name

    def __format__(self, format_spec: str) -> str:
        return format(str(self), format_spec)

    @property
    def display_name(self) -> str:
        return self.name.capitalize()

    @property
    def ppd_name(self) -> str:
        return _PPD_NAMES[int(self)]

    @classmethod
    def default(cls) -> "PowerProfile":
        return cls.BALANCED

    @classmethod
    def parse(cls, text: str) -> "PowerProfile":
        t = str(text).strip().lower()
        for profile in cls:
            if profile.name.lower() == t:
                return profile
        raise ParseError(f"Unknown power profile: {text}")


class AuraMode(str, Enum):
    STATIC = "Static"
    BREATHE = "Breathe"
    PULSE = "Pulse"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def default(cls) -> "AuraMode":
        return cls.STATIC

    @classmethod
    def parse(cls, text: str) -> "AuraMode":
        t = str(text).strip().lower()
        for mode in cls:
            if mode.value.lower() == t:
                return mode
        raise ParseError(f"Unknown aura mode: {text}")


class SlashMode(str, Enum):
    """LED bar animation.

    Unlike the other enums, parsing is exact and case-sensitive: the names
    must match what asusd writes to its config and what `asusctl slash
    --mode` accepts.
    """

    BOUNCE = "Bounce"
    SLASH = "Slash"
    LOADING = "Loading"
    BITSTREAM = "BitStream"
    TRANSMISSION = "Transmission"
    FLOW = "Flow"
    FLUX = "Flux"
    PHANTOM = "Phantom"
    SPECTRUM = "Spectrum"
    HAZARD = "Hazard"
    INTERFACING = "Interfacing"
    RAMP = "Ramp"
    GAMEOVER = "GameOver"
    START = "Start"
    BUZZER = "Buzzer"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def default(cls) -> "SlashMode":
        return cls.FLOW

    @classmethod
    def parse(cls, text: str) -> "SlashMode":
        for mode in cls:
            if mode.value == text:
                return mode
        raise ParseError(f"Unknown slash mode: {text}")


@dataclass(frozen=True)
class ProfileState:
    active: PowerProfile = PowerProfile.BALANCED
    on_ac: PowerProfile = PowerProfile.BALANCED
    on_battery: PowerProfile = PowerProfile.BALANCED


@dataclass(frozen=True)
class SlashState:
    enabled: bool = False
    brightness: int = 0
    interval: int = 0
    mode: SlashMode = SlashMode.FLOW


@dataclass(frozen=True)
class SupportedFeatures:
    has_aura: bool = False
    has_platform: bool = False
    has_fan_curves: bool = False
    has_slash: bool = False
    has_charge_control: bool = False
    has_throttle_policy: bool = False
    keyboard_brightness_levels: tuple[KeyboardBrightness, ...] = field(default_factory=tuple)
    aura_modes: tuple[AuraMode, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class SystemInfo:
    asusctl_version: str = ""
    product_family: str = ""
    board_name: str = ""
