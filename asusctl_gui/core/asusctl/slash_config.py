"""Fallback reader for asusd's slash (LED bar) config file.

The file is RON, but only a handful of flat `key: value,` lines matter here,
so it is scanned line-by-line instead of being parsed as RON.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

from ..config import slash_config_path
from .errors import ParseError
from .models import SlashMode, SlashState


logger = logging.getLogger(__name__)


_UINT32_MAX = 0xFFFFFFFF


def _value_after_colon(line: str) -> Optional[str]:
    parts = line.split(":")
    if len(parts) < 2:
        return None
    v = parts[1].strip()
    if v.endswith(","):
        v = v[:-1]
    return v


def _extract_number(line: str) -> Optional[int]:
    """Extract a number from a line like `brightness: 255,`."""

    v = _value_after_colon(line)
    if v is None or not (v.isascii() and v.isdigit()):
        return None
    n = int(v)
    if n > _UINT32_MAX:
        return None
    return n


def _extract_string_value(line: str) -> Optional[str]:
    """Extract a string value from a line like `display_mode: BitStream,`."""

    return _value_after_colon(line)


def _to_byte(n: int) -> int:
    # Out-of-range values wrap rather than being rejected.
    return n & 0xFF


def parse_slash_config_text(content: str) -> SlashState:
    enabled = False
    brightness = 0
    interval = 0
    mode = SlashMode.default()

    for raw in content.splitlines():
        line = raw.strip()

        if line.startswith("enabled:"):
            enabled = "true" in line
        elif line.startswith("brightness:"):
            n = _extract_number(line)
            if n is not None:
                brightness = _to_byte(n)
        elif line.startswith("display_interval:"):
            n = _extract_number(line)
            if n is not None:
                interval = _to_byte(n)
        elif line.startswith("display_mode:"):
            value = _extract_string_value(line)
            if value is not None:
                try:
                    mode = SlashMode.parse(value)
                except ParseError:
                    logger.debug("Unknown slash display_mode %r; using %s", value, SlashMode.default())
                    mode = SlashMode.default()

    return SlashState(enabled=enabled, brightness=brightness, interval=interval, mode=mode)


def parse_slash_config(path: Union[str, Path, None] = None) -> SlashState:
    """Read the slash config file (default: /etc/asusd/slash.ron).

    Any read failure, including a missing file, is reported as ParseError.
    """

    p = Path(path) if path is not None else slash_config_path()
    try:
        content = p.read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        raise ParseError(f"Failed to read slash config: {exc}") from exc

    return parse_slash_config_text(content)
