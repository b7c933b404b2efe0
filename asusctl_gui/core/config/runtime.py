from __future__ import annotations

import logging
import os
from typing import Optional


logger = logging.getLogger(__name__)


def env_flag(name: str) -> bool:
    v = str(os.environ.get(name, "")).strip().lower()
    return v in {"1", "true", "yes", "on"}


def debug_enabled() -> bool:
    return env_flag("ASUSCTL_GUI_DEBUG")


def command_timeout_s() -> Optional[float]:
    """Subprocess timeout in seconds, or None to wait for the child forever.

    Unset by default: a hung asusctl blocks the caller.
    """

    raw = os.environ.get("ASUSCTL_GUI_COMMAND_TIMEOUT", "").strip()
    if not raw:
        return None
    try:
        value = float(raw)
    except ValueError:
        logger.warning("Ignoring invalid ASUSCTL_GUI_COMMAND_TIMEOUT=%r", raw)
        return None
    if value <= 0:
        return None
    return value
