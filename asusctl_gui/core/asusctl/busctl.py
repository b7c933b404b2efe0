from __future__ import annotations

import logging
import subprocess

from ..config import busctl_path, command_timeout_s
from .errors import CommandFailedError, ParseError, ServiceNotRunningError


logger = logging.getLogger(__name__)


ASUSD_BUS_NAME = "xyz.ljones.Asusd"

PLATFORM_PATH = "/xyz/ljones"
PLATFORM_INTERFACE = "xyz.ljones.Platform"

AURA_PATH = "/xyz/ljones/aura/19b6_4_4"
AURA_INTERFACE = "xyz.ljones.Aura"

SLASH_PATH = "/xyz/ljones/aura/193b_5_5"
SLASH_INTERFACE = "xyz.ljones.Slash"

_MISSING_MARKERS = ("No such", "not found")

_BYTE_MAX = 0xFF
_UINT32_MAX = 0xFFFFFFFF


def read_property(object_path: str, interface: str, prop: str) -> str:
    """Read one asusd property via `busctl get-property`.

    Returns busctl's reply with surrounding whitespace removed, formatted as
    `<type> <value>`, e.g. `b true`, `y 80`, `u 2`.
    """

    cmd = [busctl_path(), "get-property", ASUSD_BUS_NAME, object_path, interface, prop]
    logger.debug("Running %s", cmd)

    try:
        cp = subprocess.run(cmd, check=False, capture_output=True, timeout=command_timeout_s())
    except subprocess.TimeoutExpired:
        raise CommandFailedError(f"busctl timed out reading {interface}.{prop}") from None
    except OSError as exc:
        raise CommandFailedError(f"busctl failed: {exc}") from exc

    stdout = (cp.stdout or b"").decode("utf-8", errors="replace")
    if cp.returncode != 0:
        stderr = (cp.stderr or b"").decode("utf-8", errors="replace")
        if any(marker in stderr for marker in _MISSING_MARKERS):
            raise ServiceNotRunningError()
        raise CommandFailedError(stderr.strip())

    return stdout.strip()


def _strip_signature(reply: str, sig: str, type_name: str) -> str:
    prefix = f"{sig} "
    if not reply.startswith(prefix):
        raise ParseError(f"Expected {type_name}, got: {reply}")
    return reply[len(prefix) :]


def _parse_unsigned(value: str, type_name: str, maximum: int) -> int:
    # int() would also accept signs, underscores and surrounding whitespace.
    if not (value.isascii() and value.isdigit()):
        raise ParseError(f"Invalid {type_name} value: {value}")
    n = int(value)
    if n > maximum:
        raise ParseError(f"Invalid {type_name} value: {value}")
    return n


def decode_bool(reply: str) -> bool:
    value = _strip_signature(reply, "b", "boolean")
    if value == "true":
        return True
    if value == "false":
        return False
    raise ParseError(f"Invalid boolean value: {value}")


def decode_byte(reply: str) -> int:
    value = _strip_signature(reply, "y", "byte")
    return _parse_unsigned(value, "byte", _BYTE_MAX)


def decode_uint(reply: str) -> int:
    value = _strip_signature(reply, "u", "uint")
    return _parse_unsigned(value, "uint", _UINT32_MAX)
