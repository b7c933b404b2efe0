"""Subprocess execution for asusctl and friends.

asusctl frequently exits non-zero while still printing usable data, so the
exit status is not a failure signal on its own. Only stderr is inspected for
signs that asusd is unreachable.
"""

from __future__ import annotations

import logging
import subprocess
from typing import Optional, Sequence

from ..config import asusctl_path, command_timeout_s
from .errors import CommandFailedError, NotInstalledError, ServiceNotRunningError


logger = logging.getLogger(__name__)


_SERVICE_DOWN_MARKERS = ("Connection refused", "asusd")


def _decode(data: Optional[bytes]) -> str:
    if not data:
        return ""
    return data.decode("utf-8", errors="replace")


def _spawn(binary: str, args: Sequence[str], *, timeout_s: Optional[float]) -> subprocess.CompletedProcess[bytes]:
    cmd = [binary, *args]
    logger.debug("Running %s", cmd)
    try:
        return subprocess.run(cmd, capture_output=True, timeout=timeout_s, check=False)
    except FileNotFoundError:
        raise NotInstalledError(binary) from None
    except subprocess.TimeoutExpired:
        raise CommandFailedError(f"{binary} timed out after {timeout_s}s") from None
    except OSError as exc:
        raise CommandFailedError(str(exc)) from exc


def is_service_down(stderr: str) -> bool:
    return any(marker in stderr for marker in _SERVICE_DOWN_MARKERS)


def run_command(binary: str, args: Sequence[str], *, timeout_s: Optional[float] = None) -> str:
    """Run *binary* with *args* and return its stdout.

    Raises NotInstalledError if the binary cannot be spawned because it does
    not exist, CommandFailedError for other spawn failures, and
    ServiceNotRunningError if stderr indicates asusd is unreachable (even on
    exit status 0).
    """

    if timeout_s is None:
        timeout_s = command_timeout_s()

    proc = _spawn(binary, args, timeout_s=timeout_s)
    stdout = _decode(proc.stdout)
    stderr = _decode(proc.stderr)

    if is_service_down(stderr):
        raise ServiceNotRunningError()

    if proc.returncode != 0:
        logger.debug("%s %s exited with %s; keeping stdout", binary, " ".join(args), proc.returncode)

    return stdout


def run_command_checked(binary: str, args: Sequence[str], *, timeout_s: Optional[float] = None) -> str:
    """Like run_command(), but a non-zero exit status is a CommandFailedError."""

    if timeout_s is None:
        timeout_s = command_timeout_s()

    proc = _spawn(binary, args, timeout_s=timeout_s)
    stdout = _decode(proc.stdout)
    stderr = _decode(proc.stderr)

    if proc.returncode != 0:
        raise CommandFailedError((stderr or stdout).strip() or f"{binary} exited with {proc.returncode}")

    return stdout


def run_asusctl(args: Sequence[str]) -> str:
    return run_command(asusctl_path(), args)
