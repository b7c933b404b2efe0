from __future__ import annotations

import logging
import shutil
from dataclasses import dataclass, field

from ..config import asusctl_path
from .errors import AsusctlError
from .ops_read import get_system_info


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProbeResult:
    """Whether asusctl is usable on this system.

    `reason` is a short human-readable explanation when `available` is False.
    """

    available: bool
    reason: str = ""
    identifiers: dict[str, str] = field(default_factory=dict)


def probe(*, which_fn=shutil.which, get_system_info_fn=get_system_info) -> ProbeResult:
    exe = asusctl_path()
    resolved = which_fn(exe)
    if resolved is None:
        return ProbeResult(available=False, reason="asusctl not found")

    try:
        info = get_system_info_fn()
    except AsusctlError as exc:
        logger.debug("asusctl probe failed: %s", exc)
        return ProbeResult(available=False, reason=str(exc), identifiers={"asusctl": resolved})

    identifiers: dict[str, str] = {"asusctl": resolved}
    for key, value in (
        ("version", info.asusctl_version),
        ("product_family", info.product_family),
        ("board_name", info.board_name),
    ):
        if value:
            identifiers[key] = value

    return ProbeResult(available=True, reason="asusctl present", identifiers=identifiers)
