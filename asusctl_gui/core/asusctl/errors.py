from __future__ import annotations


class AsusctlError(RuntimeError):
    """Base class for every failure surfaced by the asusctl layer.

    `str(exc)` is stable and meant to be shown to users as-is.
    """


class NotInstalledError(AsusctlError):
    def __init__(self, binary: str = "asusctl") -> None:
        self.binary = binary
        super().__init__(f"{binary} is not installed")


class ServiceNotRunningError(AsusctlError):
    def __init__(self) -> None:
        super().__init__("asusd service is not running")


class CommandFailedError(AsusctlError):
    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Command failed: {detail}")


class ParseError(AsusctlError):
    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Parse error: {detail}")


class OutOfRangeError(AsusctlError):
    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Value out of range: {detail}")
