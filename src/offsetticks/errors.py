# src/offsetticks/errors.py
from __future__ import annotations
from typing import Any, Dict, Iterable

__all__ = [
    "OffsetTicksError",
    "TickFormatError",
    "UnknownDimensionError",
    "BindError",
    "OffsetTicksWarning",
    "NewlineInFormatWarning",
    "SignedFormatWarning",
]

class OffsetTicksError(Exception):
    """Base error for the offsetticks package."""


class TickFormatError(OffsetTicksError, ValueError):
    """Raised when a tick value cannot be rendered with the given format."""
    def __init__(self, fmt: str | None, value: Any, reason: str = ""):
        self.fmt = fmt
        self.value = value
        msg = f"Cannot format tick value {value!r} with {fmt!r}"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)


class UnknownDimensionError(OffsetTicksError, ValueError):
    """Raised when an axes has no axis for the requested dimension name."""
    def __init__(self, dim: str, available: Iterable[str]):
        self.dim = dim
        self.available = tuple(available)
        msg = f"Unknown axis dimension {dim!r}"
        if self.available:
            msg += f"; available: {', '.join(self.available)}"
        super().__init__(msg)


class BindError(OffsetTicksError):
    """Raised after a multi-dimension bind when one or more dimensions failed."""
    def __init__(self, errors: Dict[str, BaseException]):
        self.errors = dict(errors)
        msg = "Failed to bind offset tick labels:\n"
        for dim, exc in self.errors.items():
            msg += f"  - {dim}: {exc}\n"
        super().__init__(msg.rstrip("\n"))


class OffsetTicksWarning(UserWarning):
    """Base category for advisory offsetticks warnings."""


class NewlineInFormatWarning(OffsetTicksWarning):
    """A format string contained a line break; it was replaced with a space."""


class SignedFormatWarning(OffsetTicksWarning):
    """A format string asks for an explicit '+' on positive values."""
