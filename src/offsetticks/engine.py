# src/offsetticks/engine.py
from __future__ import annotations

from typing import Sequence
import re

import numpy as np

from .format_spec import FormatSpec
from .numbers import NumberFormatter, resolve_formatter

__all__ = ["compute_labels", "straddles_zero", "trim_trailing_zeros", "as_ticks"]

# First decimal fraction that follows a digit; exponents carry no '.'.
_FRACTION_RE = re.compile(r"(?<=\d)\.(\d+)")


def as_ticks(ticks: Sequence[float] | np.ndarray) -> np.ndarray:
    return np.asarray(ticks, dtype=np.float64).ravel()


def straddles_zero(ticks: Sequence[float] | np.ndarray) -> bool:
    """True when some tick is >= 0 and some tick is <= 0 (a lone 0 counts)."""
    arr = as_ticks(ticks)
    if arr.size == 0:
        return False
    return bool(np.any(arr >= 0) and np.any(arr <= 0))


def trim_trailing_zeros(label: str) -> str:
    """
    Strip trailing zeros from the first decimal fraction in ``label``.

    ``"+1.2300 V"`` -> ``"+1.23 V"``, ``"+1.000"`` -> ``"+1"``,
    ``"-3.050e+02"`` -> ``"-3.05e+02"``. Labels without a fraction are
    returned unchanged.
    """
    m = _FRACTION_RE.search(label)
    if m is None:
        return label
    digits = m.group(1).rstrip("0")
    fraction = "." + digits if digits else ""
    return label[:m.start()] + fraction + label[m.end():]


def compute_labels(
    ticks: Sequence[float] | np.ndarray,
    spec: FormatSpec | None = None,
    *,
    formatter: NumberFormatter | None = None,
) -> list[str]:
    """
    Return one label per tick.

    If the ticks straddle zero every tick is formatted on its own (absolute
    mode). Otherwise the first tick keeps its absolute value and the rest are
    shown as ``"+" + (tick - first)`` using the format without its leading
    literal text (relative mode). In relative mode trailing zeros are trimmed
    when ``spec.trim_zeros`` is set.

    Formatting errors propagate as :class:`~offsetticks.errors.TickFormatError`.
    """
    if spec is None:
        spec = FormatSpec()
    values = as_ticks(ticks)
    if values.size == 0:
        return []

    fmt_number = resolve_formatter(formatter)

    if straddles_zero(values):
        return [fmt_number(float(v), spec.fmt) for v in values]

    first = float(values[0])
    labels = [fmt_number(first, spec.fmt)]
    rel_fmt = spec.relative_fmt
    for v in values[1:]:
        labels.append("+" + fmt_number(float(v) - first, rel_fmt))

    if spec.trim_zeros:
        labels = [trim_trailing_zeros(label) for label in labels]
    return labels
