# src/offsetticks/formatter.py
from __future__ import annotations

import numpy as np
from matplotlib.ticker import Formatter

from .engine import compute_labels
from .format_spec import FormatSpec
from .numbers import NumberFormatter, resolve_formatter

__all__ = ["OffsetTickFormatter"]


class OffsetTickFormatter(Formatter):
    """
    Tick formatter producing offset labels on every draw.

    A declarative alternative to :func:`offsetticks.offset_ticks` that keeps
    the axis' own locator::

        ax.xaxis.set_major_formatter(OffsetTickFormatter("%.3f V"))

    Only ticks inside the view interval take part in the labeling; the rest
    get empty labels so the first *visible* tick is the absolute one.
    """

    def __init__(
        self,
        fmt: str | None = None,
        trim_zeros: bool | None = None,
        *,
        formatter: NumberFormatter | None = None,
        warn: bool | None = None,
    ):
        self.spec = FormatSpec.parse(fmt, trim_zeros, warn=warn, stacklevel=3)
        self._number_formatter = formatter

    def _visible(self, values: np.ndarray) -> np.ndarray:
        if self.axis is None:
            return np.ones(values.shape, dtype=bool)
        lo, hi = sorted(float(v) for v in self.axis.get_view_interval())
        eps = 1e-10 * (hi - lo) if hi > lo else 0.0
        return (values >= lo - eps) & (values <= hi + eps)

    def format_ticks(self, values):
        values = np.asarray(values, dtype=np.float64).ravel()
        self.set_locs(values)
        visible = self._visible(values)
        labels = [""] * values.size
        computed = compute_labels(values[visible], self.spec, formatter=self._number_formatter)
        for idx, label in zip(np.flatnonzero(visible), computed):
            labels[idx] = label
        return labels

    def __call__(self, x, pos=None):
        # Single values (cursor readout, one-off calls) are always absolute.
        return resolve_formatter(self._number_formatter)(float(x), self.spec.fmt)
