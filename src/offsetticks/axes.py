# src/offsetticks/axes.py
"""
matplotlib side of offsetticks.

:class:`AxisHost` is the only place that touches matplotlib axis state: it
reads tick positions, writes fixed labels, snapshots/restores the automatic
locator and formatter, and connects change callbacks.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Sequence

import numpy as np
from matplotlib.axis import Axis
from matplotlib.ticker import FixedFormatter, FixedLocator, Formatter, Locator

from .engine import compute_labels
from .errors import UnknownDimensionError
from .format_spec import FormatSpec
from .numbers import NumberFormatter

__all__ = ["AxisHost", "AutoState", "apply_offset_labels", "dimensions", "available_dimensions"]

_DIM_NAMES = ("x", "y", "z")


def available_dimensions(ax) -> tuple[str, ...]:
    return tuple(d for d in _DIM_NAMES if isinstance(getattr(ax, f"{d}axis", None), Axis))


def dimensions(dims: str | Iterable[str]) -> tuple[str, ...]:
    """Normalize ``"x"``, ``"xy"``, ``("x", "y")`` to an ordered tuple of names."""
    if isinstance(dims, str):
        names = [c for c in dims if not c.isspace() and c != ","]
    else:
        names = [str(d).strip() for d in dims]
    out: list[str] = []
    for name in names:
        name = name.lower()
        if name and name not in out:
            out.append(name)
    if not out:
        raise ValueError("At least one axis dimension is required.")
    return tuple(out)


@dataclass(frozen=True)
class AutoState:
    """Major locator/formatter (and their default flags) before manual labeling."""

    locator: Locator
    formatter: Formatter
    default_locator: bool
    default_formatter: bool


class AxisHost:
    """One dimension of a matplotlib Axes, seen as a tick-labeling host."""

    def __init__(self, axis: Axis):
        if not isinstance(axis, Axis):
            raise TypeError(f"Expected a matplotlib Axis, got {type(axis).__name__}.")
        self.axis = axis
        self.ax = axis.axes
        self.dim = str(getattr(axis, "axis_name", "")).lower()

    @classmethod
    def from_axes(cls, ax, dim: str) -> "AxisHost":
        dim = str(dim).lower()
        if dim not in _DIM_NAMES:
            raise UnknownDimensionError(dim, available_dimensions(ax))
        axis = getattr(ax, f"{dim}axis", None)
        if not isinstance(axis, Axis):
            raise UnknownDimensionError(dim, available_dimensions(ax))
        host = cls(axis)
        host.dim = dim
        return host

    def __repr__(self) -> str:
        return f"AxisHost(dim={self.dim!r}, axes={self.ax!r})"

    # ------------------------------------------------------------------
    # Ticks and labels
    # ------------------------------------------------------------------

    def visible_ticks(self, locator: Locator | None = None) -> np.ndarray:
        """Tick positions from ``locator`` that fall inside the view interval."""
        loc = locator if locator is not None else self.axis.get_major_locator()
        ticks = np.asarray(loc(), dtype=np.float64).ravel()
        if ticks.size == 0:
            return ticks
        lo, hi = sorted(float(v) for v in self.axis.get_view_interval())
        eps = 1e-10 * (hi - lo) if hi > lo else 0.0
        mask = (ticks >= lo - eps) & (ticks <= hi + eps)
        return ticks[mask]

    def write_labels(self, ticks: Sequence[float] | np.ndarray, labels: Sequence[str]) -> None:
        ticks = np.asarray(ticks, dtype=np.float64).ravel()
        if len(labels) != ticks.size:
            raise ValueError(f"Got {len(labels)} labels for {ticks.size} ticks.")
        self.axis.set_major_locator(FixedLocator(ticks))
        self.axis.set_major_formatter(FixedFormatter(list(labels)))

    # ------------------------------------------------------------------
    # Automatic vs manual mode
    # ------------------------------------------------------------------

    def capture_auto(self) -> AutoState:
        return AutoState(
            locator=self.axis.get_major_locator(),
            formatter=self.axis.get_major_formatter(),
            default_locator=bool(getattr(self.axis, "isDefault_majloc", False)),
            default_formatter=bool(getattr(self.axis, "isDefault_majfmt", False)),
        )

    def restore_auto(self, state: AutoState) -> None:
        self.axis.set_major_locator(state.locator)
        self.axis.set_major_formatter(state.formatter)
        # set_major_* clear these; matplotlib only swaps default tickers it owns.
        self.axis.isDefault_majloc = state.default_locator
        self.axis.isDefault_majfmt = state.default_formatter

    # ------------------------------------------------------------------
    # Change notifications
    # ------------------------------------------------------------------

    def connect(self, callback: Callable[..., Any]) -> list[tuple[Any, int]]:
        """
        Call ``callback`` whenever this dimension's tick geometry may change:
        on view-limit changes (zoom, pan, autoscale) and on canvas resize.
        Returns (registry, cid) pairs for :meth:`disconnect`.
        """
        cids: list[tuple[Any, int]] = []
        cids.append((self.ax.callbacks, self.ax.callbacks.connect(f"{self.dim}lim_changed", callback)))
        canvas = self.ax.figure.canvas
        if canvas is not None:
            cids.append((canvas, canvas.mpl_connect("resize_event", callback)))
        return cids

    @staticmethod
    def disconnect(cids: Iterable[tuple[Any, int]]) -> None:
        for owner, cid in cids:
            if hasattr(owner, "mpl_disconnect"):
                owner.mpl_disconnect(cid)
            else:
                owner.disconnect(cid)


def _as_host(axis) -> AxisHost:
    if isinstance(axis, AxisHost):
        return axis
    return AxisHost(axis)


def apply_offset_labels(
    axis,
    fmt: str | None = None,
    trim_zeros: bool | None = None,
    *,
    formatter: NumberFormatter | None = None,
    warn: bool | None = None,
) -> list[str]:
    """
    Relabel ``axis`` once with offset tick labels and return the labels.

    ``axis`` is a matplotlib ``Axis`` (``ax.xaxis``) or an :class:`AxisHost`.
    The labels are fixed: later zooming does not update them. Use
    :func:`offsetticks.offset_ticks` for labels that follow the view.
    """
    host = _as_host(axis)
    spec = FormatSpec.parse(fmt, trim_zeros, warn=warn, stacklevel=3)
    ticks = host.visible_ticks()
    if ticks.size == 0:
        return []
    labels = compute_labels(ticks, spec, formatter=formatter)
    host.write_labels(ticks, labels)
    return labels
