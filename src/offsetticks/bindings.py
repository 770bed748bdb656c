# src/offsetticks/bindings.py
"""
Live offset tick labels.

A binding owns the "recompute and write labels" handler for one
(axes, dimension). The registry guarantees at most one live binding per
slot: rebinding fully detaches the old handler before attaching the new one.
"""
from __future__ import annotations

from typing import Dict, Iterable
import itertools
import logging

from .axes import AutoState, AxisHost, available_dimensions, dimensions
from .engine import compute_labels
from .errors import BindError
from .format_spec import FormatSpec
from .numbers import NumberFormatter

__all__ = [
    "OffsetTickBinding",
    "BindingRegistry",
    "offset_ticks",
    "remove_offset_ticks",
    "default_registry",
]

logger = logging.getLogger(__name__)

_registry_ids = itertools.count(1)


class OffsetTickBinding:
    def __init__(self, host: AxisHost, spec: FormatSpec, formatter: NumberFormatter | None = None):
        self.host = host
        self.spec = spec
        self.formatter = formatter
        self.labels: list[str] = []
        self.refresh_count = 0
        self._auto: AutoState | None = None
        self._cids: list = []
        self._refreshing = False

    def __repr__(self) -> str:
        state = "attached" if self.attached else "detached"
        return f"OffsetTickBinding(dim={self.host.dim!r}, fmt={self.spec.fmt!r}, {state})"

    @property
    def attached(self) -> bool:
        return self._auto is not None

    @property
    def auto_state(self) -> AutoState | None:
        return self._auto

    def attach(self) -> None:
        if self.attached:
            return
        self._auto = self.host.capture_auto()
        self._cids = self.host.connect(self._on_change)

    def detach(self) -> None:
        """Disconnect all callbacks, then hand the axis back to its own tickers."""
        if not self.attached:
            return
        cids, self._cids = self._cids, []
        self.host.disconnect(cids)
        state, self._auto = self._auto, None
        self.host.restore_auto(state)

    def _on_change(self, *_args) -> None:
        # Axes callbacks pass the axes, canvas callbacks pass an event.
        self.refresh()

    def refresh(self) -> None:
        """Recompute labels for the visible ticks and write them to the axis."""
        if not self.attached:
            raise RuntimeError(f"{self!r} is not attached.")
        if self._refreshing:
            # Reading the view interval may autoscale and re-emit lim_changed.
            return
        self._refreshing = True
        try:
            ticks = self.host.visible_ticks(self._auto.locator)
            if ticks.size == 0:
                self.labels = []
            else:
                self.labels = compute_labels(ticks, self.spec, formatter=self.formatter)
                self.host.write_labels(ticks, self.labels)
        finally:
            self._refreshing = False
        self.refresh_count += 1


class BindingRegistry:
    """
    (axes, dimension) -> live :class:`OffsetTickBinding`.

    The slots live on the axes object itself (one dict per registry), so a
    binding never outlives its axes. Removal is always explicit via
    :meth:`unbind`.
    """

    def __init__(self, name: str | None = None) -> None:
        if name is None:
            name = f"r{next(_registry_ids)}"
        self._attr = f"_offsetticks_{name}_bindings"

    def _slots(self, ax, *, create: bool = False) -> Dict[str, OffsetTickBinding] | None:
        slots = getattr(ax, self._attr, None)
        if slots is None and create:
            slots = {}
            setattr(ax, self._attr, slots)
        return slots

    def get(self, ax, dim: str) -> OffsetTickBinding | None:
        return (self._slots(ax) or {}).get(str(dim).lower())

    def bindings(self, ax) -> Dict[str, OffsetTickBinding]:
        return dict(self._slots(ax) or {})

    def bind(
        self,
        ax,
        dim: str,
        spec: FormatSpec | None,
        *,
        formatter: NumberFormatter | None = None,
    ) -> OffsetTickBinding | None:
        """
        Install (or replace) the binding for ``(ax, dim)`` and label it once.

        ``spec=None`` removes the binding instead and returns None; a spec
        whose ``fmt`` is None binds with the default number conversion.
        If the first refresh fails the binding stays installed and the error
        propagates; it keeps failing until rebound or unbound.
        """
        host = AxisHost.from_axes(ax, dim)
        self.unbind(ax, host.dim)
        if spec is None:
            return None

        binding = OffsetTickBinding(host, spec, formatter)
        binding.attach()
        self._slots(ax, create=True)[host.dim] = binding
        logger.debug("Bound offset ticks on %s-axis of %r with format %r", host.dim, ax, spec.fmt)
        binding.refresh()
        return binding

    def unbind(self, ax, dim: str) -> bool:
        """Detach the binding for ``(ax, dim)``; False if there was none."""
        dim = str(dim).lower()
        slots = self._slots(ax)
        if not slots or dim not in slots:
            return False
        slots[dim].detach()
        del slots[dim]
        logger.debug("Unbound offset ticks on %s-axis of %r", dim, ax)
        return True


_REGISTRY = BindingRegistry("default")


def default_registry() -> BindingRegistry:
    return _REGISTRY


def offset_ticks(
    ax,
    dims: str | Iterable[str],
    fmt: str | None = None,
    trim_zeros: bool | None = None,
    *,
    formatter: NumberFormatter | None = None,
    warn: bool | None = None,
    registry: BindingRegistry | None = None,
) -> Dict[str, OffsetTickBinding | None]:
    """
    Keep offset tick labels on ``ax`` up to date for each dimension in ``dims``.

    The first visible tick shows its absolute value, every other tick shows
    ``+<offset>`` from it. Labels are recomputed on zoom, pan, autoscale and
    resize. ``fmt=None`` uses the default number conversion; passing ``""``
    removes the labels and restores the axis' own tickers.

    Parameters:
        ax: matplotlib Axes (2-D or 3-D).
        dims: ``"x"``, ``"y"``, ``"xy"``, ``("x", "z")``...
        fmt: one ``%``-style directive with optional literal prefix/suffix,
            e.g. ``"%.3f V"``. The prefix is only shown on the first label.
            ``""`` removes the binding.
        trim_zeros: strip trailing zeros after the decimal point
            (default from config, True).
        formatter: number formatter ``(value, fmt) -> str``; defaults to the
            plain or grouped formatter depending on the ``grouping`` token.
        warn: emit advisory format warnings (default from config).
        registry: binding registry to use (default: the package registry).

    Returns:
        ``{dim: binding}`` (``None`` for removed bindings).

    Every dimension is attempted. With several dimensions, failures are
    collected and raised together as :class:`BindError`.
    """
    reg = registry if registry is not None else _REGISTRY
    names = dimensions(dims)
    if fmt == "":
        spec = None
    else:
        spec = FormatSpec.parse(fmt, trim_zeros, warn=warn, stacklevel=3)

    results: Dict[str, OffsetTickBinding | None] = {}
    errors: Dict[str, BaseException] = {}
    for dim in names:
        try:
            results[dim] = reg.bind(ax, dim, spec, formatter=formatter)
        except Exception as exc:
            errors[dim] = exc
    if errors:
        if len(names) == 1:
            raise errors[names[0]]
        raise BindError(errors) from next(iter(errors.values()))
    return results


def remove_offset_ticks(
    ax,
    dims: str | Iterable[str] = "xyz",
    *,
    registry: BindingRegistry | None = None,
) -> Dict[str, bool]:
    """Remove live offset labels from the named dimensions that exist on ``ax``."""
    reg = registry if registry is not None else _REGISTRY
    present = set(available_dimensions(ax))
    return {dim: reg.unbind(ax, dim) for dim in dimensions(dims) if dim in present}
