# src/offsetticks/__init__.py
from __future__ import annotations

from . import _config as config
from .errors import (
    OffsetTicksError, TickFormatError, UnknownDimensionError, BindError,
    OffsetTicksWarning, NewlineInFormatWarning, SignedFormatWarning,
)
from .format_spec import FormatSpec
from .numbers import default_format, plain_format, grouped_format, resolve_formatter
from .engine import compute_labels, straddles_zero, trim_trailing_zeros
from .axes import AxisHost, apply_offset_labels
from .bindings import (
    OffsetTickBinding, BindingRegistry, offset_ticks, remove_offset_ticks, default_registry,
)
from .formatter import OffsetTickFormatter

__version__ = "0.1.0"

__all__ = [
    # Core entry points
    "compute_labels", "apply_offset_labels", "offset_ticks", "remove_offset_ticks",
    "OffsetTickFormatter",
    # Format handling
    "FormatSpec", "default_format", "plain_format", "grouped_format", "resolve_formatter",
    "straddles_zero", "trim_trailing_zeros",
    # Bindings
    "AxisHost", "OffsetTickBinding", "BindingRegistry", "default_registry",
    # Config
    "config",
    # Errors and warnings
    "OffsetTicksError", "TickFormatError", "UnknownDimensionError", "BindError",
    "OffsetTicksWarning", "NewlineInFormatWarning", "SignedFormatWarning",
]
