# src/offsetticks/numbers.py
from __future__ import annotations

from typing import Callable
import math
import re

from . import _config
from .errors import TickFormatError
from .format_spec import DIRECTIVE_RE, find_directive

__all__ = [
    "NumberFormatter",
    "default_format",
    "plain_format",
    "grouped_format",
    "group_digits",
    "resolve_formatter",
]

# (value, fmt) -> label text; fmt=None selects the default conversion.
NumberFormatter = Callable[[float, str | None], str]

_INT_ONLY_CONVERSIONS = frozenset("xXoc")
_GROUPABLE_CONVERSIONS = frozenset("diufFgGeE")
_DIGIT_RUN_RE = re.compile(r"\d+")


def default_format(value: float) -> str:
    """
    Conversion used when no format is given.

    Integral values print without a fractional part; everything else keeps
    roughly four digits below the leading one (at least 5, at most 16
    significant digits).
    """
    x = float(value)
    if not math.isfinite(x):
        return str(x)
    if x.is_integer():
        return "%d" % x
    digits = int(math.floor(math.log10(abs(x)))) + 5
    digits = min(max(digits, 5), 16)
    return "%.*g" % (digits, x)


def _conversion_char(fmt: str) -> str:
    conversion = find_directive(fmt)[1]
    return conversion[-1:] if conversion else ""


def _coerce_arg(value: float, fmt: str):
    # '%x' and friends reject floats even when they hold an integer.
    if _conversion_char(fmt) in _INT_ONLY_CONVERSIONS:
        x = float(value)
        if x.is_integer():
            return int(x)
    return value


def plain_format(value: float, fmt: str | None = None) -> str:
    """Apply ``fmt % value``; failures raise :class:`TickFormatError`."""
    if fmt is None:
        return default_format(value)
    arg = _coerce_arg(value, fmt)
    try:
        return fmt % arg
    except (TypeError, ValueError, OverflowError) as exc:
        raise TickFormatError(fmt, value, str(exc)) from exc


def group_digits(text: str, sep: str = ",", size: int = 3) -> str:
    """Insert ``sep`` every ``size`` digits into the first digit run of ``text``."""
    m = _DIGIT_RUN_RE.search(text)
    if m is None:
        return text
    digits = m.group(0)
    if len(digits) <= size:
        return text
    head = len(digits) % size or size
    parts = [digits[:head]]
    parts.extend(digits[i:i + size] for i in range(head, len(digits), size))
    return text[:m.start()] + sep.join(parts) + text[m.end():]


def _unpadded(conversion: str) -> tuple[str, int, bool]:
    """Drop the field width from ``conversion``: (bare conversion, width, left-aligned)."""
    m = DIRECTIVE_RE.fullmatch(conversion)
    if m is None or m.group("width") in (None, "*"):
        return conversion, 0, False
    flags = m.group("flags")
    bare = "%" + flags.replace("0", "").replace("-", "") + conversion[m.end("width"):]
    return bare, int(m.group("width")), "-" in flags


def grouped_format(
    value: float,
    fmt: str | None = None,
    *,
    sep: str | None = None,
    size: int | None = None,
) -> str:
    """
    Like :func:`plain_format`, with digit-group separators in the integer part.

    Only the converted number is grouped; literal prefix and suffix text is
    left alone. Non-decimal conversions (``%x``, ``%s``, ...) are not grouped.
    A field width (``"%12.1f"``) applies to the grouped number and is always
    padded with spaces, so the ``0`` flag has no effect.
    """
    sep = _config.resolve("group_sep", sep)
    size = _config.resolve("group_size", size)
    _config.validate(group_sep=sep, group_size=size)
    if fmt is None:
        return group_digits(default_format(value), sep, size)

    full = plain_format(value, fmt)
    prefix, conversion, suffix = find_directive(fmt)
    if conversion[-1:] not in _GROUPABLE_CONVERSIONS:
        return full
    bare, width, left = _unpadded(conversion)
    number = group_digits(plain_format(value, bare), sep, size)
    number = number.ljust(width) if left else number.rjust(width)
    return prefix.replace("%%", "%") + number + suffix.replace("%%", "%")


def resolve_formatter(formatter: NumberFormatter | None = None) -> NumberFormatter:
    """
    Pick the number formatter for one labeling pass.

    An explicit ``formatter`` wins. Otherwise the ``grouping`` config token
    decides between :func:`grouped_format` and :func:`plain_format`; it is
    read on every call.
    """
    if formatter is not None:
        return formatter
    if _config.get("grouping"):
        return grouped_format
    return plain_format
