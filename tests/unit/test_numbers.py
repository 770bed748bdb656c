# tests/unit/test_numbers.py
from __future__ import annotations

import pytest

from offsetticks import config
from offsetticks.errors import TickFormatError
from offsetticks.numbers import (
    default_format,
    group_digits,
    grouped_format,
    plain_format,
    resolve_formatter,
)


@pytest.mark.parametrize(
    "value, expected",
    [
        (1000123.0, "1000123"),
        (2.0, "2"),
        (-0.0, "0"),
        (10.3 - 10.0, "0.3"),
        (1.23456789, "1.2346"),
        (1000123.5, "1000123.5"),
        (float("nan"), "nan"),
        (float("-inf"), "-inf"),
    ],
)
def test_default_format(value, expected):
    assert default_format(value) == expected


def test_plain_format_applies_percent_operator():
    assert plain_format(10.0, "%.3f V") == "10.000 V"
    assert plain_format(3.0) == "3"


def test_integer_only_conversions_accept_integral_floats():
    assert plain_format(255.0, "%x") == "ff"
    assert plain_format(8.0, "%o") == "10"
    with pytest.raises(TickFormatError):
        plain_format(2.5, "%x")


def test_plain_format_wraps_errors():
    with pytest.raises(TickFormatError, match="not enough arguments") as exc_info:
        plain_format(1.0, "%d %d")
    assert isinstance(exc_info.value.__cause__, TypeError)


@pytest.mark.parametrize(
    "text, expected",
    [("1234", "1,234"), ("123456", "123,456"), ("123", "123"), ("-1234567.25", "-1,234,567.25"), ("nan", "nan")],
)
def test_group_digits(text, expected):
    assert group_digits(text) == expected


def test_grouped_format():
    assert grouped_format(1234567.0) == "1,234,567"
    assert grouped_format(1234567.5, "%.1f") == "1,234,567.5"
    assert grouped_format(1234567.0, "T%d m2") == "T1,234,567 m2"
    assert grouped_format(-1234.0, "%d") == "-1,234"
    assert grouped_format(1234567.0, "%d", sep="'") == "1'234'567"
    assert grouped_format(1234567.0, "%d", size=4) == "123,4567"


def test_grouped_format_keeps_escaped_percent():
    assert grouped_format(1500.0, "%d %%") == "1,500 %"


def test_grouped_format_skips_non_decimal_conversions():
    assert grouped_format(65535.0, "%x") == "ffff"


def test_grouped_format_uses_config_separator():
    with config.temp(group_sep=" "):
        assert grouped_format(1234567.0) == "1 234 567"


def test_grouped_format_width_counts_separators():
    assert grouped_format(1234567.5, "%12.1f") == " 1,234,567.5"
    assert grouped_format(1234.5, "%-9.1f|") == "1,234.5  |"
    assert grouped_format(1234.0, "%08d") == "   1,234"
    assert grouped_format(1234567.0, "%4d") == "1,234,567"


def test_grouped_format_rejects_bad_separator():
    with pytest.raises(ValueError, match="group_sep"):
        grouped_format(1234567.0, "%d", sep=".")


def test_grouped_format_propagates_errors():
    with pytest.raises(TickFormatError):
        grouped_format(1.0, "%q")


def test_resolve_formatter():
    custom = lambda value, fmt: "x"  # noqa: E731
    assert resolve_formatter(custom) is custom
    assert resolve_formatter() is plain_format
    with config.temp(grouping=True):
        assert resolve_formatter() is grouped_format
        assert resolve_formatter(custom) is custom
