# tests/unit/test_format_spec.py
from __future__ import annotations

import warnings

import pytest

from offsetticks import config
from offsetticks.errors import NewlineInFormatWarning, OffsetTicksWarning, SignedFormatWarning
from offsetticks.format_spec import FormatSpec, find_directive


def test_parse_empty_format_means_default():
    assert FormatSpec.parse(None) == FormatSpec(None, True)
    assert FormatSpec.parse("").fmt is None
    assert FormatSpec.parse(None, False).trim_zeros is False


def test_parts_of_format():
    spec = FormatSpec.parse("~%.3f V")
    assert spec.prefix == "~"
    assert spec.conversion == "%.3f"
    assert spec.suffix == " V"
    assert spec.relative_fmt == "%.3f V"


def test_escaped_percent_is_not_a_directive():
    assert find_directive("100%% of %d units") == ("100%% of ", "%d", " units")
    assert FormatSpec("%d %%").relative_fmt == "%d %%"


def test_format_without_directive():
    assert find_directive("volts") == ("volts", "", "")
    assert FormatSpec("volts").relative_fmt == ""


def test_default_spec_has_no_parts():
    spec = FormatSpec()
    assert spec.is_default
    assert spec.prefix == spec.conversion == spec.suffix == ""
    assert spec.relative_fmt is None


@pytest.mark.parametrize("fmt", ["%.1f\nV", "%.1f\\nV", "%.1f\r\nV"])
def test_newlines_replaced_with_space(fmt):
    with pytest.warns(NewlineInFormatWarning, match="newline"):
        spec = FormatSpec.parse(fmt)
    assert spec.fmt == "%.1f V"


@pytest.mark.parametrize("fmt", ["%+d", "% +.2f", "%0+5d", "x = %+.1e"])
def test_sign_flag_warns_but_is_kept(fmt):
    with pytest.warns(SignedFormatWarning):
        spec = FormatSpec.parse(fmt)
    assert spec.fmt == fmt


def test_escaped_plus_does_not_warn():
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        assert FormatSpec.parse("%%+%d").fmt == "%%+%d"


def test_warnings_can_be_silenced_per_call():
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        spec = FormatSpec.parse("%+d\n", warn=False)
    assert spec.fmt == "%+d "


def test_warnings_can_be_silenced_by_config():
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        with config.temp(warn=False):
            FormatSpec.parse("%+d")


def test_warnings_share_a_filterable_category():
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        warnings.simplefilter("ignore", OffsetTicksWarning)
        FormatSpec.parse("%+d\n")


def test_trim_default_comes_from_config():
    with config.temp(trim_zeros=False):
        assert FormatSpec.parse("%d").trim_zeros is False
    assert FormatSpec.parse("%d").trim_zeros is True


def test_non_string_format_rejected():
    with pytest.raises(TypeError, match="format must be a string"):
        FormatSpec.parse(3)
