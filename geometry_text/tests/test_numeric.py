from __future__ import annotations

import math

import pytest

from geometry_text.obj_scanner import classify, numeric


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("3.14", 3.14),
        ("-2", -2.0),
        ("+7", 7.0),
        ("1.", 1.0),
        (".5", 0.5),
        ("1e3", 1000.0),
        ("2.5E-1", 0.25),
        ("2.5abc", 2.5),
        ("1e", 1.0),
        ("abc", 0.0),
        ("", 0.0),
        ("-", 0.0),
    ],
)
def test_fast_atof_reads_leading_prefix(text: str, expected: float) -> None:
    assert numeric.fast_atof(text) == pytest.approx(expected)


def test_fast_atof_special_values() -> None:
    assert numeric.fast_atof("inf") == math.inf
    assert numeric.fast_atof("-Infinity") == -math.inf
    assert math.isnan(numeric.fast_atof("NaN"))


def test_is_real_requires_whole_text() -> None:
    assert numeric.is_real("1.5")
    assert numeric.is_real("-2e3")
    assert not numeric.is_real("1.5x")
    assert not numeric.is_real("1/2")
    assert not numeric.is_real("")


def test_classifier_definitions() -> None:
    for char in "\r\n\0\f":
        assert classify.is_line_end(char)
        assert classify.is_space_or_newline(char)
    for char in " \t":
        assert classify.is_space(char)
        assert not classify.is_line_end(char)
        assert classify.is_space_or_newline(char)
    assert not classify.is_space("\n")
    assert not classify.is_space_or_newline("v")
