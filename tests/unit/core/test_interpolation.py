from __future__ import annotations

"""
Unit tests for printf-style message interpolation.
"""

import pytest

from catlog.core.interpolation import format_message


@pytest.mark.parametrize("fmt, args, expected", [
    ("boom %d", (5,), "boom 5"),
    ("%s owes %d coins", ("bob", 12), "bob owes 12 coins"),
    ("ratio %f", (0.5,), "ratio 0.5"),
    ("int %i", (7.9,), "int 7"),
    ("num %d", ("42",), "num 42"),
    ("num %d", ("abc",), "num NaN"),
    ("big %d", (10 ** 20,), f"big {10 ** 20}"),
    ("json %j", ({"a": 1},), 'json {"a": 1}'),
    ("repr %o", ("x",), "repr 'x'"),
    ("%cstyled", ("color: red",), "styled"),
    ("100%% done %s", ("now",), "100% done now"),
])
def test_placeholders(fmt: str, args: tuple, expected: str) -> None:
    assert format_message(fmt, args) == expected


def test_missing_arguments_leave_placeholders() -> None:
    assert format_message("%s and %s", ("one",)) == "one and %s"


def test_extra_arguments_are_appended() -> None:
    assert format_message("start", ("a", 1, None)) == "start a 1 None"


def test_pre_interpolated_string_is_untouched() -> None:
    assert format_message("100% %d literal") == "100% %d literal"


def test_non_string_format_is_joined() -> None:
    assert format_message(42, ("x",)) == "42 x"


def test_circular_json() -> None:
    data: dict = {}
    data["self"] = data
    assert format_message("%j", (data,)) == "[Circular]"
