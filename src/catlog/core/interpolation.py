from __future__ import annotations

"""
Printf-Style Message Interpolation.

A restricted formatter for leveled calls such as ``log.error("boom %d", 5)``.
Supported placeholders: %s %d %i %f %j %o %O %c and the literal %%.
Placeholders without a matching argument are left untouched; surplus
arguments are appended separated by single spaces.
"""

import json
import math
import re
from typing import Any, Sequence

_PLACEHOLDER = re.compile(r"%[sdifjoOc%]")


def format_message(fmt: Any, args: Sequence[Any] = ()) -> str:
    """
    Interpolate positional arguments into a format string.

    A format string passed without arguments is returned unchanged, so
    pre-interpolated messages containing a literal ``%`` are never altered.

    Args:
        fmt: Format string (or any object, which is then stringified).
        args: Positional arguments to substitute.

    Returns:
        str: The composed message.
    """
    if not isinstance(fmt, str):
        return " ".join(_as_text(part) for part in (fmt, *args))
    if not args:
        return fmt

    remaining = list(args)

    def _substitute(match: "re.Match[str]") -> str:
        token = match.group(0)
        if token == "%%":
            return "%"
        if not remaining:
            return token
        arg = remaining.pop(0)
        return _render(token[1], arg)

    result = _PLACEHOLDER.sub(_substitute, fmt)
    if remaining:
        result = " ".join([result, *(_as_text(arg) for arg in remaining)])
    return result


# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _render(spec: str, arg: Any) -> str:
    if spec == "s":
        return _as_text(arg)
    if spec in ("d", "i") and isinstance(arg, int) and not isinstance(arg, bool):
        return str(arg)
    if spec == "i":
        number = _to_number(arg)
        if math.isfinite(number):
            return str(math.trunc(number))
        return "NaN"
    if spec in ("d", "f"):
        return _number_text(_to_number(arg))
    if spec == "j":
        try:
            return json.dumps(arg, default=str)
        except ValueError:
            return "[Circular]"
    if spec == "c":
        return ""
    # %o / %O
    return repr(arg)


def _as_text(arg: Any) -> str:
    return arg if isinstance(arg, str) else str(arg)


def _to_number(arg: Any) -> float:
    if isinstance(arg, bool):
        return float(int(arg))
    if isinstance(arg, (int, float)):
        return float(arg)
    if isinstance(arg, str):
        try:
            return float(arg.strip()) if arg.strip() else 0.0
        except ValueError:
            return math.nan
    return math.nan


def _number_text(number: float) -> str:
    if math.isnan(number):
        return "NaN"
    if math.isinf(number):
        return "Infinity" if number > 0 else "-Infinity"
    if number.is_integer():
        return str(int(number))
    return repr(number)
