from __future__ import annotations

"""
Palette Resolution.

Maps logical color tokens to concrete representations for each output
target: ANSI foreground digits for terminals and CSS color names for
markup-capable consoles. Both tables are total over the token set.
"""

from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Mapping, Tuple, Union

from catlog.domain.levels import rank

ConcreteColor = Union[int, str]


class TargetKind(Enum):
    """Output decoration strategy, chosen once per logger."""

    TERMINAL = "terminal"
    DISPLAY_MARKUP = "display_markup"


class Color(Enum):
    """Logical color tokens."""

    Black = "Black"
    Red = "Red"
    Green = "Green"
    Yellow = "Yellow"
    Blue = "Blue"
    Magenta = "Magenta"
    Cyan = "Cyan"
    Grey = "Grey"
    White = "White"
    Default = "Default"

    @classmethod
    def coerce(cls, value: Any) -> "Color":
        """
        Interpret a caller-supplied color option.

        Accepts a Color member, a token name in any letter case, or a
        concrete representation taken from either palette (e.g. the value
        of ``Colors["Magenta"]``). Ambiguous representations resolve to
        the first token that declares them.

        Raises:
            ValueError: If the value matches no token.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            for token in cls:
                if token.value.lower() == value.strip().lower():
                    return token
        # bool is an int subclass; True/False are not palette entries
        if not isinstance(value, bool):
            for table in (_ANSI_CODES, _CSS_NAMES):
                for token, concrete in table.items():
                    if concrete == value:
                        return token
        raise ValueError(f"Unknown color: {value!r}")


# -----------------------------------------------------------------------------
# PALETTE TABLES
# -----------------------------------------------------------------------------

_ANSI_CODES: Dict[Color, int] = {
    Color.Black: 0,
    Color.Red: 1,
    Color.Green: 2,
    Color.Yellow: 3,
    Color.Blue: 4,
    Color.Magenta: 5,
    Color.Cyan: 6,
    Color.Grey: 7,
    Color.White: 9,
    Color.Default: 9,
}

_CSS_NAMES: Dict[Color, str] = {
    Color.Black: "Black",
    Color.Red: "IndianRed",
    Color.Green: "LimeGreen",
    Color.Yellow: "Orange",
    Color.Blue: "RoyalBlue",
    Color.Magenta: "Orchid",
    Color.Cyan: "SkyBlue",
    Color.Grey: "DimGrey",
    Color.White: "White",
    Color.Default: "Black",
}

# Indexed by level rank: DEBUG, INFO, WARN, ERROR, NONE
_LEVEL_COLORS: Tuple[Color, ...] = (
    Color.Cyan,
    Color.Green,
    Color.Yellow,
    Color.Red,
    Color.Default,
)


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def resolve(token: Color, target: TargetKind) -> ConcreteColor:
    """
    Resolve a logical token into the representation used by a target.

    Args:
        token: Logical color.
        target: Output target kind.

    Returns:
        ConcreteColor: ANSI digit (terminal) or CSS color name (markup).
    """
    if target is TargetKind.DISPLAY_MARKUP:
        return _CSS_NAMES[token]
    return _ANSI_CODES[token]


def level_to_palette_token(level: Any) -> Color:
    """Return the fixed color for a level; unknown levels use Default."""
    idx = rank(level)
    if idx < 0:
        return Color.Default
    return _LEVEL_COLORS[idx]


def palette_for(target: TargetKind) -> Mapping[str, ConcreteColor]:
    """Build a read-only token name -> representation map for a target."""
    return MappingProxyType({token.value: resolve(token, target) for token in Color})


# Public palette for the default terminal target
Colors: Mapping[str, ConcreteColor] = palette_for(TargetKind.TERMINAL)
