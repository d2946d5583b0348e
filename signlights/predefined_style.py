"""Named lighting styles and lists of styles selectable by button and sequence."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any


class PredefinedStyles(Enum):
    """Identifiers of the built-in lighting styles."""

    LOW_POWER = 0
    PINK_SOLID = auto()
    RED_PINK_RIGHT = auto()
    BLUE_PINK_RIGHT = auto()
    RAINBOW_RIGHT = auto()
    RED_PINK_RANDOM_V1 = auto()
    RED_PINK_RANDOM_V2 = auto()
    BLUE_PINK_RANDOM_V1 = auto()
    BLUE_PINK_RANDOM_V2 = auto()
    RAINBOW_RANDOM_V1 = auto()
    RAINBOW_RANDOM_V2 = auto()
    RED_PINK_CENTER_OUT = auto()
    BLUE_PINK_CENTER_OUT = auto()
    RED_PINK_DIGIT = auto()
    BLUE_PINK_DIGIT = auto()
    RAINBOW_LAVA_6INCH = auto()
    RED_PINK_6INCH = auto()
    BLUE_PINK_6INCH = auto()
    RED_SOLID = auto()
    YELLOW_SOLID = auto()
    GREEN_SOLID = auto()
    PLAYOFF_BLUE = auto()
    PLAYOFF_BLUE_SMALL = auto()
    PLAYOFF_RED = auto()
    FIRE = auto()


class ColorPatternType(Enum):
    """How the colours of a pattern are chosen."""

    SINGLE_COLOR = auto()
    TWO_COLOR = auto()
    RAINBOW = auto()
    BACKGROUND_PLUS_THREE = auto()


class DisplayPatternType(Enum):
    """How a pattern's colours move across the sign."""

    SOLID = auto()
    RIGHT = auto()
    DOWN = auto()
    RANDOM = auto()
    CENTER_OUT_HORIZONTAL = auto()
    DIGIT = auto()
    LINE = auto()
    FIRE = auto()
    LOW_POWER = auto()


@dataclass
class PatternData:
    """Colours and tuning parameters of a lighting pattern."""

    color_pattern: ColorPatternType = ColorPatternType.SINGLE_COLOR
    display_pattern: DisplayPatternType = DisplayPatternType.SOLID
    color1: int = 0
    color2: int = 0
    color3: int = 0
    color4: int = 0
    param1: int = 0
    param2: int = 0
    param3: int = 0
    param4: int = 0


@dataclass(frozen=True)
class PredefinedStyle:
    """A named pattern with the speed it runs at."""

    name: str
    speed: int
    pattern_data: PatternData = field(default_factory=PatternData)


def color(red: int, green: int, blue: int) -> int:
    """Pack 8-bit red, green and blue components into a 24-bit colour."""
    for component in (red, green, blue):
        if not 0 <= component <= 255:
            raise ValueError(f"colour component out of range 0-255: {component}")
    return (red << 16) | (green << 8) | blue


_PINK = color(230, 22, 161)
_RED = color(255, 0, 0)
_BLUE = color(0, 0, 255)

_SINGLE = ColorPatternType.SINGLE_COLOR
_TWO = ColorPatternType.TWO_COLOR
_RAINBOW = ColorPatternType.RAINBOW
_BG3 = ColorPatternType.BACKGROUND_PLUS_THREE

_STYLE_TABLE: dict[PredefinedStyles, tuple[str, int, dict[str, Any]]] = {
    PredefinedStyles.LOW_POWER: (
        "Low Power", 1,
        dict(color_pattern=_SINGLE, display_pattern=DisplayPatternType.LOW_POWER, color1=_RED),
    ),
    PredefinedStyles.PINK_SOLID: (
        "Solid Pink", 1,
        dict(color_pattern=_SINGLE, display_pattern=DisplayPatternType.SOLID, color1=_PINK),
    ),
    PredefinedStyles.RED_PINK_RIGHT: (
        "Red-Pink", 220,
        dict(color_pattern=_TWO, display_pattern=DisplayPatternType.RIGHT,
             color1=_RED, color2=_PINK, param1=70, param2=75),
    ),
    PredefinedStyles.BLUE_PINK_RIGHT: (
        "Blue-Pink", 220,
        dict(color_pattern=_TWO, display_pattern=DisplayPatternType.RIGHT,
             color1=_BLUE, color2=_PINK, param1=70, param2=70),
    ),
    PredefinedStyles.RAINBOW_RIGHT: (
        "Rainbow", 255,
        dict(color_pattern=_RAINBOW, display_pattern=DisplayPatternType.RIGHT, param1=120),
    ),
    PredefinedStyles.RED_PINK_RANDOM_V1: (
        "Red-Pink Random", 255,
        dict(color_pattern=_TWO, display_pattern=DisplayPatternType.RANDOM,
             color1=_RED, color2=_PINK, param1=255, param2=255, param3=75),
    ),
    PredefinedStyles.RED_PINK_RANDOM_V2: (
        "Red-Pink Random v2", 220,
        dict(color_pattern=_TWO, display_pattern=DisplayPatternType.RANDOM,
             color1=_RED, color2=_PINK, param1=100, param2=100, param3=200),
    ),
    PredefinedStyles.BLUE_PINK_RANDOM_V1: (
        "Blue-Pink Random", 255,
        dict(color_pattern=_TWO, display_pattern=DisplayPatternType.RANDOM,
             color1=_BLUE, color2=_PINK, param1=255, param2=255, param3=75),
    ),
    PredefinedStyles.BLUE_PINK_RANDOM_V2: (
        "Blue-Pink Random v2", 220,
        dict(color_pattern=_TWO, display_pattern=DisplayPatternType.RANDOM,
             color1=_BLUE, color2=_PINK, param1=100, param2=100, param3=200),
    ),
    PredefinedStyles.RAINBOW_RANDOM_V1: (
        "Rainbow Random", 245,
        dict(color_pattern=_RAINBOW, display_pattern=DisplayPatternType.RANDOM,
             param1=255, param2=30),
    ),
    PredefinedStyles.RAINBOW_RANDOM_V2: (
        "Rainbow Random v2", 240,
        dict(color_pattern=_RAINBOW, display_pattern=DisplayPatternType.RANDOM,
             param1=255, param2=50),
    ),
    PredefinedStyles.RED_PINK_CENTER_OUT: (
        "Blue-Pink Center-Out", 220,
        dict(color_pattern=_TWO, display_pattern=DisplayPatternType.CENTER_OUT_HORIZONTAL,
             color1=_RED, color2=_PINK, param1=70, param2=70),
    ),
    PredefinedStyles.BLUE_PINK_CENTER_OUT: (
        "Blue-Pink Center-Out", 196,
        dict(color_pattern=_TWO, display_pattern=DisplayPatternType.CENTER_OUT_HORIZONTAL,
             color1=_BLUE, color2=_PINK, param1=70, param2=70),
    ),
    PredefinedStyles.RED_PINK_DIGIT: (
        "Red-Pink Digit", 150,
        dict(color_pattern=_TWO, display_pattern=DisplayPatternType.DIGIT,
             color1=_RED, color2=_PINK, param1=20, param2=20),
    ),
    PredefinedStyles.BLUE_PINK_DIGIT: (
        "Blue-Pink Digit", 150,
        dict(color_pattern=_TWO, display_pattern=DisplayPatternType.DIGIT,
             color1=_BLUE, color2=_PINK, param1=20, param2=20),
    ),
    PredefinedStyles.RAINBOW_LAVA_6INCH: (
        "Rainbow Lava 6inch", 255,
        dict(color_pattern=_RAINBOW, display_pattern=DisplayPatternType.LINE, param1=255),
    ),
    PredefinedStyles.BLUE_PINK_6INCH: (
        "Blue-Pink 6inch", 9,
        dict(color_pattern=_TWO, display_pattern=DisplayPatternType.DIGIT,
             color1=_BLUE, color2=_PINK, param1=1, param2=1),
    ),
    PredefinedStyles.RED_PINK_6INCH: (
        "Blue-Pink 6inch", 9,
        dict(color_pattern=_TWO, display_pattern=DisplayPatternType.DIGIT,
             color1=_RED, color2=_PINK, param1=1, param2=1),
    ),
    PredefinedStyles.RED_SOLID: (
        "Solid Red", 1,
        dict(color_pattern=_SINGLE, display_pattern=DisplayPatternType.SOLID, color1=_RED),
    ),
    PredefinedStyles.YELLOW_SOLID: (
        "Solid Yellow", 1,
        dict(color_pattern=_SINGLE, display_pattern=DisplayPatternType.SOLID,
             color1=color(255, 180, 0)),
    ),
    PredefinedStyles.GREEN_SOLID: (
        "Solid Green", 1,
        dict(color_pattern=_SINGLE, display_pattern=DisplayPatternType.SOLID,
             color1=color(0, 255, 0)),
    ),
    PredefinedStyles.PLAYOFF_BLUE: (
        "Playoff Blue", 255,
        dict(color_pattern=_BG3, display_pattern=DisplayPatternType.RIGHT,
             color1=color(0, 0, 255), color2=color(255, 0, 0), color3=_PINK,
             color4=color(0, 200, 0), param1=255, param2=80, param3=80, param4=80),
    ),
    PredefinedStyles.PLAYOFF_BLUE_SMALL: (
        "Playoff Blue", 245,
        dict(color_pattern=_BG3, display_pattern=DisplayPatternType.DOWN,
             color1=color(0, 0, 255), color2=color(255, 0, 0), color3=_PINK,
             color4=color(0, 200, 0), param1=100, param2=50, param3=50, param4=50),
    ),
    PredefinedStyles.FIRE: (
        "Fire", 200,
        dict(color_pattern=_SINGLE, display_pattern=DisplayPatternType.FIRE,
             color1=color(0, 0, 0), param1=75, param2=100),
    ),
}

_FALLBACK = _STYLE_TABLE[PredefinedStyles.PINK_SOLID]


def get_predefined_style(style: PredefinedStyles) -> PredefinedStyle:
    """Build a fresh style for the given identifier; unknown ones fall back to solid pink."""
    name, speed, pattern_fields = _STYLE_TABLE.get(style, _FALLBACK)
    return PredefinedStyle(name, speed, PatternData(**pattern_fields))


class PredefinedStyleList:
    """A fixed number of style lists, each cycled through by a sequence number."""

    def __init__(self, number_of_lists: int) -> None:
        self.default_style = PredefinedStyles.PINK_SOLID
        self._style_lists: list[list[PredefinedStyles]] = [[] for _ in range(number_of_lists)]

    def _has_list(self, list_number: int) -> bool:
        return 0 <= list_number < len(self._style_lists)

    def add_style_to_list(self, list_number: int, style: PredefinedStyles) -> None:
        """Append a style to a list; a list number that does not exist is ignored."""
        if self._has_list(list_number):
            self._style_lists[list_number].append(style)

    def get_style(self, list_number: int, sequence_number: int) -> PredefinedStyle:
        """Return the style at the sequence number, wrapping around the list.

        A missing or empty list yields the default style.
        """
        if not self._has_list(list_number) or not self._style_lists[list_number]:
            return get_predefined_style(self.default_style)
        styles = self._style_lists[list_number]
        return get_predefined_style(styles[sequence_number % len(styles)])