"""Compass codes and the words used for them in walking directions."""

from enum import Enum

from src.campus_paths.errors import UnknownDirectionError


class CompassCode(str, Enum):
    """The eight compass codes the routing service attaches to path segments."""

    N = "N"
    NE = "NE"
    E = "E"
    SE = "SE"
    S = "S"
    SW = "SW"
    W = "W"
    NW = "NW"

    @classmethod
    def parse(cls, value: str) -> "CompassCode":
        """
        Convert a raw code from the routing service into a CompassCode.

        Args:
            value: Code string such as "N" or "SW"

        Returns:
            The matching CompassCode

        Raises:
            UnknownDirectionError: If value is not one of the eight codes
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise UnknownDirectionError(value) from None


# Code -> word shown in the directions body (e.g. "Walk 100 feet north.")
DIRECTION_WORDS: dict[CompassCode, str] = {
    CompassCode.N: "north",
    CompassCode.NE: "northeast",
    CompassCode.E: "east",
    CompassCode.SE: "southeast",
    CompassCode.S: "south",
    CompassCode.SW: "southwest",
    CompassCode.W: "west",
    CompassCode.NW: "northwest",
}

# Reverse mapping: word -> code
DIRECTION_CODES: dict[str, CompassCode] = {word: code for code, word in DIRECTION_WORDS.items()}


def word_for(code: CompassCode | str) -> str:
    """
    Look up the display word for a compass code.

    Raw strings are accepted and parsed first, so an unknown code fails
    loudly instead of producing blank text.

    Raises:
        UnknownDirectionError: If code is not one of the eight codes
    """
    return DIRECTION_WORDS[CompassCode.parse(code)]


def code_for(word: str) -> CompassCode:
    """Look up the compass code for a display word (case-insensitive)."""
    try:
        return DIRECTION_CODES[word.lower()]
    except KeyError:
        raise UnknownDirectionError(word) from None
