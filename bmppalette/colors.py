"""Colour values, distinct-colour counting and sorting."""

from __future__ import annotations

import enum
from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass


class BitCount(enum.Enum):
    """Number of bits used to store one pixel colour."""

    BITS24 = 24
    BITS32 = 32


@dataclass(frozen=True, slots=True)
class Color:
    """An RGB colour, with an alpha channel when stored on 32 bits."""

    red: int
    green: int
    blue: int
    alpha: int | None = None

    @property
    def bits(self) -> BitCount:
        return BitCount.BITS24 if self.alpha is None else BitCount.BITS32

    def hex(self) -> str:
        """Return the colour as ``#rrggbb``."""
        return f"#{self.red:02x}{self.green:02x}{self.blue:02x}"

    def channels(self) -> tuple[int, ...]:
        rgb = (self.red, self.green, self.blue)
        return rgb if self.alpha is None else (*rgb, self.alpha)


@dataclass(frozen=True, slots=True)
class ColorCount:
    """A distinct colour and the number of pixels that have it."""

    color: Color
    count: int


def _common_bits(colors: Iterable[Color]) -> BitCount | None:
    kinds = {color.bits for color in colors}
    if len(kinds) > 1:
        raise ValueError("colours mix 24-bit and 32-bit values")
    return next(iter(kinds), None)


def count_colors(colors: Iterable[Color]) -> list[ColorCount]:
    """Count distinct colours, in the order each first appears."""
    colors = list(colors)
    _common_bits(colors)
    return [ColorCount(color, count) for color, count in Counter(colors).items()]


def sort_counts(counts: Iterable[ColorCount]) -> list[ColorCount]:
    """Return the counts sorted from least to most frequent."""
    counts = list(counts)
    _common_bits(entry.color for entry in counts)
    return sorted(counts, key=lambda entry: entry.count)


def _hex_columns(color: Color) -> str:
    return " ".join(f"{channel:5x}" for channel in color.channels())


def format_colors(colors: Iterable[Color]) -> str:
    """Render colours one per line as hexadecimal channel columns."""
    return "".join(f"{_hex_columns(color)}\n" for color in colors)


def format_counts(counts: Iterable[ColorCount]) -> str:
    """Render colour counts one per line: channels, then the count."""
    return "".join(
        f"{_hex_columns(entry.color)}: {entry.count:10d}\n" for entry in counts
    )