"""Reading BMP headers and pixel colours, and ranking the colours."""

from __future__ import annotations

import os
import struct
from dataclasses import dataclass

from .colors import Color, ColorCount, count_colors, sort_counts

BMP_MAGIC = 0x4D42

_HEADER = struct.Struct("<HIHHI")
_INFO_HEADER = struct.Struct("<IIIHHIIIIII")


class BmpError(ValueError):
    """Raised when a file is not a BMP image this module can read."""


@dataclass(frozen=True)
class BmpHeader:
    """The file header at the start of a BMP image."""

    type: int
    file_size: int
    reserved1: int
    reserved2: int
    offset: int

    SIZE = _HEADER.size


@dataclass(frozen=True)
class BmpInfoHeader:
    """The information header that follows the file header."""

    info_header_size: int
    width: int
    height: int
    planes: int
    bit_count: int
    compression: int
    image_size: int
    x_pixels_per_meter: int
    y_pixels_per_meter: int
    colors_used: int
    colors_important: int

    SIZE = _INFO_HEADER.size


def parse_header(data: bytes) -> BmpHeader:
    """Decode the 14-byte BMP file header."""
    if len(data) < _HEADER.size:
        raise BmpError("truncated BMP file header")
    return BmpHeader(*_HEADER.unpack_from(data))


def parse_info_header(data: bytes) -> BmpInfoHeader:
    """Decode the 40-byte BMP information header."""
    if len(data) < _INFO_HEADER.size:
        raise BmpError("truncated BMP information header")
    return BmpInfoHeader(*_INFO_HEADER.unpack_from(data))


def read_colors(path: str | os.PathLike[str]) -> list[Color]:
    """Read every pixel colour of a 24-bit or 32-bit BMP image."""
    with open(path, "rb") as stream:
        header = parse_header(stream.read(_HEADER.size))
        if header.type != BMP_MAGIC:
            raise BmpError(f"{os.fspath(path)!r} is not a BMP image")
        info = parse_info_header(stream.read(_INFO_HEADER.size))
        stream.seek(header.offset)
        pixels = stream.read(info.image_size)

    if info.bit_count == 32:
        width = 4
    elif info.bit_count == 24:
        width = 3
    else:
        raise BmpError(f"unsupported bit count: {info.bit_count}")

    total = info.image_size // width
    # Missing pixel data reads as zeroed memory.
    pixels = pixels.ljust(total * width, b"\0")[: total * width]
    if width == 4:
        return [
            Color(red, green, blue, alpha)
            for blue, green, red, alpha in struct.iter_unpack("<4B", pixels)
        ]
    return [
        Color(red, green, blue)
        for blue, green, red in struct.iter_unpack("<3B", pixels)
    ]


def analyse_bmp_image(path: str | os.PathLike[str]) -> list[ColorCount]:
    """Count the distinct colours of an image, least frequent first."""
    return sort_counts(count_colors(read_colors(path)))