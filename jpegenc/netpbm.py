"""Readers for binary PGM (P5) and PPM (P6) images."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import BinaryIO, Generic, TypeVar

PGM_MAGIC = b"P5"
PPM_MAGIC = b"P6"

Pixel = TypeVar("Pixel")


@dataclass(frozen=True)
class Raster(Generic[Pixel]):
    """An image held as a list of pixel rows, top row first.

    PGM pixels are ints; PPM pixels are ``(r, g, b)`` tuples.
    """

    width: int
    height: int
    pixels: list[list[Pixel]]

    def __getitem__(self, row: int) -> list[Pixel]:
        return self.pixels[row]

    def __len__(self) -> int:
        return self.height


def _read_header(stream: BinaryIO, magic: bytes) -> tuple[int, int]:
    """Read the three header lines: magic number, dimensions, maximum value."""
    found = stream.readline().strip()
    if found != magic:
        raise ValueError(f"expected magic number {magic.decode()}, found {found!r}")
    tokens = stream.readline().split()
    if len(tokens) < 2:
        raise ValueError("missing image dimensions")
    try:
        width, height = int(tokens[0]), int(tokens[1])
    except ValueError:
        raise ValueError(f"invalid image dimensions {tokens[:2]!r}") from None
    if width <= 0 or height <= 0:
        raise ValueError(f"image dimensions must be positive, got {width}x{height}")
    stream.readline()  # maximum sample value, assumed to be 255
    return width, height


def _read_samples(stream: BinaryIO, count: int) -> bytes:
    data = stream.read(count)
    if len(data) < count:
        raise ValueError(f"truncated pixel data: {len(data)} of {count} bytes")
    return data


def read_pgm(path: str | os.PathLike[str]) -> Raster[int]:
    """Read a binary grayscale image."""
    with open(path, "rb") as stream:
        width, height = _read_header(stream, PGM_MAGIC)
        data = _read_samples(stream, width * height)
    rows = [list(data[start:start + width]) for start in range(0, width * height, width)]
    return Raster(width, height, rows)


def read_ppm(path: str | os.PathLike[str]) -> Raster[tuple[int, int, int]]:
    """Read a binary RGB image."""
    with open(path, "rb") as stream:
        width, height = _read_header(stream, PPM_MAGIC)
        data = _read_samples(stream, 3 * width * height)
    triples = [tuple(data[start:start + 3]) for start in range(0, 3 * width * height, 3)]
    rows = [triples[start:start + width] for start in range(0, width * height, width)]
    return Raster(width, height, rows)  # type: ignore[arg-type]