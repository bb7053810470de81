"""Two-dimensional discrete cosine transform of square pixel blocks."""

from __future__ import annotations

import math
from collections.abc import Sequence

BLOCK_SIZE = 8
LEVEL_SHIFT = 128
INV_SQRT2 = 0.707106


def cosine_table(size: int = BLOCK_SIZE) -> list[list[float]]:
    """Return ``table[f][p] = cos((2p + 1) * f * pi / (2 * size))``.

    ``f`` is a frequency index and ``p`` a pixel position.
    """
    if size <= 0:
        raise ValueError(f"table size must be positive, got {size}")
    return [
        [math.cos((2 * position + 1) * frequency * math.pi / (2 * size)) for position in range(size)]
        for frequency in range(size)
    ]


def normalisation(index: int) -> float:
    """Return the DCT normalisation coefficient C(index)."""
    return INV_SQRT2 if index == 0 else 1.0


def dct(
    block: Sequence[Sequence[int]],
    cos_table: Sequence[Sequence[float]] | None = None,
) -> list[list[int]]:
    """Return the frequency coefficients of a square block of 8-bit samples.

    128 is subtracted from every sample first; coefficients are truncated
    toward zero. ``block`` is left unchanged.
    """
    size = len(block)
    if size == 0 or any(len(row) != size for row in block):
        raise ValueError("the DCT applies to non-empty square blocks")
    if cos_table is None:
        cos_table = cosine_table(size)
    if len(cos_table) < size or any(len(row) < size for row in cos_table[:size]):
        raise ValueError(f"cosine table is too small for a {size}x{size} block")

    shifted = [[value - LEVEL_SHIFT for value in row] for row in block]
    scale = 2.0 / size
    result: list[list[int]] = []
    for i in range(size):
        row_cos = cos_table[i]
        out_row = []
        for j in range(size):
            col_cos = cos_table[j]
            total = sum(
                row_cos[x] * sum(sample * col_cos[y] for y, sample in enumerate(pixels))
                for x, pixels in enumerate(shifted)
            )
            out_row.append(int(scale * normalisation(i) * normalisation(j) * total))
        result.append(out_row)
    return result