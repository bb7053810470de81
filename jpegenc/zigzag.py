"""Zig-zag reordering of 8x8 blocks."""

from __future__ import annotations

from collections.abc import Sequence

BLOCK_SIZE = 8


def _order_key(position: tuple[int, int]) -> tuple[int, int]:
    row, col = position
    diagonal = row + col
    return diagonal, (row if diagonal % 2 else -row)


ZIGZAG_ORDER: tuple[tuple[int, int], ...] = tuple(
    sorted(
        ((row, col) for row in range(BLOCK_SIZE) for col in range(BLOCK_SIZE)),
        key=_order_key,
    )
)


def zigzag(block: Sequence[Sequence[int]]) -> list[int]:
    """Return the 64 values of an 8x8 block in zig-zag order."""
    if len(block) != BLOCK_SIZE or any(len(row) != BLOCK_SIZE for row in block):
        raise ValueError("zig-zag ordering only applies to 8x8 blocks")
    return [block[row][col] for row, col in ZIGZAG_ORDER]