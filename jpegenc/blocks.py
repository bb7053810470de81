"""Cutting images into MCUs of 8x8 blocks."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Any

BLOCK_SIZE = 8
_MAX_BLOCKS = 2

Block = list[list[Any]]


@dataclass
class Mcu:
    """A minimum coded unit of ``block_cols`` x ``block_lines`` 8x8 blocks.

    ``blocks`` are stored row by row: left to right, then top to bottom.
    """

    block_cols: int
    block_lines: int
    blocks: list[Block]


@dataclass
class McuGrid:
    """The MCUs of an image, ``lines`` rows of ``cols`` MCUs each."""

    mcus: list[list[Mcu]]
    cols: int
    lines: int

    def __iter__(self) -> Iterator[Mcu]:
        """Yield the MCUs row by row."""
        for row in self.mcus:
            yield from row


def _dimensions(matrix: Sequence[Sequence[Any]]) -> tuple[int, int]:
    if not matrix or not matrix[0]:
        raise ValueError("the image must not be empty")
    width = len(matrix[0])
    if any(len(row) != width for row in matrix):
        raise ValueError("all image rows must have the same length")
    return len(matrix), width


def _check_block_counts(block_cols: int, block_lines: int) -> None:
    if not (1 <= block_cols <= _MAX_BLOCKS and 1 <= block_lines <= _MAX_BLOCKS):
        raise ValueError(f"unsupported MCU format {block_cols}x{block_lines}")


def split_mcu(matrix: Sequence[Sequence[Any]], block_cols: int, block_lines: int) -> Mcu:
    """Split a (8*block_lines) x (8*block_cols) matrix into an MCU of 8x8 blocks."""
    _check_block_counts(block_cols, block_lines)
    height, width = _dimensions(matrix)
    if (height, width) != (BLOCK_SIZE * block_lines, BLOCK_SIZE * block_cols):
        raise ValueError(
            f"a {block_cols}x{block_lines} MCU needs a "
            f"{BLOCK_SIZE * block_cols}x{BLOCK_SIZE * block_lines} matrix, got {width}x{height}"
        )
    blocks = [
        [list(row[bc * BLOCK_SIZE:(bc + 1) * BLOCK_SIZE]) for row in matrix[bl * BLOCK_SIZE:(bl + 1) * BLOCK_SIZE]]
        for bl in range(block_lines)
        for bc in range(block_cols)
    ]
    return Mcu(block_cols, block_lines, blocks)


def split_image(
    matrix: Sequence[Sequence[Any]],
    mcu_cols: int,
    mcu_lines: int,
    block_cols: int,
    block_lines: int,
) -> list[Block]:
    """Cut an image into ``mcu_lines`` x ``mcu_cols`` sub-matrices, row by row.

    Each sub-matrix is (8*block_lines) x (8*block_cols). Positions beyond
    the image repeat its last row and last column.
    """
    if block_cols <= 0 or block_lines <= 0:
        raise ValueError("block counts must be positive")
    if mcu_cols < 0 or mcu_lines < 0:
        raise ValueError("MCU counts must not be negative")
    height, width = _dimensions(matrix)
    sub_height = BLOCK_SIZE * block_lines
    sub_width = BLOCK_SIZE * block_cols
    return [
        [
            [
                matrix[min(top + i, height - 1)][min(left + j, width - 1)]
                for j in range(sub_width)
            ]
            for i in range(sub_height)
        ]
        for top in range(0, mcu_lines * sub_height, sub_height)
        for left in range(0, mcu_cols * sub_width, sub_width)
    ]


def image_to_mcus(matrix: Sequence[Sequence[Any]], block_lines: int, block_cols: int) -> McuGrid:
    """Cut a whole image into a grid of MCUs of ``block_cols`` x ``block_lines`` blocks."""
    _check_block_counts(block_cols, block_lines)
    height, width = _dimensions(matrix)
    mcu_cols = -(-width // (BLOCK_SIZE * block_cols))
    mcu_lines = -(-height // (BLOCK_SIZE * block_lines))
    subs = split_image(matrix, mcu_cols, mcu_lines, block_cols, block_lines)
    mcus = [
        [split_mcu(sub, block_cols, block_lines) for sub in subs[line * mcu_cols:(line + 1) * mcu_cols]]
        for line in range(mcu_lines)
    ]
    return McuGrid(mcus, mcu_cols, mcu_lines)


def _format_pixel(pixel: Any) -> str:
    if isinstance(pixel, Sequence):
        red, green, blue = pixel
        return f"{red:x}{green:x}{blue:X} \t "
    return f"{pixel & 0xFFFF:04x}     "


def format_matrix(matrix: Sequence[Sequence[Any]]) -> str:
    """Render a matrix of samples or RGB pixels as hexadecimal text, one row per line."""
    lines = []
    for row in matrix:
        text = "".join(_format_pixel(pixel) for pixel in row)
        end = "\n" if row and isinstance(row[0], Sequence) else " \n"
        lines.append(text + end)
    return "".join(lines)