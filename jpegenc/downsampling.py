"""Chroma downsampling of YCbCr MCUs."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field, replace

Matrix = Sequence[Sequence[int]]

BLOCK_SIZE = 8
_HALF = BLOCK_SIZE // 2
_MAX_FACTOR = 4
_MAX_PRODUCT_SUM = 10


class SamplingError(ValueError):
    """Raised when sampling factors are invalid or cannot apply to an MCU."""


@dataclass(frozen=True)
class SamplingFactor:
    """Horizontal and vertical sampling factors of one component."""

    h: int
    v: int


@dataclass
class YCbCrBlock:
    """One 8x8 block of an MCU, split into its Y, Cb and Cr matrices."""

    y: Matrix | None = None
    cb: Matrix | None = None
    cr: Matrix | None = None


@dataclass
class McuYCbCr:
    """An MCU of ``cols`` x ``lines`` blocks, stored row by row."""

    blocks: list[YCbCrBlock] = field(default_factory=list)
    cols: int = 1
    lines: int = 1


def validate_factors(luma: SamplingFactor, chroma_b: SamplingFactor, chroma_r: SamplingFactor) -> None:
    """Raise SamplingError unless the three factor pairs obey the JPEG limits."""
    factors = (luma.h, luma.v, chroma_b.h, chroma_b.v, chroma_r.h, chroma_r.v)
    if any(value <= 0 for value in factors):
        raise SamplingError("sampling factors must be at least 1")
    if any(value > _MAX_FACTOR for value in factors):
        raise SamplingError(f"sampling factors must be at most {_MAX_FACTOR}")
    total = luma.h * luma.v + chroma_b.h * chroma_b.v + chroma_r.h * chroma_r.v
    if total > _MAX_PRODUCT_SUM:
        raise SamplingError(f"the sum of h*v products must not exceed {_MAX_PRODUCT_SUM}")
    if (
        luma.h % chroma_b.h
        or luma.h % chroma_r.h
        or luma.v % chroma_b.v
        or luma.v % chroma_r.v
    ):
        raise SamplingError("chrominance factors must divide the luminance factors")


def downsample_both(block0: Matrix, block1: Matrix, block2: Matrix, block3: Matrix) -> list[list[int]]:
    """Average 2x2 pixel squares of four blocks (TL, TR, BL, BR) into one block."""
    quadrants = ((block0, block1), (block2, block3))
    result = []
    for i in range(BLOCK_SIZE):
        row = []
        for j in range(BLOCK_SIZE):
            source = quadrants[i // _HALF][j // _HALF]
            r, c = 2 * (i % _HALF), 2 * (j % _HALF)
            total = source[r][c] + source[r][c + 1] + source[r + 1][c] + source[r + 1][c + 1]
            row.append(int(total * 0.25))
        result.append(row)
    return result


def downsample_horizontal(block0: Matrix, block1: Matrix) -> list[list[int]]:
    """Average horizontal pixel pairs of a left and a right block into one block."""
    result = []
    for i in range(BLOCK_SIZE):
        row = []
        for j in range(BLOCK_SIZE):
            source = block0 if j < _HALF else block1
            c = 2 * (j % _HALF)
            row.append(int((source[i][c] + source[i][c + 1]) * 0.5))
        result.append(row)
    return result


def downsample_vertical(block0: Matrix, block1: Matrix) -> list[list[int]]:
    """Average vertical pixel pairs of a top and a bottom block into one block."""
    result = []
    for i in range(BLOCK_SIZE):
        source = block0 if i < _HALF else block1
        r = 2 * (i % _HALF)
        result.append([int((source[r][j] + source[r + 1][j]) * 0.5) for j in range(BLOCK_SIZE)])
    return result


def _horizontal_layout(mcu: McuYCbCr, planes: list[Matrix | None]) -> dict[int, Matrix | None]:
    first = downsample_horizontal(planes[0], planes[1])
    second = downsample_horizontal(planes[2], planes[3]) if mcu.lines == 2 else None
    layout: dict[int, Matrix | None] = {0: first, 1: second}
    if mcu.lines == 2:
        layout[2] = second
        layout[3] = second
    return layout


def _vertical_layout(mcu: McuYCbCr, planes: list[Matrix | None]) -> dict[int, Matrix | None]:
    if mcu.cols == 1:
        only = downsample_vertical(planes[0], planes[1])
        return {0: only, 1: only}
    if mcu.cols == 2:
        left = downsample_vertical(planes[0], planes[2])
        right = downsample_vertical(planes[1], planes[3])
        return {0: left, 2: left, 1: right, 3: right}
    raise SamplingError(f"vertical downsampling does not support {mcu.cols} block columns")


def _both_layout(mcu: McuYCbCr, planes: list[Matrix | None]) -> dict[int, Matrix | None]:
    merged = downsample_both(planes[0], planes[1], planes[2], planes[3])
    return {index: merged for index in range(4)}


def downsample_mcu(
    mcu: McuYCbCr,
    luma: SamplingFactor,
    chroma_b: SamplingFactor,
    chroma_r: SamplingFactor,
) -> McuYCbCr:
    """Return ``mcu`` with its Cb and Cr planes downsampled.

    Y planes are kept. Blocks whose chroma is not stored after downsampling
    get ``None``; blocks sharing a downsampled plane hold the same matrix.
    """
    validate_factors(luma, chroma_b, chroma_r)
    if mcu.cols != luma.h or mcu.lines != luma.v:
        raise SamplingError(
            f"an MCU of {mcu.cols}x{mcu.lines} blocks cannot use {luma.h}x{luma.v} luminance sampling"
        )

    h1, v1 = luma.h, luma.v
    h2, v2 = chroma_b.h, chroma_b.v
    h3, v3 = chroma_r.h, chroma_r.v

    if h1 * v1 == h2 * v2 == h3 * v3:
        return replace(mcu, blocks=list(mcu.blocks))
    if h1 == 2 * h2 and h2 == h3 and v1 == v2 == v3:
        build = _horizontal_layout
    elif v1 == 2 * v2 and v2 == v3 and h1 == h2 == h3:
        build = _vertical_layout
    elif h1 == 2 and v1 == 2 and h1 * v1 == 4 * h2 * v2 and h2 * v2 == h3 * v3:
        build = _both_layout
    else:
        raise SamplingError("no downsampling applies to these sampling factors")

    needed = mcu.cols * mcu.lines
    if len(mcu.blocks) < needed:
        raise SamplingError(f"the MCU holds {len(mcu.blocks)} blocks, {needed} expected")
    padded = list(mcu.blocks) + [YCbCrBlock()] * (4 - len(mcu.blocks))
    cb_layout = build(mcu, [block.cb for block in padded])
    cr_layout = build(mcu, [block.cr for block in padded])

    blocks = [
        replace(
            block,
            cb=cb_layout.get(index, block.cb),
            cr=cr_layout.get(index, block.cr),
        )
        for index, block in enumerate(mcu.blocks)
    ]
    return McuYCbCr(blocks=blocks, cols=mcu.cols, lines=mcu.lines)