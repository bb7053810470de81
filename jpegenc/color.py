"""Conversion of RGB MCUs to downsampled YCbCr MCUs."""

from __future__ import annotations

import math
from collections.abc import Sequence

from jpegenc.blocks import BLOCK_SIZE, Mcu, McuGrid
from jpegenc.downsampling import McuYCbCr, SamplingFactor, YCbCrBlock, downsample_mcu

RGBPixel = Sequence[int]


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def rgb_to_ycbcr(pixel: RGBPixel) -> tuple[int, int, int]:
    """Return the rounded ``(Y, Cb, Cr)`` values of an 8-bit ``(R, G, B)`` pixel."""
    red, green, blue = pixel
    if any(not 0 <= channel <= 0xFF for channel in (red, green, blue)):
        raise ValueError(f"RGB channels must be between 0 and 255, got {tuple(pixel)}")
    luma = 0.299 * red + 0.587 * green + 0.114 * blue
    chroma_b = -0.1687 * red - 0.3313 * green + 0.5 * blue + 128
    chroma_r = 0.5 * red - 0.4187 * green - 0.0813 * blue + 128
    return _round_half_away(luma), _round_half_away(chroma_b), _round_half_away(chroma_r)


def convert_block(block: Sequence[Sequence[RGBPixel]]) -> YCbCrBlock:
    """Convert an 8x8 block of RGB pixels into its Y, Cb and Cr planes."""
    if len(block) != BLOCK_SIZE or any(len(row) != BLOCK_SIZE for row in block):
        raise ValueError("colour conversion applies to 8x8 blocks")
    converted = [[rgb_to_ycbcr(pixel) for pixel in row] for row in block]
    return YCbCrBlock(
        y=[[values[0] for values in row] for row in converted],
        cb=[[values[1] for values in row] for row in converted],
        cr=[[values[2] for values in row] for row in converted],
    )


def convert_mcu(
    mcu: Mcu,
    luma: SamplingFactor,
    chroma_b: SamplingFactor,
    chroma_r: SamplingFactor,
) -> McuYCbCr:
    """Convert an RGB MCU to YCbCr and downsample its chroma planes."""
    converted = McuYCbCr(
        blocks=[convert_block(block) for block in mcu.blocks],
        cols=mcu.block_cols,
        lines=mcu.block_lines,
    )
    return downsample_mcu(converted, luma, chroma_b, chroma_r)


def convert_grid(
    grid: McuGrid,
    luma: SamplingFactor,
    chroma_b: SamplingFactor,
    chroma_r: SamplingFactor,
) -> list[list[McuYCbCr]]:
    """Convert every MCU of ``grid``, keeping the grid's rows and columns."""
    return [[convert_mcu(mcu, luma, chroma_b, chroma_r) for mcu in row] for row in grid.mcus]