"""Stages of a baseline JPEG encoder: Netpbm reading, MCU cutting, YCbCr
conversion, chroma subsampling, DCT, zig-zag ordering, magnitude classes,
canonical Huffman codes, a bit writer and option parsing."""

__version__ = "0.1.0"