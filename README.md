# jpegenc

This package contains the stages of a baseline sequential JPEG encoder, written
in plain Python with no dependencies. Each stage is a small function or class
that you can use and test on its own. The stages are:

- reading binary PGM and PPM images;
- cutting an image into MCUs of 8x8 blocks;
- converting RGB to YCbCr;
- subsampling the chroma;
- the DCT;
- zig-zag ordering;
- finding the magnitude class of a coefficient;
- building canonical Huffman codes;
- writing bits with byte stuffing.

## Installation

```
pip install .
```

To install pytest for the test suite, run `pip install .[test]`.

## Modules

### `jpegenc.netpbm`

`read_pgm(path)` reads a binary grayscale image (P5). `read_ppm(path)` reads a
binary RGB image (P6).

- Both return a `Raster` with `width`, `height` and `pixels`.
- `pixels` is a list of rows, top row first.
- A PGM pixel is an int. A PPM pixel is an `(r, g, b)` tuple.
- The header is read as three lines: the magic number, the dimensions, and the
  maximum value. The maximum value is read but not used.
- `ValueError` is raised in these cases:
  - the magic number is wrong;
  - the dimensions are missing or are not positive;
  - the pixel data is truncated.

### `jpegenc.blocks`

`image_to_mcus(matrix, block_lines, block_cols)` cuts an image into a grid of
MCUs.

- The image is given as a list of rows.
- Each MCU has `block_cols` x `block_lines` blocks of 8x8. Each count must be
  1 or 2.
- It returns an `McuGrid`. Iterating over the grid yields the MCUs row by row.
- Each `Mcu` stores its blocks row by row: left to right, then top to bottom.

`split_image` cuts the image into sub-matrices. Positions past the edge of the
image repeat the last row and the last column.

`split_mcu` splits one sub-matrix into its 8x8 blocks.

`format_matrix` renders a matrix as hexadecimal text. The matrix can hold plain
samples or RGB pixels.

### `jpegenc.color`

- `rgb_to_ycbcr(pixel)` returns the rounded `(Y, Cb, Cr)` values of an 8-bit RGB
  pixel.
- `convert_block` turns an 8x8 RGB block into a `YCbCrBlock` with three planes:
  `y`, `cb` and `cr`.
- `convert_mcu` and `convert_grid` convert whole MCUs. They then subsample the
  chroma using the sampling factors you give for Y, Cb and Cr.

### `jpegenc.downsampling`

`SamplingFactor(h, v)` holds the sampling factors of one component.

`validate_factors` raises `SamplingError` unless all of these hold:

- every factor is between 1 and 4;
- the sum of the h×v products is at most 10;
- the chroma factors divide the luma factors.

`downsample_mcu(mcu, luma, chroma_b, chroma_r)` returns a new `McuYCbCr` with
its Cb and Cr planes subsampled.

- It handles four cases:
  - equal factors, where the planes are kept;
  - horizontal halving;
  - vertical halving;
  - halving in both directions for 2x2 luma.
- Blocks that share a subsampled plane hold the same matrix.
- Blocks that hold no chroma after subsampling get `None`.

`downsample_horizontal`, `downsample_vertical` and `downsample_both` average
pairs or squares of pixels from two or four blocks into one block.

### `jpegenc.dct`

`dct(block, cos_table=None)` returns the DCT coefficients of a square block.

- It subtracts 128 from every sample first.
- Coefficients are truncated toward zero.
- The input block is not modified.

`cosine_table(size)` precomputes the cosines that `dct` uses. `normalisation(i)`
is the coefficient C(i): 1/√2 for i = 0, and 1 otherwise.

### `jpegenc.zigzag`

`zigzag(block)` returns the 64 values of an 8x8 block in zig-zag order.
`ZIGZAG_ORDER` lists the `(row, col)` positions in that order.

### `jpegenc.magnitude`

`get_magnitude(value)` returns a `Magnitude(magnitude, index)` for a
coefficient in [-2047, 2047]. Values outside that range raise `ValueError`.

```python
from jpegenc.magnitude import get_magnitude

get_magnitude(5)    # Magnitude(magnitude=3, index=5)
get_magnitude(-3)   # Magnitude(magnitude=2, index=0)
```

### `jpegenc.huffman`

`HuffmanTable(nb_symb_per_lengths, symbols)` builds canonical codes from a
DHT-style description. The description is the number of symbols for each code
length from 1 to 16, followed by the symbols in code order.

- `get_path(value)` returns `(code, nb_bits)`. It raises `KeyError` for an
  unknown symbol.
- `codes()` lists `(symbol, code, length)` for every symbol.

```python
from jpegenc.huffman import HuffmanTable

dc_luma = HuffmanTable([0, 1, 5, 1, 1, 1, 1, 1, 1, 0, 0, 0, 0, 0, 0, 0], range(12))
dc_luma.get_path(0)  # (0, 2)
```

### `jpegenc.bitstream`

`BitStream(path)` opens `path` in append mode.

- `write_bits(value, nb_bits, is_marker=False)` writes the low `nb_bits` bits,
  most significant bit first.
- Each `0xFF` byte made from data bits is followed by a `0x00` byte.
- A marker is byte aligned: the pending bits are padded with zeros first.
- `flush()` writes the buffered bytes to the file. `close()` flushes and closes
  the file.
- The class can be used as a context manager.

### `jpegenc.options`

`parse_args(argv)` reads encoder options and returns an `Options` with these
fields:

- `input_path`;
- `output_path`. By default this is the input name with its last three
  characters replaced by `jpg`. `--outfile=NAME` sets it.
- `luma`, `chroma_b` and `chroma_r`. These default to 1x1. The
  `--sample=h1xv1,h2xv2,h3xv3` argument sets them.

`parse_args` raises `UsageError` carrying the usage text in these cases: the
argument list is empty, it contains `--help`, it names no input image, or the
`--sample` value is malformed.

## Example

```python
from jpegenc.netpbm import read_ppm
from jpegenc.blocks import image_to_mcus
from jpegenc.color import convert_grid
from jpegenc.downsampling import SamplingFactor
from jpegenc.dct import cosine_table, dct
from jpegenc.zigzag import zigzag

raster = read_ppm("image.ppm")
grid = image_to_mcus(raster.pixels, 2, 2)
mcus = convert_grid(grid, SamplingFactor(2, 2), SamplingFactor(1, 1), SamplingFactor(1, 1))

table = cosine_table()
first = mcus[0][0].blocks[0]
luma_vector = zigzag(dct(first.y, table))
```

## What this package does not do

This package does not produce a JPEG file. The following are not included:

- quantization tables and quantization of the zig-zag vectors;
- DC difference and AC run-length coding of the vectors;
- writing the JFIF headers (SOI, APP0, DQT, SOF0, DHT, SOS) and the EOI marker;
- a command-line program.

`parse_args` reads the options such a program would take, but nothing runs the
encoding from them.