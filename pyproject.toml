[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "jpegenc"
version = "0.1.0"
description = "Building blocks of a baseline JPEG encoder: Netpbm reading, MCU cutting, YCbCr conversion, chroma subsampling, DCT, zig-zag, magnitudes, Huffman codes and a bit writer"
requires-python = ">=3.10"
dependencies = []
keywords = ["jpeg", "ppm", "pgm", "netpbm", "dct", "huffman", "ycbcr", "subsampling"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Graphics Conversion",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["jpegenc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
