"""Command-line options of the encoder."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from jpegenc.downsampling import SamplingFactor

USAGE = (
    "Usage:\n"
    "  ppm2jpeg image.ppm [--outfile=new_name.jpg] [--sample=h1xv1,h2xv2,h3xv3]\n"
    "--outfile: name of the compressed image (default: the input name ending in jpg).\n"
    "--sample: sampling factors of Y, Cb and Cr (default: 1x1,1x1,1x1)."
)

_OUTFILE = "--outfile="
_SAMPLE = "--sample="
_HELP = "--help"
_SAMPLE_POSITIONS = (9, 11, 13, 15, 17, 19)
_DEFAULT_FACTOR = SamplingFactor(1, 1)


class UsageError(ValueError):
    """Raised when the command line is empty, incomplete or asks for help."""


@dataclass(frozen=True)
class Options:
    """Input image, output file and sampling factors of one run."""

    input_path: str
    output_path: str
    luma: SamplingFactor = field(default=_DEFAULT_FACTOR)
    chroma_b: SamplingFactor = field(default=_DEFAULT_FACTOR)
    chroma_r: SamplingFactor = field(default=_DEFAULT_FACTOR)


def _digit(text: str) -> int:
    """Value of a single character, 0 when it is not a digit."""
    return int(text) if text.isdigit() else 0


def _parse_sample(arg: str) -> tuple[SamplingFactor, SamplingFactor, SamplingFactor]:
    if len(arg) <= _SAMPLE_POSITIONS[-1]:
        raise UsageError(f"malformed sampling factors {arg!r}\n{USAGE}")
    h1, v1, h2, v2, h3, v3 = (_digit(arg[position]) for position in _SAMPLE_POSITIONS)
    return SamplingFactor(h1, v1), SamplingFactor(h2, v2), SamplingFactor(h3, v3)


def _default_output(input_path: str) -> str:
    return input_path[: max(len(input_path) - 3, 0)] + "jpg"


def parse_args(argv: Sequence[str]) -> Options:
    """Parse the arguments that follow the program name."""
    if not argv:
        raise UsageError(USAGE)
    input_path: str | None = None
    output_path: str | None = None
    explicit_output = False
    factors = (_DEFAULT_FACTOR, _DEFAULT_FACTOR, _DEFAULT_FACTOR)

    for arg in argv:
        if arg.startswith(_OUTFILE):
            output_path = arg[len(_OUTFILE):]
            explicit_output = True
        elif arg.startswith(".") or not arg.startswith("--"):
            input_path = arg
            if not explicit_output:
                output_path = _default_output(arg)
        elif arg.startswith(_SAMPLE):
            factors = _parse_sample(arg)
        elif arg.startswith(_HELP):
            raise UsageError(USAGE)

    if input_path is None or output_path is None:
        raise UsageError(f"no input image given\n{USAGE}")
    luma, chroma_b, chroma_r = factors
    return Options(input_path, output_path, luma, chroma_b, chroma_r)