"""Magnitude classes and indices of JPEG coefficients."""

from __future__ import annotations

from dataclasses import dataclass

MAX_VALUE = 2047


@dataclass(frozen=True)
class Magnitude:
    """A coefficient's magnitude class and its index within that class.

    ``index`` is written on exactly ``magnitude`` bits.
    """

    magnitude: int
    index: int


def get_magnitude(value: int) -> Magnitude:
    """Return the magnitude class and index of a coefficient in [-2047, 2047]."""
    if not -MAX_VALUE <= value <= MAX_VALUE:
        raise ValueError(f"value {value} is outside the magnitude table range")
    if value == 0:
        return Magnitude(0, 0)
    magnitude = abs(value).bit_length()
    if value < 0:
        return Magnitude(magnitude, value + (1 << magnitude) - 1)
    return Magnitude(magnitude, value)