import pytest

from jpegenc.magnitude import Magnitude, get_magnitude


def test_zero():
    assert get_magnitude(0) == Magnitude(0, 0)


def test_minus_one():
    assert get_magnitude(-1) == Magnitude(1, 0)


def test_extremes_use_eleven_bits():
    assert get_magnitude(2047).magnitude == 11
    assert get_magnitude(-2047).magnitude == 11


@pytest.mark.parametrize("value", [v for v in range(-2047, 2048) if v != 0])
def test_index_fits_in_magnitude_bits(value):
    result = get_magnitude(value)
    assert 0 <= result.index < (1 << result.magnitude)


@pytest.mark.parametrize("value", range(1, 2048, 37))
def test_positive_and_negative_share_magnitude(value):
    positive = get_magnitude(value)
    negative = get_magnitude(-value)
    assert positive.magnitude == negative.magnitude
    assert positive.index == value
    # Negative indices are the bitwise complement of the positive ones.
    assert positive.index + negative.index == (1 << positive.magnitude) - 1


@pytest.mark.parametrize("value", range(1, 2048, 53))
def test_magnitude_class_bounds(value):
    magnitude = get_magnitude(value).magnitude
    assert (1 << (magnitude - 1)) <= value <= (1 << magnitude) - 1


def test_index_leading_bit_gives_sign():
    for value in range(-300, 301):
        if value == 0:
            continue
        result = get_magnitude(value)
        top_bit = result.index >> (result.magnitude - 1)
        assert top_bit == (1 if value > 0 else 0)


def test_indices_unique_within_class():
    indices = {get_magnitude(v).index for v in list(range(-15, -7)) + list(range(8, 16))}
    assert indices == set(range(16))


@pytest.mark.parametrize("value", [2048, -2048, 40000, -40000])
def test_out_of_range_rejected(value):
    with pytest.raises(ValueError):
        get_magnitude(value)