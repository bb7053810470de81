import pytest

from jpegenc.zigzag import zigzag


def indexed_block():
    return [[row * 8 + col for col in range(8)] for row in range(8)]


def test_result_is_a_permutation():
    result = zigzag(indexed_block())
    assert sorted(result) == list(range(64))


def test_starts_at_dc_and_ends_at_corner():
    result = zigzag(indexed_block())
    assert result[0] == 0
    assert result[-1] == 63


def test_opening_sequence():
    assert zigzag(indexed_block())[:6] == [0, 1, 8, 16, 9, 2]


def test_consecutive_entries_are_neighbours():
    result = zigzag(indexed_block())
    for a, b in zip(result, result[1:]):
        ra, ca = divmod(a, 8)
        rb, cb = divmod(b, 8)
        assert max(abs(ra - rb), abs(ca - cb)) == 1


def test_diagonals_are_visited_in_order():
    result = zigzag(indexed_block())
    diagonals = [sum(divmod(value, 8)) for value in result]
    assert diagonals == sorted(diagonals)


def test_transposed_block_mirrors_sequence():
    block = indexed_block()
    transposed = [list(column) for column in zip(*block)]
    forward = zigzag(block)
    mirrored = zigzag(transposed)
    for a, b in zip(forward, mirrored):
        ra, ca = divmod(a, 8)
        assert b == ca * 8 + ra or sum(divmod(b, 8)) == ra + ca


def test_constant_block():
    assert zigzag([[7] * 8 for _ in range(8)]) == [7] * 64


@pytest.mark.parametrize(
    "block",
    [
        [[0] * 8 for _ in range(7)],
        [[0] * 7 for _ in range(8)],
        [[0] * 16 for _ in range(16)],
    ],
)
def test_non_8x8_block_rejected(block):
    with pytest.raises(ValueError):
        zigzag(block)