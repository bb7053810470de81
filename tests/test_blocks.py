import pytest

from jpegenc.blocks import Mcu, format_matrix, image_to_mcus, split_image, split_mcu


def _image(height, width):
    return [[row * 100 + col for col in range(width)] for row in range(height)]


def test_split_mcu_single_block_is_the_matrix():
    matrix = _image(8, 8)
    mcu = split_mcu(matrix, 1, 1)
    assert (mcu.block_cols, mcu.block_lines) == (1, 1)
    assert mcu.blocks == [matrix]


def test_split_mcu_two_by_two_order():
    matrix = _image(16, 16)
    mcu = split_mcu(matrix, 2, 2)
    assert len(mcu.blocks) == 4
    assert mcu.blocks[0][0][0] == matrix[0][0]
    assert mcu.blocks[1][0][0] == matrix[0][8]
    assert mcu.blocks[2][0][0] == matrix[8][0]
    assert mcu.blocks[3][7][7] == matrix[15][15]
    assert all(len(block) == 8 and all(len(row) == 8 for row in block) for block in mcu.blocks)


def test_split_mcu_horizontal_and_vertical():
    wide = _image(8, 16)
    left, right = split_mcu(wide, 2, 1).blocks
    assert left[3][7] == wide[3][7]
    assert right[3][0] == wide[3][8]
    tall = _image(16, 8)
    top, bottom = split_mcu(tall, 1, 2).blocks
    assert top[7][2] == tall[7][2]
    assert bottom[0][2] == tall[8][2]


@pytest.mark.parametrize("cols, lines", [(3, 1), (1, 3), (0, 1)])
def test_split_mcu_rejects_unsupported_formats(cols, lines):
    with pytest.raises(ValueError):
        split_mcu(_image(8, 8), cols, lines)


def test_split_mcu_rejects_wrong_size():
    with pytest.raises(ValueError):
        split_mcu(_image(8, 8), 2, 1)


def test_split_image_pads_with_last_row_and_column():
    matrix = _image(10, 10)
    subs = split_image(matrix, 2, 2, 1, 1)
    assert len(subs) == 4
    assert subs[0] == [row[:8] for row in matrix[:8]]
    assert subs[1][0][1] == matrix[0][9]
    assert subs[1][0][5] == matrix[0][9]
    assert subs[2][5][3] == matrix[9][3]
    assert subs[3][7][7] == matrix[9][9]
    assert subs[3][1][1] == matrix[9][9]


def test_image_to_mcus_grid_shape_and_contents():
    matrix = _image(17, 9)
    grid = image_to_mcus(matrix, 1, 1)
    assert (grid.cols, grid.lines) == (2, 3)
    assert len(grid.mcus) == 3 and all(len(row) == 2 for row in grid.mcus)
    assert grid.mcus[2][1].blocks[0][0][0] == matrix[16][8]
    assert len(list(grid)) == 6
    assert all(isinstance(mcu, Mcu) for mcu in grid)


def test_image_to_mcus_with_subsampled_mcus():
    matrix = _image(17, 17)
    grid = image_to_mcus(matrix, 2, 2)
    assert (grid.cols, grid.lines) == (2, 2)
    corner = grid.mcus[1][1]
    assert (corner.block_cols, corner.block_lines) == (2, 2)
    assert corner.blocks[0][0][0] == matrix[16][16]
    assert corner.blocks[3][7][7] == matrix[16][16]
    first = grid.mcus[0][0]
    assert first.blocks[3][0][0] == matrix[8][8]


def test_image_to_mcus_parameter_order():
    grid = image_to_mcus(_image(8, 16), 1, 2)
    assert (grid.cols, grid.lines) == (1, 1)
    assert grid.mcus[0][0].block_cols == 2


@pytest.mark.parametrize("lines, cols", [(1, 3), (3, 1)])
def test_image_to_mcus_rejects_unsupported_formats(lines, cols):
    with pytest.raises(ValueError):
        image_to_mcus(_image(8, 8), lines, cols)


def test_empty_or_ragged_images_are_rejected():
    with pytest.raises(ValueError):
        image_to_mcus([], 1, 1)
    with pytest.raises(ValueError):
        split_image([[1, 2], [3]], 1, 1, 1, 1)


def test_format_matrix_rgb():
    assert format_matrix([[(255, 0, 171)]]) == "ff0AB \t \n"


def test_format_matrix_samples():
    assert format_matrix([[1, -1]]) == "0001     ffff      \n"
    assert format_matrix([[0], [0]]).count("\n") == 2