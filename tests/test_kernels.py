import math

from bmptool.kernels import (
    box_blur_kernel,
    emboss_kernel,
    gaussian_blur_kernel,
    outline_kernel,
    sharpen_kernel,
)


def _shape(kernel):
    return len(kernel), {len(row) for row in kernel}


def test_kernels_are_three_by_three():
    assert _shape(box_blur_kernel()) == (3, {3})
    assert _shape(gaussian_blur_kernel()) == (3, {3})
    assert _shape(outline_kernel()) == (3, {3})
    assert _shape(emboss_kernel()) == (3, {3})
    assert _shape(sharpen_kernel()) == (3, {3})


def test_preserving_kernels_sum_to_one():
    assert math.isclose(sum(sum(row) for row in box_blur_kernel()), 1.0)
    assert math.isclose(sum(sum(row) for row in gaussian_blur_kernel()), 1.0)
    assert math.isclose(sum(sum(row) for row in sharpen_kernel()), 1.0)


def test_box_blur_is_uniform():
    values = {v for row in box_blur_kernel() for v in row}
    assert len(values) == 1


def test_gaussian_is_symmetric():
    kernel = gaussian_blur_kernel()
    assert all(kernel[i][j] == kernel[j][i] for i in range(3) for j in range(3))
    assert kernel[1][1] == max(v for row in kernel for v in row)


def test_outline_values():
    assert outline_kernel() == ((-1, -1, -1), (-1, 8, -1), (-1, -1, -1))
    assert sum(sum(row) for row in outline_kernel()) == 0


def test_emboss_values():
    assert emboss_kernel() == ((-2, -1, 0), (-1, 1, 1), (0, 1, 2))


def test_sharpen_values():
    assert sharpen_kernel() == ((0, -1, 0), (-1, 5, -1), (0, -1, 0))


def test_box_blur_values():
    for row in box_blur_kernel():
        for value in row:
            assert math.isclose(value, 1 / 9)


def test_gaussian_values():
    expected = ((1, 2, 1), (2, 4, 2), (1, 2, 1))
    kernel = gaussian_blur_kernel()
    for row, expected_row in zip(kernel, expected):
        for value, weight in zip(row, expected_row):
            assert math.isclose(value, weight / 16)