"""Standard 3x3 convolution kernels."""

from typing import Sequence

Kernel = Sequence[Sequence[float]]


def _scaled(values: Sequence[Sequence[float]], divisor: float = 1.0) -> tuple[tuple[float, ...], ...]:
    return tuple(tuple(v / divisor for v in row) for row in values)


def box_blur_kernel() -> tuple[tuple[float, ...], ...]:
    """Uniform 3x3 averaging kernel."""
    return _scaled(((1, 1, 1), (1, 1, 1), (1, 1, 1)), 9.0)


def gaussian_blur_kernel() -> tuple[tuple[float, ...], ...]:
    """3x3 Gaussian approximation, weights summing to one."""
    return _scaled(((1, 2, 1), (2, 4, 2), (1, 2, 1)), 16.0)


def outline_kernel() -> tuple[tuple[float, ...], ...]:
    """Edge-detection kernel."""
    return _scaled(((-1, -1, -1), (-1, 8, -1), (-1, -1, -1)))


def emboss_kernel() -> tuple[tuple[float, ...], ...]:
    """Emboss (relief) kernel."""
    return _scaled(((-2, -1, 0), (-1, 1, 1), (0, 1, 2)))


def sharpen_kernel() -> tuple[tuple[float, ...], ...]:
    """Sharpening kernel."""
    return _scaled(((0, -1, 0), (-1, 5, -1), (0, -1, 0)))