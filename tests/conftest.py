"""Shared fixtures and utilities for DFT test files."""

from __future__ import annotations

import numpy as np
import pytest


def get_test_shapes(dim: int) -> list[tuple[int, ...]]:
    """
    Get test shapes for a given dimension.

    Shapes deliberately mix even, odd and prime extents so that padding,
    truncation and axis swaps are exercised on non-square arrays.

    Parameters
    ----------
    dim : int
        Dimension of the test shapes (1, 2, 3, or 4).

    Returns
    -------
    list[tuple[int, ...]]
        List of test shapes for the given dimension.

    Examples
    --------
    >>> get_test_shapes(2)[0]
    (3, 4)
    """
    if dim == 1:
        return [(8,), (7,)]
    elif dim == 2:
        return [(3, 4), (5, 2)]
    elif dim == 3:
        return [(2, 3, 4), (4, 1, 5)]
    elif dim == 4:
        return [(2, 3, 2, 5)]
    else:
        return []


def complex_normal(
    rng: np.random.Generator, size: tuple[int, ...]
) -> np.ndarray:
    """Draw a complex array with standard normal real and imaginary parts."""
    return rng.normal(size=size) + 1j * rng.normal(size=size)


@pytest.fixture
def rng():
    """Random number generator fixture."""
    return np.random.default_rng(42)
