"""One-dimensional transform kernels for the NumPy backend."""

from __future__ import annotations

from functools import partial

import numpy as np

from .._dispatch import check_length
from ..typing import ComplexNDArray, VectorKernel
from ._utils import _to_complex_dtype, resize_along_axis


def _scale(length: int, norm: str, inverse: bool) -> float:
    if norm == "ortho":
        return 1.0 / np.sqrt(length)
    if (norm == "backward") == inverse:
        return 1.0 / length
    return 1.0


def dft_matrix(length: int, inverse: bool = False) -> ComplexNDArray:
    """
    Dense DFT matrix ``W[j, k] = exp(-2i*pi*j*k/length)``.

    The inverse matrix uses the conjugate exponent and is not scaled.

    Examples
    --------
    >>> import numpy as np
    >>> w = dft_matrix(4)
    >>> np.allclose(w @ np.eye(4)[1], [1, -1j, -1, 1j])
    True
    """
    length = check_length(length)
    sign = 1.0 if inverse else -1.0
    k = np.arange(length)
    return np.exp(sign * 2j * np.pi * np.outer(k, k) / length)


def fft_kernel(row: np.ndarray, length: int, norm: str = "backward") -> np.ndarray:
    out = np.fft.fft(row, n=length, norm=norm)
    return out.astype(_to_complex_dtype(row.dtype), copy=False)


def ifft_kernel(row: np.ndarray, length: int, norm: str = "backward") -> np.ndarray:
    out = np.fft.ifft(row, n=length, norm=norm)
    return out.astype(_to_complex_dtype(row.dtype), copy=False)


def matrix_kernel(
    row: np.ndarray, length: int, norm: str = "backward", inverse: bool = False
) -> np.ndarray:
    # Same pad/truncate semantics as np.fft.fft(row, n=length)
    if row.shape[0] != length:
        row = resize_along_axis(row, length, 0)
    w = dft_matrix(length, inverse=inverse)
    out = _scale(length, norm, inverse) * (w @ row)
    return out.astype(_to_complex_dtype(row.dtype), copy=False)


def _make_fft(norm: str) -> VectorKernel[np.ndarray]:
    return partial(fft_kernel, norm=norm)


def _make_ifft(norm: str) -> VectorKernel[np.ndarray]:
    return partial(ifft_kernel, norm=norm)


def _make_matrix(norm: str) -> VectorKernel[np.ndarray]:
    return partial(matrix_kernel, norm=norm, inverse=False)


def _make_imatrix(norm: str) -> VectorKernel[np.ndarray]:
    return partial(matrix_kernel, norm=norm, inverse=True)


KERNELS = {
    "fft": (_make_fft, _make_ifft),
    "matrix": (_make_matrix, _make_imatrix),
}
