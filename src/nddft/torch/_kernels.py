"""One-dimensional transform kernels for the PyTorch backend."""

from __future__ import annotations

import math
from functools import partial

import torch

from .._dispatch import check_length
from ..typing import VectorKernel
from ._utils import _to_complex_dtype, resize_along_axis


def _scale(length: int, norm: str, inverse: bool) -> float:
    if norm == "ortho":
        return 1.0 / math.sqrt(length)
    if (norm == "backward") == inverse:
        return 1.0 / length
    return 1.0


def dft_matrix(
    length: int,
    inverse: bool = False,
    dtype: torch.dtype = torch.complex128,
    device: torch.device | str | None = None,
) -> torch.Tensor:
    """Dense DFT matrix ``W[j, k] = exp(-2i*pi*j*k/length)``.

    The inverse matrix uses the conjugate exponent and is not scaled.
    """
    length = check_length(length)
    sign = 1.0 if inverse else -1.0
    k = torch.arange(length, dtype=torch.float64, device=device)
    angle = sign * 2 * torch.pi * torch.outer(k, k) / length
    return torch.polar(torch.ones_like(angle), angle).to(dtype)


def fft_kernel(row: torch.Tensor, length: int, norm: str = "backward") -> torch.Tensor:
    return torch.fft.fft(row, n=length, norm=norm)


def ifft_kernel(row: torch.Tensor, length: int, norm: str = "backward") -> torch.Tensor:
    return torch.fft.ifft(row, n=length, norm=norm)


def matrix_kernel(
    row: torch.Tensor, length: int, norm: str = "backward", inverse: bool = False
) -> torch.Tensor:
    # Same pad/truncate semantics as torch.fft.fft(row, n=length)
    if row.shape[0] != length:
        row = resize_along_axis(row, length, 0)
    dtype = _to_complex_dtype(row.dtype)
    w = dft_matrix(length, inverse=inverse, dtype=dtype, device=row.device)
    return _scale(length, norm, inverse) * (w @ row.to(dtype))


def _make_fft(norm: str) -> VectorKernel[torch.Tensor]:
    return partial(fft_kernel, norm=norm)


def _make_ifft(norm: str) -> VectorKernel[torch.Tensor]:
    return partial(ifft_kernel, norm=norm)


def _make_matrix(norm: str) -> VectorKernel[torch.Tensor]:
    return partial(matrix_kernel, norm=norm, inverse=False)


def _make_imatrix(norm: str) -> VectorKernel[torch.Tensor]:
    return partial(matrix_kernel, norm=norm, inverse=True)


KERNELS = {
    "fft": (_make_fft, _make_ifft),
    "matrix": (_make_matrix, _make_imatrix),
}
