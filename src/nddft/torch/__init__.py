"""PyTorch backend for axis-wise discrete Fourier transforms."""

from __future__ import annotations

__all__ = [
    "DFT",
    "TORCH_BACKEND",
    "fft",
    "fftn",
    "ifft",
    "ifftn",
    "iterate_rows",
    "pad_with_zeros",
    "resize_along_axis",
    "swap_to_last",
    "to_complex",
    "truncate",
]

from ._dft import DFT, TORCH_BACKEND, fft, fftn, ifft, ifftn
from ._utils import (
    iterate_rows,
    pad_with_zeros,
    resize_along_axis,
    swap_to_last,
    to_complex,
    truncate,
)
