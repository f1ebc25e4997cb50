from __future__ import annotations

__all__ = [
    "DFT",
    "NUMPY_BACKEND",
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

from ._dft import DFT, NUMPY_BACKEND, fft, fftn, ifft, ifftn
from ._utils import (
    iterate_rows,
    pad_with_zeros,
    resize_along_axis,
    swap_to_last,
    to_complex,
    truncate,
)
