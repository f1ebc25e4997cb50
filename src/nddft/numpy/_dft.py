from __future__ import annotations

from typing import Sequence

import numpy.typing as npt

from .._dispatch import Backend, DFTBase, NormMode
from ..typing import ComplexNDArray
from ._kernels import KERNELS
from ._utils import iterate_rows, resize_along_axis, swap_to_last, to_complex

NUMPY_BACKEND = Backend(
    name="numpy",
    to_complex=to_complex,
    resize_along_axis=resize_along_axis,
    swap_to_last=swap_to_last,
    iterate_rows=iterate_rows,
)


class DFT(DFTBase):
    """
    Discrete Fourier transform of NumPy arrays along arbitrary axes.

    The input along the transformed axis is zero-padded at the end or
    truncated to the requested length before the one-dimensional kernel is
    applied to every row. Inputs are never modified.

    Parameters
    ----------
    kernel : {"fft", "matrix"}, optional
        One-dimensional kernel. "fft" uses :func:`numpy.fft.fft`, "matrix"
        multiplies every row by the dense DFT matrix. Default is "fft".
    norm : {"backward", "ortho", "forward"}, optional
        Normalization mode, as in :mod:`numpy.fft`. Default is "backward".
    workers : int, optional
        Number of threads used to transform rows. Default is 1.

    Attributes
    ----------
    parameters : ParamDFT
        Validated configuration.

    Examples
    --------
    >>> import numpy as np
    >>> from nddft.numpy import DFT
    >>> transform = DFT()
    >>> data = np.random.randn(3, 4)
    >>> spectrum = transform.forward(data, n=5, axis=0)
    >>> spectrum.shape
    (5, 4)
    >>> recon = transform.backward(transform.forward(data))
    >>> np.allclose(data, recon)
    True
    """

    _backend = NUMPY_BACKEND
    _kernels = KERNELS


def fft(
    x: npt.ArrayLike,
    n: int | None = None,
    axis: int = -1,
    norm: NormMode = "backward",
    kernel: str = "fft",
    workers: int = 1,
) -> ComplexNDArray:
    """
    Forward DFT of ``x`` along ``axis``, padded or truncated to ``n``.

    Examples
    --------
    >>> import numpy as np
    >>> from nddft.numpy import fft
    >>> np.allclose(fft([1.0, 0.0, 0.0, 0.0]), np.ones(4))
    True
    """
    return DFT(kernel=kernel, norm=norm, workers=workers).forward(x, n=n, axis=axis)


def ifft(
    x: npt.ArrayLike,
    n: int | None = None,
    axis: int = -1,
    norm: NormMode = "backward",
    kernel: str = "fft",
    workers: int = 1,
) -> ComplexNDArray:
    """Inverse DFT of ``x`` along ``axis``, padded or truncated to ``n``."""
    return DFT(kernel=kernel, norm=norm, workers=workers).backward(x, n=n, axis=axis)


def fftn(
    x: npt.ArrayLike,
    shape: Sequence[int] | None = None,
    axes: Sequence[int] | None = None,
    norm: NormMode = "backward",
    kernel: str = "fft",
    workers: int = 1,
) -> ComplexNDArray:
    """Forward DFT over ``axes``, one axis at a time."""
    return DFT(kernel=kernel, norm=norm, workers=workers).forwardn(
        x, shape=shape, axes=axes
    )


def ifftn(
    x: npt.ArrayLike,
    shape: Sequence[int] | None = None,
    axes: Sequence[int] | None = None,
    norm: NormMode = "backward",
    kernel: str = "fft",
    workers: int = 1,
) -> ComplexNDArray:
    """Inverse DFT over ``axes``, one axis at a time."""
    return DFT(kernel=kernel, norm=norm, workers=workers).backwardn(
        x, shape=shape, axes=axes
    )
