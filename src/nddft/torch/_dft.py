from __future__ import annotations

from typing import Sequence

import torch

from .._dispatch import Backend, DFTBase, NormMode
from ._kernels import KERNELS
from ._utils import iterate_rows, resize_along_axis, swap_to_last, to_complex

TORCH_BACKEND = Backend(
    name="torch",
    to_complex=to_complex,
    resize_along_axis=resize_along_axis,
    swap_to_last=swap_to_last,
    iterate_rows=iterate_rows,
)


class DFT(DFTBase):
    """
    Discrete Fourier transform of PyTorch tensors along arbitrary axes.

    The input along the transformed axis is zero-padded at the end or
    truncated to the requested length before the one-dimensional kernel is
    applied to every row. Inputs are never modified.

    Parameters
    ----------
    kernel : {"fft", "matrix"}, optional
        One-dimensional kernel. "fft" uses :func:`torch.fft.fft`, "matrix"
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
    >>> import torch
    >>> from nddft.torch import DFT
    >>> transform = DFT()
    >>> data = torch.randn(3, 4, dtype=torch.float64)
    >>> spectrum = transform.forward(data, n=5, axis=0)
    >>> spectrum.shape
    torch.Size([5, 4])
    >>> recon = transform.backward(transform.forward(data))
    >>> torch.allclose(recon.real, data)
    True
    """

    _backend = TORCH_BACKEND
    _kernels = KERNELS


def fft(
    x: torch.Tensor,
    n: int | None = None,
    axis: int = -1,
    norm: NormMode = "backward",
    kernel: str = "fft",
    workers: int = 1,
) -> torch.Tensor:
    """
    Forward DFT of ``x`` along ``axis``, padded or truncated to ``n``.

    Examples
    --------
    >>> import torch
    >>> from nddft.torch import fft
    >>> impulse = torch.tensor([1.0, 0.0, 0.0, 0.0])
    >>> torch.allclose(fft(impulse), torch.ones(4, dtype=torch.complex64))
    True
    """
    return DFT(kernel=kernel, norm=norm, workers=workers).forward(x, n=n, axis=axis)


def ifft(
    x: torch.Tensor,
    n: int | None = None,
    axis: int = -1,
    norm: NormMode = "backward",
    kernel: str = "fft",
    workers: int = 1,
) -> torch.Tensor:
    """Inverse DFT of ``x`` along ``axis``, padded or truncated to ``n``."""
    return DFT(kernel=kernel, norm=norm, workers=workers).backward(x, n=n, axis=axis)


def fftn(
    x: torch.Tensor,
    shape: Sequence[int] | None = None,
    axes: Sequence[int] | None = None,
    norm: NormMode = "backward",
    kernel: str = "fft",
    workers: int = 1,
) -> torch.Tensor:
    """Forward DFT over ``axes``, one axis at a time."""
    return DFT(kernel=kernel, norm=norm, workers=workers).forwardn(
        x, shape=shape, axes=axes
    )


def ifftn(
    x: torch.Tensor,
    shape: Sequence[int] | None = None,
    axes: Sequence[int] | None = None,
    norm: NormMode = "backward",
    kernel: str = "fft",
    workers: int = 1,
) -> torch.Tensor:
    """Inverse DFT over ``axes``, one axis at a time."""
    return DFT(kernel=kernel, norm=norm, workers=workers).backwardn(
        x, shape=shape, axes=axes
    )
