"""Array capabilities for the PyTorch backend."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from itertools import product
from typing import Any, Callable

import torch

from .._dispatch import check_length, normalize_axis


def _to_complex_dtype(dtype: torch.dtype) -> torch.dtype:
    if dtype.is_complex:
        return dtype
    if dtype == torch.float64:
        return torch.complex128
    if dtype.is_floating_point:
        return torch.complex64
    # Integer and boolean tensors follow NumPy's promotion
    return torch.complex128


def to_complex(x: Any) -> torch.Tensor:
    """
    Return an owned complex copy of ``x`` on the device of ``x``.

    ``float64`` maps to ``complex128``, other floating dtypes to
    ``complex64``, integer and boolean dtypes to ``complex128``.
    """
    tensor = torch.as_tensor(x)
    return tensor.to(dtype=_to_complex_dtype(tensor.dtype), copy=True)


def truncate(tensor: torch.Tensor, n: int, axis: int) -> torch.Tensor:
    """Keep the first ``n`` elements of ``tensor`` along ``axis``."""
    n = check_length(n)
    axis = normalize_axis(axis, tensor.ndim)
    if tensor.shape[axis] < n:
        msg = f"cannot truncate axis {axis} of length {tensor.shape[axis]} to {n}"
        raise ValueError(msg)
    return tensor.narrow(axis, 0, n).clone()


def pad_with_zeros(tensor: torch.Tensor, n: int, axis: int) -> torch.Tensor:
    """Append zeros to ``tensor`` along ``axis`` until it holds ``n`` elements."""
    n = check_length(n)
    axis = normalize_axis(axis, tensor.ndim)
    size = tensor.shape[axis]
    if size > n:
        msg = f"cannot pad axis {axis} of length {size} to {n}"
        raise ValueError(msg)
    shape = list(tensor.shape)
    shape[axis] = n
    padded = torch.zeros(shape, dtype=tensor.dtype, device=tensor.device)
    padded.narrow(axis, 0, size).copy_(tensor)
    return padded


def resize_along_axis(tensor: torch.Tensor, n: int, axis: int) -> torch.Tensor:
    """
    Zero-pad or truncate ``tensor`` along ``axis`` to ``n`` elements.

    Growing appends zeros after the existing elements, shrinking drops the
    trailing elements. ``tensor`` is never modified.

    Examples
    --------
    >>> import torch
    >>> resize_along_axis(torch.arange(4), 2, 0)
    tensor([0, 1])
    >>> resize_along_axis(torch.arange(2), 4, 0)
    tensor([0, 1, 0, 0])
    """
    n = check_length(n)
    axis = normalize_axis(axis, tensor.ndim)
    size = tensor.shape[axis]
    if size > n:
        return truncate(tensor, n, axis)
    if size < n:
        return pad_with_zeros(tensor, n, axis)
    return tensor.clone()


def swap_to_last(tensor: torch.Tensor, axis: int) -> torch.Tensor:
    """Exchange ``axis`` with the last axis, returning a view.

    ``tensor`` itself is returned when ``axis`` already is the last axis.
    """
    axis = normalize_axis(axis, tensor.ndim)
    if axis == tensor.ndim - 1:
        return tensor
    return tensor.transpose(axis, -1)


def iterate_rows(
    tensor: torch.Tensor,
    op: Callable[[torch.Tensor], torch.Tensor],
    workers: int = 1,
) -> None:
    """
    Replace every row of ``tensor`` along its last axis by ``op(row)``, in place.

    Parameters
    ----------
    tensor : torch.Tensor
        Tensor of rank >= 1. May be a non-contiguous view.
    op : Callable
        Length-preserving function on one-dimensional tensors.
    workers : int, optional
        Number of threads. Default is 1.
    """
    if tensor.ndim == 0:
        msg = "cannot iterate over rows of a 0-dimensional tensor"
        raise ValueError(msg)

    def _apply(index: tuple[int, ...]) -> None:
        row = tensor[index] if index else tensor
        out = op(row)
        if out.shape != row.shape:
            msg = (
                f"row operation changed row shape from {tuple(row.shape)} "
                f"to {tuple(out.shape)}"
            )
            raise ValueError(msg)
        row.copy_(out)

    indices = product(*(range(s) for s in tensor.shape[:-1]))
    if workers == 1:
        for index in indices:
            _apply(index)
        return

    with ThreadPoolExecutor(max_workers=workers) as executor:
        for future in [executor.submit(_apply, index) for index in indices]:
            future.result()
