from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from typing import Callable

import numpy as np
import numpy.typing as npt

from .._dispatch import check_length, normalize_axis
from ..typing import ComplexNDArray


def _to_complex_dtype(dtype: npt.DTypeLike) -> np.dtype:
    """
    Convert any dtype to its corresponding complex dtype.

    Examples
    --------
    >>> import numpy as np
    >>> _to_complex_dtype(np.float32)
    dtype('complex64')
    >>> _to_complex_dtype(np.int64)
    dtype('complex128')
    >>> _to_complex_dtype(np.complex128)
    dtype('complex128')
    """
    return np.result_type(dtype, 1j)


def to_complex(x: npt.ArrayLike) -> ComplexNDArray:
    """
    Return an owned complex copy of ``x``.

    Real inputs are promoted to the complex dtype of matching precision,
    complex inputs are copied as they are. The result never shares memory
    with ``x``.

    Parameters
    ----------
    x : array_like
        Real or complex input.

    Returns
    -------
    ComplexNDArray
        Complex copy of ``x``.
    """
    arr = np.asarray(x)
    return np.array(arr, dtype=_to_complex_dtype(arr.dtype), copy=True)


def truncate(arr: np.ndarray, n: int, axis: int) -> np.ndarray:
    """Keep the first ``n`` elements of ``arr`` along ``axis``."""
    n = check_length(n)
    axis = normalize_axis(axis, arr.ndim)
    if arr.shape[axis] < n:
        msg = f"cannot truncate axis {axis} of length {arr.shape[axis]} to {n}"
        raise ValueError(msg)
    index = [slice(None)] * arr.ndim
    index[axis] = slice(0, n)
    return arr[tuple(index)].copy()


def pad_with_zeros(arr: np.ndarray, n: int, axis: int) -> np.ndarray:
    """Append zeros to ``arr`` along ``axis`` until it holds ``n`` elements."""
    n = check_length(n)
    axis = normalize_axis(axis, arr.ndim)
    if arr.shape[axis] > n:
        msg = f"cannot pad axis {axis} of length {arr.shape[axis]} to {n}"
        raise ValueError(msg)
    pad_width = [(0, 0)] * arr.ndim
    pad_width[axis] = (0, n - arr.shape[axis])
    return np.pad(arr, pad_width, mode="constant", constant_values=0)


def resize_along_axis(arr: np.ndarray, n: int, axis: int) -> np.ndarray:
    """
    Zero-pad or truncate ``arr`` along ``axis`` to ``n`` elements.

    All other axes are left untouched and ``arr`` itself is never modified.
    Growing appends zeros after the existing elements, shrinking drops the
    trailing elements.

    Parameters
    ----------
    arr : np.ndarray
        Input array.
    n : int
        Target length along ``axis``. Must be >= 1.
    axis : int
        Axis to resize.

    Returns
    -------
    np.ndarray
        New array with ``shape[axis] == n``.

    Examples
    --------
    >>> import numpy as np
    >>> resize_along_axis(np.arange(4), 2, 0)
    array([0, 1])
    >>> resize_along_axis(np.arange(2), 4, 0)
    array([0, 1, 0, 0])
    """
    n = check_length(n)
    axis = normalize_axis(axis, arr.ndim)
    size = arr.shape[axis]
    if size > n:
        return truncate(arr, n, axis)
    if size < n:
        return pad_with_zeros(arr, n, axis)
    return arr.copy()


def swap_to_last(arr: np.ndarray, axis: int) -> np.ndarray:
    """
    Exchange ``axis`` with the last axis of ``arr``.

    Returns a view. When ``axis`` already is the last axis, ``arr`` is
    returned unchanged. Applying the swap twice with the same ``axis``
    restores the original axis order.
    """
    axis = normalize_axis(axis, arr.ndim)
    if axis == arr.ndim - 1:
        return arr
    return np.swapaxes(arr, axis, -1)


def iterate_rows(
    arr: np.ndarray,
    op: Callable[[np.ndarray], np.ndarray],
    workers: int = 1,
) -> None:
    """
    Replace every row of ``arr`` along its last axis by ``op(row)``, in place.

    Each row is visited exactly once. Rows are independent, so with
    ``workers > 1`` they are processed by a thread pool; every task writes
    only its own row.

    Parameters
    ----------
    arr : np.ndarray
        Writeable array of rank >= 1. May be a non-contiguous view.
    op : Callable
        Length-preserving function on one-dimensional arrays.
    workers : int, optional
        Number of threads. Default is 1.
    """
    if arr.ndim == 0:
        msg = "cannot iterate over rows of a 0-dimensional array"
        raise ValueError(msg)

    def _apply(index: tuple[int, ...]) -> None:
        row = arr[index]
        out = op(row)
        if np.shape(out) != row.shape:
            msg = f"row operation changed row shape from {row.shape} to {np.shape(out)}"
            raise ValueError(msg)
        arr[index] = out

    if workers == 1:
        for index in np.ndindex(arr.shape[:-1]):
            _apply(index)
        return

    with ThreadPoolExecutor(max_workers=workers) as executor:
        for future in [
            executor.submit(_apply, index) for index in np.ndindex(arr.shape[:-1])
        ]:
            future.result()
