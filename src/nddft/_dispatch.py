"""Backend-agnostic orchestration of single-axis discrete Fourier transforms."""

from __future__ import annotations

import logging
import numbers
import sys
from dataclasses import dataclass
from typing import Any, Callable, ClassVar, Literal, Sequence

from .typing import VectorKernel

logger = logging.getLogger(__name__)

NormMode = Literal["backward", "ortho", "forward"]
NORM_MODES: tuple[str, ...] = ("backward", "ortho", "forward")
KERNEL_NAMES: tuple[str, ...] = ("fft", "matrix")


@dataclass(frozen=True)
class Backend:
    """
    Array capabilities consumed by the dispatcher.

    Parameters
    ----------
    name : str
        Human readable backend name, used in log messages.
    to_complex : Callable
        Returns an owned complex copy of its input.
    resize_along_axis : Callable
        ``(array, n, axis) -> array`` zero-padding or truncating ``axis`` to ``n``.
    swap_to_last : Callable
        ``(array, axis) -> array`` exchanging ``axis`` with the last axis.
    iterate_rows : Callable
        ``(array, op, workers=1) -> None`` replacing every row along the last
        axis with ``op(row)`` in place.
    """

    name: str
    to_complex: Callable[[Any], Any]
    resize_along_axis: Callable[[Any, int, int], Any]
    swap_to_last: Callable[[Any, int], Any]
    iterate_rows: Callable[..., None]


@dataclass(**({"kw_only": True} if sys.version_info >= (3, 10) else {}))
class ParamDFT:
    kernel: str = "fft"
    norm: NormMode = "backward"
    workers: int = 1

    def __post_init__(self) -> None:
        if self.kernel not in KERNEL_NAMES:
            msg = f"kernel must be one of {KERNEL_NAMES}, got {self.kernel!r}"
            raise ValueError(msg)
        if self.norm not in NORM_MODES:
            msg = f"norm must be one of {NORM_MODES}, got {self.norm!r}"
            raise ValueError(msg)
        if isinstance(self.workers, bool) or not isinstance(
            self.workers, numbers.Integral
        ):
            msg = f"workers must be an integer, got {type(self.workers).__name__}"
            raise TypeError(msg)
        if self.workers < 1:
            msg = f"workers must be >= 1, got {self.workers}"
            raise ValueError(msg)


def check_length(n: Any) -> int:
    """Validate a transform length and return it as a plain ``int``."""
    if isinstance(n, bool) or not isinstance(n, numbers.Integral):
        msg = f"transform length must be an integer, got {type(n).__name__}"
        raise TypeError(msg)
    if n < 1:
        msg = f"transform length must be >= 1, got {n}"
        raise ValueError(msg)
    return int(n)


def normalize_axis(axis: Any, ndim: int) -> int:
    """
    Map ``axis`` into ``[0, ndim)``.

    Negative values count from the end as in regular Python indexing.
    Anything outside ``[-ndim, ndim)`` raises instead of being clamped.

    Examples
    --------
    >>> normalize_axis(-1, 3)
    2
    >>> normalize_axis(1, 3)
    1
    """
    if isinstance(axis, bool) or not isinstance(axis, numbers.Integral):
        msg = f"axis must be an integer, got {type(axis).__name__}"
        raise TypeError(msg)
    if not -ndim <= axis < ndim:
        msg = f"axis {axis} is out of bounds for array of dimension {ndim}"
        raise ValueError(msg)
    return int(axis) % ndim


def _resize(data: Any, n: int, axis: int, backend: Backend) -> Any:
    size = data.shape[axis]
    if size == n:
        return data
    if size > n:
        logger.debug(
            "%s: truncating axis %d from %d to %d elements", backend.name, axis, size, n
        )
    else:
        logger.debug(
            "%s: zero-padding axis %d from %d to %d elements",
            backend.name,
            axis,
            size,
            n,
        )
    return backend.resize_along_axis(data, n, axis)


def apply_transform(
    x: Any,
    n: int | None,
    axis: int,
    kernel: VectorKernel[Any],
    backend: Backend,
    workers: int = 1,
) -> Any:
    """
    Transform ``x`` along a single axis with a one-dimensional kernel.

    The input is converted to an owned complex copy, resized along ``axis``
    to ``n`` elements (zero-padding at the end or truncating trailing
    elements), and every row along ``axis`` is replaced by ``kernel(row, n)``.
    Forward and inverse transforms only differ by the kernel passed in.

    Parameters
    ----------
    x : array_like
        Real or complex input of rank >= 1. Never modified.
    n : int | None
        Length of the transformed axis in the output. Defaults to the current
        extent of ``axis``.
    axis : int
        Axis to transform. Ignored for rank-1 inputs.
    kernel : VectorKernel
        One-dimensional transform ``(row, length) -> row``.
    backend : Backend
        Array capabilities used for conversion, resizing and row traversal.
    workers : int, optional
        Number of threads used to transform rows. Default is 1.

    Returns
    -------
    array
        Complex array with the shape of ``x`` except along ``axis``, which
        has ``n`` elements.
    """
    if n is not None:
        n = check_length(n)

    data = backend.to_complex(x)
    if data.ndim == 0:
        msg = "cannot transform a 0-dimensional array"
        raise ValueError(msg)

    if data.ndim == 1:
        n = check_length(data.shape[0] if n is None else n)
        logger.debug("%s: vector path with length %d", backend.name, n)
        return kernel(_resize(data, n, 0, backend), n)

    axis = normalize_axis(axis, data.ndim)
    n = check_length(data.shape[axis] if n is None else n)
    logger.debug(
        "%s: transforming axis %d of shape %s with length %d",
        backend.name,
        axis,
        tuple(data.shape),
        n,
    )

    result = _resize(data, n, axis, backend)
    last = result.ndim - 1
    if axis != last:
        result = backend.swap_to_last(result, axis)

    backend.iterate_rows(
        result, lambda row: kernel(row, row.shape[-1]), workers=workers
    )

    if axis != last:
        result = backend.swap_to_last(result, axis)
    return result


def _resolve_axes(
    ndim: int, shape: Sequence[int] | None, axes: Sequence[int] | None
) -> tuple[list[int], list[int | None]]:
    if axes is None:
        if shape is not None and len(shape) > ndim:
            msg = (
                f"shape has {len(shape)} entries but the array only has "
                f"{ndim} dimensions"
            )
            raise ValueError(msg)
        axes = range(ndim) if shape is None else range(ndim - len(shape), ndim)
    axes_norm = [normalize_axis(a, ndim) for a in axes]
    if len(set(axes_norm)) != len(axes_norm):
        msg = f"repeated axis in axes={tuple(axes)}"
        raise ValueError(msg)
    if shape is None:
        return axes_norm, [None] * len(axes_norm)
    if len(shape) != len(axes_norm):
        msg = (
            f"shape and axes must have the same length, got {len(shape)} "
            f"and {len(axes_norm)}"
        )
        raise ValueError(msg)
    return axes_norm, [check_length(s) for s in shape]


class DFTBase:
    """
    Discrete Fourier transform along arbitrary axes of N-dimensional arrays.

    Concrete backends set ``_backend`` and ``_kernels``. The latter maps a
    kernel name to a ``(forward, inverse)`` pair of kernel factories taking
    the normalization mode.

    Parameters
    ----------
    kernel : {"fft", "matrix"}, optional
        One-dimensional kernel. "fft" uses the array library's FFT, "matrix"
        multiplies by the dense DFT matrix. Default is "fft".
    norm : {"backward", "ortho", "forward"}, optional
        Normalization mode, with the same meaning as in :mod:`numpy.fft`.
        Default is "backward".
    workers : int, optional
        Number of threads used to transform rows. Default is 1.
    """

    _backend: ClassVar[Backend]
    _kernels: ClassVar[dict[str, tuple[Callable[..., Any], Callable[..., Any]]]]

    def __init__(
        self,
        kernel: str = "fft",
        norm: NormMode = "backward",
        workers: int = 1,
    ) -> None:
        self.parameters = ParamDFT(kernel=kernel, norm=norm, workers=workers)
        make_forward, make_inverse = self._kernels[self.parameters.kernel]
        self._forward_kernel = make_forward(self.parameters.norm)
        self._inverse_kernel = make_inverse(self.parameters.norm)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(kernel={self.parameters.kernel!r}, "
            f"norm={self.parameters.norm!r}, workers={self.parameters.workers})"
        )

    @property
    def backend(self) -> Backend:
        """Array capabilities used by this transform."""
        return self._backend

    def forward(self, x: Any, n: int | None = None, axis: int = -1) -> Any:
        """
        Forward transform along one axis.

        Parameters
        ----------
        x : array_like
            Real or complex input.
        n : int, optional
            Output length along ``axis``. Defaults to the input extent.
        axis : int, optional
            Axis to transform. Default is the last axis.

        Returns
        -------
        array
            Complex spectrum.
        """
        return apply_transform(
            x,
            n,
            axis,
            self._forward_kernel,
            self._backend,
            workers=self.parameters.workers,
        )

    def backward(self, x: Any, n: int | None = None, axis: int = -1) -> Any:
        """
        Inverse transform along one axis.

        Parameters
        ----------
        x : array_like
            Real or complex spectrum.
        n : int, optional
            Output length along ``axis``. Defaults to the input extent.
        axis : int, optional
            Axis to transform. Default is the last axis.

        Returns
        -------
        array
            Complex signal.
        """
        return apply_transform(
            x,
            n,
            axis,
            self._inverse_kernel,
            self._backend,
            workers=self.parameters.workers,
        )

    def _apply_n(
        self,
        x: Any,
        shape: Sequence[int] | None,
        axes: Sequence[int] | None,
        kernel: VectorKernel[Any],
    ) -> Any:
        data = self._backend.to_complex(x)
        if data.ndim == 0:
            msg = "cannot transform a 0-dimensional array"
            raise ValueError(msg)
        axes_norm, lengths = _resolve_axes(data.ndim, shape, axes)
        for ax, length in zip(axes_norm, lengths):
            data = apply_transform(
                data,
                length,
                ax,
                kernel,
                self._backend,
                workers=self.parameters.workers,
            )
        return data

    def forwardn(
        self,
        x: Any,
        shape: Sequence[int] | None = None,
        axes: Sequence[int] | None = None,
    ) -> Any:
        """
        Forward transform over several axes, one axis at a time.

        Parameters
        ----------
        x : array_like
            Real or complex input.
        shape : Sequence[int], optional
            Output lengths, one per transformed axis.
        axes : Sequence[int], optional
            Axes to transform. Defaults to all axes, or to the last
            ``len(shape)`` axes when ``shape`` is given.

        Returns
        -------
        array
            Complex spectrum.
        """
        return self._apply_n(x, shape, axes, self._forward_kernel)

    def backwardn(
        self,
        x: Any,
        shape: Sequence[int] | None = None,
        axes: Sequence[int] | None = None,
    ) -> Any:
        """Inverse of :meth:`forwardn`."""
        return self._apply_n(x, shape, axes, self._inverse_kernel)
