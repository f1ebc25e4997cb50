from __future__ import annotations

import sys
from typing import Protocol, TypeVar, Union

import numpy as np
from numpy.typing import NDArray

if sys.version_info >= (3, 10):
    from typing import TypeAlias
else:
    from typing_extensions import TypeAlias

ArrayT = TypeVar("ArrayT")

ComplexNDArray: TypeAlias = Union[
    NDArray[np.complex64],
    NDArray[np.complex128],
]


class VectorKernel(Protocol[ArrayT]):
    """One-dimensional transform applied to a single row.

    A kernel receives a complex vector and the transform length and returns
    a new complex vector of exactly ``length`` elements.
    """

    def __call__(self, row: ArrayT, length: int) -> ArrayT: ...
