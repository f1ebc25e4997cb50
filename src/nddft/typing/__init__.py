from __future__ import annotations

__all__ = [
    "ArrayT",
    "ComplexNDArray",
    "VectorKernel",
]
from ._typing import (
    ArrayT,
    ComplexNDArray,
    VectorKernel,
)
