"""Discrete Fourier transforms along arbitrary axes of N-dimensional arrays."""

from __future__ import annotations

import importlib.metadata

__all__ = ["Backend", "DFTBase", "ParamDFT", "__version__"]

from ._dispatch import Backend, DFTBase, ParamDFT

try:
    __version__ = importlib.metadata.version("nddft")
except importlib.metadata.PackageNotFoundError:
    __version__ = "0.0.0.dev0"
