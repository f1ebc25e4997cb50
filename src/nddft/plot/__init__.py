from __future__ import annotations

__all__ = [
    "spectrumshow",
]
import logging

from .._internal import MATPLOTLIB_ENABLED

logger = logging.getLogger(__name__)

if MATPLOTLIB_ENABLED:
    from ._matplotlib import spectrumshow
else:
    logger.warning("matplotlib is not installed, spectrum plotting is not available")
