from __future__ import annotations

from typing import Any

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.axes import Axes
from matplotlib.image import AxesImage
from matplotlib.lines import Line2D


def spectrumshow(
    spectrum: Any,
    ax: Axes | None = None,
    shift: bool = True,
    log: bool = True,
    **kwargs: Any,
) -> Line2D | AxesImage:
    r"""Display the magnitude of a 1-D or 2-D spectrum.

    Parameters
    ----------
    spectrum : array_like
        Complex spectrum, e.g. the output of :meth:`nddft.numpy.DFT.forward`.
        CPU tensors are accepted as well.
    ax : :obj:`Axes <matplotlib.axes.Axes>`, optional
        Axis on which to draw. Uses `plt.gca()` if None.
    shift : :obj:`bool`, optional
        Move the zero frequency to the center, by default True.
    log : :obj:`bool`, optional
        Show :math:`20 \log_{10}` of the magnitude, by default True.
    **kwargs
        Forwarded to :obj:`matplotlib.axes.Axes.plot` for 1-D spectra and to
        :obj:`matplotlib.axes.Axes.imshow` for 2-D spectra.

    Returns
    -------
    :obj:`Line2D <matplotlib.lines.Line2D>` | :obj:`AxesImage <matplotlib.image.AxesImage>`
        Artist that was drawn.

    Examples
    --------
    >>> import numpy as np
    >>> from nddft.numpy import fft
    >>> from nddft.plot import spectrumshow
    >>> im = spectrumshow(fft(np.random.randn(32, 32), axis=0))
    """
    magnitude = np.abs(np.asarray(spectrum))
    if magnitude.ndim not in (1, 2):
        msg = f"can only display 1-D or 2-D spectra, got {magnitude.ndim}-D"
        raise ValueError(msg)
    if shift:
        magnitude = np.fft.fftshift(magnitude)
    if log:
        magnitude = 20 * np.log10(np.maximum(magnitude, np.finfo(float).tiny))

    if ax is None:
        ax = plt.gca()

    if magnitude.ndim == 1:
        length = magnitude.shape[0]
        freqs = np.arange(length)
        if shift:
            freqs = freqs - length // 2
        (line,) = ax.plot(freqs, magnitude, **kwargs)
        ax.set(xlabel="Frequency index", ylabel="dB" if log else "Magnitude")
        return line

    kwargs.setdefault("aspect", "auto")
    kwargs.setdefault("cmap", "magma")
    return ax.imshow(magnitude, **kwargs)
