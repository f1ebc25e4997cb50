"""Tests for spectrum plotting."""

from __future__ import annotations

import numpy as np
import pytest

matplotlib = pytest.importorskip("matplotlib")
matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402

from nddft.numpy import fft  # noqa: E402
from nddft.plot import spectrumshow  # noqa: E402


@pytest.fixture
def ax():
    fig, ax = plt.subplots()
    yield ax
    plt.close(fig)


def test_vector_spectrum_is_line(ax, rng):
    spectrum = fft(rng.normal(size=16))
    line = spectrumshow(spectrum, ax=ax)
    xdata = line.get_xdata()
    assert xdata[0] == -8
    assert xdata[-1] == 7
    assert ax.get_ylabel() == "dB"


def test_linear_magnitude_unshifted(ax):
    spectrum = fft(np.array([1.0, 0.0, 0.0, 0.0]))
    line = spectrumshow(spectrum, ax=ax, shift=False, log=False)
    np.testing.assert_allclose(line.get_ydata(), np.ones(4))
    np.testing.assert_array_equal(line.get_xdata(), np.arange(4))


def test_image_spectrum(ax, rng):
    spectrum = fft(rng.normal(size=(8, 6)), axis=0)
    im = spectrumshow(spectrum, ax=ax, log=False, shift=False)
    np.testing.assert_allclose(np.asarray(im.get_array()), np.abs(spectrum))


def test_zero_magnitude_does_not_produce_inf(ax):
    im = spectrumshow(np.zeros((4, 4), dtype=complex), ax=ax)
    assert np.all(np.isfinite(np.asarray(im.get_array())))


def test_rejects_higher_rank(ax):
    with pytest.raises(ValueError, match="1-D or 2-D"):
        spectrumshow(np.zeros((2, 2, 2)), ax=ax)
