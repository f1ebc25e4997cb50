"""
Transforms Along One Axis
=========================
This example transforms a 2D array of sinusoids along each of its axes in
turn. Along axis 0 the input is zero-padded from 48 to 128 samples before
the transform, which interpolates the spectrum. Along axis 1 it is truncated
to the first 32 samples.
"""

from __future__ import annotations

# %%
import matplotlib.pyplot as plt
import numpy as np

from nddft.numpy import DFT
from nddft.plot import spectrumshow

# %%
# Input signal
# ############
rows, cols = 48, 64
t0 = np.arange(rows)[:, None]
t1 = np.arange(cols)[None, :]
data = np.cos(2 * np.pi * 5 * t0 / rows) + 0.5 * np.sin(2 * np.pi * 12 * t1 / cols)

# %%
# Forward transforms
# ##################
transform = DFT()
spectrum0 = transform.forward(data, n=128, axis=0)
spectrum1 = transform.forward(data, n=32, axis=1)
print(spectrum0.shape, spectrum1.shape)

# %%
fig, axs = plt.subplots(1, 3, figsize=(10, 3.5), layout="constrained")
axs[0].imshow(data, cmap="gray")
axs[0].set(title="Input")
spectrumshow(spectrum0, ax=axs[1])
axs[1].set(title="Axis 0, n=128")
spectrumshow(spectrum1, ax=axs[2])
axs[2].set(title="Axis 1, n=32")

# %%
# Round trip
# ##########
recon = transform.backward(transform.forward(data, axis=0), axis=0)
print(f"max reconstruction error: {np.abs(recon - data).max():.2e}")
