"""Image primitives shared by the SSIM engine and the artifact detectors.

Images are float64 arrays shaped ``(H, W, C)``; grayscale keeps a
trailing channel axis of length one so every stage can treat channels alike.
"""

from __future__ import annotations

import numpy as np
from skimage.filters import gaussian

WINDOW_SIGMA = 1.5
WINDOW_RADIUS = 5  # 11x11 window

# skimage sizes the kernel as int(truncate * sigma + 0.5) on each side.
_TRUNCATE = (WINDOW_RADIUS + 0.25) / WINDOW_SIGMA


def gaussian_blur(image: np.ndarray) -> np.ndarray:
    """Blur each channel with the 11x11, sigma 1.5 SSIM window.

    Borders are reflected without repeating the edge pixel.
    """
    return gaussian(
        image,
        sigma=WINDOW_SIGMA,
        mode="mirror",
        truncate=_TRUNCATE,
        preserve_range=True,
        channel_axis=-1,
    )


def scaled_size(n: int, factor: int) -> int:
    """Output length of an axis of length ``n`` shrunk by ``factor``.

    Halves round to even, e.g. 9 -> 4 and 11 -> 6 for ``factor=2``.
    """
    return max(int(np.round(n / factor)), 1)


def _area_axis(image: np.ndarray, factor: int, axis: int) -> np.ndarray:
    n = image.shape[axis]
    m = scaled_size(n, factor)
    stop = min(n, m * factor)
    starts = np.arange(m) * factor

    sliced = np.take(image, np.arange(stop), axis=axis)
    sums = np.add.reduceat(sliced, starts, axis=axis)
    counts = np.diff(np.append(starts, stop))

    shape = [1] * image.ndim
    shape[axis] = m
    return sums / counts.reshape(shape)


def area_downsample(image: np.ndarray, factor: int) -> np.ndarray:
    """Shrink both spatial axes by an integer ``factor`` using area averaging.

    Output pixel ``i`` is the mean of input pixels ``[i*factor, (i+1)*factor)``
    clipped to the image; input pixels past the last full output block are
    dropped when the size rounds down.
    """
    return _area_axis(_area_axis(image, factor, 0), factor, 1)
