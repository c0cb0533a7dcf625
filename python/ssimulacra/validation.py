"""Checks that two decoded images can be compared."""

from __future__ import annotations

import numpy as np

from ssimulacra.errors import (
    ChannelCountUnsupportedError,
    ChannelMismatchError,
    DimensionMismatchError,
    ImageTooSmallError,
)

MIN_SIZE = 8
SUPPORTED_CHANNELS = (1, 3, 4)


def _size(pixels: np.ndarray) -> tuple[int, int]:
    return pixels.shape[1], pixels.shape[0]


def add_opaque_alpha(pixels: np.ndarray) -> np.ndarray:
    """Append a fully opaque alpha channel to an ``(H, W, 3)`` uint8 image."""
    alpha = np.full(pixels.shape[:2] + (1,), 255, dtype=pixels.dtype)
    return np.concatenate([pixels, alpha], axis=2)


def validate_pair(
    original: np.ndarray, distorted: np.ndarray
) -> tuple[np.ndarray, np.ndarray]:
    """Validate an ``(H, W, C)`` uint8 pair, promoting RGB to RGBA when mixed.

    Returns:
        The pair, with the same shape and channel count.

    Raises:
        DimensionMismatchError: Width or height differ.
        ImageTooSmallError: Fewer than 8 rows or columns.
        ChannelMismatchError: Channel counts differ and one is below 3.
        ChannelCountUnsupportedError: A channel count other than 1, 3 or 4.
    """
    if original.shape[:2] != distorted.shape[:2]:
        raise DimensionMismatchError(_size(original), _size(distorted))

    width, height = _size(original)
    if width < MIN_SIZE or height < MIN_SIZE:
        raise ImageTooSmallError((width, height), MIN_SIZE)

    channels1, channels2 = original.shape[2], distorted.shape[2]
    if channels1 != channels2:
        if channels1 < 3 or channels2 < 3:
            raise ChannelMismatchError(channels1, channels2)
        if channels1 == 3:
            original = add_opaque_alpha(original)
        if channels2 == 3:
            distorted = add_opaque_alpha(distorted)

    for channels in (original.shape[2], distorted.shape[2]):
        if channels not in SUPPORTED_CHANNELS:
            raise ChannelCountUnsupportedError(channels)

    if original.shape[2] != distorted.shape[2]:
        raise ChannelMismatchError(original.shape[2], distorted.shape[2])
    return original, distorted
