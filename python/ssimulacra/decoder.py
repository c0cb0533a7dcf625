"""Decoding input files and PIL images into ``(H, W, C)`` uint8 arrays."""

from __future__ import annotations

import logging
from pathlib import Path

import numpy as np
from PIL import Image, UnidentifiedImageError

from ssimulacra.errors import DecodeError

logger = logging.getLogger(__name__)

_NATIVE_MODES = ("L", "RGB", "RGBA")
_ALPHA_MODES = ("LA", "La", "PA", "RGBa")
_WIDE_GRAY_MODES = ("I", "I;16", "I;16B", "I;16L", "I;16N")


def wide_to_uint8(samples: np.ndarray) -> np.ndarray:
    """Keep the high byte of 16-bit samples."""
    wide = np.clip(np.asarray(samples, dtype=np.int64), 0, 65535)
    return (wide >> 8).astype(np.uint8)


def image_to_array(image: Image.Image) -> np.ndarray:
    """Convert a PIL image to grayscale, RGB or RGBA samples.

    Palette images keep their transparency as RGBA, gray+alpha becomes RGBA,
    16-bit gray keeps its high byte, and any other color model becomes RGB.
    """
    mode = image.mode
    if mode in _WIDE_GRAY_MODES:
        return wide_to_uint8(np.asarray(image))[..., np.newaxis]
    if mode == "F":
        arr = np.clip(np.asarray(image), 0, 255).astype(np.uint8)
        return arr[..., np.newaxis]

    if mode == "P":
        image = image.convert("RGBA" if "transparency" in image.info else "RGB")
    elif mode in _ALPHA_MODES:
        image = image.convert("RGBA")
    elif mode == "1":
        image = image.convert("L")
    elif mode not in _NATIVE_MODES:
        logger.debug("Converting %s image to RGB", mode)
        image = image.convert("RGB")

    arr = np.asarray(image, dtype=np.uint8)
    if arr.ndim == 2:
        arr = arr[..., np.newaxis]
    return np.ascontiguousarray(arr)


def load_image(path: str | Path) -> np.ndarray:
    """Decode an image file.

    Raises:
        DecodeError: The file is missing, unreadable or not an image.
    """
    try:
        with Image.open(path) as image:
            image.load()
            return image_to_array(image)
    except (OSError, ValueError, UnidentifiedImageError, Image.DecompressionBombError) as exc:
        raise DecodeError(str(path), str(exc) or type(exc).__name__) from exc
