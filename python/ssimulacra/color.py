"""Conversion of 8-bit sRGB samples into the 0..1 L*a*b* working space."""

from __future__ import annotations

import numpy as np

# Neutral background used to flatten semi-transparent pixels.
BACKGROUND_GRAY = 128

# CIE L*a*b* helpers: f(t) = cbrt(t) - 16/116 above the epsilon, k * t below.
LAB_EPSILON = 0.00885645167903563081
LAB_S = 0.13793103448275862068
LAB_K = 7.78703703703703703703

# Linear RGB -> XYZ with the D65 white point folded in (rows: X, Y, Z).
RGB_TO_XYZ_D65 = np.array([
    [0.43393624408206207259, 0.37619779063650710152, 0.18983429773803261441],
    [0.2126729, 0.7151522, 0.0721750],
    [0.01775381083562901744, 0.10945087235996326905, 0.87263921028466483011],
])


def _srgb_gamma_lut() -> np.ndarray:
    c = np.arange(256, dtype=np.float64) / 255.0
    return np.where(c <= 0.04045, c / 12.92, ((c + 0.055) / 1.055) ** 2.4)


SRGB_TO_LINEAR_LUT = _srgb_gamma_lut()
SRGB_TO_LINEAR_LUT.setflags(write=False)


def blend_over_gray(pixels: np.ndarray) -> np.ndarray:
    """Composite RGBA uint8 pixels over a flat gray background.

    The alpha channel is kept as-is so both images still carry four channels.
    """
    out = pixels.copy()
    rgb = pixels[..., :3].astype(np.int32)
    alpha = pixels[..., 3:4].astype(np.int32)
    out[..., :3] = (alpha * rgb + (255 - alpha) * BACKGROUND_GRAY) // 255
    return out


def srgb_to_linear(pixels: np.ndarray) -> np.ndarray:
    """Gamma-decode every uint8 sample to linear light in 0..1."""
    return SRGB_TO_LINEAR_LUT[pixels]


def linear_to_lab(rgb: np.ndarray) -> np.ndarray:
    """Convert linear RGB (last axis R, G, B) to L*a*b* rescaled to 0..1."""
    xyz = rgb @ RGB_TO_XYZ_D65.T
    f = np.where(xyz > LAB_EPSILON, np.cbrt(xyz) - LAB_S, LAB_K * xyz)
    fx, fy, fz = f[..., 0], f[..., 1], f[..., 2]

    lab = np.empty_like(xyz)
    lab[..., 0] = fy * 1.16
    lab[..., 1] = 0.39181818181818181818 + 2.27272727272727272727 * (fx - fy)
    lab[..., 2] = 0.49045454545454545454 + 0.90909090909090909090 * (fy - fz)
    return lab


def normalize(pixels: np.ndarray) -> np.ndarray:
    """Map an ``(H, W, C)`` uint8 image into the float64 working space.

    Grayscale is only rescaled to 0..1. RGB and RGBA are gamma-decoded and
    the color channels converted to L*a*b*; alpha is gamma-decoded like the
    other samples but otherwise left alone.
    """
    channels = pixels.shape[2]
    if channels == 1:
        return pixels.astype(np.float64) / 255.0

    if channels == 4:
        pixels = blend_over_gray(pixels)

    linear = srgb_to_linear(pixels)
    linear[..., :3] = linear_to_lab(linear[..., :3])
    return linear
