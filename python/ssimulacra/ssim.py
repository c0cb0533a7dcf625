"""Per-scale structural similarity maps.

SSIM is described in "Image quality assessment: from error visibility to
structural similarity" by Wang et al. Setting both constants to zero, as
some DSSIM variants propose, makes flat regions numerically unstable.
"""

from __future__ import annotations

import numpy as np

from ssimulacra.imageops import gaussian_blur


def local_means(img1: np.ndarray, img2: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
    """Gaussian-weighted local means of both images."""
    return gaussian_blur(img1), gaussian_blur(img2)


def ssim_map(
    img1: np.ndarray,
    img2: np.ndarray,
    mu1: np.ndarray,
    mu2: np.ndarray,
    c1: float,
    c2: float,
) -> np.ndarray:
    """Per-pixel, per-channel SSIM of two equally shaped images.

    Variances and covariance come from blurring the squared and cross
    products once and subtracting the squared means, i.e.
    ``2 * sigma12 = 2 * G(img1 * img2) - 2 * mu1 * mu2`` and
    ``sigma1_sq + sigma2_sq = G(img1^2) + G(img2^2) - (mu1^2 + mu2^2)``.

    Args:
        img1: Original image at the current scale.
        img2: Distorted image at the current scale.
        mu1: ``gaussian_blur(img1)``.
        mu2: ``gaussian_blur(img2)``.
        c1: Stabilisation constant of the luminance term.
        c2: Stabilisation constant of the contrast/structure term.

    Returns:
        Array shaped like the inputs; 1.0 wherever the images agree.
    """
    mu1_mu2 = 2 * (mu1 * mu2)
    sigma12 = 2 * gaussian_blur(img1 * img2) - mu1_mu2 + c2
    numerator = (mu1_mu2 + c1) * sigma12

    mu_sq = np.square(mu1) + np.square(mu2)
    sigma_sq = gaussian_blur(np.square(img1)) + gaussian_blur(np.square(img2)) - mu_sq + c2
    denominator = (mu_sq + c1) * sigma_sq

    return numerator / denominator
