"""SSIMULACRA: Structural SIMilarity Unveiling Local And Compression Related Artifacts.

Multi-scale SSIM in a perceptual L*a*b* space with extra penalties for
local, grid-like and edge-introducing artifacts. The score is 0 for
identical images and grows towards 1 as they diverge; above roughly 0.1 a
distortion is likely to be noticed, below roughly 0.01 it likely is not.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Union

import numpy as np
from PIL import Image

from ssimulacra.artifacts import edge_artifacts, grid_artifacts
from ssimulacra.color import normalize
from ssimulacra.decoder import image_to_array, load_image, wide_to_uint8
from ssimulacra.imageops import area_downsample
from ssimulacra.score import ScoreAccumulator
from ssimulacra.ssim import local_means, ssim_map
from ssimulacra.validation import MIN_SIZE, validate_pair
from ssimulacra.weights import DEFAULT_WEIGHTS, SSIM_MAP, Weights

logger = logging.getLogger(__name__)

ImageInput = Union[np.ndarray, Image.Image]

# Worst-case SSIM is taken over 4x4 blocks; coarser blocks are covered by
# the coarser scales.
MIN_BLOCK = 4


@dataclass
class ComparisonResult:
    """Outcome of one comparison.

    ``ssim_map`` and ``edgediff_map`` hold the full-size ``(H, W, C)`` maps
    when requested with ``keep_maps=True`` and the images have 3 or more
    channels; otherwise they are ``None``.
    """

    score: float
    ssim_map: np.ndarray | None = None
    edgediff_map: np.ndarray | None = None


def as_pixels(image: ImageInput) -> np.ndarray:
    """Coerce a PIL image or array to ``(H, W, C)`` uint8 samples.

    uint16 arrays keep their high byte, like 16-bit files do; any other
    sample type raises ``ValueError``.
    """
    if isinstance(image, Image.Image):
        return image_to_array(image)

    pixels = np.asarray(image)
    if pixels.ndim == 2:
        pixels = pixels[..., np.newaxis]
    if pixels.ndim != 3:
        raise ValueError(f"Expected an (H, W) or (H, W, C) array, got shape {pixels.shape}")
    if pixels.dtype == np.uint16:
        pixels = wide_to_uint8(pixels)
    elif pixels.dtype != np.uint8:
        raise ValueError(f"Expected uint8 or uint16 samples, got {pixels.dtype}")
    return pixels


class SsimulacraMetric:
    """Computes the SSIMULACRA distortion score of a distorted image against its original."""

    def __init__(self, weights: Weights = DEFAULT_WEIGHTS):
        self.weights = weights.validate()

    def compare(
        self, original: ImageInput, distorted: ImageInput, keep_maps: bool = False
    ) -> ComparisonResult:
        """Score ``distorted`` against ``original``.

        The comparison is asymmetric: edges introduced by ``distorted`` are
        penalised, edges it smooths away are not.

        Raises:
            SsimulacraError: Subclasses for each validation failure, before
                any computation happens.
        """
        pixels1, pixels2 = validate_pair(as_pixels(original), as_pixels(distorted))
        channels = pixels1.shape[2]
        expose = keep_maps and channels >= 3

        img1 = normalize(pixels1)
        img2 = normalize(pixels2)
        del pixels1, pixels2

        weights = self.weights
        accumulator = ScoreAccumulator()
        result = ComparisonResult(score=0.0)

        for scale in range(weights.num_scales):
            height, width = img1.shape[:2]
            if width < MIN_SIZE or height < MIN_SIZE:
                logger.debug("Stopping at scale %d: %dx%d is too small", scale, width, height)
                break
            logger.debug("Scale %d: %dx%d", scale, width, height)

            mu1, mu2 = local_means(img1, img2)

            if scale == 0:
                edgediff = edge_artifacts(img1, img2, mu1, mu2, accumulator, weights)
                if expose:
                    result.edgediff_map = edgediff
                del edgediff

            smap = ssim_map(img1, img2, mu1, mu2, weights.c1, weights.c2)
            del mu1, mu2

            if scale == 0:
                grid_artifacts(smap, SSIM_MAP, accumulator, weights)
                if expose:
                    result.ssim_map = smap

            self._add_scale(smap, scale, channels, accumulator)

            img1 = area_downsample(img1, 2)
            img2 = area_downsample(img2, 2)

        result.score = accumulator.final()
        return result

    def _add_scale(
        self, smap: np.ndarray, scale: int, channels: int, accumulator: ScoreAccumulator
    ) -> None:
        """Add the mean SSIM and the worst 4x4 block SSIM of one scale."""
        weights = self.weights

        avg = smap.mean(axis=(0, 1))
        for i in range(channels):
            weight = weights.channel_factor(i) * weights.scale_weights[i][scale]
            accumulator.add(avg[i], weight)

        worst = area_downsample(smap, MIN_BLOCK).min(axis=(0, 1))
        for i in range(channels):
            weight = (
                weights.channel_factor(i)
                * weights.min_weight[i]
                * weights.min_scale_weights[i][scale]
            )
            accumulator.add(worst[i], weight)

    def compute(self, original: ImageInput, distorted: ImageInput) -> float:
        """Return the score in [0, 1], where 0.0 means identical."""
        return self.compare(original, distorted).score

    def compute_from_paths(self, original_path: str | Path, distorted_path: str | Path) -> float:
        """Decode both files and score them."""
        original = load_image(original_path)
        distorted = load_image(distorted_path)
        return self.compute(original, distorted)


def compute_score(original: ImageInput, distorted: ImageInput) -> float:
    """Score a pair with the default weights."""
    return SsimulacraMetric().compute(original, distorted)
