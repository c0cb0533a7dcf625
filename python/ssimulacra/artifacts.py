"""Penalties for specific kinds of compression artifacts.

Two detectors run on the full-size scale only:

- extra edges: edges the distorted image introduces where the original is
  smooth (blockiness, color banding, ringing, mosquito noise). Smoothing an
  edge away is not penalised here.
- grid artifacts: block-based codecs leave a band of rows or columns with
  low similarity along block borders. The 2nd percentile worst row/column
  is likely to be one of them even with 32x32 blocks.
"""

from __future__ import annotations

import numpy as np

from ssimulacra.score import ScoreAccumulator
from ssimulacra.weights import EDGE_MAP, Weights

WORST_PERCENTILE_DIVISOR = 50


def edge_diff_map(
    img1: np.ndarray, img2: np.ndarray, mu1: np.ndarray, mu2: np.ndarray
) -> np.ndarray:
    """Local edge energy present in ``img2`` but not in ``img1``, never negative."""
    return np.maximum(np.abs(img2 - mu2) - np.abs(img1 - mu1), 0)


def worst_percentile(means: np.ndarray) -> np.ndarray:
    """Pick the ``n // 50``-th smallest entry along axis 0, per channel."""
    ordered = np.sort(means, axis=0)
    return ordered[len(ordered) // WORST_PERCENTILE_DIVISOR]


def grid_artifacts(
    errormap: np.ndarray, kind: int, accumulator: ScoreAccumulator, weights: Weights
) -> None:
    """Add the worst-row and worst-column similarity of ``errormap``.

    Args:
        errormap: Similarity-style ``(H, W, C)`` map, 1.0 meaning no error.
        kind: ``SSIM_MAP`` or ``EDGE_MAP``; selects the row of
            ``weights.worst_grid_weight``.
        accumulator: Running score to add to.
        weights: Weight tables in use.
    """
    grid_weight = weights.worst_grid_weight[kind]
    channels = errormap.shape[2]

    worst_row = worst_percentile(errormap.mean(axis=1))
    for i in range(channels):
        accumulator.add(worst_row[i], grid_weight[i])

    worst_col = worst_percentile(errormap.mean(axis=0))
    for i in range(channels):
        accumulator.add(worst_col[i], grid_weight[i])


def edge_artifacts(
    img1: np.ndarray,
    img2: np.ndarray,
    mu1: np.ndarray,
    mu2: np.ndarray,
    accumulator: ScoreAccumulator,
    weights: Weights,
) -> np.ndarray:
    """Score introduced edges on average and as grid artifacts.

    Returns the raw (non-inverted) edge-diff map.
    """
    edgediff = edge_diff_map(img1, img2, mu1, mu2)
    similarity = 1.0 - edgediff

    avg = similarity.mean(axis=(0, 1))
    for i in range(similarity.shape[2]):
        accumulator.add(avg[i], weights.extra_edges_weight[i])

    grid_artifacts(similarity, EDGE_MAP, accumulator, weights)
    return edgediff
