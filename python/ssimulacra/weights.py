"""Calibrated weight tables for the ssimulacra score.

All of the constants below are more or less arbitrary. Some calibration was
done, but there is room for improvement; changing any of them changes every
score, so keep them in sync with stored results.

Channel index 0 is lightness, 1 and 2 are the chroma axes, 3 is alpha.
"""

from __future__ import annotations

from dataclasses import dataclass

from ssimulacra.errors import ConfigurationError

# SSIM stabilisation constants. The usual C2 is 0.0009; a smaller value
# seems to work slightly better.
C1 = 0.0001
C2 = 0.0004

NUM_SCALES = 6
MAX_CHANNELS = 4

# Weight of the mean SSIM at each scale.
# Chroma gives more weight to the zoomed-out scales.
SCALE_WEIGHTS = (
    # 1:1   1:2     1:4     1:8     1:16    1:32
    (0.0448, 0.2856, 0.3001, 0.2363, 0.1333, 0.1),
    (0.015, 0.0448, 0.2856, 0.3001, 0.3363, 0.25),
    (0.015, 0.0448, 0.2856, 0.3001, 0.3363, 0.25),
    (0.0448, 0.2856, 0.3001, 0.2363, 0.1333, 0.1),
)

# Weight of the worst 4x4 block at each scale.
MIN_SCALE_WEIGHTS = (
    # 1:4   1:8     1:16    1:32    1:64    1:128
    (0.2, 0.3, 0.25, 0.2, 0.12, 0.05),
    (0.01, 0.05, 0.2, 0.3, 0.35, 0.35),
    (0.01, 0.05, 0.2, 0.3, 0.35, 0.35),
    (0.2, 0.3, 0.25, 0.2, 0.12, 0.05),
)

# Importance of the worst local artifacts.
MIN_WEIGHT = (0.1, 0.005, 0.005, 0.005)

# Importance of edges introduced where the original is smooth.
EXTRA_EDGES_WEIGHT = (1.5, 0.1, 0.1, 0.5)

# Importance of grid-like artifacts (blockiness).
WORST_GRID_WEIGHT = (
    (1.0, 0.1, 0.1, 0.5),  # on the SSIM heatmap
    (1.0, 0.1, 0.1, 0.5),  # on the extra-edges heatmap
)

# Applied to every channel after the first.
CHROMA_WEIGHT = 0.2

SSIM_MAP = 0
EDGE_MAP = 1


@dataclass(frozen=True)
class Weights:
    """Immutable bundle of every tunable constant used by the metric."""

    scale_weights: tuple[tuple[float, ...], ...] = SCALE_WEIGHTS
    min_scale_weights: tuple[tuple[float, ...], ...] = MIN_SCALE_WEIGHTS
    min_weight: tuple[float, ...] = MIN_WEIGHT
    extra_edges_weight: tuple[float, ...] = EXTRA_EDGES_WEIGHT
    worst_grid_weight: tuple[tuple[float, ...], ...] = WORST_GRID_WEIGHT
    chroma_weight: float = CHROMA_WEIGHT
    c1: float = C1
    c2: float = C2
    num_scales: int = NUM_SCALES

    def channel_factor(self, channel: int) -> float:
        """Luminance counts fully, everything else is scaled by ``chroma_weight``."""
        return 1.0 if channel == 0 else self.chroma_weight

    def validate(self) -> Weights:
        """Check table shapes and values, returning ``self`` for chaining.

        Raises:
            ConfigurationError: If any table is malformed.
        """
        if not 1 <= self.num_scales <= NUM_SCALES:
            raise ConfigurationError(
                f"num_scales must be between 1 and {NUM_SCALES}, got {self.num_scales}"
            )
        if self.c1 < 0 or self.c2 < 0:
            raise ConfigurationError("SSIM constants c1 and c2 must be non-negative")
        if self.c1 == 0 and self.c2 == 0:
            raise ConfigurationError(
                "SSIM constants c1 and c2 cannot both be zero (numerically unstable)"
            )
        if self.chroma_weight < 0:
            raise ConfigurationError("chroma_weight must be non-negative")

        for name in ("scale_weights", "min_scale_weights"):
            table = getattr(self, name)
            if len(table) != MAX_CHANNELS or any(len(row) != NUM_SCALES for row in table):
                raise ConfigurationError(
                    f"{name} must be a {MAX_CHANNELS}x{NUM_SCALES} table"
                )
            _check_non_negative(name, [w for row in table for w in row])

        for name in ("min_weight", "extra_edges_weight"):
            table = getattr(self, name)
            if len(table) != MAX_CHANNELS:
                raise ConfigurationError(f"{name} must have {MAX_CHANNELS} entries")
            _check_non_negative(name, table)

        grid = self.worst_grid_weight
        if len(grid) != 2 or any(len(row) != MAX_CHANNELS for row in grid):
            raise ConfigurationError(f"worst_grid_weight must be a 2x{MAX_CHANNELS} table")
        _check_non_negative("worst_grid_weight", [w for row in grid for w in row])
        return self


def _check_non_negative(name: str, values) -> None:
    if any(w < 0 for w in values):
        raise ConfigurationError(f"{name} must not contain negative weights")


DEFAULT_WEIGHTS = Weights()
