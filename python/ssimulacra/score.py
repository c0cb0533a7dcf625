"""Running weighted sum turned into the final 0..1 distortion score."""

from __future__ import annotations

import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass
class ScoreAccumulator:
    """Weighted similarity sum (``score``) and the sum of its weights (``score_max``)."""

    score: float = 0.0
    score_max: float = 0.0

    def add(self, value: float, weight: float) -> None:
        self.score += weight * float(value)
        self.score_max += weight

    def final(self) -> float:
        """Return ``score_max / score - 1`` clamped to [0, 1].

        A single near-zero similarity pulls ``score`` down and inflates the
        ratio, so the result tracks worst-case artifacts more than averages.
        A non-positive ``score`` has no finite ratio and maps to 1.0.
        """
        logger.debug("score=%r score_max=%r", self.score, self.score_max)
        if self.score <= 0:
            logger.warning(
                "Weighted similarity is %r; treating images as maximally different",
                self.score,
            )
            return 1.0

        result = self.score_max / self.score - 1
        if result < 0:
            return 0.0
        if result > 1:
            return 1.0
        return result
