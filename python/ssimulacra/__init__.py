"""ssimulacra — perceptual distortion score for lossy image compression."""

from ssimulacra.errors import (
    SsimulacraError,
    ConfigurationError,
    DimensionMismatchError,
    ImageTooSmallError,
    ChannelCountUnsupportedError,
    ChannelMismatchError,
    DecodeError,
)
from ssimulacra.decoder import load_image
from ssimulacra.metric import ComparisonResult, SsimulacraMetric, compute_score
from ssimulacra.weights import DEFAULT_WEIGHTS, Weights

__version__ = "0.1.0"

__all__ = [
    "SsimulacraMetric",
    "ComparisonResult",
    "compute_score",
    "load_image",
    "Weights",
    "DEFAULT_WEIGHTS",
    "SsimulacraError",
    "ConfigurationError",
    "DimensionMismatchError",
    "ImageTooSmallError",
    "ChannelCountUnsupportedError",
    "ChannelMismatchError",
    "DecodeError",
]
