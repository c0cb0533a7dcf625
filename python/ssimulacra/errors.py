"""ssimulacra custom error types.

Every validation failure is raised before any metric computation starts, so a
caught error always means no score was produced.
"""


class SsimulacraError(Exception):
    """Base exception for all ssimulacra errors."""


class ConfigurationError(SsimulacraError):
    """Raised for invalid weight tables or metric constants."""


class DimensionMismatchError(SsimulacraError):
    """Raised when the two images differ in width or height."""

    def __init__(self, original_size: tuple[int, int], distorted_size: tuple[int, int]):
        self.original_size = original_size
        self.distorted_size = distorted_size
        super().__init__(
            "Image dimensions have to be identical: "
            f"original is {original_size[0]} by {original_size[1]}, "
            f"distorted is {distorted_size[0]} by {distorted_size[1]}. Can't compare."
        )


class ImageTooSmallError(SsimulacraError):
    """Raised when an image has fewer than ``minimum`` rows or columns."""

    def __init__(self, size: tuple[int, int], minimum: int = 8):
        self.size = size
        self.minimum = minimum
        super().__init__(
            f"Image is too small ({size[0]} by {size[1]}); "
            f"need at least {minimum} rows and columns."
        )


class ChannelCountUnsupportedError(SsimulacraError):
    """Raised for anything other than grayscale, RGB or RGBA input."""

    def __init__(self, channels: int):
        self.channels = channels
        super().__init__(
            f"Can only deal with Grayscale, RGB or RGBA input, got {channels} channels."
        )


class ChannelMismatchError(SsimulacraError):
    """Raised when channel counts differ and cannot be reconciled."""

    def __init__(self, original_channels: int, distorted_channels: int):
        self.original_channels = original_channels
        self.distorted_channels = distorted_channels
        super().__init__(
            f"Original image has {original_channels} channels, while "
            f"distorted image has {distorted_channels} channels. Can't compare."
        )


class DecodeError(SsimulacraError):
    """Raised when an input file cannot be opened or decoded."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot decode image {path}: {reason}")
