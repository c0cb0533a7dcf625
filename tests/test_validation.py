"""Tests for input pair validation."""

import numpy as np
import pytest

from ssimulacra.errors import (
    ChannelCountUnsupportedError,
    ChannelMismatchError,
    DimensionMismatchError,
    ImageTooSmallError,
)
from ssimulacra.validation import add_opaque_alpha, validate_pair


def _img(height, width, channels, value=100):
    return np.full((height, width, channels), value, dtype=np.uint8)


class TestValidatePair:
    def test_valid_pair_returned(self):
        a, b = _img(16, 16, 3), _img(16, 16, 3, 50)
        out_a, out_b = validate_pair(a, b)
        assert out_a is a
        assert out_b is b

    def test_dimension_mismatch(self):
        with pytest.raises(DimensionMismatchError) as exc_info:
            validate_pair(_img(10, 10, 3), _img(20, 20, 3))
        assert exc_info.value.original_size == (10, 10)
        assert exc_info.value.distorted_size == (20, 20)

    def test_dimension_reported_as_width_height(self):
        with pytest.raises(DimensionMismatchError) as exc_info:
            validate_pair(_img(10, 30, 3), _img(10, 20, 3))
        assert exc_info.value.original_size == (30, 10)

    def test_too_small(self):
        with pytest.raises(ImageTooSmallError):
            validate_pair(_img(7, 7, 3), _img(7, 7, 3))

    @pytest.mark.parametrize("shape", [(7, 100), (100, 7)])
    def test_too_small_in_one_axis(self, shape):
        with pytest.raises(ImageTooSmallError):
            validate_pair(_img(*shape, 1), _img(*shape, 1))

    def test_minimum_size_accepted(self):
        validate_pair(_img(8, 8, 1), _img(8, 8, 1))

    def test_gray_vs_rgb_mismatch(self):
        with pytest.raises(ChannelMismatchError) as exc_info:
            validate_pair(_img(16, 16, 1), _img(16, 16, 3))
        assert exc_info.value.original_channels == 1
        assert exc_info.value.distorted_channels == 3

    def test_rgb_promoted_to_rgba(self):
        a, b = validate_pair(_img(16, 16, 3), _img(16, 16, 4))
        assert a.shape == (16, 16, 4)
        assert b.shape == (16, 16, 4)
        assert np.all(a[..., 3] == 255)

    def test_rgba_vs_rgb_promotes_distorted(self):
        a, b = validate_pair(_img(16, 16, 4), _img(16, 16, 3))
        assert b.shape == (16, 16, 4)

    def test_two_channels_unsupported(self):
        with pytest.raises(ChannelCountUnsupportedError) as exc_info:
            validate_pair(_img(16, 16, 2), _img(16, 16, 2))
        assert exc_info.value.channels == 2

    def test_five_channels_unsupported(self):
        with pytest.raises(ChannelCountUnsupportedError):
            validate_pair(_img(16, 16, 3), _img(16, 16, 5))

    def test_dimensions_checked_before_channels(self):
        with pytest.raises(DimensionMismatchError):
            validate_pair(_img(16, 16, 1), _img(20, 20, 3))


class TestAddOpaqueAlpha:
    def test_appends_255(self):
        px = np.array([[[1, 2, 3]]], dtype=np.uint8)
        out = add_opaque_alpha(px)
        assert out.dtype == np.uint8
        assert out.tolist() == [[[1, 2, 3, 255]]]
