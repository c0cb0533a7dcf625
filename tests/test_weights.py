"""Tests for the weight tables and their validation."""

import pytest

from ssimulacra.errors import ConfigurationError
from ssimulacra.weights import DEFAULT_WEIGHTS, EDGE_MAP, SSIM_MAP, Weights


class TestDefaultWeights:
    def test_calibrated_values(self):
        w = DEFAULT_WEIGHTS
        assert w.c1 == 0.0001
        assert w.c2 == 0.0004
        assert w.num_scales == 6
        assert w.chroma_weight == 0.2
        assert w.scale_weights[0] == (0.0448, 0.2856, 0.3001, 0.2363, 0.1333, 0.1)
        assert w.scale_weights[1] == (0.015, 0.0448, 0.2856, 0.3001, 0.3363, 0.25)
        assert w.min_scale_weights[1] == (0.01, 0.05, 0.2, 0.3, 0.35, 0.35)
        assert w.min_weight == (0.1, 0.005, 0.005, 0.005)
        assert w.extra_edges_weight == (1.5, 0.1, 0.1, 0.5)
        assert w.worst_grid_weight[SSIM_MAP] == (1.0, 0.1, 0.1, 0.5)
        assert w.worst_grid_weight[EDGE_MAP] == (1.0, 0.1, 0.1, 0.5)

    def test_default_validates(self):
        assert DEFAULT_WEIGHTS.validate() is DEFAULT_WEIGHTS

    def test_channel_factor(self):
        assert DEFAULT_WEIGHTS.channel_factor(0) == 1.0
        assert DEFAULT_WEIGHTS.channel_factor(1) == 0.2
        assert DEFAULT_WEIGHTS.channel_factor(3) == 0.2

    def test_frozen(self):
        with pytest.raises(AttributeError):
            DEFAULT_WEIGHTS.c1 = 0.5


class TestWeightsValidation:
    def test_both_constants_zero_rejected(self):
        with pytest.raises(ConfigurationError, match="both be zero"):
            Weights(c1=0.0, c2=0.0).validate()

    def test_one_constant_zero_allowed(self):
        Weights(c1=0.0).validate()

    def test_negative_constant_rejected(self):
        with pytest.raises(ConfigurationError):
            Weights(c2=-1.0).validate()

    @pytest.mark.parametrize("num_scales", [0, 7])
    def test_num_scales_out_of_range(self, num_scales):
        with pytest.raises(ConfigurationError, match="num_scales"):
            Weights(num_scales=num_scales).validate()

    def test_wrong_table_shape(self):
        with pytest.raises(ConfigurationError, match="scale_weights"):
            Weights(scale_weights=((0.1,) * 6,) * 3).validate()

    def test_negative_weight_rejected(self):
        with pytest.raises(ConfigurationError, match="extra_edges_weight"):
            Weights(extra_edges_weight=(1.5, -0.1, 0.1, 0.5)).validate()

    def test_wrong_grid_shape(self):
        with pytest.raises(ConfigurationError, match="worst_grid_weight"):
            Weights(worst_grid_weight=((1.0, 0.1, 0.1, 0.5),)).validate()
