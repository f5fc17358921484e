"""
Tests for Composition Functions
"""

import numpy as np
import pytest
from cecbench.composition import Member, composition_weights, evaluate_composition


def _never(x):
    raise AssertionError("zero-weight member must not be evaluated")


class TestCompositionWeights:
    """Test distance-based weights."""

    def test_sum_to_one(self):
        """Test weights are normalised."""
        rng = np.random.default_rng(0)
        origins = [rng.uniform(-80, 80, 10) for _ in range(5)]
        w = composition_weights(rng.uniform(-100, 100, 10), origins, [10, 20, 30, 40, 50])
        assert w.sum() == pytest.approx(1.0)
        assert np.all(w >= 0.0)

    def test_one_hot_at_origin(self):
        """Test zero distance takes the whole weight."""
        origins = [np.zeros(3), np.ones(3), -np.ones(3)]
        w = composition_weights(np.ones(3), origins, [10, 20, 30])
        np.testing.assert_array_equal(w, [0.0, 1.0, 0.0])

    def test_tie_lowest_index(self):
        """Test coincident origins give the weight to the lowest index."""
        origins = [np.ones(2), np.zeros(2), np.zeros(2)]
        w = composition_weights(np.zeros(2), origins, [10, 10, 10])
        np.testing.assert_array_equal(w, [0.0, 1.0, 0.0])

    def test_underflow_uniform(self):
        """Test all-underflowed weights become uniform."""
        origins = [np.full(2, 1e4), np.full(2, -1e4)]
        w = composition_weights(np.zeros(2), origins, [1.0, 1.0])
        np.testing.assert_array_almost_equal(w, [0.5, 0.5])

    def test_closer_member_dominates(self):
        """Test the nearer origin gets the larger weight."""
        origins = [np.zeros(2), np.full(2, 50.0)]
        w = composition_weights(np.full(2, 1.0), origins, [20, 20])
        assert w[0] > w[1]


class TestEvaluateComposition:
    """Test the composition evaluator."""

    def test_value_at_member_origin(self):
        """Test F(o_i) = lam_i g_i(o_i) + bias_i and other members are skipped."""
        members = [
            Member(origin=np.zeros(2), evaluate=_never, delta=10, lam=1.0, bias=0.0),
            Member(origin=np.ones(2), evaluate=lambda x: 4.0, delta=20, lam=0.5, bias=100.0),
        ]
        assert evaluate_composition(np.ones(2), members) == pytest.approx(102.0)

    def test_weighted_sum(self):
        """Test the blend matches the explicit weighted sum."""
        origins = [np.zeros(3), np.full(3, 2.0)]
        members = [
            Member(origin=origins[0], evaluate=lambda x: float(np.sum(x ** 2)), delta=10, lam=1.0, bias=0.0),
            Member(origin=origins[1], evaluate=lambda x: 1.0, delta=20, lam=2.0, bias=100.0),
        ]
        x = np.array([0.5, 1.0, 1.5])
        w = composition_weights(x, origins, [10, 20])
        expected = w[0] * 3.5 + w[1] * (2.0 + 100.0)
        assert evaluate_composition(x, members) == pytest.approx(expected)
