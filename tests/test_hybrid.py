"""
Tests for Hybrid Functions
"""

import numpy as np
import pytest
from cecbench.hybrid import HybridLayout, HybridRecipe, evaluate_hybrid, group_sizes
from cecbench.shapes import ShapeKind, kernels
from cecbench.shapes import cec2014
from cecbench.suites import CEC2014
from cecbench.transforms import Frame


class TestGroupSizes:
    """Test group size derivation."""

    def test_three_groups(self):
        """Test (0.3, 0.3, 0.4) splits."""
        assert group_sizes((0.3, 0.3, 0.4), 10) == [3, 3, 4]
        assert group_sizes((0.3, 0.3, 0.4), 30) == [9, 9, 12]
        assert group_sizes((0.3, 0.3, 0.4), 50) == [15, 15, 20]

    def test_five_groups(self):
        """Test (0.1, 0.2, 0.2, 0.2, 0.3) splits."""
        assert group_sizes((0.1, 0.2, 0.2, 0.2, 0.3), 10) == [1, 2, 2, 2, 3]
        assert group_sizes((0.1, 0.2, 0.2, 0.2, 0.3), 20) == [2, 4, 4, 4, 6]

    def test_last_group_takes_remainder(self):
        """Test floor rounding leaves the remainder to the last group."""
        assert group_sizes((0.3, 0.3, 0.4), 11) == [3, 3, 5]

    def test_sizes_sum_to_dimension(self):
        """Test sizes sum to n for every supported hybrid dimension."""
        for definition in CEC2014.definitions.values():
            for component in definition.components:
                if not component.is_hybrid:
                    continue
                for dim in CEC2014.dimensions:
                    if dim < definition.min_dim:
                        continue
                    sizes = group_sizes(component.shape.proportions, dim)
                    assert sum(sizes) == dim
                    assert all(s > 0 for s in sizes)

    def test_empty_group_rejected(self):
        """Test a dimension too small for the proportions raises."""
        with pytest.raises(ValueError):
            group_sizes((0.3, 0.3, 0.4), 2)


class TestHybridLayout:
    """Test recipes and layouts."""

    def test_recipe_length_mismatch(self):
        """Test one proportion per shape is enforced."""
        with pytest.raises(ValueError):
            HybridRecipe((ShapeKind.SPHERE,), (0.5, 0.5))

    def test_slices(self):
        """Test contiguous group ranges."""
        recipe = HybridRecipe((ShapeKind.SPHERE, ShapeKind.DISCUS), (0.4, 0.6))
        layout = HybridLayout.build(recipe, 10)
        assert layout.sizes == (4, 6)
        assert layout.dim == 10
        assert layout.slices() == [slice(0, 4), slice(4, 10)]

    def test_build_rejects_small_dimension(self):
        """Test layout construction fails on an empty group."""
        recipe = HybridRecipe((ShapeKind.SPHERE, ShapeKind.DISCUS, ShapeKind.HGBAT), (0.3, 0.3, 0.4))
        with pytest.raises(ValueError):
            HybridLayout.build(recipe, 2)


class TestEvaluateHybrid:
    """Test the hybrid evaluator."""

    def test_zero_at_origin(self):
        """Test the hybrid is 0 at its shift."""
        rng = np.random.default_rng(2)
        dim = 10
        recipe = HybridRecipe(
            (ShapeKind.SCHWEFEL, ShapeKind.RASTRIGIN, ShapeKind.ELLIPSOIDAL),
            (0.3, 0.3, 0.4),
        )
        q, _ = np.linalg.qr(rng.normal(size=(dim, dim)))
        frame = Frame(origin=rng.uniform(-80, 80, dim), rotations=(q,), shuffle=rng.permutation(dim))
        layout = HybridLayout.build(recipe, dim)
        value = evaluate_hybrid(frame.origin.copy(), frame, layout, cec2014.SHAPES)
        assert value == pytest.approx(0.0, abs=1e-8)

    def test_shuffle_then_split(self):
        """Test groups read the permuted shifted vector in order."""
        dim = 4
        recipe = HybridRecipe((ShapeKind.SPHERE, ShapeKind.DISCUS), (0.5, 0.5))
        layout = HybridLayout.build(recipe, dim)
        shuffle = np.array([3, 1, 0, 2])
        frame = Frame(origin=np.zeros(dim), shuffle=shuffle)
        x = np.array([1.0, 2.0, 3.0, 4.0])

        z = x[shuffle]
        expected = kernels.sphere(z[:2]) + kernels.discus(z[2:])
        assert evaluate_hybrid(x, frame, layout, cec2014.SHAPES) == pytest.approx(expected)

    def test_identity_shuffle_sphere(self):
        """Test an all-sphere hybrid equals the sphere of the whole vector."""
        dim = 10
        recipe = HybridRecipe((ShapeKind.SPHERE,) * 3, (0.3, 0.3, 0.4))
        layout = HybridLayout.build(recipe, dim)
        origin = np.linspace(-5, 5, dim)
        frame = Frame(origin=origin, shuffle=np.arange(dim))
        x = np.ones(dim)
        assert evaluate_hybrid(x, frame, layout, cec2014.SHAPES) == pytest.approx(kernels.sphere(x - origin))
