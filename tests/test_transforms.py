"""
Tests for Geometric Transforms
"""

import numpy as np
import pytest
from cecbench.transforms import (
    BARE,
    Frame,
    asymmetry,
    conditioning,
    index_ramp,
    oscillation,
    rotate,
    shift,
    shift_rotate,
)


class TestIndexRamp:
    """Test the i / (n - 1) ramp."""

    def test_ramp(self):
        """Test ramp endpoints and spacing."""
        np.testing.assert_array_almost_equal(index_ramp(5), [0.0, 0.25, 0.5, 0.75, 1.0])

    def test_single_coordinate(self):
        """Test n = 1 gives r = 0."""
        np.testing.assert_array_equal(index_ramp(1), [0.0])


class TestPrimitives:
    """Test shift, rotate, asymmetry, oscillation, conditioning."""

    def test_shift(self):
        """Test x - o."""
        np.testing.assert_array_equal(shift([3.0, 1.0], np.array([1.0, 1.0])), [2.0, 0.0])

    def test_rotate(self):
        """Test M x."""
        m = np.array([[0.0, -1.0], [1.0, 0.0]])
        np.testing.assert_array_almost_equal(rotate([1.0, 0.0], m), [0.0, 1.0])

    def test_asymmetry_positive(self):
        """Test power warp of positive coordinates."""
        y = asymmetry(np.array([4.0, 4.0, 4.0]), 0.5)
        np.testing.assert_array_almost_equal(y, [4.0, 8.0, 16.0])

    def test_asymmetry_non_positive_unchanged(self):
        """Test negative and zero coordinates pass through."""
        x = np.array([-4.0, 0.0, -1.0])
        np.testing.assert_array_equal(asymmetry(x, 0.5), x)

    def test_asymmetry_does_not_mutate(self):
        """Test the input array is left untouched."""
        x = np.array([1.0, 2.0, 3.0])
        asymmetry(x, 0.5)
        np.testing.assert_array_equal(x, [1.0, 2.0, 3.0])

    def test_asymmetry_single_coordinate(self):
        """Test n = 1 leaves the coordinate unchanged."""
        np.testing.assert_array_equal(asymmetry(np.array([9.0]), 0.5), [9.0])

    def test_oscillation_zero(self):
        """Test zero maps to zero."""
        y = oscillation(np.array([0.0, 0.0]))
        np.testing.assert_array_equal(y, [0.0, 0.0])
        assert np.all(np.isfinite(y))

    def test_oscillation_unit(self):
        """Test |x| = 1 is a fixed point (log 1 = 0)."""
        np.testing.assert_array_almost_equal(oscillation(np.array([1.0, -1.0])), [1.0, -1.0])

    def test_oscillation_preserves_sign(self):
        """Test sign and rough magnitude are kept."""
        x = np.array([-3.0, 0.5, 7.0, 0.0])
        y = oscillation(x)
        np.testing.assert_array_equal(np.sign(y), np.sign(x))
        nz = x != 0.0
        assert np.all(np.abs(np.log(np.abs(y[nz])) - np.log(np.abs(x[nz]))) <= 0.098 + 1e-12)

    def test_oscillation_asymmetric_constants(self):
        """Test positive and negative sides use different frequencies."""
        y = oscillation(np.array([2.0, -2.0]))
        assert abs(y[0]) != pytest.approx(abs(y[1]))

    def test_conditioning(self):
        """Test diagonal scaling alpha^(r_i / 2)."""
        y = conditioning(np.ones(3), 100.0)
        np.testing.assert_array_almost_equal(y, [1.0, 10.0 ** 0.5, 10.0])


class TestShiftRotate:
    """Test the shift-rotate orchestrator."""

    def test_order(self):
        """Test shift, then rotate, then scale."""
        m = np.array([[0.0, -1.0], [1.0, 0.0]])
        y = shift_rotate(np.array([1.0, 2.0]), np.array([1.0, 0.0]), m, scale=2.0)
        np.testing.assert_array_almost_equal(y, [-4.0, 0.0])

    def test_disabled_rotation_matches_identity(self):
        """Test skipping rotation equals multiplying by the identity bit for bit."""
        rng = np.random.default_rng(3)
        x = rng.uniform(-100, 100, 10)
        o = rng.uniform(-80, 80, 10)
        skipped = shift_rotate(x, o, None)
        identity = shift_rotate(x, o, np.eye(10))
        flagged = shift_rotate(x, o, rng.normal(size=(10, 10)), apply_rotate=False)
        assert np.array_equal(skipped, identity)
        assert np.array_equal(skipped, flagged)

    def test_disabled_shift(self):
        """Test apply_shift=False ignores the origin."""
        y = shift_rotate(np.array([1.0, 2.0]), np.array([5.0, 5.0]), apply_shift=False)
        np.testing.assert_array_equal(y, [1.0, 2.0])

    def test_fresh_output(self):
        """Test the result never aliases the input."""
        x = np.array([1.0, 2.0])
        y = shift_rotate(x)
        y[0] = 99.0
        assert x[0] == 1.0


class TestFrame:
    """Test the sub-function frame."""

    def test_bare_frame(self):
        """Test a bare frame neither shifts nor rotates."""
        x = np.array([1.0, -2.0])
        assert not BARE.rotated
        np.testing.assert_array_equal(BARE.shift_rotate(x, 0.5), [0.5, -1.0])
        assert BARE.rotate(x, 1) is x

    def test_shift_unshift(self):
        """Test unshift inverts shift."""
        frame = Frame(origin=np.array([3.0, -1.0]))
        x = np.array([0.5, 0.25])
        np.testing.assert_array_almost_equal(frame.unshift(frame.shift(x)), x)

    def test_second_matrix(self):
        """Test rotate(which=1) uses the second matrix."""
        m1 = np.eye(2)
        m2 = np.array([[0.0, 1.0], [1.0, 0.0]])
        frame = Frame(origin=np.zeros(2), rotations=(m1, m2))
        assert frame.rotated
        np.testing.assert_array_equal(frame.rotate(np.array([1.0, 2.0]), 1), [2.0, 1.0])
        np.testing.assert_array_equal(frame.shift_rotate(np.array([1.0, 2.0])), [1.0, 2.0])

    def test_unrotated_frame_only_shifts(self):
        """Test a shifted frame without matrices skips every rotation step."""
        frame = Frame(origin=np.array([1.0, 2.0]))
        x = np.array([3.0, 5.0])
        assert not frame.rotated
        np.testing.assert_array_equal(frame.shift_rotate(x, 2.0), [4.0, 6.0])
        np.testing.assert_array_equal(frame.rotate(x, 1), x)
