"""
Geometric Transforms

Primitive coordinate transforms shared by every CEC landscape:
- shift:        x - o (relocates the optimum)
- rotate:       M x (de-aligns the landscape from the axes)
- asymmetry:    T_asy^beta, power warp of positive coordinates
- oscillation:  T_osz, sign-preserving log-power warp
- conditioning: Lambda^alpha, diagonal ill-conditioning

plus the shift-rotate orchestrator used before every base shape.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np


def index_ramp(n: int) -> np.ndarray:
    """
    Return r_i = i / (n - 1) for i = 0..n-1.

    A single coordinate has r = 0.
    """
    if n <= 1:
        return np.zeros(n)
    return np.arange(n, dtype=np.float64) / (n - 1)


def shift(x: np.ndarray, origin: np.ndarray) -> np.ndarray:
    """y = x - origin"""
    return np.asarray(x, dtype=np.float64) - origin


def rotate(x: np.ndarray, matrix: np.ndarray) -> np.ndarray:
    """y = M x with M stored row-major as an (n, n) array."""
    return matrix @ np.asarray(x, dtype=np.float64)


def asymmetry(x: np.ndarray, beta: float) -> np.ndarray:
    """
    Asymmetric power warp T_asy^beta.

    x_i > 0 maps to x_i ** (1 + beta * r_i * sqrt(x_i)); every other
    coordinate is left unchanged. The exponent depends on the coordinate
    index, so the order of x matters.
    """
    y = np.array(x, dtype=np.float64)
    pos = y > 0.0
    if np.any(pos):
        ramp = index_ramp(y.shape[0])
        y[pos] = y[pos] ** (1.0 + beta * ramp[pos] * np.sqrt(y[pos]))
    return y


def oscillation(x: np.ndarray) -> np.ndarray:
    """
    Oscillation warp T_osz.

    For x_i != 0 with h = log|x_i|:
        y_i = sign(x_i) * exp(h + 0.049 * (sin(c1 h) + sin(c2 h)))
    where (c1, c2) = (10, 7.9) for positive and (5.5, 3.1) for negative
    coordinates. Zero maps to zero without touching log.
    """
    x = np.asarray(x, dtype=np.float64)
    y = np.zeros_like(x)
    nz = x != 0.0
    if np.any(nz):
        v = x[nz]
        h = np.log(np.abs(v))
        pos = v > 0.0
        c1 = np.where(pos, 10.0, 5.5)
        c2 = np.where(pos, 7.9, 3.1)
        y[nz] = np.sign(v) * np.exp(h + 0.049 * (np.sin(c1 * h) + np.sin(c2 * h)))
    return y


def conditioning(x: np.ndarray, alpha: float) -> np.ndarray:
    """Diagonal scaling Lambda^alpha: x_i * alpha ** (r_i / 2)."""
    x = np.asarray(x, dtype=np.float64)
    return x * np.power(alpha, 0.5 * index_ramp(x.shape[0]))


def shift_rotate(
    x: np.ndarray,
    origin: Optional[np.ndarray] = None,
    matrix: Optional[np.ndarray] = None,
    scale: float = 1.0,
    apply_shift: bool = True,
    apply_rotate: bool = True,
) -> np.ndarray:
    """
    Shift, then rotate, then scale.

    A disabled (or missing) shift or rotation is skipped entirely, which
    yields the same vector as an identity transform. The result is always a
    fresh array of the input's length.

    Args:
        x: Input vector
        origin: Shift vector (skipped when None or apply_shift is False)
        matrix: (n, n) rotation (skipped when None or apply_rotate is False)
        scale: Multiplier applied to every coordinate last
        apply_shift: Shift flag
        apply_rotate: Rotation flag

    Returns:
        The transformed vector
    """
    y = np.array(x, dtype=np.float64)
    if apply_shift and origin is not None:
        y = shift(y, origin)
    if apply_rotate and matrix is not None:
        y = rotate(y, matrix)
    return y * scale


@dataclass(frozen=True, eq=False)
class Frame:
    """
    Coordinate frame of one sub-function.

    Attributes:
        origin: Shift vector, or None for an unshifted frame
        rotations: Rotation matrices available to the shape pipeline.
            Empty for an unrotated frame, in which case every rotation
            step is the identity.
        shuffle: 0-based permutation used by hybrid functions
    """
    origin: Optional[np.ndarray] = None
    rotations: Tuple[np.ndarray, ...] = ()
    shuffle: Optional[np.ndarray] = None

    @property
    def rotated(self) -> bool:
        return len(self.rotations) > 0

    def shift(self, x: np.ndarray) -> np.ndarray:
        """Return x - origin (a copy of x for an unshifted frame)."""
        if self.origin is None:
            return np.array(x, dtype=np.float64)
        return shift(x, self.origin)

    def unshift(self, d: np.ndarray) -> np.ndarray:
        """Inverse of shift()."""
        if self.origin is None:
            return np.array(d, dtype=np.float64)
        return d + self.origin

    def rotate(self, x: np.ndarray, which: int = 0) -> np.ndarray:
        """Apply rotation matrix `which`, or nothing in an unrotated frame."""
        if not self.rotated:
            return x
        return rotate(x, self.rotations[which])

    def shift_rotate(self, x: np.ndarray, scale: float = 1.0) -> np.ndarray:
        """Shift by the origin, rotate by the first matrix, then scale."""
        matrix = self.rotations[0] if self.rotated else None
        return shift_rotate(x, self.origin, matrix, scale)


BARE = Frame()
