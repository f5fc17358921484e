"""
CEC 2013 Shape Pipelines

Each pipeline takes the raw point x and the sub-function's frame, which in
this suite carries two consecutive rotation matrices (M1, M2), or none for
an unrotated sub-function. The range rescale ("rate") multiplies the shifted
coordinates before the first rotation.
"""

from typing import Dict

import numpy as np

from . import ShapeFn, ShapeKind
from . import kernels
from ..transforms import Frame, asymmetry, conditioning, oscillation


def sphere(x: np.ndarray, frame: Frame) -> float:
    return kernels.sphere(frame.shift_rotate(x))


def ellipsoidal(x: np.ndarray, frame: Frame) -> float:
    return kernels.ellipsoidal(oscillation(frame.shift_rotate(x)))


def bent_cigar(x: np.ndarray, frame: Frame) -> float:
    z = asymmetry(frame.shift_rotate(x), 0.5)
    return kernels.bent_cigar(frame.rotate(z, 1))


def discus(x: np.ndarray, frame: Frame) -> float:
    return kernels.discus(oscillation(frame.shift_rotate(x)))


def different_powers(x: np.ndarray, frame: Frame) -> float:
    return kernels.different_powers(frame.shift_rotate(x))


def rosenbrock(x: np.ndarray, frame: Frame) -> float:
    return kernels.rosenbrock(frame.shift_rotate(x, 2.048 / 100.0))


def _asy_rotate_condition(x: np.ndarray, frame: Frame, scale: float = 1.0) -> np.ndarray:
    """Lambda^10 M2 T_asy^0.5 (sr(x))"""
    z = asymmetry(frame.shift_rotate(x, scale), 0.5)
    return conditioning(frame.rotate(z, 1), 10.0)


def schaffer_f7(x: np.ndarray, frame: Frame) -> float:
    return kernels.schaffer_f7(_asy_rotate_condition(x, frame))


def ackley(x: np.ndarray, frame: Frame) -> float:
    return kernels.ackley(_asy_rotate_condition(x, frame))


def weierstrass(x: np.ndarray, frame: Frame) -> float:
    return kernels.weierstrass(_asy_rotate_condition(x, frame, 0.5 / 100.0))


def griewank(x: np.ndarray, frame: Frame) -> float:
    return kernels.griewank(conditioning(frame.shift_rotate(x, 600.0 / 100.0), 100.0))


def rastrigin(x: np.ndarray, frame: Frame) -> float:
    """M1 Lambda^10 M2 T_asy^0.2 (T_osz (sr(x)))"""
    z = oscillation(frame.shift_rotate(x, 5.12 / 100.0))
    z = frame.rotate(asymmetry(z, 0.2), 1)
    z = frame.rotate(conditioning(z, 10.0), 0)
    return kernels.rastrigin(z)


def step_rastrigin(x: np.ndarray, frame: Frame) -> float:
    """
    Rastrigin on a stepped input: shifted coordinates farther than 0.5 from
    the optimum snap to the nearest multiple of 0.5.
    """
    d = frame.shift(x)
    far = np.abs(d) > 0.5
    d[far] = np.floor(2.0 * d[far] + 0.5) / 2.0
    return rastrigin(frame.unshift(d), frame)


def schwefel(x: np.ndarray, frame: Frame) -> float:
    return kernels.schwefel(conditioning(frame.shift_rotate(x, 1000.0 / 100.0), 10.0))


def katsuura(x: np.ndarray, frame: Frame) -> float:
    z = conditioning(frame.shift_rotate(x, 5.0 / 100.0), 100.0)
    return kernels.katsuura(frame.rotate(z, 1))


def bi_rastrigin(x: np.ndarray, frame: Frame) -> float:
    """
    Lunacek bi-Rastrigin. The shifted point is mirrored by the sign of the
    origin so the mu0 bowl always lies on the origin's side.
    """
    d = frame.shift(x) * (10.0 / 100.0)
    if frame.origin is not None:
        d = np.where(frame.origin < 0.0, -d, d)
    z = 2.0 * d
    xhat = z + kernels.LUNACEK_MU0
    z = frame.rotate(z, 0)
    z = frame.rotate(conditioning(z, 100.0), 1)
    return kernels.lunacek(xhat, z)


def griewank_rosenbrock(x: np.ndarray, frame: Frame) -> float:
    return kernels.griewank_rosenbrock(frame.shift_rotate(x, 5.0 / 100.0))


def expanded_scaffer_f6(x: np.ndarray, frame: Frame) -> float:
    z = asymmetry(frame.shift_rotate(x), 0.5)
    return kernels.expanded_scaffer_f6(frame.rotate(z, 1))


SHAPES: Dict[ShapeKind, ShapeFn] = {
    ShapeKind.SPHERE: sphere,
    ShapeKind.ELLIPSOIDAL: ellipsoidal,
    ShapeKind.BENT_CIGAR: bent_cigar,
    ShapeKind.DISCUS: discus,
    ShapeKind.DIFFERENT_POWERS: different_powers,
    ShapeKind.ROSENBROCK: rosenbrock,
    ShapeKind.SCHAFFER_F7: schaffer_f7,
    ShapeKind.ACKLEY: ackley,
    ShapeKind.WEIERSTRASS: weierstrass,
    ShapeKind.GRIEWANK: griewank,
    ShapeKind.RASTRIGIN: rastrigin,
    ShapeKind.STEP_RASTRIGIN: step_rastrigin,
    ShapeKind.SCHWEFEL: schwefel,
    ShapeKind.KATSUURA: katsuura,
    ShapeKind.BI_RASTRIGIN: bi_rastrigin,
    ShapeKind.GRIEWANK_ROSENBROCK: griewank_rosenbrock,
    ShapeKind.EXPANDED_SCAFFER_F6: expanded_scaffer_f6,
}
