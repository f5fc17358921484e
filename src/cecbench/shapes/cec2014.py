"""
CEC 2014 Shape Pipelines

In this suite every base shape is kernel(sr(x, rate)): shift, one rotation,
then the shape's range rescale. The frame carries at most one matrix.
"""

from typing import Callable, Dict

import numpy as np

from . import ShapeFn, ShapeKind
from . import kernels
from ..transforms import Frame


def _plain(kernel: Callable[[np.ndarray], float], rate: float = 1.0) -> ShapeFn:
    def shape(x: np.ndarray, frame: Frame) -> float:
        return kernel(frame.shift_rotate(x, rate))
    shape.__name__ = kernel.__name__
    shape.__doc__ = f"{kernel.__name__}(sr(x, {rate:g}))"
    return shape


SHAPES: Dict[ShapeKind, ShapeFn] = {
    ShapeKind.SPHERE: _plain(kernels.sphere),
    ShapeKind.ELLIPSOIDAL: _plain(kernels.ellipsoidal),
    ShapeKind.BENT_CIGAR: _plain(kernels.bent_cigar),
    ShapeKind.DISCUS: _plain(kernels.discus),
    ShapeKind.ROSENBROCK: _plain(kernels.rosenbrock, 2.048 / 100.0),
    ShapeKind.ACKLEY: _plain(kernels.ackley),
    ShapeKind.WEIERSTRASS: _plain(kernels.weierstrass, 0.5 / 100.0),
    ShapeKind.GRIEWANK: _plain(kernels.griewank, 600.0 / 100.0),
    ShapeKind.RASTRIGIN: _plain(kernels.rastrigin, 5.12 / 100.0),
    ShapeKind.SCHWEFEL: _plain(kernels.schwefel, 1000.0 / 100.0),
    ShapeKind.KATSUURA: _plain(kernels.katsuura, 5.0 / 100.0),
    ShapeKind.HAPPYCAT: _plain(kernels.happycat, 5.0 / 100.0),
    ShapeKind.HGBAT: _plain(kernels.hgbat, 5.0 / 100.0),
    ShapeKind.GRIEWANK_ROSENBROCK: _plain(kernels.griewank_rosenbrock, 5.0 / 100.0),
    ShapeKind.EXPANDED_SCAFFER_F6: _plain(kernels.expanded_scaffer_f6),
}
