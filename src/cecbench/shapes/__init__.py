"""
Base Shapes

ShapeKind names every base landscape either suite can use. Each suite
module (cec2013, cec2014) maps a ShapeKind to a pipeline
fn(x, frame) -> float that applies the suite's transform order before the
closed-form kernel in kernels.py.
"""

from enum import Enum
from typing import Callable

import numpy as np

from ..transforms import Frame


class ShapeKind(Enum):
    """Closed set of base shapes."""
    SPHERE = "sphere"
    ELLIPSOIDAL = "ellipsoidal"
    BENT_CIGAR = "bent_cigar"
    DISCUS = "discus"
    DIFFERENT_POWERS = "different_powers"
    ROSENBROCK = "rosenbrock"
    SCHAFFER_F7 = "schaffer_f7"
    ACKLEY = "ackley"
    WEIERSTRASS = "weierstrass"
    GRIEWANK = "griewank"
    RASTRIGIN = "rastrigin"
    STEP_RASTRIGIN = "step_rastrigin"
    SCHWEFEL = "schwefel"
    KATSUURA = "katsuura"
    BI_RASTRIGIN = "bi_rastrigin"
    GRIEWANK_ROSENBROCK = "griewank_rosenbrock"
    EXPANDED_SCAFFER_F6 = "expanded_scaffer_f6"
    HAPPYCAT = "happycat"
    HGBAT = "hgbat"


ShapeFn = Callable[[np.ndarray, Frame], float]


__all__ = ["ShapeKind", "ShapeFn"]
