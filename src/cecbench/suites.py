"""
CEC Suite Catalogues

Closed mapping from problem id to Definition for the CEC 2013 (28
problems) and CEC 2014 (30 problems) single-objective suites:

CEC 2013:
F1-F5:   unimodal (sphere ... different powers)
F6-F20:  basic multimodal
F21-F28: composition functions

CEC 2014:
F1-F3:   unimodal
F4-F16:  simple multimodal
F17-F22: hybrid functions
F23-F30: composition functions (F29, F30 compose hybrids)

A Definition lists its sub-functions in slot order; slot i reads row i of
the shift table (and of the shuffle table for hybrid slots).
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Callable, Dict, Sequence, Tuple, Union

from .hybrid import HybridRecipe
from .resources import TableLayout
from .shapes import ShapeFn, ShapeKind
from .shapes import cec2013 as shapes2013
from .shapes import cec2014 as shapes2014


class Strategy(Enum):
    """How a problem combines its sub-functions."""
    PLAIN = "plain"
    HYBRID = "hybrid"
    COMPOSITION = "composition"


@dataclass(frozen=True)
class Component:
    """
    One sub-function.

    Attributes:
        shape: Base shape, or a hybrid recipe (CEC 2014 F29/F30 members)
        rotate: Whether the sub-function uses its rotation matrices
        delta: Composition weight radius
        lam: Composition output scale
        bias: Composition member bias
    """
    shape: Union[ShapeKind, HybridRecipe]
    rotate: bool = True
    delta: float = 0.0
    lam: float = 1.0
    bias: float = 0.0

    @property
    def is_hybrid(self) -> bool:
        return isinstance(self.shape, HybridRecipe)


@dataclass(frozen=True)
class Definition:
    """Catalogue entry of one problem id."""
    strategy: Strategy
    components: Tuple[Component, ...]
    bias: float = 0.0
    min_dim: int = 1


@dataclass(frozen=True, eq=False)
class Suite:
    """
    One benchmark suite.

    Attributes:
        name: Suite key used by providers and factories
        dimensions: Supported dimensions
        definitions: Problem id -> Definition
        shapes: ShapeKind -> pipeline for this suite
        rotations_per_slot: Consecutive matrices a rotated slot consumes
        lower, upper: Box bounds, identical in every coordinate
    """
    name: str
    dimensions: Tuple[int, ...]
    definitions: Dict[int, Definition]
    shapes: Dict[ShapeKind, ShapeFn]
    rotations_per_slot: int = 1
    lower: float = -100.0
    upper: float = 100.0

    @property
    def problem_ids(self) -> Tuple[int, ...]:
        return tuple(sorted(self.definitions))

    def validate(self, prob_id: int, dim: int) -> Definition:
        """
        Return the Definition of prob_id after checking dim.

        Raises:
            ValueError: Unknown id, unsupported dimension, or a dimension
                the problem excludes
        """
        if prob_id not in self.definitions:
            raise ValueError(
                f"{self.name}: problem id must be in 1..{len(self.definitions)}, got {prob_id}"
            )
        if dim not in self.dimensions:
            raise ValueError(
                f"{self.name}: dimension must be one of {list(self.dimensions)}, got {dim}"
            )
        definition = self.definitions[prob_id]
        if dim < definition.min_dim:
            raise ValueError(
                f"{self.name}: problem {prob_id} is not defined for dimension {dim} "
                f"(needs at least {definition.min_dim})"
            )
        return definition

    def layout(self, prob_id: int) -> TableLayout:
        """Table rows problem prob_id reads."""
        components = self.definitions[prob_id].components
        k = len(components)
        return TableLayout(
            shifts=k,
            rotations=k + self.rotations_per_slot - 1,
            shuffles=sum(1 for c in components if c.is_hybrid),
        )


def _plain(shape: ShapeKind, rotate: bool = True) -> Definition:
    return Definition(Strategy.PLAIN, (Component(shape, rotate),))


def _hybrid(recipe: HybridRecipe) -> Definition:
    return Definition(Strategy.HYBRID, (Component(recipe),), min_dim=10)


def _composition(
    shapes: Sequence[Union[ShapeKind, HybridRecipe]],
    deltas: Sequence[float],
    lams: Sequence[float],
    rotate: bool = True,
    unrotated: Sequence[int] = (),
    min_dim: int = 1,
) -> Definition:
    """Members get biases 0, 100, 200, ... in slot order."""
    components = tuple(
        Component(
            shape=shape,
            rotate=rotate and i not in unrotated,
            delta=delta,
            lam=lam,
            bias=100.0 * i,
        )
        for i, (shape, delta, lam) in enumerate(zip(shapes, deltas, lams))
    )
    return Definition(Strategy.COMPOSITION, components, min_dim=min_dim)


def _with_bias(definitions: Dict[int, Definition], bias: Callable[[int], float]) -> Dict[int, Definition]:
    return {i: replace(d, bias=bias(i)) for i, d in definitions.items()}


S = ShapeKind

# CEC 2013

_DEFINITIONS_2013 = {
    1: _plain(S.SPHERE, rotate=False),
    2: _plain(S.ELLIPSOIDAL),
    3: _plain(S.BENT_CIGAR),
    4: _plain(S.DISCUS),
    5: _plain(S.DIFFERENT_POWERS, rotate=False),
    6: _plain(S.ROSENBROCK),
    7: _plain(S.SCHAFFER_F7),
    8: _plain(S.ACKLEY),
    9: _plain(S.WEIERSTRASS),
    10: _plain(S.GRIEWANK),
    11: _plain(S.RASTRIGIN, rotate=False),
    12: _plain(S.RASTRIGIN),
    13: _plain(S.STEP_RASTRIGIN),
    14: _plain(S.SCHWEFEL, rotate=False),
    15: _plain(S.SCHWEFEL),
    16: _plain(S.KATSUURA),
    17: _plain(S.BI_RASTRIGIN, rotate=False),
    18: _plain(S.BI_RASTRIGIN),
    19: _plain(S.GRIEWANK_ROSENBROCK),
    20: _plain(S.EXPANDED_SCAFFER_F6),
    21: _composition(
        [S.ROSENBROCK, S.DIFFERENT_POWERS, S.BENT_CIGAR, S.DISCUS, S.SPHERE],
        [10, 20, 30, 40, 50],
        [1.0, 1e-6, 1e-26, 1e-6, 0.1],
        unrotated=(4,),
    ),
    22: _composition([S.SCHWEFEL] * 3, [20, 20, 20], [1.0, 1.0, 1.0], rotate=False),
    23: _composition([S.SCHWEFEL] * 3, [20, 20, 20], [1.0, 1.0, 1.0]),
    24: _composition(
        [S.SCHWEFEL, S.RASTRIGIN, S.WEIERSTRASS],
        [20, 20, 20],
        [0.25, 1.0, 2.5],
    ),
    25: _composition(
        [S.SCHWEFEL, S.RASTRIGIN, S.WEIERSTRASS],
        [10, 30, 50],
        [0.25, 1.0, 2.5],
    ),
    26: _composition(
        [S.SCHWEFEL, S.RASTRIGIN, S.ELLIPSOIDAL, S.WEIERSTRASS, S.GRIEWANK],
        [10, 10, 10, 10, 10],
        [0.25, 1.0, 1e-7, 2.5, 10.0],
    ),
    27: _composition(
        [S.GRIEWANK, S.RASTRIGIN, S.SCHWEFEL, S.WEIERSTRASS, S.SPHERE],
        [10, 10, 10, 20, 20],
        [100.0, 10.0, 2.5, 25.0, 0.1],
        unrotated=(4,),
    ),
    28: _composition(
        [S.GRIEWANK_ROSENBROCK, S.SCHAFFER_F7, S.SCHWEFEL, S.EXPANDED_SCAFFER_F6, S.SPHERE],
        [10, 20, 30, 40, 50],
        [2.5, 2.5e-3, 2.5, 5e-4, 0.1],
        unrotated=(4,),
    ),
}


def _bias_2013(prob_id: int) -> float:
    if prob_id <= 14:
        return -1400.0 + 100.0 * (prob_id - 1)
    return 100.0 * (prob_id - 14)


CEC2013 = Suite(
    name="cec2013",
    dimensions=(2, 5, 10, 20, 30, 40, 50, 60, 70, 80, 90, 100),
    definitions=_with_bias(_DEFINITIONS_2013, _bias_2013),
    shapes=shapes2013.SHAPES,
    rotations_per_slot=2,
)

# CEC 2014

_HF17 = HybridRecipe((S.SCHWEFEL, S.RASTRIGIN, S.ELLIPSOIDAL), (0.3, 0.3, 0.4))
_HF18 = HybridRecipe((S.BENT_CIGAR, S.HGBAT, S.RASTRIGIN), (0.3, 0.3, 0.4))
_HF19 = HybridRecipe(
    (S.GRIEWANK, S.WEIERSTRASS, S.ROSENBROCK, S.EXPANDED_SCAFFER_F6),
    (0.2, 0.2, 0.3, 0.3),
)
_HF20 = HybridRecipe(
    (S.HGBAT, S.DISCUS, S.GRIEWANK_ROSENBROCK, S.RASTRIGIN),
    (0.2, 0.2, 0.3, 0.3),
)
_HF21 = HybridRecipe(
    (S.EXPANDED_SCAFFER_F6, S.HGBAT, S.ROSENBROCK, S.SCHWEFEL, S.ELLIPSOIDAL),
    (0.1, 0.2, 0.2, 0.2, 0.3),
)
_HF22 = HybridRecipe(
    (S.KATSUURA, S.HAPPYCAT, S.GRIEWANK_ROSENBROCK, S.SCHWEFEL, S.ACKLEY),
    (0.1, 0.2, 0.2, 0.2, 0.3),
)

_DEFINITIONS_2014 = {
    1: _plain(S.ELLIPSOIDAL),
    2: _plain(S.BENT_CIGAR),
    3: _plain(S.DISCUS),
    4: _plain(S.ROSENBROCK),
    5: _plain(S.ACKLEY),
    6: _plain(S.WEIERSTRASS),
    7: _plain(S.GRIEWANK),
    8: _plain(S.RASTRIGIN, rotate=False),
    9: _plain(S.RASTRIGIN),
    10: _plain(S.SCHWEFEL, rotate=False),
    11: _plain(S.SCHWEFEL),
    12: _plain(S.KATSUURA),
    13: _plain(S.HAPPYCAT),
    14: _plain(S.HGBAT),
    15: _plain(S.GRIEWANK_ROSENBROCK),
    16: _plain(S.EXPANDED_SCAFFER_F6),
    17: _hybrid(_HF17),
    18: _hybrid(_HF18),
    19: _hybrid(_HF19),
    20: _hybrid(_HF20),
    21: _hybrid(_HF21),
    22: _hybrid(_HF22),
    23: _composition(
        [S.ROSENBROCK, S.ELLIPSOIDAL, S.BENT_CIGAR, S.DISCUS, S.ELLIPSOIDAL],
        [10, 20, 30, 40, 50],
        [1.0, 1e-6, 1e-26, 1e-6, 1e-6],
        unrotated=(4,),
    ),
    24: _composition(
        [S.SCHWEFEL, S.RASTRIGIN, S.HGBAT],
        [20, 20, 20],
        [1.0, 1.0, 1.0],
        unrotated=(0,),
    ),
    25: _composition(
        [S.SCHWEFEL, S.RASTRIGIN, S.ELLIPSOIDAL],
        [10, 30, 50],
        [0.25, 1.0, 1e-7],
    ),
    26: _composition(
        [S.SCHWEFEL, S.HAPPYCAT, S.ELLIPSOIDAL, S.WEIERSTRASS, S.GRIEWANK],
        [10, 10, 10, 10, 10],
        [0.25, 1.0, 1e-7, 2.5, 10.0],
    ),
    27: _composition(
        [S.HGBAT, S.RASTRIGIN, S.SCHWEFEL, S.WEIERSTRASS, S.ELLIPSOIDAL],
        [10, 10, 10, 20, 20],
        [10.0, 10.0, 2.5, 25.0, 1e-6],
    ),
    28: _composition(
        [S.GRIEWANK_ROSENBROCK, S.HAPPYCAT, S.SCHWEFEL, S.EXPANDED_SCAFFER_F6, S.ELLIPSOIDAL],
        [10, 20, 30, 40, 50],
        [2.5, 10.0, 2.5, 5e-4, 1e-6],
    ),
    29: _composition([_HF17, _HF18, _HF19], [10, 30, 50], [1.0, 1.0, 1.0], min_dim=10),
    30: _composition([_HF20, _HF21, _HF22], [10, 30, 50], [1.0, 1.0, 1.0], min_dim=10),
}

CEC2014 = Suite(
    name="cec2014",
    dimensions=(2, 10, 20, 30, 50, 100),
    definitions=_with_bias(_DEFINITIONS_2014, lambda prob_id: 100.0 * prob_id),
    shapes=shapes2014.SHAPES,
    rotations_per_slot=1,
)

SUITES: Dict[str, Suite] = {
    CEC2013.name: CEC2013,
    CEC2014.name: CEC2014,
}


def get_suite(name: str) -> Suite:
    """Look up a suite by name ("cec2013" or "cec2014")."""
    try:
        return SUITES[name.lower()]
    except KeyError:
        raise ValueError(f"Unknown suite '{name}', available: {sorted(SUITES)}") from None
