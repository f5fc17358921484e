"""
CEC Problem Instances

A problem instance is built once from (suite, problem id, dimension):
1. Validate the id and dimension against the suite catalogue
2. Load the resource tables from a provider and check them against the
   layout the definition needs
3. Bind the evaluator (plain shape, hybrid, or composition) into a closure

After construction the instance holds no mutable state, so fitness() may be
called concurrently.
"""

import logging
from functools import partial
from typing import Callable, List, Optional, Tuple

import numpy as np

from .composition import Member, evaluate_composition
from .hybrid import HybridLayout, evaluate_hybrid
from .resources import GeneratedResourceProvider, ProblemResources, ResourceProvider
from .suites import CEC2013, CEC2014, Component, Definition, Strategy, Suite, get_suite
from .transforms import Frame

logger = logging.getLogger(__name__)

Evaluator = Callable[[np.ndarray], float]


def _frame(suite: Suite, slot: int, component: Component,
           resources: ProblemResources, shuffle_row: Optional[int] = None) -> Frame:
    """Frame of the sub-function in `slot`."""
    rotations = ()
    if component.rotate:
        rotations = tuple(
            resources.rotations[slot + j] for j in range(suite.rotations_per_slot)
        )
    shuffle = None
    if shuffle_row is not None:
        shuffle = resources.shuffles[shuffle_row]
    return Frame(origin=resources.shifts[slot], rotations=rotations, shuffle=shuffle)


def _bind_component(suite: Suite, slot: int, component: Component, dim: int,
                    resources: ProblemResources, shuffle_row: Optional[int]) -> Evaluator:
    frame = _frame(suite, slot, component, resources, shuffle_row)
    if component.is_hybrid:
        layout = HybridLayout.build(component.shape, dim)
        return partial(evaluate_hybrid, frame=frame, layout=layout, table=suite.shapes)
    shape = suite.shapes[component.shape]
    return partial(shape, frame=frame)


def bind_evaluator(suite: Suite, definition: Definition, dim: int,
                   resources: ProblemResources) -> Evaluator:
    """
    Build the bias-free evaluator of a definition.

    Hybrid slots take shuffle rows in order of appearance.
    """
    evaluators = []
    shuffle_row = 0
    for slot, component in enumerate(definition.components):
        row = None
        if component.is_hybrid:
            row = shuffle_row
            shuffle_row += 1
        evaluators.append(_bind_component(suite, slot, component, dim, resources, row))

    if definition.strategy != Strategy.COMPOSITION:
        return evaluators[0]

    members = [
        Member(
            origin=resources.shifts[slot],
            evaluate=evaluate,
            delta=component.delta,
            lam=component.lam,
            bias=component.bias,
        )
        for slot, (component, evaluate) in enumerate(zip(definition.components, evaluators))
    ]
    return partial(evaluate_composition, members=members)


class CECProblem:
    """
    One CEC benchmark function.

    Args:
        suite: Suite catalogue (or its name)
        prob_id: Problem id (1-based)
        dim: Dimension
        provider: Resource provider, defaults to GeneratedResourceProvider()

    Raises:
        ValueError: Invalid id or dimension, or resources that do not fit
    """

    def __init__(self, suite, prob_id: int = 1, dim: int = 2,
                 provider: Optional[ResourceProvider] = None):
        if isinstance(suite, str):
            suite = get_suite(suite)
        self.suite = suite
        self.prob_id = prob_id
        self.dim = dim
        self.definition = suite.validate(prob_id, dim)

        provider = provider if provider is not None else GeneratedResourceProvider()
        layout = suite.layout(prob_id)
        resources = provider.load(suite.name, prob_id, dim, layout)
        resources.check(layout, dim)
        self.resources = resources

        self._evaluate = bind_evaluator(suite, self.definition, dim, resources)
        logger.debug(
            "built %s problem %d dim=%d strategy=%s",
            suite.name, prob_id, dim, self.definition.strategy.value,
        )

    @property
    def bias(self) -> float:
        return self.definition.bias

    def fitness(self, x) -> float:
        """Objective value at x (length dim, not checked)."""
        return float(self._evaluate(np.asarray(x, dtype=np.float64)) + self.bias)

    def evaluate(self, X) -> np.ndarray:
        """Evaluate every row of a (m, dim) batch."""
        X = np.atleast_2d(np.asarray(X, dtype=np.float64))
        return np.array([self.fitness(row) for row in X])

    def bounds(self) -> Tuple[np.ndarray, np.ndarray]:
        """Box bounds (lower, upper), each of length dim."""
        return (np.full(self.dim, self.suite.lower), np.full(self.dim, self.suite.upper))

    @property
    def optimum(self) -> Tuple[np.ndarray, float]:
        """(x*, f*): the first shift row and the problem bias."""
        return self.resources.shifts[0].copy(), self.bias

    @property
    def origin_shift(self) -> np.ndarray:
        """Shift table rows used by this problem."""
        return self.resources.shifts[:len(self.definition.components)].copy()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(prob_id={self.prob_id}, dim={self.dim})"


class CEC2013Problem(CECProblem):
    """CEC 2013 problem (28 functions, dimensions 2, 5, 10, 20, ..., 100)."""

    def __init__(self, prob_id: int = 1, dim: int = 2,
                 provider: Optional[ResourceProvider] = None):
        super().__init__(CEC2013, prob_id, dim, provider)


class CEC2014Problem(CECProblem):
    """CEC 2014 problem (30 functions, dimensions 2, 10, 20, 30, 50, 100)."""

    def __init__(self, prob_id: int = 1, dim: int = 2,
                 provider: Optional[ResourceProvider] = None):
        super().__init__(CEC2014, prob_id, dim, provider)


def cec2013(prob_id: int = 1, dim: int = 2,
            provider: Optional[ResourceProvider] = None) -> CEC2013Problem:
    return CEC2013Problem(prob_id, dim, provider)


def cec2014(prob_id: int = 1, dim: int = 2,
            provider: Optional[ResourceProvider] = None) -> CEC2014Problem:
    return CEC2014Problem(prob_id, dim, provider)


_CLASSES = {
    CEC2013.name: CEC2013Problem,
    CEC2014.name: CEC2014Problem,
}


def make_problem(suite: str, prob_id: int, dim: int,
                 provider: Optional[ResourceProvider] = None) -> CECProblem:
    """Build a problem of the named suite ("cec2013" or "cec2014")."""
    cls = _CLASSES[get_suite(suite).name]
    return cls(prob_id, dim, provider)


def get_suite_problems(suite: str, dim: int,
                       provider: Optional[ResourceProvider] = None) -> List[CECProblem]:
    """
    Every problem of a suite defined at dimension dim.

    Problems the dimension excludes (CEC 2014 hybrids at n = 2) are skipped.
    """
    catalogue = get_suite(suite)
    if dim not in catalogue.dimensions:
        raise ValueError(
            f"{catalogue.name}: dimension must be one of {list(catalogue.dimensions)}, got {dim}"
        )
    problems = []
    for prob_id in catalogue.problem_ids:
        if dim < catalogue.definitions[prob_id].min_dim:
            continue
        problems.append(make_problem(catalogue.name, prob_id, dim, provider))
    return problems
