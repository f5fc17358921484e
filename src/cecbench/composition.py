"""
Composition Functions

A composition function blends N member functions, each with its own
optimum o_i, by distance-based weights:

    w_i = exp(-||x - o_i||^2 / (2 n delta_i^2)) / ||x - o_i||
    F(x) = sum_i w_i / sum_j w_j * (lam_i * g_i(x) + bias_i)

Members closer to x dominate; at o_i the weight vector is one-hot on i.
"""

import logging
from dataclasses import dataclass
from typing import Callable, List, Sequence

import numpy as np

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class Member:
    """
    One member of a composition.

    Attributes:
        origin: Optimum of the member, used for the distance weight
        evaluate: Bound member function g_i(x) (shape or hybrid, no bias)
        delta: Weight radius (> 0)
        lam: Output scale
        bias: Member bias added after scaling
    """
    origin: np.ndarray
    evaluate: Callable[[np.ndarray], float]
    delta: float
    lam: float = 1.0
    bias: float = 0.0


def composition_weights(
    x: np.ndarray,
    origins: Sequence[np.ndarray],
    deltas: Sequence[float],
) -> np.ndarray:
    """
    Normalised composition weights.

    Zero distance to a member gives that member the whole weight; on a tie
    between coincident origins the lowest index wins. If every raw weight
    underflows to zero the weights are uniform.

    Returns:
        Array of N weights summing to 1
    """
    x = np.asarray(x, dtype=np.float64)
    n = x.shape[0]
    count = len(origins)
    w = np.zeros(count)

    for i, (o, delta) in enumerate(zip(origins, deltas)):
        d2 = float(np.sum((x - o) ** 2))
        if d2 == 0.0:
            w[:] = 0.0
            w[i] = 1.0
            return w
        w[i] = np.exp(-d2 / (2.0 * n * delta * delta)) / np.sqrt(d2)

    total = float(np.sum(w))
    if total == 0.0:
        logger.debug("composition weights underflowed, using uniform weights")
        return np.full(count, 1.0 / count)
    return w / total


def evaluate_composition(x: np.ndarray, members: List[Member]) -> float:
    """
    Evaluate a composition function (without the problem bias).

    Members with zero weight are not evaluated.
    """
    weights = composition_weights(
        x,
        [m.origin for m in members],
        [m.delta for m in members],
    )
    total = 0.0
    for w, m in zip(weights, members):
        if w == 0.0:
            continue
        total += w * (m.lam * m.evaluate(x) + m.bias)
    return float(total)
