"""
Hybrid Functions

A hybrid function shifts and rotates the point once, permutes the
coordinates, cuts the permuted vector into contiguous groups and sums one
base shape per group. Each group's shape sees a bare frame (no shift, no
rotation) but keeps its own range rescale.
"""

import logging
import math
from dataclasses import dataclass
from typing import Dict, List, Sequence, Tuple

import numpy as np

from .shapes import ShapeFn, ShapeKind
from .transforms import BARE, Frame

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HybridRecipe:
    """
    Dimension-independent description of a hybrid function.

    Attributes:
        shapes: Base shape per group, in group order
        proportions: Fraction of the dimension given to each group
    """
    shapes: Tuple[ShapeKind, ...]
    proportions: Tuple[float, ...]

    def __post_init__(self):
        if len(self.shapes) != len(self.proportions):
            raise ValueError(
                f"HybridRecipe needs one proportion per shape, got "
                f"{len(self.shapes)} shapes and {len(self.proportions)} proportions"
            )
        if not self.shapes:
            raise ValueError("HybridRecipe needs at least one shape")


def group_sizes(proportions: Sequence[float], dim: int) -> List[int]:
    """
    Concrete group sizes for one dimension.

    Every group but the last gets floor(p_i * dim); the last group takes the
    remainder, so the sizes always sum to dim. The product is rounded to 9
    decimals before flooring so 0.3 * 10 counts as 3.

    Raises:
        ValueError: If any group ends up empty or negative
    """
    sizes = [int(math.floor(round(p * dim, 9))) for p in proportions[:-1]]
    sizes.append(dim - sum(sizes))
    if any(s <= 0 for s in sizes):
        raise ValueError(
            f"Hybrid proportions {tuple(proportions)} give empty groups "
            f"{sizes} for dimension {dim}"
        )
    return sizes


@dataclass(frozen=True)
class HybridLayout:
    """HybridRecipe resolved for one dimension."""
    shapes: Tuple[ShapeKind, ...]
    sizes: Tuple[int, ...]

    @classmethod
    def build(cls, recipe: HybridRecipe, dim: int) -> "HybridLayout":
        sizes = group_sizes(recipe.proportions, dim)
        logger.debug("hybrid layout dim=%d sizes=%s", dim, sizes)
        return cls(shapes=tuple(recipe.shapes), sizes=tuple(sizes))

    @property
    def dim(self) -> int:
        return sum(self.sizes)

    def slices(self) -> List[slice]:
        """Contiguous index ranges of the groups, in order."""
        out = []
        start = 0
        for size in self.sizes:
            out.append(slice(start, start + size))
            start += size
        return out


def evaluate_hybrid(
    x: np.ndarray,
    frame: Frame,
    layout: HybridLayout,
    table: Dict[ShapeKind, ShapeFn],
) -> float:
    """
    Evaluate a hybrid function (without the problem bias).

    Args:
        x: Point of length layout.dim
        frame: Shift, rotation and shuffle of the hybrid
        layout: Group shapes and sizes
        table: Suite pipeline table mapping each shape to fn(x, frame)

    Returns:
        Sum of the per-group shape values
    """
    z = frame.shift_rotate(x)
    if frame.shuffle is not None:
        z = z[frame.shuffle]
    total = 0.0
    for kind, part in zip(layout.shapes, layout.slices()):
        total += table[kind](z[part], BARE)
    return total
