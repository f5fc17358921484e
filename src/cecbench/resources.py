"""
Problem Resources

Every problem instance needs per-sub-function data:
- shifts:    (k, n) optimum locations, row i for slot i
- rotations: (m, n, n) row-major rotation matrices
- shuffles:  (h, n) 0-based coordinate permutations (hybrids only)

Data comes from a provider implementing load(suite, prob_id, dim, layout).
Two providers ship with the package:
- GeneratedResourceProvider: deterministic seeded data (random shifts,
  Haar-distributed rotations from scipy, random permutations)
- StaticResourceProvider: caller-supplied tables, for example the official
  competition data loaded by the caller
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Optional, Protocol, Tuple

import numpy as np
from scipy.stats import special_ortho_group

from .canonical_json import derive_seed

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TableLayout:
    """Number of rows a problem needs from each table."""
    shifts: int
    rotations: int
    shuffles: int = 0


@dataclass(frozen=True, eq=False)
class ProblemResources:
    """
    Typed resource tables for one (suite, problem, dimension).

    Rows beyond what a layout requires are allowed and ignored.
    """
    shifts: np.ndarray
    rotations: np.ndarray
    shuffles: Optional[np.ndarray] = None

    @classmethod
    def from_flat(
        cls,
        dim: int,
        shift_table,
        rotation_table,
        shuffle_table=None,
        one_based_shuffle: bool = False,
    ) -> "ProblemResources":
        """
        Build tables from flattened row-major sequences.

        Args:
            dim: Problem dimension n
            shift_table: k * n floats
            rotation_table: m * n * n floats
            shuffle_table: h * n integers, or None
            one_based_shuffle: Subtract 1 from every shuffle entry

        Raises:
            ValueError: If a table length is not a multiple of its stride
        """
        shifts = _reshape(shift_table, (dim,), "shift")
        rotations = _reshape(rotation_table, (dim, dim), "rotation")
        shuffles = None
        if shuffle_table is not None:
            shuffles = _reshape(shuffle_table, (dim,), "shuffle").astype(np.int64)
            if one_based_shuffle:
                shuffles = shuffles - 1
        return cls(shifts=shifts, rotations=rotations, shuffles=shuffles)

    def check(self, layout: TableLayout, dim: int) -> None:
        """
        Validate the tables against a layout.

        Raises:
            ValueError: On a wrong shape, too few rows, or a shuffle row
                that is not a permutation of 0..n-1
        """
        _check_rows(self.shifts, layout.shifts, (dim,), "shift")
        _check_rows(self.rotations, layout.rotations, (dim, dim), "rotation")
        if layout.shuffles == 0:
            return
        if self.shuffles is None:
            raise ValueError(f"Problem needs {layout.shuffles} shuffle rows, got none")
        _check_rows(self.shuffles, layout.shuffles, (dim,), "shuffle")
        if not np.issubdtype(self.shuffles.dtype, np.integer):
            raise ValueError(f"shuffle table must hold integers, got {self.shuffles.dtype}")
        identity = np.arange(dim)
        for i in range(layout.shuffles):
            if not np.array_equal(np.sort(self.shuffles[i]), identity):
                raise ValueError(f"Shuffle row {i} is not a permutation of 0..{dim - 1}")


def _reshape(table, row_shape: Tuple[int, ...], name: str) -> np.ndarray:
    flat = np.asarray(table, dtype=np.float64).ravel()
    stride = int(np.prod(row_shape))
    if flat.size == 0 or flat.size % stride != 0:
        raise ValueError(
            f"{name} table has {flat.size} entries, not a positive multiple of {stride}"
        )
    return flat.reshape((-1,) + row_shape)


def _check_rows(table: np.ndarray, rows: int, row_shape: Tuple[int, ...], name: str) -> None:
    table = np.asarray(table)
    if table.ndim != len(row_shape) + 1 or table.shape[1:] != row_shape:
        raise ValueError(
            f"{name} table has shape {table.shape}, expected (rows, {', '.join(map(str, row_shape))})"
        )
    if table.shape[0] < rows:
        raise ValueError(f"{name} table has {table.shape[0]} rows, problem needs {rows}")


class ResourceProvider(Protocol):
    """Supplies the tables of one problem instance."""

    def load(self, suite: str, prob_id: int, dim: int, layout: TableLayout) -> ProblemResources:
        ...


@dataclass
class GeneratorConfig:
    """Configuration of GeneratedResourceProvider."""
    # Base seed mixed into every per-problem seed
    seed: int = 0
    # Shifts are drawn uniformly from [-shift_bound, shift_bound]
    shift_bound: float = 80.0


class GeneratedResourceProvider:
    """
    Deterministic synthetic resources.

    The generator seed of each (suite, prob_id, dim) is derived from the
    canonical JSON of those values plus the configured base seed, so the
    same problem always gets the same tables regardless of call order.
    """

    def __init__(self, config: Optional[GeneratorConfig] = None):
        self.config = config or GeneratorConfig()

    def seed_for(self, suite: str, prob_id: int, dim: int) -> int:
        return derive_seed({
            'suite': suite,
            'prob_id': prob_id,
            'dim': dim,
            'seed': self.config.seed,
        })

    def load(self, suite: str, prob_id: int, dim: int, layout: TableLayout) -> ProblemResources:
        seed = self.seed_for(suite, prob_id, dim)
        rng = np.random.default_rng(seed)
        bound = self.config.shift_bound

        shifts = rng.uniform(-bound, bound, size=(layout.shifts, dim))
        rotations = np.empty((layout.rotations, dim, dim))
        for i in range(layout.rotations):
            rotations[i] = special_ortho_group.rvs(dim, random_state=rng)
        shuffles = None
        if layout.shuffles:
            shuffles = np.stack([rng.permutation(dim) for _ in range(layout.shuffles)])

        logger.debug(
            "generated resources suite=%s id=%d dim=%d seed=%d layout=%s",
            suite, prob_id, dim, seed, layout,
        )
        return ProblemResources(shifts=shifts, rotations=rotations, shuffles=shuffles)


@dataclass
class StaticResourceProvider:
    """Serves caller-supplied tables keyed by (suite, prob_id, dim)."""
    tables: Dict[Tuple[str, int, int], ProblemResources] = field(default_factory=dict)

    def add(self, suite: str, prob_id: int, dim: int, resources: ProblemResources) -> None:
        self.tables[(suite, prob_id, dim)] = resources

    def load(self, suite: str, prob_id: int, dim: int, layout: TableLayout) -> ProblemResources:
        try:
            return self.tables[(suite, prob_id, dim)]
        except KeyError:
            raise ValueError(
                f"No resources registered for {suite} problem {prob_id} at dimension {dim}"
            ) from None
