"""
cecbench - CEC 2013 / CEC 2014 Single-Objective Benchmark Functions

Every benchmark maps an n-vector to a scalar through geometric transforms
(shift, rotation, asymmetry, oscillation, conditioning) and a base shape,
or blends several shapes:
- Plain functions: one shape in one frame
- Hybrid functions: one shape per contiguous group of permuted coordinates
- Composition functions: distance-weighted blend of shapes or hybrids

Key Features:
- Thread-safe problem instances (no shared scratch buffers)
- Pluggable resource providers (generated or caller-supplied tables)
- Validation of ids, dimensions and tables at construction
"""

from .transforms import (
    Frame,
    asymmetry,
    conditioning,
    index_ramp,
    oscillation,
    rotate,
    shift,
    shift_rotate,
)
from .shapes import ShapeKind
from .hybrid import (
    HybridLayout,
    HybridRecipe,
    evaluate_hybrid,
    group_sizes,
)
from .composition import (
    Member,
    composition_weights,
    evaluate_composition,
)
from .resources import (
    GeneratedResourceProvider,
    GeneratorConfig,
    ProblemResources,
    ResourceProvider,
    StaticResourceProvider,
    TableLayout,
)
from .suites import (
    CEC2013,
    CEC2014,
    SUITES,
    Component,
    Definition,
    Strategy,
    Suite,
    get_suite,
)
from .problem import (
    CECProblem,
    CEC2013Problem,
    CEC2014Problem,
    cec2013,
    cec2014,
    get_suite_problems,
    make_problem,
)

__version__ = "0.1.0"

__all__ = [
    # Transforms
    "Frame",
    "asymmetry",
    "conditioning",
    "index_ramp",
    "oscillation",
    "rotate",
    "shift",
    "shift_rotate",
    # Shapes
    "ShapeKind",
    # Hybrid
    "HybridLayout",
    "HybridRecipe",
    "evaluate_hybrid",
    "group_sizes",
    # Composition
    "Member",
    "composition_weights",
    "evaluate_composition",
    # Resources
    "GeneratedResourceProvider",
    "GeneratorConfig",
    "ProblemResources",
    "ResourceProvider",
    "StaticResourceProvider",
    "TableLayout",
    # Suites
    "CEC2013",
    "CEC2014",
    "SUITES",
    "Component",
    "Definition",
    "Strategy",
    "Suite",
    "get_suite",
    # Problems
    "CECProblem",
    "CEC2013Problem",
    "CEC2014Problem",
    "cec2013",
    "cec2014",
    "get_suite_problems",
    "make_problem",
]
