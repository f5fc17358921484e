"""
Canonical JSON Serialization

Deterministic JSON with sorted keys, used to derive reproducible seeds for
generated problem data and to write CLI reports. numpy scalars and arrays
serialize as plain numbers and lists.
"""

import hashlib
import json
from typing import Any

import numpy as np


def _default(obj: Any) -> Any:
    if isinstance(obj, np.ndarray):
        return obj.tolist()
    if isinstance(obj, np.generic):
        return obj.item()
    return str(obj)


def canonical_dumps(obj: Any, indent: int = None) -> str:
    """
    Canonical JSON serialization with sorted keys.

    Args:
        obj: Object to serialize
        indent: Indentation level (None for compact)

    Returns:
        Canonical JSON string
    """
    return json.dumps(
        obj,
        sort_keys=True,
        separators=(',', ':') if indent is None else None,
        indent=indent,
        default=_default
    )


def canonical_hash(obj: Any) -> str:
    """Hex SHA-256 digest of canonical_dumps(obj)."""
    return hashlib.sha256(canonical_dumps(obj).encode()).hexdigest()


def derive_seed(obj: Any) -> int:
    """64-bit integer seed taken from the leading bytes of canonical_hash(obj)."""
    return int(canonical_hash(obj)[:16], 16)
