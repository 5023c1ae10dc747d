"""
Serialization helpers for Chebyshev expansions.

Lets expansions produced by an external fitting routine be stored as
JSON or YAML and loaded back for code generation.

The reference evaluator is a callable and is NOT serialized. Loaded
expansions fall back to evaluating the Clenshaw recurrence in double
precision.
"""
from __future__ import annotations

import json
from typing import Any, Dict

import yaml

from chebgen.expansion import ChebyshevExpansion


def expansion_to_dict(e: ChebyshevExpansion) -> Dict[str, Any]:
    return {
        "description": e.description,
        "x_min": float(e.x_min),
        "x_max": float(e.x_max),
        "coeffs": [float(c) for c in e.coeffs],
    }


def expansion_from_dict(d: Dict[str, Any]) -> ChebyshevExpansion:
    if not isinstance(d, dict):
        raise TypeError(f"Expected a mapping for an expansion, got {type(d).__name__}")
    return ChebyshevExpansion(
        coeffs=tuple(float(c) for c in d["coeffs"]),
        x_min=float(d["x_min"]),
        x_max=float(d["x_max"]),
        description=d.get("description", ""),
    )


def expansion_to_json(e: ChebyshevExpansion) -> str:
    return json.dumps(expansion_to_dict(e), sort_keys=True)


def expansion_from_json(s: str) -> ChebyshevExpansion:
    d = json.loads(s)
    return expansion_from_dict(d)


def expansion_to_yaml(e: ChebyshevExpansion) -> str:
    return yaml.safe_dump(expansion_to_dict(e))


def expansion_from_yaml(s: str) -> ChebyshevExpansion:
    d = yaml.safe_load(s)
    return expansion_from_dict(d)
