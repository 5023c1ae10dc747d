"""
Chebyshev Expansion Model

Defines the single input of the code generator: a fitted Chebyshev
expansion over a bounded interval.

ARCHITECTURAL RULE:
    Expansions are produced outside this package (by a fitting routine)
    and are only ever read here.
    The object is frozen so a generator cannot mutate it by accident.
"""

import math
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Tuple

from .recurrence import clenshaw_eval


class ExpansionError(ValueError):
    """Raised when an expansion cannot be turned into valid source code."""
    pass


@dataclass(frozen=True)
class ChebyshevExpansion:
    """
    A Chebyshev expansion of some function over [x_min, x_max].

    Properties:
        coeffs:
            Expansion coefficients. Index 0 is the half-weighted
            constant term. Stored as a tuple.

        x_min, x_max:
            Domain bounds (x_min < x_max).

        description:
            Free text naming the approximated function, e.g. "exp(x)".
            Embedded in generated comments.

        reference:
            Optional higher-precision evaluator of the approximation.
            If None, evaluate() runs the Clenshaw recurrence in double
            precision.

    IMPORTANT:
        reference is only used to compute the comparison literal printed
        by generated example code. Generated evaluators never call it.
    """

    coeffs: Tuple[float, ...]
    x_min: float
    x_max: float
    description: str = ""
    reference: Optional[Callable[[float], float]] = field(default=None, compare=False, repr=False)

    def __post_init__(self):
        object.__setattr__(self, "coeffs", tuple(self.coeffs))

    @property
    def num_coeffs(self) -> int:
        return len(self.coeffs)

    @property
    def midpoint(self) -> float:
        return 0.5 * (self.x_min + self.x_max)

    def evaluate(self, x: float) -> float:
        """Reference value of the approximation at x."""
        if self.reference is not None:
            return self.reference(x)
        return clenshaw_eval(self.coeffs, x, self.x_min, self.x_max)


# Largest finite IEEE 754 single-precision value
FLOAT32_MAX = 3.4028234663852886e38


def _is_single_precision(value) -> bool:
    """True if value is a finite number within float32 range."""
    try:
        return math.isfinite(value) and abs(value) <= FLOAT32_MAX
    except TypeError:
        return False


def validate_expansion(expansion: ChebyshevExpansion) -> None:
    """
    Check the invariants every backend relies on.

    Args:
        expansion: Expansion about to be rendered

    Raises:
        ExpansionError: If there are no coefficients, the domain is empty
            or reversed, or a coefficient/bound is not a finite number
            within single-precision range
    """
    if expansion.num_coeffs == 0:
        raise ExpansionError("Expansion has no coefficients")

    bad: List[int] = [i for i, c in enumerate(expansion.coeffs) if not _is_single_precision(c)]
    if bad:
        raise ExpansionError(f"Coefficients not representable as finite float32 at indices: {bad}")

    for name in ("x_min", "x_max"):
        if not _is_single_precision(getattr(expansion, name)):
            raise ExpansionError(f"{name} must be a finite float32 number, got {getattr(expansion, name)!r}")

    if not expansion.x_min < expansion.x_max:
        raise ExpansionError(
            f"Empty or reversed domain: x_min={expansion.x_min}, x_max={expansion.x_max}"
        )
