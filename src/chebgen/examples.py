"""
Example expansions for demos and tests.

Coefficients are written by hand, so each builder also supplies its own
reference function instead of a fitted one.
"""
from chebgen.expansion import ChebyshevExpansion


def build_quadratic_expansion() -> ChebyshevExpansion:
    """
    Three-term expansion on [-1, 1] with reference f(x) = 1 - 2x^2.

    The generated evaluator prints 2.0 at the midpoint while the
    reference prints 1.0: the coefficients are not a fit of the
    reference, the two are independent formulas.
    """
    return ChebyshevExpansion(
        coeffs=(2.0, 0.0, -1.0),
        x_min=-1.0,
        x_max=1.0,
        description="quadratic",
        reference=lambda x: 1.0 - 2.0 * x * x,
    )


def build_constant_expansion(value: float = 1.0, x_min: float = 0.0, x_max: float = 1.0) -> ChebyshevExpansion:
    """Single-term expansion of a constant function (c_0 is half-weighted)."""
    return ChebyshevExpansion(
        coeffs=(2.0 * value,),
        x_min=x_min,
        x_max=x_max,
        description=f"{value}",
        reference=lambda x: value,
    )
