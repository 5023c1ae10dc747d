"""
Clenshaw Recurrence for Chebyshev Expansions

The one algorithm every backend renders. It is described here once, in
two equivalent forms:

    Loop form (C, Go, Python, Rust backends):

        xRel2 = -2 + 4*(x - xMin) / (xMax - xMin)
        d = dd = 0
        for i = n-1 down to 1:
            temp = d
            d    = xRel2*d - dd + c_i
            dd   = temp
        result = 0.5*xRel2*d - dd + 0.5*c_0

    Unrolled form (GLSL/HLSL backend):

        One accumulator D[i] per step, i = n+1 down to 1, with the
        terms that are provably zero dropped.

xRel2 maps the domain onto [-2, 2], i.e. it is twice the usual [-1, 1]
argument, which is what the doubled-argument Clenshaw step expects.

The numeric functions below evaluate both forms in double precision.
They serve as the default reference evaluator and let tests check that
the two forms agree.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Sequence, Tuple


def remap(x: float, x_min: float, x_max: float) -> float:
    """Map x in [x_min, x_max] onto [-2, 2]."""
    return -2.0 + 4.0 * (x - x_min) / (x_max - x_min)


def scale_offset(x_min: float, x_max: float) -> Tuple[float, float]:
    """
    Return (a, b) such that a*x + b == remap(x, x_min, x_max).

    Shaders run per pixel, so the division is folded into constants.
    """
    k = 1.0 / (x_max - x_min)
    a = 4.0 * k
    b = -4.0 * x_min * k - 2.0
    return a, b


def clenshaw_eval(coeffs: Sequence[float], x: float, x_min: float, x_max: float) -> float:
    """Evaluate the expansion at x with the loop form of the recurrence."""
    x_rel_2 = remap(x, x_min, x_max)
    d = 0.0
    dd = 0.0
    for i in range(len(coeffs) - 1, 0, -1):
        temp = d
        d = x_rel_2 * d - dd + coeffs[i]
        dd = temp
    return 0.5 * x_rel_2 * d - dd + 0.5 * coeffs[0]


class StepKind(Enum):
    """Shape of a single unrolled accumulator assignment."""
    ZERO = "zero"          # D[i] = 0                           (i >= n)
    LEADING = "leading"    # D[i] = c_i                         (i == n-1)
    SECOND = "second"      # D[i] = xRel2*D[i+1] + c_i          (i == n-2)
    GENERAL = "general"    # D[i] = xRel2*D[i+1] + c_i - D[i+2]


@dataclass(frozen=True)
class UnrolledStep:
    """
    One straight-line assignment of the unrolled recurrence.

    Properties:
        index: Accumulator index i (also the coefficient index it folds in)
        kind: Which terms of the general step survive
    """

    index: int
    kind: StepKind


def unrolled_steps(n: int) -> List[UnrolledStep]:
    """
    Unroll the recurrence for an expansion with n coefficients.

    Steps are ordered from i = n+1 down to i = 1. D[n+1] and D[n] are the
    zero boundary accumulators; the first two real steps drop the terms
    that would subtract them.

    For n = 1 only the two zero steps are produced and the final result
    reduces to 0.5*c_0.
    """
    steps = []
    for i in range(n + 1, 0, -1):
        if i >= n:
            kind = StepKind.ZERO
        elif i == n - 1:
            kind = StepKind.LEADING
        elif i == n - 2:
            kind = StepKind.SECOND
        else:
            kind = StepKind.GENERAL
        steps.append(UnrolledStep(index=i, kind=kind))
    return steps


def evaluate_unrolled(coeffs: Sequence[float], x: float, x_min: float, x_max: float) -> float:
    """Evaluate the expansion at x by walking the unrolled steps."""
    a, b = scale_offset(x_min, x_max)
    x_rel_2 = a * x + b

    acc: Dict[int, float] = {}
    for step in unrolled_steps(len(coeffs)):
        i = step.index
        if step.kind == StepKind.ZERO:
            acc[i] = 0.0
        elif step.kind == StepKind.LEADING:
            acc[i] = coeffs[i]
        elif step.kind == StepKind.SECOND:
            acc[i] = x_rel_2 * acc[i + 1] + coeffs[i]
        else:
            acc[i] = x_rel_2 * acc[i + 1] + coeffs[i] - acc[i + 2]

    return 0.5 * x_rel_2 * acc[1] - acc[2] + 0.5 * coeffs[0]
