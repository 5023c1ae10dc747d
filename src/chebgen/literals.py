"""
Numeric literal formatting for generated source.

Three rules exist:
    - full_precision: shortest text that round-trips the double
      (C, Go, Python, Rust backends and all comments)
    - fixed_single: fixed fractional digits plus an "f" suffix
      (GLSL/HLSL backend)
    - python_float: full_precision, with inf/nan spelled as float(...)
      (reference value in the Python backend)

All produce text that parses as a floating value in their target,
e.g. 2.0 rather than 2, 1e-07 rather than 1E-7.
"""

import math


def full_precision(value: float) -> str:
    return repr(float(value))


def fixed_single(value: float, digits: int) -> str:
    """Format value with exactly `digits` fractional digits and an f suffix."""
    return f"{float(value):.{digits}f}f"


def python_float(value: float) -> str:
    """Like full_precision, but inf and nan become float('inf') / float('nan')."""
    text = full_precision(value)
    if math.isfinite(value):
        return text
    return f"float('{text}')"
