"""
Python code generator for Chebyshev expansions.

Renders a plain script: the loop-form evaluator walking the coefficient
list backwards, the data, and two print() calls.
"""

from typing import List

from chebgen.expansion import ChebyshevExpansion
from chebgen.literals import python_float
from chebgen.comments import (
    coefficients_comment_lines,
    eval_function_comment_lines,
    example_eval_comment_lines,
    comment_block,
)


COMMENT = "#"


def generate_python_code(expansion: ChebyshevExpansion) -> str:
    """Generate a standalone Python script evaluating the expansion."""
    reference = python_float(expansion.evaluate(expansion.midpoint))

    lines: List[str] = [
        *comment_block(eval_function_comment_lines(), COMMENT),
        "def chebyshev_eval(coeffs, x, x_min, x_max):",
        "    x_rel_2 = -2 + 4 * (x - x_min) / float(x_max - x_min)",
        "    d = 0",
        "    dd = 0",
        "    temp = 0",
        "    for ci in coeffs[-1:0:-1]:",
        "        temp = d",
        "        d = x_rel_2 * d - dd + ci",
        "        dd = temp",
        "    return 0.5 * x_rel_2 * d - dd + 0.5 * coeffs[0]",
        "",
        "",
        *comment_block(coefficients_comment_lines(expansion), COMMENT),
        "coeffs = [",
        *(f"    {python_float(c)}," for c in expansion.coeffs),
        "]",
        f"x_min = {python_float(expansion.x_min)}",
        f"x_max = {python_float(expansion.x_max)}",
        "",
        *comment_block(example_eval_comment_lines(), COMMENT),
        "x_mid = 0.5 * (x_min + x_max)",
        "value_at_x_mid = chebyshev_eval(coeffs, x_mid, x_min, x_max)",
        'print("Value at", x_mid, "is", value_at_x_mid)',
        f'print("Should be", {reference}, "(double precision)")',
    ]

    return "\n".join(lines)
