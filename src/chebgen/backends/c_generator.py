"""
C code generator for Chebyshev expansions.

Renders a complete C program: the loop-form Clenshaw evaluator, the
coefficient table, the domain bounds and a main() that prints the
approximation at the interval midpoint next to the reference value.
"""

from typing import List

from chebgen.expansion import ChebyshevExpansion
from chebgen.literals import full_precision
from chebgen.comments import (
    coefficients_comment_lines,
    eval_function_comment_lines,
    example_eval_comment_lines,
    comment_block,
)


COMMENT = "//"


def generate_c_code(expansion: ChebyshevExpansion) -> str:
    """
    Generate a standalone C program evaluating the expansion.

    Args:
        expansion: Expansion to render (validated by the caller)

    Returns:
        C source text
    """
    reference = full_precision(expansion.evaluate(expansion.midpoint))

    lines: List[str] = [
        "#include <stdio.h>",
        "",
        *comment_block(eval_function_comment_lines(), COMMENT),
        "float chebyshevEval(const float* coeffs, int num_coeffs, float x, float x_min, float x_max) {",
        "    float x_rel_2 = -2.0f + 4.0f * (x - x_min) / (x_max - x_min);",
        "    float d = 0.0f;",
        "    float dd = 0.0f;",
        "    float temp = 0.0f;",
        "    for (int i = num_coeffs - 1; i > 0; i--) {",
        "        temp = d;",
        "        d = x_rel_2 * d - dd + coeffs[i];",
        "        dd = temp;",
        "    }",
        "    return 0.5f * x_rel_2 * d - dd + 0.5f * coeffs[0];",
        "}",
        "",
        *comment_block(coefficients_comment_lines(expansion), COMMENT),
        f"#define NUM_COEFFS {expansion.num_coeffs}",
        "float coeffs[NUM_COEFFS] = {",
        *(f"    {full_precision(c)}," for c in expansion.coeffs),
        "};",
        f"float x_min = {full_precision(expansion.x_min)};",
        f"float x_max = {full_precision(expansion.x_max)};",
        "",
        "int main() {",
        *comment_block(example_eval_comment_lines(), COMMENT, indent="    "),
        "    float x_mid = 0.5f * (x_min + x_max);",
        "    float value_at_x_mid = chebyshevEval(coeffs, NUM_COEFFS, x_mid, x_min, x_max);",
        '    printf("Approximated value at x=%f is %f (single precision)\\n", x_mid, value_at_x_mid);',
        f'    printf("Should be {reference} (double precision)\\n");',
        "    return 0;",
        "}",
    ]

    return "\n".join(lines)
