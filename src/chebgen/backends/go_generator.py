"""
Go code generator for Chebyshev expansions.

Renders a `package main` program with the loop-form evaluator over a
[]float32 coefficient slice.
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


def generate_go_code(expansion: ChebyshevExpansion) -> str:
    """Generate a standalone Go program evaluating the expansion."""
    reference = full_precision(expansion.evaluate(expansion.midpoint))

    lines: List[str] = [
        "package main",
        "",
        "import (",
        '\t"fmt"',
        ")",
        "",
        *comment_block(eval_function_comment_lines(), COMMENT),
        "func chebyshevEval(coeffs []float32, x, xMin, xMax float32) float32 {",
        "\txRel2 := -2.0 + 4.0*(x-xMin)/(xMax-xMin)",
        "\tvar (",
        "\t\td, dd, temp float32",
        "\t)",
        "\tfor i := len(coeffs) - 1; i > 0; i-- {",
        "\t\ttemp = d",
        "\t\td = xRel2*d - dd + coeffs[i]",
        "\t\tdd = temp",
        "\t}",
        "\treturn 0.5*xRel2*d - dd + 0.5*coeffs[0]",
        "}",
        "",
        *comment_block(coefficients_comment_lines(expansion), COMMENT),
        "var coeffs = []float32{",
        *(f"\t{full_precision(c)}," for c in expansion.coeffs),
        "}",
        "",
        "const (",
        f"\txMin float32 = {full_precision(expansion.x_min)}",
        f"\txMax float32 = {full_precision(expansion.x_max)}",
        ")",
        "",
        "func main() {",
        *comment_block(example_eval_comment_lines(), COMMENT, indent="\t"),
        "\tvar xMid float32 = 0.5 * (xMin + xMax)",
        "\tvar valueAtXMid float32 = chebyshevEval(coeffs, xMid, xMin, xMax)",
        '\tfmt.Printf("Approximated value at x=%f is %f (single precision)\\n", xMid, valueAtXMid)',
        f'\tfmt.Printf("Should be {reference} (double precision)\\n")',
        "}",
    ]

    return "\n".join(lines)
