"""
Rust code generator for Chebyshev expansions.

Renders a binary crate main.rs with the loop-form evaluator over a
const [f32; n] array.
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


def generate_rust_code(expansion: ChebyshevExpansion) -> str:
    """Generate a standalone Rust program evaluating the expansion."""
    reference = full_precision(expansion.evaluate(expansion.midpoint))

    lines: List[str] = [
        *comment_block(eval_function_comment_lines(), COMMENT),
        "fn chebyshev_eval(coeffs: &[f32], x: f32, x_min: f32, x_max: f32) -> f32 {",
        "    let x_rel_2 = -2.0 + 4.0 * (x - x_min) / (x_max - x_min);",
        "    let mut d = 0.0;",
        "    let mut dd = 0.0;",
        "    let mut temp;",
        "    for cj in coeffs.iter().skip(1).rev() {",
        "        temp = d;",
        "        d = x_rel_2 * d - dd + cj;",
        "        dd = temp;",
        "    }",
        "    0.5 * x_rel_2 * d - dd + 0.5 * coeffs[0]",
        "}",
        "",
        *comment_block(coefficients_comment_lines(expansion), COMMENT),
        f"const COEFFS: [f32; {expansion.num_coeffs}] = [",
        *(f"    {full_precision(c)}," for c in expansion.coeffs),
        "];",
        f"const X_MIN: f32 = {full_precision(expansion.x_min)}_f32;",
        f"const X_MAX: f32 = {full_precision(expansion.x_max)}_f32;",
        "",
        "fn main() {",
        *comment_block(example_eval_comment_lines(), COMMENT, indent="    "),
        "    let x_mid = 0.5 * (X_MIN + X_MAX);",
        "    let value_at_x_mid = chebyshev_eval(&COEFFS, x_mid, X_MIN, X_MAX);",
        '    println!("Approximated value at x={} is {} (single precision)", x_mid, value_at_x_mid);',
        f'    println!("Should be {reference} (double precision)");',
        "}",
    ]

    return "\n".join(lines)
