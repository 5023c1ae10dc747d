"""
Comment Builder

Produces the descriptive comment blocks shared by all backends.
Content is identical in every target language; only the comment token
and indentation differ. This keeps the documentation of generated code
consistent across targets.

Block shapes are fixed:
    coefficients block: 3 lines
    evaluator block:    2 lines
    example block:      1 line
"""

import re
import warnings
from typing import List

from .expansion import ChebyshevExpansion
from .literals import full_precision


# Whitespace runs containing any character str.splitlines() breaks on
_LINE_BREAK_RE = re.compile(r"\s*[\n\r\v\f\x1c-\x1e\x85\u2028\u2029]\s*")


def sanitize_description(description: str) -> str:
    """
    Make a description safe to embed in a line comment.

    Every target uses line comments (// or #), so only a line break can
    end the comment early. Breaks are collapsed into single spaces and a
    UserWarning is emitted. Anything else is kept verbatim.
    """
    if not _LINE_BREAK_RE.search(description):
        return description
    warnings.warn(
        f"Description contains line breaks, joining into one line: {description!r}",
        UserWarning,
    )
    return _LINE_BREAK_RE.sub(" ", description).strip()


def coefficients_comment_lines(expansion: ChebyshevExpansion) -> List[str]:
    return [
        f"{expansion.num_coeffs} term expansion coefficients for",
        f"f(x)={sanitize_description(expansion.description)}",
        f"x_min={full_precision(expansion.x_min)}, x_max={full_precision(expansion.x_max)}",
    ]


def eval_function_comment_lines() -> List[str]:
    return [
        "Evaluates a Chebyshev expansion at a given",
        "x value using the Clenshaw algorithm.",
    ]


def example_eval_comment_lines() -> List[str]:
    return [
        "Evaluate the approximation at the interval midpoint",
    ]


def comment_block(lines: List[str], token: str, indent: str = "") -> List[str]:
    """Prefix each line with indent and the comment token."""
    return [f"{indent}{token} {line}" for line in lines]
