"""
Chebyshev Evaluator Code Generator (chebgen)

Turns a precomputed Chebyshev expansion into standalone source text that
evaluates it, in one of five target languages.

ARCHITECTURAL GUARANTEE:
------------------------
This package contains ZERO knowledge of:
    - How coefficients are fitted
    - Where generated code is written
    - How generated code is compiled or run

An expansion goes in, text comes out.
All backends consume the expansion unchanged.
"""

__version__ = "0.1.0"
