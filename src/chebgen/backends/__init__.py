"""Backends rendering a Chebyshev expansion as source text (C, Go, GLSL/HLSL, Python, Rust)."""

from .c_generator import generate_c_code
from .go_generator import generate_go_code
from .glsl_generator import SHADER_FRACTION_DIGITS, generate_glsl_hlsl_code
from .python_generator import generate_python_code
from .rust_generator import generate_rust_code

__all__ = [
    "SHADER_FRACTION_DIGITS",
    "generate_c_code",
    "generate_go_code",
    "generate_glsl_hlsl_code",
    "generate_python_code",
    "generate_rust_code",
]
