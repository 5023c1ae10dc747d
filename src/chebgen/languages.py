"""
Target languages supported by the code generator.

The set is closed: every member has exactly one backend in
chebgen.codegen, and importing that module fails if one is missing.
"""

from enum import Enum
from typing import Dict, Tuple


class TargetLanguage(Enum):
    """Languages a Chebyshev evaluator can be generated in."""
    C = "C"
    GO = "Go"
    GLSL_HLSL = "GLSL/HLSL"
    PYTHON = "Python"
    RUST = "Rust"


# Display order
TARGET_LANGUAGES: Tuple[TargetLanguage, ...] = (
    TargetLanguage.C,
    TargetLanguage.GO,
    TargetLanguage.GLSL_HLSL,
    TargetLanguage.PYTHON,
    TargetLanguage.RUST,
)

# Suggested file suffix for writers of generated code
FILE_EXTENSIONS: Dict[TargetLanguage, str] = {
    TargetLanguage.C: ".c",
    TargetLanguage.GO: ".go",
    TargetLanguage.GLSL_HLSL: ".glsl",
    TargetLanguage.PYTHON: ".py",
    TargetLanguage.RUST: ".rs",
}
