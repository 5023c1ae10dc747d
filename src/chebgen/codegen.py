"""
Code generation entry point.

generate_code() validates an expansion and hands it to the backend of
the requested language. Dispatch goes through a constant table that is
checked against TargetLanguage at import time, so adding a language
without a backend breaks the import rather than a later call.
"""

from types import MappingProxyType
from typing import Callable, Dict, Mapping

from chebgen.expansion import ChebyshevExpansion, validate_expansion
from chebgen.languages import TargetLanguage, TARGET_LANGUAGES
from chebgen.backends import (
    generate_c_code,
    generate_go_code,
    generate_glsl_hlsl_code,
    generate_python_code,
    generate_rust_code,
)


_BACKENDS: Mapping[TargetLanguage, Callable[[ChebyshevExpansion], str]] = MappingProxyType({
    TargetLanguage.C: generate_c_code,
    TargetLanguage.GO: generate_go_code,
    TargetLanguage.GLSL_HLSL: generate_glsl_hlsl_code,
    TargetLanguage.PYTHON: generate_python_code,
    TargetLanguage.RUST: generate_rust_code,
})

_missing = set(TargetLanguage) - set(_BACKENDS)
if _missing:
    raise RuntimeError(f"No backend registered for: {sorted(m.value for m in _missing)}")
del _missing


def generate_code(language: TargetLanguage, expansion: ChebyshevExpansion) -> str:
    """
    Generate source code evaluating a Chebyshev expansion.

    Args:
        language: Target language
        expansion: Expansion to render; never modified

    Returns:
        Complete source text in the target language

    Raises:
        TypeError: If language is not a TargetLanguage member
        ExpansionError: If the expansion has no coefficients, an empty
            domain or non-finite values
    """
    if not isinstance(language, TargetLanguage):
        raise TypeError(f"Unsupported target language: {language!r}")
    validate_expansion(expansion)
    return _BACKENDS[language](expansion)


def generate_all(expansion: ChebyshevExpansion) -> Dict[TargetLanguage, str]:
    """Generate code for every target language, in display order."""
    return {language: generate_code(language, expansion) for language in TARGET_LANGUAGES}
