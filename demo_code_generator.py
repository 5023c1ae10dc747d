#!/usr/bin/env python3
"""
Demo: Generate Chebyshev evaluators in every target language.

Usage:
    python demo_code_generator.py                 # built-in quadratic example
    python demo_code_generator.py expansion.yaml  # expansion from YAML/JSON
"""

import sys

from chebgen.codegen import generate_code
from chebgen.examples import build_quadratic_expansion
from chebgen.languages import TARGET_LANGUAGES, FILE_EXTENSIONS
from chebgen.serialization import expansion_from_json, expansion_from_yaml


def load_expansion(path):
    with open(path) as f:
        text = f.read()
    if path.endswith(".json"):
        return expansion_from_json(text)
    return expansion_from_yaml(text)


def main():
    if len(sys.argv) > 1:
        expansion = load_expansion(sys.argv[1])
    else:
        expansion = build_quadratic_expansion()

    print("=" * 80)
    print("CHEBYSHEV CODE GENERATOR DEMO")
    print("=" * 80)

    for language in TARGET_LANGUAGES:
        print(f"\n{language.value.upper()}:")
        print("-" * 80)

        code = generate_code(language, expansion)
        print(code)

        filename = f"chebyshev_eval{FILE_EXTENSIONS[language]}"
        with open(filename, "w") as f:
            f.write(code + "\n")
        print(f"\nSaved to: {filename}")

    print("\n" + "=" * 80)
    print("To run the generated programs:")
    print("  gcc chebyshev_eval.c -o chebyshev_eval && ./chebyshev_eval")
    print("  go run chebyshev_eval.go")
    print("  python chebyshev_eval.py")
    print("  rustc chebyshev_eval.rs && ./chebyshev_eval")
    print("=" * 80)


if __name__ == "__main__":
    main()
