"""
Test the example expansions shipped for demos.
"""

from chebgen.codegen import generate_code
from chebgen.examples import build_quadratic_expansion, build_constant_expansion
from chebgen.languages import TargetLanguage
from chebgen.recurrence import clenshaw_eval


def test_quadratic_expansion():
    e = build_quadratic_expansion()
    assert e.coeffs == (2.0, 0.0, -1.0)
    assert e.midpoint == 0.0
    assert e.evaluate(0.0) == 1.0
    # The recurrence and the reference are independent formulas
    assert clenshaw_eval(e.coeffs, 0.0, e.x_min, e.x_max) == 2.0


def test_quadratic_generated_code_carries_reference():
    code = generate_code(TargetLanguage.RUST, build_quadratic_expansion())
    assert 'println!("Should be 1.0 (double precision)");' in code


def test_constant_expansion():
    e = build_constant_expansion(0.75, x_min=-2.0, x_max=2.0)
    assert e.num_coeffs == 1
    assert e.evaluate(1.0) == 0.75
    assert clenshaw_eval(e.coeffs, 1.0, e.x_min, e.x_max) == 0.75
