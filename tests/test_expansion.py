"""
Tests for the Chebyshev expansion model and its validation.

An expansion is the only input of the code generator. These tests pin
down its defaults and the invariants checked before any code is rendered.
"""

import math
import pytest
from dataclasses import FrozenInstanceError

from chebgen.expansion import FLOAT32_MAX, ChebyshevExpansion, ExpansionError, validate_expansion


class TestChebyshevExpansion:
    """Test expansion construction and properties."""

    def test_coeffs_stored_as_tuple(self):
        """A list of coefficients should be frozen into a tuple."""
        coeffs = [1.0, 2.0, 3.0]
        e = ChebyshevExpansion(coeffs=coeffs, x_min=0.0, x_max=1.0)
        assert e.coeffs == (1.0, 2.0, 3.0)
        coeffs.append(4.0)
        assert e.num_coeffs == 3

    def test_expansion_is_immutable(self):
        e = ChebyshevExpansion(coeffs=(1.0,), x_min=0.0, x_max=1.0)
        with pytest.raises(FrozenInstanceError):
            e.x_min = 5.0

    def test_midpoint(self):
        e = ChebyshevExpansion(coeffs=(1.0,), x_min=-1.0, x_max=3.0)
        assert e.midpoint == 1.0

    def test_evaluate_uses_reference_when_given(self):
        """The reference function wins over the built-in recurrence."""
        e = ChebyshevExpansion(
            coeffs=(2.0, 0.0, -1.0), x_min=-1.0, x_max=1.0, reference=lambda x: 1.0 - 2.0 * x * x
        )
        assert e.evaluate(0.0) == 1.0
        assert e.evaluate(0.5) == 0.5

    def test_evaluate_defaults_to_clenshaw(self):
        """Without a reference, evaluate runs the recurrence in double precision."""
        # T_2 on [-1, 1]: T_2(0.5) = 2*0.25 - 1
        e = ChebyshevExpansion(coeffs=(0.0, 0.0, 1.0), x_min=-1.0, x_max=1.0)
        assert e.evaluate(0.5) == pytest.approx(-0.5)

    def test_reference_not_part_of_equality(self):
        a = ChebyshevExpansion(coeffs=(1.0,), x_min=0.0, x_max=1.0, reference=lambda x: 1.0)
        b = ChebyshevExpansion(coeffs=(1.0,), x_min=0.0, x_max=1.0)
        assert a == b


class TestValidateExpansion:
    """Test the invariants enforced before generation."""

    def test_valid_expansion_passes(self):
        validate_expansion(ChebyshevExpansion(coeffs=(1.0, 2.0), x_min=0.0, x_max=1.0))

    def test_single_coefficient_is_valid(self):
        validate_expansion(ChebyshevExpansion(coeffs=(1.0,), x_min=0.0, x_max=1.0))

    def test_empty_coefficients_rejected(self):
        with pytest.raises(ExpansionError, match="no coefficients"):
            validate_expansion(ChebyshevExpansion(coeffs=(), x_min=0.0, x_max=1.0))

    def test_equal_bounds_rejected(self):
        with pytest.raises(ExpansionError, match="domain"):
            validate_expansion(ChebyshevExpansion(coeffs=(1.0,), x_min=1.0, x_max=1.0))

    def test_reversed_bounds_rejected(self):
        with pytest.raises(ExpansionError, match="domain"):
            validate_expansion(ChebyshevExpansion(coeffs=(1.0,), x_min=2.0, x_max=1.0))

    @pytest.mark.parametrize("bad", [math.inf, -math.inf, math.nan])
    def test_non_finite_coefficient_rejected(self, bad):
        with pytest.raises(ExpansionError, match="indices: \\[1\\]"):
            validate_expansion(ChebyshevExpansion(coeffs=(1.0, bad), x_min=0.0, x_max=1.0))

    def test_non_finite_bound_rejected(self):
        with pytest.raises(ExpansionError, match="x_max"):
            validate_expansion(ChebyshevExpansion(coeffs=(1.0,), x_min=0.0, x_max=math.inf))

    def test_coefficient_beyond_float32_rejected(self):
        """Go and Rust refuse float32 literals that overflow."""
        with pytest.raises(ExpansionError, match="float32 at indices: \\[0, 2\\]"):
            validate_expansion(ChebyshevExpansion(coeffs=(1e39, 0.0, -1.7e308), x_min=0.0, x_max=1.0))

    def test_bound_beyond_float32_rejected(self):
        with pytest.raises(ExpansionError, match="x_min"):
            validate_expansion(ChebyshevExpansion(coeffs=(1.0,), x_min=-4e38, x_max=1.0))

    def test_float32_max_accepted(self):
        validate_expansion(ChebyshevExpansion(coeffs=(FLOAT32_MAX, -FLOAT32_MAX), x_min=0.0, x_max=1.0))

    def test_non_numeric_coefficient_rejected(self):
        with pytest.raises(ExpansionError):
            validate_expansion(ChebyshevExpansion(coeffs=(1.0, "two"), x_min=0.0, x_max=1.0))

    def test_expansion_error_is_value_error(self):
        assert issubclass(ExpansionError, ValueError)
