import hypothesis
import hypothesis.strategies
import pytest
import torch

from fastpower import (
    ExponentPrecisionWarning,
    InvalidExponentError,
    power_modulo,
)
from fastpower.testing import nonnegative_exponents


class TestPowerModulo:
    """Tests for power_modulo."""

    def test_values(self):
        assert power_modulo(2, 9, 10) == 2
        assert power_modulo(31, 100, 17) == 13
        assert power_modulo(5, 87654, 100) == 25
        assert power_modulo(12, 12, 15) == 6

    def test_first_power_is_reduced(self):
        assert power_modulo(123, 1, 10) == 3

    def test_zero_exponent(self):
        assert power_modulo(0, 0, 5) == 1
        assert power_modulo(7, 0, 1) == 0

    def test_negative_base(self):
        assert power_modulo(-2, 3, 5) == pow(-2, 3, 5)

    @hypothesis.given(
        base=hypothesis.strategies.integers(min_value=-(10**9), max_value=10**9),
        n=nonnegative_exponents(),
        modulus=hypothesis.strategies.integers(min_value=1, max_value=10**9),
    )
    def test_matches_builtin_pow(self, base, n, modulus):
        assert power_modulo(base, n, modulus) == pow(base, n, modulus)

    def test_integer_tensor_base(self):
        base = torch.tensor([2, 3, 4, 9])
        expected = torch.tensor([pow(b, 9, 10) for b in [2, 3, 4, 9]])
        torch.testing.assert_close(power_modulo(base, 9, 10), expected)

    def test_integer_tensor_base_zero_exponent(self):
        base = torch.tensor([2, 3, 4])
        torch.testing.assert_close(
            power_modulo(base, 0, 10), torch.tensor([1, 1, 1])
        )

    def test_negative_exponent_raises(self):
        with pytest.raises(InvalidExponentError):
            power_modulo(3, -1, 7)

    def test_invalid_modulus_raises(self):
        with pytest.raises(ValueError, match="positive"):
            power_modulo(3, 2, 0)

    def test_modulus_too_large_for_tensor_dtype_raises(self):
        modulus = 10**10 + 19
        with pytest.raises(ValueError, match="overflow"):
            power_modulo(torch.tensor([modulus - 3]), 2, modulus)

    def test_largest_safe_modulus_for_int64(self):
        modulus = 3037000499  # (modulus - 1) ** 2 < 2**63
        base = torch.tensor([modulus - 3, 12345])
        expected = torch.tensor(
            [pow(modulus - 3, 5, modulus), pow(12345, 5, modulus)]
        )
        torch.testing.assert_close(power_modulo(base, 5, modulus), expected)

    def test_small_dtype_limits_modulus(self):
        with pytest.raises(ValueError, match="overflow"):
            power_modulo(torch.tensor([3], dtype=torch.int8), 2, 17)

    def test_floating_tensor_raises(self):
        with pytest.raises(ValueError, match="integer tensor"):
            power_modulo(torch.tensor([3.0]), 2, 7)

    def test_large_modulus_with_int_base(self):
        modulus = 10**10 + 19
        assert power_modulo(modulus - 3, 2, modulus) == 9

    def test_huge_float_exponent_warning_points_at_caller(self):
        with pytest.warns(ExponentPrecisionWarning) as record:
            power_modulo(1, 2.0**60, 7)
        assert record[0].filename == __file__
