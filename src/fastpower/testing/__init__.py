"""Testing utilities for fast exponentiation.

Requires hypothesis, installed with the ``testing`` extra
(``pip install fastpower[testing]``).

Example usage:

    from fastpower import power
    from fastpower.testing import CountingMultiply, cyclic_group

    multiply = CountingMultiply(cyclic_group("abc"))
    assert power("b", 0xBBBB, multiply) == "c"
    assert multiply.count < 32
"""

from ._counting_multiply import CountingMultiply
from ._cyclic_group import cyclic_group
from .strategies import (
    integers_as_floats,
    negative_integers,
    non_integer_exponents,
    nonnegative_exponents,
    real_bases,
)

__all__ = [
    "CountingMultiply",
    "cyclic_group",
    # Strategies
    "integers_as_floats",
    "negative_integers",
    "non_integer_exponents",
    "nonnegative_exponents",
    "real_bases",
]
