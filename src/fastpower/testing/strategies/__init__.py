"""Hypothesis strategies for exponent and base values."""

from ._integers_as_floats import integers_as_floats
from ._negative_integers import negative_integers
from ._non_integer_exponents import non_integer_exponents
from ._nonnegative_exponents import nonnegative_exponents
from ._real_bases import real_bases

__all__ = [
    "integers_as_floats",
    "negative_integers",
    "non_integer_exponents",
    "nonnegative_exponents",
    "real_bases",
]
