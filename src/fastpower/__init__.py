"""fastpower: exponentiation by squaring over arbitrary associative operations."""

from ._exceptions import (
    ExponentPrecisionWarning,
    FastPowerError,
    InvalidExponentError,
    MissingIdentityError,
)
from ._matrix_power import matrix_power
from ._multiply_modulo import multiply_modulo
from ._power import power
from ._power_modulo import power_modulo

__all__ = [
    "ExponentPrecisionWarning",
    "FastPowerError",
    "InvalidExponentError",
    "MissingIdentityError",
    "matrix_power",
    "multiply_modulo",
    "power",
    "power_modulo",
]

__version__ = "0.1.0"
