"""Exceptions and warnings for fast exponentiation."""

__all__ = [
    "ExponentPrecisionWarning",
    "FastPowerError",
    "InvalidExponentError",
    "MissingIdentityError",
]


class FastPowerError(ValueError):
    """Base exception for fastpower argument errors."""

    pass


class InvalidExponentError(FastPowerError):
    """Raised when an exponent is not a nonnegative integer.

    Negative and fractional powers are unsupported because an arbitrary
    caller-supplied operation need not have inverses or roots.
    """

    pass


class MissingIdentityError(FastPowerError):
    """Raised for a zero exponent with a custom operation and no identity.

    The identity element of a caller-supplied operation cannot be inferred,
    so ``power(x, 0, multiply)`` requires ``identity`` to be given.
    """

    pass


class ExponentPrecisionWarning(UserWarning):
    """Warning for floating-point exponents too large to be exact integers."""

    pass
