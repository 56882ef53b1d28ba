import decimal
import math
import numbers
import warnings

import numpy as np
import torch
from torch import Tensor

from ._exceptions import ExponentPrecisionWarning, InvalidExponentError

# Largest float below which every integer is exactly representable.
_FLOAT_EXACT_LIMIT = 2**53


def as_exponent(exponent, stacklevel: int = 1) -> int:
    """Normalize an exponent to a nonnegative Python ``int``.

    Parameters
    ----------
    exponent : int, numbers.Real, Decimal, Tensor or ndarray
        Candidate exponent. Integers (including NumPy integers), finite
        integer-valued reals such as ``2.0`` or ``Decimal(5)``, and
        single-element tensors or arrays holding such a value are accepted.
    stacklevel : int
        Stack level of the warning relative to the caller of this
        function, as in ``warnings.warn``.

    Returns
    -------
    int
        The exponent as a Python integer.

    Raises
    ------
    InvalidExponentError
        If the exponent is a ``bool``, not a number, not finite, not
        integer-valued, or negative.
    """
    value = exponent

    if isinstance(value, Tensor):
        if (
            value.numel() != 1
            or value.is_complex()
            or value.dtype == torch.bool
        ):
            raise InvalidExponentError(
                f"Exponent tensor must hold a single real number, got "
                f"shape {tuple(value.shape)} and dtype {value.dtype}"
            )
        value = value.item()
    elif isinstance(value, np.ndarray):
        if value.size != 1 or value.dtype.kind not in "iuf":
            raise InvalidExponentError(
                f"Exponent array must hold a single real number, got "
                f"shape {value.shape} and dtype {value.dtype}"
            )
        value = value.item()

    if isinstance(value, bool):
        raise InvalidExponentError(
            f"Exponent must be a nonnegative integer, got {exponent!r}"
        )

    if isinstance(value, numbers.Integral):
        n = int(value)
    elif isinstance(value, decimal.Decimal):
        if not value.is_finite():
            raise InvalidExponentError(
                f"Exponent must be finite, got {exponent!r}"
            )
        if value != value.to_integral_value():
            raise InvalidExponentError(
                f"Exponent must be integer-valued, got {exponent!r}"
            )
        n = int(value)
    elif isinstance(value, numbers.Real):
        if not math.isfinite(value):
            raise InvalidExponentError(
                f"Exponent must be finite, got {exponent!r}"
            )
        n = math.floor(value)
        if n != value:
            raise InvalidExponentError(
                f"Exponent must be integer-valued, got {exponent!r}"
            )
        if isinstance(value, float) and abs(value) > _FLOAT_EXACT_LIMIT:
            warnings.warn(
                f"Floating-point exponent {value!r} exceeds 2**53; "
                f"it may not be the integer that was intended. "
                f"Pass an int for exact exponents.",
                ExponentPrecisionWarning,
                stacklevel=stacklevel + 1,
            )
    else:
        raise InvalidExponentError(
            f"Exponent must be a nonnegative integer, got "
            f"{type(exponent).__name__}"
        )

    if n < 0:
        raise InvalidExponentError(
            f"Exponent must be non-negative, got {exponent!r}"
        )

    return n
