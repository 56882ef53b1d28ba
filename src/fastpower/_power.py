import operator
from typing import Callable, Optional, TypeVar

import torch
from torch import Tensor

from ._exceptions import MissingIdentityError
from ._exponent import as_exponent

T = TypeVar("T")


def power(
    base: T,
    exponent: int,
    multiply: Optional[Callable[[T, T], T]] = None,
    identity: Optional[T] = None,
) -> T:
    """Raise ``base`` to a non-negative integer power under ``multiply``.

    Uses binary exponentiation (repeated squaring), so ``multiply`` is
    applied O(log exponent) times. The operation only has to be
    associative; ``identity`` is consulted for a zero exponent and never
    seeds the product, so semigroups without an identity still support
    positive powers.

    Parameters
    ----------
    base : T
        Element to raise to a power.
    exponent : int
        Non-negative integer exponent. Integer-valued reals such as ``2.0``
        and single-element tensors are accepted.
    multiply : Callable[[T, T], T], optional
        Associative binary operation. Defaults to numeric multiplication.
    identity : T, optional
        Identity element of ``multiply``, returned when ``exponent`` is 0.
        Required for a zero exponent when ``multiply`` is given.

    Returns
    -------
    T
        ``base`` combined with itself ``exponent`` times.

    Raises
    ------
    InvalidExponentError
        If ``exponent`` is negative or not integer-valued.
    MissingIdentityError
        If ``exponent`` is 0, ``multiply`` is given and ``identity`` is not.
    TypeError
        If ``multiply`` is not callable.

    Examples
    --------
    >>> power(3, 4)
    81
    >>> power(31, 100, lambda a, b: a * b % 17)
    13
    >>> power("x", 3, operator.add)
    'xxx'
    """
    n = as_exponent(exponent, stacklevel=2)

    if multiply is not None and not callable(multiply):
        raise TypeError(
            f"multiply must be callable, got {type(multiply).__name__}"
        )

    if n == 0:
        if identity is not None:
            return identity
        if multiply is None:
            if isinstance(base, Tensor):
                return torch.ones_like(base)
            return 1
        raise MissingIdentityError(
            "Exponent is 0 but no identity was given for the custom "
            "multiply; pass identity= explicitly"
        )

    if multiply is None:
        multiply = operator.mul

    # Binary exponentiation, least significant bit first
    result = None
    square = base

    while True:
        if n & 1:
            if result is None:
                result = square
            else:
                result = multiply(result, square)
        n >>= 1
        if n == 0:
            break
        square = multiply(square, square)

    return result
