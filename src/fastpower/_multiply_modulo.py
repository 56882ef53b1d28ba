import numbers
from typing import Callable


def multiply_modulo(modulus: int) -> Callable:
    """Multiplication in the integers modulo ``modulus``.

    Parameters
    ----------
    modulus : int
        Positive integer modulus.

    Returns
    -------
    Callable
        ``f(a, b) = (a * b) % modulus``. Works on Python integers and
        integer tensors.

    Raises
    ------
    ValueError
        If ``modulus`` is not a positive integer.
    """
    if isinstance(modulus, bool) or not isinstance(modulus, numbers.Integral):
        raise ValueError(f"Modulus must be an integer, got {modulus!r}")
    if modulus < 1:
        raise ValueError(f"Modulus must be positive, got {modulus}")

    modulus = int(modulus)

    def multiply(a, b):
        return (a * b) % modulus

    return multiply
