import torch
from torch import Tensor

from ._exponent import as_exponent
from ._multiply_modulo import multiply_modulo
from ._power import power


def power_modulo(base, exponent: int, modulus: int):
    """Modular exponentiation ``base ** exponent mod modulus``.

    Parameters
    ----------
    base : int or Tensor
        Integer base, or an integer tensor for elementwise powers.
    exponent : int
        Non-negative integer exponent.
    modulus : int
        Positive integer modulus. For tensor bases, ``(modulus - 1) ** 2``
        must fit in the tensor's dtype.

    Returns
    -------
    int or Tensor
        Result in ``[0, modulus)``, same type as ``base``.

    Raises
    ------
    InvalidExponentError
        If ``exponent`` is negative or not integer-valued.
    ValueError
        If ``modulus`` is not a positive integer, if a tensor ``base`` is
        not of integer dtype, or if products of residues would overflow
        that dtype.

    Examples
    --------
    >>> power_modulo(5, 87654, 100)
    25
    >>> power_modulo(7, 0, 1)
    0
    """
    multiply = multiply_modulo(modulus)
    n = as_exponent(exponent, stacklevel=2)

    if isinstance(base, Tensor):
        if (
            base.is_floating_point()
            or base.is_complex()
            or base.dtype == torch.bool
        ):
            raise ValueError(
                f"power_modulo expects an integer tensor, got dtype "
                f"{base.dtype}"
            )
        if (modulus - 1) ** 2 > torch.iinfo(base.dtype).max:
            raise ValueError(
                f"Modulus {modulus} is too large for dtype {base.dtype}: "
                f"products of residues would overflow"
            )
        identity = torch.full_like(base, 1 % modulus)
    else:
        identity = 1 % modulus

    return power(base % modulus, n, multiply, identity)
