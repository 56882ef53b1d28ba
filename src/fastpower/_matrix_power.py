import torch
from torch import Tensor

from ._exponent import as_exponent
from ._power import power


def matrix_power(input: Tensor, n: int) -> Tensor:
    """Raise a square matrix, or a batch of them, to a non-negative power.

    Parameters
    ----------
    input : Tensor
        Matrices of shape ``(*, m, m)``.
    n : int
        Non-negative integer exponent.

    Returns
    -------
    Tensor
        ``input`` multiplied by itself ``n`` times, shape ``(*, m, m)``.
        For ``n = 0`` the identity matrix broadcast over the batch. The
        result never shares storage with ``input``.

    Raises
    ------
    ValueError
        If ``input`` is not a (batch of) square matrices.
    InvalidExponentError
        If ``n`` is negative or not integer-valued.

    Examples
    --------
    >>> fibonacci = torch.tensor([[1, 1], [1, 0]])
    >>> matrix_power(fibonacci, 10)
    tensor([[89, 55],
            [55, 34]])
    """
    if input.dim() < 2:
        raise ValueError(
            f"matrix_power expects at least 2 dimensions, got {input.dim()}"
        )
    if input.shape[-1] != input.shape[-2]:
        raise ValueError(
            f"matrix_power expects square matrices, got shape "
            f"{tuple(input.shape)}"
        )

    n = as_exponent(n, stacklevel=2)

    if n == 1:
        return input.clone()

    m = input.shape[-1]
    identity = torch.eye(m, dtype=input.dtype, device=input.device)
    identity = identity.expand(input.shape).clone()

    return power(input, n, torch.matmul, identity)
