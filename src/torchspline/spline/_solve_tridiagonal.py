import torch
from torch import Tensor


def solve_tridiagonal(
    diag: Tensor,
    upper: Tensor,
    lower: Tensor,
    rhs: Tensor,
) -> Tensor:
    """
    Solve a tridiagonal system Ax = b using the Thomas algorithm.

    The matrix A has the form:
        [d0  u0   0   0  ...  0   0 ]
        [l0  d1  u1   0  ...  0   0 ]
        [ 0  l1  d2  u2  ...  0   0 ]
        [        ...                ]
        [ 0   0   0   0  ... ln-2 dn-1]

    Parameters
    ----------
    diag : Tensor
        Main diagonal, shape (n,)
    upper : Tensor
        Upper diagonal, shape (n-1,)
    lower : Tensor
        Lower diagonal, shape (n-1,)
    rhs : Tensor
        Right-hand side, shape (*batch, n)

    Returns
    -------
    Tensor
        Solution x, shape (*batch, n)

    Raises
    ------
    ValueError
        If the off-diagonals do not have length n-1 or rhs does not end
        in a dimension of size n.

    Notes
    -----
    No pivoting is performed, so A should be diagonally dominant. The
    1x1 system (n = 1, empty off-diagonals) goes through the same sweeps
    as any other size. The implementation is built from out-of-place
    operations and is fully differentiable.
    """
    n = diag.shape[0]

    if n < 1:
        raise ValueError("Tridiagonal system must have at least one row")
    if upper.shape[0] != n - 1 or lower.shape[0] != n - 1:
        raise ValueError(
            f"Off-diagonals must have length {n - 1}, "
            f"got upper={upper.shape[0]} and lower={lower.shape[0]}"
        )
    if rhs.shape[-1] != n:
        raise ValueError(
            f"Right-hand side must end in a dimension of size {n}, "
            f"got shape {tuple(rhs.shape)}"
        )

    # rhs: (*batch, n) -> (n, *batch)
    rhs_t = rhs.movedim(-1, 0)

    # Forward sweep: eliminate the sub-diagonal row by row
    c_prime_list = []
    d_prime_list = []

    denom = diag[0]
    d_prime_list.append(rhs_t[0] / denom)

    for i in range(1, n):
        c_prime_list.append(upper[i - 1] / denom)
        denom = diag[i] - lower[i - 1] * c_prime_list[i - 1]
        d_prime_list.append(
            (rhs_t[i] - lower[i - 1] * d_prime_list[i - 1]) / denom
        )

    # Back substitution, last row first
    x_list = [None] * n
    x_list[n - 1] = d_prime_list[n - 1]

    for i in range(n - 2, -1, -1):
        x_list[i] = d_prime_list[i] - c_prime_list[i] * x_list[i + 1]

    x = torch.stack(x_list, dim=0)

    # (n, *batch) -> (*batch, n)
    return x.movedim(0, -1)
