"""Utility functions for the shapes."""

from typing import Union

from torch import Tensor, arange, device


def diagonal_offsets(
    num_rows: int, num_cols: int, dev: Union[device, None] = None
) -> Tensor:
    """Compute the diagonal offset of every entry of a matrix.

    A matrix of shape `[N, M]` has `N + M - 1` diagonals. Entry `[i, j]` lies on
    diagonal `j - i`, so the main diagonal has offset `0`, super-diagonals have
    positive and sub-diagonals negative offsets.

    Args:
        num_rows: Number of rows `N`.
        num_cols: Number of columns `M`.
        dev: Device on which the offsets are created. Default: `None` (PyTorch's
            default device).

    Returns:
        An integer tensor of shape `[N, M]` containing the diagonal offsets.
    """
    row_idxs = arange(num_rows, device=dev).unsqueeze(-1).expand(-1, num_cols)
    col_idxs = arange(num_cols, device=dev).unsqueeze(0).expand(num_rows, -1)
    return col_idxs - row_idxs
