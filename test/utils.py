"""Utility functions for the tests."""

from torch import Tensor, cuda, device, equal

from bandshape.shapes.base import Dimension

DEVICE_IDS = ["cpu", "cuda"] if cuda.is_available() else ["cpu"]
DEVICES = [device(name) for name in DEVICE_IDS]

DIMS = [Dimension(1, 1), Dimension(5, 5), Dimension(4, 7), Dimension(7, 4)]
DIM_IDS = [f"{dim.rows}x{dim.cols}" for dim in DIMS]


def report_nonequal(mask1: Tensor, mask2: Tensor, name: str = "mask"):
    """Compare two boolean masks, raise exception and print them if they differ.

    Args:
        mask1: First mask.
        mask2: Second mask.
        name: Optional name what the compared masks mean. Default: ``'mask'``.

    Raises:
        ValueError: If the two masks don't match in shape or values.
    """
    if mask1.shape != mask2.shape:
        raise ValueError(f"{name} shapes don't match.")

    if equal(mask1, mask2):
        print(f"{name} values match.")
    else:
        print(f"{mask1.int()}\n!=\n{mask2.int()}")
        mismatch = (mask1 != mask2).sum()
        raise ValueError(f"{name} values don't match ({mismatch} / {mask1.numel()}).")
