"""Combination of bands from multiple shapes."""

from bandshape.shapes.base import Band


def merge_band(*bands: Band) -> Band:
    """Intersect bands.

    A matrix satisfying several shapes at once may only have non-zero entries on
    diagonals that all of them admit, so the merged bandwidths are the element-wise
    minima. The operation is commutative, associative, and idempotent.

    Args:
        *bands: The bands to merge.

    Returns:
        The tightest band contained in all inputs.

    Raises:
        ValueError: If no band is specified.
    """
    if not bands:
        raise ValueError("Need at least one band to merge.")

    return Band(min(b.lower for b in bands), min(b.upper for b in bands))
