"""Tridiagonal matrix shape."""

from bandshape.shapes.base import Band, Dimension, Shape


class TridiagonalShape(Shape):
    """Shape of a tridiagonal matrix.

    Non-zero entries are limited to the main diagonal and its two neighbours,
    independent of the matrix dimension.
    """

    def to_band(self, dim: Dimension) -> Band:
        """Return the band of a tridiagonal matrix.

        Args:
            dim: Dimension of the matrix. Ignored.

        Returns:
            Band with one sub- and one super-diagonal.
        """
        return Band(1, 1)
