"""Lower-triangular matrix shape."""

from bandshape.shapes.base import Band, Dimension, Shape


class LowerTriangularShape(Shape):
    """Shape of a lower-triangular matrix (zeros above the main diagonal)."""

    def to_band(self, dim: Dimension) -> Band:
        """Compute the band of a lower-triangular matrix.

        Args:
            dim: Dimension of the matrix.

        Returns:
            Band with all `rows - 1` sub-diagonals and without super-diagonals.
        """
        return Band(dim.rows - 1, 0)
