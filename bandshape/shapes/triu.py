"""Upper-triangular matrix shape."""

from bandshape.shapes.base import Band, Dimension, Shape


class UpperTriangularShape(Shape):
    """Shape of an upper-triangular matrix (zeros below the main diagonal)."""

    def to_band(self, dim: Dimension) -> Band:
        """Compute the band of an upper-triangular matrix.

        Args:
            dim: Dimension of the matrix.

        Returns:
            Band without sub-diagonals and with all `cols - 1` super-diagonals.
        """
        return Band(0, dim.cols - 1)
