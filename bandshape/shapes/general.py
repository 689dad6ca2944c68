"""General (dense) matrix shape."""

from bandshape.shapes.base import Band, Dimension, Shape


class GeneralShape(Shape):
    """Shape of a general matrix without structure.

    All diagonals may contain non-zero entries, hence this is the loosest shape.
    """

    def to_band(self, dim: Dimension) -> Band:
        """Compute the band of a general matrix.

        Args:
            dim: Dimension of the matrix.

        Returns:
            Band covering all `rows - 1` sub- and `cols - 1` super-diagonals.
        """
        return Band.from_dimension(dim)
