"""Self-adjoint matrix shape."""

from bandshape.shapes.base import Band, Dimension, Shape, ShapeError


class SelfAdjointShape(Shape):
    r"""Shape of a self-adjoint matrix \(\mathbf{A} = \mathbf{A}^\mathsf{H}\).

    Self-adjointness does not restrict the band, but only makes sense for square
    matrices.
    """

    SYMMETRIC = True

    def to_band(self, dim: Dimension) -> Band:
        """Compute the band of a self-adjoint matrix.

        Args:
            dim: Dimension of the matrix.

        Returns:
            Band covering all diagonals.

        Raises:
            ShapeError: If the dimension is not square.
        """
        if not dim.is_square():
            raise ShapeError(
                f"Self-adjoint matrices must be square. Got {dim.rows}x{dim.cols}."
            )
        return Band.from_dimension(dim)
