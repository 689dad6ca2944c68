"""Diagonal matrix shape."""

from bandshape.shapes.base import Band, Dimension, Shape


class DiagonalShape(Shape):
    r"""Shape of a diagonal matrix.

    \(
    \begin{pmatrix}
        d_1 & 0 & \cdots & 0 \\
        0 & d_2 & \ddots & \vdots \\
        \vdots & \ddots & \ddots & 0 \\
        0 & \cdots & 0 & d_K \\
    \end{pmatrix}
    \)

    Diagonal matrices are symmetric.
    """

    SYMMETRIC = True

    def to_band(self, dim: Dimension) -> Band:
        """Return the band of a diagonal matrix.

        Args:
            dim: Dimension of the matrix. Ignored.

        Returns:
            Band containing only the main diagonal.
        """
        return Band(0, 0)
