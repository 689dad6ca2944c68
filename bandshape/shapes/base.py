"""Matrix dimensions, bands, and the interface of shape descriptors."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Union
from warnings import warn

from torch import Tensor, device

from bandshape.shapes.utils import diagonal_offsets


class ShapeError(ValueError):
    """A shape cannot be applied to a matrix of the given dimension."""


@dataclass(frozen=True)
class Dimension:
    """Number of rows and columns of a matrix.

    Attributes:
        rows: Number of rows. Must be positive.
        cols: Number of columns. Must be positive.
    """

    rows: int
    cols: int

    def __post_init__(self) -> None:
        """Verify that both dimensions are positive.

        Raises:
            ValueError: If `rows` or `cols` is not an integer or smaller than one.
        """
        for name, x in zip(["rows", "cols"], [self.rows, self.cols]):
            if not isinstance(x, int) or isinstance(x, bool):
                raise ValueError(f"{name} must be an integer. Got {x!r}.")
            if x < 1:
                raise ValueError(f"{name} must be positive. Got {x}.")

    @classmethod
    def square(cls, dim: int) -> Dimension:
        """Create the dimension of a square matrix.

        Args:
            dim: Number of rows and columns.

        Returns:
            Dimension of a `dim x dim` matrix.
        """
        return cls(dim, dim)

    def is_square(self) -> bool:
        """Check whether the dimension describes a square matrix.

        Returns:
            Whether rows and columns match.
        """
        return self.rows == self.cols


class Shape(ABC):
    """Base class for structural shape descriptors of matrices.

    A shape maps the dimension of a matrix to the band of diagonals which may
    contain non-zero entries. Shapes without parameters are stateless, hence
    two instances of the same class compare equal.

    Attributes:
        SYMMETRIC: Whether every matrix of this shape is symmetric. This is a
            property of the class, matrix generators use it to decide whether only
            one triangle has to be synthesized and mirrored.
    """

    SYMMETRIC: bool = False

    @abstractmethod
    def to_band(self, dim: Dimension) -> Band:
        """Compute the band of a matrix with this shape.

        Args:
            dim: Dimension of the matrix.

        Returns:
            Lower and upper bandwidth admitted by the shape.

        Raises:
            NotImplementedError: Must be implemented by a child class.
        """
        raise NotImplementedError

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Shape):
            return NotImplemented
        return type(self) is type(other)

    def __hash__(self) -> int:
        return hash(type(self))

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


@dataclass(frozen=True)
class Band(Shape):
    """Lower and upper bandwidth of a matrix.

    The lower bandwidth counts the sub-diagonals, the upper bandwidth the
    super-diagonals that may contain non-zero entries. A band is itself a shape
    whose `to_band` ignores the matrix dimension.

    Attributes:
        lower: Number of sub-diagonals.
        upper: Number of super-diagonals.
        WARN_OVERSIZED: Warn when a band used as shape is wider than the matrix
            it is applied to. Default: `True`.
    """

    lower: int
    upper: int

    WARN_OVERSIZED = True

    def __post_init__(self) -> None:
        """Verify that both bandwidths are non-negative.

        Raises:
            ValueError: If `lower` or `upper` is not an integer or negative.
        """
        for name, x in zip(["lower", "upper"], [self.lower, self.upper]):
            if not isinstance(x, int) or isinstance(x, bool):
                raise ValueError(f"{name} bandwidth must be an integer. Got {x!r}.")
            if x < 0:
                raise ValueError(f"{name} bandwidth must be non-negative. Got {x}.")

    @classmethod
    def from_dimension(cls, dim: Dimension) -> Band:
        """Create the widest band of a matrix.

        Args:
            dim: Dimension of the matrix.

        Returns:
            Band covering all diagonals of the matrix.
        """
        return cls(dim.rows - 1, dim.cols - 1)

    def to_band(self, dim: Dimension) -> Band:
        """Return the band itself.

        Args:
            dim: Dimension of the matrix. Only used to detect oversized bands.

        Returns:
            The band.
        """
        if self.WARN_OVERSIZED and (self.lower >= dim.rows or self.upper >= dim.cols):
            warn(
                f"{self} exceeds a {dim.rows}x{dim.cols} matrix and will be clipped "
                + "when merged. Set Band.WARN_OVERSIZED = False to silence this."
            )
        return self

    def contains(self, row: int, col: int) -> bool:
        """Check whether a matrix entry lies inside the band.

        Args:
            row: Row index of the entry.
            col: Column index of the entry.

        Returns:
            Whether the entry's diagonal is admitted by the band.
        """
        return -self.lower <= col - row <= self.upper

    def num_diagonals(self, dim: Dimension) -> int:
        """Count the diagonals of a matrix that lie inside the band.

        Args:
            dim: Dimension of the matrix.

        Returns:
            Number of diagonals, including the main diagonal.
        """
        return min(self.lower, dim.rows - 1) + min(self.upper, dim.cols - 1) + 1

    def to_mask(self, dim: Dimension, dev: Union[device, None] = None) -> Tensor:
        """Build a boolean mask of the entries inside the band.

        Args:
            dim: Dimension of the matrix.
            dev: Device of the mask. Default: `None` (PyTorch's default device).

        Returns:
            Boolean tensor of shape `[rows, cols]` which is `True` for the entries
            that lie inside the band.
        """
        offsets = diagonal_offsets(dim.rows, dim.cols, dev=dev)
        return (offsets >= -self.lower) & (offsets <= self.upper)
