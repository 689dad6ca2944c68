"""Utility functions for testing the interface of shapes."""

from abc import ABC, abstractmethod
from test.utils import DEVICE_IDS, DEVICES, DIMS, report_nonequal
from typing import List

from pytest import mark
from torch import Tensor, device, ones

from bandshape.properties import from_properties, is_shape, is_symmetric
from bandshape.shapes.base import Band, Dimension, Shape


class _TestShape(ABC):
    """Abstract class for testing `Shape` implementations.

    To test a new shape, create a new class and specify the class attributes,
    then implement the `project` method.

    `
    class TestDiagonalShape(_TestShape):
        SHAPE = DiagonalShape()
        SYMMETRIC = True

        def project(self, mat: Tensor) -> Tensor:
            ...
    `

    `pytest` will automatically pick up the tests defined for `TestDiagonalShape`
    via the base class.

    Attributes:
        SHAPE: The shape that is tested.
        SYMMETRIC: Whether the shape is expected to be symmetric.
        DIMS: A list of matrix dimensions the shape is tested on.
    """

    SHAPE: Shape
    SYMMETRIC: bool
    DIMS: List[Dimension] = DIMS

    @abstractmethod
    def project(self, mat: Tensor) -> Tensor:
        """Zero out the entries of a dense matrix that violate the shape.

        Args:
            mat: A dense matrix.

        Returns:
            The matrix with all entries outside the shape's band set to zero.
        """
        raise NotImplementedError("Must be implemented by a child class.")

    @mark.parametrize("dev", DEVICES, ids=DEVICE_IDS)
    def test_to_band(self, dev: device):
        """Compare the shape's band with the projection of a dense matrix.

        Args:
            dev: The device on which to run the test.
        """
        for dim in self.DIMS:
            truth = self.project(ones(dim.rows, dim.cols, device=dev)).bool()
            mask = self.SHAPE.to_band(dim).to_mask(dim, dev=dev)
            report_nonequal(truth, mask, name=f"{dim.rows}x{dim.cols} mask")

    def test_symmetric(self):
        """Test that symmetry is a property of the shape's class."""
        assert self.SHAPE.SYMMETRIC is self.SYMMETRIC
        assert type(self.SHAPE).SYMMETRIC is self.SYMMETRIC
        assert is_symmetric(self.SHAPE) is self.SYMMETRIC

    def test_is_shape(self):
        """Test that the shape is classified as shape."""
        assert is_shape(self.SHAPE)

    def test_from_properties(self):
        """Test that folding the shape alone yields its band, clipped to the matrix."""
        for dim in self.DIMS:
            band, leftover = from_properties(dim, self.SHAPE)
            assert leftover == ()

            band_shape = self.SHAPE.to_band(dim)
            band_dense = Band.from_dimension(dim)
            assert band.lower == min(band_shape.lower, band_dense.lower)
            assert band.upper == min(band_shape.upper, band_dense.upper)

            # clipping does not change which entries are admitted
            report_nonequal(band.to_mask(dim), band_shape.to_mask(dim))
