"""Fold shape descriptors and generator settings into a band.

A matrix generator receives a list of properties that mixes shapes with
unrelated settings, for instance a seed or a value distribution. The functions
in this module merge all shapes into a single band and hand the remaining
settings back in their original order.
"""

from typing import Any, Dict, Iterable, NamedTuple, Tuple, Type

from bandshape.shapes.base import Band, Dimension, Shape
from bandshape.shapes.diagonal import DiagonalShape
from bandshape.shapes.general import GeneralShape
from bandshape.shapes.merge import merge_band
from bandshape.shapes.selfadjoint import SelfAdjointShape
from bandshape.shapes.tridiagonal import TridiagonalShape
from bandshape.shapes.tril import LowerTriangularShape
from bandshape.shapes.triu import UpperTriangularShape

SUPPORTED_SHAPES: Dict[str, Type[Shape]] = {
    "band": Band,
    "general": GeneralShape,
    "self_adjoint": SelfAdjointShape,
    "upper_triangular": UpperTriangularShape,
    "lower_triangular": LowerTriangularShape,
    "tridiagonal": TridiagonalShape,
    "diagonal": DiagonalShape,
}
_SHAPE_CLASSES: Tuple[Type[Shape], ...] = tuple(SUPPORTED_SHAPES.values())


class FoldResult(NamedTuple):
    """Result of folding properties.

    Attributes:
        band: Tightest band admitted by all shapes.
        properties: Properties that are not shapes, in their original order.
    """

    band: Band
    properties: Tuple[Any, ...]


def is_shape(prop: Any) -> bool:
    """Check whether a property is one of the supported shapes.

    Only the property's type is inspected.

    Args:
        prop: Any property.

    Returns:
        Whether the property is an instance of a class in `SUPPORTED_SHAPES`.
    """
    return isinstance(prop, _SHAPE_CLASSES)


def from_properties(dim: Dimension, *props: Any) -> FoldResult:
    """Merge the shapes among properties into a band and collect the others.

    Starts from the band of a general matrix and narrows it with every shape.

    Args:
        dim: Dimension of the matrix.
        *props: Shapes interleaved with arbitrary other properties.

    Returns:
        The merged band and the non-shape properties in the order they were passed.

    Examples:
        >>> from bandshape.shapes.tril import LowerTriangularShape
        >>> from_properties(Dimension(4, 4), 42, LowerTriangularShape(), "seed")
        FoldResult(band=Band(lower=3, upper=0), properties=(42, 'seed'))
    """
    band = GeneralShape().to_band(dim)
    leftover = []

    for prop in props:
        if is_shape(prop):
            band = merge_band(band, prop.to_band(dim))
        else:
            leftover.append(prop)

    return FoldResult(band, tuple(leftover))


def from_shapes(dim: Dimension, shapes: Iterable[Shape]) -> Band:
    """Merge shapes that have already been separated from other properties.

    Args:
        dim: Dimension of the matrix.
        shapes: The shapes to merge.

    Returns:
        The tightest band admitted by all shapes and a general matrix of
        dimension `dim`.

    Raises:
        TypeError: If one of the entries is not a supported shape.
    """
    bands = [GeneralShape().to_band(dim)]
    for shape in shapes:
        if not is_shape(shape):
            raise TypeError(
                f"Expected one of {[c.__name__ for c in _SHAPE_CLASSES]}. "
                + f"Got {type(shape).__name__}."
            )
        bands.append(shape.to_band(dim))

    return merge_band(*bands)


def is_symmetric(*props: Any) -> bool:
    """Check whether properties force a matrix to be symmetric.

    Args:
        *props: Shapes interleaved with arbitrary other properties.

    Returns:
        Whether any of the shapes among the properties is symmetric.
    """
    return any(prop.SYMMETRIC for prop in props if is_shape(prop))


def get_shape(name: str) -> Shape:
    """Create a parameter-free shape from its name.

    Args:
        name: Key in `SUPPORTED_SHAPES`.

    Returns:
        Instance of the named shape.

    Raises:
        ValueError: If the name is unknown or refers to `Band`, which requires
            explicit bandwidths.
    """
    if name not in SUPPORTED_SHAPES:
        raise ValueError(
            f"Unknown shape {name!r}. Supported: {list(SUPPORTED_SHAPES.keys())}."
        )
    if SUPPORTED_SHAPES[name] is Band:
        raise ValueError("Band requires bandwidths. Use Band(lower, upper) instead.")

    return SUPPORTED_SHAPES[name]()
