"""# Basic usage.

This example demonstrates how a test-matrix generator turns a list of
properties into the band of non-zero diagonals it has to fill, and which
properties it still has to interpret itself.

First, the imports.
"""

from torch import manual_seed, rand

from bandshape.properties import from_properties, is_symmetric
from bandshape.shapes.base import Band, Dimension
from bandshape.shapes.diagonal import DiagonalShape
from bandshape.shapes.tridiagonal import TridiagonalShape
from bandshape.shapes.triu import UpperTriangularShape

manual_seed(0)  # make deterministic

# %%
# ## Folding Properties
#
# Shapes can be mixed with arbitrary settings of the generator, for instance a
# seed and the name of a value distribution. All shapes are merged into one band,
# the other settings are returned untouched and in order:

dim = Dimension(6, 6)
props = [0, TridiagonalShape(), "uniform", UpperTriangularShape()]

band, settings = from_properties(dim, *props)
print(band)
print(settings)
assert band == Band(0, 1)
assert settings == (0, "uniform")

# %%
# ## Filling the Band
#
# The band's mask tells which entries may be non-zero. Here we fill them with
# random numbers:

mat = rand(dim.rows, dim.cols) * band.to_mask(dim)
print(mat)

# %%
# ## Symmetry
#
# Some shapes imply a symmetric matrix. Then, a generator only needs to fill one
# triangle and mirror it:

print(is_symmetric(*props))
print(is_symmetric(*props, DiagonalShape()))
