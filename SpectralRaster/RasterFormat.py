### RasterFormat ###
# File : RasterFormat.py

from enum import Enum
from typing import NamedTuple

import numpy as np


class RasterFormat(str, Enum):
    """
    Sample format requested for a raster.

    ``ANY`` lets the factory choose (it picks the integer family),
    ``INTEGER`` and ``FLOATING`` restrict the choice to one family.
    """
    ANY = "any"
    INTEGER = "integer"
    FLOATING = "floating"


class RepresentationKind(str, Enum):
    """Fixed-width storage backing the samples of an in-memory raster."""
    INTEGER8 = "integer8"
    INTEGER16 = "integer16"
    INTEGER32 = "integer32"
    FLOAT32 = "float32"
    FLOAT64 = "float64"


class Representation(NamedTuple):
    dtype: type
    bits: int
    format: RasterFormat


REPRESENTATIONS = {
    RepresentationKind.INTEGER8: Representation(np.uint8, 8, RasterFormat.INTEGER),
    RepresentationKind.INTEGER16: Representation(np.uint16, 16, RasterFormat.INTEGER),
    RepresentationKind.INTEGER32: Representation(np.uint32, 32, RasterFormat.INTEGER),
    RepresentationKind.FLOAT32: Representation(np.float32, 32, RasterFormat.FLOATING),
    RepresentationKind.FLOAT64: Representation(np.float64, 64, RasterFormat.FLOATING),
}
