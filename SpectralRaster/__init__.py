# SpectralRaster/__init__.py

from .RasterFactory import RasterFactory
from .RasterConfig import RasterConfig
from .Raster import Raster
from .RasterBand import RasterBand
from .MemoryRaster import MemoryRaster
from .ProxyRaster import ProxyRaster
from .MaskedRaster import MaskedRaster
from .RasterService import RasterService
from .RasterMapper import RasterMapper, WindowMapper
from .RasterFormat import RasterFormat, RepresentationKind
from .SampleWidthSelector import select_representation
from .RasterErrors import (
    RasterError, InvalidGeometryError, InvalidResolutionError,
    ResolutionCountMismatchError, NullSourceError, InvalidWindowError,
    InvalidFormatError, UnmappedRasterError
)

__all__ = [
    "RasterFactory", "RasterConfig", "Raster", "RasterBand", "MemoryRaster",
    "ProxyRaster", "MaskedRaster", "RasterService", "RasterMapper",
    "WindowMapper", "RasterFormat",
    "RepresentationKind", "select_representation", "RasterError",
    "InvalidGeometryError", "InvalidResolutionError",
    "ResolutionCountMismatchError", "NullSourceError", "InvalidWindowError",
    "InvalidFormatError", "UnmappedRasterError"
]
