"""Exceptions raised while building or addressing rasters."""


class RasterError(Exception):
    """Base class for all raster exceptions."""

    pass


class InvalidGeometryError(RasterError):
    """Band, row or column count outside the allowed range."""

    pass


class InvalidResolutionError(RasterError):
    """Radiometric resolution outside ``[1, 64]``."""

    pass


class ResolutionCountMismatchError(RasterError):
    """Number of radiometric resolutions differs from the number of bands."""

    pass


class NullSourceError(RasterError):
    """A required source raster or service is missing."""

    pass


class InvalidWindowError(RasterError):
    """Mask window does not fit inside the source raster."""

    pass


class InvalidFormatError(RasterError):
    """Unrecognized raster format."""

    pass


class UnmappedRasterError(RasterError):
    """Coordinate access on a raster that has no mapper."""

    pass
