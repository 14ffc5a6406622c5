from .Raster import Raster
from .RasterErrors import NullSourceError
from typing import Any
from pydantic import Field


class ProxyRaster(Raster):
    """
    Raster whose samples live in an external ``RasterService``.

    Geometry, format and resolutions are read from the service once, at
    construction.  Every sample read or write is forwarded to the service
    without buffering, so the proxy sees exactly what the service holds.

    Parameters
    ----------
    service : RasterService
        Service owning the samples.
    mapper : object or None, optional
        Coordinate mapper attached to the raster.
    factory : RasterFactory or None, optional
        Factory recorded as the creator of the raster.

    Raises
    ------
    NullSourceError
        If *service* is ``None``.

    Examples
    --------
    >>> proxy = ProxyRaster(service)
    >>> proxy.set_value(0, 0, 0, 12)
    >>> service.read_value(0, 0, 0)
    12
    """
    service: Any = Field(..., exclude=True, repr=False, frozen=True)

    def __init__(self, service, mapper=None, factory=None):
        if service is None:
            raise NullSourceError("The raster service is None.")

        super().__init__(
            factory=factory,
            service=service,
            format=service.format,
            number_of_bands=service.number_of_bands,
            number_of_rows=service.number_of_rows,
            number_of_columns=service.number_of_columns,
            radiometric_resolutions=list(service.radiometric_resolutions),
            mapper=mapper,
        )

    def __str__(self):
        return "{0} (on service {1})".format(super().__str__(), self.service)

    @property
    def is_readable(self) -> bool:
        return self.service.is_readable

    @property
    def is_writable(self) -> bool:
        return self.service.is_writable

    def _read_value(self, row_index, column_index, band_index) -> int:
        return self.service.read_value(row_index, column_index, band_index)

    def _write_value(self, row_index, column_index, band_index, value):
        self.service.write_value(row_index, column_index, band_index, value)

    def _read_float_value(self, row_index, column_index, band_index) -> float:
        return self.service.read_float_value(row_index, column_index,
                                             band_index)

    def _write_float_value(self, row_index, column_index, band_index, value):
        self.service.write_float_value(row_index, column_index, band_index,
                                       value)
