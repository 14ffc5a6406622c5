### RasterFactory Class ###
# File : RasterFactory.py

import logging
import numbers
from typing import Optional, Sequence, Union

from .MaskedRaster import MaskedRaster
from .MemoryRaster import MemoryRaster
from .ProxyRaster import ProxyRaster
from .Raster import Raster
from .RasterConfig import RasterConfig
from .RasterErrors import InvalidFormatError, NullSourceError
from .RasterFormat import RasterFormat
from .SampleWidthSelector import select_representation

logger = logging.getLogger(__name__)


class RasterFactory:
    """
    Factory for creating ``Raster`` objects.

    Picks the narrowest in-memory representation for a requested geometry
    and resolution, and builds proxy rasters over raster services and
    masked rasters over existing rasters.  Callers always receive a
    ``Raster`` regardless of the storage behind it.  Every produced raster
    records the factory as its ``factory``.

    Methods
    -------
    create_raster(number_of_bands, number_of_rows, number_of_columns, ...)
        Build an in-memory raster from loose arguments.
    create_from_config(config)
        Build an in-memory raster from a ``RasterConfig``.
    create_raster_from(other)
        Build an in-memory deep copy of another raster.
    create_proxy_raster(service, mapper)
        Wrap a raster service as a raster.
    create_mask(raster, row_index, column_index, number_of_rows, number_of_columns)
        Build a live window over a raster.

    Examples
    --------
    >>> factory = RasterFactory()
    >>> raster = factory.create_raster(3, 512, 640, [8, 8, 12])
    >>> raster.representation
    <RepresentationKind.INTEGER16: 'integer16'>
    >>> mask = factory.create_mask(raster, 10, 10, 64, 64)
    >>> str(mask)
    'Raster [64x64x3]'
    """

    def create_raster(self,
                      number_of_bands: int,
                      number_of_rows: int,
                      number_of_columns: int,
                      radiometric_resolutions: Union[int, Sequence[int], None] = None,
                      mapper=None,
                      format: Union[RasterFormat, str] = RasterFormat.ANY) -> Raster:
        """
        Create an in-memory raster.

        Parameters
        ----------
        number_of_bands : int
            Number of bands.  Must be >= 1.
        number_of_rows, number_of_columns : int
            Raster extent.  Must be >= 0.
        radiometric_resolutions : int, sequence of int, or None, optional
            One resolution per band, a single resolution for every band, or
            ``None`` for the format default.
        mapper : object or None, optional
            Coordinate mapper attached to the raster.
        format : RasterFormat or str, optional
            Sample format.  Default is ``RasterFormat.ANY``.

        Returns
        -------
        MemoryRaster

        Raises
        ------
        RasterError
            See ``RasterConfig`` for the checks and their order.
        pydantic.ValidationError
            If a resolution is not a whole number.
        """
        # numpy integers become ints, other values are left to RasterConfig
        if isinstance(radiometric_resolutions, numbers.Integral):
            radiometric_resolutions = int(radiometric_resolutions)
        elif (radiometric_resolutions is not None
              and not isinstance(radiometric_resolutions, numbers.Number)):
            radiometric_resolutions = [
                int(r) if isinstance(r, numbers.Integral) else r
                for r in radiometric_resolutions]

        config = RasterConfig(
            format=format,
            number_of_bands=number_of_bands,
            number_of_rows=number_of_rows,
            number_of_columns=number_of_columns,
            radiometric_resolutions=radiometric_resolutions,
            mapper=mapper,
        )
        return self.create_from_config(config)

    def create_from_config(self, config: RasterConfig) -> Raster:
        """
        Create an in-memory raster from a validated config.

        Parameters
        ----------
        config : RasterConfig
            Validated raster request.

        Returns
        -------
        MemoryRaster
            Zero-filled raster using the representation chosen by
            ``select_representation``.
        """
        representation = select_representation(config.format,
                                               config.radiometric_resolutions)
        if representation is None:
            raise InvalidFormatError(
                f"Unrecognized raster format: {config.format!r}")

        logger.debug("Creating %s raster [%dx%dx%d] for %s resolutions %s",
                     representation.value, config.number_of_rows,
                     config.number_of_columns, config.number_of_bands,
                     config.format.value, config.radiometric_resolutions)

        return MemoryRaster(
            factory=self,
            representation=representation,
            number_of_bands=config.number_of_bands,
            number_of_rows=config.number_of_rows,
            number_of_columns=config.number_of_columns,
            radiometric_resolutions=config.radiometric_resolutions,
            mapper=config.mapper,
        )

    def create_raster_from(self, other: Optional[Raster]) -> Raster:
        """
        Create an in-memory copy of another raster.

        The copy has the geometry, format, resolutions and mapper of
        *other* and a fresh storage holding the same samples.  Samples are
        copied band by band, row by row, column by column, through the
        integer accessors for integer copies and the floating accessors
        otherwise.

        Parameters
        ----------
        other : Raster
            Raster to copy.  Any raster works, including proxy and masked
            rasters.

        Returns
        -------
        MemoryRaster

        Raises
        ------
        NullSourceError
            If *other* is ``None``.
        """
        if other is None:
            raise NullSourceError("The other raster is None.")

        raster = self.create_raster(other.number_of_bands,
                                    other.number_of_rows,
                                    other.number_of_columns,
                                    list(other.radiometric_resolutions),
                                    mapper=other.mapper,
                                    format=other.format)

        if raster.format == RasterFormat.INTEGER:
            read, write = other.get_value, raster.set_value
        else:
            read, write = other.get_float_value, raster.set_float_value

        for band in range(raster.number_of_bands):
            for row in range(raster.number_of_rows):
                for col in range(raster.number_of_columns):
                    write(row, col, band, read(row, col, band))

        return raster

    def create_proxy_raster(self, service, mapper=None) -> Raster:
        """
        Create a raster backed by a raster service.

        Parameters
        ----------
        service : RasterService
            Service owning the samples.  Its geometry is not validated.
        mapper : object or None, optional
            Coordinate mapper attached to the raster.

        Returns
        -------
        ProxyRaster

        Raises
        ------
        NullSourceError
            If *service* is ``None``.
        """
        raster = ProxyRaster(service, mapper=mapper, factory=self)
        logger.debug("Created proxy %s", raster)
        return raster

    def create_mask(self, raster: Optional[Raster], row_index: int,
                    column_index: int, number_of_rows: int,
                    number_of_columns: int) -> Raster:
        """
        Create a live window over a raster.

        Parameters
        ----------
        raster : Raster
            Source raster.
        row_index, column_index : int
            Window origin in source coordinates.
        number_of_rows, number_of_columns : int
            Window extent.

        Returns
        -------
        MaskedRaster

        Raises
        ------
        NullSourceError
            If *raster* is ``None``.
        InvalidWindowError
            If the window does not fit inside *raster*.
        """
        mask = MaskedRaster(raster, row_index, column_index, number_of_rows,
                            number_of_columns, factory=self)
        logger.debug("Created mask %s at (%d, %d) over %s", mask, row_index,
                     column_index, raster)
        return mask


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)

    factory = RasterFactory()
    raster = factory.create_raster(2, 4, 4, [8, 12])
    print(f"{raster} backed by {raster.representation.value}")

    mask = factory.create_mask(raster, 1, 1, 2, 2)
    mask.set_value(0, 0, 0, 7)
    print(f"Source value at (1, 1): {raster.get_value(1, 1, 0)}")

    copy = factory.create_raster_from(raster)
    print(f"Copy value at (1, 1): {copy.get_value(1, 1, 0)}")
