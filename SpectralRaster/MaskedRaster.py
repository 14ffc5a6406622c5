### MaskedRaster Class ###
# File : MaskedRaster.py

import logging

from pydantic import Field

from .Raster import Raster
from .RasterMapper import RasterMapper, WindowMapper
from .RasterValidation import validate_window

logger = logging.getLogger(__name__)


class MaskedRaster(Raster):
    """
    Live rectangular window over another raster.

    The mask owns no samples.  Local cell ``(r, c)`` addresses source cell
    ``(row_offset + r, column_offset + c)``, so writes through the mask are
    visible in the source and the other way round.

    The source mapper is re-anchored at the window origin: a
    ``RasterMapper`` is shifted, any other mapper with ``map_coordinate``
    and ``map_raster`` is wrapped in a ``WindowMapper``.  A mapper with
    neither is handed to the mask unchanged.

    Parameters
    ----------
    source : Raster
        Raster the window is cut from.
    row_index, column_index : int
        Window origin in source coordinates.
    number_of_rows, number_of_columns : int
        Window extent.
    factory : RasterFactory or None, optional
        Factory recorded as the creator of the mask.

    Raises
    ------
    NullSourceError
        If *source* is ``None``.
    InvalidWindowError
        If the window does not fit inside *source*.
    """
    source: Raster = Field(..., exclude=True, repr=False, frozen=True)
    row_offset: int = Field(..., frozen=True)
    column_offset: int = Field(..., frozen=True)

    def __init__(self, source, row_index, column_index, number_of_rows,
                 number_of_columns, factory=None):
        validate_window(source, row_index, column_index, number_of_rows,
                        number_of_columns)

        super().__init__(
            factory=factory,
            source=source,
            row_offset=row_index,
            column_offset=column_index,
            format=source.format,
            number_of_bands=source.number_of_bands,
            number_of_rows=number_of_rows,
            number_of_columns=number_of_columns,
            radiometric_resolutions=list(source.radiometric_resolutions),
            mapper=self._window_mapper(source.mapper, row_index, column_index),
        )

    @staticmethod
    def _window_mapper(mapper, row_index, column_index):
        if mapper is None:
            return None
        if isinstance(mapper, (RasterMapper, WindowMapper)):
            return mapper.shifted(row_index, column_index)
        if hasattr(mapper, "map_coordinate") and hasattr(mapper, "map_raster"):
            return WindowMapper(mapper=mapper, row_offset=row_index,
                                column_offset=column_index)

        logger.debug("Mapper %s has no cell mapping, passed to the mask "
                     "unchanged", type(mapper).__name__)
        return mapper

    @property
    def is_readable(self) -> bool:
        return self.source.is_readable

    @property
    def is_writable(self) -> bool:
        return self.source.is_writable

    def _read_value(self, row_index, column_index, band_index) -> int:
        return self.source.get_value(self.row_offset + row_index,
                                     self.column_offset + column_index,
                                     band_index)

    def _write_value(self, row_index, column_index, band_index, value):
        self.source.set_value(self.row_offset + row_index,
                              self.column_offset + column_index, band_index,
                              value)

    def _read_float_value(self, row_index, column_index, band_index) -> float:
        return self.source.get_float_value(self.row_offset + row_index,
                                           self.column_offset + column_index,
                                           band_index)

    def _write_float_value(self, row_index, column_index, band_index, value):
        self.source.set_float_value(self.row_offset + row_index,
                                    self.column_offset + column_index,
                                    band_index, value)
