### RasterBand Class ###
# File : RasterBand.py

from typing import Any

import numpy as np
from pydantic import BaseModel, ConfigDict, Field

from .RasterFormat import RasterFormat


class RasterBand(BaseModel):
    """
    Live view of one band of a raster.

    The view owns no samples.  Reads and writes go through the accessors
    of ``raster`` with ``band_index`` filled in, so they see and change the
    same cells as the raster itself, whatever storage backs it.

    Parameters
    ----------
    raster : Raster
        Raster the band belongs to.
    band_index : int
        Zero-based band index inside *raster*.

    Examples
    --------
    >>> band = raster.get_band(1)
    >>> band.set_value(0, 0, 9)
    >>> raster.get_value(0, 0, 1)
    9
    """
    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    raster: Any = Field(..., exclude=True, repr=False)
    band_index: int

    def __str__(self):
        return "Band {0} of {1}".format(self.band_index, self.raster)

    @property
    def format(self) -> RasterFormat:
        return self.raster.format

    @property
    def number_of_rows(self) -> int:
        return self.raster.number_of_rows

    @property
    def number_of_columns(self) -> int:
        return self.raster.number_of_columns

    @property
    def radiometric_resolution(self) -> int:
        return self.raster.radiometric_resolutions[self.band_index]

    @property
    def mapper(self):
        return self.raster.mapper

    def get_value(self, row_index: int, column_index: int) -> int:
        return self.raster.get_value(row_index, column_index, self.band_index)

    def set_value(self, row_index: int, column_index: int, value: int):
        self.raster.set_value(row_index, column_index, self.band_index, value)

    def get_float_value(self, row_index: int, column_index: int) -> float:
        return self.raster.get_float_value(row_index, column_index,
                                           self.band_index)

    def set_float_value(self, row_index: int, column_index: int,
                        value: float):
        self.raster.set_float_value(row_index, column_index, self.band_index,
                                    value)

    def get_nearest_value(self, row_index: int, column_index: int) -> int:
        return self.raster.get_nearest_value(row_index, column_index,
                                             self.band_index)

    def get_nearest_float_value(self, row_index: int,
                                column_index: int) -> float:
        return self.raster.get_nearest_float_value(row_index, column_index,
                                                   self.band_index)

    def get_histogram_values(self) -> np.ndarray:
        return self.raster.get_histogram_values(self.band_index)
