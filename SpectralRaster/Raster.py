### Raster Class ###
# File : Raster.py

from abc import ABC, abstractmethod
from typing import Any, List, Optional, Sequence, Tuple

import numpy as np
from pydantic import BaseModel, ConfigDict, Field

from .RasterBand import RasterBand
from .RasterErrors import UnmappedRasterError
from .RasterFormat import RasterFormat

# deeper bands get a histogram sized by their largest stored value
HISTOGRAM_FULL_RANGE_BITS = 16


class Raster(BaseModel, ABC):
    """
    Common interface of every raster produced by ``RasterFactory``.

    Samples are addressed by ``(row_index, column_index, band_index)``.
    Integer and floating accessors are both available on every raster; the
    ``format`` attribute tells which of the two families is authoritative.

    Attributes
    ----------
    factory : RasterFactory or None
        Factory that produced the raster.
    format : RasterFormat
        Sample format (``INTEGER`` or ``FLOATING`` once constructed).
    number_of_bands : int
        Number of bands, at least 1.
    number_of_rows : int
        Number of rows, at least 0.
    number_of_columns : int
        Number of columns, at least 0.
    radiometric_resolutions : tuple of int
        Bit depth of each band, one entry per band.
    mapper : object or None
        Coordinate mapper, passed through untouched.  Coordinate-based
        access requires ``map_coordinate(row, col)`` and
        ``map_raster(x, y)`` on it.
    """
    model_config = ConfigDict(arbitrary_types_allowed=True)

    factory: Optional[Any] = Field(default=None, exclude=True, repr=False,
                                   frozen=True)
    format: RasterFormat = Field(default=RasterFormat.ANY, frozen=True)
    number_of_bands: int = Field(..., frozen=True)
    number_of_rows: int = Field(..., frozen=True)
    number_of_columns: int = Field(..., frozen=True)
    radiometric_resolutions: Tuple[int, ...] = Field(..., frozen=True)
    mapper: Optional[Any] = Field(default=None, frozen=True)

    # rasters are mutable sample containers, compare by identity
    def __eq__(self, other):
        return self is other

    __hash__ = object.__hash__

    def __str__(self):
        return "Raster [{0}x{1}x{2}]".format(self.number_of_rows,
                                            self.number_of_columns,
                                            self.number_of_bands)

    @property
    def is_mapped(self) -> bool:
        return self.mapper is not None

    @property
    def is_readable(self) -> bool:
        return True

    @property
    def is_writable(self) -> bool:
        return True

    @property
    def coordinates(self) -> List[Optional[Tuple[float, float]]]:
        """
        World coordinates of the four raster corners, clockwise from the
        upper-left.  All entries are ``None`` for an unmapped raster.
        """
        if self.mapper is None:
            return [None] * 4
        rows, cols = self.number_of_rows, self.number_of_columns
        return [
            self.mapper.map_coordinate(0, 0),
            self.mapper.map_coordinate(0, cols),
            self.mapper.map_coordinate(rows, cols),
            self.mapper.map_coordinate(rows, 0),
        ]

    ### SINGLE SAMPLE ACCESS ###
    def get_value(self, row_index: int, column_index: int,
                  band_index: int) -> int:
        self._check_index(row_index, column_index, band_index)
        return self._read_value(row_index, column_index, band_index)

    def set_value(self, row_index: int, column_index: int, band_index: int,
                  value: int):
        self._check_index(row_index, column_index, band_index)
        self._write_value(row_index, column_index, band_index, value)

    def get_float_value(self, row_index: int, column_index: int,
                        band_index: int) -> float:
        self._check_index(row_index, column_index, band_index)
        return self._read_float_value(row_index, column_index, band_index)

    def set_float_value(self, row_index: int, column_index: int,
                        band_index: int, value: float):
        self._check_index(row_index, column_index, band_index)
        self._write_float_value(row_index, column_index, band_index, value)

    ### ALL BANDS OF ONE CELL ###
    def get_values(self, row_index: int, column_index: int) -> List[int]:
        return [self.get_value(row_index, column_index, band)
                for band in range(self.number_of_bands)]

    def set_values(self, row_index: int, column_index: int,
                   values: Sequence[int]):
        self._check_band_count(values)
        for band, value in enumerate(values):
            self.set_value(row_index, column_index, band, value)

    def get_float_values(self, row_index: int,
                         column_index: int) -> List[float]:
        return [self.get_float_value(row_index, column_index, band)
                for band in range(self.number_of_bands)]

    def set_float_values(self, row_index: int, column_index: int,
                         values: Sequence[float]):
        self._check_band_count(values)
        for band, value in enumerate(values):
            self.set_float_value(row_index, column_index, band, value)

    ### NEAREST CELL ###
    def get_nearest_value(self, row_index: int, column_index: int,
                          band_index: int) -> int:
        """Read the sample of the cell nearest to a possibly outside index."""
        row_index, column_index = self._clamp(row_index, column_index)
        return self.get_value(row_index, column_index, band_index)

    def get_nearest_float_value(self, row_index: int, column_index: int,
                                band_index: int) -> float:
        row_index, column_index = self._clamp(row_index, column_index)
        return self.get_float_value(row_index, column_index, band_index)

    ### WORLD COORDINATE ACCESS ###
    def get_value_at(self, coordinate: Tuple[float, float],
                     band_index: int) -> int:
        return self.get_value(*self._locate(coordinate), band_index)

    def set_value_at(self, coordinate: Tuple[float, float], band_index: int,
                     value: int):
        self.set_value(*self._locate(coordinate), band_index, value)

    def get_float_value_at(self, coordinate: Tuple[float, float],
                           band_index: int) -> float:
        return self.get_float_value(*self._locate(coordinate), band_index)

    def get_histogram_values(self, band_index: int) -> np.ndarray:
        """
        Count the occurrences of every sample value in one band.

        Parameters
        ----------
        band_index : int
            Zero-based band index.

        Returns
        -------
        np.ndarray
            1-D ``int64`` array; entry ``v`` is the number of cells holding
            ``v``.  For bands up to ``HISTOGRAM_FULL_RANGE_BITS`` deep the
            length is ``2 ** resolution`` (or more if a stored value is wider
            than the band resolution).  Deeper bands are sized by their
            largest stored value instead of the full value range.

        Raises
        ------
        TypeError
            If the raster is not of integer format.
        """
        self._check_band(band_index)
        self._check_integer_format()
        samples = np.fromiter(
            (self._read_value(row, col, band_index)
             for row in range(self.number_of_rows)
             for col in range(self.number_of_columns)),
            dtype=np.int64,
            count=self.number_of_rows * self.number_of_columns)
        return self._count_samples(samples, band_index)

    @property
    def histogram_values(self) -> List[np.ndarray]:
        """Histogram of every band, in band order."""
        return [self.get_histogram_values(band)
                for band in range(self.number_of_bands)]

    ### BAND VIEWS ###
    def get_band(self, band_index: int) -> RasterBand:
        """
        Return a live single-band view of the raster.

        Raises
        ------
        IndexError
            If *band_index* is outside ``[0, number_of_bands)``.
        """
        self._check_band(band_index)
        return RasterBand(raster=self, band_index=band_index)

    @property
    def bands(self) -> List[RasterBand]:
        return [RasterBand(raster=self, band_index=band)
                for band in range(self.number_of_bands)]

    def __getitem__(self, band_index: int) -> RasterBand:
        return self.get_band(band_index)

    def _count_samples(self, samples: np.ndarray,
                       band_index: int) -> np.ndarray:
        resolution = self.radiometric_resolutions[band_index]
        if resolution <= HISTOGRAM_FULL_RANGE_BITS:
            minlength = 1 << resolution
        else:
            minlength = 1
        return np.bincount(samples.ravel(), minlength=minlength)

    ### STORAGE HOOKS ###
    @abstractmethod
    def _read_value(self, row_index, column_index, band_index) -> int:
        pass

    @abstractmethod
    def _write_value(self, row_index, column_index, band_index, value):
        pass

    @abstractmethod
    def _read_float_value(self, row_index, column_index, band_index) -> float:
        pass

    @abstractmethod
    def _write_float_value(self, row_index, column_index, band_index, value):
        pass

    ### CHECKS ###
    def _check_index(self, row_index, column_index, band_index):
        if not 0 <= row_index < self.number_of_rows:
            raise IndexError(
                f"Row index {row_index} outside [0, {self.number_of_rows})")
        if not 0 <= column_index < self.number_of_columns:
            raise IndexError(f"Column index {column_index} outside "
                             f"[0, {self.number_of_columns})")
        self._check_band(band_index)

    def _check_band(self, band_index):
        if not 0 <= band_index < self.number_of_bands:
            raise IndexError(
                f"Band index {band_index} outside [0, {self.number_of_bands})")

    def _check_band_count(self, values):
        if len(values) != self.number_of_bands:
            raise ValueError(
                "Expected {0} values, one per band, got {1}".format(
                    self.number_of_bands, len(values)))

    def _check_integer_format(self):
        if self.format != RasterFormat.INTEGER:
            raise TypeError(
                "Histogram values are only defined for integer rasters")

    def _clamp(self, row_index, column_index):
        row_index = min(max(row_index, 0), self.number_of_rows - 1)
        column_index = min(max(column_index, 0), self.number_of_columns - 1)
        return row_index, column_index

    def _locate(self, coordinate):
        if self.mapper is None:
            raise UnmappedRasterError("The mapping of the raster is not defined.")
        row_index, column_index = self.mapper.map_raster(*coordinate)
        if not (0 <= row_index < self.number_of_rows
                and 0 <= column_index < self.number_of_columns):
            raise IndexError(f"Coordinate {coordinate} is not within the raster")
        return row_index, column_index
