from .Raster import Raster
from .RasterFormat import REPRESENTATIONS, RasterFormat, RepresentationKind
from .RasterValidation import validate_geometry, validate_resolutions
import numpy as np
from pydantic import PrivateAttr, model_validator


class MemoryRaster(Raster):
    """
    In-memory raster backed by one fixed-width numpy array.

    The storage width comes from ``representation`` and is shared by all
    bands, so a band may hold more bits than its radiometric resolution.
    Samples start at zero.  Geometry and resolutions are checked on
    construction, so a directly built raster obeys the same rules as one
    from ``RasterFactory``.

    Parameters
    ----------
    representation : RepresentationKind
        Storage kind; also fixes the raster ``format``.

    Raises
    ------
    InvalidGeometryError
        If a band, row or column count is out of range.
    ResolutionCountMismatchError
        If there is not exactly one resolution per band.
    InvalidResolutionError
        If a resolution is outside ``[1, 64]``.

    Attributes
    ----------
    _values : np.ndarray
        Samples, shape ``(bands, rows, columns)``, dtype of the
        representation.

    Notes
    -----
    Integer writes into integer storage wrap around at the storage width,
    floating writes into integer storage are truncated toward zero first.
    Integer reads from floating storage are truncated toward zero.

    Examples
    --------
    >>> raster = MemoryRaster(representation=RepresentationKind.INTEGER8,
    ...                       number_of_bands=1, number_of_rows=2,
    ...                       number_of_columns=2,
    ...                       radiometric_resolutions=[8])
    >>> raster.set_value(0, 1, 0, 300)
    >>> raster.get_value(0, 1, 0)
    44
    """
    representation: RepresentationKind

    _values: np.ndarray = PrivateAttr()
    _mask: int = PrivateAttr(default=0)

    @model_validator(mode="before")
    @classmethod
    def take_format_from_representation(cls, data):
        if isinstance(data, dict) and "representation" in data:
            try:
                kind = RepresentationKind(data["representation"])
            except ValueError:
                # left for the field validation to report
                return data
            data = dict(data, format=REPRESENTATIONS[kind].format)
        return data

    def model_post_init(self, __context):
        validate_geometry(self.number_of_bands, self.number_of_rows,
                          self.number_of_columns)
        validate_resolutions(self.number_of_bands, self.radiometric_resolutions)

        storage = REPRESENTATIONS[self.representation]
        self._values = np.zeros(
            (self.number_of_bands, self.number_of_rows, self.number_of_columns),
            dtype=storage.dtype)
        if storage.format == RasterFormat.INTEGER:
            self._mask = (1 << storage.bits) - 1

    @property
    def _is_integer(self) -> bool:
        return self.format == RasterFormat.INTEGER

    def as_array(self) -> np.ndarray:
        """Return a read-only view of the samples, ``(bands, rows, columns)``."""
        view = self._values.view()
        view.flags.writeable = False
        return view

    def get_histogram_values(self, band_index: int) -> np.ndarray:
        self._check_band(band_index)
        self._check_integer_format()
        return self._count_samples(
            self._values[band_index].astype(np.int64), band_index)

    def _read_value(self, row_index, column_index, band_index) -> int:
        return int(self._values[band_index, row_index, column_index])

    def _write_value(self, row_index, column_index, band_index, value):
        if self._is_integer:
            self._values[band_index, row_index, column_index] = int(value) & self._mask
        else:
            self._values[band_index, row_index, column_index] = float(value)

    def _read_float_value(self, row_index, column_index, band_index) -> float:
        return float(self._values[band_index, row_index, column_index])

    def _write_float_value(self, row_index, column_index, band_index, value):
        if self._is_integer:
            self._values[band_index, row_index, column_index] = int(value) & self._mask
        else:
            self._values[band_index, row_index, column_index] = float(value)
