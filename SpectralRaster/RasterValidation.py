### Raster Validation ###
# File : RasterValidation.py

from typing import Optional, Sequence

from .RasterErrors import (
    InvalidFormatError,
    InvalidGeometryError,
    InvalidResolutionError,
    InvalidWindowError,
    NullSourceError,
    ResolutionCountMismatchError,
)
from .RasterFormat import RasterFormat

MIN_RADIOMETRIC_RESOLUTION = 1
MAX_RADIOMETRIC_RESOLUTION = 64


def validate_format(value) -> RasterFormat:
    """
    Coerce *value* to a ``RasterFormat``.

    Parameters
    ----------
    value : RasterFormat or str
        Format member or its string value (case-insensitive).

    Returns
    -------
    RasterFormat

    Raises
    ------
    InvalidFormatError
        If *value* names no known format.
    """
    if isinstance(value, RasterFormat):
        return value
    if isinstance(value, str):
        try:
            return RasterFormat(value.lower())
        except ValueError:
            pass
    raise InvalidFormatError(f"Unrecognized raster format: {value!r}")


def validate_geometry(number_of_bands: int, number_of_rows: int,
                      number_of_columns: int):
    """
    Check the band, row and column counts of a raster request.

    Raises
    ------
    InvalidGeometryError
        On the first count out of range, in band, row, column order.
    """
    if number_of_bands < 1:
        raise InvalidGeometryError("The number of bands is less than 1.")
    if number_of_rows < 0:
        raise InvalidGeometryError("The number of rows is less than 0.")
    if number_of_columns < 0:
        raise InvalidGeometryError("The number of columns is less than 0.")


def validate_resolutions(number_of_bands: int,
                         radiometric_resolutions: Optional[Sequence[int]]):
    """
    Check a per-band resolution list against the band count.

    ``None`` is valid and means the format default applies to every band.

    Raises
    ------
    ResolutionCountMismatchError
        If the list length differs from *number_of_bands*.
    InvalidResolutionError
        If any resolution is below 1 or above 64.
    """
    if radiometric_resolutions is None:
        return

    if len(radiometric_resolutions) != number_of_bands:
        raise ResolutionCountMismatchError(
            "The number of radiometric resolutions ({0}) does not match "
            "the number of bands ({1}).".format(len(radiometric_resolutions),
                                                number_of_bands))
    validate_resolution_range(radiometric_resolutions)


def validate_resolution_range(radiometric_resolutions: Sequence[int]):
    if any(r < MIN_RADIOMETRIC_RESOLUTION for r in radiometric_resolutions):
        raise InvalidResolutionError(
            "The radiometric resolution is less than the minimum of "
            f"{MIN_RADIOMETRIC_RESOLUTION}.")
    if any(r > MAX_RADIOMETRIC_RESOLUTION for r in radiometric_resolutions):
        raise InvalidResolutionError(
            "The radiometric resolution exceeds the maximum of "
            f"{MAX_RADIOMETRIC_RESOLUTION}.")


def validate_window(raster, row_index: int, column_index: int,
                    number_of_rows: int, number_of_columns: int):
    """
    Check that a rectangular window lies inside *raster*.

    Parameters
    ----------
    raster : Raster or None
        Source raster of the window.
    row_index, column_index : int
        Window origin in source coordinates.
    number_of_rows, number_of_columns : int
        Window extent.

    Raises
    ------
    NullSourceError
        If *raster* is ``None``.
    InvalidWindowError
        If the origin is outside the source or the extent is negative or
        runs past the source edge.
    """
    if raster is None:
        raise NullSourceError("The source raster is None.")

    if row_index < 0:
        raise InvalidWindowError("The starting row index is less than 0.")
    if row_index >= raster.number_of_rows:
        raise InvalidWindowError(
            "The starting row index is equal to or greater than the number "
            "of rows in the source.")
    if column_index < 0:
        raise InvalidWindowError("The starting column index is less than 0.")
    if column_index >= raster.number_of_columns:
        raise InvalidWindowError(
            "The starting column index is equal to or greater than the "
            "number of columns in the source.")
    if number_of_rows < 0:
        raise InvalidWindowError("The number of rows is less than 0.")
    if row_index + number_of_rows > raster.number_of_rows:
        raise InvalidWindowError(
            "The starting row index and the number of rows exceed the "
            "number of rows in the source.")
    if number_of_columns < 0:
        raise InvalidWindowError("The number of columns is less than 0.")
    if column_index + number_of_columns > raster.number_of_columns:
        raise InvalidWindowError(
            "The starting column index and the number of columns exceed the "
            "number of columns in the source.")
