import pytest

from SpectralRaster import (
    InvalidFormatError,
    InvalidGeometryError,
    InvalidResolutionError,
    InvalidWindowError,
    NullSourceError,
    RasterConfig,
    RasterError,
    RasterFormat,
    ResolutionCountMismatchError,
)
from SpectralRaster.RasterValidation import (
    validate_format,
    validate_geometry,
    validate_resolutions,
    validate_window,
)


class Extent:
    def __init__(self, rows, cols):
        self.number_of_rows = rows
        self.number_of_columns = cols


@pytest.mark.parametrize("bands, rows, cols", [
    (0, 1, 1),
    (-3, 1, 1),
    (1, -1, 1),
    (1, 1, -1),
])
def test_invalid_geometry(bands, rows, cols):
    with pytest.raises(InvalidGeometryError):
        validate_geometry(bands, rows, cols)


def test_empty_extent_is_valid():
    validate_geometry(1, 0, 0)


def test_resolution_count_mismatch():
    with pytest.raises(ResolutionCountMismatchError):
        validate_resolutions(2, [5])


@pytest.mark.parametrize("resolutions", [[0], [65], [8, -1], [8, 100]])
def test_resolution_out_of_range(resolutions):
    with pytest.raises(InvalidResolutionError):
        validate_resolutions(len(resolutions), resolutions)


def test_missing_resolutions_are_valid():
    validate_resolutions(3, None)


def test_first_violation_wins():
    # both the band count and the resolutions are wrong
    with pytest.raises(InvalidGeometryError):
        RasterConfig(number_of_bands=0, number_of_rows=1,
                     number_of_columns=1, radiometric_resolutions=[0])
    with pytest.raises(InvalidGeometryError):
        RasterConfig(number_of_bands=1, number_of_rows=-1,
                     number_of_columns=-1, radiometric_resolutions=[99])
    with pytest.raises(ResolutionCountMismatchError):
        RasterConfig(number_of_bands=2, number_of_rows=1,
                     number_of_columns=1, radiometric_resolutions=[0])


def test_format_coercion():
    assert validate_format("Floating") == RasterFormat.FLOATING
    assert validate_format(RasterFormat.ANY) == RasterFormat.ANY
    with pytest.raises(InvalidFormatError):
        validate_format("complex")
    with pytest.raises(InvalidFormatError):
        validate_format(3)


@pytest.mark.parametrize("row, col, rows, cols", [
    (-1, 0, 1, 1),
    (4, 0, 0, 1),
    (0, -1, 1, 1),
    (0, 4, 1, 0),
    (0, 0, -1, 1),
    (3, 0, 2, 1),
    (0, 0, 1, -1),
    (0, 2, 1, 3),
])
def test_invalid_window(row, col, rows, cols):
    with pytest.raises(InvalidWindowError):
        validate_window(Extent(4, 4), row, col, rows, cols)


def test_window_on_missing_source():
    with pytest.raises(NullSourceError):
        validate_window(None, 0, 0, 1, 1)


def test_full_window_is_valid():
    validate_window(Extent(4, 4), 0, 0, 4, 4)


def test_errors_share_a_base():
    for error in (InvalidGeometryError, InvalidResolutionError,
                  ResolutionCountMismatchError, NullSourceError,
                  InvalidWindowError, InvalidFormatError):
        assert issubclass(error, RasterError)
