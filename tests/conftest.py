import numpy as np
import pytest

from SpectralRaster import RasterFactory, RasterMapper, RasterService


class ArrayRasterService(RasterService):
    """Raster service holding its samples in a numpy array."""

    def __init__(self, format="integer", bands=2, rows=3, cols=4,
                 resolutions=None, readable=True, writable=True):
        self._format = format
        self._resolutions = resolutions or [16] * bands
        self._readable = readable
        self._writable = writable
        self.data = np.zeros((bands, rows, cols), dtype=np.float64)
        self.calls = []

    @property
    def format(self):
        return self._format

    @property
    def number_of_bands(self):
        return self.data.shape[0]

    @property
    def number_of_rows(self):
        return self.data.shape[1]

    @property
    def number_of_columns(self):
        return self.data.shape[2]

    @property
    def radiometric_resolutions(self):
        return self._resolutions

    @property
    def is_readable(self):
        return self._readable

    @property
    def is_writable(self):
        return self._writable

    def read_value(self, row_index, column_index, band_index):
        self.calls.append(("read_value", row_index, column_index, band_index))
        return int(self.data[band_index, row_index, column_index])

    def read_float_value(self, row_index, column_index, band_index):
        self.calls.append(
            ("read_float_value", row_index, column_index, band_index))
        return float(self.data[band_index, row_index, column_index])

    def write_value(self, row_index, column_index, band_index, value):
        self.calls.append(("write_value", row_index, column_index, band_index))
        self.data[band_index, row_index, column_index] = value

    def write_float_value(self, row_index, column_index, band_index, value):
        self.calls.append(
            ("write_float_value", row_index, column_index, band_index))
        self.data[band_index, row_index, column_index] = value

    def __str__(self):
        return "ArrayRasterService"


@pytest.fixture
def factory():
    return RasterFactory()


@pytest.fixture
def mapper():
    return RasterMapper(origin_x=500.0, origin_y=1000.0,
                        cell_width=10.0, cell_height=-10.0)


@pytest.fixture
def service():
    return ArrayRasterService()


@pytest.fixture
def make_service():
    return ArrayRasterService
