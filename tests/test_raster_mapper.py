import pytest

from SpectralRaster import RasterMapper, WindowMapper


def test_map_coordinate(mapper):
    assert mapper.map_coordinate(0, 0) == (500.0, 1000.0)
    assert mapper.map_coordinate(2, 3) == (530.0, 980.0)


def test_map_raster_floors(mapper):
    assert mapper.map_raster(535.0, 975.0) == (2, 3)
    assert mapper.map_raster(499.0, 1001.0) == (-1, -1)


def test_shifted(mapper):
    shifted = mapper.shifted(1, 2)
    assert shifted.map_coordinate(0, 0) == mapper.map_coordinate(1, 2)
    assert shifted.cell_width == mapper.cell_width
    assert mapper.origin_x == 500.0


def test_zero_cell_size():
    with pytest.raises(ValueError):
        RasterMapper(cell_width=0.0)


def test_window_mapper_offsets(mapper):
    window = WindowMapper(mapper=mapper, row_offset=2, column_offset=1)

    assert window.map_coordinate(0, 0) == mapper.map_coordinate(2, 1)
    assert window.map_coordinate(1, 1) == (520.0, 970.0)
    assert window.map_raster(525.0, 965.0) == (1, 1)


def test_window_mapper_shift_adds_offsets(mapper):
    window = WindowMapper(mapper=mapper, row_offset=1, column_offset=1)
    shifted = window.shifted(2, 3)

    assert (shifted.row_offset, shifted.column_offset) == (3, 4)
    assert shifted.mapper is mapper
    assert (window.row_offset, window.column_offset) == (1, 1)
