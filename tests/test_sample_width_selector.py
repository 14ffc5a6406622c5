import pytest

from SpectralRaster import RasterFormat, RepresentationKind, select_representation
from SpectralRaster.SampleWidthSelector import default_resolution


@pytest.mark.parametrize("fmt", [RasterFormat.ANY, RasterFormat.INTEGER])
@pytest.mark.parametrize("resolution, expected", [
    (1, RepresentationKind.INTEGER8),
    (8, RepresentationKind.INTEGER8),
    (9, RepresentationKind.INTEGER16),
    (16, RepresentationKind.INTEGER16),
    (17, RepresentationKind.INTEGER32),
    (32, RepresentationKind.INTEGER32),
    (33, RepresentationKind.FLOAT64),
    (64, RepresentationKind.FLOAT64),
])
def test_integer_tiers(fmt, resolution, expected):
    assert select_representation(fmt, [resolution]) == expected


@pytest.mark.parametrize("resolution, expected", [
    (1, RepresentationKind.FLOAT32),
    (32, RepresentationKind.FLOAT32),
    (33, RepresentationKind.FLOAT64),
    (64, RepresentationKind.FLOAT64),
])
def test_floating_tiers(resolution, expected):
    assert select_representation(RasterFormat.FLOATING, [resolution]) == expected


def test_widest_band_decides():
    kind = select_representation(RasterFormat.INTEGER, [1, 3, 12, 8])
    assert kind == RepresentationKind.INTEGER16


def test_defaults_without_resolutions():
    assert select_representation(RasterFormat.ANY) == RepresentationKind.INTEGER16
    assert select_representation(RasterFormat.INTEGER, None) == RepresentationKind.INTEGER16
    assert select_representation(RasterFormat.FLOATING) == RepresentationKind.FLOAT32
    assert default_resolution(RasterFormat.FLOATING) == 32
    assert default_resolution(RasterFormat.ANY) == 16


def test_unknown_format_selects_nothing():
    assert select_representation("bogus", [8]) is None
