from typing import Optional, Sequence

from .RasterFormat import RasterFormat, RepresentationKind

DEFAULT_RADIOMETRIC_RESOLUTION = 16
DEFAULT_FLOAT_RADIOMETRIC_RESOLUTION = 32

# (upper bound on the widest band resolution, representation), narrowest first
_INTEGER_TIERS = (
    (8, RepresentationKind.INTEGER8),
    (16, RepresentationKind.INTEGER16),
    (32, RepresentationKind.INTEGER32),
)
_FLOATING_TIERS = (
    (32, RepresentationKind.FLOAT32),
)

_TIERS = {
    RasterFormat.ANY: _INTEGER_TIERS,
    RasterFormat.INTEGER: _INTEGER_TIERS,
    RasterFormat.FLOATING: _FLOATING_TIERS,
}


def default_resolution(format: RasterFormat) -> int:
    """Return the per-band resolution used when none is requested."""
    if format == RasterFormat.FLOATING:
        return DEFAULT_FLOAT_RADIOMETRIC_RESOLUTION
    return DEFAULT_RADIOMETRIC_RESOLUTION


def select_representation(
    format: RasterFormat,
    radiometric_resolutions: Optional[Sequence[int]] = None
) -> Optional[RepresentationKind]:
    """
    Pick the narrowest representation able to hold every band.

    Parameters
    ----------
    format : RasterFormat
        Requested sample format.
    radiometric_resolutions : sequence of int or None, optional
        Validated per-band resolutions.  ``None`` uses the format default.

    Returns
    -------
    RepresentationKind or None
        The selected kind.  Resolutions wider than every tier of the format
        fall back to ``FLOAT64``, including integer requests above 32 bits.
        ``None`` only for a value that is not a ``RasterFormat``.
    """
    tiers = _TIERS.get(format)
    if tiers is None:
        return None

    if radiometric_resolutions:
        widest = max(radiometric_resolutions)
    else:
        widest = default_resolution(format)

    for bits, kind in tiers:
        if widest <= bits:
            return kind
    return RepresentationKind.FLOAT64
