from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from typing import Any, List, Optional, Union

from .RasterFormat import RasterFormat
from .RasterValidation import (
    validate_format,
    validate_geometry,
    validate_resolution_range,
    validate_resolutions,
)
from .SampleWidthSelector import default_resolution


class RasterConfig(BaseModel):
    """
    Request for one in-memory raster.

    Pass an instance of this class to ``RasterFactory.create_from_config()``.
    Checks run on construction, in this order: format, band count, row
    count, column count, resolution count, resolution range.  The first
    failing check raises.

    Parameters
    ----------
    format : RasterFormat or str, optional
        Sample format.  Default is ``RasterFormat.ANY``.
    number_of_bands : int
        Number of bands.  Must be >= 1.
    number_of_rows : int
        Number of rows.  Must be >= 0.
    number_of_columns : int
        Number of columns.  Must be >= 0.
    radiometric_resolutions : int, list of int, or None, optional
        Bit depth per band, each in ``[1, 64]``.

        * ``list`` — one entry per band.
        * ``int``  — applied to every band.
        * ``None`` — format default for every band (16 for any/integer,
          32 for floating).

        Normalized to a per-band list after validation.
    mapper : object or None, optional
        Coordinate mapper attached to the raster.  Default is ``None``.

    Raises
    ------
    InvalidFormatError
        If *format* is not a known raster format.
    InvalidGeometryError
        If a band, row or column count is out of range.
    ResolutionCountMismatchError
        If the resolution list length differs from *number_of_bands*.
    InvalidResolutionError
        If a resolution is outside ``[1, 64]``.
    """
    model_config = ConfigDict(arbitrary_types_allowed=True)

    format: RasterFormat = Field(
        default=RasterFormat.ANY,
        description="Sample format"
    )
    number_of_bands: int = Field(..., description="Number of bands")
    number_of_rows: int = Field(..., description="Number of rows")
    number_of_columns: int = Field(..., description="Number of columns")
    radiometric_resolutions: Optional[Union[int, List[int]]] = Field(
        default=None,
        description="Bit depth per band"
    )
    mapper: Optional[Any] = None

    @field_validator("format", mode="before")
    @classmethod
    def coerce_format(cls, v):
        return validate_format(v)

    @model_validator(mode="after")
    def validate_request(self):
        validate_geometry(self.number_of_bands, self.number_of_rows,
                          self.number_of_columns)

        resolutions = self.radiometric_resolutions
        if resolutions is None:
            resolutions = [default_resolution(self.format)] * self.number_of_bands
        elif isinstance(resolutions, int):
            validate_resolution_range([resolutions])
            resolutions = [resolutions] * self.number_of_bands
        else:
            validate_resolutions(self.number_of_bands, resolutions)

        self.radiometric_resolutions = resolutions
        return self
