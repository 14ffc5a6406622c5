import math
from typing import Any, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator


class RasterMapper(BaseModel):
    """
    Affine mapping between raster cell indices and world coordinates.

    Row indices grow downwards, so a north-up raster has a negative
    ``cell_height``.

    Parameters
    ----------
    origin_x, origin_y : float
        World coordinate of the upper-left corner of cell ``(0, 0)``.
    cell_width : float
        Size of one column along the x axis.  Must not be zero.
    cell_height : float
        Size of one row along the y axis.  Must not be zero.

    Examples
    --------
    >>> mapper = RasterMapper(origin_x=500.0, origin_y=1000.0,
    ...                       cell_width=10.0, cell_height=-10.0)
    >>> mapper.map_coordinate(2, 3)
    (530.0, 980.0)
    >>> mapper.map_raster(535.0, 975.0)
    (2, 3)
    """
    model_config = ConfigDict(frozen=True)

    origin_x: float = 0.0
    origin_y: float = 0.0
    cell_width: float = Field(default=1.0, description="Column size")
    cell_height: float = Field(default=-1.0, description="Row size")

    @field_validator("cell_width", "cell_height")
    @classmethod
    def validate_cell_size(cls, v):
        if v == 0:
            raise ValueError("Cell size must not be zero")
        return v

    def map_coordinate(self, row_index: float,
                       column_index: float) -> Tuple[float, float]:
        """Return the world coordinate of the corner of a cell."""
        return (self.origin_x + column_index * self.cell_width,
                self.origin_y + row_index * self.cell_height)

    def map_raster(self, x: float, y: float) -> Tuple[int, int]:
        """Return the ``(row, column)`` of the cell containing ``(x, y)``."""
        row_index = math.floor((y - self.origin_y) / self.cell_height)
        column_index = math.floor((x - self.origin_x) / self.cell_width)
        return row_index, column_index

    def shifted(self, row_offset: int, column_offset: int) -> "RasterMapper":
        """Return the mapper of a window starting at the given offsets."""
        x, y = self.map_coordinate(row_offset, column_offset)
        return self.model_copy(update={"origin_x": x, "origin_y": y})


class WindowMapper(BaseModel):
    """
    Mapper of a window, built on the mapper of the raster it is cut from.

    Works with any mapper offering ``map_coordinate(row, col)`` and
    ``map_raster(x, y)``: window indices are moved by the window origin
    before they reach the wrapped mapper, and the indices it returns are
    moved back.

    Parameters
    ----------
    mapper : object
        Mapper of the source raster.
    row_offset, column_offset : int
        Window origin in source coordinates.
    """
    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    mapper: Any
    row_offset: int = 0
    column_offset: int = 0

    def map_coordinate(self, row_index: float,
                       column_index: float) -> Tuple[float, float]:
        return self.mapper.map_coordinate(row_index + self.row_offset,
                                          column_index + self.column_offset)

    def map_raster(self, x: float, y: float) -> Tuple[int, int]:
        row_index, column_index = self.mapper.map_raster(x, y)
        return row_index - self.row_offset, column_index - self.column_offset

    def shifted(self, row_offset: int, column_offset: int) -> "WindowMapper":
        return self.model_copy(update={
            "row_offset": self.row_offset + row_offset,
            "column_offset": self.column_offset + column_offset,
        })
