from abc import ABC, abstractmethod
from typing import Sequence

from .RasterFormat import RasterFormat


class RasterService(ABC):
    """
    Data service owning the samples behind a ``ProxyRaster``.

    Implementations expose the raster geometry and per-cell reads and
    writes.  Any object providing the same attributes and methods can be
    proxied; subclassing is optional.
    """

    @property
    @abstractmethod
    def format(self) -> RasterFormat:
        pass

    @property
    @abstractmethod
    def number_of_bands(self) -> int:
        pass

    @property
    @abstractmethod
    def number_of_rows(self) -> int:
        pass

    @property
    @abstractmethod
    def number_of_columns(self) -> int:
        pass

    @property
    @abstractmethod
    def radiometric_resolutions(self) -> Sequence[int]:
        pass

    @property
    def is_readable(self) -> bool:
        return True

    @property
    def is_writable(self) -> bool:
        return True

    @abstractmethod
    def read_value(self, row_index: int, column_index: int,
                   band_index: int) -> int:
        pass

    @abstractmethod
    def read_float_value(self, row_index: int, column_index: int,
                         band_index: int) -> float:
        pass

    @abstractmethod
    def write_value(self, row_index: int, column_index: int, band_index: int,
                    value: int):
        pass

    @abstractmethod
    def write_float_value(self, row_index: int, column_index: int,
                          band_index: int, value: float):
        pass
