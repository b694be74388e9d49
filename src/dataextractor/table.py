"""
In-memory representation of a loaded lookup table.

A lookup table holds one numeric payload column and any number of
coordinate columns keying its rows. Coordinates are grouped into
dimensions; consumers find the coordinates of a dimension through
``dim_to_coords`` and the dimension of a coordinate through
``coord_to_dim``.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

import numpy as np
import pandas as pd

from dataextractor.columns import ColumnType, TypedColumn
from dataextractor.missing import MISSING_FLOAT, MISSING_INT, MISSING_STRING


def _read_only(values: np.ndarray) -> np.ndarray:
    values.flags.writeable = False
    return values


def _mask_missing_floats(values: np.ndarray) -> np.ndarray:
    return np.where(values == MISSING_FLOAT, np.float32(np.nan), values).astype(np.float32)


@dataclass(frozen=True)
class CoordinateColumn:
    """Immutable values of one coordinate column."""

    column_type: ColumnType
    values: np.ndarray

    @classmethod
    def from_column(cls, column: TypedColumn) -> "CoordinateColumn":
        """Freeze a filled typed column."""
        return cls(column_type=column.column_type, values=_read_only(column.to_array()))

    def __len__(self) -> int:
        return len(self.values)

    def to_series(self, name: str) -> pd.Series:
        """Convert to a pandas Series with missing values as NA."""
        if self.column_type is ColumnType.INTEGER:
            values = pd.arrays.IntegerArray(self.values.copy(), self.values == MISSING_INT)
            return pd.Series(values, name=name)
        if self.column_type is ColumnType.FLOAT:
            return pd.Series(_mask_missing_floats(self.values), name=name)
        values = np.where(self.values == MISSING_STRING, None, self.values)
        return pd.Series(values, name=name, dtype=object)


@dataclass(frozen=True)
class LookupTable:
    """
    Lookup table loaded from a file.

    Attributes:
        payload: Read-only float32 array of shape (rows, payload dims).
        coord_values: Coordinate name -> column values.
        coord_to_dim: Coordinate name -> index of the dimension it keys.
        dim_to_coords: Coordinate names keying each dimension, in file order.
        payload_name: Canonical name of the payload column.
    """

    payload: np.ndarray
    coord_values: Mapping[str, CoordinateColumn]
    coord_to_dim: Mapping[str, int]
    dim_to_coords: tuple[tuple[str, ...], ...]
    payload_name: str = "payload"

    @classmethod
    def build(
        cls,
        payload: np.ndarray,
        coordinates: dict[str, CoordinateColumn],
        dimensions: list[list[str]],
        payload_name: str = "payload",
    ) -> "LookupTable":
        """
        Assemble a table, freezing all containers.

        Args:
            payload: Payload values of shape (rows, payload dims).
            coordinates: Coordinate columns by name.
            dimensions: Coordinate names for each dimension.
            payload_name: Canonical name of the payload column.

        Returns:
            Immutable lookup table.
        """
        coord_to_dim = {
            name: dim for dim, names in enumerate(dimensions) for name in names
        }
        return cls(
            payload=_read_only(payload),
            coord_values=MappingProxyType(dict(coordinates)),
            coord_to_dim=MappingProxyType(coord_to_dim),
            dim_to_coords=tuple(tuple(names) for names in dimensions),
            payload_name=payload_name,
        )

    @property
    def num_rows(self) -> int:
        """Number of rows along the first dimension."""
        return int(self.payload.shape[0])

    @property
    def num_dims(self) -> int:
        """Number of coordinate dimensions."""
        return len(self.dim_to_coords)

    @property
    def coordinate_names(self) -> list[str]:
        """Coordinate names ordered by dimension, then file order."""
        return [name for names in self.dim_to_coords for name in names]

    def to_frame(self) -> pd.DataFrame:
        """
        Export coordinates and payload as a DataFrame.

        Only tables whose coordinates all key the first dimension can be
        exported row by row.

        Returns:
            DataFrame with one column per coordinate followed by the payload,
            missing values represented as NA.
        """
        if self.num_dims > 1:
            msg = "Only single-dimension tables can be exported as a DataFrame"
            raise ValueError(msg)

        columns = [
            self.coord_values[name].to_series(name) for name in self.coordinate_names
        ]
        payload = _mask_missing_floats(self.payload[:, 0])
        columns.append(pd.Series(payload, name=self.payload_name))
        return pd.concat(columns, axis=1)
