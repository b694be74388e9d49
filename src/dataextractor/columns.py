"""
Typed column containers filled cell by cell from raw text.

Each column kind implements the same small interface, so the table
assembler can append cells without knowing which kind it holds.
"""

import re
from abc import ABC, abstractmethod
from enum import Enum
from typing import ClassVar

import numpy as np

from dataextractor.errors import MalformedNumericLiteralError, UnsupportedColumnTypeError
from dataextractor.missing import MISSING_VALUE_PLACEHOLDER, missing_value

_INTEGER_PATTERN = re.compile(r"[+-]?\d+", re.ASCII)
_FLOAT_PATTERN = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)

_INT32_MIN = int(np.iinfo(np.int32).min)
_INT32_MAX = int(np.iinfo(np.int32).max)
_FLOAT32_MAX = float(np.finfo(np.float32).max)


class ColumnType(str, Enum):
    """Storage type of a table column."""

    INTEGER = "integer"
    FLOAT = "float"
    STRING = "string"

    @classmethod
    def from_tag(cls, tag: str) -> "ColumnType":
        """
        Map a type tag from the second header row to a column type.

        Args:
            tag: Tag as written in the file.

        Returns:
            Matching column type.

        Raises:
            UnsupportedColumnTypeError: If the tag is not recognized.
        """
        try:
            return TYPE_TAGS[tag]
        except KeyError:
            msg = f"Unsupported data type '{tag}'"
            raise UnsupportedColumnTypeError(msg, value=tag) from None

    @property
    def is_numeric(self) -> bool:
        """Whether values of this type can form a payload."""
        return self is not ColumnType.STRING


# datetime columns are kept as text; they are never parsed here.
TYPE_TAGS: dict[str, ColumnType] = {
    "string": ColumnType.STRING,
    "datetime": ColumnType.STRING,
    "int": ColumnType.INTEGER,
    "integer": ColumnType.INTEGER,
    "float": ColumnType.FLOAT,
}


class TypedColumn(ABC):
    """Append-only sequence of values of a single column type."""

    column_type: ClassVar[ColumnType]
    dtype: ClassVar[np.dtype]

    def __init__(self) -> None:
        self._values: list = []

    def __len__(self) -> int:
        return len(self._values)

    def append_cell(self, raw: str) -> None:
        """
        Decode one raw cell and append it.

        The missing-value placeholder appends the column type's sentinel.

        Args:
            raw: Cell text as read from the file.

        Raises:
            MalformedNumericLiteralError: If a numeric column receives text
                that is not a number.
        """
        if raw == MISSING_VALUE_PLACEHOLDER:
            self._values.append(missing_value(self.column_type))
        else:
            self._values.append(self._parse(raw))

    @abstractmethod
    def _parse(self, raw: str) -> object:
        """Convert non-placeholder cell text. Implemented by subclasses."""
        ...

    def to_array(self) -> np.ndarray:
        """Return the values as a new numpy array of the column's dtype."""
        return np.array(self._values, dtype=self.dtype)


class IntegerColumn(TypedColumn):
    """Column of 32-bit signed integers."""

    column_type = ColumnType.INTEGER
    dtype = np.dtype(np.int32)

    def _parse(self, raw: str) -> int:
        text = raw.strip()
        if not _INTEGER_PATTERN.fullmatch(text):
            msg = f"Cannot parse '{raw}' as an integer"
            raise MalformedNumericLiteralError(msg, value=raw)
        value = int(text)
        if not _INT32_MIN <= value <= _INT32_MAX:
            msg = f"Integer '{raw}' is out of the 32-bit range"
            raise MalformedNumericLiteralError(msg, value=raw)
        return value


class FloatColumn(TypedColumn):
    """Column of single-precision floats."""

    column_type = ColumnType.FLOAT
    dtype = np.dtype(np.float32)

    def _parse(self, raw: str) -> np.float32:
        text = raw.strip()
        if not _FLOAT_PATTERN.fullmatch(text):
            msg = f"Cannot parse '{raw}' as a floating-point number"
            raise MalformedNumericLiteralError(msg, value=raw)
        value = float(text)
        if abs(value) > _FLOAT32_MAX:
            msg = f"Number '{raw}' is out of the single-precision range"
            raise MalformedNumericLiteralError(msg, value=raw)
        return np.float32(value)


class StringColumn(TypedColumn):
    """Column of text values, kept verbatim."""

    column_type = ColumnType.STRING
    dtype = np.dtype(object)

    def _parse(self, raw: str) -> str:
        return raw


_COLUMN_CLASSES: dict[ColumnType, type[TypedColumn]] = {
    ColumnType.INTEGER: IntegerColumn,
    ColumnType.FLOAT: FloatColumn,
    ColumnType.STRING: StringColumn,
}


def create_column(column_type: ColumnType) -> TypedColumn:
    """Create an empty column of the given type."""
    return _COLUMN_CLASSES[column_type]()
