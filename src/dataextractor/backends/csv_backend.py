"""
CSV lookup table backend.

The file starts with two header rows: column names, then column types
(``string``, ``datetime``, ``int``/``integer`` or ``float``). Each
following row holds one value per column; ``_`` marks a missing value
and blank lines are ignored. Exactly one column belongs to the payload
group; all others are coordinates keying the first dimension.
"""

import csv
from pathlib import Path
from typing import NamedTuple

import numpy as np

from dataextractor.backends.base import DataExtractorBackend
from dataextractor.columns import ColumnType, TypedColumn, create_column
from dataextractor.errors import (
    AmbiguousPayloadColumnError,
    DataRowColumnCountMismatchError,
    DuplicateColumnNameError,
    HeaderColumnCountMismatchError,
    InsufficientDataError,
    MalformedNumericLiteralError,
    NoDataLoadedError,
    NoPayloadColumnError,
    PayloadMustBeNumericError,
    UnreadableFileError,
    UnsupportedColumnTypeError,
)
from dataextractor.missing import MISSING_FLOAT, MISSING_INT
from dataextractor.naming import find_payload_column, to_canonical_name
from dataextractor.table import CoordinateColumn, LookupTable
from dataextractor.utils.logging import get_logger

log = get_logger(__name__)

NUM_HEADER_ROWS = 2


class GridRow(NamedTuple):
    """Cells of one record and the 1-based line it starts on."""

    line: int
    cells: list[str]


def read_grid(
    filepath: Path, *, delimiter: str = ",", encoding: str = "utf-8"
) -> list[GridRow]:
    """
    Read a delimited text file into a list of rows of cells.

    Blank lines come back as rows holding a single empty cell. A quoted
    cell may span several lines; its row keeps the line it starts on.

    Args:
        filepath: File to read.
        delimiter: Cell delimiter.
        encoding: Text encoding of the file.

    Returns:
        One row per record, in file order.

    Raises:
        UnreadableFileError: If the file is not valid text in ``encoding``
            or cannot be split into records.
    """
    rows: list[GridRow] = []
    with filepath.open(newline="", encoding=encoding) as f:
        reader = csv.reader(f, delimiter=delimiter)
        start = 1
        try:
            for cells in reader:
                rows.append(GridRow(start, cells or [""]))
                start = reader.line_num + 1
        except UnicodeDecodeError as e:
            msg = f"File is not valid {encoding} text: {e.reason} at byte {e.start}"
            raise UnreadableFileError(msg, filepath=filepath) from e
        except csv.Error as e:
            msg = f"File cannot be read as delimited text: {e}"
            raise UnreadableFileError(msg, filepath=filepath, line=reader.line_num) from e
    return rows


class CsvBackend(DataExtractorBackend):
    """Backend reading lookup tables from CSV files."""

    def __init__(
        self,
        filepath: str | Path,
        *,
        delimiter: str = ",",
        encoding: str = "utf-8",
    ) -> None:
        """
        Initialize CSV backend.

        Args:
            filepath: Path to the CSV file.
            delimiter: Cell delimiter.
            encoding: Text encoding of the file.
        """
        super().__init__(filepath)
        self.delimiter = delimiter
        self.encoding = encoding

    def _load(self, payload_group: str) -> LookupTable:
        rows = read_grid(self.filepath, delimiter=self.delimiter, encoding=self.encoding)

        # Column names, column types and at least one row of values.
        if len(rows) <= NUM_HEADER_ROWS:
            msg = (
                "No data could be loaded: the file must contain a name row, "
                "a type row and at least one data row"
            )
            raise InsufficientDataError(msg, filepath=self.filepath)

        name_row, type_row = rows[0], rows[1]
        raw_names, type_tags = name_row.cells, type_row.cells
        num_columns = len(raw_names)
        if len(type_tags) != num_columns:
            msg = (
                f"The number of columns in line {type_row.line} ({len(type_tags)}) "
                f"differs from that in line {name_row.line} ({num_columns})"
            )
            raise HeaderColumnCountMismatchError(
                msg, filepath=self.filepath, line=type_row.line
            )

        try:
            payload_index = find_payload_column(raw_names, payload_group)
        except (NoPayloadColumnError, AmbiguousPayloadColumnError) as e:
            raise type(e)(e.message, filepath=self.filepath, line=name_row.line) from e

        # Raw names are only needed for payload lookup; switch to Group/var.
        names = [to_canonical_name(name) for name in raw_names]
        coordinate_names = [n for i, n in enumerate(names) if i != payload_index]
        # A coordinate may also normalize onto the payload name.
        duplicates = sorted({n for n in names if names.count(n) > 1})
        if duplicates:
            msg = f"Duplicate column names: {duplicates}"
            raise DuplicateColumnNameError(msg, filepath=self.filepath, line=name_row.line)

        columns = self._allocate_columns(type_row, names, payload_index)

        num_skipped = 0
        for line, cells in rows[NUM_HEADER_ROWS:]:
            if len(cells) == 1 and cells[0] == "":
                num_skipped += 1
                continue
            if len(cells) != num_columns:
                msg = (
                    f"The number of columns in line {line} ({len(cells)}) "
                    f"differs from that in line {name_row.line} ({num_columns})"
                )
                raise DataRowColumnCountMismatchError(msg, filepath=self.filepath, line=line)
            for name, column, cell in zip(names, columns, cells, strict=True):
                try:
                    column.append_cell(cell)
                except MalformedNumericLiteralError as e:
                    raise MalformedNumericLiteralError(
                        e.message,
                        filepath=self.filepath,
                        line=line,
                        column=name,
                        value=cell,
                    ) from e

        if num_skipped:
            log.debug("Skipped blank lines", count=num_skipped)

        payload = self._to_payload_array(columns[payload_index], names[payload_index])
        if payload.shape[0] == 0:
            msg = "No data could be loaded: the file contains no data rows"
            raise NoDataLoadedError(msg, filepath=self.filepath)

        coordinates = {
            name: CoordinateColumn.from_column(column)
            for i, (name, column) in enumerate(zip(names, columns, strict=True))
            if i != payload_index
        }
        return LookupTable.build(
            payload,
            coordinates,
            [coordinate_names],
            payload_name=names[payload_index],
        )

    def _allocate_columns(
        self, type_row: GridRow, names: list[str], payload_index: int
    ) -> list[TypedColumn]:
        """Create an empty typed column for each declared type."""
        columns: list[TypedColumn] = []
        for index, (name, tag) in enumerate(zip(names, type_row.cells, strict=True)):
            try:
                column_type = ColumnType.from_tag(tag)
            except UnsupportedColumnTypeError as e:
                raise UnsupportedColumnTypeError(
                    e.message, filepath=self.filepath, line=type_row.line, column=name, value=tag
                ) from e
            if index == payload_index and not column_type.is_numeric:
                msg = f"The payload column must contain numeric data, not '{tag}'"
                raise PayloadMustBeNumericError(
                    msg, filepath=self.filepath, line=type_row.line, column=name, value=tag
                )
            columns.append(create_column(column_type))
        return columns

    def _to_payload_array(self, column: TypedColumn, name: str) -> np.ndarray:
        """Convert the payload column to a float32 array of shape (rows, 1)."""
        if not column.column_type.is_numeric:
            msg = "The payload column must contain numeric data"
            raise PayloadMustBeNumericError(msg, filepath=self.filepath, column=name)
        values = column.to_array()
        payload = values.astype(np.float32)
        if column.column_type is ColumnType.INTEGER:
            payload[values == MISSING_INT] = MISSING_FLOAT
        return payload.reshape(-1, 1)


def load_table(
    filepath: str | Path,
    payload_group: str,
    *,
    delimiter: str = ",",
    encoding: str = "utf-8",
) -> LookupTable:
    """
    Convenience function to load a lookup table from a CSV file.

    Args:
        filepath: Path to the CSV file.
        payload_group: Group label identifying the payload column.
        delimiter: Cell delimiter.
        encoding: Text encoding of the file.

    Returns:
        Loaded lookup table.
    """
    backend = CsvBackend(filepath, delimiter=delimiter, encoding=encoding)
    return backend.load(payload_group)
