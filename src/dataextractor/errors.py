"""
Errors raised while loading lookup tables.

Every failure is fatal to the load call that raised it. Errors carry
the file path and, where known, the 1-based line number, column name
and offending value, so an operator can fix the input file directly.
"""

from pathlib import Path


class DataExtractorError(Exception):
    """Base class for all table loading errors."""

    def __init__(
        self,
        message: str,
        *,
        filepath: str | Path | None = None,
        line: int | None = None,
        column: str | None = None,
        value: str | None = None,
    ) -> None:
        self.message = message
        self.filepath = str(filepath) if filepath is not None else None
        self.line = line
        self.column = column
        self.value = value
        super().__init__(self._format())

    def _format(self) -> str:
        location = []
        if self.filepath is not None:
            location.append(f"file '{self.filepath}'")
        if self.line is not None:
            location.append(f"line {self.line}")
        if self.column is not None:
            location.append(f"column '{self.column}'")
        if not location:
            return self.message
        return f"{self.message} ({', '.join(location)})"


class InsufficientDataError(DataExtractorError):
    """File is too short to hold both header rows and a data row."""


class HeaderColumnCountMismatchError(DataExtractorError):
    """Type header has a different number of columns than the name header."""


class NoPayloadColumnError(DataExtractorError):
    """No column name matches the payload group."""


class AmbiguousPayloadColumnError(DataExtractorError):
    """More than one column name matches the payload group."""


class UnsupportedColumnTypeError(DataExtractorError):
    """Declared column type is not one of the recognized tags."""


class PayloadMustBeNumericError(DataExtractorError):
    """Payload column is declared with a textual type."""


class DataRowColumnCountMismatchError(DataExtractorError):
    """Data row has a different number of cells than the name header."""


class MalformedNumericLiteralError(DataExtractorError):
    """Cell in a numeric column cannot be parsed as a number."""


class NoDataLoadedError(DataExtractorError):
    """File contained no usable data rows."""


class DuplicateColumnNameError(DataExtractorError):
    """Two columns share the same canonical name."""


class UnsupportedFileFormatError(DataExtractorError):
    """No backend can read files of this format."""


class UnreadableFileError(DataExtractorError):
    """File cannot be decoded or split into delimited rows."""
