"""
Backends loading lookup tables from files.

The backend is chosen from the file extension.
"""

from pathlib import Path

from dataextractor.backends.base import DataExtractorBackend
from dataextractor.backends.csv_backend import CsvBackend, GridRow, load_table, read_grid
from dataextractor.errors import UnsupportedFileFormatError

CSV_EXTENSIONS = frozenset({".csv"})
NETCDF_EXTENSIONS = frozenset({".nc", ".nc4"})


def create_backend(
    filepath: str | Path,
    *,
    delimiter: str = ",",
    encoding: str = "utf-8",
) -> DataExtractorBackend:
    """
    Create the backend able to read a file.

    Args:
        filepath: Path to the table file.
        delimiter: Cell delimiter (CSV only).
        encoding: Text encoding (CSV only).

    Returns:
        Backend for the file.

    Raises:
        UnsupportedFileFormatError: If no backend handles the extension.
    """
    path = Path(filepath)
    extension = path.suffix.lower()
    if extension in CSV_EXTENSIONS:
        return CsvBackend(path, delimiter=delimiter, encoding=encoding)
    if extension in NETCDF_EXTENSIONS:
        msg = "NetCDF lookup tables are not supported; convert the table to CSV"
        raise UnsupportedFileFormatError(msg, filepath=path)
    msg = f"Unrecognized lookup table extension '{extension}' (expected .csv)"
    raise UnsupportedFileFormatError(msg, filepath=path)


__all__ = [
    "CsvBackend",
    "DataExtractorBackend",
    "GridRow",
    "create_backend",
    "load_table",
    "read_grid",
]
