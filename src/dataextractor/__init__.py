"""
dataextractor: CSV lookup table ingestion.

Loads delimited text files describing a lookup table (coordinate
columns plus one numeric payload column) into typed, immutable
in-memory tables for multi-key interpolation.
"""

from importlib.metadata import version

from dataextractor.backends import create_backend, load_table
from dataextractor.columns import ColumnType
from dataextractor.errors import DataExtractorError
from dataextractor.table import CoordinateColumn, LookupTable

__version__ = version("dataextractor")

__all__ = [
    "ColumnType",
    "CoordinateColumn",
    "DataExtractorError",
    "LookupTable",
    "__version__",
    "create_backend",
    "load_table",
]
