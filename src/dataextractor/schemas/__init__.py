"""
Schema definitions using Pandera for validating exported tables.
"""

from dataextractor.schemas.table import build_table_schema, validate_table

__all__ = ["build_table_schema", "validate_table"]
