"""
Missing-value convention for loaded tables.

A cell holding the placeholder is never parsed. It is replaced by the
sentinel reserved for the column's type, shared with the rest of the
observation-processing system.
"""

from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from dataextractor.columns import ColumnType

# Same representation as in NetCDF's CDL.
MISSING_VALUE_PLACEHOLDER = "_"

MISSING_INT: int = int(np.iinfo(np.int32).min) + 5
MISSING_FLOAT: np.float32 = np.float32(-float(np.finfo(np.float32).max) * 0.98)
MISSING_STRING = "MISSING*"

_SENTINELS: dict[str, int | np.float32 | str] = {
    "integer": MISSING_INT,
    "float": MISSING_FLOAT,
    "string": MISSING_STRING,
}


def missing_value(column_type: "ColumnType") -> int | np.float32 | str:
    """
    Return the missing-value sentinel for a column type.

    Args:
        column_type: Type of the column the value is destined for.

    Returns:
        Sentinel value of the matching Python/numpy type.
    """
    return _SENTINELS[column_type.value]


def is_missing(value: object) -> bool:
    """Check whether a value is one of the missing-value sentinels."""
    if isinstance(value, str):
        return value == MISSING_STRING
    if isinstance(value, (bool, np.bool_)):
        return False
    if isinstance(value, (int, np.integer)):
        return int(value) == MISSING_INT
    if isinstance(value, (float, np.floating)):
        return bool(np.float32(value) == MISSING_FLOAT)
    return False
