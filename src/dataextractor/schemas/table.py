"""
Pandera schemas derived from loaded lookup tables.

The schema of a table depends on its columns, so it is built per
table rather than declared as a DataFrameModel.
"""

import pandas as pd
import pandera.pandas as pa

from dataextractor.columns import ColumnType
from dataextractor.table import LookupTable

PANDAS_DTYPES: dict[ColumnType, str | type] = {
    ColumnType.INTEGER: "Int32",
    ColumnType.FLOAT: "float32",
    ColumnType.STRING: object,
}


def build_table_schema(table: LookupTable) -> pa.DataFrameSchema:
    """
    Build the schema of a table's DataFrame export.

    Args:
        table: Loaded lookup table.

    Returns:
        Strict, ordered schema with one column per coordinate followed
        by the payload.
    """
    columns: dict[str, pa.Column] = {}
    for name in table.coordinate_names:
        column_type = table.coord_values[name].column_type
        checks = []
        if column_type is ColumnType.STRING:
            checks.append(pa.Check(lambda v: isinstance(v, str), element_wise=True))
        columns[name] = pa.Column(
            PANDAS_DTYPES[column_type],
            checks=checks,
            nullable=True,
            description=f"{column_type.value} coordinate",
        )
    columns[table.payload_name] = pa.Column(
        "float32", nullable=True, description="Payload values"
    )

    return pa.DataFrameSchema(
        columns,
        checks=[pa.Check(lambda df: len(df) > 0, error="table has no rows")],
        strict=True,
        ordered=True,
        unique_column_names=True,
        name="LookupTableSchema",
    )


def validate_table(table: LookupTable) -> pd.DataFrame:
    """
    Export a table to a DataFrame and validate it against its schema.

    Raises:
        pandera.errors.SchemaError: If the export violates the schema.
    """
    return build_table_schema(table).validate(table.to_frame())
