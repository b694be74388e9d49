"""Tests for schemas derived from lookup tables."""

from pathlib import Path

import pandas as pd
import pandera.pandas as pa
import pytest

from dataextractor.backends import load_table
from dataextractor.schemas import build_table_schema, validate_table


class TestBuildTableSchema:
    """Tests for build_table_schema."""

    def test_columns_follow_table(self, mixed_csv: Path) -> None:
        """Test the schema lists coordinates then payload, with matching dtypes."""
        schema = build_table_schema(load_table(mixed_csv, "ErrorInflation"))

        assert list(schema.columns) == [
            "station_id",
            "MetaData/level",
            "time",
            "latitude",
            "ErrorInflation/air_temperature",
        ]
        assert str(schema.columns["MetaData/level"].dtype) == "Int32"
        assert str(schema.columns["latitude"].dtype) == "float32"
        assert schema.strict is True
        assert schema.ordered is True

    def test_valid_export_passes(self, mixed_csv: Path) -> None:
        """Test a table's own export validates."""
        frame = validate_table(load_table(mixed_csv, "ErrorInflation"))
        assert len(frame) == 3

    def test_extra_column_fails(self, station_csv: Path) -> None:
        """Test a frame with an unexpected column is rejected."""
        table = load_table(station_csv, "ErrorInflation")
        frame = table.to_frame()
        frame["extra"] = 1
        with pytest.raises(pa.errors.SchemaError):
            build_table_schema(table).validate(frame)

    def test_wrong_dtype_fails(self, station_csv: Path) -> None:
        """Test a payload of the wrong dtype is rejected."""
        table = load_table(station_csv, "ErrorInflation")
        frame = table.to_frame()
        frame["ErrorInflation/pressure"] = frame["ErrorInflation/pressure"].astype("float64")
        with pytest.raises(pa.errors.SchemaError):
            build_table_schema(table).validate(frame)

    def test_non_text_coordinate_fails(self, station_csv: Path) -> None:
        """Test non-string values in a string coordinate are rejected."""
        table = load_table(station_csv, "ErrorInflation")
        frame = table.to_frame()
        frame["station"] = pd.Series([1, "B"], dtype=object)
        with pytest.raises(pa.errors.SchemaError):
            build_table_schema(table).validate(frame)
