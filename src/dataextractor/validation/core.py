"""
Core validation logic for configured lookup tables.

Loads every configured table and checks its export against the
schema derived from its columns.
"""

from dataclasses import dataclass
from pathlib import Path

import pandas as pd
import pandera.pandas as pa

from dataextractor.backends import create_backend
from dataextractor.config.settings import ExtractorConfig
from dataextractor.errors import DataExtractorError
from dataextractor.schemas import validate_table
from dataextractor.utils.logging import get_logger, log_context

log = get_logger(__name__)


@dataclass
class ValidationResult:
    """Result of validating a single table."""

    table_name: str
    file_path: Path
    exists: bool
    valid: bool | None
    row_count: int | None
    payload_column: str | None
    error_type: str | None
    error_message: str | None


class ValidationRunner:
    """
    Runs validation for all configured tables.

    A failing table is reported and does not stop the others from
    being checked.
    """

    def __init__(self, config: ExtractorConfig) -> None:
        """
        Initialize validation runner.

        Args:
            config: Extractor configuration listing the tables.
        """
        self.config = config

    def run(self) -> list[ValidationResult]:
        """
        Validate every configured table.

        Returns:
            One result per table, in configuration order.
        """
        results: list[ValidationResult] = []
        for name in self.config.tables:
            with log_context(table=name):
                results.append(self._validate_table(name))
        return results

    def _validate_table(self, name: str) -> ValidationResult:
        table_config = self.config.table(name)
        file_path = self.config.resolve(name)

        if not file_path.exists():
            log.warning("Table file not found", path=str(file_path))
            return ValidationResult(
                table_name=name,
                file_path=file_path,
                exists=False,
                valid=None,
                row_count=None,
                payload_column=None,
                error_type="FileNotFoundError",
                error_message="File not found",
            )

        try:
            backend = create_backend(
                file_path,
                delimiter=table_config.delimiter,
                encoding=table_config.encoding,
            )
            table = backend.load(table_config.payload_group)
            validate_table(table)
        except DataExtractorError as e:
            log.error("Table failed to load", error=str(e))
            return self._failure(name, file_path, e, str(e))
        except pa.errors.SchemaError as e:
            msg = self._format_schema_error(e)
            log.error("Schema validation failed", error=msg)
            return self._failure(name, file_path, e, msg)

        log.info("Validation passed", rows=table.num_rows)
        return ValidationResult(
            table_name=name,
            file_path=file_path,
            exists=True,
            valid=True,
            row_count=table.num_rows,
            payload_column=table.payload_name,
            error_type=None,
            error_message=None,
        )

    @staticmethod
    def _failure(
        name: str, file_path: Path, error: Exception, message: str
    ) -> ValidationResult:
        return ValidationResult(
            table_name=name,
            file_path=file_path,
            exists=True,
            valid=False,
            row_count=None,
            payload_column=None,
            error_type=type(error).__name__,
            error_message=message,
        )

    @staticmethod
    def _format_schema_error(error: pa.errors.SchemaError) -> str:
        """Summarize a schema error (first 5 failure cases)."""
        failures = error.failure_cases
        if isinstance(failures, pd.DataFrame):
            n_failures = len(failures)
            if n_failures > 5:
                shown = failures.head(5).to_string(index=False)
                return f"{n_failures} validation errors (showing first 5):\n{shown}"
            return f"{n_failures} validation error(s):\n{failures.to_string(index=False)}"
        return str(error).split("\n")[0][:200]
