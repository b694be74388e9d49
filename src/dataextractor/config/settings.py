"""
Typed configuration models using Pydantic.

Configuration names the lookup tables to load, where they live and
how to read them.
"""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator


class LoggingConfig(BaseModel):
    """Logging output configuration."""

    model_config = ConfigDict(frozen=True)

    level: str = Field(default="INFO", description="Log level name")
    json_output: bool = Field(default=False, description="Emit JSON log lines")

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Ensure the level is a standard logging level name."""
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            msg = f"Unknown log level: {v!r}"
            raise ValueError(msg)
        return level


class TableConfig(BaseModel):
    """A single lookup table file and how to read it."""

    model_config = ConfigDict(frozen=True)

    path: Path = Field(description="Table file, relative to data_root")
    payload_group: str = Field(description="Group label identifying the payload column")
    delimiter: str = Field(default=",", description="Cell delimiter")
    encoding: str = Field(default="utf-8", description="Text encoding")

    @field_validator("payload_group")
    @classmethod
    def validate_payload_group(cls, v: str) -> str:
        """Ensure the group label can appear in either naming convention."""
        if not v or "/" in v or "@" in v:
            msg = f"payload_group must be a non-empty label without '/' or '@', got: {v!r}"
            raise ValueError(msg)
        return v

    @field_validator("delimiter")
    @classmethod
    def validate_delimiter(cls, v: str) -> str:
        """Ensure the delimiter is a single character other than a quote."""
        if len(v) != 1 or v in {'"', "\n", "\r"}:
            msg = f"delimiter must be a single non-quote character, got: {v!r}"
            raise ValueError(msg)
        return v


class ExtractorConfig(BaseModel):
    """Complete configuration: data root, logging and named tables."""

    model_config = ConfigDict(frozen=True)

    data_root: Path = Field(
        default=Path("."), description="Root directory for all table files"
    )
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    tables: dict[str, TableConfig] = Field(default_factory=dict)

    def table(self, name: str) -> TableConfig:
        """Return the configuration of a named table."""
        try:
            return self.tables[name]
        except KeyError:
            msg = f"Table '{name}' is not configured (known: {sorted(self.tables)})"
            raise KeyError(msg) from None

    def resolve(self, name: str) -> Path:
        """Resolve the path of a named table against data_root."""
        return self.data_root / self.table(name).path
