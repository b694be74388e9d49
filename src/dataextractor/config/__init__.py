"""
Configuration management with typed Pydantic models.

Tables are declared in YAML and loaded into frozen models.
"""

from dataextractor.config.loader import load_config
from dataextractor.config.settings import ExtractorConfig, LoggingConfig, TableConfig

__all__ = [
    "ExtractorConfig",
    "LoggingConfig",
    "TableConfig",
    "load_config",
]
