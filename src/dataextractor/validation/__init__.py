"""Validation of configured lookup tables."""

from dataextractor.validation.core import ValidationResult, ValidationRunner
from dataextractor.validation.reporter import ConsoleReporter

__all__ = ["ConsoleReporter", "ValidationResult", "ValidationRunner"]
