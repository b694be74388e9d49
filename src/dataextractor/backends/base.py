"""
Base class for lookup table backends.

A backend reads one file format and produces a ``LookupTable``.
"""

from abc import ABC, abstractmethod
from pathlib import Path

from dataextractor.table import LookupTable
from dataextractor.utils.logging import get_logger

log = get_logger(__name__)


class DataExtractorBackend(ABC):
    """
    Abstract base class for lookup table backends.

    Each call to ``load`` reads the file afresh; backends keep no state
    between calls.
    """

    def __init__(self, filepath: str | Path) -> None:
        """
        Initialize backend.

        Args:
            filepath: Path to the file holding the table.
        """
        self.filepath = Path(filepath)

    @abstractmethod
    def _load(self, payload_group: str) -> LookupTable:
        """Read and assemble the table. Implemented by subclasses."""
        ...

    def load(self, payload_group: str) -> LookupTable:
        """
        Load the table whose payload column belongs to ``payload_group``.

        Args:
            payload_group: Group label identifying the payload column.

        Returns:
            Loaded lookup table.

        Raises:
            FileNotFoundError: If the file does not exist.
            dataextractor.errors.DataExtractorError: If the file is malformed.
        """
        if not self.filepath.exists():
            msg = f"Lookup table file not found: {self.filepath}"
            raise FileNotFoundError(msg)

        log.info(
            "Loading lookup table",
            backend=self.__class__.__name__,
            path=str(self.filepath),
            payload_group=payload_group,
        )
        table = self._load(payload_group)
        log.info(
            "Loaded lookup table",
            rows=table.num_rows,
            coordinates=table.coordinate_names,
            payload=table.payload_name,
        )
        return table
