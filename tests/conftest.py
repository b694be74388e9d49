"""Pytest configuration and shared fixtures."""

from collections.abc import Callable, Iterator
from pathlib import Path

import pytest
import structlog


@pytest.fixture(autouse=True)
def reset_structlog() -> Iterator[None]:
    """Undo logging configuration done by a test (e.g. through the CLI)."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def write_csv(tmp_path: Path) -> Callable[..., Path]:
    """Return a factory writing CSV text to a file in a temporary directory."""

    def _write(content: str, name: str = "table.csv") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def station_csv(write_csv: Callable[..., Path]) -> Path:
    """Two-row table keyed by a station name."""
    return write_csv(
        "station,pressure@ErrorInflation\n"
        "string,float\n"
        "A,1.5\n"
        "B,2.25\n"
    )


@pytest.fixture
def mixed_csv(write_csv: Callable[..., Path]) -> Path:
    """Table with every column type, a datetime column and missing values."""
    return write_csv(
        "station_id,ErrorInflation/air_temperature,level@MetaData,time,latitude\n"
        "string,float,int,datetime,float\n"
        "03772,1.1,1,2021-01-01T00:00:00Z,51.5\n"
        "_,_,_,_,_\n"
        "03808,1.3,3,2021-01-01T06:00:00Z,-12.25\n"
    )
