"""Pytest fixtures shared across the FARS test suite."""

from __future__ import annotations

import logging
from pathlib import Path

import pandas as pd
import pytest

from fars import make_filename

# 2013: state 1 has one sentinel-coordinate row; months 4-11 are empty.
ACCIDENTS_2013 = pd.DataFrame(
    {
        "STATE":    [1, 1, 1, 6, 6],
        "ST_CASE":  [10001, 10002, 10003, 60001, 60002],
        "MONTH":    [1, 1, 2, 3, 12],
        "LATITUDE": [32.4, 99.9999, 33.1, 37.2, 34.0],
        "LONGITUD": [-86.5, 999.9999, -87.0, -120.1, -118.3],
        "FATALS":   [1, 2, 1, 1, 3],
    }
)

ACCIDENTS_2014 = pd.DataFrame(
    {
        "STATE":    [1, 6, 6],
        "ST_CASE":  [10001, 60001, 60002],
        "MONTH":    [1, 5, 5],
        "LATITUDE": [31.9, 36.5, 38.0],
        "LONGITUD": [-85.9, -121.0, -122.4],
        "FATALS":   [1, 1, 2],
    }
)


def write_year(directory: Path, year: int, df: pd.DataFrame) -> Path:
    """Write *df* as ``accident_<year>.csv.bz2`` inside *directory*."""
    path = directory / make_filename(year)
    df.to_csv(path, index=False, compression="bz2")
    return path


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    """Directory holding the 2013 and 2014 extracts."""
    write_year(tmp_path, 2013, ACCIDENTS_2013)
    write_year(tmp_path, 2014, ACCIDENTS_2014)
    return tmp_path


@pytest.fixture
def in_data_dir(data_dir: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Same as ``data_dir`` but also makes it the working directory."""
    monkeypatch.chdir(data_dir)
    return data_dir


@pytest.fixture(autouse=True)
def _reset_fars_logger():
    """Undo handler/level changes made by ``configure_logging``."""
    yield
    pkg_logger = logging.getLogger("fars")
    pkg_logger.handlers.clear()
    pkg_logger.setLevel(logging.NOTSET)
    pkg_logger.propagate = True
