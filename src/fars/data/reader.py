"""
FARS Data Reader (Imperative Shell)

Turns years into file names and file names into DataFrames.  This is the
only module in the package that touches the filesystem.

Package Location: src/fars/data/reader.py

File naming:
   Every yearly extract is named ``accident_<year>.csv.bz2``.
   ``make_filename`` is the single place that builds that name; everything
   else (``read_year``, ``fars_map_state``, the CLI) goes through it.

Per-year failure isolation:
   ``read_year`` never raises.  It returns a ``YearResult`` holding either
   the two-column year table or the exception that prevented loading it.
   ``fars_read_years`` turns failures into a logged warning and a ``None``
   placeholder so one missing year never aborts a multi-year summary.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable, List, Optional, Union

import numpy as np
import pandas as pd

from ..utils.coerce import coerce_int

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

_FILENAME_TEMPLATE: str = "accident_{year}.csv.bz2"

# Columns kept by the per-year reader, in output order.
_YEAR_COLUMNS: List[str] = ["MONTH", "year"]


@dataclass(frozen=True)
class YearResult:
    """Outcome of loading one year's accident file.

    Exactly one of ``table`` / ``error`` is set.

    Attributes:
        year: Integer year the file name was built from.
        table: ``[MONTH, year]`` DataFrame on success.
        error: The exception raised while loading, on failure.
    """

    year: Any
    table: Optional[pd.DataFrame] = None
    error: Optional[BaseException] = None

    @property
    def ok(self) -> bool:
        return self.error is None


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def make_filename(year: Any) -> str:
    """
    Build the canonical accident file name for *year*.

    Args:
        year: Year value; truncated to an integer (``2021.9`` → ``2021``).

    Returns:
        ``'accident_<year>.csv.bz2'``.

    Example:
        >>> make_filename(2013)
        'accident_2013.csv.bz2'
    """
    return _FILENAME_TEMPLATE.format(year=coerce_int(year))


def fars_read(filename: Union[str, Path]) -> pd.DataFrame:
    """
    Read one accident CSV file into a DataFrame.

    Compression is inferred from the suffix, so the standard ``.csv.bz2``
    extracts are decompressed transparently.  All columns and the file's
    row order are preserved.

    Args:
        filename: Path to the CSV file.

    Returns:
        DataFrame with every column of the file.

    Raises:
        FileNotFoundError: If *filename* does not exist.
    """
    path = Path(filename)
    if not path.exists():
        raise FileNotFoundError(f"file '{filename}' does not exist")

    logger.debug("Reading %s", path, extra={"path": str(path)})
    return pd.read_csv(path, compression="infer", low_memory=False)


def read_year(
    year: Any,
    data_dir: Optional[Union[str, Path]] = None,
) -> YearResult:
    """
    Load a single year reduced to its ``[MONTH, year]`` columns.

    The ``year`` column is always overwritten with the requested year, so
    it is constant and matches the file name it was read from.

    Args:
        year: Requested year (coerced with ``coerce_int``).
        data_dir: Directory holding the extracts.  ``None`` resolves the
            file name against the current working directory.

    Returns:
        ``YearResult`` carrying the table, or the exception on failure.
    """
    try:
        year_int = coerce_int(year)
        dat = fars_read(resolve_path(make_filename(year_int), data_dir))
        if "MONTH" not in dat.columns:
            raise KeyError(f"column 'MONTH' missing for year {year_int}")
        dat = dat.assign(year=year_int)
        return YearResult(year=year_int, table=dat[_YEAR_COLUMNS])
    except Exception as exc:
        return YearResult(year=year, error=exc)


def fars_read_years(
    years: Union[Any, Iterable[Any]],
    data_dir: Optional[Union[str, Path]] = None,
) -> List[Optional[pd.DataFrame]]:
    """
    Read several years, tolerating the ones that cannot be loaded.

    Args:
        years: A single year or an iterable of years.  Duplicates are
            read once per occurrence.
        data_dir: Directory holding the extracts (see ``read_year``).

    Returns:
        List aligned with *years*: a ``[MONTH, year]`` DataFrame for each
        loaded year, ``None`` where loading failed.  A warning
        ``invalid year: <year>`` is logged for every failure.
    """
    tables: List[Optional[pd.DataFrame]] = []
    for year in _as_list(years):
        result = read_year(year, data_dir)
        if not result.ok:
            logger.warning(
                "invalid year: %s",
                year,
                extra={"year": year, "error": str(result.error)},
            )
        tables.append(result.table)
    return tables


def resolve_path(filename: str, data_dir: Optional[Union[str, Path]] = None) -> Path:
    """Join *filename* onto *data_dir*, or leave it relative to the cwd."""
    if data_dir is None:
        return Path(filename)
    return Path(data_dir) / filename


# ---------------------------------------------------------------------------
# Private helpers
# ---------------------------------------------------------------------------

def _as_list(years: Union[Any, Iterable[Any]]) -> List[Any]:
    """Wrap a scalar year in a list; materialise any other iterable."""
    if isinstance(years, np.ndarray):
        return years.reshape(-1).tolist()
    if years is None or np.isscalar(years):
        return [years]
    return list(years)
