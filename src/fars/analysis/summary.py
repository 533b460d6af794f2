"""
FARS Monthly Summary (Functional Core)

Pure functions only. No I/O, no side effects.
Input is the list of per-year ``[MONTH, year]`` tables produced by
``fars.data.reader.fars_read_years``; output is a month-by-year count
table.

Package Location: src/fars/analysis/summary.py

Missing-cell rule:
    A (year, month) pair with no accidents is reported as ``<NA>``, never
    as zero.  Count columns use pandas' nullable ``Int64`` dtype so that
    counts stay integers next to the nulls.  Once any data is present the
    result always has a row for each month 1-12.
"""

from __future__ import annotations

from typing import List, Optional, Sequence

import pandas as pd

_MONTHS: List[int] = list(range(1, 13))


def summarize_by_month(tables: Sequence[Optional[pd.DataFrame]]) -> pd.DataFrame:
    """
    Count accidents per (year, month) and pivot years into columns.

    Args:
        tables: Per-year DataFrames with columns ``[MONTH, year]``.
            ``None`` entries (years that failed to load) are skipped.

    Returns:
        DataFrame with a ``MONTH`` column followed by one ``Int64`` column
        per year (ascending).  When nothing was loaded the result is an
        empty DataFrame whose only column is ``MONTH``.
    """
    frames = [t for t in tables if t is not None]
    if not frames:
        return _empty_summary()

    combined = pd.concat(frames, ignore_index=True)
    if combined.empty:
        return _empty_summary()

    counts = combined.groupby(["year", "MONTH"]).size()
    wide = counts.unstack("year")

    months = sorted(set(_MONTHS) | set(wide.index))
    wide = wide.reindex(months).astype("Int64")
    wide.index.name = "MONTH"
    wide.columns.name = None

    return wide.reset_index()


def _empty_summary() -> pd.DataFrame:
    return pd.DataFrame(columns=["MONTH"])
