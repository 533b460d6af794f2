"""
FARS Report Generator (Imperative Shell)

Thin orchestration layer: calls the reader to load yearly extracts, the
functional core to summarise / select / sanitise, and the plotting module
to build figures.  Optionally writes figures to HTML.

No CSV parsing lives here.  All data access goes through
src/fars/data/reader.py.

Package Location: src/fars/reports/generators.py

Usage::

    from fars import fars_summarize_years, fars_map_state

    summary = fars_summarize_years([2013, 2014, 2015], data_dir="extdata")
    fig = fars_map_state(1, 2013, data_dir="extdata",
                         output_path="reports/state_1_2013.html")
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Iterable, Optional, Union

import pandas as pd
import plotly.graph_objects as go

from ..analysis.locations import sanitize_coordinates, select_state
from ..analysis.summary import summarize_by_month
from ..data import reader
from ..plotting.state_map import plot_state_map
from ..utils.coerce import coerce_int

logger = logging.getLogger(__name__)


def fars_summarize_years(
    years: Union[Any, Iterable[Any]],
    data_dir: Optional[Union[str, Path]] = None,
) -> pd.DataFrame:
    """
    Count accidents per month for each requested year.

    Years whose file cannot be loaded are skipped with a warning (see
    ``reader.fars_read_years``).

    Args:
        years: A single year or an iterable of years.
        data_dir: Directory holding the ``accident_<year>.csv.bz2`` files.

    Returns:
        DataFrame with a ``MONTH`` column and one count column per loaded
        year; ``<NA>`` marks months with no accidents.  Empty (only the
        ``MONTH`` column, no rows) when no year could be loaded.
    """
    tables = reader.fars_read_years(years, data_dir)
    return summarize_by_month(tables)


def fars_map_state(
    state_num: Any,
    year: Any,
    data_dir: Optional[Union[str, Path]] = None,
    output_path: Optional[Union[str, Path]] = None,
    show: bool = False,
) -> Optional[go.Figure]:
    """
    Plot one state's accident locations for a given year.

    Args:
        state_num: FARS state code (coerced to ``int``).
        year: Data year (coerced to ``int``).
        data_dir: Directory holding the yearly extracts.
        output_path: When given, the figure is also written there as HTML.
            Parent directories are created as needed.
        show: When ``True``, open the figure with ``fig.show()``.

    Returns:
        The figure, or ``None`` when the state has no accidents to plot.

    Raises:
        FileNotFoundError: If the year's file does not exist.
        InvalidStateError: If *state_num* does not occur in that year.
    """
    year = coerce_int(year)
    filename = reader.resolve_path(reader.make_filename(year), data_dir)
    data = reader.fars_read(filename)

    state_num = coerce_int(state_num)
    data_sub = select_state(data, state_num)

    if data_sub.empty:
        logger.info(
            "no accidents to plot",
            extra={"state_num": state_num, "year": year},
        )
        return None

    data_sub = sanitize_coordinates(data_sub)
    fig = plot_state_map(data_sub, state_num=state_num, year=year)

    if output_path is not None:
        out_path = Path(output_path)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        fig.write_html(str(out_path))
        logger.info("State map saved → %s", out_path, extra={"path": str(out_path)})

    if show:
        fig.show()

    return fig
