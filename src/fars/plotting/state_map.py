"""
FARS State Accident Map (Functional Core)

Pure function – no file I/O, no side effects.
Input: one state's accident DataFrame with sanitized coordinates.
Output: plotly.graph_objects.Figure.

Package Location: src/fars/plotting/state_map.py

Base map:
    A ``Scattergeo`` map over North America with US state boundaries
    (``showsubunits``).  The visible window is the min/max of the
    non-missing latitudes and longitudes, so the target state fills the
    frame.  Rows whose latitude or longitude is missing are not drawn.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import pandas as pd
import plotly.graph_objects as go

from ..analysis.locations import coordinate_bounds

# ---------------------------------------------------------------------------
# Styling
# ---------------------------------------------------------------------------

_MARKER_STYLE: Dict[str, Any] = {'color': 'black', 'size': 3, 'symbol': 'circle'}

_STATE_LINE_COLOR = 'gray'
_LAND_COLOR = 'white'

# View padding: fraction of the data span on each side, and the half-width
# (degrees) used when every point shares one latitude or longitude.
_RANGE_PAD_FRACTION = 0.05
_MIN_HALF_SPAN_DEG = 0.5


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def plot_state_map(
    df: pd.DataFrame,
    state_num: int,
    year: Optional[int] = None,
) -> go.Figure:
    """
    Build a scatter of accident locations over a state base map.

    Args:
        df: Accident rows for a single state with columns::

            LATITUDE : float, NaN where unknown
            LONGITUD : float, NaN where unknown

        state_num: FARS state code (used in the title only).
        year: Data year (used in the title only).

    Returns:
        ``plotly.graph_objects.Figure`` with one ``Scattergeo`` trace.

    Raises:
        ValueError: If ``df`` is missing required columns.
    """
    _validate_columns(df, required=['LATITUDE', 'LONGITUD'])

    points = df.dropna(subset=['LATITUDE', 'LONGITUD'])

    fig = go.Figure()
    fig.add_trace(
        go.Scattergeo(
            lat=points['LATITUDE'].tolist(),
            lon=points['LONGITUD'].tolist(),
            mode='markers',
            marker=_MARKER_STYLE,
            name='Accident',
            hovertemplate='Lat: %{lat:.4f}<br>Lon: %{lon:.4f}<extra></extra>',
        )
    )

    geo: Dict[str, Any] = dict(
        scope='north america',
        projection=dict(type='mercator'),
        resolution=50,
        showland=True,
        landcolor=_LAND_COLOR,
        showsubunits=True,
        subunitcolor=_STATE_LINE_COLOR,
        showcountries=True,
        countrycolor=_STATE_LINE_COLOR,
    )

    bounds = coordinate_bounds(df)
    if bounds is not None:
        geo['lataxis'] = dict(range=_padded_range(*bounds['lat']))
        geo['lonaxis'] = dict(range=_padded_range(*bounds['lon']))

    fig.update_layout(
        title=_build_title(state_num, year),
        geo=geo,
        showlegend=False,
        template='plotly_white',
        margin=dict(l=10, r=10, t=50, b=10),
    )

    return fig


# ---------------------------------------------------------------------------
# Private helpers
# ---------------------------------------------------------------------------

def _validate_columns(df: pd.DataFrame, required: list[str]) -> None:
    """
    Raise ValueError if any required columns are absent.

    Args:
        df: DataFrame to check.
        required: List of column names that must be present.

    Raises:
        ValueError: Listing the missing columns.
    """
    missing = [c for c in required if c not in df.columns]
    if missing:
        raise ValueError(
            f"accident data is missing required columns: {missing}"
        )


def _padded_range(lo: float, hi: float) -> list[float]:
    """Widen ``[lo, hi]`` so edge points stay visible and the span is never zero.

    Args:
        lo: Smallest coordinate on the axis.
        hi: Largest coordinate on the axis.

    Returns:
        ``[lo - pad, hi + pad]``; ``pad`` is ``_MIN_HALF_SPAN_DEG`` when
        ``lo == hi``.
    """
    pad = (hi - lo) * _RANGE_PAD_FRACTION
    if pad <= 0:
        pad = _MIN_HALF_SPAN_DEG
    return [lo - pad, hi + pad]


def _build_title(state_num: int, year: Optional[int]) -> str:
    location = f'State {state_num}'
    return f'{location} – Accidents {year}' if year is not None else location
