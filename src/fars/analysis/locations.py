"""
FARS State Selection & Coordinates (Functional Core)

Pure transformations used by the state map: pick one state's accidents,
blank out sentinel coordinates and compute the plotting extent.

Package Location: src/fars/analysis/locations.py

Sentinel Rule:
    FARS encodes an unknown position with out-of-range values
    (``LONGITUD`` 999.9999 / ``LATITUDE`` 99.9999 and friends).  Any
    longitude above 900 or latitude above 90 is replaced by ``NaN`` before
    plotting.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

import numpy as np
import pandas as pd

from ..utils.coerce import coerce_int

# ---------------------------------------------------------------------------
# Sentinels
# ---------------------------------------------------------------------------

_LON_SENTINEL: float = 900.0
_LAT_SENTINEL: float = 90.0


class InvalidStateError(ValueError):
    """
    Raised when a state code does not occur in the loaded year's data.

    Attributes:
        state_num: The rejected (integer) state code.
    """

    def __init__(self, state_num: int):
        self.state_num = state_num
        super().__init__(f"invalid STATE number: {state_num}")


def select_state(df: pd.DataFrame, state_num: Any) -> pd.DataFrame:
    """
    Return the accidents recorded for one state.

    Args:
        df: Full year DataFrame; must contain ``STATE``.
        state_num: FARS state code (coerced to ``int``).

    Returns:
        Copy of the rows where ``STATE == state_num``.

    Raises:
        InvalidStateError: If *state_num* is not among the distinct
            ``STATE`` values of *df*.
        KeyError: If *df* has no ``STATE`` column.
    """
    state_num = coerce_int(state_num)
    states = df["STATE"]
    if state_num not in set(states.dropna().unique()):
        raise InvalidStateError(state_num)
    return df.loc[states == state_num].copy()


def sanitize_coordinates(df: pd.DataFrame) -> pd.DataFrame:
    """
    Replace sentinel longitudes (> 900) and latitudes (> 90) with ``NaN``.

    Args:
        df: DataFrame with ``LONGITUD`` and ``LATITUDE`` columns.

    Returns:
        Copy of *df* with sentinel coordinates blanked.
    """
    out = df.copy()
    lon = pd.to_numeric(out["LONGITUD"], errors="coerce")
    lat = pd.to_numeric(out["LATITUDE"], errors="coerce")
    out["LONGITUD"] = lon.where(lon <= _LON_SENTINEL, np.nan)
    out["LATITUDE"] = lat.where(lat <= _LAT_SENTINEL, np.nan)
    return out


def coordinate_bounds(
    df: pd.DataFrame,
) -> Optional[Dict[str, Tuple[float, float]]]:
    """
    Min/max of the non-missing sanitized coordinates.

    Returns:
        ``{"lat": (min, max), "lon": (min, max)}``, or ``None`` when either
        axis has no usable values.
    """
    lat = df["LATITUDE"].dropna()
    lon = df["LONGITUD"].dropna()
    if lat.empty or lon.empty:
        return None
    return {
        "lat": (float(lat.min()), float(lat.max())),
        "lon": (float(lon.min()), float(lon.max())),
    }
