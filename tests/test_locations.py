"""Tests for state selection and coordinate sanitizing."""

from __future__ import annotations

import numpy as np
import pytest

from conftest import ACCIDENTS_2013
from fars import InvalidStateError
from fars.analysis.locations import coordinate_bounds, sanitize_coordinates, select_state


def test_select_state_filters_rows() -> None:
    sub = select_state(ACCIDENTS_2013, 6)

    assert sub["ST_CASE"].tolist() == [60001, 60002]


def test_select_state_coerces_state_code() -> None:
    assert len(select_state(ACCIDENTS_2013, "1")) == 3
    assert len(select_state(ACCIDENTS_2013, 1.7)) == 3


def test_select_state_rejects_unknown_state() -> None:
    with pytest.raises(InvalidStateError, match="invalid STATE number: 99") as exc_info:
        select_state(ACCIDENTS_2013, 99)

    assert exc_info.value.state_num == 99
    assert isinstance(exc_info.value, ValueError)


def test_sanitize_coordinates_blanks_sentinels() -> None:
    clean = sanitize_coordinates(ACCIDENTS_2013)

    assert np.isnan(clean.loc[1, "LATITUDE"])
    assert np.isnan(clean.loc[1, "LONGITUD"])
    assert clean["LATITUDE"].notna().sum() == 4
    # input untouched
    assert ACCIDENTS_2013.loc[1, "LATITUDE"] == 99.9999


def test_sanitize_coordinates_handles_each_axis_independently() -> None:
    df = ACCIDENTS_2013.iloc[:2].copy()
    df["LATITUDE"] = [95.0, 40.0]
    df["LONGITUD"] = [-80.0, 950.0]

    clean = sanitize_coordinates(df)

    assert clean["LATITUDE"].isna().tolist() == [True, False]
    assert clean["LONGITUD"].isna().tolist() == [False, True]


def test_coordinate_bounds_ignores_missing_values() -> None:
    bounds = coordinate_bounds(sanitize_coordinates(select_state(ACCIDENTS_2013, 1)))

    assert bounds == {"lat": (32.4, 33.1), "lon": (-87.0, -86.5)}


def test_coordinate_bounds_none_when_no_valid_coordinates() -> None:
    df = ACCIDENTS_2013.iloc[[1]]

    assert coordinate_bounds(sanitize_coordinates(df)) is None
