"""
FARS Analysis Package (Functional Core)

This package contains pure transformation functions with no I/O.
All functions accept DataFrames and return transformed data.

Modules:
- summary:   Month-by-year accident counts
- locations: State selection and coordinate sanitizing
"""

from .summary import (
    summarize_by_month,
)

from .locations import (
    InvalidStateError,
    select_state,
    sanitize_coordinates,
    coordinate_bounds,
)

__all__ = [
    # Summary
    'summarize_by_month',
    # Locations
    'InvalidStateError',
    'select_state',
    'sanitize_coordinates',
    'coordinate_bounds',
]
