"""
FARS Data Package (Imperative Shell)

This package handles all file I/O for the FARS toolkit.

Modules:
- reader: Filename building, single-file loading and per-year reads
"""

from .reader import (
    YearResult,
    make_filename,
    fars_read,
    resolve_path,
    read_year,
    fars_read_years,
)

__all__ = [
    'YearResult',
    'make_filename',
    'fars_read',
    'resolve_path',
    'read_year',
    'fars_read_years',
]
