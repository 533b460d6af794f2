"""
FARS - Fatality Analysis Reporting System accident toolkit

Reads yearly ``accident_<year>.csv.bz2`` extracts, counts accidents by
year and month, and maps accident locations for a state, following the
Functional Core, Imperative Shell architecture.

Structure:
- data/     : Imperative Shell (file I/O)
- analysis/ : Functional Core (pure transformations)
- plotting/ : (plotting functions)
- reports/  : orchestration of the above
"""

from .data.reader import make_filename, fars_read, fars_read_years
from .reports.generators import fars_summarize_years, fars_map_state
from .analysis.locations import InvalidStateError

__version__ = "0.1.0"

__all__ = [
    'make_filename',
    'fars_read',
    'fars_read_years',
    'fars_summarize_years',
    'fars_map_state',
    'InvalidStateError',
]
