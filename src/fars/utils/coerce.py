"""Centralized integer coercion for years and state codes."""

from typing import Any


def coerce_int(value: Any) -> int:
    """Coerce a year or state code to ``int``, truncating decimals.

    Accepts ints, floats, numpy scalars and numeric strings such as
    ``"2013"`` or ``"2013.0"``.

    Args:
        value: Value to convert.

    Returns:
        The truncated integer.

    Raises:
        ValueError: If *value* is not numeric (or is NaN).
        TypeError: If *value* is of a type that cannot be converted.
    """
    try:
        return int(value)
    except (TypeError, ValueError):
        if not isinstance(value, str):
            raise
    return int(float(value))
