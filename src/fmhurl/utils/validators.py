"""utils/validators.py

Validation utilities for fmhurl.
"""

from fmhurl.converter.fmh import SEGMENT_COUNT, SEPARATOR


def is_fmh_url(value: str) -> bool:
    """Simple FMH-URL shape check: enough separators for every segment."""
    return value.count(SEPARATOR) >= SEGMENT_COUNT - 1
