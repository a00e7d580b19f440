"""
Utility functions package.

Exposes the display formatters and the locale profile they share.
"""

from .formatters import (
    MAX_OUTPUT_LENGTH,
    TRUNCATION_MARKER,
    format_date,
    format_duration,
    format_json_output,
    format_number,
    pretty_json,
    trimmed_output,
)
from .locale_profile import DEFAULT_PROFILE, LocaleProfile

__all__ = [
    'DEFAULT_PROFILE',
    'LocaleProfile',
    'MAX_OUTPUT_LENGTH',
    'TRUNCATION_MARKER',
    'format_date',
    'format_duration',
    'format_json_output',
    'format_number',
    'pretty_json',
    'trimmed_output',
]
