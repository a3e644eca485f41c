"""Shared utility functions for the draft assistant backend."""

import re
import unicodedata


def normalize_name(name: str) -> str:
    """
    Normalize a player name for matching across different data sources.

    - Removes accents (é → e)
    - Converts to lowercase
    - Drops periods and apostrophes ("A.J." == "AJ", "Ja'Marr" == "JaMarr")
    - Treats hyphens as spaces and collapses whitespace
    - Removes suffixes like Jr., Sr., II, III

    Args:
        name: The player name to normalize

    Returns:
        Normalized name string for comparison
    """
    if not name:
        return ""
    # Remove accents
    normalized = unicodedata.normalize('NFD', name)
    without_accents = ''.join(c for c in normalized if unicodedata.category(c) != 'Mn')
    result = without_accents.lower().strip()
    result = re.sub(r"[.'’]", '', result)
    result = result.replace('-', ' ')
    result = re.sub(r'\s+', ' ', result)
    # Remove common suffixes for better matching
    result = re.sub(r'\s+(jr|sr|ii|iii|iv|v)$', '', result)
    return result


def sanitize_error_message(error: Exception) -> str:
    """
    Sanitize an error message for safe display to clients.

    Removes sensitive information like file paths and line numbers.

    Args:
        error: The exception to sanitize

    Returns:
        A safe error message string
    """
    error_str = str(error)
    # Remove file paths
    error_str = re.sub(r'/[^\s]+\.(py|csv)', '[file]', error_str)
    # Remove line numbers
    error_str = re.sub(r'line \d+', 'line [num]', error_str)
    # Truncate long messages
    if len(error_str) > 200:
        error_str = error_str[:200] + '...'
    return error_str or "Internal server error"
