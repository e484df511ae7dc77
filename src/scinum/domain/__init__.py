"""
Domain models and value objects.

Contains the SciValue value type and its ordering helpers.
"""

from src.scinum.domain.sci_value import SciValue, compare, lexicographic_key

__all__ = [
    "SciValue",
    "compare",
    "lexicographic_key",
]
