"""
SciNum — числа фиксированной точности в форме base * 10^exponent.

Независим от внешних систем: только значение, его арифметика и контракт
диагностического снапшота.
"""

from src.scinum.config import (
    DEFAULT_BASE_DOMAIN,
    DEFAULT_CONTEXT,
    DEFAULT_EXPONENT_DOMAIN,
    SciContext,
)
from src.scinum.domain.sci_value import SciValue, compare, lexicographic_key

__all__ = [
    "DEFAULT_BASE_DOMAIN",
    "DEFAULT_EXPONENT_DOMAIN",
    "DEFAULT_CONTEXT",
    "SciContext",
    "SciValue",
    "compare",
    "lexicographic_key",
]
