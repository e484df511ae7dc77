"""
Contract Validation Module

Модуль для валидации диагностических JSON снапшотов SciValue.
"""

from .validators import (
    ContractValidator,
    SchemaLoader,
    SciValueValidator,
    validate_sci_value,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "SciValueValidator",
    # Functions
    "validate_sci_value",
]
