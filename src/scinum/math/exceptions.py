"""
SciValue Exceptions — иерархия ошибок арифметики SciValue

Все ошибки локальны и зависят только от входных данных: повторная попытка
бессмысленна, ошибка всегда пробрасывается вызывающему коду.

Иерархия:
    SciValueError (ArithmeticError)
    ├── ArithmeticOverflowError (OverflowError)
    │   ├── ExponentOverflowError
    │   └── ScaleOverflowError
    ├── SciZeroDivisionError (ZeroDivisionError)
    ├── ConversionError (ValueError)
    ├── DomainMismatchError (TypeError)
    ├── UnsupportedPowerError (ValueError)
    └── InexactRescaleError (ValueError)

Использование:
    from src.scinum.math.exceptions import ArithmeticOverflowError

    try:
        total = lhs + rhs
    except ArithmeticOverflowError as e:
        logger.error(f"Overflow: {e}")
        logger.error(f"Context: {e.context}")
"""

from typing import Any, Dict, Optional


class SciValueError(ArithmeticError):
    """
    Базовая ошибка для всех операций SciValue.

    Поддерживает контекст (dict) для диагностики: имя домена, операнды,
    операция. Контекст включается в str(exc).
    """

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        if not self.context:
            return self.message
        context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
        return f"{self.message} | Context: {context_str}"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message={self.message!r}, context={self.context!r})"


# =============================================================================
# OVERFLOW
# =============================================================================


class ArithmeticOverflowError(SciValueError, OverflowError):
    """
    Результат не помещается в домен base.

    Возникает при выравнивании экспонент, сложении/вычитании, умножении,
    делении (частное вне домена, например I8.min / -1) и возведении в степень.
    """


class ExponentOverflowError(ArithmeticOverflowError):
    """Результат не помещается в домен экспоненты."""


class ScaleOverflowError(ArithmeticOverflowError):
    """
    Множитель 10^n сам не помещается в домен base.

    Возникает при выравнивании значений со слишком большой разницей экспонент.
    """


# =============================================================================
# OTHER FAILURES
# =============================================================================


class SciZeroDivisionError(SciValueError, ZeroDivisionError):
    """Деление на значение с base == 0."""


class ConversionError(SciValueError, ValueError):
    """
    Значение нельзя представить в домене.

    Причины:
    - Литерал (например, 10) не помещается в домен
    - Операнд не является int (или является bool)
    - Неизвестное имя домена
    """


class DomainMismatchError(SciValueError, TypeError):
    """Операнды принадлежат разным доменам base/exponent."""


class UnsupportedPowerError(SciValueError, ValueError):
    """Отрицательная степень для целочисленного base."""


class InexactRescaleError(SciValueError, ValueError):
    """Повышение экспоненты потеряло бы значащие цифры."""
