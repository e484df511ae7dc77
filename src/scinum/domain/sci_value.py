"""
SciValue — число в форме, близкой к научной нотации

Значение хранится как пара (base, exponent) и представляет base * 10^exponent,
где base и exponent являются ограниченными целыми (см. IntegerDomain). Явный масштаб
позволяет арифметике над очень большими и очень малыми целочисленно
масштабированными величинами сохранять больше точности, чем голые целые
фиксированной ширины.

Immutable Pydantic модель (frozen=True): каждая операция возвращает новый
экземпляр, опубликованное значение никогда не изменяется.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Равенство структурное: (2, 2) != (20, 1), хотя величины равны.
   Для семантического сравнения обе стороны нормализуются через reduce()
2. Нормализация не выполняется автоматически после операций
3. Знак base сохраняется во всех операциях
4. Порядок сравнивает величины; при равных величинах меньшая экспонента
   идёт первой, так что порядок согласован со структурным равенством
5. Операнды разных доменов не смешиваются (DomainMismatchError)
"""

import logging
from fractions import Fraction
from typing import Any, Dict

from pydantic import BaseModel, Field, model_validator

from src.scinum.config import (
    DEFAULT_BASE_DOMAIN,
    DEFAULT_EXPONENT_DOMAIN,
    validate_exponent_domain,
)
from src.scinum.math import alignment, arithmetic
from src.scinum.math.exceptions import ExponentOverflowError
from src.scinum.math.int_domains import (
    RADIX,
    IntegerDomain,
    get_domain,
    trunc_div,
)

logger = logging.getLogger(__name__)


# =============================================================================
# SCI VALUE MODEL
# =============================================================================


class SciValue(BaseModel):
    """
    Значение base * 10^exponent в доменах (base_domain, exponent_domain).

    Создаётся через wrap / wrap_with_exponent (или SciContext). Прямой вызов
    конструктора с данными вне доменов → pydantic.ValidationError.
    """

    base: int = Field(..., strict=True, description="Значащие цифры")
    exponent: int = Field(0, strict=True, description="Степень десяти (масштаб)")
    base_domain: IntegerDomain = Field(
        default=DEFAULT_BASE_DOMAIN, description="Домен base"
    )
    exponent_domain: IntegerDomain = Field(
        default=DEFAULT_EXPONENT_DOMAIN, description="Домен exponent (знаковый)"
    )

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_domains(self) -> "SciValue":
        """Проверка, что base и exponent представимы в своих доменах."""
        validate_exponent_domain(self.exponent_domain)
        if not self.base_domain.contains(self.base):
            raise ValueError(f"base {self.base} out of range for {self.base_domain.name}")
        if not self.exponent_domain.contains(self.exponent):
            raise ValueError(
                f"exponent {self.exponent} out of range for {self.exponent_domain.name}"
            )
        return self

    # -------------------------------------------------------------------------
    # Конструирование
    # -------------------------------------------------------------------------

    @classmethod
    def wrap(
        cls,
        value: int,
        *,
        base_domain: IntegerDomain = DEFAULT_BASE_DOMAIN,
        exponent_domain: IntegerDomain = DEFAULT_EXPONENT_DOMAIN,
    ) -> "SciValue":
        """
        Значение с exponent = 0.

        Raises:
            ConversionError: Если value не int или не представимо в base_domain
        """
        return cls.wrap_with_exponent(
            value,
            exponent_domain.zero,
            base_domain=base_domain,
            exponent_domain=exponent_domain,
        )

    @classmethod
    def wrap_with_exponent(
        cls,
        value: int,
        exponent: int,
        *,
        base_domain: IntegerDomain = DEFAULT_BASE_DOMAIN,
        exponent_domain: IntegerDomain = DEFAULT_EXPONENT_DOMAIN,
    ) -> "SciValue":
        """
        Значение с явной парой (base, exponent).

        Не нормализует: (200, 10) сохраняется как есть.

        Raises:
            ConversionError: Если value/exponent не int или вне своих доменов
            ValueError: Если exponent_domain беззнаковый
        """
        validate_exponent_domain(exponent_domain)
        return cls.model_construct(
            base=base_domain.convert(value, "base"),
            exponent=exponent_domain.convert(exponent, "exponent"),
            base_domain=base_domain,
            exponent_domain=exponent_domain,
        )

    def with_parts(self, base: int, exponent: int) -> "SciValue":
        """
        Новое значение в тех же доменах.

        Raises:
            ArithmeticOverflowError: Если base вне домена base
            ExponentOverflowError: Если exponent вне домена экспоненты
        """
        return type(self).model_construct(
            base=self.base_domain.check(base, "with_parts"),
            exponent=self.exponent_domain.check(exponent, "with_parts", ExponentOverflowError),
            base_domain=self.base_domain,
            exponent_domain=self.exponent_domain,
        )

    # -------------------------------------------------------------------------
    # Нормализация
    # -------------------------------------------------------------------------

    def reduce(self) -> "SciValue":
        """
        Каноническая форма: удаление хвостовых нулей base.

        Пока base % 10 == 0: base /= 10, exponent += 1. base == 0 остаётся
        как есть. Идемпотентна: reduce(reduce(x)) == reduce(x).

        Raises:
            ExponentOverflowError: Если экспонента выходит за домен

        Examples:
            (200, 10).reduce() == (2, 12)
            (2, 10).reduce() == (2, 10)
        """
        if self.base == 0:
            return self.with_parts(self.base, self.exponent)

        ten = self.base_domain.ten
        exp_domain = self.exponent_domain
        base = self.base
        exponent = self.exponent
        removed = 0

        while self.base_domain.checked_rem(base, ten, "reduce") == 0:
            base = trunc_div(base, ten)
            exponent = exp_domain.checked_add(exponent, exp_domain.one, "reduce", ExponentOverflowError)
            removed += 1

        if removed:
            logger.debug("reduce: removed %d trailing zeros from %d", removed, self.base)

        return self.with_parts(base, exponent)

    def is_canonical(self) -> bool:
        """True если base не имеет хвостового множителя 10 (или base == 0)."""
        domain = self.base_domain
        return self.base == 0 or domain.checked_rem(self.base, domain.ten, "is_canonical") != 0

    def is_zero(self) -> bool:
        return self.base == 0

    def rescale(self, target_exponent: int) -> "SciValue":
        """Точный перевод на target_exponent (см. alignment.rescale)."""
        return alignment.rescale(self, target_exponent)

    def as_fraction(self) -> Fraction:
        """
        Точная представляемая величина (для диагностики).

        Материализует 10^|exponent|: при экспонентах порядка 10^6 и выше
        результат содержит миллионы цифр. compare() и операторы порядка
        as_fraction не используют.
        """
        return self.base * Fraction(RADIX) ** self.exponent

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def __add__(self, other: object) -> "SciValue":
        if not isinstance(other, SciValue):
            return NotImplemented
        return arithmetic.add(self, other)

    def __sub__(self, other: object) -> "SciValue":
        if not isinstance(other, SciValue):
            return NotImplemented
        return arithmetic.subtract(self, other)

    def __mul__(self, other: object) -> "SciValue":
        if not isinstance(other, SciValue):
            return NotImplemented
        return arithmetic.multiply(self, other)

    def __truediv__(self, other: object) -> "SciValue":
        if not isinstance(other, SciValue):
            return NotImplemented
        return arithmetic.divide(self, other)

    def pow(self, n: int) -> "SciValue":
        """Возведение в степень n >= 0 (см. arithmetic.power)."""
        return arithmetic.power(self, n)

    def __pow__(self, n: object) -> "SciValue":
        if isinstance(n, bool) or not isinstance(n, int):
            return NotImplemented
        return arithmetic.power(self, n)

    def __neg__(self) -> "SciValue":
        return arithmetic.negate(self)

    def __abs__(self) -> "SciValue":
        return arithmetic.absolute(self)

    # -------------------------------------------------------------------------
    # Равенство и порядок
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SciValue):
            return NotImplemented
        return (
            self.base == other.base
            and self.exponent == other.exponent
            and self.base_domain == other.base_domain
            and self.exponent_domain == other.exponent_domain
        )

    def __hash__(self) -> int:
        return hash((self.base, self.exponent, self.base_domain, self.exponent_domain))

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, SciValue):
            return NotImplemented
        return compare(self, other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, SciValue):
            return NotImplemented
        return compare(self, other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, SciValue):
            return NotImplemented
        return compare(self, other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, SciValue):
            return NotImplemented
        return compare(self, other) >= 0

    # -------------------------------------------------------------------------
    # Представление
    # -------------------------------------------------------------------------

    def __repr__(self) -> str:
        return (
            f"SciValue(base={self.base}, exponent={self.exponent}, "
            f"base_domain={self.base_domain.name}, exponent_domain={self.exponent_domain.name})"
        )

    def __str__(self) -> str:
        return f"{self.base}e{self.exponent}"

    def to_contract(self) -> Dict[str, Any]:
        """Снапшот для диагностики (контракт sci_value.json)."""
        return {
            "base": self.base,
            "exponent": self.exponent,
            "base_domain": self.base_domain.name,
            "exponent_domain": self.exponent_domain.name,
        }

    @classmethod
    def from_contract(cls, data: Dict[str, Any]) -> "SciValue":
        """
        Восстановление значения из снапшота.

        Raises:
            jsonschema.ValidationError: Если данные не соответствуют схеме
            ConversionError: Если base/exponent вне своих доменов
        """
        from src.scinum.contracts import validate_sci_value

        validate_sci_value(data)
        return cls.wrap_with_exponent(
            data["base"],
            data["exponent"],
            base_domain=get_domain(data["base_domain"]),
            exponent_domain=get_domain(data["exponent_domain"]),
        )


# =============================================================================
# ORDERING
# =============================================================================


def compare(lhs: SciValue, rhs: SciValue) -> int:
    """
    Сравнение по представляемой величине.

    При равных величинах (например, (5, 1) и (50, 0)) первой идёт меньшая
    экспонента, поэтому 0 возвращается только для структурно равных значений.

    Returns:
        -1 если lhs < rhs, 0 если lhs == rhs, +1 если lhs > rhs

    Raises:
        DomainMismatchError: Если домены операндов различаются

    Examples:
        >>> compare(SciValue.wrap_with_exponent(1, 100), SciValue.wrap(99))
        1
        >>> compare(SciValue.wrap_with_exponent(1, 3), SciValue.wrap_with_exponent(99999, 0))
        -1
    """
    alignment.ensure_same_domains(lhs, rhs, "compare")

    lhs_sign = _sign(lhs.base)
    rhs_sign = _sign(rhs.base)
    if lhs_sign != rhs_sign:
        return -1 if lhs_sign < rhs_sign else 1

    if lhs_sign != 0:
        order = _compare_abs(lhs, rhs)
        if order != 0:
            # Для отрицательных значений больший модуль означает меньшую величину
            return order * lhs_sign

    if lhs.exponent != rhs.exponent:
        return -1 if lhs.exponent < rhs.exponent else 1

    return 0


def _sign(n: int) -> int:
    return (n > 0) - (n < 0)


def _compare_abs(lhs: SciValue, rhs: SciValue) -> int:
    # Оба base ненулевые. Порядок величины |base| * 10^exponent равен
    # exponent + число цифр |base|: 10^exponent никогда не материализуется
    lhs_base = abs(lhs.base)
    rhs_base = abs(rhs.base)
    lhs_order = lhs.exponent + len(str(lhs_base))
    rhs_order = rhs.exponent + len(str(rhs_base))
    if lhs_order != rhs_order:
        return -1 if lhs_order < rhs_order else 1

    # Порядки равны: разница экспонент не больше ширины base в цифрах
    if lhs.exponent > rhs.exponent:
        lhs_base *= RADIX ** (lhs.exponent - rhs.exponent)
    else:
        rhs_base *= RADIX ** (rhs.exponent - lhs.exponent)

    if lhs_base != rhs_base:
        return -1 if lhs_base < rhs_base else 1
    return 0


def lexicographic_key(value: SciValue) -> tuple[int, int]:
    """
    Ключ лексикографического порядка (exponent, base).

    Корректен по величине только для значений с общей экспонентой:
    sorted(values, key=lexicographic_key) ставит (1, 3) после (99999, 0).
    """
    return (value.exponent, value.base)
