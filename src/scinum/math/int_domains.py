"""
Integer Domains — ограниченные машинные целые для base и exponent

Python int не ограничен по ширине, поэтому ширина base/exponent задаётся
явно через IntegerDomain. Каждая арифметическая операция SciValue проверяет
результат против границ домена и никогда не "заворачивает" значение.

Минимальный набор возможностей домена:
- сложение, вычитание, умножение, деление, остаток (с проверкой границ)
- сравнение
- нулевое и единичное значения
- конверсия малых литералов (прежде всего 10)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Деление и остаток усекаются к нулю (семантика машинных целых),
   а не к минус бесконечности, как в Python: trunc_div(-7, 2) == -3
2. Выход за границы домена → ArithmeticOverflowError (или подкласс)
3. Литерал вне домена → ConversionError
4. bool не считается целым значением
"""

from typing import Final, Type

from pydantic import BaseModel, Field

from src.scinum.math.exceptions import (
    ArithmeticOverflowError,
    ConversionError,
    ScaleOverflowError,
    SciZeroDivisionError,
)

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Основание системы счисления для масштаба (base * RADIX^exponent)
RADIX: Final[int] = 10


# =============================================================================
# УСЕЧЁННОЕ ДЕЛЕНИЕ
# =============================================================================


def require_int(value: object, name: str = "value") -> int:
    """
    Проверка, что значение является int (но не bool).

    Raises:
        ConversionError: Если value не int или является bool
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConversionError(
            f"{name} must be int, got {type(value).__name__}",
            context={name: repr(value)},
        )
    return value


def trunc_div(dividend: int, divisor: int) -> int:
    """
    Целочисленное деление с усечением к нулю.

    Args:
        dividend: Делимое
        divisor: Делитель

    Returns:
        Частное, усечённое к нулю

    Raises:
        SciZeroDivisionError: Если divisor == 0

    Examples:
        >>> trunc_div(7, 2)
        3
        >>> trunc_div(-7, 2)
        -3
        >>> trunc_div(7, -2)
        -3
    """
    if divisor == 0:
        raise SciZeroDivisionError(
            "integer division by zero", context={"dividend": dividend}
        )

    quotient = abs(dividend) // abs(divisor)
    if (dividend < 0) != (divisor < 0):
        return -quotient
    return quotient


def trunc_rem(dividend: int, divisor: int) -> int:
    """
    Остаток от деления с усечением к нулю (знак совпадает со знаком делимого).

    Examples:
        >>> trunc_rem(7, 2)
        1
        >>> trunc_rem(-7, 2)
        -1
        >>> trunc_rem(-20, 10)
        0
    """
    return dividend - divisor * trunc_div(dividend, divisor)


# =============================================================================
# INTEGER DOMAIN
# =============================================================================


class IntegerDomain(BaseModel):
    """
    Ограниченный целочисленный тип (аналог i8..i128 / u8..u128).

    Immutable модель (frozen=True), сравнивается и хешируется по полям,
    поэтому два домена с одинаковыми параметрами взаимозаменяемы.
    """

    name: str = Field(..., min_length=1, description="Имя домена (например, 'i64')")
    bits: int = Field(..., gt=0, le=4096, description="Ширина в битах")
    signed: bool = Field(..., description="Знаковый (two's complement) или беззнаковый")

    model_config = {"frozen": True}

    def __str__(self) -> str:
        return self.name

    @property
    def min_value(self) -> int:
        """Минимальное представимое значение."""
        if self.signed:
            return -(1 << (self.bits - 1))
        return 0

    @property
    def max_value(self) -> int:
        """Максимальное представимое значение."""
        if self.signed:
            return (1 << (self.bits - 1)) - 1
        return (1 << self.bits) - 1

    @property
    def max_decimal_digits(self) -> int:
        """Количество десятичных цифр в max_value."""
        return len(str(self.max_value))

    # -------------------------------------------------------------------------
    # Литералы
    # -------------------------------------------------------------------------

    def convert(self, value: object, name: str = "value") -> int:
        """
        Конверсия внешнего значения в домен (без арифметики).

        Args:
            value: Исходное значение
            name: Имя параметра (для сообщения об ошибке)

        Returns:
            value как int

        Raises:
            ConversionError: Если value не int или не представимо в домене
        """
        require_int(value, name)

        if not self.contains(value):
            raise ConversionError(
                f"{name}={value} is not representable in {self.name}",
                context={"domain": self.name, "min": self.min_value, "max": self.max_value},
            )
        return value

    def literal(self, n: int) -> int:
        """
        Материализация малого литерала в домене.

        Raises:
            ConversionError: Если литерал не представим (например, 10 в 3-битном домене)
        """
        return self.convert(n, "literal")

    @property
    def zero(self) -> int:
        return self.literal(0)

    @property
    def one(self) -> int:
        return self.literal(1)

    @property
    def ten(self) -> int:
        return self.literal(RADIX)

    # -------------------------------------------------------------------------
    # Проверка границ
    # -------------------------------------------------------------------------

    def contains(self, value: int) -> bool:
        """True если value лежит в [min_value, max_value]."""
        return self.min_value <= value <= self.max_value

    def check(
        self,
        value: int,
        operation: str = "check",
        error: Type[ArithmeticOverflowError] = ArithmeticOverflowError,
    ) -> int:
        """
        Проверка, что результат операции представим в домене.

        Args:
            value: Результат операции (host int)
            operation: Имя операции (для сообщения об ошибке)
            error: Класс ошибки переполнения

        Returns:
            value без изменений

        Raises:
            ConversionError: Если value не int
            ArithmeticOverflowError: Если value вне границ домена
        """
        require_int(value)

        if not self.contains(value):
            raise error(
                f"{operation}: result {value} overflows {self.name}",
                context={
                    "domain": self.name,
                    "min": self.min_value,
                    "max": self.max_value,
                },
            )
        return value

    # -------------------------------------------------------------------------
    # Checked-арифметика
    # -------------------------------------------------------------------------

    def checked_add(
        self,
        a: int,
        b: int,
        operation: str = "add",
        error: Type[ArithmeticOverflowError] = ArithmeticOverflowError,
    ) -> int:
        return self.check(a + b, operation, error)

    def checked_sub(
        self,
        a: int,
        b: int,
        operation: str = "sub",
        error: Type[ArithmeticOverflowError] = ArithmeticOverflowError,
    ) -> int:
        return self.check(a - b, operation, error)

    def checked_mul(
        self,
        a: int,
        b: int,
        operation: str = "mul",
        error: Type[ArithmeticOverflowError] = ArithmeticOverflowError,
    ) -> int:
        return self.check(a * b, operation, error)

    def checked_div(self, a: int, b: int, operation: str = "div") -> int:
        """Усечённое деление; частное проверяется (I8.min / -1 переполняет)."""
        return self.check(trunc_div(a, b), operation)

    def checked_rem(self, a: int, b: int, operation: str = "rem") -> int:
        """Усечённый остаток; операнды и остаток проверяются против домена."""
        self.check(a, operation)
        self.check(b, operation)
        return self.check(trunc_rem(a, b), operation)

    def power_of_ten(self, n: int) -> int:
        """
        Вычисление 10^n в домене.

        Args:
            n: Неотрицательный показатель (разница экспонент)

        Returns:
            10^n

        Raises:
            ScaleOverflowError: Если 10^n не помещается в домен
            ConversionError: Если n < 0 или 10 не представимо в домене
        """
        if n < 0:
            raise ConversionError(
                f"Scale count must be non-negative, got {n}",
                context={"domain": self.name},
            )

        ten = self.ten

        # 10^max_decimal_digits всегда больше max_value: не считаем огромные степени
        if n >= self.max_decimal_digits:
            raise ScaleOverflowError(
                f"power_of_ten: 10^{n} overflows {self.name}",
                context={"domain": self.name, "max": self.max_value},
            )

        return self.check(ten**n, "power_of_ten", ScaleOverflowError)


# =============================================================================
# ПРЕДОПРЕДЕЛЁННЫЕ ДОМЕНЫ
# =============================================================================

I8: Final[IntegerDomain] = IntegerDomain(name="i8", bits=8, signed=True)
I16: Final[IntegerDomain] = IntegerDomain(name="i16", bits=16, signed=True)
I32: Final[IntegerDomain] = IntegerDomain(name="i32", bits=32, signed=True)
I64: Final[IntegerDomain] = IntegerDomain(name="i64", bits=64, signed=True)
I128: Final[IntegerDomain] = IntegerDomain(name="i128", bits=128, signed=True)

U8: Final[IntegerDomain] = IntegerDomain(name="u8", bits=8, signed=False)
U16: Final[IntegerDomain] = IntegerDomain(name="u16", bits=16, signed=False)
U32: Final[IntegerDomain] = IntegerDomain(name="u32", bits=32, signed=False)
U64: Final[IntegerDomain] = IntegerDomain(name="u64", bits=64, signed=False)
U128: Final[IntegerDomain] = IntegerDomain(name="u128", bits=128, signed=False)

DOMAINS: Final[dict[str, IntegerDomain]] = {
    domain.name: domain for domain in (I8, I16, I32, I64, I128, U8, U16, U32, U64, U128)
}


def get_domain(name: str) -> IntegerDomain:
    """
    Поиск предопределённого домена по имени.

    Raises:
        ConversionError: Если домен с таким именем не существует
    """
    try:
        return DOMAINS[name]
    except KeyError:
        raise ConversionError(
            f"Unknown integer domain: {name!r}",
            context={"known": ", ".join(DOMAINS)},
        ) from None
