"""
SciValue Arithmetic — сложение, вычитание, умножение, деление, степень

Все функции чистые: операнды не изменяются, результат: новый SciValue
в тех же доменах.

ФОРМУЛЫ:
    add:  align(lhs, rhs) → (b1 + b2) * 10^e
    sub:  align(lhs, rhs) → (b1 - b2) * 10^e
    mul:  (b1 * b2) * 10^(e1 + e2)
    div:  масштабировать делимое (b1 * 10, e1 - 1) пока b1 % b2 != 0
          и масштабирование не переполнит base, затем
          (b1 / b2) * 10^(e1 - e2)    (деление с усечением к нулю)
    pow:  b^n * 10^(e * n)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Сложение/вычитание/умножение точны, либо → ArithmeticOverflowError
2. Деление в общем случае НЕ точно: усекает как целочисленное деление,
   точность ограничена запасом домена base ниже max_value
3. Деление на base == 0 → SciZeroDivisionError
4. pow(0) → (1, 0); pow(n < 0) → UnsupportedPowerError
"""

import logging
from typing import TYPE_CHECKING

from src.scinum.math.alignment import ensure_same_domains, match_exponents
from src.scinum.math.exceptions import (
    ArithmeticOverflowError,
    ExponentOverflowError,
    SciZeroDivisionError,
    UnsupportedPowerError,
)
from src.scinum.math.int_domains import require_int, trunc_div

if TYPE_CHECKING:
    from src.scinum.domain.sci_value import SciValue

logger = logging.getLogger(__name__)


# =============================================================================
# ADD / SUB
# =============================================================================


def add(lhs: "SciValue", rhs: "SciValue") -> "SciValue":
    """
    Сумма с предварительным выравниванием экспонент.

    Examples:
        (5, 2) + (16, 2) == (21, 2)
        (5, 2) + (21, 5) == (21005, 2)
    """
    lhs, rhs = match_exponents(lhs, rhs)
    base = lhs.base_domain.checked_add(lhs.base, rhs.base, "add")
    return lhs.with_parts(base, lhs.exponent)


def subtract(lhs: "SciValue", rhs: "SciValue") -> "SciValue":
    """
    Разность с предварительным выравниванием экспонент.

    Для беззнакового домена отрицательный результат → ArithmeticOverflowError.

    Examples:
        (-2, 2) - (1, 1) == (-21, 1)
        (1, 1) - (2, 2) == (-19, 1)
    """
    lhs, rhs = match_exponents(lhs, rhs)
    base = lhs.base_domain.checked_sub(lhs.base, rhs.base, "sub")
    return lhs.with_parts(base, lhs.exponent)


# =============================================================================
# MUL / DIV
# =============================================================================


def multiply(lhs: "SciValue", rhs: "SciValue") -> "SciValue":
    """
    Произведение: base перемножаются, экспоненты складываются.

    Examples:
        (2, 1) * (10, 2) == (20, 3)
    """
    ensure_same_domains(lhs, rhs, "mul")

    base = lhs.base_domain.checked_mul(lhs.base, rhs.base, "mul")
    exponent = lhs.exponent_domain.checked_add(
        lhs.exponent, rhs.exponent, "mul", ExponentOverflowError
    )
    return lhs.with_parts(base, exponent)


def divide(lhs: "SciValue", rhs: "SciValue") -> "SciValue":
    """
    Деление с эмуляцией long division фиксированной точности.

    Делимое масштабируется на 10 (экспонента уменьшается на 1), пока деление
    неточно и следующий шаг не выведет base за границы домена. Для знакового
    домена граница проверяется с обеих сторон: min/10 < base < max/10.

    Args:
        lhs: Делимое
        rhs: Делитель

    Returns:
        Частное, усечённое к нулю

    Raises:
        SciZeroDivisionError: Если rhs.base == 0
        ArithmeticOverflowError: Если частное вне домена (например, I8.min / -1)
        ExponentOverflowError: Если экспонента результата вне домена

    Examples:
        (10, 1) / (2, 3) == (5, -2)
        (1, 0) / (2, 0) == (5, -1)
    """
    ensure_same_domains(lhs, rhs, "div")

    if rhs.base == 0:
        raise SciZeroDivisionError(
            "Division by a zero-valued base",
            context={"dividend": repr(lhs), "divisor": repr(rhs)},
        )

    base_domain = lhs.base_domain
    exp_domain = lhs.exponent_domain
    ten = base_domain.ten
    upper = trunc_div(base_domain.max_value, ten)
    lower = trunc_div(base_domain.min_value, ten)

    base = lhs.base
    exponent = lhs.exponent
    steps = 0

    while base_domain.checked_rem(base, rhs.base, "div") != 0 and lower < base < upper:
        base = base * ten
        exponent = exp_domain.checked_sub(exponent, exp_domain.one, "div", ExponentOverflowError)
        steps += 1

    if steps:
        logger.debug("div: scaled dividend by 10^%d before dividing by %d", steps, rhs.base)

    quotient = base_domain.checked_div(base, rhs.base, "div")
    exponent = exp_domain.checked_sub(exponent, rhs.exponent, "div", ExponentOverflowError)
    return lhs.with_parts(quotient, exponent)


# =============================================================================
# POW
# =============================================================================


def power(value: "SciValue", n: int) -> "SciValue":
    """
    Возведение в целую неотрицательную степень.

    Args:
        value: Основание
        n: Показатель степени (из домена экспоненты)

    Returns:
        (base^n, exponent * n); для n == 0 это (1, 0)

    Raises:
        ConversionError: Если n не int
        ExponentOverflowError: Если n или exponent * n вне домена экспоненты
        UnsupportedPowerError: Если n < 0
        ArithmeticOverflowError: Если base^n вне домена base

    Examples:
        (2, 0).pow(4) == (16, 0)
        (11, 2).pow(4) == (14641, 8)
    """
    require_int(n, "n")
    base_domain = value.base_domain
    exp_domain = value.exponent_domain
    exp_domain.check(n, "pow", ExponentOverflowError)

    if n < 0:
        raise UnsupportedPowerError(
            f"pow: negative power {n} is not supported for an integer base",
            context={"value": repr(value)},
        )

    if n == 0:
        return value.with_parts(base_domain.one, exp_domain.zero)

    exponent = exp_domain.checked_mul(value.exponent, n, "pow", ExponentOverflowError)

    # |base| >= 2 и n > bits: |base|^n >= 2^n > max_value
    if abs(value.base) > 1 and n > base_domain.bits:
        raise ArithmeticOverflowError(
            f"pow: {value.base}^{n} overflows {base_domain.name}",
            context={"domain": base_domain.name, "max": base_domain.max_value},
        )

    base = base_domain.check(value.base**n, "pow")
    return value.with_parts(base, exponent)


# =============================================================================
# UNARY
# =============================================================================


def negate(value: "SciValue") -> "SciValue":
    """Смена знака; -min и отрицание ненулевого беззнакового base переполняют."""
    return value.with_parts(value.base_domain.check(-value.base, "neg"), value.exponent)


def absolute(value: "SciValue") -> "SciValue":
    return value.with_parts(value.base_domain.check(abs(value.base), "abs"), value.exponent)
