"""
Exponent Alignment — приведение двух SciValue к общей экспоненте

Выравнивание является предусловием для сложения, вычитания и точного рескейлинга.

Алгоритм match_exponents:
    - экспоненты равны → операнды возвращаются без изменений
    - иначе операнд с большей экспонентой ("грубый") масштабируется вверх:
      base_coarse * 10^(e_coarse - e_fine), экспонента опускается до e_fine
    - операнд с меньшей экспонентой ("точный") не меняется

Масштабирование грубого операнда умножением (а не деление точного) не теряет
значащих цифр, но требует, чтобы результат помещался в домен base.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Каждый результат представляет ту же величину, что и соответствующий вход
2. Порядок результатов совпадает с порядком аргументов
3. 10^(разница) вне домена → ScaleOverflowError
4. Произведение вне домена → ArithmeticOverflowError
5. Входы не нормализуются
"""

import logging
from typing import TYPE_CHECKING

from src.scinum.math.exceptions import (
    DomainMismatchError,
    ExponentOverflowError,
    InexactRescaleError,
)
from src.scinum.math.int_domains import require_int, trunc_div, trunc_rem

if TYPE_CHECKING:
    from src.scinum.domain.sci_value import SciValue

logger = logging.getLogger(__name__)


def ensure_same_domains(lhs: "SciValue", rhs: "SciValue", operation: str) -> None:
    """
    Проверка, что оба операнда принадлежат одним доменам base/exponent.

    Raises:
        DomainMismatchError: Если домены различаются
    """
    if lhs.base_domain != rhs.base_domain or lhs.exponent_domain != rhs.exponent_domain:
        raise DomainMismatchError(
            f"{operation}: operands belong to different domains",
            context={
                "lhs": f"{lhs.base_domain.name}/{lhs.exponent_domain.name}",
                "rhs": f"{rhs.base_domain.name}/{rhs.exponent_domain.name}",
            },
        )


def _lower_exponent(value: "SciValue", target_exponent: int, operation: str) -> "SciValue":
    # target_exponent < value.exponent
    domain = value.base_domain
    decades = value.exponent - target_exponent
    scale = domain.power_of_ten(decades)
    new_base = domain.checked_mul(value.base, scale, operation)

    logger.debug(
        "%s: rescaled base %d by 10^%d to exponent %d",
        operation,
        value.base,
        decades,
        target_exponent,
    )
    return value.with_parts(new_base, target_exponent)


def match_exponents(lhs: "SciValue", rhs: "SciValue") -> tuple["SciValue", "SciValue"]:
    """
    Приведение двух значений к общей (меньшей) экспоненте.

    Args:
        lhs: Левый операнд
        rhs: Правый операнд

    Returns:
        (lhs', rhs') с lhs'.exponent == rhs'.exponent

    Raises:
        DomainMismatchError: Если домены операндов различаются
        ScaleOverflowError: Если 10^(разница экспонент) не помещается в домен base
        ArithmeticOverflowError: Если масштабированный base не помещается в домен

    Examples:
        >>> match_exponents(SciValue.wrap_with_exponent(5, 2), SciValue.wrap_with_exponent(5, 4))
        (SciValue(base=5, exponent=2, ...), SciValue(base=500, exponent=2, ...))
    """
    ensure_same_domains(lhs, rhs, "match_exponents")

    if lhs.exponent == rhs.exponent:
        return lhs, rhs

    if lhs.exponent > rhs.exponent:
        return _lower_exponent(lhs, rhs.exponent, "match_exponents"), rhs

    return lhs, _lower_exponent(rhs, lhs.exponent, "match_exponents")


def rescale(value: "SciValue", target_exponent: int) -> "SciValue":
    """
    Точный перевод значения на заданную экспоненту.

    Понижение экспоненты умножает base на 10^n (с проверкой переполнения).
    Повышение делит base на 10^n только если деление точное.

    Args:
        value: Исходное значение
        target_exponent: Целевая экспонента

    Returns:
        Значение той же величины с exponent == target_exponent

    Raises:
        ExponentOverflowError: Если target_exponent вне домена экспоненты
        ArithmeticOverflowError: Если понижение переполняет base
        InexactRescaleError: Если повышение потеряло бы значащие цифры
    """
    require_int(target_exponent, "target_exponent")
    value.exponent_domain.check(target_exponent, "rescale", ExponentOverflowError)

    if target_exponent == value.exponent:
        return value

    if target_exponent < value.exponent:
        return _lower_exponent(value, target_exponent, "rescale")

    if value.base == 0:
        return value.with_parts(value.base, target_exponent)

    domain = value.base_domain
    decades = target_exponent - value.exponent

    # |base| <= max_value < 10^max_decimal_digits: ненулевой base заведомо не делится
    if (
        decades >= domain.max_decimal_digits
        or trunc_rem(value.base, domain.ten**decades) != 0
    ):
        raise InexactRescaleError(
            f"rescale: raising exponent by {decades} would drop digits of {value.base}",
            context={"base": value.base, "exponent": value.exponent, "target": target_exponent},
        )

    return value.with_parts(trunc_div(value.base, domain.ten**decades), target_exponent)
