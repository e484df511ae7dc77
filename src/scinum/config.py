"""
SciNum Config — домены по умолчанию и контекст значений

SciValue параметризован двумя доменами: base (значащие цифры) и exponent
(масштаб). SciContext фиксирует пару доменов и строит значения в ней,
так что код приложения не передаёт домены в каждый вызов.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from src.scinum.math.int_domains import I64, IntegerDomain

if TYPE_CHECKING:
    from src.scinum.domain.sci_value import SciValue


# =============================================================================
# ДОМЕНЫ ПО УМОЛЧАНИЮ
# =============================================================================

# Домен base по умолчанию (знаковое 64-битное целое)
DEFAULT_BASE_DOMAIN: Final[IntegerDomain] = I64

# Домен exponent по умолчанию (знаковое 64-битное целое)
DEFAULT_EXPONENT_DOMAIN: Final[IntegerDomain] = I64


def validate_exponent_domain(domain: IntegerDomain) -> None:
    """
    Проверка, что домен пригоден для exponent.

    Raises:
        ValueError: Если домен беззнаковый
    """
    if not domain.signed:
        raise ValueError(f"exponent domain must be signed, got {domain.name}")


# =============================================================================
# SCI CONTEXT
# =============================================================================


@dataclass(frozen=True)
class SciContext:
    """
    Пара доменов (base, exponent) для построения SciValue.

    Пример:
        >>> ctx = SciContext(base_domain=U64)
        >>> ctx.wrap_with_exponent(5, 2)
        SciValue(base=5, exponent=2, base_domain=u64, exponent_domain=i64)
    """

    base_domain: IntegerDomain = DEFAULT_BASE_DOMAIN
    exponent_domain: IntegerDomain = DEFAULT_EXPONENT_DOMAIN

    def __post_init__(self) -> None:
        validate_exponent_domain(self.exponent_domain)

    def wrap(self, value: int) -> "SciValue":
        """Значение с exponent = 0 в доменах контекста."""
        from src.scinum.domain.sci_value import SciValue

        return SciValue.wrap(
            value,
            base_domain=self.base_domain,
            exponent_domain=self.exponent_domain,
        )

    def wrap_with_exponent(self, value: int, exponent: int) -> "SciValue":
        """Значение с явной парой (base, exponent) в доменах контекста."""
        from src.scinum.domain.sci_value import SciValue

        return SciValue.wrap_with_exponent(
            value,
            exponent,
            base_domain=self.base_domain,
            exponent_domain=self.exponent_domain,
        )


DEFAULT_CONTEXT: Final[SciContext] = SciContext()
