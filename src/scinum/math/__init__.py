"""
Core math modules для SciNum

Ограниченные целочисленные домены, выравнивание экспонент и арифметика SciValue.
"""

# Exceptions
from src.scinum.math.exceptions import (
    ArithmeticOverflowError,
    ConversionError,
    DomainMismatchError,
    ExponentOverflowError,
    InexactRescaleError,
    ScaleOverflowError,
    SciValueError,
    SciZeroDivisionError,
    UnsupportedPowerError,
)

# Integer Domains
from src.scinum.math.int_domains import (
    DOMAINS,
    I8,
    I16,
    I32,
    I64,
    I128,
    RADIX,
    U8,
    U16,
    U32,
    U64,
    U128,
    IntegerDomain,
    get_domain,
    require_int,
    trunc_div,
    trunc_rem,
)

# Exponent Alignment
from src.scinum.math.alignment import (
    ensure_same_domains,
    match_exponents,
    rescale,
)

# Arithmetic
from src.scinum.math.arithmetic import (
    absolute,
    add,
    divide,
    multiply,
    negate,
    power,
    subtract,
)

__all__ = [
    # Exceptions
    "SciValueError",
    "ArithmeticOverflowError",
    "ExponentOverflowError",
    "ScaleOverflowError",
    "SciZeroDivisionError",
    "ConversionError",
    "DomainMismatchError",
    "UnsupportedPowerError",
    "InexactRescaleError",
    # Integer Domains — Constants
    "RADIX",
    "DOMAINS",
    "I8",
    "I16",
    "I32",
    "I64",
    "I128",
    "U8",
    "U16",
    "U32",
    "U64",
    "U128",
    # Integer Domains — Types
    "IntegerDomain",
    # Integer Domains — Functions
    "get_domain",
    "require_int",
    "trunc_div",
    "trunc_rem",
    # Exponent Alignment
    "ensure_same_domains",
    "match_exponents",
    "rescale",
    # Arithmetic
    "add",
    "subtract",
    "multiply",
    "divide",
    "power",
    "negate",
    "absolute",
]
