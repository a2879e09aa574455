"""
Core math modules для near-gas

Целочисленные примитивы u64 и точная десятичная конверсия без float.
"""

# U64 Safeguards
from near_gas.core.math.u64_safeguards import (
    # Bounds
    U64_MAX,
    U64_MIN,
    # Checked
    checked_add_u64,
    checked_div_u64,
    checked_mul_u64,
    checked_sub_u64,
    # Saturating
    saturating_add_u64,
    saturating_div_u64,
    saturating_mul_u64,
    saturating_sub_u64,
    # Wrapping
    wrapping_mul_u64,
    # Validation
    U64_MAX_DIGITS,
    exceeds_u64_digits,
    is_u64,
    validate_u64,
    # Parsing
    parse_u64,
)

# Decimal Scaler
from near_gas.core.math.decimal_scaler import (
    DecimalNumberParsingError,
    DecimalNumberParsingErrorKind,
    parse_decimal_number,
    scale_precision,
)

__all__ = [
    # U64 Safeguards — Bounds
    "U64_MAX",
    "U64_MIN",
    # U64 Safeguards — Checked
    "checked_add_u64",
    "checked_div_u64",
    "checked_mul_u64",
    "checked_sub_u64",
    # U64 Safeguards — Saturating
    "saturating_add_u64",
    "saturating_div_u64",
    "saturating_mul_u64",
    "saturating_sub_u64",
    # U64 Safeguards — Wrapping
    "wrapping_mul_u64",
    # U64 Safeguards — Validation
    "U64_MAX_DIGITS",
    "exceeds_u64_digits",
    "is_u64",
    "validate_u64",
    # U64 Safeguards — Parsing
    "parse_u64",
    # Decimal Scaler — Exceptions
    "DecimalNumberParsingError",
    "DecimalNumberParsingErrorKind",
    # Decimal Scaler — Functions
    "parse_decimal_number",
    "scale_precision",
]
