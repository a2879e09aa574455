"""
Domain models and value objects.

Contains the NearGas value object, gas unit scales and the unit-aware parser.
"""

from near_gas.core.domain.gas import BORSH_GAS_SIZE, GAS_JSON_SCHEMA, NearGas, parse_gas
from near_gas.core.domain.units import (
    GAS_UNITS,
    ONE_GIGA_GAS,
    ONE_TERA_GAS,
    IncorrectNumberError,
    IncorrectUnitError,
    NearGasError,
    parse_gas_amount,
    split_gas_literal,
    unit_scale,
)

__all__ = [
    # Units module
    "ONE_GIGA_GAS",
    "ONE_TERA_GAS",
    "GAS_UNITS",
    "parse_gas_amount",
    "split_gas_literal",
    "unit_scale",
    # Errors
    "NearGasError",
    "IncorrectUnitError",
    "IncorrectNumberError",
    # NearGas model
    "BORSH_GAS_SIZE",
    "GAS_JSON_SCHEMA",
    "NearGas",
    "parse_gas",
]
