"""
near-gas — gas amount value type with exact TGas/GGas parsing.

    >>> from near_gas import NearGas
    >>> NearGas.from_str("1.5 TGas").as_ggas()
    1500
"""

from near_gas.core.contracts import decode_gas, encode_gas
from near_gas.core.domain import (
    ONE_GIGA_GAS,
    ONE_TERA_GAS,
    IncorrectNumberError,
    IncorrectUnitError,
    NearGas,
    NearGasError,
    parse_gas,
)
from near_gas.core.math import (
    DecimalNumberParsingError,
    DecimalNumberParsingErrorKind,
    parse_decimal_number,
)

__version__ = "0.1.0"

__all__ = [
    "NearGas",
    "parse_gas",
    "ONE_GIGA_GAS",
    "ONE_TERA_GAS",
    "NearGasError",
    "IncorrectUnitError",
    "IncorrectNumberError",
    "DecimalNumberParsingError",
    "DecimalNumberParsingErrorKind",
    "parse_decimal_number",
    "encode_gas",
    "decode_gas",
]
