"""
Serialization Contracts

Текстовая сериализация NearGas, обёртки над Pydantic TypeAdapter и
валидация закодированных значений через JSON Schema.
"""

from .encoding import (
    decode_gas,
    encode_gas,
    gas_from_json,
    gas_json_schema,
    gas_to_json,
)
from .validators import (
    GAS_SCHEMA_PATH,
    GasContractValidator,
    validate_gas_payload,
)

__all__ = [
    # Encoding
    "encode_gas",
    "decode_gas",
    "gas_to_json",
    "gas_from_json",
    "gas_json_schema",
    # Validators
    "GAS_SCHEMA_PATH",
    "GasContractValidator",
    # Functions
    "validate_gas_payload",
]
