"""
JSON Schema Contract Validator

Валидация закодированных значений NearGas согласно формальному JSON Schema
контракту schema/near_gas.json (package data). Использует библиотеку jsonschema.

Контракт проверяет только форму строки (цифры, не длиннее u64). Диапазон u64
проверяется при декодировании (GasContractValidator.decode).
"""

import json
from pathlib import Path
from typing import Any, Dict, Final, Iterator, Optional

import jsonschema
from jsonschema import Draft202012Validator, ValidationError

from near_gas.core.domain.gas import NearGas

# Контракт near_gas.json рядом с этим модулем
GAS_SCHEMA_PATH: Final[Path] = Path(__file__).parent / "schema" / "near_gas.json"


def _load_schema(schema_path: Path) -> Dict[str, Any]:
    if not schema_path.exists():
        raise FileNotFoundError(f"Schema not found: {schema_path}")

    with open(schema_path, "r", encoding="utf-8") as f:
        schema = json.load(f)

    # Meta-validation
    try:
        Draft202012Validator.check_schema(schema)
    except jsonschema.SchemaError as e:
        raise ValueError(f"Invalid JSON Schema in {schema_path.name}: {e}") from e

    return schema


class GasContractValidator:
    """
    Валидатор строковой формы NearGas.

    По умолчанию использует packaged контракт near_gas.json.
    """

    def __init__(self, schema_path: Optional[Path] = None):
        self.schema_path = schema_path if schema_path is not None else GAS_SCHEMA_PATH
        self.schema = _load_schema(self.schema_path)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Any) -> None:
        """
        Валидация данных против контракта.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Any) -> bool:
        """Проверка валидности данных без exception."""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Any) -> Iterator[ValidationError]:
        """Итератор по всем ошибкам валидации."""
        return self.validator.iter_errors(data)

    def decode(self, data: Any) -> NearGas:
        """
        Валидация по контракту и декодирование в NearGas.

        Raises:
            ValidationError: Если строка не соответствует контракту
            ValueError: Если значение больше U64_MAX
        """
        self.validate(data)
        return NearGas.from_digits(data)


# Контракт по умолчанию
_GAS_CONTRACT = GasContractValidator()


def validate_gas_payload(data: Any) -> None:
    """
    Валидация закодированного NearGas.

    Args:
        data: Значение для валидации (ожидается строка цифр)

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    _GAS_CONTRACT.validate(data)
