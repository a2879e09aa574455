"""
NearGas — количество gas как неизменяемое значение u64

Immutable value object: хранит одно беззнаковое 64-битное значение в gas.
Равенство, порядок и hash — по значению (frozen dataclass, order=True).
Все арифметические операции возвращают новый экземпляр, None (checked)
или значение, прижатое к границам u64 (saturating).

Examples:
    >>> NearGas.from_gas(10**12) == NearGas.from_tgas(1) == NearGas.from_ggas(1000)
    True
    >>> NearGas.from_str("0.5 TGas") == NearGas.from_ggas(500)
    True
"""

from dataclasses import dataclass
from typing import Any, Dict, Final, Optional

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema

from near_gas.core.domain.units import ONE_GIGA_GAS, ONE_TERA_GAS, parse_gas_amount
from near_gas.core.math.u64_safeguards import (
    checked_add_u64,
    checked_div_u64,
    checked_mul_u64,
    checked_sub_u64,
    parse_u64,
    saturating_add_u64,
    saturating_div_u64,
    saturating_mul_u64,
    saturating_sub_u64,
    validate_u64,
    wrapping_mul_u64,
)

# =============================================================================
# КОНСТАНТЫ СЕРИАЛИЗАЦИИ
# =============================================================================

# Дескриптор схемы: NearGas описывается как обычная строка
GAS_JSON_SCHEMA: Final[Dict[str, Any]] = {"type": "string"}

# Размер Borsh-представления (u64 little-endian)
BORSH_GAS_SIZE: Final[int] = 8


def _from_optional(value: Optional[int]) -> Optional["NearGas"]:
    if value is None:
        return None
    return NearGas.from_gas(value)


@dataclass(frozen=True, order=True)
class NearGas:
    """
    Количество gas.

    Default — ноль gas. Значение вне [0, U64_MAX] отклоняется при создании.
    """

    inner: int = 0

    def __post_init__(self) -> None:
        validate_u64(self.inner, "gas")

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def from_gas(cls, inner: int) -> "NearGas":
        """Количество в целых gas."""
        return cls(inner)

    @classmethod
    def from_ggas(cls, inner: int) -> "NearGas":
        """
        Количество в целых GGas.

        Умножение wrapping (mod 2^64), без проверки переполнения: конструктор
        предназначен для заведомо малых констант.
        """
        return cls(wrapping_mul_u64(inner, ONE_GIGA_GAS))

    @classmethod
    def from_tgas(cls, inner: int) -> "NearGas":
        """Количество в целых TGas (wrapping, как from_ggas)."""
        return cls(wrapping_mul_u64(inner, ONE_TERA_GAS))

    @classmethod
    def from_str(cls, text: str) -> "NearGas":
        """
        Разбор строки с единицей ("1.5 TGas", "100 gigagas").

        Raises:
            IncorrectUnitError: Суффикс отсутствует или не распознан
            IncorrectNumberError: Числовая часть некорректна или переполняет u64
        """
        return cls(parse_gas_amount(text))

    @classmethod
    def from_digits(cls, text: str) -> "NearGas":
        """
        Каноническая текстовая форма: строка цифр без единицы и масштаба.

        Raises:
            ValueError: "... is not a valid unsigned integer"
        """
        return cls(parse_u64(text))

    @classmethod
    def from_borsh(cls, data: bytes) -> "NearGas":
        """
        8 байт u64 little-endian → NearGas.

        Raises:
            ValueError: Если длина данных не равна BORSH_GAS_SIZE
        """
        if len(data) != BORSH_GAS_SIZE:
            raise ValueError(
                f"Borsh NearGas must be exactly {BORSH_GAS_SIZE} bytes, got {len(data)}"
            )
        return cls(int.from_bytes(data, byteorder="little"))

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    def as_gas(self) -> int:
        return self.inner

    def as_ggas(self) -> int:
        """Целая часть GGas (остаток отбрасывается)."""
        return self.inner // ONE_GIGA_GAS

    def as_tgas(self) -> int:
        """Целая часть TGas (остаток отбрасывается)."""
        return self.inner // ONE_TERA_GAS

    # -------------------------------------------------------------------------
    # Checked арифметика
    # -------------------------------------------------------------------------

    def checked_add(self, rhs: "NearGas") -> Optional["NearGas"]:
        """self + rhs или None при переполнении."""
        return _from_optional(checked_add_u64(self.inner, rhs.inner))

    def checked_sub(self, rhs: "NearGas") -> Optional["NearGas"]:
        """self - rhs или None, если rhs > self."""
        return _from_optional(checked_sub_u64(self.inner, rhs.inner))

    def checked_mul(self, rhs: int) -> Optional["NearGas"]:
        """self * rhs или None при переполнении."""
        return _from_optional(checked_mul_u64(self.inner, rhs))

    def checked_div(self, rhs: int) -> Optional["NearGas"]:
        """self // rhs или None при rhs == 0."""
        return _from_optional(checked_div_u64(self.inner, rhs))

    # -------------------------------------------------------------------------
    # Saturating арифметика
    # -------------------------------------------------------------------------

    def saturating_add(self, rhs: "NearGas") -> "NearGas":
        return NearGas.from_gas(saturating_add_u64(self.inner, rhs.inner))

    def saturating_sub(self, rhs: "NearGas") -> "NearGas":
        return NearGas.from_gas(saturating_sub_u64(self.inner, rhs.inner))

    def saturating_mul(self, rhs: int) -> "NearGas":
        return NearGas.from_gas(saturating_mul_u64(self.inner, rhs))

    def saturating_div(self, rhs: int) -> "NearGas":
        """self // rhs; деление на ноль даёт ноль gas."""
        return NearGas.from_gas(saturating_div_u64(self.inner, rhs))

    # -------------------------------------------------------------------------
    # Представление
    # -------------------------------------------------------------------------

    def __str__(self) -> str:
        return str(self.inner)

    def __int__(self) -> int:
        return self.inner

    def to_borsh(self) -> bytes:
        """NearGas → 8 байт u64 little-endian."""
        return self.inner.to_bytes(BORSH_GAS_SIZE, byteorder="little")

    # -------------------------------------------------------------------------
    # Pydantic V2
    # -------------------------------------------------------------------------

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        """
        Поле типа NearGas: вход — строка цифр или NearGas, выход — строка цифр
        (python и json режимы).
        """
        return core_schema.no_info_plain_validator_function(
            _validate_near_gas,
            serialization=core_schema.plain_serializer_function_ser_schema(
                _serialize_near_gas, return_schema=core_schema.str_schema()
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        return dict(GAS_JSON_SCHEMA)


def _validate_near_gas(value: Any) -> NearGas:
    if isinstance(value, NearGas):
        return value
    return NearGas.from_digits(value)


def _serialize_near_gas(gas: NearGas) -> str:
    return str(gas.as_gas())


def parse_gas(text: str) -> NearGas:
    """Разбор строки с единицей в NearGas (см. NearGas.from_str)."""
    return NearGas.from_str(text)
