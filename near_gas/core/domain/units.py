"""
GasUnits — единицы измерения gas и разбор строк с суффиксом единицы

Единственный допустимый способ перевода пользовательского ввода вида
"0.5 TGas" / "1000 GGas" в количество базовых единиц (gas).

Распознаваемые единицы (регистр не важен, пробелы по краям игнорируются):
- TGAS, TERAGAS → 10^12 gas
- GGAS, GIGAGAS → 10^9 gas

Числовая часть разбирается через decimal_scaler: float не используется.
"""

import logging
from types import MappingProxyType
from typing import Final, Mapping, Optional, Tuple

from near_gas.core.math.decimal_scaler import (
    DecimalNumberParsingError,
    parse_decimal_number,
)

logger = logging.getLogger(__name__)


# =============================================================================
# МАСШТАБЫ ЕДИНИЦ
# =============================================================================

# 1 GGas = 10^9 gas
ONE_GIGA_GAS: Final[int] = 10**9

# 1 TGas = 10^12 gas
ONE_TERA_GAS: Final[int] = 10**12

# Суффикс (в верхнем регистре) → масштаб
GAS_UNITS: Final[Mapping[str, int]] = MappingProxyType(
    {
        "TGAS": ONE_TERA_GAS,
        "TERAGAS": ONE_TERA_GAS,
        "GGAS": ONE_GIGA_GAS,
        "GIGAGAS": ONE_GIGA_GAS,
    }
)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class NearGasError(ValueError):
    """Базовая ошибка разбора количества gas из строки."""


class IncorrectUnitError(NearGasError):
    """
    Суффикс единицы отсутствует или не распознан.

    Attributes:
        text: Исходная строка целиком (без trim)
    """

    def __init__(self, text: str):
        self.text = text
        super().__init__(f"Incorrect gas unit in {text!r}")


class IncorrectNumberError(NearGasError):
    """
    Числовая часть некорректна или не представима в u64.

    Attributes:
        reason: Исходная ошибка decimal_scaler (kind + подстрока)
    """

    def __init__(self, reason: DecimalNumberParsingError):
        self.reason = reason
        super().__init__(f"Incorrect gas number: {reason}")


# =============================================================================
# РАЗБОР
# =============================================================================


def _find_unit_start(text: str) -> Optional[int]:
    for index, char in enumerate(text):
        if char.isascii() and char.isalpha():
            return index
    return None


def split_gas_literal(text: str) -> Tuple[str, str]:
    """
    Разделение строки на числовой литерал и суффикс единицы.

    Граница — первый ASCII-алфавитный символ. Поиск идёт в строке после trim,
    поэтому ведущие пробелы не сдвигают границу.

    Args:
        text: Пользовательский ввод (например, " 1.5 TeraGas ")

    Returns:
        (литерал после trim, суффикс в верхнем регистре), например ("1.5", "TERAGAS")

    Raises:
        IncorrectUnitError: Если в строке нет ни одной буквы
    """
    trimmed = text.strip()
    unit_start = _find_unit_start(trimmed)
    if unit_start is None:
        raise IncorrectUnitError(text)

    return trimmed[:unit_start].strip(), trimmed[unit_start:].upper()


def unit_scale(unit: str) -> Optional[int]:
    """Масштаб для суффикса единицы или None, если суффикс не распознан."""
    return GAS_UNITS.get(unit.upper())


def parse_gas_amount(text: str) -> int:
    """
    Разбор строки с единицей в количество gas.

    Args:
        text: Строка вида "<число> <единица>", например "0.5 TGas"

    Returns:
        Количество gas (u64)

    Raises:
        IncorrectUnitError: Суффикс отсутствует или не распознан
        IncorrectNumberError: Числовая часть некорректна или переполняет u64

    Examples:
        >>> parse_gas_amount("1 TGas")
        1000000000000
        >>> parse_gas_amount("0.5 tgas")
        500000000000
    """
    try:
        literal, unit = split_gas_literal(text)
    except IncorrectUnitError:
        logger.debug("Gas unit missing in %r", text)
        raise

    scale = unit_scale(unit)
    if scale is None:
        logger.debug("Unrecognized gas unit %r in %r", unit, text)
        raise IncorrectUnitError(text)

    try:
        return parse_decimal_number(literal, scale)
    except DecimalNumberParsingError as e:
        logger.debug("Rejected gas number %r in %r: %s", literal, text, e.kind.value)
        raise IncorrectNumberError(e) from e
