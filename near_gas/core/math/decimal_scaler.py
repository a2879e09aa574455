"""
Decimal Scaler — точная конверсия десятичной строки в u64

Модуль переводит десятичный литерал вида "12.345" в целое число базовых
единиц, умножая его на масштаб (10^9, 10^12, ...):

    result = whole * scale + fractional * scale / 10^len(fractional)

Грамматика литерала (после trim): digits ['.' digits]
- Допускается не более одной точки
- Пробелы внутри литерала запрещены
- Знаки '-' и '+' запрещены: величина всегда беззнаковая
- Хотя бы одна цифра обязательна (".5" и "5." допустимы, "." — нет)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Float не используется ни на одном шаге
2. Дробная часть длиннее, чем число нулей в масштабе → LONG_FRACTIONAL
   (усечение молча потеряло бы точность)
3. Любое переполнение u64 → LONG_WHOLE
4. Синтаксические ошибки → INVALID_NUMBER с исходным литералом
"""

from enum import Enum
from typing import Final

from near_gas.core.math.u64_safeguards import (
    U64_MAX,
    checked_add_u64,
    checked_mul_u64,
    exceeds_u64_digits,
    validate_u64,
)

DECIMAL_POINT: Final[str] = "."


# =============================================================================
# EXCEPTIONS
# =============================================================================


class DecimalNumberParsingErrorKind(str, Enum):
    """Классификация ошибки разбора десятичного литерала"""

    INVALID_NUMBER = "invalid_number"
    LONG_WHOLE = "long_whole"
    LONG_FRACTIONAL = "long_fractional"


class DecimalNumberParsingError(ValueError):
    """
    Ошибка разбора десятичного литерала.

    Attributes:
        kind: Класс ошибки (malformed literal или выход за диапазон)
        value: Подстрока, на которой произошла ошибка:
            - INVALID_NUMBER: весь литерал
            - LONG_WHOLE: целая часть
            - LONG_FRACTIONAL: дробная часть
    """

    def __init__(self, kind: DecimalNumberParsingErrorKind, value: str):
        self.kind = kind
        self.value = value
        super().__init__(f"{kind.value}: {value!r}")

    @property
    def is_overflow(self) -> bool:
        """True для ошибок диапазона (LONG_WHOLE, LONG_FRACTIONAL)."""
        return self.kind is not DecimalNumberParsingErrorKind.INVALID_NUMBER

    @classmethod
    def invalid_number(cls, value: str) -> "DecimalNumberParsingError":
        return cls(DecimalNumberParsingErrorKind.INVALID_NUMBER, value)

    @classmethod
    def long_whole(cls, value: str) -> "DecimalNumberParsingError":
        return cls(DecimalNumberParsingErrorKind.LONG_WHOLE, value)

    @classmethod
    def long_fractional(cls, value: str) -> "DecimalNumberParsingError":
        return cls(DecimalNumberParsingErrorKind.LONG_FRACTIONAL, value)


# =============================================================================
# HELPERS
# =============================================================================


def _is_ascii_digits(part: str) -> bool:
    # str.isdigit() пропускает unicode-цифры ("²", "٣")
    return part.isascii() and part.isdigit()


def scale_precision(scale: int) -> int:
    """
    Число завершающих нулей в десятичной записи масштаба.

    Это максимальное число дробных цифр, которое масштаб переводит
    в целое число базовых единиц без потерь.

    Examples:
        >>> scale_precision(10**12)
        12
        >>> scale_precision(1)
        0
    """
    digits = str(scale)
    return len(digits) - len(digits.rstrip("0"))


# =============================================================================
# PARSE
# =============================================================================


def parse_decimal_number(literal: str, scale: int) -> int:
    """
    Конверсия десятичного литерала в целое число базовых единиц.

    Args:
        literal: Десятичный литерал без суффикса единицы (например, "0.5")
        scale: Масштаб единицы в базовых единицах (например, 10**12)

    Returns:
        literal * scale как u64

    Raises:
        DecimalNumberParsingError: Если литерал некорректен или результат
            не представим в u64
        ValueError: Если scale не положительный u64

    Examples:
        >>> parse_decimal_number("0.5", 10**12)
        500000000000
        >>> parse_decimal_number("12", 10**9)
        12000000000
    """
    validate_u64(scale, "scale")
    if scale == 0:
        raise ValueError("scale must be positive")

    text = literal.strip()
    if not text:
        raise DecimalNumberParsingError.invalid_number(literal)

    whole, dot, fractional = text.partition(DECIMAL_POINT)

    if not dot:
        if not _is_ascii_digits(whole):
            raise DecimalNumberParsingError.invalid_number(text)
        return _scale_whole(whole, scale)

    # "1.1.1" → fractional == "1.1" и не проходит проверку цифр
    if not whole and not fractional:
        raise DecimalNumberParsingError.invalid_number(text)
    if whole and not _is_ascii_digits(whole):
        raise DecimalNumberParsingError.invalid_number(text)
    if fractional and not _is_ascii_digits(fractional):
        raise DecimalNumberParsingError.invalid_number(text)

    # Завершающие нули дробной части тоже считаются ("0.50" — две цифры)
    if len(fractional) > scale_precision(scale):
        raise DecimalNumberParsingError.long_fractional(fractional)

    # scale делится на 10^len(fractional) нацело, поэтому деление точное
    fractional_units = int(fractional or "0") * scale // 10 ** len(fractional)

    whole_units = _scale_whole(whole or "0", scale)
    result = checked_add_u64(whole_units, fractional_units)
    if result is None:
        raise DecimalNumberParsingError.long_whole(whole)
    return result


def _scale_whole(whole: str, scale: int) -> int:
    """whole * scale с проверкой переполнения u64."""
    if exceeds_u64_digits(whole):
        raise DecimalNumberParsingError.long_whole(whole)

    value = int(whole.lstrip("0") or "0")
    if value > U64_MAX:
        raise DecimalNumberParsingError.long_whole(whole)

    result = checked_mul_u64(value, scale)
    if result is None:
        raise DecimalNumberParsingError.long_whole(whole)
    return result
