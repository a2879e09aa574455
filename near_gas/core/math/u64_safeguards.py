"""
U64 Safeguards — беззнаковая 64-битная арифметика поверх int

Python int не ограничен по размеру, поэтому все границы u64 проверяются явно.
Модуль повторяет семантику checked/saturating/wrapping операций над u64:
- checked_*: None при переполнении, underflow или делении на ноль
- saturating_*: clamp в диапазон [0, U64_MAX]
- wrapping_*: результат по модулю 2^64

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ни одна функция не возвращает значение вне [0, U64_MAX]
2. Операнды вне диапазона u64 отклоняются через ValueError
3. Float никогда не участвует в вычислениях
"""

from typing import Final, Optional

# =============================================================================
# ГРАНИЦЫ U64
# =============================================================================

U64_MIN: Final[int] = 0

# 2^64 - 1
U64_MAX: Final[int] = (1 << 64) - 1

_U64_MODULUS: Final[int] = 1 << 64

# len(str(U64_MAX))
U64_MAX_DIGITS: Final[int] = 20


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def is_u64(value: int) -> bool:
    """Проверка, что value — int в диапазоне [0, U64_MAX] (bool не считается int)."""
    return isinstance(value, int) and not isinstance(value, bool) and U64_MIN <= value <= U64_MAX


def validate_u64(value: int, name: str = "value") -> int:
    """
    Проверка, что значение представимо как u64.

    Args:
        value: Проверяемое значение
        name: Имя параметра для сообщения об ошибке

    Returns:
        value без изменений

    Raises:
        TypeError: Если value не int
        ValueError: Если value вне [0, U64_MAX]
    """
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be int, got {type(value).__name__}")

    if value < U64_MIN or value > U64_MAX:
        raise ValueError(f"{name} {value} is out of u64 range [0, {U64_MAX}]")

    return value


def exceeds_u64_digits(digits: str) -> bool:
    """
    Строка ASCII-цифр заведомо длиннее любого u64 (ведущие нули не считаются).

    Проверка до int(): CPython отклоняет строки длиннее 4300 цифр
    собственным ValueError.
    """
    return len(digits.lstrip("0")) > U64_MAX_DIGITS


# =============================================================================
# CHECKED ОПЕРАЦИИ
# =============================================================================


def checked_add_u64(lhs: int, rhs: int) -> Optional[int]:
    """
    Checked сложение: lhs + rhs или None при переполнении.

    Examples:
        >>> checked_add_u64(U64_MAX - 2, 2) == U64_MAX
        True
        >>> checked_add_u64(U64_MAX - 2, 3) is None
        True
    """
    result = validate_u64(lhs, "lhs") + validate_u64(rhs, "rhs")
    if result > U64_MAX:
        return None
    return result


def checked_sub_u64(lhs: int, rhs: int) -> Optional[int]:
    """Checked вычитание: lhs - rhs или None при underflow."""
    result = validate_u64(lhs, "lhs") - validate_u64(rhs, "rhs")
    if result < U64_MIN:
        return None
    return result


def checked_mul_u64(lhs: int, rhs: int) -> Optional[int]:
    """Checked умножение: lhs * rhs или None при переполнении."""
    result = validate_u64(lhs, "lhs") * validate_u64(rhs, "rhs")
    if result > U64_MAX:
        return None
    return result


def checked_div_u64(lhs: int, rhs: int) -> Optional[int]:
    """
    Checked целочисленное деление (truncating).

    Returns:
        lhs // rhs или None, если rhs == 0
    """
    validate_u64(lhs, "lhs")
    if validate_u64(rhs, "rhs") == 0:
        return None
    return lhs // rhs


# =============================================================================
# SATURATING ОПЕРАЦИИ
# =============================================================================


def saturating_add_u64(lhs: int, rhs: int) -> int:
    """Saturating сложение: clamp к U64_MAX."""
    return min(validate_u64(lhs, "lhs") + validate_u64(rhs, "rhs"), U64_MAX)


def saturating_sub_u64(lhs: int, rhs: int) -> int:
    """Saturating вычитание: clamp к 0."""
    return max(validate_u64(lhs, "lhs") - validate_u64(rhs, "rhs"), U64_MIN)


def saturating_mul_u64(lhs: int, rhs: int) -> int:
    """Saturating умножение: clamp к U64_MAX."""
    return min(validate_u64(lhs, "lhs") * validate_u64(rhs, "rhs"), U64_MAX)


def saturating_div_u64(lhs: int, rhs: int) -> int:
    """
    Saturating деление.

    Деление на ноль возвращает 0 (а не U64_MAX). Это политика типа NearGas,
    а не общее правило saturation.

    Examples:
        >>> saturating_div_u64(10, 2)
        5
        >>> saturating_div_u64(10, 0)
        0
    """
    validate_u64(lhs, "lhs")
    if validate_u64(rhs, "rhs") == 0:
        return 0
    return lhs // rhs


# =============================================================================
# WRAPPING ОПЕРАЦИИ
# =============================================================================


def wrapping_mul_u64(lhs: int, rhs: int) -> int:
    """Wrapping умножение: (lhs * rhs) mod 2^64, как нативное u64 умножение."""
    return (validate_u64(lhs, "lhs") * validate_u64(rhs, "rhs")) % _U64_MODULUS


# =============================================================================
# РАЗБОР
# =============================================================================


def parse_u64(text: str) -> int:
    """
    Разбор строки из ASCII-цифр в u64.

    Без trim, без знака, без разделителей разрядов.

    Args:
        text: Строка цифр (например, "18446744073709551615")

    Returns:
        Значение u64

    Raises:
        ValueError: "... is not a valid unsigned integer" для пустой строки,
            нецифровых символов или значения больше U64_MAX
    """
    if not isinstance(text, str):
        raise ValueError(f"{text!r} is not a valid unsigned integer: expected str")
    if not text:
        raise ValueError("'' is not a valid unsigned integer: empty string")
    if not (text.isascii() and text.isdigit()):
        raise ValueError(f"{_preview(text)!r} is not a valid unsigned integer: invalid digit")

    too_large = f"{_preview(text)!r} is not a valid unsigned integer: too large for u64"
    if exceeds_u64_digits(text):
        raise ValueError(too_large)

    value = int(text.lstrip("0") or "0")
    if value > U64_MAX:
        raise ValueError(too_large)
    return value


def _preview(text: str, limit: int = 32) -> str:
    if len(text) <= limit:
        return text
    return f"{text[:limit]}...({len(text)} chars)"
