"""
Gas Encoding — текстовая сериализация NearGas

Каноническая форма для структурированных форматов (JSON и т.п.) — строка
десятичных цифр без суффикса единицы и без разделителей разрядов:

    NearGas.from_tgas(1)  ↔  "1000000000000"

NearGas сам является Pydantic-типом поля (см. NearGas.__get_pydantic_core_schema__),
функции ниже — тонкие обёртки для кода без моделей.
Бинарная форма Borsh — NearGas.to_borsh / NearGas.from_borsh.
"""

from typing import Any, Dict, Final

from pydantic import TypeAdapter

from near_gas.core.domain.gas import NearGas

_GAS_ADAPTER: Final[TypeAdapter] = TypeAdapter(NearGas)


def encode_gas(gas: NearGas) -> str:
    """
    Кодирование NearGas в строку десятичных цифр.

    Examples:
        >>> encode_gas(NearGas.from_ggas(1))
        '1000000000'
    """
    return str(gas.as_gas())


def decode_gas(text: str) -> NearGas:
    """
    Декодирование строки десятичных цифр в NearGas.

    Суффиксы единиц и масштабирование не поддерживаются: "1 TGas" — ошибка.
    Для пользовательского ввода с единицами используйте NearGas.from_str.

    Raises:
        ValueError: "... is not a valid unsigned integer"
    """
    return NearGas.from_digits(text)


def gas_json_schema() -> Dict[str, Any]:
    """JSON Schema поля NearGas, как её видит Pydantic."""
    return _GAS_ADAPTER.json_schema()


def gas_to_json(gas: NearGas) -> str:
    """
    JSON-представление NearGas (строка в кавычках).

    Examples:
        >>> gas_to_json(NearGas.from_gas(8))
        '"8"'
    """
    return _GAS_ADAPTER.dump_json(gas).decode("utf-8")


def gas_from_json(data: str) -> NearGas:
    """
    Разбор JSON-строки в NearGas.

    Raises:
        pydantic.ValidationError: Если значение не строка цифр u64
    """
    return _GAS_ADAPTER.validate_json(data)
