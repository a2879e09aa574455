"""
Tests for GasUnits parser

Проверяет:
1. Разделение строки на литерал и суффикс единицы
2. Распознавание TGas/TeraGas/GGas/GigaGas без учёта регистра
3. IncorrectUnitError с исходной строкой целиком
4. IncorrectNumberError с вложенной ошибкой decimal_scaler
"""

import logging

import pytest

from near_gas.core.domain import (
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
from near_gas.core.domain import units
from near_gas.core.math import DecimalNumberParsingErrorKind


class TestUnitTable:
    """Таблица единиц"""

    def test_scales(self) -> None:
        assert ONE_GIGA_GAS == 1_000_000_000
        assert ONE_TERA_GAS == 1_000 * ONE_GIGA_GAS

    def test_recognized_units(self) -> None:
        assert dict(GAS_UNITS) == {
            "TGAS": ONE_TERA_GAS,
            "TERAGAS": ONE_TERA_GAS,
            "GGAS": ONE_GIGA_GAS,
            "GIGAGAS": ONE_GIGA_GAS,
        }

    def test_table_is_read_only(self) -> None:
        with pytest.raises(TypeError):
            GAS_UNITS["PGAS"] = 10**15  # type: ignore[index]

    def test_unit_scale_case_insensitive(self) -> None:
        assert unit_scale("tGas") == ONE_TERA_GAS
        assert unit_scale("gigagas") == ONE_GIGA_GAS
        assert unit_scale("gas") is None


class TestSplitGasLiteral:
    """Разделение литерала и суффикса"""

    def test_basic(self) -> None:
        assert split_gas_literal("1.5 TeraGas") == ("1.5", "TERAGAS")

    def test_without_space(self) -> None:
        assert split_gas_literal("3ggas") == ("3", "GGAS")

    def test_leading_whitespace(self) -> None:
        """Ведущие пробелы не сдвигают границу суффикса"""
        assert split_gas_literal("   2 TGas  ") == ("2", "TGAS")

    def test_first_letter_starts_suffix(self) -> None:
        """Экспонента 'e' уже считается началом суффикса"""
        assert split_gas_literal("1e3 TGas") == ("1", "E3 TGAS")

    def test_no_letters(self) -> None:
        with pytest.raises(IncorrectUnitError) as exc_info:
            split_gas_literal("  42 ")
        assert exc_info.value.text == "  42 "


class TestParseGasAmount:
    """Разбор строк с единицами"""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("1 TGas", ONE_TERA_GAS),
            ("1 tgas", ONE_TERA_GAS),
            ("1 TeraGas", ONE_TERA_GAS),
            ("1 TERAGAS", ONE_TERA_GAS),
            ("1000 GGas", ONE_TERA_GAS),
            ("1000 gigagas", ONE_TERA_GAS),
            ("0.5 TGas", 500 * ONE_GIGA_GAS),
            ("0.5 GGas", 500_000_000),
            ("0.50 GGas", 500_000_000),
            ("1.000000001 GGas", ONE_GIGA_GAS + 1),
            ("0.000000000001 TGas", 1),
            ("  300 TGas  ", 300 * ONE_TERA_GAS),
            ("300TGas", 300 * ONE_TERA_GAS),
            ("0 GGas", 0),
        ],
    )
    def test_valid(self, text: str, expected: int) -> None:
        assert parse_gas_amount(text) == expected

    def test_tera_equals_thousand_giga(self) -> None:
        assert parse_gas_amount("1 TGas") == parse_gas_amount("1000 GGas") == 10**12

    def test_unit_resolved_through_unit_scale(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Суффикс ищется через unit_scale, а не напрямую в таблице"""
        seen = []

        def fake_unit_scale(unit: str) -> int:
            seen.append(unit)
            return 10

        monkeypatch.setattr(units, "unit_scale", fake_unit_scale)
        assert parse_gas_amount("1.5 PGas") == 15
        assert seen == ["PGAS"]


class TestIncorrectUnit:
    """Ошибки единицы"""

    @pytest.mark.parametrize(
        "text",
        ["0 pas", "0", "", "   ", "1 gas", "1 TGasX", "1 T Gas", "1 TGas 1", "1.5"],
    )
    def test_incorrect_unit_carries_full_input(self, text: str) -> None:
        with pytest.raises(IncorrectUnitError) as exc_info:
            parse_gas_amount(text)

        assert exc_info.value.text == text

    def test_without_currency(self) -> None:
        with pytest.raises(IncorrectUnitError) as exc_info:
            parse_gas_amount("0")
        assert exc_info.value.text == "0"

    def test_is_near_gas_error(self) -> None:
        with pytest.raises(NearGasError):
            parse_gas_amount("0 pas")


class TestIncorrectNumber:
    """Ошибки числовой части"""

    @pytest.mark.parametrize(
        "text, literal",
        [
            ("1.1.1 TeraGas", "1.1.1"),
            ("1. 0 TeraGas", "1. 0"),
            ("-1 TeraGas", "-1"),
            ("-0 TGas", "-0"),
            ("1 0 TGas", "1 0"),
            ("TGas", ""),
        ],
    )
    def test_invalid_number(self, text: str, literal: str) -> None:
        with pytest.raises(IncorrectNumberError) as exc_info:
            parse_gas_amount(text)

        reason = exc_info.value.reason
        assert reason.kind is DecimalNumberParsingErrorKind.INVALID_NUMBER
        assert reason.value == literal

    def test_long_fractional(self) -> None:
        with pytest.raises(IncorrectNumberError) as exc_info:
            parse_gas_amount("0.0000000005 GGas")

        reason = exc_info.value.reason
        assert reason.kind is DecimalNumberParsingErrorKind.LONG_FRACTIONAL
        assert reason.value == "0000000005"

    def test_huge_whole(self) -> None:
        """5000 цифр дают IncorrectNumberError(LONG_WHOLE)"""
        digits = "1" * 5000
        with pytest.raises(IncorrectNumberError) as exc_info:
            parse_gas_amount(f"{digits} TGas")

        reason = exc_info.value.reason
        assert reason.kind is DecimalNumberParsingErrorKind.LONG_WHOLE
        assert reason.value == digits

    def test_long_whole(self) -> None:
        with pytest.raises(IncorrectNumberError) as exc_info:
            parse_gas_amount("18446744073709551615 TGas")

        reason = exc_info.value.reason
        assert reason.kind is DecimalNumberParsingErrorKind.LONG_WHOLE
        assert reason.value == "18446744073709551615"

    def test_cause_is_chained(self) -> None:
        with pytest.raises(IncorrectNumberError) as exc_info:
            parse_gas_amount("-1 TGas")
        assert exc_info.value.__cause__ is exc_info.value.reason


class TestLogging:
    """Отклонённый ввод логируется на уровне DEBUG"""

    def test_rejection_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="near_gas.core.domain.units"):
            with pytest.raises(IncorrectUnitError):
                parse_gas_amount("5 pas")

        assert "Unrecognized gas unit" in caplog.text

    def test_success_not_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="near_gas.core.domain.units"):
            parse_gas_amount("5 TGas")

        assert caplog.records == []
