"""
Тесты для модели BigInteger: создание, текст, сравнение, знак

Проверяет:
1. Разбор текста и нормализацию (знак, ведущие нули, ноль)
2. Ошибки разбора (InvalidDigitError)
3. Инварианты канонической формы (валидаторы Pydantic)
4. Immutability (frozen=True) и hashable
5. Сравнение, равенство, negate, absolute
6. Python протоколы (str, repr, int, bool, операторы)
"""

import pytest
from pydantic import ValidationError

from src.core.domain import (
    ONE,
    ZERO,
    BigInteger,
    BigIntegerParseError,
    InvalidDigitError,
    absolute,
    compare,
    equals,
    negate,
    parse,
    to_text,
)


# =============================================================================
# PARSING TESTS
# =============================================================================


class TestParse:
    """Тесты для parse и to_text"""

    def test_plain_digits(self) -> None:
        value = parse("1234")
        assert value.positive is True
        assert value.magnitude == (1, 2, 3, 4)
        assert to_text(value) == "1234"

    def test_signs(self) -> None:
        """Необязательный ведущий знак"""
        assert to_text(parse("+1234")) == "1234"
        assert to_text(parse("-1234")) == "-1234"
        assert parse("-1234").positive is False

    def test_leading_zeros_stripped(self) -> None:
        """Ведущие нули после знака отбрасываются"""
        assert to_text(parse("001234")) == "1234"
        assert to_text(parse("+001234")) == "1234"
        assert to_text(parse("-001234")) == "-1234"
        assert to_text(parse("00000392")) == "392"

    def test_zero_collapses_to_single_digit(self) -> None:
        """Только нули → один ноль"""
        assert parse("0").magnitude == (0,)
        assert parse("0000").magnitude == (0,)

    def test_negative_zero_is_positive(self) -> None:
        """Нет отрицательного нуля"""
        assert parse("-0") == ZERO
        assert parse("-0000").positive is True
        assert to_text(parse("-000")) == "0"

    def test_sign_without_digits_rejected(self) -> None:
        """Знак без цифр недопустим"""
        for text in ("-", "+"):
            with pytest.raises(InvalidDigitError) as exc_info:
                parse(text)
            assert exc_info.value.position == 0
            assert exc_info.value.char == text

    def test_sign_followed_by_zeros_is_zero(self) -> None:
        assert parse("-0") == ZERO
        assert parse("+000") == ZERO

    def test_classmethod_alias(self) -> None:
        assert BigInteger.parse("-42") == parse("-42")

    def test_canonical_round_trip(self) -> None:
        """to_text(parse(t)) — каноническая форма t"""
        cases = {
            "7": "7",
            "000007": "7",
            "-000007": "-7",
            "+10": "10",
            "-0": "0",
            "100200300": "100200300",
        }
        for text, canonical in cases.items():
            assert to_text(parse(text)) == canonical
            assert to_text(parse(canonical)) == canonical


class TestParseErrors:
    """Тесты для ошибок разбора"""

    def test_letters_rejected(self) -> None:
        with pytest.raises(InvalidDigitError):
            parse("sa23bcd")
        with pytest.raises(InvalidDigitError):
            parse("a")

    def test_repeated_sign_rejected(self) -> None:
        """Знак допускается только один раз"""
        with pytest.raises(InvalidDigitError):
            parse("---3427190")
        with pytest.raises(InvalidDigitError):
            parse("++34721")
        with pytest.raises(InvalidDigitError):
            parse("--1234")

    def test_trailing_sign_rejected(self) -> None:
        with pytest.raises(InvalidDigitError):
            parse("1234+")

    def test_decimal_point_rejected(self) -> None:
        with pytest.raises(InvalidDigitError):
            parse("+12.34")

    def test_whitespace_rejected(self) -> None:
        with pytest.raises(InvalidDigitError):
            parse(" 12")
        with pytest.raises(InvalidDigitError):
            parse("12 ")

    def test_non_ascii_digits_rejected(self) -> None:
        """Только ASCII цифры: прочие Unicode цифры недопустимы"""
        with pytest.raises(InvalidDigitError):
            parse("١٢٣")

    def test_empty_text_rejected(self) -> None:
        with pytest.raises(InvalidDigitError, match="Empty text"):
            parse("")

    def test_error_details(self) -> None:
        """Ошибка содержит позицию и символ"""
        with pytest.raises(InvalidDigitError) as exc_info:
            parse("0007x1")

        error = exc_info.value
        assert error.text == "0007x1"
        assert error.position == 4
        assert error.char == "x"
        assert "position 4" in str(error)

    def test_error_hierarchy(self) -> None:
        """InvalidDigitError — это BigIntegerParseError и ValueError"""
        with pytest.raises(BigIntegerParseError):
            parse("12a")
        with pytest.raises(ValueError):
            parse("12a")

    def test_non_string_rejected(self) -> None:
        with pytest.raises(TypeError):
            parse(123)  # type: ignore


# =============================================================================
# MODEL INVARIANT TESTS
# =============================================================================


class TestCanonicalInvariants:
    """Тесты для валидаторов канонической формы"""

    def test_valid_direct_construction(self) -> None:
        value = BigInteger(positive=False, magnitude=(4, 2))
        assert to_text(value) == "-42"

    def test_default_sign_is_positive(self) -> None:
        assert BigInteger(magnitude=(5,)).positive is True

    def test_empty_magnitude_rejected(self) -> None:
        with pytest.raises(ValidationError):
            BigInteger(positive=True, magnitude=())

    def test_leading_zero_rejected(self) -> None:
        with pytest.raises(ValidationError, match="leading zero"):
            BigInteger(positive=True, magnitude=(0, 7))

    def test_digit_out_of_range_rejected(self) -> None:
        with pytest.raises(ValidationError, match="outside 0..9"):
            BigInteger(positive=True, magnitude=(1, 10))
        with pytest.raises(ValidationError, match="outside 0..9"):
            BigInteger(positive=True, magnitude=(-1,))

    def test_negative_zero_rejected(self) -> None:
        with pytest.raises(ValidationError, match="negative zero"):
            BigInteger(positive=False, magnitude=(0,))

    def test_immutable(self) -> None:
        """BigInteger должен быть immutable (frozen=True)"""
        value = parse("42")
        with pytest.raises(ValidationError):
            value.positive = False  # type: ignore

    def test_hashable(self) -> None:
        """Равные значения дают один ключ словаря"""
        table = {parse("0042"): "a"}
        assert table[parse("42")] == "a"
        assert len({parse("-0"), parse("0"), ZERO}) == 1

    def test_constants(self) -> None:
        assert to_text(ZERO) == "0"
        assert to_text(ONE) == "1"


# =============================================================================
# COMPARISON & NEGATION TESTS
# =============================================================================


class TestCompare:
    """Тесты для compare и операторов сравнения"""

    def test_equal_values(self) -> None:
        assert compare(parse("0"), parse("-0")) == 0
        assert compare(parse("-123"), parse("-0123")) == 0

    def test_sign_decides(self) -> None:
        """Неотрицательное больше отрицательного"""
        assert compare(parse("1"), parse("-1")) == 1
        assert compare(parse("-1000"), parse("0")) == -1

    def test_length_decides(self) -> None:
        assert compare(parse("10"), parse("9")) == 1
        assert compare(parse("-10"), parse("-9")) == -1

    def test_digits_decide(self) -> None:
        assert compare(parse("1"), parse("2")) == -1
        assert compare(parse("-1"), parse("-2")) == 1
        assert compare(parse("5001"), parse("4999")) == 1

    def test_operators(self) -> None:
        assert parse("1") < parse("2")
        assert parse("1") <= parse("1")
        assert parse("2") > parse("1")
        assert parse("2") >= parse("2")
        assert parse("10") > parse("9")
        assert parse("-10") < parse("-9")

    def test_sorting(self) -> None:
        values = [parse(t) for t in ["5", "-12", "0", "300", "-3", "12"]]
        assert [to_text(v) for v in sorted(values)] == ["-12", "-3", "0", "5", "12", "300"]

    def test_compare_with_other_type(self) -> None:
        with pytest.raises(TypeError):
            parse("1") < 2  # type: ignore


class TestEquals:
    """Тесты для equals и =="""

    def test_structural_equality(self) -> None:
        assert equals(parse("0"), parse("0"))
        assert not equals(parse("0"), parse("1"))
        assert not equals(parse("1"), negate(parse("1")))
        assert parse("0042") == parse("+42")
        assert parse("100") != negate(parse("100"))


class TestNegateAbsolute:
    """Тесты для negate и absolute"""

    def test_negate(self) -> None:
        assert to_text(negate(parse("100"))) == "-100"
        assert to_text(negate(parse("-100"))) == "100"
        assert to_text(-parse("7")) == "-7"

    def test_negate_zero(self) -> None:
        """Смена знака у нуля даёт ноль"""
        assert negate(ZERO) == ZERO
        assert (-ZERO).positive is True

    def test_negate_does_not_mutate(self) -> None:
        value = parse("5")
        negate(value)
        assert to_text(value) == "5"

    def test_absolute(self) -> None:
        assert to_text(absolute(parse("-123"))) == "123"
        assert to_text(absolute(parse("123"))) == "123"
        assert abs(parse("-9")) == parse("9")
        assert absolute(ZERO) == ZERO

    def test_methods(self) -> None:
        assert parse("3").negate() == parse("-3")
        assert parse("-3").absolute() == parse("3")
        assert +parse("-3") == parse("-3")


# =============================================================================
# PYTHON PROTOCOL TESTS
# =============================================================================


class TestPythonProtocols:
    """Тесты для str/repr/int/bool и from_int"""

    def test_str_and_repr(self) -> None:
        value = parse("-00420")
        assert str(value) == "-420"
        assert repr(value) == "BigInteger('-420')"
        assert value.to_text() == "-420"

    def test_int_conversion(self) -> None:
        assert int(parse("-12345678901234567890")) == -12345678901234567890
        assert int(ZERO) == 0

    def test_bool(self) -> None:
        assert not ZERO
        assert parse("-1")

    def test_is_zero(self) -> None:
        assert ZERO.is_zero
        assert not ONE.is_zero

    def test_from_int(self) -> None:
        assert BigInteger.from_int(-385) == parse("-385")
        assert BigInteger.from_int(0) == ZERO
        assert BigInteger.from_int(10**30) == parse("1" + "0" * 30)

    def test_from_int_rejects_other_types(self) -> None:
        with pytest.raises(TypeError):
            BigInteger.from_int("12")  # type: ignore
        with pytest.raises(TypeError):
            BigInteger.from_int(True)
        with pytest.raises(TypeError):
            BigInteger.from_int(1.5)  # type: ignore
