"""
BigInteger — Знаковое десятичное целое произвольной точности

Immutable Pydantic модель: знак + модуль в виде десятичных цифр (старшая
первая). Вся арифметика построена на цифрах (src.core.math.digits), без
встроенной арифметики больших int.

КАНОНИЧЕСКАЯ ФОРМА (проверяется валидаторами при каждом создании):
1. Модуль непустой
2. Нет ведущих нулей, кроме значения "0"
3. Ноль всегда неотрицательный (нет "-0")
4. Каждая цифра — целое 0..9

Операции: parse, to_text, compare, equals, negate, absolute,
add, subtract, multiply, divide (деление с усечением к нулю).
"""

import logging
from typing import Any, Final

from pydantic import BaseModel, Field, field_validator, model_validator

from src.core.contracts import validate_big_integer
from src.core.math.digits import (
    DIGIT_CHARS,
    SIGN_NEGATIVE,
    SIGN_POSITIVE,
    add_magnitudes,
    compare_magnitudes,
    divide_magnitudes,
    is_zero_magnitude,
    multiply_magnitudes,
    subtract_magnitudes,
)

logger = logging.getLogger(__name__)

# Версия формы обмена (см. contracts/schema/big_integer.json)
CONTRACT_SCHEMA_VERSION: Final[str] = "1"

_SIGN_NAME_POSITIVE: Final[str] = "positive"
_SIGN_NAME_NEGATIVE: Final[str] = "negative"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class BigIntegerParseError(ValueError):
    """Текст не может быть разобран как десятичное целое."""

    pass


class InvalidDigitError(BigIntegerParseError):
    """
    Недопустимый символ в записи числа.

    Допускается только один необязательный ведущий знак ('+' или '-'),
    остальные символы — ASCII цифры '0'..'9'.
    """

    def __init__(self, text: str, position: int, char: str | None = None):
        self.text = text
        self.position = position
        self.char = char
        if char is None:
            message = f"Empty text is not a decimal integer: {text!r}"
        else:
            message = f"Invalid digit {char!r} at position {position} in {text!r}"
        super().__init__(message)


class DivideByZeroError(ZeroDivisionError):
    """Делитель равен нулю."""

    pass


# =============================================================================
# BIG INTEGER MODEL
# =============================================================================


class BigInteger(BaseModel):
    """
    Знаковое десятичное целое произвольной точности.

    Immutable модель (frozen=True): каждая операция возвращает новый
    экземпляр. Равенство структурное (знак и цифры), модель hashable.
    """

    positive: bool = Field(True, description="Знак: True — неотрицательное")
    magnitude: tuple[int, ...] = Field(
        ..., min_length=1, description="Цифры модуля 0..9, старшая первая"
    )

    model_config = {"frozen": True}

    @field_validator("magnitude")
    @classmethod
    def validate_canonical_magnitude(cls, v: tuple[int, ...]) -> tuple[int, ...]:
        """Цифры в диапазоне 0..9 и без ведущих нулей."""
        for index, digit in enumerate(v):
            if not 0 <= digit <= 9:
                raise ValueError(f"digit {digit} at position {index} is outside 0..9")
        if len(v) > 1 and v[0] == 0:
            raise ValueError(f"magnitude has a leading zero: {v[:3]}...")
        return v

    @model_validator(mode="after")
    def validate_zero_is_positive(self) -> "BigInteger":
        """Ноль хранится только со знаком плюс."""
        if not self.positive and is_zero_magnitude(self.magnitude):
            raise ValueError("negative zero is not a canonical value")
        return self

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def parse(cls, text: str) -> "BigInteger":
        """Разбор текстовой записи; см. parse()."""
        return parse(text)

    @classmethod
    def from_int(cls, value: int) -> "BigInteger":
        """
        Создание из Python int через его десятичную запись.

        Только для совместимости с внешним кодом: арифметика int не используется.
        """
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"from_int expects int, got {type(value).__name__}")
        return parse(str(value))

    @classmethod
    def from_contract(cls, data: dict[str, Any]) -> "BigInteger":
        """
        Восстановление из формы обмена.

        Args:
            data: {"schema_version": "1", "sign": "positive"|"negative", "digits": "..."}

        Raises:
            jsonschema.ValidationError: Данные не соответствуют big_integer.json
                (версия, знак, неканонические цифры, отрицательный ноль)
        """
        validate_big_integer(data)

        value = parse(data["digits"])
        return negate(value) if data["sign"] == _SIGN_NAME_NEGATIVE else value

    def to_contract(self) -> dict[str, Any]:
        """Форма обмена (валидируется схемой big_integer.json)."""
        return {
            "schema_version": CONTRACT_SCHEMA_VERSION,
            "sign": _SIGN_NAME_POSITIVE if self.positive else _SIGN_NAME_NEGATIVE,
            "digits": "".join(DIGIT_CHARS[d] for d in self.magnitude),
        }

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    @property
    def is_zero(self) -> bool:
        return is_zero_magnitude(self.magnitude)

    def to_text(self) -> str:
        return to_text(self)

    def negate(self) -> "BigInteger":
        return negate(self)

    def absolute(self) -> "BigInteger":
        return absolute(self)

    def divide(self, other: "BigInteger") -> "BigInteger":
        """Деление с усечением к нулю; см. divide()."""
        return divide(self, other)

    # -------------------------------------------------------------------------
    # Python protocols
    # -------------------------------------------------------------------------

    def __str__(self) -> str:
        return to_text(self)

    def __repr__(self) -> str:
        return f"BigInteger({to_text(self)!r})"

    def __int__(self) -> int:
        return int(to_text(self))

    def __bool__(self) -> bool:
        return not self.is_zero

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, BigInteger):
            return NotImplemented
        return compare(self, other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, BigInteger):
            return NotImplemented
        return compare(self, other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, BigInteger):
            return NotImplemented
        return compare(self, other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, BigInteger):
            return NotImplemented
        return compare(self, other) >= 0

    def __neg__(self) -> "BigInteger":
        return negate(self)

    def __pos__(self) -> "BigInteger":
        return self

    def __abs__(self) -> "BigInteger":
        return absolute(self)

    def __add__(self, other: object) -> "BigInteger":
        if not isinstance(other, BigInteger):
            return NotImplemented
        return add(self, other)

    def __sub__(self, other: object) -> "BigInteger":
        if not isinstance(other, BigInteger):
            return NotImplemented
        return subtract(self, other)

    def __mul__(self, other: object) -> "BigInteger":
        if not isinstance(other, BigInteger):
            return NotImplemented
        return multiply(self, other)


def _build(positive: bool, digits: list[int] | tuple[int, ...]) -> BigInteger:
    """Сборка результата из канонического модуля; ноль получает знак плюс."""
    if is_zero_magnitude(digits):
        positive = True
    return BigInteger(positive=positive, magnitude=tuple(digits))


ZERO: Final[BigInteger] = BigInteger(positive=True, magnitude=(0,))
ONE: Final[BigInteger] = BigInteger(positive=True, magnitude=(1,))


# =============================================================================
# CONSTRUCTION & TEXT
# =============================================================================


def parse(text: str) -> BigInteger:
    """
    Разбор текстовой записи числа.

    Грамматика: ["+" | "-"] digit+. Ведущие нули после знака
    отбрасываются; если остались только нули, результат — ноль
    (всегда со знаком плюс). Знак без цифр недопустим.

    Args:
        text: Текстовая запись

    Returns:
        Каноническое значение

    Raises:
        TypeError: Если text не str
        InvalidDigitError: Пустой текст или недопустимый символ

    Examples:
        >>> str(parse("-000123"))
        '-123'
        >>> str(parse("-0"))
        '0'
    """
    if not isinstance(text, str):
        raise TypeError(f"parse expects str, got {type(text).__name__}")

    if not text:
        logger.debug("Rejected empty text")
        raise InvalidDigitError(text, 0)

    positive = True
    begin = 0
    if text[0] == SIGN_NEGATIVE:
        positive = False
        begin = 1
    elif text[0] == SIGN_POSITIVE:
        begin = 1

    # После знака нужна хотя бы одна цифра
    if begin == len(text):
        logger.debug("Rejected %r: sign without digits", text)
        raise InvalidDigitError(text, 0, text[0])

    while begin < len(text) and text[begin] == "0":
        begin += 1

    digits: list[int] = []
    for position in range(begin, len(text)):
        char = text[position]
        value = DIGIT_CHARS.find(char)
        if value < 0:
            logger.debug("Rejected %r: invalid digit %r at %d", text, char, position)
            raise InvalidDigitError(text, position, char)
        digits.append(value)

    # Только нули
    if not digits:
        digits = [0]

    return _build(positive, digits)


def to_text(value: BigInteger) -> str:
    """
    Каноническая текстовая запись.

    Examples:
        >>> to_text(parse("+0042"))
        '42'
    """
    sign = "" if value.positive else SIGN_NEGATIVE
    return sign + "".join(DIGIT_CHARS[d] for d in value.magnitude)


# =============================================================================
# COMPARISON & NEGATION
# =============================================================================


def compare(a: BigInteger, b: BigInteger) -> int:
    """
    Полный порядок на BigInteger.

    Разные знаки: неотрицательное больше. Одинаковые знаки: сравнение
    модулей (длина, затем цифры от старшей); для двух отрицательных
    результат инвертируется.

    Returns:
        -1 если a < b, 0 если a == b, 1 если a > b
    """
    if a.positive != b.positive:
        return 1 if a.positive else -1

    result = compare_magnitudes(a.magnitude, b.magnitude)
    return result if a.positive else -result


def equals(a: BigInteger, b: BigInteger) -> bool:
    """Структурное равенство: знак и цифры совпадают."""
    return a.positive == b.positive and a.magnitude == b.magnitude


def negate(value: BigInteger) -> BigInteger:
    """Смена знака; ноль остаётся нулём."""
    return _build(not value.positive, value.magnitude)


def absolute(value: BigInteger) -> BigInteger:
    """Модуль числа."""
    if value.positive:
        return value
    return BigInteger(positive=True, magnitude=value.magnitude)


# =============================================================================
# ADDITION & SUBTRACTION
# =============================================================================


def add(a: BigInteger, b: BigInteger) -> BigInteger:
    """
    Сложение.

    Разные знаки сводятся к вычитанию: a + b = a - (-b).
    Одинаковые знаки: сложение модулей, знак общий.
    """
    if a.positive != b.positive:
        return subtract(a, negate(b))

    return _build(a.positive, add_magnitudes(a.magnitude, b.magnitude))


def subtract(a: BigInteger, b: BigInteger) -> BigInteger:
    """
    Вычитание.

    - a == b → 0
    - Разные знаки: a >= 0 → a + (-b); a < 0 → -((-a) + b)
    - Одинаковые знаки, |a| < |b| → |b| - |a| со знаком, противоположным a
    - Оба отрицательные, |a| >= |b| → -(|a| - |b|)
    - Оба неотрицательные, |a| >= |b| → вычитание модулей с заёмом
    """
    if equals(a, b):
        return ZERO

    if a.positive != b.positive:
        if a.positive:
            return add(a, negate(b))
        return negate(add(negate(a), b))

    if compare_magnitudes(a.magnitude, b.magnitude) < 0:
        return _build(not a.positive, subtract_magnitudes(b.magnitude, a.magnitude))

    return _build(a.positive, subtract_magnitudes(a.magnitude, b.magnitude))


# =============================================================================
# MULTIPLICATION
# =============================================================================


def multiply(a: BigInteger, b: BigInteger) -> BigInteger:
    """
    Умножение.

    Ноль в любом операнде → 0. Модуль одного операнда равен 1 → модуль
    другого со знаком XNOR. Иначе умножение "в столбик".
    """
    if a.is_zero or b.is_zero:
        return ZERO

    positive = a.positive == b.positive
    if a.magnitude == ONE.magnitude:
        return _build(positive, b.magnitude)
    if b.magnitude == ONE.magnitude:
        return _build(positive, a.magnitude)

    return _build(positive, multiply_magnitudes(a.magnitude, b.magnitude))


# =============================================================================
# DIVISION
# =============================================================================


def divide(a: BigInteger, b: BigInteger) -> BigInteger:
    """
    Деление с усечением к нулю.

    Модуль частного — целая часть |a| / |b|, знак — XNOR знаков операндов
    (нулевое частное всегда неотрицательное). Совпадает с машинным
    целочисленным делением, а не с floor-делением Python (//).

    Args:
        a: Делимое
        b: Делитель

    Returns:
        Частное

    Raises:
        DivideByZeroError: Если b равен нулю

    Examples:
        >>> str(divide(parse("-7"), parse("2")))
        '-3'
        >>> str(divide(parse("7"), parse("00000392")))
        '0'
    """
    if b.is_zero:
        logger.debug("Division of %s by zero", to_text(a))
        raise DivideByZeroError(f"division by zero: {to_text(a)} / 0")

    order = compare_magnitudes(a.magnitude, b.magnitude)
    if order < 0:
        return ZERO

    positive = a.positive == b.positive
    if b.magnitude == ONE.magnitude:
        return _build(positive, a.magnitude)
    if order == 0:
        return _build(positive, ONE.magnitude)

    quotient, _ = divide_magnitudes(a.magnitude, b.magnitude)
    return _build(positive, quotient)
