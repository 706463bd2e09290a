"""
Digits — Schoolbook Arithmetic on Decimal Magnitudes

Модуль содержит алгоритмы над модулями чисел (magnitudes), записанными как
последовательность десятичных цифр, старшая цифра первая:
- Нормализация (удаление ведущих нулей)
- Сравнение модулей
- Сложение с переносом (carry)
- Вычитание с заёмом (borrow)
- Умножение "в столбик"
- Деление "уголком" через повторное вычитание

Знак здесь не обрабатывается: знаковая логика живёт в BigInteger.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Входы — канонические модули: непустые, без ведущих нулей (кроме "0")
2. Выходы — канонические модули той же формы
3. Входные последовательности никогда не изменяются
4. Встроенная арифметика больших int не используется: только цифры 0..9
"""

from typing import Final, Sequence

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Основание системы счисления
BASE: Final[int] = 10

# Допустимые символы цифр (только ASCII)
DIGIT_CHARS: Final[str] = "0123456789"

# Символы знака в текстовой форме
SIGN_NEGATIVE: Final[str] = "-"
SIGN_POSITIVE: Final[str] = "+"


# =============================================================================
# НОРМАЛИЗАЦИЯ И СРАВНЕНИЕ
# =============================================================================


def trim_leading_zeros(digits: Sequence[int]) -> list[int]:
    """
    Удаление ведущих нулей с сохранением хотя бы одной цифры.

    Args:
        digits: Цифры, старшая первая (может содержать ведущие нули)

    Returns:
        Новый список без ведущих нулей; [0] для нулевого значения

    Examples:
        >>> trim_leading_zeros([0, 0, 7])
        [7]
        >>> trim_leading_zeros([0, 0, 0])
        [0]
    """
    start = 0
    # Последнюю цифру не трогаем: ноль остаётся одной цифрой
    while start < len(digits) - 1 and digits[start] == 0:
        start += 1
    return list(digits[start:])


def is_zero_magnitude(digits: Sequence[int]) -> bool:
    """Проверка, что канонический модуль равен нулю."""
    return len(digits) == 1 and digits[0] == 0


def compare_magnitudes(a: Sequence[int], b: Sequence[int]) -> int:
    """
    Сравнение двух канонических модулей.

    Сначала сравнивается длина (без ведущих нулей длиннее = больше),
    затем цифры от старшей к младшей.

    Args:
        a: Первый модуль
        b: Второй модуль

    Returns:
        -1 если a < b, 0 если a == b, 1 если a > b

    Examples:
        >>> compare_magnitudes([1, 0], [9])
        1
        >>> compare_magnitudes([4, 2], [4, 7])
        -1
    """
    if len(a) != len(b):
        return 1 if len(a) > len(b) else -1

    for left, right in zip(a, b):
        if left != right:
            return 1 if left > right else -1

    return 0


# =============================================================================
# СЛОЖЕНИЕ И ВЫЧИТАНИЕ
# =============================================================================


def add_magnitudes(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """
    Сложение модулей "в столбик".

    Цифры выравниваются по младшему разряду, перенос идёт влево.
    Под результат выделяется на одну позицию больше, чем длина
    более длинного операнда, чтобы поглотить финальный перенос.

    Args:
        a: Первое слагаемое
        b: Второе слагаемое

    Returns:
        Канонический модуль суммы

    Examples:
        >>> add_magnitudes([9, 9], [1])
        [1, 0, 0]
    """
    longer, shorter = (a, b) if len(a) >= len(b) else (b, a)
    offset = len(longer) - len(shorter)

    total = [0] * (len(longer) + 1)
    carry = 0
    for i in range(len(longer) - 1, -1, -1):
        j = i - offset
        s = longer[i] + carry
        if j >= 0:
            s += shorter[j]
        total[i + 1] = s % BASE
        carry = s // BASE
    total[0] = carry

    return trim_leading_zeros(total)


def subtract_magnitudes(minuend: Sequence[int], subtrahend: Sequence[int]) -> list[int]:
    """
    Вычитание модулей "в столбик" с заёмом.

    Требует minuend >= subtrahend: тогда заём не выходит за старший разряд.

    Args:
        minuend: Уменьшаемое
        subtrahend: Вычитаемое (не больше уменьшаемого)

    Returns:
        Канонический модуль разности

    Raises:
        ValueError: Если subtrahend > minuend

    Examples:
        >>> subtract_magnitudes([1, 0, 0], [1])
        [9, 9]
        >>> subtract_magnitudes([7], [3])
        [4]
    """
    if compare_magnitudes(minuend, subtrahend) < 0:
        raise ValueError(
            f"subtrahend must not exceed minuend: {len(subtrahend)} digits vs {len(minuend)}"
        )

    # Однозначные операнды: разность одной цифрой
    if len(minuend) == 1:
        return [minuend[0] - subtrahend[0]]

    offset = len(minuend) - len(subtrahend)
    difference = [0] * len(minuend)
    borrow = 0
    for i in range(len(minuend) - 1, -1, -1):
        j = i - offset
        d = minuend[i] - borrow
        if j >= 0:
            d -= subtrahend[j]
        if d < 0:
            d += BASE
            borrow = 1
        else:
            borrow = 0
        difference[i] = d

    return trim_leading_zeros(difference)


# =============================================================================
# УМНОЖЕНИЕ
# =============================================================================


def multiply_magnitudes(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """
    Умножение модулей "в столбик".

    Буфер длины len(a) + len(b). Для каждой пары позиций (i, j), от младших
    разрядов к старшим, произведение a[i] * b[j] добавляется в позицию
    i + j + 1, там остаётся остаток по BASE, а перенос сразу прибавляется
    к позиции i + j. Перенос в i + j обрабатывается на следующей итерации,
    когда эта позиция становится позицией единиц.

    Args:
        a: Первый множитель
        b: Второй множитель

    Returns:
        Канонический модуль произведения

    Examples:
        >>> multiply_magnitudes([1, 2], [1, 2])
        [1, 4, 4]
    """
    product = [0] * (len(a) + len(b))

    for i in range(len(a) - 1, -1, -1):
        for j in range(len(b) - 1, -1, -1):
            high = i + j
            low = high + 1
            p = a[i] * b[j] + product[low]
            product[low] = p % BASE
            product[high] += p // BASE

    return trim_leading_zeros(product)


# =============================================================================
# ДЕЛЕНИЕ
# =============================================================================


def _subtract_while_not_less(buffer: list[int], divisor: Sequence[int]) -> tuple[int, list[int]]:
    """Повторное вычитание делителя: (количество вычитаний, остаток)."""
    count = 0
    while compare_magnitudes(buffer, divisor) >= 0:
        buffer = subtract_magnitudes(buffer, divisor)
        count += 1
    return count, buffer


def divide_magnitudes(
    dividend: Sequence[int],
    divisor: Sequence[int],
) -> tuple[list[int], list[int]]:
    """
    Деление модулей "уголком" через повторное вычитание.

    Проход слева направо по цифрам делимого с буфером "остаток на данный
    момент":
    1. Пока буфер меньше делителя, к нему дописывается следующая цифра;
       до первого срабатывания цифры частного не выписываются, поэтому
       ведущих нулей в частном нет.
    2. Когда буфер >= делителя, цифра частного — число вычитаний делителя
       (от 1 до 9), после которых буфер становится меньше делителя.
    3. После точного шага (остаток ноль) каждая следующая нулевая цифра
       делимого даёт нулевую цифру частного.
    4. После неточного шага каждая дописанная цифра, оставляющая буфер
       меньше делителя, даёт нулевую цифру частного.

    Args:
        dividend: Делимое
        divisor: Делитель (ненулевой)

    Returns:
        (частное, остаток) — оба канонические; частное * делитель + остаток
        равно делимому

    Raises:
        ZeroDivisionError: Если делитель равен нулю

    Examples:
        >>> divide_magnitudes([1, 0, 0, 7], [5])
        ([2, 0, 1], [2])
        >>> divide_magnitudes([7], [3, 9, 2])
        ([0], [7])
    """
    if is_zero_magnitude(divisor):
        raise ZeroDivisionError("divisor magnitude is zero")

    if compare_magnitudes(dividend, divisor) < 0:
        return [0], list(dividend)

    quotient: list[int] = []
    remainder: list[int] = []

    for digit in dividend:
        # Точный шаг оставляет [0]: новая цифра начинает буфер заново
        if is_zero_magnitude(remainder):
            remainder = []
        remainder.append(digit)
        remainder = trim_leading_zeros(remainder)

        count, remainder = _subtract_while_not_less(remainder, divisor)
        if quotient or count:
            quotient.append(count)

    return quotient, remainder
