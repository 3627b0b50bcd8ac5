"""
Magnitude — беззнаковая арифметика над десятичными digit-буферами

Модуль содержит чистые функции над буферами десятичных цифр:
- Сравнение модулей (|a| ? |b|)
- Сложение с переносом (carry)
- Вычитание с заёмом (borrow), большее минус меньшее
- Schoolbook умножение O(n·m)
- Рендеринг значащих цифр в строку

ФОРМАТ БУФЕРА:
    tuple[int, ...], little-endian: digits[0] — младший разряд.
    Старшие нули допустимы (незначащие), например после сложения,
    которое выделяет max(len1, len2) + 1 разрядов.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Каждая цифра ∈ [DIGIT_MIN, DIGIT_MAX]
2. Входные буферы никогда не изменяются, результат — новый tuple
3. Знак здесь не существует: знаком управляет BigInteger
"""

from typing import Final, TypeAlias

# =============================================================================
# ПАРАМЕТРЫ ДЕСЯТИЧНОЙ СИСТЕМЫ
# =============================================================================

# Основание системы счисления (поддерживается только десятичная)
DECIMAL_BASE: Final[int] = 10

# Границы допустимой цифры в буфере
DIGIT_MIN: Final[int] = 0
DIGIT_MAX: Final[int] = DECIMAL_BASE - 1

# Размер блока разрядов при разборе Python int (10**18 < 2**63)
INT_CHUNK_DIGITS: Final[int] = 18

# Little-endian буфер десятичных цифр
Digits: TypeAlias = tuple[int, ...]


# =============================================================================
# ЗНАЧАЩИЕ РАЗРЯДЫ
# =============================================================================


def is_zero_digits(digits: Digits) -> bool:
    """True если все цифры буфера равны нулю."""
    for digit in reversed(digits):
        if digit != 0:
            return False
    return True


def real_length(digits: Digits) -> int:
    """
    Количество значащих разрядов буфера.

    Args:
        digits: Little-endian буфер цифр

    Returns:
        Индекс старшей ненулевой цифры + 1, либо 1 если буфер нулевой

    Examples:
        >>> real_length((3, 2, 1, 0, 0))
        3
        >>> real_length((0, 0))
        1
    """
    for index in range(len(digits) - 1, -1, -1):
        if digits[index] != 0:
            return index + 1
    # Все цифры нулевые — это ноль, у него один разряд
    return 1


# =============================================================================
# СРАВНЕНИЕ МОДУЛЕЙ
# =============================================================================


def compare_magnitudes(a: Digits, b: Digits) -> int:
    """
    Сравнение модулей без учёта знака: |a| ? |b|

    Буферы могут содержать незначащие старшие нули.

    Алгоритм:
        1. Если число значащих разрядов различается — больше тот,
           у кого разрядов больше (поразрядное сравнение не нужно)
        2. Иначе сравнение от старшего разряда к младшему,
           первое различие определяет результат

    Args:
        a: Первый буфер
        b: Второй буфер

    Returns:
        > 0 если |a| < |b|
        < 0 если |a| > |b|
          0 если |a| == |b|

    Examples:
        >>> compare_magnitudes((9,), (0, 1))
        1
        >>> compare_magnitudes((1, 2, 0), (1, 2))
        0
    """
    length_a = real_length(a)
    length_b = real_length(b)
    if length_a != length_b:
        return length_b - length_a

    for index in range(length_a - 1, -1, -1):
        digit_a = a[index]
        digit_b = b[index]
        if digit_a != digit_b:
            return digit_b - digit_a
    return 0


# =============================================================================
# СЛОЖЕНИЕ И ВЫЧИТАНИЕ МОДУЛЕЙ
# =============================================================================


def add_magnitudes(a: Digits, b: Digits) -> Digits:
    """
    Сумма модулей |a| + |b| с распространением переноса.

    Результат имеет длину max(len(a), len(b)) + 1: старший разряд
    гарантированно вмещает финальный перенос (или остаётся нулём).

    Args:
        a: Первое слагаемое
        b: Второе слагаемое

    Returns:
        Новый буфер суммы

    Examples:
        >>> add_magnitudes((9, 9), (1,))
        (0, 0, 1)
    """
    length = max(len(a), len(b)) + 1
    result = [0] * length
    carry = 0
    for index in range(length):
        digit_a = a[index] if index < len(a) else 0
        digit_b = b[index] if index < len(b) else 0
        digit_sum = digit_a + digit_b + carry
        carry = 1 if digit_sum >= DECIMAL_BASE else 0
        result[index] = digit_sum - carry * DECIMAL_BASE
    return tuple(result)


def subtract_magnitudes(bigger: Digits, smaller: Digits) -> Digits:
    """
    Разность модулей |bigger| - |smaller| с распространением заёма.

    ВАЖНО: вызывающий обязан гарантировать |bigger| >= |smaller|.
    Предусловие не проверяется, при нарушении результат бессмысленный.

    Args:
        bigger: Уменьшаемое (больший или равный модуль)
        smaller: Вычитаемое (меньший или равный модуль)

    Returns:
        Новый буфер длины max(len(bigger), len(smaller))

    Examples:
        >>> subtract_magnitudes((0, 0, 1), (1,))
        (9, 9, 0)
    """
    length = max(len(bigger), len(smaller))
    result = [0] * length
    borrow = 0
    for index in range(length):
        digit_bigger = bigger[index] if index < len(bigger) else 0
        digit_smaller = smaller[index] if index < len(smaller) else 0
        difference = digit_bigger - digit_smaller - borrow
        borrow = 1 if difference < 0 else 0
        result[index] = difference + borrow * DECIMAL_BASE
    return tuple(result)


# =============================================================================
# УМНОЖЕНИЕ МОДУЛЕЙ
# =============================================================================


def multiply_magnitudes(a: Digits, b: Digits) -> Digits:
    """
    Schoolbook умножение модулей |a| × |b|.

    Внешний цикл идёт по значащим цифрам b, внутренний — по значащим
    цифрам a. В каждую ячейку накапливается
    digit_b * digit_a + carry + частичная сумма, значение >= 10
    нормализуется вычитанием основания с подсчётом переноса.
    После внутреннего цикла перенос записывается в следующий разряд.

    Длина результата real_length(a) + real_length(b) достаточна
    для любого десятичного произведения.

    Args:
        a: Первый множитель
        b: Второй множитель

    Returns:
        Новый буфер произведения (может содержать старший ноль)

    Examples:
        >>> multiply_magnitudes((9, 9, 9), (9, 9, 9))
        (1, 0, 0, 8, 9, 9)
    """
    length_a = real_length(a)
    length_b = real_length(b)
    result = [0] * (length_a + length_b)
    for index_b in range(length_b):
        digit_b = b[index_b]
        carry = 0
        for index_a in range(length_a):
            cell = digit_b * a[index_a] + carry + result[index_b + index_a]
            carry = 0
            while cell >= DECIMAL_BASE:
                cell -= DECIMAL_BASE
                carry += 1
            result[index_b + index_a] = cell
        # Разряд index_b + length_a ещё не тронут предыдущими строками
        result[index_b + length_a] += carry
    return tuple(result)


# =============================================================================
# КОНВЕРСИЯ ИЗ INT
# =============================================================================


def digits_from_int(value: int) -> Digits:
    """
    Little-endian буфер для неотрицательного Python int.

    Разряды снимаются через divmod блоками по INT_CHUNK_DIGITS цифр,
    без str(value), поэтому лимит CPython на int → str не действует.

    Args:
        value: Неотрицательное целое

    Returns:
        Буфер без незначащих старших нулей ((0,) для нуля)

    Raises:
        ValueError: Если value отрицательное

    Examples:
        >>> digits_from_int(4096)
        (6, 9, 0, 4)
    """
    if value < 0:
        raise ValueError(f"value must be non-negative, got {value}")

    chunk_base = DECIMAL_BASE**INT_CHUNK_DIGITS
    result: list[int] = []
    while True:
        value, chunk = divmod(value, chunk_base)
        for _ in range(INT_CHUNK_DIGITS):
            chunk, digit = divmod(chunk, DECIMAL_BASE)
            result.append(digit)
        if value == 0:
            break
    return tuple(result[: real_length(result)])


# =============================================================================
# РЕНДЕРИНГ
# =============================================================================


def render_magnitude(digits: Digits) -> str:
    """Значащие цифры от старшей к младшей, без знака."""
    significant = digits[: real_length(digits)]
    return "".join(str(digit) for digit in reversed(significant))
