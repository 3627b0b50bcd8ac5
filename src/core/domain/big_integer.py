"""
BigInteger — Знаковое десятичное целое произвольной точности

Immutable Pydantic модель: little-endian буфер десятичных цифр + флаг знака.
Вся беззнаковая арифметика делегируется в src.core.math.magnitude,
здесь решается только знак результата.

Источники значения:
- Десятичная строка (только цифры '0'..'9', без знака)
- Python int (знак обрабатывается отдельно от модуля)
- Сырой digit-буфер + знак (используется арифметикой)
- Существующий BigInteger (возвращается как есть, без копии)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Буфер никогда не изменяется после создания (tuple + frozen=True)
2. is_zero вычисляется один раз при создании
3. Ноль всегда неотрицательный: флаг знака на нулевом буфере сбрасывается
4. Арифметика всегда возвращает новый экземпляр либо один из операндов
"""

from functools import singledispatch
from typing import Any, Final

import structlog
from pydantic import (
    BaseModel,
    Field,
    PrivateAttr,
    StrictInt,
    ValidationInfo,
    field_validator,
)

from src.core.math.magnitude import (
    DIGIT_MAX,
    DIGIT_MIN,
    Digits,
    add_magnitudes,
    compare_magnitudes,
    digits_from_int,
    is_zero_digits,
    multiply_magnitudes,
    real_length,
    render_magnitude,
    subtract_magnitudes,
)

logger = structlog.get_logger(__name__)

# Допустимые символы десятичной строки
DIGIT_CHARS: Final[str] = "0123456789"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class BigIntegerError(Exception):
    """Базовая ошибка создания BigInteger."""

    pass


class EmptyInputError(BigIntegerError, ValueError):
    """Пустая строка не является десятичным представлением."""

    pass


class FormatError(BigIntegerError, ValueError):
    """
    Строка содержит символ вне '0'..'9'.

    Исходная строка доступна в атрибуте representation.
    """

    def __init__(self, representation: str):
        self.representation = representation
        super().__init__(
            f"Decimal string representation must contain digits between 0 and 9: "
            f"{representation!r}"
        )


class UnsupportedTypeError(BigIntegerError, TypeError):
    """Значение нельзя преобразовать в BigInteger."""

    pass


# =============================================================================
# BIG INTEGER MODEL
# =============================================================================


class BigInteger(BaseModel):
    """
    Знаковое десятичное целое произвольной точности.

    Immutable модель (frozen=True): все операции возвращают новый экземпляр.
    Буфер может содержать незначащие старшие нули (length >= real_length).
    """

    # StrictInt: элементы буфера не приводятся из str/bool/float
    digits: tuple[StrictInt, ...] = Field(
        ..., min_length=1, description="Little-endian цифры, digits[0] — младший разряд"
    )
    negative: bool = Field(default=False, description="Флаг знака (для нуля всегда False)")

    _is_zero: bool = PrivateAttr(default=False)

    model_config = {"frozen": True}  # Immutable

    @field_validator("digits")
    @classmethod
    def validate_digit_range(cls, v: tuple[int, ...]) -> tuple[int, ...]:
        """Каждая цифра буфера должна лежать в [0, 9]."""
        for digit in v:
            if digit < DIGIT_MIN or digit > DIGIT_MAX:
                raise ValueError(f"digit {digit} outside [{DIGIT_MIN}, {DIGIT_MAX}]")
        return v

    @field_validator("negative")
    @classmethod
    def zero_is_non_negative(cls, v: bool, info: ValidationInfo) -> bool:
        """
        Канонический знак нуля.

        Знак нуля не наблюдаем снаружи, поэтому он приводится к False
        в каждой точке создания, включая negate().
        """
        digits = info.data.get("digits")
        if digits is not None and is_zero_digits(digits):
            return False
        return v

    def model_post_init(self, __context: Any) -> None:
        self._is_zero = is_zero_digits(self.digits)

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def of(cls, representation: Any) -> "BigInteger":
        """
        Создание BigInteger из строки, int, digit-буфера или BigInteger.

        Args:
            representation: Десятичная строка, int, tuple/list/bytes цифр
                (little-endian) или существующий BigInteger

        Returns:
            Новый экземпляр, либо сам representation если это BigInteger

        Raises:
            EmptyInputError: Пустая строка
            FormatError: Строка содержит не-цифру
            UnsupportedTypeError: Неподдерживаемый тип значения

        Examples:
            >>> str(BigInteger.of("00123"))
            '123'
            >>> str(BigInteger.of(-42))
            '-42'
        """
        return _to_big_integer(representation)

    @classmethod
    def from_digits(cls, digits: Any, negative: bool = False) -> "BigInteger":
        """
        Создание из сырого little-endian буфера и знака.

        Буфер сохраняется как есть (length = len(digits)).
        """
        return cls(digits=tuple(digits), negative=negative)

    # -------------------------------------------------------------------------
    # Производные свойства
    # -------------------------------------------------------------------------

    @property
    def is_zero(self) -> bool:
        return self._is_zero

    @property
    def length(self) -> int:
        """Ёмкость буфера, включая незначащие старшие нули."""
        return len(self.digits)

    @property
    def real_length(self) -> int:
        """Число значащих разрядов (1 для нуля)."""
        return real_length(self.digits)

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def negate(self) -> "BigInteger":
        """Тот же буфер с противоположным знаком."""
        return BigInteger(digits=self.digits, negative=not self.negative)

    def add(self, other: "BigInteger") -> "BigInteger":
        """
        Сумма self + other.

        Нулевой операнд возвращает другой операнд как есть (без копии).
        При совпадающих знаках складываются модули, при разных —
        результат определяет signed difference: a + b = a - (-b).
        """
        if self.is_zero:
            return other
        if other.is_zero:
            return self

        if self.negative == other.negative:
            return BigInteger(
                digits=add_magnitudes(self.digits, other.digits), negative=self.negative
            )
        if self.negative:
            # (-|a|) + b = b - |a|
            return _signed_difference(other.digits, self.digits)
        # a + (-|b|) = a - |b|
        return _signed_difference(self.digits, other.digits)

    def subtract(self, other: "BigInteger") -> "BigInteger":
        """
        Разность self - other.

        0 - x = -x, x - 0 = x. При разных знаках складываются модули
        со знаком self, при одинаковых — signed difference.
        """
        if self.is_zero:
            return other.negate()
        if other.is_zero:
            return self

        if self.negative != other.negative:
            return BigInteger(
                digits=add_magnitudes(self.digits, other.digits), negative=self.negative
            )
        if self.negative:
            # (-|a|) - (-|b|) = |b| - |a|
            return _signed_difference(other.digits, self.digits)
        return _signed_difference(self.digits, other.digits)

    def multiply(self, other: "BigInteger") -> "BigInteger":
        """Произведение self × other, знак = XOR знаков операндов."""
        if self.is_zero or other.is_zero:
            return ZERO
        return BigInteger(
            digits=multiply_magnitudes(self.digits, other.digits),
            negative=self.negative != other.negative,
        )

    def compare_magnitude(self, other: "BigInteger") -> int:
        """
        Сравнение модулей |self| ? |other|.

        Returns:
            > 0 если |self| < |other|, < 0 если |self| > |other|, 0 если равны
        """
        return compare_magnitudes(self.digits, other.digits)

    # -------------------------------------------------------------------------
    # Рендеринг
    # -------------------------------------------------------------------------

    def to_string(self) -> str:
        """
        Каноническая десятичная строка.

        Без ведущих нулей, ноль всегда "0", минус только у ненулевых
        отрицательных значений.
        """
        if self.is_zero:
            return "0"
        return ("-" if self.negative else "") + render_magnitude(self.digits)

    # -------------------------------------------------------------------------
    # Операторы
    # -------------------------------------------------------------------------

    def __str__(self) -> str:
        return self.to_string()

    def __neg__(self) -> "BigInteger":
        return self.negate()

    def __add__(self, other: object) -> "BigInteger":
        if not isinstance(other, BigInteger):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> "BigInteger":
        if not isinstance(other, BigInteger):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other: object) -> "BigInteger":
        if not isinstance(other, BigInteger):
            return NotImplemented
        return self.multiply(other)


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

ZERO: Final[BigInteger] = BigInteger(digits=(0,))
ONE: Final[BigInteger] = BigInteger(digits=(1,))


# =============================================================================
# SIGNED DIFFERENCE
# =============================================================================


def _signed_difference(minuend: Digits, subtrahend: Digits) -> BigInteger:
    """
    Знаковая разность модулей |minuend| - |subtrahend|.

    Единственное место, где решается знак вычитания:
    - равные модули → ZERO
    - |minuend| < |subtrahend| → -(|subtrahend| - |minuend|)
    - иначе → |minuend| - |subtrahend|
    """
    comparison = compare_magnitudes(minuend, subtrahend)
    if comparison == 0:
        return ZERO
    if comparison > 0:
        return BigInteger(digits=subtract_magnitudes(subtrahend, minuend), negative=True)
    return BigInteger(digits=subtract_magnitudes(minuend, subtrahend), negative=False)


# =============================================================================
# КОНВЕРТЕРЫ ВХОДНЫХ ЗНАЧЕНИЙ
# =============================================================================


@singledispatch
def _to_big_integer(representation: Any) -> BigInteger:
    logger.debug(
        "big_integer_rejected",
        reason="unsupported_type",
        type=type(representation).__name__,
    )
    raise UnsupportedTypeError(
        f"Decimal representation must be str, int or digit buffer, "
        f"got {type(representation).__name__}"
    )


@_to_big_integer.register(BigInteger)
def _from_big_integer(representation: BigInteger) -> BigInteger:
    return representation


@_to_big_integer.register(str)
def _from_string(representation: str) -> BigInteger:
    if not representation:
        logger.debug("big_integer_rejected", reason="empty")
        raise EmptyInputError("Big integer can not be instantiated from empty string")

    for position, char in enumerate(representation):
        if char not in DIGIT_CHARS:
            # Длина строки не ограничена, в лог пишется только её размер и позиция
            logger.debug(
                "big_integer_rejected",
                reason="format",
                length=len(representation),
                position=position,
            )
            raise FormatError(representation)

    # Последний символ → младший разряд
    digits = tuple(DIGIT_CHARS.index(char) for char in reversed(representation))
    return BigInteger(digits=digits)


@_to_big_integer.register(int)
def _from_int(representation: int) -> BigInteger:
    # Без str(): CPython ограничивает int → str 4300 разрядами
    return BigInteger(
        digits=digits_from_int(abs(representation)), negative=representation < 0
    )


@_to_big_integer.register(bool)
def _from_bool(representation: bool) -> BigInteger:
    # bool — подкласс int, но как число здесь не принимается
    logger.debug("big_integer_rejected", reason="unsupported_type", type="bool")
    raise UnsupportedTypeError("Decimal representation must not be bool")


@_to_big_integer.register(tuple)
@_to_big_integer.register(list)
@_to_big_integer.register(bytes)
@_to_big_integer.register(bytearray)
def _from_buffer(representation: Any) -> BigInteger:
    return BigInteger.from_digits(representation)
