"""
Numeric Grammar — Разбор числовых литералов аргументов

Модуль задаёт грамматики текстовых литералов и единственный способ их разбора
для TextArgument:
- Целые числа фиксированной ширины (16/32/64 бит, знаковые)
- Числа с плавающей точкой (binary64 и binary32)
- Булевы литералы (строгая и мягкая проверка)

Каждая грамматика реализована один раз в виде try_parse_* функции,
возвращающей ParseResult без исключений. Конверсии (parse_*) и предикаты
(is_*) TextArgument строятся поверх одной и той же функции, поэтому
accept/reject поведение у них всегда совпадает.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. parse_*(text) завершается успешно ⇔ try_parse_*(text).ok
2. Целое вне диапазона ширины → ошибка (без насыщения)
3. Float вне диапазона → ±inf (насыщение, не ошибка)
4. parse_boolean_lenient никогда не бросает исключений
"""

import math
import re
import struct
import unicodedata
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from fractions import Fraction
from typing import Final, NamedTuple, Optional, Tuple, Union


# =============================================================================
# EXCEPTIONS
# =============================================================================


class NumberFormatError(ValueError):
    """
    Текст не соответствует грамматике или диапазону целевого числового типа.

    Локальная, восстановимая ошибка: вызывающий код может заранее
    проверить текст соответствующим is_* предикатом.
    """

    def __init__(self, text: str, target: str):
        self.text = text
        self.target = target
        super().__init__(f'For input string: "{text}" (expected {target})')


# =============================================================================
# ШИРИНА ЦЕЛЫХ ЧИСЕЛ
# =============================================================================


@dataclass(frozen=True)
class IntegerWidth:
    """Знаковое целое фиксированной ширины (two's complement)."""

    name: str
    bits: int

    @property
    def min_value(self) -> int:
        return -(1 << (self.bits - 1))

    @property
    def max_value(self) -> int:
        return (1 << (self.bits - 1)) - 1

    def contains(self, value: int) -> bool:
        return self.min_value <= value <= self.max_value


SHORT: Final[IntegerWidth] = IntegerWidth(name="short", bits=16)
INT: Final[IntegerWidth] = IntegerWidth(name="int", bits=32)
LONG: Final[IntegerWidth] = IntegerWidth(name="long", bits=64)


class FloatPrecision(str, Enum):
    """Точность IEEE 754 числа с плавающей точкой"""

    SINGLE = "float"  # binary32
    DOUBLE = "double"  # binary64


# =============================================================================
# БУЛЕВЫ ЛИТЕРАЛЫ
# =============================================================================

BOOLEAN_TRUE: Final[str] = "true"
BOOLEAN_FALSE: Final[str] = "false"


# =============================================================================
# ГРАММАТИКИ
# =============================================================================

# Знак и одна или более десятичных цифр (Unicode Nd), без пробелов и "_"
_INTEGER_PATTERN: Final[re.Pattern] = re.compile(r"(?P<sign>[+-]?)(?P<digits>\d+)")

# Литерал с плавающей точкой: NaN, Infinity, десятичный или шестнадцатеричный,
# с необязательным суффиксом типа (f/F/d/D) у числовых форм
_FLOAT_PATTERN: Final[re.Pattern] = re.compile(
    r"""
    (?P<sign>[+-]?)
    (?:
        (?P<nan>NaN)
      | (?P<inf>Infinity)
      | (?P<hex>0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)[pP][+-]?[0-9]+)[fFdD]?
      | (?P<dec>(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)[fFdD]?
    )
    """,
    re.VERBOSE,
)

# Управляющие символы и пробел (code point <= U+0020) по краям float-литерала игнорируются
_FLOAT_TRIM_CHARS: Final[str] = "".join(chr(code) for code in range(0x21))

# Части hex-литерала: целая часть, дробная часть, двоичная экспонента
_HEX_PARTS: Final[re.Pattern] = re.compile(r"0[xX]([0-9a-fA-F]*)\.?([0-9a-fA-F]*)[pP]([+-]?[0-9]+)")

# Битовый образ +inf в binary32 и первое значение за пределами binary32 (2^128)
_SINGLE_INF_BITS: Final[int] = 0x7F800000
_SINGLE_OVERFLOW: Final[float] = math.ldexp(1.0, 128)

# Значащих десятичных цифр в 64-битном целом не больше 19
_MAX_SIGNIFICANT_DIGITS: Final[int] = 19


# =============================================================================
# РЕЗУЛЬТАТ РАЗБОРА
# =============================================================================


class ParseResult(NamedTuple):
    """Результат разбора без исключений."""

    ok: bool
    value: Optional[Union[int, float]] = None


_FAILED: Final[ParseResult] = ParseResult(ok=False)


# =============================================================================
# ЦЕЛЫЕ ЧИСЛА
# =============================================================================


def try_parse_integer(text: str, width: IntegerWidth = INT) -> ParseResult:
    """
    Разбор знакового целого заданной ширины без исключений.

    Грамматика: [+-]? digit+ — где digit любая десятичная цифра Unicode.
    Пустая строка, одиночный знак, пробелы и "_" отвергаются.

    Args:
        text: Исходный текст
        width: Ширина целевого типа (SHORT / INT / LONG)

    Returns:
        ParseResult(ok=True, value=int) или ParseResult(ok=False)

    Examples:
        >>> try_parse_integer("+42")
        ParseResult(ok=True, value=42)
        >>> try_parse_integer("2147483648").ok
        False
        >>> try_parse_integer("2147483648", LONG)
        ParseResult(ok=True, value=2147483648)
    """
    match = _INTEGER_PATTERN.fullmatch(text)
    if match is None:
        return _FAILED

    # Нормализация цифр в ASCII; ведущие нули не учитываются в длине
    digits = "".join(str(unicodedata.decimal(ch)) for ch in match.group("digits"))
    digits = digits.lstrip("0") or "0"
    if len(digits) > _MAX_SIGNIFICANT_DIGITS:
        return _FAILED

    value = int(digits)
    if match.group("sign") == "-":
        value = -value

    if not width.contains(value):
        return _FAILED

    return ParseResult(ok=True, value=value)


def parse_integer(text: str, width: IntegerWidth = INT) -> int:
    """
    Разбор знакового целого заданной ширины.

    Raises:
        NumberFormatError: Если текст не целое число или вне диапазона width
    """
    result = try_parse_integer(text, width)
    if not result.ok:
        raise NumberFormatError(text, width.name)
    return result.value


# =============================================================================
# ЧИСЛА С ПЛАВАЮЩЕЙ ТОЧКОЙ
# =============================================================================


def to_single_precision(value: float) -> float:
    """
    Округление double до ближайшего binary32 значения.

    Значения, округляющиеся за пределы binary32, насыщаются до ±inf.
    NaN и ±inf возвращаются как есть.

    Examples:
        >>> to_single_precision(0.5)
        0.5
        >>> to_single_precision(1e39)
        inf
    """
    if math.isnan(value) or math.isinf(value):
        return value

    try:
        return struct.unpack("<f", struct.pack("<f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def _double_from_match(match: re.Match) -> float:
    sign = match.group("sign")
    negative = sign == "-"

    if match.group("nan") is not None:
        return math.nan

    if match.group("inf") is not None:
        return -math.inf if negative else math.inf

    hex_literal = match.group("hex")
    if hex_literal is not None:
        try:
            return float.fromhex(sign + hex_literal)
        except OverflowError:
            return -math.inf if negative else math.inf

    # float() насыщает до ±inf и сам обрабатывает "1." и ".5"
    return float(sign + match.group("dec"))


def _single_from_bits(bits: int) -> float:
    if bits >= _SINGLE_INF_BITS:
        return _SINGLE_OVERFLOW
    return struct.unpack("<f", struct.pack("<I", bits))[0]


def _single_neighbours(magnitude: float, rounded: float) -> Tuple[float, float]:
    """Соседние binary32 значения (lower, upper) вокруг magnitude; rounded — одно из них."""
    if math.isinf(rounded):
        return _single_from_bits(_SINGLE_INF_BITS - 1), _SINGLE_OVERFLOW

    bits = struct.unpack("<I", struct.pack("<f", rounded))[0]
    if rounded < magnitude:
        return rounded, _single_from_bits(bits + 1)
    return _single_from_bits(bits - 1), rounded


def _compare_exact(match: re.Match, magnitude: float) -> int:
    """Знак разности |точное значение литерала| - magnitude."""
    hex_literal = match.group("hex")
    if hex_literal is not None:
        int_part, frac_part, exponent = _HEX_PARTS.fullmatch(hex_literal).groups()
        scale = int(exponent) - 4 * len(frac_part)
        exact = Fraction(int(int_part + frac_part, 16)) * Fraction(2) ** scale
        target = Fraction(magnitude)
    else:
        # Decimal точен для любой длины мантиссы и экспоненты
        exact = Decimal(match.group("dec"))
        target = Decimal(magnitude)
    return (exact > target) - (exact < target)


def _round_to_single(match: re.Match, double_value: float) -> float:
    """
    Однократное округление литерала до binary32.

    Литерал уже округлён до double. Повторное округление даёт неверный
    результат только когда double лёг точно на середину между соседними
    binary32 значениями, а сам литерал ей не равен: тогда сторону выбирает
    точное значение литерала.
    """
    rounded = to_single_precision(double_value)
    if math.isnan(double_value) or math.isinf(double_value) or double_value == 0.0:
        return rounded
    if rounded == double_value:
        return rounded

    magnitude = abs(double_value)
    lower, upper = _single_neighbours(magnitude, abs(rounded))
    if magnitude != (lower + upper) / 2:
        return rounded

    order = _compare_exact(match, magnitude)
    if order == 0:
        return rounded

    nearest = upper if order > 0 else lower
    if nearest == _SINGLE_OVERFLOW:
        nearest = math.inf
    return math.copysign(nearest, double_value)


def try_parse_floating(
    text: str, precision: FloatPrecision = FloatPrecision.DOUBLE
) -> ParseResult:
    """
    Разбор числа с плавающей точкой без исключений.

    Грамматика (регистр NaN/Infinity важен):
        [+-]? ( NaN | Infinity | decimal[fFdD]? | hex[fFdD]? )
        decimal = digits[.digits][(e|E)[+-]digits] | .digits[...]
        hex     = 0x hexdigits[.hexdigits] (p|P)[+-]digits

    Символы с кодом <= U+0020 по краям текста игнорируются. Python-специфичные
    формы ("inf", "nan", "1_000") не являются валидными литералами.
    SINGLE возвращает ближайшее к точному значению литерала binary32 число.

    Args:
        text: Исходный текст
        precision: DOUBLE (binary64) или SINGLE (binary32)

    Returns:
        ParseResult(ok=True, value=float) или ParseResult(ok=False)
    """
    match = _FLOAT_PATTERN.fullmatch(text.strip(_FLOAT_TRIM_CHARS))
    if match is None:
        return _FAILED

    value = _double_from_match(match)
    if precision is FloatPrecision.SINGLE:
        value = _round_to_single(match, value)
    return ParseResult(ok=True, value=value)

def parse_floating(text: str, precision: FloatPrecision = FloatPrecision.DOUBLE) -> float:
    """
    Разбор числа с плавающей точкой.

    Raises:
        NumberFormatError: Если текст не является float-литералом
    """
    result = try_parse_floating(text, precision)
    if not result.ok:
        raise NumberFormatError(text, precision.value)
    return result.value


# =============================================================================
# БУЛЕВЫ ЗНАЧЕНИЯ
# =============================================================================


def parse_boolean_lenient(text: str) -> bool:
    """
    Мягкий разбор: True только для "true" без учёта регистра, иначе False.

    Никогда не бросает исключений: любой другой текст (включая "1", "yes"
    и пустую строку) даёт False.
    """
    return text.lower() == BOOLEAN_TRUE


def is_boolean_literal(text: str) -> bool:
    """Строгая проверка: ровно "true" или "false" (с учётом регистра)."""
    return text == BOOLEAN_TRUE or text == BOOLEAN_FALSE
