"""
TextArgument — Неизменяемая обёртка над текстовым аргументом

Immutable Pydantic модель, хранящая один исходный текст (например, аргумент
командной строки) и предоставляющая:
- Типизированные конверсии (as_int, as_double, as_boolean, ...)
- Предикаты, сообщающие, пройдёт ли конверсия (is_int, is_double, ...)
- Производные значения, возвращающие новый TextArgument (concat, substring, ...)

Равенство и хэш определяются только исходным текстом.
"""

import sys
from typing import Any, List, Mapping, Optional

from pydantic import BaseModel, Field

from src.core.parsing.numeric_grammar import (
    INT,
    LONG,
    SHORT,
    FloatPrecision,
    is_boolean_literal,
    parse_boolean_lenient,
    parse_floating,
    parse_integer,
    try_parse_floating,
    try_parse_integer,
)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidArgumentError(ValueError):
    """Недопустимое значение при создании TextArgument (None или не str)."""

    pass


class IndexOutOfRangeError(IndexError):
    """
    Границы substring вне текста.

    Возникает при start < 0, end > len(raw) или start > end.
    """

    def __init__(self, start: int, end: int, length: int):
        self.start = start
        self.end = end
        self.length = length
        super().__init__(f"begin {start}, end {end}, length {length}")


def _require_text(value: Any, what: str) -> str:
    if value is None:
        raise InvalidArgumentError(f"{what} cannot be None")
    if not isinstance(value, str):
        raise InvalidArgumentError(f"{what} must be str, got {type(value).__name__}")
    return value


# =============================================================================
# TEXT ARGUMENT MODEL
# =============================================================================


class TextArgument(BaseModel):
    """
    Неизменяемая обёртка над одним текстовым аргументом.

    Операции, которые выглядят как модификация (concat, substring,
    to_lower_case, to_upper_case), возвращают новый объект.

    Immutable модель (frozen=True).
    """

    raw: str = Field(..., description="Исходный текст аргумента, без нормализации")

    model_config = {"frozen": True}  # Immutable

    def __init__(self, raw: str) -> None:
        super().__init__(raw=_require_text(raw, "TextArgument raw value"))

    def model_copy(
        self, *, update: Optional[Mapping[str, Any]] = None, deep: bool = False
    ) -> "TextArgument":
        """Копия модели; новый raw проходит ту же проверку, что и в конструкторе."""
        if update is not None and "raw" in update:
            _require_text(update["raw"], "TextArgument raw value")
        return super().model_copy(update=update, deep=deep)

    def get(self) -> str:
        """Исходный текст без изменений."""
        return self.raw

    # -------------------------------------------------------------------------
    # Конверсии
    # -------------------------------------------------------------------------

    def as_int(self) -> int:
        """
        Значение как 32-битное знаковое целое.

        Raises:
            NumberFormatError: Если текст не целое число или вне [-2^31, 2^31-1]
        """
        return parse_integer(self.raw, INT)

    def as_long(self) -> int:
        """
        Значение как 64-битное знаковое целое.

        Raises:
            NumberFormatError: Если текст не целое число или вне [-2^63, 2^63-1]
        """
        return parse_integer(self.raw, LONG)

    def as_short(self) -> int:
        """
        Значение как 16-битное знаковое целое.

        Raises:
            NumberFormatError: Если текст не целое число или вне [-2^15, 2^15-1]
        """
        return parse_integer(self.raw, SHORT)

    def as_double(self) -> float:
        """
        Значение как double (binary64).

        Raises:
            NumberFormatError: Если текст не float-литерал
        """
        return parse_floating(self.raw, FloatPrecision.DOUBLE)

    def as_float(self) -> float:
        """
        Значение, округлённое до single precision (binary32).

        Raises:
            NumberFormatError: Если текст не float-литерал
        """
        return parse_floating(self.raw, FloatPrecision.SINGLE)

    def as_boolean(self) -> bool:
        """
        True если текст равен "true" без учёта регистра, иначе False.

        Никогда не бросает исключений. В отличие от is_boolean, регистр не важен:
        TextArgument("TRUE").as_boolean() is True, но is_boolean() is False.
        """
        return parse_boolean_lenient(self.raw)

    def as_char(self) -> Optional[str]:
        """
        Единственный символ текста.

        Returns:
            Символ, если длина текста ровно 1, иначе None (не ошибка)
        """
        return self.raw if len(self.raw) == 1 else None

    # -------------------------------------------------------------------------
    # Предикаты
    # -------------------------------------------------------------------------

    def is_int(self) -> bool:
        return try_parse_integer(self.raw, INT).ok

    def is_long(self) -> bool:
        return try_parse_integer(self.raw, LONG).ok

    def is_short(self) -> bool:
        return try_parse_integer(self.raw, SHORT).ok

    def is_double(self) -> bool:
        return try_parse_floating(self.raw, FloatPrecision.DOUBLE).ok

    def is_float(self) -> bool:
        return try_parse_floating(self.raw, FloatPrecision.SINGLE).ok

    def is_boolean(self) -> bool:
        """Ровно "true" или "false" (с учётом регистра)."""
        return is_boolean_literal(self.raw)

    def is_char(self) -> bool:
        return len(self.raw) == 1

    # -------------------------------------------------------------------------
    # Производные значения
    # -------------------------------------------------------------------------

    def get_intern(self) -> str:
        """Интернированная форма исходного текста (sys.intern)."""
        return sys.intern(self.raw)

    def concat(self, text: str) -> "TextArgument":
        """
        Новый аргумент: исходный текст + text.

        Raises:
            InvalidArgumentError: Если text равен None или не str
        """
        return TextArgument(self.raw + _require_text(text, "concat text"))

    def substring(self, start: int, end: Optional[int] = None) -> "TextArgument":
        """
        Новый аргумент из диапазона [start, end) исходного текста.

        Отрицательные индексы не отсчитываются с конца, а считаются ошибкой.

        Args:
            start: Начало диапазона (включительно)
            end: Конец диапазона (исключительно), по умолчанию длина текста

        Raises:
            IndexOutOfRangeError: Если start < 0, end > len(raw) или start > end
        """
        length = len(self.raw)
        stop = length if end is None else end
        if start < 0 or stop > length or start > stop:
            raise IndexOutOfRangeError(start, stop, length)
        return TextArgument(self.raw[start:stop])

    def to_lower_case(self) -> "TextArgument":
        return TextArgument(self.raw.lower())

    def to_upper_case(self) -> "TextArgument":
        return TextArgument(self.raw.upper())

    def to_char_array(self) -> List[str]:
        """Копия текста в виде изменяемого списка символов."""
        return list(self.raw)

    # -------------------------------------------------------------------------
    # Равенство, хэш, представление
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TextArgument):
            return NotImplemented
        return self.raw == other.raw

    def __hash__(self) -> int:
        return hash(self.raw)

    def __str__(self) -> str:
        return sys.intern(self.raw)
