"""
Грамматики текстовых литералов для TextArgument.

Единая точка разбора целых, вещественных и булевых значений из текста.
"""

from src.core.parsing.numeric_grammar import (
    # Constants
    BOOLEAN_FALSE,
    BOOLEAN_TRUE,
    INT,
    LONG,
    SHORT,
    # Types
    FloatPrecision,
    IntegerWidth,
    ParseResult,
    # Exceptions
    NumberFormatError,
    # Functions
    is_boolean_literal,
    parse_boolean_lenient,
    parse_floating,
    parse_integer,
    to_single_precision,
    try_parse_floating,
    try_parse_integer,
)

__all__ = [
    # Constants
    "BOOLEAN_FALSE",
    "BOOLEAN_TRUE",
    "INT",
    "LONG",
    "SHORT",
    # Types
    "FloatPrecision",
    "IntegerWidth",
    "ParseResult",
    # Exceptions
    "NumberFormatError",
    # Functions
    "is_boolean_literal",
    "parse_boolean_lenient",
    "parse_floating",
    "parse_integer",
    "to_single_precision",
    "try_parse_floating",
    "try_parse_integer",
]
