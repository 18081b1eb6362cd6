"""
Domain models and value objects.

Contains the TextArgument value type and its errors.
"""

from src.core.domain.text_argument import (
    IndexOutOfRangeError,
    InvalidArgumentError,
    TextArgument,
)
from src.core.parsing.numeric_grammar import NumberFormatError

__all__ = [
    # TextArgument model
    "TextArgument",
    # Errors
    "InvalidArgumentError",
    "IndexOutOfRangeError",
    "NumberFormatError",
]
