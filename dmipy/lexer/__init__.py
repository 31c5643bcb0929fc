"""Value lexer."""

from dmipy.lexer.values import (
    FloatValue,
    IntValue,
    ListValue,
    StringValue,
    Value,
    lex_value,
)

__all__ = [
    "FloatValue",
    "IntValue",
    "ListValue",
    "StringValue",
    "Value",
    "lex_value",
]
