"""Checks applied at the edges of the evaluation pipeline."""

import math

from infixcalc.exceptions import (
    InfiniteResultError,
    InvalidExpressionError,
    NotANumberError,
)


def validate_expression(expression: object) -> str:
    """
    Validate that an expression is text.

    Raises:
        InvalidExpressionError: If expression is not a str
    """
    if not isinstance(expression, str):
        raise InvalidExpressionError(f"Expected text, got {type(expression).__name__}")
    return expression


def parse_number(text: str) -> float:
    """
    Parse the text of a number token.

    ``float`` alone is too permissive (``"1e5"``, ``"inf"``, ``"1_0"``), so
    only digit runs with at most one decimal point are accepted.

    Raises:
        InvalidExpressionError: If text is not a decimal literal
    """
    digits = text.replace(".", "", 1)
    if not digits or not digits.isascii() or not digits.isdigit():
        raise InvalidExpressionError("Malformed number", text)
    return float(text)


def validate_operand_count(stack: list[float], required: int, symbol: str) -> None:
    """
    Validate that the evaluation stack holds enough operands.

    Raises:
        InvalidExpressionError: If fewer than ``required`` values are stacked
    """
    if len(stack) < required:
        raise InvalidExpressionError(f"Missing operand for {symbol!r}")


def validate_result(value: float) -> float:
    """
    Validate that a final result is finite.

    Raises:
        NotANumberError: If value is NaN
        InfiniteResultError: If value is +/- infinity
    """
    if math.isnan(value):
        raise NotANumberError()
    if math.isinf(value):
        raise InfiniteResultError(value)
    return value
