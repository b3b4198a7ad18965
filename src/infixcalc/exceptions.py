"""Custom exceptions for the expression pipeline."""

import enum
from typing import Any


class ErrorKind(enum.Enum):
    """Closed set of failure classes an evaluation can end in."""

    LEXICAL_ERROR = "lexical error"
    INVALID_EXPRESSION = "invalid expression"
    DIVISION_BY_ZERO = "division by zero"
    NEGATIVE_SQUARE_ROOT = "negative square root"
    NOT_A_NUMBER = "not a number"
    INFINITY = "infinity"

    def __str__(self) -> str:
        return self.value


class CalculatorError(Exception):
    """Base exception for all pipeline errors."""

    kind: ErrorKind = ErrorKind.INVALID_EXPRESSION

    def __init__(self, message: str, value: Any = None) -> None:
        self.message = message
        self.value = value
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.value is not None:
            return f"{self.message}: {self.value!r}"
        return self.message


class LexicalError(CalculatorError):
    """Raised when the tokenizer meets a character outside the alphabet."""

    kind = ErrorKind.LEXICAL_ERROR

    def __init__(self, character: str, position: int) -> None:
        super().__init__(f"Unexpected character at index {position}", character)
        self.character = character
        self.position = position


class InvalidExpressionError(CalculatorError):
    """Raised when the postfix sequence does not reduce to a single value."""

    kind = ErrorKind.INVALID_EXPRESSION

    def __init__(self, reason: str = "Invalid expression", value: Any = None) -> None:
        super().__init__(reason, value)
        self.reason = reason


class DivisionByZeroError(CalculatorError):
    """Raised when attempting to divide by zero."""

    kind = ErrorKind.DIVISION_BY_ZERO

    def __init__(self, numerator: float) -> None:
        super().__init__("Division by zero", numerator)
        self.numerator = numerator


class NegativeSquareRootError(CalculatorError):
    """Raised when taking the square root of a negative number."""

    kind = ErrorKind.NEGATIVE_SQUARE_ROOT

    def __init__(self, operand: float) -> None:
        super().__init__("Square root of a negative number", operand)
        self.operand = operand


class NotANumberError(CalculatorError):
    """Raised when the final result is NaN."""

    kind = ErrorKind.NOT_A_NUMBER

    def __init__(self) -> None:
        super().__init__("Result is not a number")


class InfiniteResultError(CalculatorError):
    """Raised when the final result has infinite magnitude."""

    kind = ErrorKind.INFINITY

    def __init__(self, value: float) -> None:
        super().__init__("Result is infinite", value)
