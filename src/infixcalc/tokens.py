"""Lexical tokens shared by the tokenizer, parser and evaluator."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Union


class BinaryOperator(enum.Enum):
    """Infix operators with their canonical symbol and precedence."""

    ADD = ("+", 1)
    SUBTRACT = ("-", 1)
    MULTIPLY = ("*", 2)
    DIVIDE = ("/", 2)
    POWER = ("^", 3)

    def __init__(self, symbol: str, precedence: int) -> None:
        self.symbol = symbol
        self.precedence = precedence

    @classmethod
    def from_symbol(cls, symbol: str) -> BinaryOperator | None:
        for operator in cls:
            if operator.symbol == symbol:
                return operator
        return None

    def __str__(self) -> str:
        return self.symbol


class UnaryFunction(enum.Enum):
    """Prefix operators. Negation binds looser than ``^``."""

    SQUARE_ROOT = ("sqrt", 4)
    NEGATE = ("-", 2)

    def __init__(self, symbol: str, precedence: int) -> None:
        self.symbol = symbol
        self.precedence = precedence

    def __str__(self) -> str:
        return self.symbol


@dataclass(frozen=True)
class Number:
    text: str

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class BinaryOp:
    operator: BinaryOperator

    @property
    def precedence(self) -> int:
        return self.operator.precedence

    def __str__(self) -> str:
        return str(self.operator)


@dataclass(frozen=True)
class UnaryFunc:
    function: UnaryFunction

    @property
    def precedence(self) -> int:
        return self.function.precedence

    def __str__(self) -> str:
        return "neg" if self.function is UnaryFunction.NEGATE else str(self.function)


@dataclass(frozen=True)
class OpenParen:
    def __str__(self) -> str:
        return "("


@dataclass(frozen=True)
class CloseParen:
    def __str__(self) -> str:
        return ")"


Token = Union[Number, BinaryOp, UnaryFunc, OpenParen, CloseParen]
Operator = Union[BinaryOp, UnaryFunc]

OPEN_PAREN = OpenParen()
CLOSE_PAREN = CloseParen()


def untokenize(tokens: list[Token]) -> str:
    """Render a token sequence space separated, e.g. for postfix debugging."""
    return " ".join(str(token) for token in tokens)
