"""Turns preprocessed expression text into a flat token sequence."""

from __future__ import annotations

from infixcalc.exceptions import LexicalError
from infixcalc.tokens import (
    CLOSE_PAREN,
    OPEN_PAREN,
    BinaryOp,
    BinaryOperator,
    Number,
    OpenParen,
    Token,
    UnaryFunc,
    UnaryFunction,
)

SQRT = UnaryFunction.SQUARE_ROOT.symbol


def _is_valid_in_number(c: str) -> bool:
    return c in "0123456789."


def _starts_operand(previous: Token | None) -> bool:
    """True when the next token must begin an operand, making ``-`` a negation."""
    return previous is None or isinstance(previous, (BinaryOp, UnaryFunc, OpenParen))


def tokenize(expression: str) -> list[Token]:
    """
    Scan ``expression`` into tokens.

    Args:
        expression: Text already passed through ``preprocess``

    Returns:
        The token sequence in input order

    Raises:
        LexicalError: On any character outside the accepted alphabet
    """
    tokens: list[Token] = []
    i = 0
    while i < len(expression):
        c = expression[i]
        if _is_valid_in_number(c):
            number_end_idx = i + 1
            while number_end_idx < len(expression) and _is_valid_in_number(expression[number_end_idx]):
                number_end_idx += 1
            tokens.append(Number(expression[i:number_end_idx]))
            i = number_end_idx
            continue

        previous = tokens[-1] if tokens else None
        if expression.startswith(SQRT, i):
            tokens.append(UnaryFunc(UnaryFunction.SQUARE_ROOT))
            i += len(SQRT)
            continue
        if c == "-" and _starts_operand(previous):
            tokens.append(UnaryFunc(UnaryFunction.NEGATE))
        elif c == "(":
            tokens.append(OPEN_PAREN)
        elif c == ")":
            tokens.append(CLOSE_PAREN)
        else:
            operator = BinaryOperator.from_symbol(c)
            if operator is None:
                raise LexicalError(c, i)
            tokens.append(BinaryOp(operator))
        i += 1

    return tokens
