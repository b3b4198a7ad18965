"""Infix to postfix conversion (shunting-yard)."""

from __future__ import annotations

import logging

from infixcalc.tokens import (
    BinaryOp,
    CloseParen,
    Number,
    OpenParen,
    Operator,
    Token,
    UnaryFunc,
    UnaryFunction,
    untokenize,
)

logger = logging.getLogger(__name__)

StackEntry = Operator | OpenParen


def _closes_with_group(entry: StackEntry) -> bool:
    return isinstance(entry, UnaryFunc) and entry.function is UnaryFunction.SQUARE_ROOT


def to_postfix(tokens: list[Token]) -> list[Token]:
    """
    Reorder ``tokens`` into postfix (Reverse Polish) order.

    Parentheses are handled leniently: a ``)`` without a matching ``(`` is
    dropped and unclosed ``(`` are discarded at the end, so intermediate
    states of typed input still parse.

    ``sqrt(9)+2*3`` comes out as ``9 sqrt 2 3 * +``.
    """
    output: list[Token] = []
    stack: list[StackEntry] = []

    for token in tokens:
        if isinstance(token, Number):
            output.append(token)
        elif isinstance(token, UnaryFunc):
            stack.append(token)
        elif isinstance(token, BinaryOp):
            while stack and not isinstance(stack[-1], OpenParen) and stack[-1].precedence >= token.precedence:
                output.append(stack.pop())
            stack.append(token)
        elif isinstance(token, OpenParen):
            stack.append(token)
        elif isinstance(token, CloseParen):
            while stack and not isinstance(stack[-1], OpenParen):
                output.append(stack.pop())
            if stack:
                stack.pop()
            if stack and _closes_with_group(stack[-1]):
                output.append(stack.pop())

    while stack:
        entry = stack.pop()
        if not isinstance(entry, OpenParen):
            output.append(entry)

    logger.debug("postfix: %s", untokenize(output))
    return output
