"""Reduces a postfix token sequence to a single float."""

from __future__ import annotations

from typing import Callable

from infixcalc.exceptions import InvalidExpressionError
from infixcalc.operations import add, divide, multiply, negate, power, square_root, subtract
from infixcalc.tokens import BinaryOp, BinaryOperator, Number, Token, UnaryFunc, UnaryFunction
from infixcalc.validators import parse_number, validate_operand_count, validate_result

BINARY_IMPLS: dict[BinaryOperator, Callable[[float, float], float]] = {
    BinaryOperator.ADD: add,
    BinaryOperator.SUBTRACT: subtract,
    BinaryOperator.MULTIPLY: multiply,
    BinaryOperator.DIVIDE: divide,
    BinaryOperator.POWER: power,
}

UNARY_IMPLS: dict[UnaryFunction, Callable[[float], float]] = {
    UnaryFunction.SQUARE_ROOT: square_root,
    UnaryFunction.NEGATE: negate,
}


def evaluate_postfix(postfix: list[Token]) -> float:
    """
    Evaluate a postfix sequence against a numeric stack.

    Args:
        postfix: Output of ``to_postfix``

    Returns:
        The single finite value the sequence reduces to

    Raises:
        InvalidExpressionError: On missing operands, malformed numbers, or a
            stack that does not reduce to exactly one value
        DivisionByZeroError: If a divisor is zero
        NegativeSquareRootError: If sqrt gets a negative operand
        NotANumberError: If the result is NaN
        InfiniteResultError: If the result is infinite
    """
    stack: list[float] = []

    for token in postfix:
        if isinstance(token, Number):
            stack.append(parse_number(token.text))
        elif isinstance(token, UnaryFunc):
            validate_operand_count(stack, 1, token.function.symbol)
            stack.append(UNARY_IMPLS[token.function](stack.pop()))
        elif isinstance(token, BinaryOp):
            validate_operand_count(stack, 2, token.operator.symbol)
            b = stack.pop()
            a = stack.pop()
            stack.append(BINARY_IMPLS[token.operator](a, b))
        else:
            raise InvalidExpressionError("Unexpected token in postfix sequence", str(token))

    if len(stack) != 1:
        raise InvalidExpressionError(f"Expression reduces to {len(stack)} values")

    return validate_result(stack[0])
