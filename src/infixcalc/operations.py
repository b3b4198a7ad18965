"""Arithmetic applied by the postfix evaluator."""

import math

from infixcalc.exceptions import DivisionByZeroError, NegativeSquareRootError


def add(a: float, b: float) -> float:
    """
    Add two numbers.

    Properties:
        - Commutative: add(a, b) == add(b, a)
        - Identity: add(a, 0) == a
    """
    return a + b


def subtract(a: float, b: float) -> float:
    """
    Subtract b from a.

    Properties:
        - Identity: subtract(a, 0) == a
        - Inverse: subtract(a, a) == 0 (for finite a)
    """
    return a - b


def multiply(a: float, b: float) -> float:
    """
    Multiply two numbers.

    Properties:
        - Commutative: multiply(a, b) == multiply(b, a)
        - Identity: multiply(a, 1) == a
        - Zero: multiply(a, 0) == 0 (for finite a)
    """
    return a * b


def divide(a: float, b: float) -> float:
    """
    Divide a by b.

    Properties:
        - Identity: divide(a, 1) == a
        - Self-division: divide(a, a) == 1 (for a != 0)

    Raises:
        DivisionByZeroError: If b is zero (either sign)
    """
    if b == 0:
        raise DivisionByZeroError(a)
    return a / b


def power(base: float, exponent: float) -> float:
    """
    Raise base to the power of exponent with IEEE-754 results.

    ``math.pow`` raises where the IEEE function returns a value, so the
    special cases are mapped back:

        - negative base with a non-integer exponent -> nan
        - zero base with a negative exponent -> inf
        - overflow -> inf (signed for a negative base and odd exponent)

    Non-finite results are classified later, once the whole expression
    has been reduced.
    """
    try:
        return math.pow(base, exponent)
    except ValueError:
        if base == 0 and exponent < 0:
            return math.inf
        return math.nan
    except OverflowError:
        if base < 0 and float(exponent).is_integer() and exponent % 2 == 1:
            return -math.inf
        return math.inf


def square_root(operand: float) -> float:
    """
    Square root of a non-negative operand.

    Raises:
        NegativeSquareRootError: If operand < 0
    """
    if operand < 0:
        raise NegativeSquareRootError(operand)
    return math.sqrt(operand)


def negate(operand: float) -> float:
    """
    Unary minus.

    Properties:
        - Involution: negate(negate(a)) == a
        - add(a, negate(a)) == 0 (for finite a)
    """
    return -operand
