"""Text passes that run before tokenization."""

from __future__ import annotations

DIGITS = frozenset("0123456789")

# Display glyph -> computation symbol.
DISPLAY_SYMBOLS = {
    "×": "*",
    "÷": "/",
    "√": "sqrt",
    "²": "^2",
}


def normalize_symbols(expression: str) -> str:
    """Replace display-only glyphs with their canonical spelling."""
    for glyph, symbol in DISPLAY_SYMBOLS.items():
        expression = expression.replace(glyph, symbol)
    return expression


def _needs_multiplication(current: str, following: str) -> bool:
    if current in DIGITS:
        return following == "("
    if current == ")":
        return following == "(" or following in DIGITS
    return False


def insert_implicit_multiplication(expression: str) -> str:
    """
    Insert ``*`` between adjacent operands written without an operator.

    Works on characters so that ``sqrt`` is never split:

        >>> insert_implicit_multiplication("2(3)(4)5")
        '2*(3)*(4)*5'
    """
    result: list[str] = []
    for i, current in enumerate(expression):
        result.append(current)
        if i + 1 < len(expression) and _needs_multiplication(current, expression[i + 1]):
            result.append("*")
    return "".join(result)


def preprocess(expression: str) -> str:
    return insert_implicit_multiplication(normalize_symbols(expression))
