"""Renders evaluation results as display strings."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Context, Decimal

from infixcalc.settings import DEFAULT_SETTINGS, FormatSettings


def uses_scientific(value: float, settings: FormatSettings = DEFAULT_SETTINGS) -> bool:
    magnitude = abs(value)
    return magnitude >= settings.scientific_upper or (0 < magnitude < settings.scientific_lower)


def format_number(value: float, settings: FormatSettings = DEFAULT_SETTINGS) -> str:
    """
    Format a finite float for display.

    Very large or very small magnitudes use scientific notation with a fixed
    mantissa (``1.234500E+10``). Everything else is rounded half-up to
    ``settings.significant_digits`` significant digits of the exact binary
    value, with trailing zeros stripped:

        >>> format_number(1 / 3)
        '0.333333333333333'
        >>> format_number(12.5)
        '12.5'
        >>> format_number(4.0)
        '4'
    """
    if uses_scientific(value, settings):
        return _format_scientific(value, settings.mantissa_digits)

    context = Context(prec=settings.significant_digits, rounding=ROUND_HALF_UP)
    rounded = context.create_decimal_from_float(value).normalize(context)

    if rounded.as_tuple().exponent >= 0:
        return str(int(rounded))
    return format(rounded, "f")


def _format_scientific(value: float, mantissa_digits: int) -> str:
    context = Context(prec=mantissa_digits + 1, rounding=ROUND_HALF_UP)
    rounded = context.create_decimal_from_float(value)
    mantissa, exponent = format(rounded, f".{mantissa_digits}E").split("E")
    return f"{mantissa}E{int(exponent):+03d}"


def as_operand(text: str, group_negative: bool = True) -> str:
    """
    Rewrite a displayed result so it can be spliced into a new expression.

    Scientific results are expanded to plain decimals, which the tokenizer
    accepts, and negative results are parenthesized so that a following
    ``^`` or ``²`` applies to the whole value:

        >>> as_operand("1.500000E+10")
        '15000000000'
        >>> as_operand("-5")
        '(-5)'
    """
    if "E" in text:
        text = format(Decimal(text).normalize(), "f")
    if group_negative and text.startswith("-"):
        return f"({text})"
    return text
