"""Public entry points: full evaluation and live preview."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import cast

from infixcalc.evaluator import evaluate_postfix
from infixcalc.exceptions import CalculatorError, ErrorKind
from infixcalc.formatting import format_number
from infixcalc.parser import to_postfix
from infixcalc.preprocess import preprocess
from infixcalc.settings import DEFAULT_SETTINGS, FormatSettings
from infixcalc.tokenizer import tokenize
from infixcalc.validators import validate_expression

logger = logging.getLogger(__name__)

# Raw glyphs after which an expression is still being typed.
TRAILING_OPERATORS = frozenset("+-*/^×÷")


@dataclass(frozen=True)
class EvaluationResult:
    """Outcome of one ``evaluate`` call: formatted text or the error that stopped it."""

    expression: str
    text: str | None = None
    error: CalculatorError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def kind(self) -> ErrorKind | None:
        return self.error.kind if self.error is not None else None

    def unwrap(self) -> str:
        """
        Return the formatted result.

        Raises:
            CalculatorError: The error this evaluation failed with
        """
        if self.error is not None:
            raise self.error
        return cast(str, self.text)

    def __str__(self) -> str:
        if self.error is not None:
            return f"{self.error.kind}: {self.error}"
        return self.text or ""


def compute(expression: str, settings: FormatSettings = DEFAULT_SETTINGS) -> str:
    """Run the whole pipeline, raising the first ``CalculatorError`` met."""
    validate_expression(expression)
    if not expression:
        return "0"
    value = evaluate_postfix(to_postfix(tokenize(preprocess(expression))))
    return format_number(value, settings)


def evaluate(expression: str, settings: FormatSettings | None = None) -> EvaluationResult:
    """
    Evaluate an expression.

    Args:
        expression: Raw input, display glyphs allowed
        settings: Formatting settings (defaults apply when None)

    Returns:
        An ``EvaluationResult``; failures are returned, never raised
    """
    try:
        text = compute(expression, settings or DEFAULT_SETTINGS)
    except CalculatorError as e:
        logger.debug("evaluate %r failed with %s: %s", expression, e.kind, e)
        return EvaluationResult(expression=expression, error=e)
    logger.debug("evaluate %r -> %s", expression, text)
    return EvaluationResult(expression=expression, text=text)


def ends_with_operator(expression: str) -> bool:
    return bool(expression) and expression[-1] in TRAILING_OPERATORS


def preview(expression: str, settings: FormatSettings | None = None) -> str | None:
    """
    Best-effort evaluation for live display while typing.

    Returns None for empty or unfinished input and for any failure.
    """
    if not isinstance(expression, str) or not expression or ends_with_operator(expression):
        return None
    try:
        return compute(expression, settings or DEFAULT_SETTINGS)
    except CalculatorError as e:
        logger.debug("no preview for %r: %s", expression, e.kind)
        return None
