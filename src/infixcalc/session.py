"""Keypad session: the host-side state machine around the pure engine."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from infixcalc.engine import evaluate, preview
from infixcalc.exceptions import CalculatorError, InvalidExpressionError, NegativeSquareRootError
from infixcalc.formatting import as_operand, format_number
from infixcalc.operations import square_root
from infixcalc.settings import DEFAULT_SETTINGS, FormatSettings

logger = logging.getLogger(__name__)

ERROR_TEXT = "Error"

# Keypad operators as they appear in the buffer.
KEYPAD_OPERATORS = {"+": "+", "-": "-", "*": "×", "×": "×", "/": "÷", "÷": "÷"}
OPERATOR_GLYPHS = frozenset("+-*/^×÷")
_NUMBER_SPLIT = re.compile(r"[+\-×÷]")


@dataclass(frozen=True)
class HistoryEntry:
    """A committed evaluation."""

    expression: str
    result: str

    def __str__(self) -> str:
        return f"{self.expression} = {self.result}"


class KeypadSession:
    """
    Expression buffer, display and error state of a handheld calculator.

    Every key method returns the session so presses can be chained:

        >>> session = KeypadSession()
        >>> session.press_digit("2").press_operator("+").press_digit("3").display
        '5'
        >>> session.equals().history[-1].result
        '5'
    """

    def __init__(self, settings: FormatSettings = DEFAULT_SETTINGS) -> None:
        self._settings = settings
        self._history: list[HistoryEntry] = []
        self._reset()

    def _reset(self) -> None:
        self.expression = ""
        self.display = "0"
        self.is_result_displayed = False
        self.has_error = False
        self.error: CalculatorError | None = None

    @property
    def history(self) -> list[HistoryEntry]:
        """Committed evaluations, oldest first."""
        return self._history.copy()

    def _set_expression(self, expression: str) -> None:
        self.expression = expression
        self._refresh_preview()

    def _refresh_preview(self) -> None:
        if self.has_error or self.is_result_displayed or not self.expression:
            return
        result = preview(self.expression, self._settings)
        if result is not None and result != self.expression:
            self.display = result

    def _fail(self, error: CalculatorError) -> KeypadSession:
        logger.debug("session error on %r: %s", self.expression, error)
        self.has_error = True
        self.error = error
        self.display = ERROR_TEXT
        return self

    def _continue_from_result(self, group_negative: bool = True) -> None:
        if self.is_result_displayed:
            self.expression = as_operand(self.display, group_negative)
            self.is_result_displayed = False

    def _ends_with_operator(self) -> bool:
        return bool(self.expression) and self.expression[-1] in OPERATOR_GLYPHS

    def clear(self) -> KeypadSession:
        """Reset buffer, display and error state. History is kept."""
        self._reset()
        return self

    def delete(self) -> KeypadSession:
        if self.has_error:
            return self.clear()
        self._continue_from_result(group_negative=False)
        self._set_expression(self.expression[:-1])
        return self

    def press_digit(self, digit: str) -> KeypadSession:
        if len(digit) != 1 or digit not in "0123456789":
            raise ValueError(f"Not a digit: {digit!r}")
        if self.has_error:
            self.clear()
        if self.is_result_displayed:
            self.expression = ""
            self.is_result_displayed = False
        self._set_expression(self.expression + digit)
        return self

    def press_decimal(self) -> KeypadSession:
        if self.has_error:
            self.clear()
        if self.is_result_displayed:
            self.expression = "0"
            self.is_result_displayed = False

        current_number = _NUMBER_SPLIT.split(self.expression)[-1]
        if "." in current_number:
            return self
        if not current_number or self._ends_with_operator():
            self._set_expression(self.expression + "0.")
        else:
            self._set_expression(self.expression + ".")
        return self

    def press_operator(self, operator: str) -> KeypadSession:
        glyph = KEYPAD_OPERATORS.get(operator)
        if glyph is None:
            raise ValueError(f"Not a keypad operator: {operator!r}")
        if self.has_error:
            return self
        self._continue_from_result()

        if not self.expression:
            if glyph == "-":
                self._set_expression("-")
            return self

        expression = self.expression[:-1] if self._ends_with_operator() else self.expression
        self._set_expression(expression + glyph)
        return self

    def press_percentage(self) -> KeypadSession:
        if self.has_error or not self.expression:
            return self
        result = evaluate(self.expression, self._settings)
        if not result.ok:
            return self._fail(result.error)
        value = float(result.unwrap()) / 100.0
        self.expression = format_number(value, self._settings)
        self.display = self.expression
        self.is_result_displayed = True
        return self

    def press_square_root(self) -> KeypadSession:
        if self.has_error:
            return self
        if not self.expression:
            self._set_expression("√(")
        elif self.is_result_displayed:
            try:
                value = square_root(float(self.display))
            except ValueError:
                return self._fail(InvalidExpressionError("Not a number", self.display))
            except NegativeSquareRootError as e:
                return self._fail(e)
            self.expression = format_number(value, self._settings)
            self.display = self.expression
        else:
            self._set_expression(self.expression + "√(")
        return self

    def press_square(self) -> KeypadSession:
        if self.has_error:
            return self
        self._continue_from_result()
        if self.expression:
            self._set_expression(self.expression + "²")
        return self

    def press_parentheses(self) -> KeypadSession:
        """Open, close or multiply-open depending on what the buffer needs."""
        if self.has_error:
            self.clear()
        if self.is_result_displayed:
            self.expression = ""
            self.is_result_displayed = False

        opened = self.expression.count("(")
        closed = self.expression.count(")")
        if not self.expression or self._ends_with_operator() or self.expression.endswith("("):
            self._set_expression(self.expression + "(")
        elif opened > closed:
            self._set_expression(self.expression + ")")
        else:
            self._set_expression(self.expression + "×(")
        return self

    def equals(self) -> KeypadSession:
        if not self.expression:
            return self
        result = evaluate(self.expression, self._settings)
        if not result.ok:
            return self._fail(result.error)
        text = result.unwrap()
        self._history.append(HistoryEntry(expression=self.expression, result=text))
        self.display = text
        self.is_result_displayed = True
        self.has_error = False
        self.error = None
        return self

    def __repr__(self) -> str:
        return (
            f"KeypadSession(expression={self.expression!r}, display={self.display!r}, "
            f"history_len={len(self._history)})"
        )
