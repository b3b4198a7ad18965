"""
Arithmetic expression calculator.

The pipeline runs left to right and keeps no state between calls:

- symbol normalization and implicit multiplication (``preprocess``)
- tokenization (``tokenizer``)
- shunting-yard conversion to postfix (``parser``)
- postfix evaluation (``evaluator``)
- result formatting (``formatting``)

``evaluate`` returns an ``EvaluationResult`` carrying either the formatted
text or a classified error; ``preview`` is its never-failing twin used for
live display while typing.
"""

from infixcalc.engine import EvaluationResult, evaluate, preview
from infixcalc.exceptions import (
    CalculatorError,
    DivisionByZeroError,
    ErrorKind,
    InfiniteResultError,
    InvalidExpressionError,
    LexicalError,
    NegativeSquareRootError,
    NotANumberError,
)
from infixcalc.formatting import format_number
from infixcalc.session import HistoryEntry, KeypadSession
from infixcalc.settings import DEFAULT_SETTINGS, FormatSettings, load_settings, settings_from_env

__all__ = [
    "DEFAULT_SETTINGS",
    "CalculatorError",
    "DivisionByZeroError",
    "ErrorKind",
    "EvaluationResult",
    "FormatSettings",
    "HistoryEntry",
    "InfiniteResultError",
    "InvalidExpressionError",
    "KeypadSession",
    "LexicalError",
    "NegativeSquareRootError",
    "NotANumberError",
    "evaluate",
    "format_number",
    "load_settings",
    "preview",
    "settings_from_env",
]

__version__ = "0.1.0"
