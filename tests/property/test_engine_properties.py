"""
Property-based tests for the evaluation pipeline using Hypothesis.

These check behaviors that must hold for whole families of inputs: exact
two-operand arithmetic, stability of formatted results, and that preview
never raises whatever the user has typed so far.
"""

import math

import pytest
from hypothesis import assume, example, given
from hypothesis import strategies as st

from infixcalc import ErrorKind, evaluate, format_number, preview
from infixcalc.formatting import uses_scientific

# Operands the way a keypad produces them: digit runs with an optional fraction.
operand_texts = st.builds(
    lambda whole, fraction: f"{whole}.{fraction}" if fraction else str(whole),
    st.integers(min_value=0, max_value=10**6),
    st.one_of(st.none(), st.integers(min_value=0, max_value=999).map(str)),
)

plain_floats = st.floats(
    min_value=-1e9,
    max_value=1e9,
    allow_nan=False,
    allow_infinity=False,
).filter(lambda x: not uses_scientific(x))

keypad_text = st.text(alphabet="0123456789.+-*/^()×÷√²", max_size=20)

OPERATIONS = {
    "+": lambda a, b: a + b,
    "-": lambda a, b: a - b,
    "*": lambda a, b: a * b,
    "/": lambda a, b: a / b,
}


@pytest.mark.property
class TestArithmeticProperties:
    """Two-operand expressions match float arithmetic."""

    @given(a=operand_texts, b=operand_texts, op=st.sampled_from(sorted(OPERATIONS)))
    @example(a="1", b="3", op="/")
    @example(a="0.1", b="0.2", op="+")
    def test_two_operand_expression(self, a: str, b: str, op: str):
        """evaluate("a op b") == format_number(a op b)"""
        assume(not (op == "/" and float(b) == 0))
        expected = format_number(OPERATIONS[op](float(a), float(b)))
        assert evaluate(f"{a}{op}{b}").text == expected

    @given(a=operand_texts)
    def test_division_by_zero(self, a: str):
        """a/0 is always DIVISION_BY_ZERO"""
        assert evaluate(f"{a}/0").kind is ErrorKind.DIVISION_BY_ZERO

    @given(a=operand_texts.filter(lambda text: float(text) > 0))
    def test_negative_square_root(self, a: str):
        """sqrt of a negated positive operand is NEGATIVE_SQUARE_ROOT"""
        assert evaluate(f"√(-{a})").kind is ErrorKind.NEGATIVE_SQUARE_ROOT

    @given(a=operand_texts, b=operand_texts)
    def test_implicit_multiplication(self, a: str, b: str):
        """a(b) == a*b"""
        assert evaluate(f"{a}({b})").text == evaluate(f"{a}*{b}").text

    @given(a=operand_texts)
    def test_square_glyph(self, a: str):
        """a² == a^2"""
        assert evaluate(f"{a}²").text == evaluate(f"{a}^2").text

    @given(a=operand_texts, b=operand_texts)
    def test_unclosed_paren_is_tolerated(self, a: str, b: str):
        """(a+b == a+b"""
        assert evaluate(f"({a}+{b}").text == evaluate(f"{a}+{b}").text


@pytest.mark.property
class TestFormattingProperties:
    """Formatted results are stable."""

    @given(value=plain_floats)
    def test_round_trip(self, value: float):
        """Re-evaluating a plain-decimal result reproduces it."""
        text = format_number(value)
        assert evaluate(text).text == text

    @given(value=plain_floats)
    def test_plain_results_have_no_trailing_zeros(self, value: float):
        text = format_number(value)
        assert "E" not in text
        if "." in text:
            assert not text.endswith("0")
            assert not text.endswith(".")

    @given(value=st.floats(min_value=1e10, max_value=1e300))
    def test_large_values_are_scientific(self, value: float):
        text = format_number(value)
        mantissa, _ = text.split("E")
        assert len(mantissa.split(".")[1]) == 6
        assert math.isclose(float(text), value, rel_tol=1e-6)

    def test_sample_results_round_trip(self, sample_results):
        for text in sample_results:
            assert evaluate(text).text == text


@pytest.mark.property
class TestPreviewProperties:
    """Preview is total and consistent with evaluate."""

    @given(text=keypad_text)
    def test_preview_never_raises(self, text: str):
        result = preview(text)
        assert result is None or isinstance(result, str)

    @given(text=st.text(max_size=20))
    def test_evaluate_never_raises(self, text: str):
        result = evaluate(text)
        assert result.ok == (result.kind is None)
        assert (result.text is None) == (not result.ok)

    @given(text=keypad_text)
    def test_preview_agrees_with_evaluate(self, text: str):
        result = preview(text)
        if result is not None:
            assert evaluate(text).text == result

    @given(text=keypad_text.filter(lambda t: t and t[-1] in "+-*/^×÷"))
    def test_trailing_operator_has_no_preview(self, text: str):
        assert preview(text) is None
