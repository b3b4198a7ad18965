"""Unit tests for the shunting-yard parser."""

import pytest

from infixcalc.parser import to_postfix
from infixcalc.preprocess import preprocess
from infixcalc.tokenizer import tokenize
from infixcalc.tokens import OpenParen, untokenize


def postfix_of(expression: str) -> str:
    return untokenize(to_postfix(tokenize(preprocess(expression))))


class TestPrecedence:
    """Operators are emitted in precedence order."""

    @pytest.mark.parametrize(
        "expression, expected",
        [
            pytest.param("1+2*3", "1 2 3 * +", id="mul-over-add"),
            pytest.param("1*2+3", "1 2 * 3 +", id="left-to-right"),
            pytest.param("2^3*4", "2 3 ^ 4 *", id="pow-over-mul"),
            pytest.param("10-4-3", "10 4 - 3 -", id="left-assoc-sub"),
            pytest.param("8/4/2", "8 4 / 2 /", id="left-assoc-div"),
            pytest.param("2^3^2", "2 3 ^ 2 ^", id="ties-pop-for-pow"),
            pytest.param("(1+2)*3", "1 2 + 3 *", id="parens"),
        ],
    )
    def test_postfix_order(self, expression: str, expected: str):
        assert postfix_of(expression) == expected


class TestSquareRoot:
    """sqrt binds to the following group or atomic operand."""

    def test_parenthesized_argument(self):
        assert postfix_of("sqrt(9)+2*3") == "9 sqrt 2 3 * +"

    def test_bare_operand(self):
        assert postfix_of("sqrt4+5") == "4 sqrt 5 +"

    def test_nested_groups(self):
        assert postfix_of("sqrt((16))") == "16 sqrt"

    def test_group_with_operators(self):
        assert postfix_of("√(3²+4²)") == "3 2 ^ 4 2 ^ + sqrt"

    def test_trailing_sqrt_has_no_operand_ahead(self):
        assert postfix_of("4+sqrt") == "4 sqrt +"


class TestNegation:
    """Negation binds looser than ^ and tighter than + and -."""

    def test_negated_power(self):
        assert postfix_of("-2^2") == "2 2 ^ neg"

    def test_negative_exponent(self):
        assert postfix_of("2^-2") == "2 2 neg ^"

    def test_negation_then_addition(self):
        assert postfix_of("-2+3") == "2 neg 3 +"

    def test_negated_group(self):
        assert postfix_of("-(2+3)*4") == "2 3 + neg 4 *"


class TestLeniency:
    """Unbalanced parentheses are tolerated."""

    def test_unclosed_paren_is_discarded(self):
        postfix = to_postfix(tokenize("(2+3"))
        assert not any(isinstance(token, OpenParen) for token in postfix)
        assert untokenize(postfix) == "2 3 +"

    def test_excess_closer_is_ignored(self):
        assert postfix_of("2+3)") == "2 3 +"

    def test_empty(self):
        assert to_postfix([]) == []
