"""
Tests for the tokenizer and the parenthesis validator.
"""

import pytest

from calculator import (
    InvalidTokenError,
    Token,
    TokenType,
    UnmatchedParensError,
    tokenize,
    tokens_to_text,
    validate_parens,
)


class TestTokenize:

    def test_simple_expression(self, num, op):
        assert tokenize("2 + 3") == [num(2), op('PLUS'), num(3)]

    def test_complex_expression(self, num, op):
        expected = [
            num(12.5), op('MINUS'), num(4.2), op('MULTIPLY'),
            op('LPAREN'), num(3), op('DIVIDE'), num(7), op('RPAREN'),
        ]
        assert tokenize("12.5 - 4.2 * (3 / 7)") == expected

    def test_power(self, num, op):
        assert tokenize("2^10") == [num(2), op('POWER'), num(10)]

    def test_whitespace_is_insignificant(self, num, op):
        assert tokenize("  2   +\t3  ") == [num(2), op('PLUS'), num(3)]

    def test_whitespace_splits_numbers(self, num):
        assert tokenize("1 2") == [num(1), num(2)]

    def test_empty_input(self):
        assert tokenize("") == []
        assert tokenize("   ") == []

    def test_single_number(self, num):
        assert tokenize("42") == [num(42)]

    def test_single_operator(self, op):
        assert tokenize("+") == [op('PLUS')]

    def test_minus_is_not_disambiguated(self, num, op):
        assert tokenize("-5") == [op('MINUS'), num(5)]
        assert tokenize("1 + -2") == [num(1), op('PLUS'), op('MINUS'), num(2)]

    def test_chained_operators(self, num, op):
        expected = [num(1), op('PLUS'), op('MINUS'), op('MULTIPLY'), op('DIVIDE')]
        assert tokenize("1 + - * /") == expected

    def test_nested_parentheses(self, num, op):
        expected = [
            op('LPAREN'), num(1), op('PLUS'), op('LPAREN'), num(2),
            op('MULTIPLY'), num(3), op('RPAREN'), op('RPAREN'),
        ]
        assert tokenize("(1 + (2 * 3))") == expected

    def test_leading_and_trailing_dot(self, num):
        assert tokenize(".5") == [num(0.5)]
        assert tokenize("5.") == [num(5.0)]

    def test_large_number(self, num):
        assert tokenize("1234567890.1234567890") == [num(1234567890.1234567)]

    @pytest.mark.parametrize("expression, bad", [
        ("abc", "a"),
        ("2 + a", "a"),
        ("1a2", "a"),
        ("1e10", "e"),
        ("3 % 2", "%"),
        ("1.2.3", "1.2.3"),
        ("2 + .", "."),
    ])
    def test_invalid_token(self, expression, bad):
        with pytest.raises(InvalidTokenError) as exc_info:
            tokenize(expression)
        assert exc_info.value.token == bad
        assert f"'{bad}'" in str(exc_info.value)

    def test_overflowing_literal_rejected(self):
        with pytest.raises(InvalidTokenError):
            tokenize("9" * 400)

    def test_numbers_are_finite_floats(self):
        for token in tokenize("0 1.5 .25 1000000"):
            assert isinstance(token.value, float)


class TestRoundTrip:

    @pytest.mark.parametrize("expression", [
        "2 + 3 * 4",
        "-(-4)",
        "2^-1",
        "12.5 - 4.2 * (3 / 7)",
        "0.1 + 0.2",
        "10000000000000000000000 / 3",
        "((1))",
    ])
    def test_retokenize_is_identical(self, expression):
        tokens = tokenize(expression)
        assert tokenize(tokens_to_text(tokens)) == tokens

    def test_canonical_text(self):
        assert tokens_to_text(tokenize("2.50*(1+.5)")) == "2.5 * ( 1 + 0.5 )"

    def test_unary_minus_text(self):
        assert Token.of(TokenType.UNARY_MINUS).text == "-"


class TestValidateParens:

    @pytest.mark.parametrize("expression", [
        "", "1 + 2", "(1 + 2)", "((1) * (2 + (3)))", "()",
    ])
    def test_balanced(self, expression):
        assert validate_parens(tokenize(expression)) is None

    @pytest.mark.parametrize("expression", [
        "(2 + 3", "2 + 3)", ")", "((2 + 3)", "2 + 3))", ")(",
    ])
    def test_unbalanced(self, expression):
        with pytest.raises(UnmatchedParensError):
            validate_parens(tokenize(expression))

    def test_does_not_check_operator_placement(self):
        validate_parens(tokenize("(+ * )"))
