import pytest

from math_parser import (
    scan, expand_implicit_multiplication, to_postfix, ExpressionSyntaxError, OpType, Token
)
from math_parser.tokens import OPEN_PAREN, CLOSE_PAREN, COMMA

MUL = Token.operator(OpType.MUL)


def _postfix(expression):
    return [str(token) for token in to_postfix(expand_implicit_multiplication(scan(expression)))]


@pytest.mark.parametrize("expression, expected", [
    ("43(24)", [Token.number(43), MUL, OPEN_PAREN, Token.number(24), CLOSE_PAREN]),
    ("(43)24", [OPEN_PAREN, Token.number(43), CLOSE_PAREN, MUL, Token.number(24)]),
    ("(43)(24)", [OPEN_PAREN, Token.number(43), CLOSE_PAREN, MUL,
                  OPEN_PAREN, Token.number(24), CLOSE_PAREN]),
])
def test_implicit_multiplication_between_terms(expression, expected):
    assert expand_implicit_multiplication(scan(expression)) == expected


def test_implicit_multiplication_before_function():
    expanded = expand_implicit_multiplication(scan("2sqrt(9)"))
    assert expanded[:3] == [Token.number(2), MUL, Token.function("sqrt")]

    expanded = expand_implicit_multiplication(scan("sqrt(4)rad(27,3)"))
    assert expanded[4:6] == [MUL, Token.function("rad")]


def test_no_multiplication_for_other_pairs():
    tokens = scan("sqrt(4)+2,(3)")
    assert expand_implicit_multiplication(tokens) == tokens


def test_expansion_never_shrinks():
    tokens = scan("(1)(2)(3)4")
    expanded = expand_implicit_multiplication(tokens)
    assert len(expanded) == len(tokens) + 3


def test_precedence_ordering():
    assert _postfix("2+3*4") == ["2", "3", "4", "*", "+"]
    assert _postfix("2*3+4") == ["2", "3", "*", "4", "+"]


def test_equal_precedence_is_left_associative():
    assert _postfix("2^3^2") == ["2", "3", "^", "2", "^"]
    assert _postfix("8-3-2") == ["8", "3", "-", "2", "-"]


def test_parentheses_are_dropped():
    assert _postfix("(2+3)*4") == ["2", "3", "+", "4", "*"]


def test_function_is_preceded_by_argument_count():
    assert _postfix("sqrt(9)") == ["9", "1", "sqrt"]
    assert _postfix("rad(27,3)") == ["27", "3", "2", "rad"]
    assert _postfix("avg(1,2,3,4)") == ["1", "2", "3", "4", "4", "avg"]


def test_nested_function_calls():
    assert _postfix("rad(27, rad(9,2))") == ["27", "9", "2", "2", "rad", "2", "rad"]


def test_argument_expressions_are_flushed_at_commas():
    assert _postfix("max(1+2, 3*4)") == ["1", "2", "+", "3", "4", "*", "2", "max"]


def test_implicit_multiplication_with_function():
    assert _postfix("2sqrt(9)") == ["2", "9", "1", "sqrt", "*"]


def test_empty_token_list():
    assert to_postfix([]) == []


@pytest.mark.parametrize("expression", [
    "1,2",
    "(1,2)",
    "3*(1,2)",
    "(2+3",
    "2+3)",
    "sqrt(9))",
    ")(",
])
def test_structural_errors(expression):
    with pytest.raises(ExpressionSyntaxError):
        to_postfix(expand_implicit_multiplication(scan(expression)))


def test_syntax_error_is_a_value_error():
    with pytest.raises(ValueError):
        to_postfix([Token.number(1), COMMA, Token.number(2)])


@pytest.mark.parametrize("expression", ["max 5 7 2", "2+max 3 8 2", "7 9 1sqrt", "(sqrt 4)"])
def test_function_without_argument_list(expression):
    with pytest.raises(ExpressionSyntaxError, match="missing its argument list"):
        to_postfix(expand_implicit_multiplication(scan(expression)))
