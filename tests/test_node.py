import pytest

from sumire.node import (
    Grouping,
    Literal,
    new_binary,
    new_grouping,
    new_literal,
    new_unary,
    to_string,
)
from sumire.token import Token, TokenType
from sumire.value import (
    FALSE,
    NIL,
    TRUE,
    bool_of,
    format_number,
    is_equal,
    number_of,
    string_of,
    stringify,
)


def number(value):
    return new_literal(Token(TokenType.Number, str(value), 1, float(value)))


def test_printer_handles_every_node():
    minus = Token(TokenType.Minus, "-", 1)
    star = Token(TokenType.Star, "*", 1)
    node = new_binary(new_unary(minus, number(123)), star, new_grouping(number(45.67)))
    assert to_string(node) == "(* (- 123) (group 45.67))"


def test_printer_is_independent_of_spacing():
    plus = Token(TokenType.Plus, "+", 7)
    assert to_string(new_binary(number(1), plus, number(2))) == "(+ 1 2)"


def test_literal_from_keyword_tokens():
    assert new_literal(Token(TokenType.TRUE, "true", 1)) == Literal(TokenType.TRUE)
    assert new_literal(Token(TokenType.Nil, "nil", 1)) == Literal(TokenType.Nil)
    assert to_string(new_literal(Token(TokenType.STRING, "hi", 1, "hi"))) == '"hi"'


@pytest.mark.parametrize(
    "kind",
    [TokenType.Identifier, TokenType.Plus, TokenType.LeftParen, TokenType.EOF],
)
def test_literal_rejects_other_tokens(kind):
    with pytest.raises(ValueError):
        new_literal(Token(kind, "x", 1))


@pytest.mark.parametrize("kind", [TokenType.Number, TokenType.STRING])
def test_literal_requires_a_value(kind):
    with pytest.raises(ValueError):
        new_literal(Token(kind, "1", 1))


def test_nodes_are_immutable():
    node = new_grouping(number(1))
    with pytest.raises(AttributeError):
        node.inner = number(2)
    assert node == Grouping(Literal(TokenType.Number, 1.0))


@pytest.mark.parametrize(
    "value, text",
    [
        pytest.param(number_of(7), "7", id="integral"),
        pytest.param(number_of(-0.0), "-0", id="negative_zero"),
        pytest.param(number_of(2.5), "2.5", id="fraction"),
        pytest.param(number_of(float("inf")), "inf", id="infinity"),
        pytest.param(string_of("ab"), "ab", id="string"),
        pytest.param(TRUE, "true", id="true"),
        pytest.param(FALSE, "false", id="false"),
        pytest.param(NIL, "nil", id="nil"),
    ],
)
def test_stringify(value, text):
    assert stringify(value) == text
    assert str(value) == text


def test_format_number_large_integral():
    assert format_number(1e20) == "100000000000000000000"


def test_is_equal_requires_same_kind():
    assert is_equal(number_of(1), number_of(1.0))
    assert not is_equal(number_of(1), bool_of(True))
    assert not is_equal(number_of(0), FALSE)
    assert not is_equal(string_of(""), NIL)
    assert is_equal(NIL, NIL)
