import logging
from typing import Iterable, Optional

from sumire.exceptions import ParseError
from sumire.helper import Reporter
from sumire.node import (
    Expr,
    new_binary,
    new_grouping,
    new_literal,
    new_unary,
    to_string,
)
from sumire.token import Token, TokenType, equal, is_literal
from sumire.utils import Peekable

logger = logging.getLogger(__name__)

EQUALITY_OPERATORS = (TokenType.BangEqual, TokenType.EqualEqual)
COMPARISON_OPERATORS = (
    TokenType.Greater,
    TokenType.GreaterEqual,
    TokenType.Less,
    TokenType.LessEqual,
)
ADDITION_OPERATORS = (TokenType.Minus, TokenType.Plus)
MULTIPLICATION_OPERATORS = (TokenType.Slash, TokenType.Star)
UNARY_OPERATORS = (TokenType.Bang, TokenType.Minus)


def starts_primary(token: Token) -> bool:
    return is_literal(token) or equal(token, TokenType.LeftParen, TokenType.Identifier)


class Parse:
    tokens: Peekable[Token]
    reporter: Reporter

    def __init__(self, tokens: Iterable[Token], reporter: Optional[Reporter] = None):
        self.tokens = Peekable(tokens)
        self.reporter = reporter if reporter is not None else Reporter()
        self.last_token: Optional[Token] = None

    def parse(self) -> Expr:
        try:
            node = self.expression_parse()
        except RecursionError:
            raise self.error(self.peek(), "Expression nested too deeply.") from None
        token = self.peek()
        if token is not None and not equal(token, TokenType.EOF):
            raise self.error(token, "Expect end of expression.")
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("parsed %s", to_string(node))
        return node

    def expression_parse(self) -> Expr:
        return self.convert_equality_token()

    def convert_equality_token(self) -> Expr:
        node = self.convert_comparison_token()
        while token := self.match(*EQUALITY_OPERATORS):
            node = new_binary(node, token, self.convert_comparison_token())
        self.check_unexpected_expression()
        return node

    def convert_comparison_token(self) -> Expr:
        node = self.convert_add_token()
        while token := self.match(*COMPARISON_OPERATORS):
            node = new_binary(node, token, self.convert_add_token())
        self.check_unexpected_expression()
        return node

    def convert_add_token(self) -> Expr:
        node = self.convert_mul_token()
        while token := self.match(*ADDITION_OPERATORS):
            node = new_binary(node, token, self.convert_mul_token())
        self.check_unexpected_expression()
        return node

    def convert_mul_token(self) -> Expr:
        node = self.convert_unary_token()
        while token := self.match(*MULTIPLICATION_OPERATORS):
            node = new_binary(node, token, self.convert_unary_token())
        self.check_unexpected_expression()
        return node

    def convert_unary_token(self) -> Expr:
        if token := self.match(*UNARY_OPERATORS):
            return new_unary(token, self.convert_unary_token())
        return self.primary_token()

    def primary_token(self) -> Expr:
        token = self.peek()
        if token is None:
            raise self.error(None, "Expected expression.")
        if is_literal(token):
            return new_literal(self.advance())
        if equal(token, TokenType.LeftParen):
            self.advance()
            node = self.expression_parse()
            self.consume(TokenType.RightParen, "Expect ')' after expression.")
            return new_grouping(node)
        raise self.error(token, "Expected expression.")

    def check_unexpected_expression(self) -> None:
        # two operands in a row, e.g. "1 2"
        token = self.peek()
        if token is not None and starts_primary(token):
            raise self.error(token, "Unexpected Expression")

    def peek(self) -> Optional[Token]:
        return self.tokens.peek(None)

    def advance(self) -> Token:
        self.last_token = next(self.tokens)
        return self.last_token

    def match(self, *kinds: TokenType) -> Optional[Token]:
        token = self.tokens.next_if(lambda item: equal(item, *kinds))
        if token is not None:
            self.last_token = token
        return token

    def consume(self, kind: TokenType, message: str) -> Token:
        if token := self.match(kind):
            return token
        raise self.error(self.peek(), message)

    def error(self, token: Optional[Token], message: str) -> ParseError:
        if token is None:
            # ran out of tokens without an EOF marker
            line = self.last_token.line if self.last_token else 1
            token = Token(TokenType.EOF, "", line)
        self.reporter.token_error(token, message)
        return ParseError(token, message)


def parse(tokens: Iterable[Token], reporter: Optional[Reporter] = None) -> Expr:
    return Parse(tokens, reporter).parse()
