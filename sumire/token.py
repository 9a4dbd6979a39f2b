from dataclasses import dataclass
from enum import IntEnum
from typing import Optional, Union


class TokenType(IntEnum):
    LeftParen = 1
    RightParen = 2
    LeftBrace = 3
    RightBrace = 4
    Comma = 5
    Dot = 6
    Minus = 7
    Plus = 8
    SemiColon = 9
    Slash = 10
    Star = 11
    Bang = 12
    BangEqual = 13
    Equal = 14
    EqualEqual = 15
    Greater = 16
    GreaterEqual = 17
    Less = 18
    LessEqual = 19
    Identifier = 20
    STRING = 21
    Number = 22
    And = 23
    Class = 24
    Else = 25
    FALSE = 26
    Fun = 27
    For = 28
    If = 29
    Nil = 30
    Or = 31
    Print = 32
    Return = 33
    Super = 34
    This = 35
    TRUE = 36
    Var = 37
    While = 38
    EOF = 39


KEYWORDS = {
    "and": TokenType.And,
    "class": TokenType.Class,
    "else": TokenType.Else,
    "false": TokenType.FALSE,
    "for": TokenType.For,
    "fun": TokenType.Fun,
    "if": TokenType.If,
    "nil": TokenType.Nil,
    "or": TokenType.Or,
    "print": TokenType.Print,
    "return": TokenType.Return,
    "super": TokenType.Super,
    "this": TokenType.This,
    "true": TokenType.TRUE,
    "var": TokenType.Var,
    "while": TokenType.While,
}

LITERAL_TYPES = frozenset(
    {
        TokenType.Number,
        TokenType.STRING,
        TokenType.TRUE,
        TokenType.FALSE,
        TokenType.Nil,
    }
)


@dataclass(frozen=True)
class Token:
    kind: TokenType
    lexeme: str
    line: int = 1
    literal: Optional[Union[float, str]] = None

    def __str__(self) -> str:
        if self.literal is None:
            return f"{self.kind.name} {self.lexeme!r} line={self.line}"
        return f"{self.kind.name} {self.lexeme!r} {self.literal!r} line={self.line}"


def new_token(
    token_type: TokenType,
    lexeme: str,
    line: int,
    literal: Optional[Union[float, str]] = None,
) -> Token:
    return Token(token_type, lexeme, line, literal)


def equal(token: Token, *kinds: TokenType) -> bool:
    # literal-carrying kinds compare by variant only, never by payload
    return token.kind in kinds


def is_literal(token: Token) -> bool:
    return token.kind in LITERAL_TYPES
