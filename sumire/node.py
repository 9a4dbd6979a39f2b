from dataclasses import dataclass
from typing import Optional, Union

from sumire.token import LITERAL_TYPES, Token, TokenType
from sumire.value import format_number


@dataclass(frozen=True)
class Binary:
    left: "Expr"
    operator: Token
    right: "Expr"


@dataclass(frozen=True)
class Grouping:
    inner: "Expr"


@dataclass(frozen=True)
class Literal:
    kind: TokenType
    value: Optional[Union[float, str]] = None


@dataclass(frozen=True)
class Unary:
    operator: Token
    right: "Expr"


Expr = Union[Binary, Grouping, Literal, Unary]


def new_binary(left: Expr, operator: Token, right: Expr) -> Binary:
    return Binary(left, operator, right)


def new_grouping(inner: Expr) -> Grouping:
    return Grouping(inner)


def new_literal(token: Token) -> Literal:
    if token.kind not in LITERAL_TYPES:
        raise ValueError(f"invalid literal token {token.kind.name}")
    if token.kind in (TokenType.Number, TokenType.STRING) and token.literal is None:
        raise ValueError(f"{token.kind.name} token without a value")
    return Literal(token.kind, token.literal)


def new_unary(operator: Token, right: Expr) -> Unary:
    return Unary(operator, right)


def literal_to_string(node: Literal) -> str:
    match node.kind:
        case TokenType.Number:
            return format_number(node.value)
        case TokenType.STRING:
            return f'"{node.value}"'
        case TokenType.TRUE:
            return "true"
        case TokenType.FALSE:
            return "false"
        case TokenType.Nil:
            return "nil"
    raise ValueError("invalid literal kind")


def to_string(node: Expr) -> str:
    """Render ``node`` fully parenthesized, e.g. ``(+ 1 (* 2 3))``."""
    match node:
        case Binary(left, operator, right):
            return f"({operator.lexeme} {to_string(left)} {to_string(right)})"
        case Grouping(inner):
            return f"(group {to_string(inner)})"
        case Literal():
            return literal_to_string(node)
        case Unary(operator, right):
            return f"({operator.lexeme} {to_string(right)})"
    raise ValueError("invalid node type")
