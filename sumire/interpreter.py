import logging
import operator

from sumire.exceptions import EvaluationError
from sumire.node import Binary, Expr, Grouping, Literal, Unary
from sumire.token import Token, TokenType
from sumire.value import (
    FALSE,
    NIL,
    TRUE,
    Value,
    ValueKind,
    bool_of,
    divide,
    is_equal,
    is_number,
    number_of,
    string_of,
)

logger = logging.getLogger(__name__)

ARITHMETIC = {
    TokenType.Minus: operator.sub,
    TokenType.Star: operator.mul,
    TokenType.Slash: divide,
}

COMPARISON = {
    TokenType.Greater: operator.gt,
    TokenType.GreaterEqual: operator.ge,
    TokenType.Less: operator.lt,
    TokenType.LessEqual: operator.le,
}


def evaluate(node: Expr) -> Value:
    try:
        value = evaluate_node(node)
    except RecursionError:
        raise EvaluationError(outermost_operator(node), "Expression nested too deeply.") from None
    logger.debug("evaluated to %s", value)
    return value


def outermost_operator(node: Expr) -> Token:
    while isinstance(node, Grouping):
        node = node.inner
    if isinstance(node, (Binary, Unary)):
        return node.operator
    return Token(TokenType.EOF, "", 1)


def evaluate_node(node: Expr) -> Value:
    match node:
        case Literal():
            return evaluate_literal(node)
        case Grouping(inner):
            return evaluate_node(inner)
        case Unary(token, right):
            return evaluate_unary(token, evaluate_node(right))
        case Binary(left, token, right):
            return evaluate_binary(token, evaluate_node(left), evaluate_node(right))
    raise ValueError("invalid node type")


def evaluate_literal(node: Literal) -> Value:
    match node.kind:
        case TokenType.Number:
            return number_of(node.value)
        case TokenType.STRING:
            return string_of(node.value)
        case TokenType.TRUE:
            return TRUE
        case TokenType.FALSE:
            return FALSE
        case TokenType.Nil:
            return NIL
    raise ValueError(f"invalid literal kind {node.kind.name}")


def evaluate_unary(token: Token, right: Value) -> Value:
    match token.kind:
        case TokenType.Minus:
            if not is_number(right):
                raise EvaluationError(token, "Operand must be a number.")
            return number_of(-right.data)
        case TokenType.Bang:
            # no truthiness: only booleans can be negated
            if right.kind != ValueKind.BOOL:
                raise EvaluationError(token, "Operand must be a boolean.")
            return bool_of(not right.data)
    raise ValueError(f"invalid unary operator {token.kind.name}")


def evaluate_binary(token: Token, left: Value, right: Value) -> Value:
    match token.kind:
        case TokenType.Plus:
            if left.kind == ValueKind.STRING and right.kind == ValueKind.STRING:
                return string_of(left.data + right.data)
            check_number_operands(token, left, right, "Operands must be two numbers or two strings.")
            return number_of(left.data + right.data)
        case TokenType.Minus | TokenType.Star | TokenType.Slash:
            check_number_operands(token, left, right, "Operands must be numbers.")
            return number_of(ARITHMETIC[token.kind](left.data, right.data))
        case TokenType.Greater | TokenType.GreaterEqual | TokenType.Less | TokenType.LessEqual:
            check_number_operands(token, left, right, "Operands must be numbers.")
            return bool_of(COMPARISON[token.kind](left.data, right.data))
        case TokenType.EqualEqual:
            return bool_of(is_equal(left, right))
        case TokenType.BangEqual:
            return bool_of(not is_equal(left, right))
    raise ValueError(f"invalid binary operator {token.kind.name}")


def check_number_operands(token: Token, left: Value, right: Value, message: str) -> None:
    if not (is_number(left) and is_number(right)):
        raise EvaluationError(token, message)
