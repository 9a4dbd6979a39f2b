import logging
import string
from typing import Optional

from sumire.helper import Reporter
from sumire.token import KEYWORDS, Token, TokenType, new_token
from sumire.utils import Peekable

logger = logging.getLogger(__name__)

SINGLE_CHAR_TOKENS = {
    "(": TokenType.LeftParen,
    ")": TokenType.RightParen,
    "{": TokenType.LeftBrace,
    "}": TokenType.RightBrace,
    ",": TokenType.Comma,
    ".": TokenType.Dot,
    "-": TokenType.Minus,
    "+": TokenType.Plus,
    ";": TokenType.SemiColon,
    "*": TokenType.Star,
}

# first char -> (kind when followed by "=", kind otherwise)
EQUAL_SUFFIX_TOKENS = {
    "!": (TokenType.BangEqual, TokenType.Bang),
    "=": (TokenType.EqualEqual, TokenType.Equal),
    "<": (TokenType.LessEqual, TokenType.Less),
    ">": (TokenType.GreaterEqual, TokenType.Greater),
}

WHITESPACE = " \r\t"


def is_digit(char: str) -> bool:
    return char in string.digits


def is_identifier_start(char: str) -> bool:
    return char.isalpha() or char == "_"


def is_identifier_char(char: str) -> bool:
    return char.isalnum() or char == "_"


def read_string_literal(
    chars: Peekable[str], expression: str, start: int, line: int, reporter: Reporter
) -> tuple[Optional[Token], int]:
    start_line = line
    while (char := chars.next_if(lambda c: c != '"')) is not None:
        if char == "\n":
            line += 1
    if chars.at_end():
        reporter.error(line, "Unterminated string.")
        return None, line
    next(chars)
    text = expression[start + 1 : chars.consumed - 1]
    return new_token(TokenType.STRING, text, start_line, text), line


def read_number(
    chars: Peekable[str], expression: str, start: int, line: int, reporter: Reporter
) -> Optional[Token]:
    while chars.next_if(is_digit):
        pass
    if chars.next_if(lambda c: c == "."):
        if not chars.next_if(is_digit):
            reporter.error(line, "Number cannot end with '.'.")
            return None
        while chars.next_if(is_digit):
            pass
    text = expression[start : chars.consumed]
    return new_token(TokenType.Number, text, line, float(text))


def read_identifier(chars: Peekable[str], expression: str, start: int, line: int) -> Token:
    while chars.next_if(is_identifier_char):
        pass
    text = expression[start : chars.consumed]
    return new_token(KEYWORDS.get(text, TokenType.Identifier), text, line)


def skip_line_comment(chars: Peekable[str]) -> None:
    while chars.next_if(lambda c: c != "\n"):
        pass


def tokenize(expression: str, reporter: Optional[Reporter] = None) -> list[Token]:
    # lexical errors are reported and scanning carries on
    if reporter is None:
        reporter = Reporter()
    chars = Peekable(expression)
    tokens: list[Token] = []
    line = 1
    while chars:
        start = chars.consumed
        char = next(chars)
        if char in SINGLE_CHAR_TOKENS:
            tokens.append(new_token(SINGLE_CHAR_TOKENS[char], char, line))
            continue
        if char in EQUAL_SUFFIX_TOKENS:
            double, single = EQUAL_SUFFIX_TOKENS[char]
            if chars.next_if(lambda c: c == "="):
                tokens.append(new_token(double, char + "=", line))
            else:
                tokens.append(new_token(single, char, line))
            continue
        if char == "/":
            if chars.next_if(lambda c: c == "/"):
                skip_line_comment(chars)
            else:
                tokens.append(new_token(TokenType.Slash, char, line))
            continue
        if char in WHITESPACE:
            continue
        if char == "\n":
            line += 1
            continue
        if char == '"':
            token, line = read_string_literal(chars, expression, start, line, reporter)
            if token:
                tokens.append(token)
            continue
        if is_digit(char):
            token = read_number(chars, expression, start, line, reporter)
            if token:
                tokens.append(token)
            continue
        if is_identifier_start(char):
            tokens.append(read_identifier(chars, expression, start, line))
            continue
        reporter.error(line, "Unexpected character.")
    tokens.append(new_token(TokenType.EOF, "", line))
    logger.debug("scanned %d tokens over %d lines", len(tokens), line)
    return tokens
