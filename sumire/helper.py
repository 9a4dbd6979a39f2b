import logging
from dataclasses import dataclass, field

from sumire.token import Token, TokenType

logger = logging.getLogger(__name__)


def error_message(line: int, where: str, message: str) -> str:
    return f"[line {line}] Error{where}: {message}"


def token_location(token: Token) -> str:
    if token.kind == TokenType.EOF:
        return " at end"
    return f" at '{token.lexeme}'"


@dataclass(frozen=True)
class Diagnostic:
    line: int
    message: str
    where: str = ""

    def __str__(self) -> str:
        return error_message(self.line, self.where, self.message)


@dataclass
class Reporter:
    diagnostics: list[Diagnostic] = field(default_factory=list)

    def error(self, line: int, message: str) -> Diagnostic:
        return self._report(Diagnostic(line, message))

    def token_error(self, token: Token, message: str) -> Diagnostic:
        return self._report(Diagnostic(token.line, message, token_location(token)))

    @property
    def had_error(self) -> bool:
        return bool(self.diagnostics)

    def _report(self, diagnostic: Diagnostic) -> Diagnostic:
        logger.info("%s", diagnostic)
        self.diagnostics.append(diagnostic)
        return diagnostic
