"""
Error types raised by the scan, parse and evaluate stages.
"""

from typing import TYPE_CHECKING

from sumire.helper import error_message, token_location

if TYPE_CHECKING:
    from sumire.helper import Diagnostic
    from sumire.token import Token


# Conventional sysexits codes used by the command line front ends.
EXIT_DATA_ERROR = 65
EXIT_SOFTWARE_ERROR = 70


class SumireError(Exception):
    exit_code = EXIT_DATA_ERROR


class ScanError(SumireError):
    """Raised when scanning reported errors and the run is configured to stop there."""

    def __init__(self, diagnostics: list["Diagnostic"]):
        self.diagnostics = list(diagnostics)
        super().__init__("\n".join(str(item) for item in self.diagnostics))


class ParseError(SumireError):
    def __init__(self, token: "Token", message: str):
        self.token = token
        self.message = message
        super().__init__(error_message(token.line, token_location(token), message))


class EvaluationError(SumireError):
    """A type mismatch found while evaluating, tied to the operator that hit it."""

    exit_code = EXIT_SOFTWARE_ERROR

    def __init__(self, token: "Token", message: str):
        self.token = token
        self.message = message
        super().__init__(error_message(token.line, token_location(token), message))
