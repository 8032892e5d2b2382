"""
Error handling for the Lox scanner.

Scanner errors are never fatal: each one is captured as a diagnostic with
its line, handed to an optional sink, and the scan carries on with the
next character. Callers decide what to do with the accumulated list.

Author: xwest
"""

import sys
from dataclasses import dataclass
from typing import Callable, List, Optional, TextIO, Tuple

from .tokens import SourceLocation


# Receives (line, message) for every scanner diagnostic
DiagnosticSink = Callable[[int, str], None]


@dataclass
class Diagnostic:
    """A single scanner diagnostic (error or warning)."""
    message: str
    location: SourceLocation
    severity: str  # "error", "warning"
    code: Optional[str] = None
    help_text: Optional[str] = None

    @property
    def line(self) -> int:
        return self.location.line

    def __str__(self) -> str:
        result = f"{self.severity.upper()}: {self.message}\n"
        result += f"  --> {self.location}\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        return result


class LexerError(Exception):
    """
    Exception carrying a scanner diagnostic.

    The scanner raises it from its literal helpers and the driver loop
    catches it, so it only escapes to callers through strict helpers
    like `ScanResult.raise_for_errors`.
    """

    def __init__(
        self,
        message: str,
        location: SourceLocation,
        code: Optional[str] = None,
        help_text: Optional[str] = None
    ):
        super().__init__(message)
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="error",
            code=code,
            help_text=help_text
        )

    @property
    def message(self) -> str:
        return self.diagnostic.message

    @property
    def line(self) -> int:
        return self.diagnostic.line

    def __str__(self) -> str:
        return str(self.diagnostic)


class ErrorReporter:
    """
    Default diagnostic sink for command line use.

    Prints Lox style `[line N] Error: message` lines and remembers that
    something went wrong so the runner can pick an exit status.
    """

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream
        self.had_error = False
        self.reports: List[Tuple[int, str]] = []

    def __call__(self, line: int, message: str) -> None:
        self.report(line, "", message)

    def report(self, line: int, where: str, message: str) -> None:
        """Record one diagnostic and write it out."""
        stream = self.stream if self.stream is not None else sys.stderr
        print(f"[line {line}] Error{where}: {message}", file=stream)
        self.reports.append((line, message))
        self.had_error = True

    def reset(self) -> None:
        """Forget previous errors (used between prompt lines)."""
        self.had_error = False
        self.reports.clear()


def create_unexpected_character_error(char: str, location: SourceLocation) -> LexerError:
    """Create an error for a character no token can start with."""
    if char.isprintable():
        help_text = f"The character '{char}' is not valid in Lox source code."
    else:
        help_text = f"Non-printable character (Unicode: U+{ord(char):04X}) is not allowed."

    return LexerError(
        message="Unexpected character.",
        location=location,
        code="L001",
        help_text=help_text
    )


def create_unterminated_string_error(location: SourceLocation) -> LexerError:
    """Create an error for a string literal that runs off the end of input."""
    return LexerError(
        message="Unterminated string. Close it with a double-quote.",
        location=location,
        code="L002",
        help_text='String literals must be closed with a matching " quote.'
    )
