"""
Lox Scanner - turns source text into a flat list of tokens

Single pass, at most two characters of lookahead, no backtracking. The
driver loop marks the start of a lexeme, classifies the next character
and hands off to the matching rule. Bad input never stops the scan: the
offending character (or unterminated string) is reported and skipped.

xwest
"""

import logging
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List, Optional

from .tokens import (
    Token, TokenType, SourceLocation, KEYWORDS, SINGLE_CHAR_TOKENS, TWO_CHAR_OPERATORS
)
from .errors import (
    DiagnosticSink, LexerError, create_unexpected_character_error,
    create_unterminated_string_error
)

logger = logging.getLogger(__name__)

# peek() result past the end of input
END_SENTINEL = "\0"


class CharClass(Enum):
    """Lexical category of the character that starts a lexeme."""
    PUNCTUATION = auto()
    OPERATOR_PREFIX = auto()
    WHITESPACE = auto()
    NEWLINE = auto()
    SLASH = auto()
    QUOTE = auto()
    DIGIT = auto()
    ALPHA = auto()
    OTHER = auto()


_FIXED_CLASSES = {
    **{char: CharClass.PUNCTUATION for char in SINGLE_CHAR_TOKENS},
    **{char: CharClass.OPERATOR_PREFIX for char in TWO_CHAR_OPERATORS},
    " ": CharClass.WHITESPACE,
    "\r": CharClass.WHITESPACE,
    "\t": CharClass.WHITESPACE,
    "\n": CharClass.NEWLINE,
    "/": CharClass.SLASH,
    '"': CharClass.QUOTE,
}


def _is_digit(char: str) -> bool:
    return "0" <= char <= "9"


def _is_alpha(char: str) -> bool:
    return "a" <= char <= "z" or "A" <= char <= "Z" or char == "_"


def _is_alpha_numeric(char: str) -> bool:
    return _is_alpha(char) or _is_digit(char)


def classify(char: str) -> CharClass:
    """Map a character to its lexical category (ASCII rules only)."""
    fixed = _FIXED_CLASSES.get(char)
    if fixed is not None:
        return fixed
    if _is_digit(char):
        return CharClass.DIGIT
    if _is_alpha(char):
        return CharClass.ALPHA
    return CharClass.OTHER


class Scanner:
    """
    Lox lexical analyzer.

    Converts source text into a list of tokens terminated by a single EOF
    token. Diagnostics are collected in `errors` and, when a sink is
    given, forwarded to it as `(line, message)` as they happen.
    """

    def __init__(self, source: str, filename: str = "<unknown>",
                 sink: Optional[DiagnosticSink] = None):
        """
        Initialize the scanner with source code.

        Args:
            source: Source code string
            filename: Name of source file for error reporting
            sink: Optional callable notified of each diagnostic
        """
        self.source = source
        self.filename = filename
        self.sink = sink
        self.start = 0
        self.current = 0
        self.line = 1
        self.tokens: List[Token] = []
        self.errors: List[LexerError] = []

    def scan_tokens(self) -> List[Token]:
        """
        Tokenize the entire source.

        Returns:
            List of tokens ending with exactly one EOF token
        """
        self.start = 0
        self.current = 0
        self.line = 1
        self.tokens = []
        self.errors = []

        while not self._is_at_end():
            # At the beginning of the next lexeme
            self.start = self.current
            try:
                self._scan_token()
            except LexerError as e:
                self._record(e)

        self.tokens.append(Token(TokenType.EOF, "", None, self.line))

        logger.debug("scanned %s: %d tokens, %d errors",
                     self.filename, len(self.tokens), len(self.errors))
        return self.tokens

    def _scan_token(self):
        """Scan one lexeme starting at `self.start`."""
        char = self._advance()
        char_class = classify(char)

        if char_class is CharClass.PUNCTUATION:
            self._add_token(SINGLE_CHAR_TOKENS[char])
        elif char_class is CharClass.OPERATOR_PREFIX:
            alone, with_equal = TWO_CHAR_OPERATORS[char]
            self._add_token(with_equal if self._next_char_is("=") else alone)
        elif char_class is CharClass.SLASH:
            if self._next_char_is("/"):
                # Comment runs to the end of the line, newline left for the loop
                while self._peek() != "\n" and not self._is_at_end():
                    self._advance()
            else:
                self._add_token(TokenType.SLASH)
        elif char_class is CharClass.WHITESPACE:
            pass
        elif char_class is CharClass.NEWLINE:
            self.line += 1
        elif char_class is CharClass.QUOTE:
            self._string()
        elif char_class is CharClass.DIGIT:
            self._number()
        elif char_class is CharClass.ALPHA:
            self._identifier()
        else:
            raise create_unexpected_character_error(char, self._location())

    def _string(self):
        """Scan a string literal; the opening quote is already consumed."""
        while self._peek() != '"' and not self._is_at_end():
            if self._peek() == "\n":
                self.line += 1
            self._advance()

        if self._is_at_end():
            raise create_unterminated_string_error(self._location())

        self._advance()  # Closing quote

        value = self.source[self.start + 1:self.current - 1]
        self._add_token(TokenType.STRING, value)

    def _number(self):
        """Scan a number literal: digits, optionally '.' and more digits."""
        while _is_digit(self._peek()):
            self._advance()

        # A trailing '.' without a digit after it is left for the next lexeme
        if self._peek() == "." and _is_digit(self._peek_next()):
            self._advance()
            while _is_digit(self._peek()):
                self._advance()

        self._add_token(TokenType.NUMBER, float(self.source[self.start:self.current]))

    def _identifier(self):
        """Scan an identifier or reserved word (maximal munch)."""
        while _is_alpha_numeric(self._peek()):
            self._advance()

        text = self.source[self.start:self.current]
        self._add_token(KEYWORDS.get(text, TokenType.IDENTIFIER))

    def _add_token(self, token_type: TokenType, literal=None):
        text = self.source[self.start:self.current]
        self.tokens.append(Token(token_type, text, literal, self.line))

    def _record(self, error: LexerError):
        """Keep a diagnostic and pass it on to the sink."""
        self.errors.append(error)
        logger.debug("%s: %s", error.diagnostic.location, error.message)
        if self.sink is not None:
            self.sink(error.line, error.message)

    def _location(self) -> SourceLocation:
        return SourceLocation(self.filename, self.line)

    def _is_at_end(self) -> bool:
        return self.current >= len(self.source)

    def _advance(self) -> str:
        """Consume and return the next character."""
        self.current += 1
        return self.source[self.current - 1]

    def _next_char_is(self, expected: str) -> bool:
        """Consume the next character only if it matches `expected`."""
        if self._is_at_end():
            return False
        if self.source[self.current] != expected:
            return False

        self.current += 1
        return True

    def _peek(self) -> str:
        if self._is_at_end():
            return END_SENTINEL
        return self.source[self.current]

    def _peek_next(self) -> str:
        if self.current + 1 >= len(self.source):
            return END_SENTINEL
        return self.source[self.current + 1]

    def has_errors(self) -> bool:
        """Check if the last scan reported any diagnostics."""
        return len(self.errors) > 0

    def get_diagnostics(self):
        """Get the diagnostics of the last scan, in the order reported."""
        return [error.diagnostic for error in self.errors]


@dataclass
class ScanResult:
    """Tokens of one scan together with the diagnostics it produced."""
    tokens: List[Token]
    diagnostics: List[LexerError] = field(default_factory=list)

    def has_errors(self) -> bool:
        return len(self.diagnostics) > 0

    def raise_for_errors(self):
        """Raise the first diagnostic, if any, as a LexerError."""
        if self.diagnostics:
            raise self.diagnostics[0]


def scan(source: str, sink: Optional[DiagnosticSink] = None) -> List[Token]:
    """
    Scan Lox source text into tokens.

    Never raises for malformed input; problems go to `sink` (if given)
    and the offending text is left out of the token list.
    """
    return Scanner(source, sink=sink).scan_tokens()


def scan_source(source: str, filename: str = "<string>",
                sink: Optional[DiagnosticSink] = None) -> ScanResult:
    """
    Convenience function to scan a source string.

    Args:
        source: Source code string
        filename: Filename for error reporting
        sink: Optional diagnostic sink

    Returns:
        ScanResult with tokens and diagnostics
    """
    scanner = Scanner(source, filename, sink)
    tokens = scanner.scan_tokens()
    return ScanResult(tokens, scanner.errors)


def scan_file(filepath: str, sink: Optional[DiagnosticSink] = None) -> ScanResult:
    """
    Convenience function to scan a source file.

    Raises:
        OSError: If file cannot be read
        UnicodeDecodeError: If the file is not valid UTF-8
    """
    with open(filepath, 'r', encoding='utf-8') as f:
        source = f.read()

    return scan_source(source, filepath, sink)
