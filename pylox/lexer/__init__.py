"""
Lox Lexer Package

Implements a from-scratch lexical analyzer (scanner) for the Lox language.

Key Features:
- Single pass, bounded lookahead, no backtracking
- String, number and identifier/keyword literals
- Line tracking for diagnostics
- Non-fatal error recovery (all diagnostics collected in one pass)

Author: xwest
"""

from .tokens import Token, TokenType, SourceLocation, KEYWORDS
from .scanner import Scanner, ScanResult, CharClass, classify, scan, scan_source, scan_file
from .errors import Diagnostic, DiagnosticSink, ErrorReporter, LexerError

__all__ = [
    "Scanner",
    "ScanResult",
    "CharClass",
    "classify",
    "scan",
    "scan_source",
    "scan_file",
    "Token",
    "TokenType",
    "SourceLocation",
    "KEYWORDS",
    "Diagnostic",
    "DiagnosticSink",
    "ErrorReporter",
    "LexerError",
]
