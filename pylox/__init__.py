"""
pylox - Lox Scanner Package

A from-scratch lexical front end for the Lox scripting language. Source
text goes in, a flat list of typed tokens comes out, ready for a parser.

Architecture:
    pylox/
    ├── lexer/           # Tokens, diagnostics and the scanner itself
    ├── tools/           # Build-time helpers (AST node generator)
    └── cli.py           # `pylox` command line runner

Author: xwest
License: MIT
"""

__version__ = "0.1.0"
__author__ = "xwest"
__email__ = "xwest@pylox.dev"
__license__ = "MIT"

from .lexer import Scanner, Token, TokenType, scan

__all__ = [
    # Core API
    "Scanner",
    "Token",
    "TokenType",
    "scan",

    # Version info
    "__version__",
    "__author__",
    "__email__",
    "__license__",
]
