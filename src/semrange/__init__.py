"""
semrange - Version Range Expression Lexer
=========================================

This package tokenizes semantic-version range expressions such as
``>=1.2.3 <3.4.2 || ^1.0.0-beta.2`` into classified tokens for a range
parser to consume.

Main Components
---------------
- **lexer**: Token kinds, the Lexer state machine, tokenize() and lex()
- **errors**: SemrangeError hierarchy with position-annotated diagnostics
- **diagnostics**: Plain, colorized and JSON rendering of lexer errors
- **config**: Diagnostic rendering settings, optionally from the environment
- **cli**: The ``semlex`` command-line tool

Quick Start
-----------
Tokenize without exceptions:
    >>> from semrange import tokenize
    >>> result = tokenize(">=1.2.3")
    >>> result.ok
    True
    >>> [t.value for t in result.tokens]
    ['>=', '1', '.', '2', '.', '3']

Tokenize and raise on bad input:
    >>> from semrange import lex, LexError
    >>> try:
    ...     lex("1.2!.3")
    ... except LexError as e:
    ...     print(e.column)
    3

Or use the command-line tool:
    $ semlex ">=1.2.3 <3.4.2 || ^1.0.0-beta.2"
"""

__version__ = "1.0.0"

# =============================================================================
# Public API Exports
# =============================================================================

from semrange.config import DiagnosticConfig
from semrange.diagnostics import render
from semrange.errors import (
    ErrorKind,
    LexError,
    SemrangeError,
    UnexpectedCharacterError,
)
from semrange.lexer import (
    Lexer,
    LexResult,
    Token,
    TokenKind,
    lex,
    tokenize,
)

__all__ = [
    # Version
    "__version__",
    # Lexer
    "Lexer",
    "LexResult",
    "Token",
    "TokenKind",
    "lex",
    "tokenize",
    # Errors
    "SemrangeError",
    "LexError",
    "UnexpectedCharacterError",
    "ErrorKind",
    # Diagnostics
    "DiagnosticConfig",
    "render",
]
