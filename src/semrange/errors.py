"""
semrange Error Hierarchy
========================

This module defines the exception hierarchy for semrange. All exceptions
inherit from SemrangeError, allowing callers to catch every library error
with a single except clause if desired.

Exception Hierarchy
-------------------
SemrangeError (base)
└── LexError - tokenization failed
    └── UnexpectedCharacterError - character matches no grammar rule

Error Message Format
--------------------
Lexer errors carry the original input and the 0-based column of the
offending character. Their message is a three-line diagnostic:

    Unexpected character "!" @ 3:
      1.2!.3
         ^

The column is stored separately from the rendering, so callers can render
the same error colorized or as JSON (see semrange.diagnostics).
"""

from enum import Enum
from typing import Any, Optional

from semrange.config import DiagnosticConfig
from semrange import diagnostics


# =============================================================================
# Base Exception Class
# =============================================================================

class SemrangeError(Exception):
    """
    Base exception for all semrange errors.

        try:
            tokens = lex(expression)
        except SemrangeError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Lexer Exceptions
# =============================================================================

class ErrorKind(Enum):
    """Classification of lexer failures."""

    UNEXPECTED_CHARACTER = "UnexpectedCharacter"


class LexError(SemrangeError):
    """
    Tokenization of a range expression failed.

    Attributes:
        kind: The ErrorKind classification
        reason: Human-readable reason, e.g. "Unexpected character"
        input: The complete original input string
        column: 0-based index of the offending character
        char: The offending character
        config: Rendering settings used for the default message
    """

    kind: ErrorKind = ErrorKind.UNEXPECTED_CHARACTER

    def __init__(
        self,
        reason: str,
        input: str,
        column: int,
        config: Optional[DiagnosticConfig] = None,
    ):
        self.reason = reason
        self.input = input
        self.column = column
        self.char = input[column] if 0 <= column < len(input) else ""
        self.config = config or DiagnosticConfig()
        super().__init__(self.diagnostic)

    @property
    def diagnostic(self) -> str:
        """The plain (unstyled) three-line diagnostic."""
        return self.render("plain")

    def render(self, style: str = "plain") -> str:
        """
        Render this error in the given style.

        Args:
            style: "plain", "color" or "json"

        Returns:
            The rendered diagnostic text
        """
        return diagnostics.render(
            self.input,
            self.column,
            self.reason,
            style=style,
            config=self.config,
            kind=self.kind.value,
        )

    def to_dict(self) -> dict[str, Any]:
        """Structured view of the error for programmatic consumers."""
        return diagnostics.error_fields(
            self.input, self.column, self.reason, kind=self.kind.value
        )

    def __reduce__(self):
        # Rebuild from the constructor arguments, not from args (the message)
        return (type(self), (self.reason, self.input, self.column, self.config))


class UnexpectedCharacterError(LexError):
    """
    Character matches none of the lexer's grammar rules.

    Raised with the cursor still on the offending character, so `column`
    is the character's own index in the input.

    Example:
        >>> lex("1.2!.3")
        Traceback (most recent call last):
        ...
        semrange.errors.UnexpectedCharacterError: Unexpected character "!" @ 3:
          1.2!.3
             ^
    """

    kind = ErrorKind.UNEXPECTED_CHARACTER
    REASON = "Unexpected character"

    def __init__(
        self,
        input: str,
        column: int,
        config: Optional[DiagnosticConfig] = None,
    ):
        super().__init__(self.REASON, input, column, config)

    def __reduce__(self):
        return (type(self), (self.input, self.column, self.config))
