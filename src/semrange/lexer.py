"""
Version Range Lexer
===================

This module implements a lexer (tokenizer) for semantic-version range
expressions. It converts an expression into a flat list of classified
tokens for a range parser to assemble.

Token Kinds
-----------
| Priority | Trigger   | Consumes                     | Kind     |
|----------|-----------|------------------------------|----------|
| 1        | whitespace| one character, no token      | -        |
| 2        | .         | one character                | DOT      |
| 3        | -         | one character                | HYPHEN   |
| 4        | ^         | one character                | CARET    |
| 5        | ~         | one character                | TILDE    |
| 6        | \\|        | one, plus an optional second | EITHER   |
| 7        | > <       | one, plus an optional =      | OPERATOR |
| 8        | 0-9       | the whole run of digits      | NUMBER   |
| 9        | a-z A-Z   | the whole run of letters     | NAME     |

Rules are tried in priority order and the first match wins. Any other
character stops the scan with UnexpectedCharacterError; nothing is
skipped silently.

Positions
---------
A token's `pos` is the cursor position *after* its last character, i.e.
where the cursor stood when the token was emitted. `Token.start` gives the
0-based start column.

Example
-------
>>> from semrange.lexer import lex
>>> for token in lex(">=1.2 || ^1.0.0-beta"):
...     print(token)
Token(OPERATOR, '>=', 2)
Token(NUMBER, '1', 3)
Token(DOT, '.', 4)
Token(NUMBER, '2', 5)
Token(EITHER, '||', 8)
Token(CARET, '^', 10)
Token(NUMBER, '1', 11)
Token(DOT, '.', 12)
Token(NUMBER, '0', 13)
Token(DOT, '.', 14)
Token(NUMBER, '0', 15)
Token(HYPHEN, '-', 16)
Token(NAME, 'beta', 20)
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Callable, Optional, Union
import logging
import string

from semrange.config import DiagnosticConfig
from semrange.errors import LexError, UnexpectedCharacterError

logger = logging.getLogger(__name__)


# =============================================================================
# Token Kind Enumeration
# =============================================================================

class TokenKind(Enum):
    """
    Token kinds for version-range expressions.

    Exactly eight kinds exist; whitespace is never emitted.
    """

    DOT = auto()        # .
    HYPHEN = auto()     # - (hyphen range or pre-release separator)
    TILDE = auto()      # ~
    CARET = auto()      # ^
    EITHER = auto()     # | or ||
    OPERATOR = auto()   # > >= < <=
    NUMBER = auto()     # run of decimal digits
    NAME = auto()       # run of ASCII letters


# =============================================================================
# Token Data Class
# =============================================================================

@dataclass(frozen=True)
class Token:
    """
    A single token from a range expression.

    Attributes:
        kind: The TokenKind classification
        pos: Cursor position just after the token's last character
        value: The exact text consumed for this token
    """
    kind: TokenKind
    pos: int
    value: str

    def __repr__(self) -> str:
        return f"Token({self.kind.name}, {self.value!r}, {self.pos})"

    @property
    def start(self) -> int:
        """0-based column of the token's first character."""
        return self.pos - len(self.value)

    def to_dict(self) -> dict[str, Any]:
        """Plain-dict view, used for JSON output."""
        return {"kind": self.kind.name, "pos": self.pos, "value": self.value}


# =============================================================================
# Character Classes
# =============================================================================

# The ECMAScript \s class. Narrower than str.isspace(), which also accepts
# the information separators \x1c-\x1f and NEL (\x85), and wider in that
# it includes the byte-order mark.
WHITESPACE = frozenset(
    "\t\n\v\f\r \u00a0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000\ufeff"
)

# Note: each predicate must reject "" explicitly, because '' in "abc" is
# True in Python and "" is what _peek() returns at end of input.

def is_whitespace(char: str) -> bool:
    """True for characters in the WHITESPACE set."""
    return char in WHITESPACE


def is_digit(char: str) -> bool:
    """True for ASCII decimal digits only."""
    return char != "" and char in string.digits


def is_letter(char: str) -> bool:
    """True for ASCII letters, either case."""
    return char != "" and char in string.ascii_letters


Matcher = Union[str, Callable[[str], bool]]


# =============================================================================
# Lexer Implementation
# =============================================================================

class Lexer:
    """
    Tokenizes a version-range expression.

    The scan state is held on the instance: the source text, a
    forward-only cursor, and a buffer of characters consumed for the
    token being built. Each call to tokenize() starts from a fresh state.

    Usage:
        lexer = Lexer(">=1.2.3 <2")
        tokens = lexer.tokenize()

    Attributes:
        source: The expression being tokenized
        config: Rendering settings passed on to raised errors
    """

    def __init__(self, source: str, config: Optional[DiagnosticConfig] = None):
        self.source = source
        self.config = config

        self._pos = 0
        self._buffer = ""
        self._tokens: list[Token] = []

    @property
    def position(self) -> int:
        """Current cursor position."""
        return self._pos

    @property
    def buffer(self) -> str:
        """Characters consumed for the token in progress."""
        return self._buffer

    def reset(self) -> None:
        """Rewind to the start of the source and drop any scanned tokens."""
        self._pos = 0
        self._buffer = ""
        self._tokens = []

    def tokenize(self) -> list[Token]:
        """
        Tokenize the whole source.

        Returns:
            Tokens in left-to-right order

        Raises:
            UnexpectedCharacterError: On the first character no rule accepts
        """
        self.reset()
        logger.debug(f"Tokenizing {self.source!r}")

        while not self._at_end():
            self.step()

        logger.debug(f"Produced {len(self._tokens)} tokens")
        return list(self._tokens)

    # =========================================================================
    # Character Access Methods
    # =========================================================================

    def _at_end(self) -> bool:
        """Check if the cursor is past the last character."""
        return self._pos >= len(self.source)

    def _peek(self) -> str:
        """Current character, or empty string at end of input."""
        if self._at_end():
            return ""
        return self.source[self._pos]

    def _advance(self) -> None:
        """Move the cursor forward by one character without consuming."""
        self._pos += 1

    def _check(self, matcher: Matcher) -> bool:
        """Test the current character against a literal or a predicate."""
        char = self._peek()
        if isinstance(matcher, str):
            return char == matcher
        return matcher(char)

    def _eat(self, matcher: Matcher) -> bool:
        """
        Consume the current character into the buffer if it matches.

        Returns:
            True if the character matched and was consumed
        """
        if self._check(matcher):
            self._buffer += self._peek()
            self._advance()
            return True
        return False

    # =========================================================================
    # Token Creation
    # =========================================================================

    def _push(self, kind: TokenKind) -> Token:
        """Emit the buffer as a token ending at the cursor, then clear it."""
        token = Token(kind=kind, pos=self._pos, value=self._buffer)
        self._tokens.append(token)
        self._buffer = ""
        return token

    def _error(self) -> LexError:
        """Create an error pointing at the current, unconsumed character."""
        logger.debug(f"Unexpected character {self._peek()!r} at column {self._pos}")
        return UnexpectedCharacterError(self.source, self._pos, self.config)

    # =========================================================================
    # Token Scanning
    # =========================================================================

    def step(self) -> Optional[Token]:
        """
        Run one iteration of the scan loop.

        Returns:
            The emitted token, or None if whitespace was skipped or the
            cursor is already at the end

        Raises:
            UnexpectedCharacterError: If no rule matches the current character
        """
        if self._at_end():
            return None

        # Whitespace is skipped without touching the buffer
        if self._check(is_whitespace):
            self._advance()
            return None

        if self._eat("."):
            return self._push(TokenKind.DOT)
        if self._eat("-"):
            return self._push(TokenKind.HYPHEN)
        if self._eat("^"):
            return self._push(TokenKind.CARET)
        if self._eat("~"):
            return self._push(TokenKind.TILDE)

        # | or ||, never more than two
        if self._eat("|"):
            self._eat("|")
            return self._push(TokenKind.EITHER)

        # > >= < <=
        if self._eat(">") or self._eat("<"):
            self._eat("=")
            return self._push(TokenKind.OPERATOR)

        if self._eat(is_digit):
            while self._eat(is_digit):
                pass
            return self._push(TokenKind.NUMBER)

        if self._eat(is_letter):
            while self._eat(is_letter):
                pass
            return self._push(TokenKind.NAME)

        raise self._error()


# =============================================================================
# Result Type
# =============================================================================

@dataclass(frozen=True)
class LexResult:
    """
    Outcome of tokenize(): either the full token sequence or one error.

    A failed result never carries partial tokens.

    Attributes:
        tokens: The tokens on success, empty tuple on failure
        error: The LexError on failure, None on success
    """
    tokens: tuple[Token, ...] = ()
    error: Optional[LexError] = None

    @property
    def ok(self) -> bool:
        """True if tokenization succeeded."""
        return self.error is None

    def unwrap(self) -> list[Token]:
        """
        Return the tokens, or raise the carried error.

        Raises:
            LexError: If this result is a failure
        """
        if self.error is not None:
            raise self.error
        return list(self.tokens)


# =============================================================================
# Convenience Functions
# =============================================================================

def tokenize(source: str, config: Optional[DiagnosticConfig] = None) -> LexResult:
    """
    Tokenize a range expression without raising.

    Args:
        source: The range expression
        config: Rendering settings for the error, if one occurs

    Returns:
        A LexResult holding either the tokens or the error
    """
    try:
        tokens = Lexer(source, config).tokenize()
    except LexError as e:
        return LexResult(error=e)
    return LexResult(tokens=tuple(tokens))


def lex(source: str, config: Optional[DiagnosticConfig] = None) -> list[Token]:
    """
    Tokenize a range expression, raising on failure.

    Raises:
        UnexpectedCharacterError: On the first character no rule accepts
    """
    return Lexer(source, config).tokenize()
