"""
semrange - Diagnostic Rendering
===============================

Turns the data carried by a lexer error (input, column, reason) into text.
The lexer only records *which* column failed; this module decides how that
column is shown.

Styles
------
| Style | Output                                                  |
|-------|---------------------------------------------------------|
| plain | three-line block, input reproduced verbatim              |
| color | same block, offending character and marker in bold red   |
| json  | single JSON object with kind, reason, char, column, input|

Plain layout:

    Unexpected character "!" @ 3:
      1.2!.3
         ^

The caret line is the indent followed by exactly `column` spaces, so the
marker sits under the offending character in a fixed-width font.
"""

from typing import Any, Callable, Optional
import json

import click

from semrange.config import DiagnosticConfig


STYLES = ("plain", "color", "json")

# Emphasis applied to the offending character and the marker
_EMPHASIS = {"fg": "red", "bold": True}


def _char_at(text: str, column: int) -> str:
    return text[column] if 0 <= column < len(text) else ""


def _plain(text: str) -> str:
    return text


def _red(text: str) -> str:
    return click.style(text, **_EMPHASIS)


def highlight(
    text: str,
    column: int,
    emphasize: Callable[[str], str] = _red,
) -> str:
    """
    Return `text` with the character at `column` passed through `emphasize`.

    All other characters are reproduced verbatim. A column outside the
    string leaves the text unchanged.
    """
    char = _char_at(text, column)
    if not char:
        return text
    return text[:column] + emphasize(char) + text[column + 1:]


def _render_block(
    text: str,
    column: int,
    reason: str,
    config: DiagnosticConfig,
    emphasize: Callable[[str], str],
) -> str:
    header = f'{reason} "{_char_at(text, column)}" @ {column}:'
    source = config.indent + highlight(text, column, emphasize)
    pointer = config.indent + " " * column + emphasize(config.marker)
    return "\n".join([header, source, pointer])


def render_plain(
    text: str,
    column: int,
    reason: str,
    config: Optional[DiagnosticConfig] = None,
) -> str:
    """Render an unstyled three-line diagnostic."""
    return _render_block(text, column, reason, config or DiagnosticConfig(), _plain)


def render_color(
    text: str,
    column: int,
    reason: str,
    config: Optional[DiagnosticConfig] = None,
) -> str:
    """
    Render a three-line diagnostic with ANSI emphasis.

    `click.unstyle()` of the result equals `render_plain()` for the same
    arguments.
    """
    return _render_block(text, column, reason, config or DiagnosticConfig(), _red)


def error_fields(
    text: str,
    column: int,
    reason: str,
    kind: str = "UnexpectedCharacter",
) -> dict[str, Any]:
    """Structured fields describing a lexer failure."""
    return {
        "kind": kind,
        "reason": reason,
        "char": _char_at(text, column),
        "column": column,
        "input": text,
    }


def render_json(
    text: str,
    column: int,
    reason: str,
    kind: str = "UnexpectedCharacter",
) -> str:
    """Render the failure as a JSON object."""
    return json.dumps(error_fields(text, column, reason, kind))


def render(
    text: str,
    column: int,
    reason: str,
    style: str = "plain",
    config: Optional[DiagnosticConfig] = None,
    kind: str = "UnexpectedCharacter",
) -> str:
    """
    Render a diagnostic in the requested style.

    Args:
        text: The original input
        column: 0-based column of the offending character
        reason: Human-readable reason
        style: One of "plain", "color", "json"
        config: Indent/marker settings (defaults used when omitted)
        kind: Error kind name, used by the JSON style

    Raises:
        ValueError: If the style is unknown
    """
    if style == "plain":
        return render_plain(text, column, reason, config)
    if style == "color":
        return render_color(text, column, reason, config)
    if style == "json":
        return render_json(text, column, reason, kind)
    raise ValueError(f"unknown diagnostic style {style!r} (expected one of {', '.join(STYLES)})")
