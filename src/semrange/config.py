"""
semrange - Diagnostic Configuration
===================================

Settings that control how lexer diagnostics are rendered. Configuration
can come from:
- Default values (defined here)
- Environment variables (DiagnosticConfig.from_env)
- Command-line flags (the semlex tool overrides the fields it is given)

Environment variables (all optional):
    SEMRANGE_COLOR: "1", "true", "yes", "on" / "0", "false", "no", "off"
    NO_COLOR: any non-empty value disables color
    SEMRANGE_FORMAT: "text" or "json"
"""

from dataclasses import dataclass
from typing import Optional
import os


OUTPUT_FORMATS = ("text", "json")

_TRUTHY = ("1", "true", "yes", "on")
_FALSY = ("0", "false", "no", "off")


@dataclass
class DiagnosticConfig:
    """
    Rendering settings for diagnostics.

    Attributes:
        color: Force color on/off; None means auto-detect from the terminal
        indent: Prefix for the input line and the caret line
        marker: Character drawn under the offending column
        output_format: Default CLI output format ("text" or "json")
    """

    color: Optional[bool] = None
    indent: str = "  "
    marker: str = "^"
    output_format: str = "text"

    @classmethod
    def from_env(cls) -> "DiagnosticConfig":
        """
        Create a DiagnosticConfig from environment variables.

        Unrecognised values are ignored and the default is kept.
        """
        config = cls()

        if color := os.environ.get("SEMRANGE_COLOR"):
            value = color.strip().lower()
            if value in _TRUTHY:
                config.color = True
            elif value in _FALSY:
                config.color = False

        # NO_COLOR convention wins over SEMRANGE_COLOR
        if os.environ.get("NO_COLOR"):
            config.color = False

        if output_format := os.environ.get("SEMRANGE_FORMAT"):
            value = output_format.strip().lower()
            if value in OUTPUT_FORMATS:
                config.output_format = value

        return config
