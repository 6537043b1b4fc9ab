"""
semlex - Version Range Tokenizer Command-Line Interface
=======================================================

This module implements the command-line interface for the range lexer.
It prints the tokens of each expression, or a diagnostic pointing at the
first character the lexer rejects.

Usage Examples
--------------
Tokenize one expression:
    $ semlex ">=1.2.3 <3.4.2 || ^1.0.0-beta.2"

Several expressions, JSON Lines output:
    $ semlex -f json "^1.0.0" "~2.1"

Read expressions from stdin, one per line:
    $ cat ranges.txt | semlex -

Exit Codes
----------
0 - All expressions tokenized
1 - At least one expression was rejected
2 - Invalid arguments or unreadable input
3 - Internal error
"""

import json
import logging
import sys
from typing import Iterable, Optional

import click

from semrange import __version__
from semrange.cli.errors import ExitCode, handle_cli_exception
from semrange.config import OUTPUT_FORMATS, DiagnosticConfig
from semrange.lexer import LexResult, tokenize

logger = logging.getLogger(__name__)


# =============================================================================
# CLI Context and Utilities
# =============================================================================

class Context:
    """
    Shared settings for a semlex run.

    Starts from DiagnosticConfig.from_env(); command-line flags override.
    """

    def __init__(self) -> None:
        self.config: DiagnosticConfig = DiagnosticConfig.from_env()
        self.verbose: bool = False

    @property
    def output_format(self) -> str:
        return self.config.output_format

    @property
    def color(self) -> Optional[bool]:
        return self.config.color

    def setup_logging(self) -> None:
        """Configure logging based on verbosity."""
        level = logging.DEBUG if self.verbose else logging.WARNING
        logging.basicConfig(
            level=level,
            format="%(levelname)s: %(message)s" if self.verbose else "%(message)s",
        )


pass_context = click.make_pass_decorator(Context, ensure=True)


def read_expressions(stream) -> Iterable[str]:
    """Yield one expression per input line, without the line terminator."""
    for line in stream:
        yield line.rstrip("\r\n")


def format_tokens(result: LexResult) -> str:
    """One token per line: KIND value @pos."""
    return "\n".join(
        f"{token.kind.name} {token.value} @{token.pos}" for token in result.tokens
    )


def format_json(expression: str, result: LexResult) -> str:
    """One JSON object describing the outcome for an expression."""
    if result.error is not None:
        document = {"input": expression, "error": result.error.to_dict()}
    else:
        document = {
            "input": expression,
            "tokens": [token.to_dict() for token in result.tokens],
        }
    return json.dumps(document)


def emit(ctx: Context, expression: str, result: LexResult, separate: bool) -> bool:
    """
    Print the outcome for one expression in the configured format.

    In text mode a blank line precedes the tokens when `separate` is set.

    Returns:
        True if tokens were written to stdout
    """
    if ctx.output_format == "json":
        click.echo(format_json(expression, result))
        return True

    if result.error is not None:
        # Styled text is stripped by click.echo when color is off or stderr
        # is not a terminal
        style = "plain" if ctx.color is False else "color"
        click.echo(result.error.render(style), err=True, color=ctx.color)
        return False

    if not result.tokens:
        return False
    if separate:
        click.echo()
    click.echo(format_tokens(result))
    return True


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument("expressions", nargs=-1)
@click.option(
    "-f", "--format", "output_format",
    type=click.Choice(OUTPUT_FORMATS, case_sensitive=False),
    default=None,
    help="Output format (default: text, or $SEMRANGE_FORMAT)",
)
@click.option(
    "--color/--no-color",
    default=None,
    help="Colorize diagnostics (default: auto-detect terminal)",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="semlex")
@pass_context
def main(
    ctx: Context,
    expressions: tuple[str, ...],
    output_format: Optional[str],
    color: Optional[bool],
    verbose: bool,
) -> None:
    """
    Tokenize semantic-version range expressions.

    EXPRESSIONS are range expressions such as ">=1.2.3 <2.0.0". With no
    expressions, or with "-", expressions are read from stdin, one per
    line.

    \b
    Examples:
        semlex "^1.0.0"                  # Print tokens
        semlex -f json "~1.2 || >=3"     # JSON Lines output
        semlex --no-color "1.2!.3"       # Plain diagnostic
    """
    if output_format is not None:
        ctx.config.output_format = output_format.lower()
    if color is not None:
        ctx.config.color = color
    ctx.verbose = verbose
    ctx.setup_logging()

    failures = 0
    printed = False
    try:
        if not expressions or expressions == ("-",):
            source = read_expressions(sys.stdin)
        else:
            source = iter(expressions)

        for expression in source:
            result = tokenize(expression, ctx.config)
            if not result.ok:
                failures += 1
            printed = emit(ctx, expression, result, separate=printed) or printed

        logger.debug(f"{failures} expression(s) rejected")
    except Exception as e:
        handle_cli_exception(e, verbose=verbose)

    if failures:
        sys.exit(ExitCode.LEX_ERROR)


if __name__ == "__main__":
    main()
