"""
semrange Command-Line Interface
===============================

This package provides the command-line tool for semrange:

- **semlex**: Tokenize version-range expressions and print tokens or
  position-annotated diagnostics

The tool is implemented as a Click-based CLI application.
"""

__all__ = ["semlex"]
