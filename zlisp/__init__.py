"""Lexer, tokens and small data structures for a Lisp dialect."""

__version__ = "0.1.0"
__all__ = ["__version__"]