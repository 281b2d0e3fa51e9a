"""Tokens produced by the lexer."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class TokenType(enum.Enum):
    """Kinds of token the lexer can produce."""

    UNINITIALIZED = 0
    LPAREN = 1
    RPAREN = 2
    ATOM = 3
    TYPE = 4
    IDENT = 5
    STRING_LITERAL = 6
    LITERAL = 7
    KEYWORD_FN = 8


@dataclass
class Token:
    """A lexed token; ``text`` is only filled for tokens that carry text."""

    type: TokenType = TokenType.UNINITIALIZED
    text: str = ""

    def append(self, c: str) -> None:
        """Append a single character to the token text."""
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        self.text += c

    def __str__(self) -> str:
        return f"TOKEN TYPE: {self.type.name}\t\tTOKEN: {self.text}"