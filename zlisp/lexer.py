"""Lexer turning zlisp source text into tokens, plus parser node types."""

from __future__ import annotations

import enum
import string
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterator

from zlisp.token import Token, TokenType

_EOF = "\0"


def is_whitespace(c: str) -> bool:
    """Return True for the characters the lexer skips between tokens."""
    return c in ("\n", "\r", "\t", " ")


def is_reserved(c: str) -> bool:
    """Return True for characters that end identifiers and atoms."""
    return c in ("(", ")", ":")


def _is_alpha(c: str) -> bool:
    return c.isascii() and c.isalpha()


def _is_digit(c: str) -> bool:
    return c in string.digits


def _ends_word(c: str) -> bool:
    return not is_whitespace(c) and not is_reserved(c)


class Lexer:
    """Splits a source text into tokens one at a time."""

    def __init__(self, contents: str, file_name: str = "<string>") -> None:
        self.file_name = file_name
        self.contents = contents
        self.cursor = 0

    @classmethod
    def from_file(cls, path) -> "Lexer":
        """Create a lexer over the contents of the file at ``path``."""
        return cls(Path(path).read_text(encoding="utf-8"), str(path))

    @property
    def curr(self) -> str:
        """The character under the cursor, or NUL past the end."""
        return self.contents[self.cursor] if self.has_content() else _EOF

    def has_content(self) -> bool:
        """Return True while there are characters left to read."""
        return len(self.contents) > self.cursor

    def _consume(self) -> None:
        if not self.has_content():
            raise ValueError(
                f"{self.file_name}: unexpected end of input at offset {self.cursor}"
            )
        self.cursor += 1

    def _consume_whitespace(self) -> None:
        while self.has_content() and is_whitespace(self.curr):
            self._consume()

    def _read_while(self, tok: Token, keep_going: Callable[[str], bool]) -> Token:
        while True:
            tok.append(self.curr)
            self._consume()
            if not (self.has_content() and keep_going(self.curr)):
                return tok

    def next_token(self) -> Token:
        """Read the next token; an UNINITIALIZED token means nothing matched."""
        self._consume_whitespace()
        c = self.curr
        if c == "(":
            self._consume()
            return Token(TokenType.LPAREN)
        if c == ")":
            self._consume()
            return Token(TokenType.RPAREN)
        if c == ":":
            return self._read_while(Token(TokenType.ATOM), _ends_word)
        if _is_alpha(c):
            return self._read_while(Token(TokenType.IDENT), _ends_word)
        if _is_digit(c):
            return self._read_while(Token(TokenType.LITERAL), _is_digit)
        if c == '"':
            self._consume()
            tok = self._read_while(Token(TokenType.STRING_LITERAL), lambda ch: ch != '"')
            self._consume()
            return tok
        return Token(TokenType.UNINITIALIZED)

    def __iter__(self) -> Iterator[Token]:
        while True:
            tok = self.next_token()
            if tok.type is TokenType.UNINITIALIZED:
                return
            yield tok


class NodeType(enum.Enum):
    """Kinds of node in the parse tree."""

    FN = enum.auto()
    EXPRESSION = enum.auto()


@dataclass
class ParserNode:
    """A parse tree node tagged with its kind."""

    type: NodeType
    node: object = None


@dataclass
class Parser:
    """Holds the lexer that a parse reads its tokens from."""

    lexer: Lexer