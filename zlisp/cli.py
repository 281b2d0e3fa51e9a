"""Command that lexes a zlisp file and prints its tokens."""

from __future__ import annotations

import sys

from zlisp.lexer import Lexer
from zlisp.token import TokenType


def main(argv=None) -> int:
    """Print a file's name, contents and tokens; return the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print("USAGE: zlisp [FILENAME]")
        return 1

    file_name = args[0]
    try:
        lexer = Lexer.from_file(file_name)
    except (OSError, UnicodeDecodeError):
        print(f"ERR: Failed to open file: {file_name}", file=sys.stderr)
        print("ERR: Failed to initialize lexer!", file=sys.stderr)
        return 1

    print(f"File Name: {lexer.file_name}")
    print(f"Contents: {lexer.contents}", end="")
    try:
        while lexer.has_content():
            tok = lexer.next_token()
            print(tok)
            if tok.type is TokenType.UNINITIALIZED:
                break
    except ValueError as exc:
        print(f"ERR: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())