# zlisp

These are the early pieces of a small Lisp dialect. The package has a lexer that turns source text into tokens, and a few small data structures.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
zlisp program.zl
```

The command first prints `File Name: <name>`, then `Contents: ` followed by the file's text. After that it prints one line per token, in the form `TOKEN TYPE: <TYPE>\t\tTOKEN: <text>`. It stops after the last character. It also stops after the first `UNINITIALIZED` token, which it prints as well.

The command exits with status 1 in these cases:

- No file name is given. It prints `USAGE: zlisp [FILENAME]`.
- The file cannot be read or is not valid UTF-8.
- A string literal runs past the end of the input.

Error messages go to standard error and start with `ERR:`.

## Library use

```python
from zlisp.lexer import Lexer
from zlisp.token import TokenType

lexer = Lexer('(print "hi" :key 42)', "example.zl")
for token in lexer:
    print(token.type.name, token.text)
```

`Lexer(contents, file_name="<string>")` lexes a string. `Lexer.from_file(path)` reads a UTF-8 file and lexes its contents.

`next_token()` skips whitespace (space, tab, carriage return, newline) and returns a `Token`:

- `(` and `)` give `LPAREN` and `RPAREN`.
- `:` starts an `ATOM`. An ASCII letter starts an `IDENT`. Both run until whitespace or one of `(`, `)`, `:`.
- A digit starts a `LITERAL`. It runs over the digits that follow.
- `"` starts a `STRING_LITERAL`. The quotes are not included in its text. If the input ends before the closing quote, `ValueError` is raised.
- Any other character, and the end of input, give an `UNINITIALIZED` token.

Iterating over a `Lexer` yields tokens until the first `UNINITIALIZED` one. `has_content()` reports whether any characters are left to read. `curr` is the character under the cursor, or `"\0"` past the end.

### Tokens

`zlisp.token.Token` is a dataclass with two fields, `type` (a `TokenType`) and `text`.

- `append(c)` adds a single character to `text`. Anything else raises `ValueError`.
- `str(token)` gives the line format the command prints.

`TokenType` has these members: `UNINITIALIZED`, `LPAREN`, `RPAREN`, `ATOM`, `TYPE`, `IDENT`, `STRING_LITERAL`, `LITERAL` and `KEYWORD_FN`.

### Other modules

- `zlisp.growable.GrowableList` is an ordered list that supports `append`, `pop`, `len`, iteration and indexing.
  - Appending `None` raises `ValueError`.
  - Popping from an empty list raises `IndexError`.
- `zlisp.arena.Arena(capacity)` is a bump allocator over a fixed `bytearray`.
  - `allocate(block_size)` returns a `memoryview` of the next `block_size` bytes.
  - It raises `MemoryError` once the request would reach or pass the capacity, or after `destroy()`.
  - The arena can be used as a context manager; leaving the block calls `destroy()`.
- `zlisp.arena.Allocator` is a dataclass that groups allocation callbacks with a shared `state`.
- `zlisp.linked_list.LinkedList` is a doubly linked list of `Node` objects.
  - `push(data)` appends at the tail and returns the node.
  - The list supports iteration, `len` and indexing, including negative indexes.
  - An index out of range raises `ZlispError` with `ErrorKind.OUT_OF_BOUNDS`.

## What it does not do

zlisp does not parse or run programs. `zlisp.lexer.Parser` only holds a lexer, and `ParserNode` and `NodeType` only describe node kinds; there is no code that builds a parse tree. There is no evaluator or REPL.

The lexer never produces `TYPE` or `KEYWORD_FN` tokens.