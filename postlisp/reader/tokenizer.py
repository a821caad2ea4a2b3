"""Scanner: raw characters -> ordered list of string tokens.

- `;` starts a comment running to (and including) the end of the line
- `(` and `)` are always tokens of their own
- whitespace separates tokens and is discarded
- any other maximal run of characters is one token
"""

from __future__ import annotations

from typing import Iterator, TextIO

LPAREN = "("
RPAREN = ")"
COMMENT = ";"


def _chars(source: str | TextIO) -> Iterator[str]:
    if isinstance(source, str):
        yield from source
        return
    for chunk in iter(lambda: source.read(4096), ""):
        yield from chunk


def lex(source: str | TextIO) -> Iterator[str]:
    """Token generator over a string or a readable text stream."""
    current: list[str] = []
    in_comment = False

    for ch in _chars(source):
        if in_comment:
            if ch == "\n":
                in_comment = False
            continue

        if ch == COMMENT:
            if current:
                yield "".join(current)
                current.clear()
            in_comment = True
            continue

        if ch == LPAREN or ch == RPAREN:
            if current:
                yield "".join(current)
                current.clear()
            yield ch
            continue

        if ch.isspace():
            if current:
                yield "".join(current)
                current.clear()
            continue

        current.append(ch)

    if current:
        yield "".join(current)


def tokenize(source: str | TextIO) -> list[str]:
    return list(lex(source))
