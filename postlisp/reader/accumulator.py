from __future__ import annotations

from typing import Optional

from postlisp.reader.tokenizer import LPAREN, RPAREN, COMMENT


def _scan(text: str) -> tuple[int, bool, bool]:
    """Return (depth, went_negative, has_code) for text, skipping comments."""
    depth = 0
    negative = False
    has_code = False
    in_comment = False
    for ch in text:
        if in_comment:
            if ch == "\n":
                in_comment = False
            continue
        if ch == COMMENT:
            in_comment = True
            continue
        if not ch.isspace():
            has_code = True
        if ch == LPAREN:
            depth += 1
        elif ch == RPAREN:
            depth -= 1
            if depth < 0:
                negative = True
    return depth, negative, has_code


class InputAccumulator:
    """
    Collects lines of interactive input until they form a complete entry.
    Owned by the caller; holds no state outside the instance.
    """

    def __init__(self):
        self._lines: list[str] = []

    @property
    def pending(self) -> bool:
        return bool(self._lines)

    def clear(self) -> None:
        self._lines.clear()

    def feed(self, line: str) -> Optional[str]:
        """Append a line; return the complete entry once its parentheses balance."""
        self._lines.append(line.rstrip("\n"))
        text = "\n".join(self._lines)
        depth, negative, has_code = _scan(text)
        if not has_code:
            self._lines.clear()
            return None
        if depth > 0 and not negative:
            return None
        # balanced, or a stray ')' that the parser will reject
        self._lines.clear()
        return text

    def flush(self) -> Optional[str]:
        """Release whatever is buffered (e.g. at end of input)."""
        if not self._lines:
            return None
        text = "\n".join(self._lines)
        self._lines.clear()
        _, _, has_code = _scan(text)
        return text if has_code else None
