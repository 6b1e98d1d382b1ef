"""Lexical scanner for SVG path data.

Walks the input string by index. Separators are comma, space, tab, CR and LF.
Numbers need no delimiter when a sign, a second decimal point or a second
exponent marks the boundary, so "1.5.5" scans as 1.5 then .5 and "10-5" as
10 then -5.
"""

from __future__ import annotations

from pathcmds.parser.errors import MalformedNumberError

_SEPARATORS = frozenset(", \t\r\n")


def is_command_letter(ch: str) -> bool:
    """True iff ``ch`` is an ASCII letter."""
    return ("A" <= ch <= "Z") or ("a" <= ch <= "z")


class PathScanner:
    """Cursor over one path data string. The cursor never moves backwards."""

    def __init__(self, text: str) -> None:
        self.text = text
        self.length = len(text)
        self._pos = 0

    @property
    def position(self) -> int:
        return self._pos

    @property
    def at_end(self) -> bool:
        return self._pos >= self.length

    def skip_separators(self) -> None:
        while self._pos < self.length and self.text[self._pos] in _SEPARATORS:
            self._pos += 1

    def at_command_boundary(self) -> bool:
        """Skip separators and report whether a command letter or the end is next."""
        self.skip_separators()
        return self.at_end or is_command_letter(self.text[self._pos])

    def read_number(self) -> float:
        self.skip_separators()
        text, n = self.text, self.length
        start = i = self._pos
        seen_dot = False
        seen_exp = False

        if i < n and text[i] in "+-":
            i += 1
        while i < n:
            ch = text[i]
            if "0" <= ch <= "9":
                i += 1
            elif ch == "." and not seen_dot:
                seen_dot = True
                i += 1
            elif ch in "eE" and not seen_exp:
                seen_exp = True
                i += 1
                if i < n and text[i] in "+-":
                    i += 1
            else:
                break

        if i == start:
            found = repr(text[start]) if start < n else "end of input"
            raise MalformedNumberError(f"number expected at {start}, found {found}", start)

        literal = text[start:i]
        try:
            value = float(literal)
        except ValueError:
            raise MalformedNumberError(
                f"malformed number {literal!r} at {start}", start
            ) from None

        self._pos = i
        return value

    def read_command(self, previous: str | None) -> str | None:
        """Return the next command letter, ``previous`` when the letter is omitted,
        or None once the input is exhausted."""
        self.skip_separators()
        if self.at_end:
            return None
        ch = self.text[self._pos]
        if is_command_letter(ch):
            self._pos += 1
            return ch
        return previous
