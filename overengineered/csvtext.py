"""Reading and writing the loose, comma-separated text the game data is kept in."""

import re

SEPARATOR = ","
NEWRECORD = "\n"
ESCAPE = "\\"

# Colour code used where a cell or tile has no colour of its own.
TRANSPARENT = -1

_INT = re.compile(r"\s*([+-]?[0-9]+)")
_SPACE = re.compile(r"\s*")


class Reader:
    """A cursor over text that hands out the values data files are built from.

    Reading past the end raises ``EOFError``; text that does not hold the
    expected value raises ``ValueError``.
    """

    def __init__(self, text):
        self._text = text
        self._pos = 0

    def __repr__(self):
        return f"Reader(position={self._pos}, length={len(self._text)})"

    def at_end(self):
        """Return True when no characters are left."""
        return self._pos >= len(self._text)

    def _skip_space(self):
        self._pos = _SPACE.match(self._text, self._pos).end()

    def read_int(self):
        """Skip whitespace and read a signed decimal integer."""
        match = _INT.match(self._text, self._pos)
        if match is None:
            self._skip_space()
            if self.at_end():
                raise EOFError("expected an integer, found the end of the input")
            raise ValueError(f"expected an integer at offset {self._pos}")
        self._pos = match.end()
        return int(match.group(1))

    def read_char(self):
        """Skip whitespace and read a single character."""
        self._skip_space()
        if self.at_end():
            raise EOFError("expected a character, found the end of the input")
        char = self._text[self._pos]
        self._pos += 1
        return char

    def read_bool(self):
        """Read a boolean written as 0 or 1."""
        value = self.read_int()
        if value not in (0, 1):
            raise ValueError(f"expected 0 or 1, found {value}")
        return bool(value)

    def read_field(self):
        """Read a text field up to and including its separator or newline.

        An escape character makes the following character literal; an escape
        at the very end of the input is dropped.
        """
        if self.at_end():
            raise EOFError("expected a field, found the end of the input")
        chars = []
        while not self.at_end():
            char = self._text[self._pos]
            self._pos += 1
            if char in (SEPARATOR, NEWRECORD):
                break
            if char == ESCAPE:
                if self.at_end():
                    break
                char = self._text[self._pos]
                self._pos += 1
            chars.append(char)
        return "".join(chars)

    def ignore(self):
        """Skip a single character, if there is one."""
        if not self.at_end():
            self._pos += 1


def escape_field(text):
    """Return text with separators and newlines escaped for writing as a field."""
    return "".join(
        ESCAPE + char if char in (SEPARATOR, NEWRECORD) else char for char in text
    )