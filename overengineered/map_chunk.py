"""Map chunks: the layout of a piece of the game world."""

from enum import Enum


class MapUnit(Enum):
    """What occupies one cell of a map chunk, keyed by its character."""

    NOTHING = "."
    GROUND = "#"
    PLATFORM = "="
    ENEMY = "!"  # drawn over nothing
    ITEM = "$"  # drawn over nothing


class MapChunk:
    """A grid of MapUnit with a fixed height and a chosen width."""

    HEIGHT = 24

    def __init__(self, width, value=MapUnit.NOTHING):
        if width < 0:
            raise ValueError("width cannot be negative")
        self._width = width
        self._rows = [[value] * width for _ in range(self.HEIGHT)]

    def __repr__(self):
        return f"MapChunk(width={self._width})"

    def __eq__(self, other):
        if not isinstance(other, MapChunk):
            return NotImplemented
        return self._rows == other._rows

    def width(self):
        """Number of columns."""
        return self._width

    def __getitem__(self, row):
        return self._rows[row]

    def __iter__(self):
        return iter(self._rows)

    @classmethod
    def read(cls, reader):
        """Read a width line followed by HEIGHT lines of unit characters."""
        width = reader.read_int()
        chunk = cls(width)
        for row in chunk:
            reader.ignore()
            for column in range(width):
                row[column] = MapUnit(reader.read_char())
        reader.ignore()
        return chunk