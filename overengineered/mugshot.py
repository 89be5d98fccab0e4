"""Mugshots: detailed pictures of heroes as grids of colour codes."""

from .csvtext import TRANSPARENT


class Mugshot:
    """A HEIGHT by WIDTH grid of colour codes, transparent by default."""

    WIDTH = 24
    HEIGHT = 12

    def __init__(self):
        self._rows = [[TRANSPARENT] * self.WIDTH for _ in range(self.HEIGHT)]

    def __repr__(self):
        return f"Mugshot({self.HEIGHT}x{self.WIDTH})"

    def __eq__(self, other):
        if not isinstance(other, Mugshot):
            return NotImplemented
        return self._rows == other._rows

    def __getitem__(self, row):
        return self._rows[row]

    def __iter__(self):
        return iter(self._rows)

    def fill_from(self, reader):
        """Read one colour code per cell, row by row."""
        for row in self._rows:
            for column in range(self.WIDTH):
                row[column] = reader.read_int()
        return self