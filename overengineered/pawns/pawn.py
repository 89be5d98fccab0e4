"""Pawns: single-cell entities of the map that carry a name of their own."""

from ..csvtext import TRANSPARENT


class Pawn:
    """A named tile: a character drawn in a foreground colour."""

    def __init__(self, name="???", character=" ", foreground=TRANSPARENT):
        self.name = name
        self.character = character
        self.foreground = foreground

    def __repr__(self):
        return (
            f"{type(self).__name__}({self.name!r}, character={self.character!r}, "
            f"foreground={self.foreground})"
        )