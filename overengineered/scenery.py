"""Sceneries: the characters and colours a piece of the world is drawn with."""

from dataclasses import dataclass, field

# Tile characters of an Autotile, one tuple per line of its text form.
_TILE_LINES = (
    ("singlet",),
    ("concave_top_left", "concave_top_right"),
    ("concave_bottom_left", "concave_bottom_right"),
    ("top_left", "top", "top_right"),
    ("left", "center", "right"),
    ("bottom_left", "bottom", "bottom_right"),
)


@dataclass
class Autotile:
    """A set of tiles that can be arranged automatically into any shape."""

    singlet: str
    concave_top_left: str
    concave_top_right: str
    concave_bottom_left: str
    concave_bottom_right: str
    top_left: str
    top: str
    top_right: str
    left: str
    center: str
    right: str
    bottom_left: str
    bottom: str
    bottom_right: str
    foreground: int
    background: int

    @classmethod
    def read(cls, reader):
        """Read six lines of tile characters, then foreground and background."""
        tiles = {}
        for names in _TILE_LINES:
            for name in names:
                tiles[name] = reader.read_char()
            reader.ignore()
        foreground = reader.read_int()
        reader.ignore()
        background = reader.read_int()
        reader.ignore()
        return cls(**tiles, foreground=foreground, background=background)


@dataclass
class Scenery:
    """Ground and platform tiles plus one or more sky colours."""

    ground: Autotile
    platform: Autotile
    sky: list = field(default_factory=list)

    @classmethod
    def read(cls, reader):
        """Read the ground and platform tiles, then a count and sky colours."""
        ground = Autotile.read(reader)
        platform = Autotile.read(reader)
        count = reader.read_int()
        reader.ignore()
        if count < 0:
            raise ValueError("the number of sky colours cannot be negative")
        sky = []
        for _ in range(count):
            sky.append(reader.read_int())
            reader.ignore()
        return cls(ground, platform, sky)