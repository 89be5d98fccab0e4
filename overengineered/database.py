"""The collection of every game object, loaded from and saved to text files."""

import os

from .csvtext import NEWRECORD, SEPARATOR, Reader, escape_field
from .map_chunk import MapChunk
from .pawns.enemy import Enemy
from .pawns.hero import Hero
from .pawns.item import Item
from .pawns.result import Result
from .scenery import Scenery
from .setting import Setting

# Locations of the resources, relative to the assets folder.
SETTINGS_PATH = "/csv/settings.csv"
MAPS_PATH = "/img/maps.txt"
SCENERIES_PATH = "/img/sceneries.txt"
HEROES_PATH = "/csv/heroes.csv"
MUGSHOTS_PATH = "/img/heroes.txt"
ENEMIES_PATH = "/csv/enemies.csv"
ITEMS_PATH = "/csv/items.csv"
AUDIO_PATH = "/sounds/"
AUDIO_EXTENSION = ".wav"


def _open_reader(path):
    """Return a Reader over a file's text; a missing file reads as empty."""
    try:
        with open(path, encoding="utf-8") as stream:
            return Reader(stream.read())
    except FileNotFoundError:
        return Reader("")


def _read_all(reader, read):
    """Read records until the input runs out; an incomplete last record is dropped."""
    records = []
    while not reader.at_end():
        try:
            records.append(read(reader))
        except EOFError:
            break
    return records


def _read_result(reader):
    name = reader.read_field()
    score = reader.read_int()
    reader.ignore()
    foreground = reader.read_int()
    reader.ignore()
    character = reader.read_char()
    reader.ignore()
    return Result(name, character, foreground, score)


class Database:
    """Every game object, loaded from the assets folder and the user's files.

    ``configuration`` is the user's settings file, ``assets`` the main assets
    folder and ``scoreboard`` the file of previous high scores.
    """

    def __init__(self, configuration, assets, scoreboard):
        self._configuration = os.fspath(configuration)
        self._assets = os.fspath(assets)
        self._scoreboard = os.fspath(scoreboard)
        self.settings = self._load_settings()
        self.map_chunks = _read_all(self._asset_reader(MAPS_PATH), MapChunk.read)
        self.sceneries = _read_all(self._asset_reader(SCENERIES_PATH), Scenery.read)
        self.results = _read_all(_open_reader(self._scoreboard), _read_result)
        self.heroes = _read_all(self._asset_reader(HEROES_PATH), Hero.read)
        self._load_mugshots()
        self.enemies = _read_all(self._asset_reader(ENEMIES_PATH), Enemy.read)
        self.items = _read_all(self._asset_reader(ITEMS_PATH), Item.read)

    def __repr__(self):
        return (
            f"Database(configuration={self._configuration!r}, "
            f"assets={self._assets!r}, scoreboard={self._scoreboard!r})"
        )

    def _asset_reader(self, relative_path):
        return _open_reader(self._assets + relative_path)

    def _load_settings(self):
        settings = _read_all(self._asset_reader(SETTINGS_PATH), Setting.read)
        reader = _open_reader(self._configuration)
        while not reader.at_end():
            try:
                key = reader.read_field()
                value = reader.read_int()
            except EOFError:
                break
            reader.ignore()
            for setting in settings:
                if setting.label == key:
                    setting.set(value)
                    break
        return settings

    def _load_mugshots(self):
        reader = self._asset_reader(MUGSHOTS_PATH)
        for hero in self.heroes:
            try:
                hero.mugshot.fill_from(reader)
            except EOFError as error:
                raise ValueError("not enough mugshots") from error

    def save_settings(self):
        """Write the current value of every setting to the configuration file."""
        with open(self._configuration, "w", encoding="utf-8", newline="") as stream:
            for setting in self.settings:
                stream.write(setting.to_csv() + NEWRECORD)

    def save_results(self):
        """Write the high scores to the scoreboard file."""
        with open(self._scoreboard, "w", encoding="utf-8", newline="") as stream:
            for result in self.results:
                fields = (
                    escape_field(result.name),
                    str(result.score),
                    str(result.foreground),
                    result.character,
                )
                stream.write(SEPARATOR.join(fields) + NEWRECORD)

    def audio_path(self, audio_filename):
        """Return the path of a sound, given its name without folder or extension."""
        return self._assets + AUDIO_PATH + audio_filename + AUDIO_EXTENSION