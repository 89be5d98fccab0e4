import pytest

from overengineered.csvtext import Reader
from overengineered.map_chunk import MapChunk, MapUnit


def test_constructs_a_map():
    m = MapChunk(2, MapUnit.GROUND)
    assert all(cell is MapUnit.GROUND for row in m for cell in row)
    assert sum(len(row) for row in m) == 2 * MapChunk.HEIGHT


def test_returns_the_right_width():
    assert MapChunk(33).width() == 33


def test_default_fill_is_nothing():
    m = MapChunk(4)
    assert m[0][0] is MapUnit.NOTHING
    assert m[MapChunk.HEIGHT - 1][3] is MapUnit.NOTHING


def test_height_is_fixed():
    assert MapChunk.HEIGHT == 24
    assert len(list(MapChunk(1))) == MapChunk.HEIGHT


def test_units_map_from_their_characters():
    assert MapUnit("#") is MapUnit.GROUND
    assert MapUnit("=") is MapUnit.PLATFORM
    assert MapUnit("$") is MapUnit.ITEM


def test_rows_are_independent():
    m = MapChunk(3)
    m[0][1] = MapUnit.ENEMY
    assert m[0][1] is MapUnit.ENEMY
    assert m[1][1] is MapUnit.NOTHING


def _chunk_text(rows):
    return f"{len(rows[0])}\n" + "".join(row + "\n" for row in rows)


def test_reads_a_chunk():
    rows = ["..."] * (MapChunk.HEIGHT - 1) + ["#=$"]
    chunk = MapChunk.read(Reader(_chunk_text(rows)))
    assert chunk.width() == 3
    assert chunk[MapChunk.HEIGHT - 1] == [
        MapUnit.GROUND,
        MapUnit.PLATFORM,
        MapUnit.ITEM,
    ]
    assert chunk[0] == [MapUnit.NOTHING] * 3


def test_reads_consecutive_chunks():
    text = _chunk_text(["#"] * MapChunk.HEIGHT) + _chunk_text(["."] * MapChunk.HEIGHT)
    reader = Reader(text)
    first = MapChunk.read(reader)
    second = MapChunk.read(reader)
    assert first == MapChunk(1, MapUnit.GROUND)
    assert second == MapChunk(1)
    with pytest.raises(EOFError):
        MapChunk.read(reader)


def test_unknown_unit_is_rejected():
    rows = ["?"] * MapChunk.HEIGHT
    with pytest.raises(ValueError):
        MapChunk.read(Reader(_chunk_text(rows)))


def test_truncated_chunk_raises_eof():
    with pytest.raises(EOFError):
        MapChunk.read(Reader("2\n..\n"))


def test_negative_width_is_rejected():
    with pytest.raises(ValueError):
        MapChunk(-1)