# overengineered

The data layer of a terminal side-scrolling platformer. It loads the game
objects (user settings, map chunks, sceneries, heroes with their mugshots,
enemies, items and the high-score table) from a small set of CSV and
plain-text files, and writes user settings and high scores back.

## Installing

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## Modules

- `overengineered.csvtext`: `Reader`, a cursor over text with `read_int`,
  `read_char`, `read_bool`, `read_field`, `ignore` and `at_end`, and
  `escape_field` for writing text fields.
- `overengineered.setting`: `Setting`, a labelled arithmetic range of values
  (`start`, `start + stride`, ...) with a default and a current index.
- `overengineered.map_chunk`: `MapUnit` and `MapChunk`, a grid 24 rows high
  of map units.
- `overengineered.mugshot`: `Mugshot`, a 12 by 24 grid of colour codes.
- `overengineered.scenery`: `Autotile` and `Scenery`.
- `overengineered.pawns`: `Pawn`, `Interactable`, `Projectile`, `Skill`,
  `Character`, `Enemy` (with the `Behavior` flags), `Item`, `Hero` and
  `Result`, each in a module of the same name in lower case.
- `overengineered.database`: `Database`, which loads and saves everything.

Colours are kept as integer codes; `csvtext.TRANSPARENT` (-1) stands for
no colour.

## Asset layout

A `Database` is built from three paths:

- a configuration file holding the user's current setting values,
- an assets folder,
- a scoreboard file holding previous results.

Inside the assets folder it reads:

| File                | Contents                          |
|---------------------|-----------------------------------|
| `csv/settings.csv`  | game settings                     |
| `img/maps.txt`      | map chunks                        |
| `img/sceneries.txt` | sceneries (autotiles and sky)     |
| `csv/heroes.csv`    | playable heroes                   |
| `img/heroes.txt`    | one mugshot per hero, in order    |
| `csv/enemies.csv`   | enemy species                     |
| `csv/items.csv`     | item species                      |

A missing file reads as empty. If `img/heroes.txt` holds fewer mugshots than
there are heroes, loading raises `ValueError`.

CSV fields are separated by `,`, records by a newline, and a backslash
escapes either of them inside a text field. Some record shapes:

- a setting definition: `label,start,size,stride,default_index`
- a configuration record: `label,current_index`
- a scoreboard record: `name,score,foreground,character`
- an item: `foreground,character,name,health_bonus,health_mode,mana_bonus,mana_mode,score_bonus`

A map chunk is a line with its width followed by 24 lines of unit
characters (`.` nothing, `#` ground, `=` platform, `!` enemy, `$` item).

## Using it

```python
from overengineered.database import Database

db = Database("overengineered.conf.csv", "assets", "scoreboard.csv")

sounds = db.settings[0]
sounds.set(0)              # choose the first possible value
db.save_settings()

print(db.audio_path("main_menu"))   # assets/sounds/main_menu.wav
```

The loaded objects are plain lists on the database: `settings`,
`map_chunks`, `sceneries`, `results`, `heroes`, `enemies` and `items`.
`save_results` writes `results` back to the scoreboard file.

Individual records can also be parsed on their own:

```python
from overengineered.csvtext import Reader
from overengineered.pawns.item import Item

item = Item.read(Reader("9,m,Mushroom,2,0,0,0,50\n"))
```

A `Hero` changes its health, mana and score through `interact` with an
enemy, item, projectile or skill, gains mana and points with `award`, and
spends full mana with `attempt_super_skill`. `Result.from_hero` records a
finished game; results compare with each other and with integers by score.

## What it does not do

This package holds and validates game data only. It has no game loop, no
terminal screen or input handling, no physics or enemy AI, and no audio
playback: `audio_path` only builds a file path. There is no command to run.