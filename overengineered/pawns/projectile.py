"""Projectiles thrown by skills to inflict damage from a distance."""

from ..csvtext import TRANSPARENT
from .interactable import Interactable


class Projectile(Interactable):
    """A damaging pawn that travels a limited number of cells.

    ``x`` and ``y`` give the adjacent cell it spawns in, relative to its caster.
    """

    def __init__(
        self,
        foreground=TRANSPARENT,
        character=" ",
        name="",
        health_damage=0,
        mana_damage=0,
        score_damage=0,
        range_=0,
        casted_by_player=False,
        x=0,
        y=0,
    ):
        super().__init__(name, character, foreground)
        if abs(x) > 1 or abs(y) > 1:
            raise ValueError("a projectile must spawn in an adjacent cell")
        if health_damage < 0:
            raise ValueError("health damage must be positive or zero")
        if mana_damage < 0:
            raise ValueError("mana damage must be positive or zero")
        if score_damage < 0:
            raise ValueError("score damage must be positive or zero")
        if range_ < 0:
            raise ValueError("range must be positive or zero")
        self._health_damage = health_damage
        self._mana_damage = mana_damage
        self._score_damage = score_damage
        self._range = range_
        self._x = x
        self._y = y
        self.casted_by_player = casted_by_player

    @property
    def health_damage(self):
        return self._health_damage

    @property
    def mana_damage(self):
        return self._mana_damage

    @property
    def score_damage(self):
        return self._score_damage

    @property
    def range(self):
        """Cells still left to travel."""
        return self._range

    @property
    def x(self):
        return self._x

    @property
    def y(self):
        return self._y

    def count_movement(self):
        """Record that the projectile moved by one cell."""
        if self.is_expired():
            raise RuntimeError("this projectile is already expired")
        self._range -= 1

    def is_expired(self):
        return self._range == 0

    def _unchecked_health_effect(self, current_health, max_health):
        return max(0, current_health - self._health_damage)

    def _unchecked_mana_effect(self, current_mana, max_mana):
        return max(0, current_mana - self._mana_damage)

    def _unchecked_score_effect(self, current_score):
        return max(0, current_score - self._score_damage)

    @classmethod
    def read(cls, reader):
        """Read x, y, colour, character, name, the three damages and the range."""
        x = reader.read_int()
        reader.ignore()
        y = reader.read_int()
        reader.ignore()
        foreground = reader.read_int()
        reader.ignore()
        character = reader.read_char()
        reader.ignore()
        name = reader.read_field()
        health_damage = reader.read_int()
        reader.ignore()
        mana_damage = reader.read_int()
        reader.ignore()
        score_damage = reader.read_int()
        reader.ignore()
        range_ = reader.read_int()
        return cls(
            foreground,
            character,
            name,
            health_damage,
            mana_damage,
            score_damage,
            range_,
            False,
            x,
            y,
        )