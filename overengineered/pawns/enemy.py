"""Enemies: hostile characters that hurt the hero on contact."""

from enum import IntFlag

from .character import Character
from .interactable import Interactable
from .skill import Skill


class Behavior(IntFlag):
    """Bitmask of the ways an enemy can act."""

    NONE = 0
    WALKING = 1
    HORIZONTAL_FLYING = 2
    VERTICAL_FLYING = 4
    ATTACKING = 8


class Enemy(Character, Interactable):
    """A hostile, AI-controlled character that damages the hero it touches."""

    def __init__(
        self,
        foreground,
        character,
        name,
        skill,
        health_damage,
        mana_damage,
        score_damage,
        behavior,
    ):
        super().__init__(name, character, foreground, skill, False)
        if health_damage < 0:
            raise ValueError("health damage must be positive")
        if mana_damage < 0:
            raise ValueError("mana damage must be positive")
        if score_damage < 0:
            raise ValueError("score damage must be positive")
        self._health_damage = health_damage
        self._mana_damage = mana_damage
        self._score_damage = score_damage
        self._behavior = int(behavior)
        self._dead = False

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
    def behavior(self):
        return self._behavior

    def is_dead(self):
        return self._dead

    def kill(self):
        self._dead = True

    def has_behavior(self, behavior):
        """Return True if this enemy shows the given behaviour."""
        return bool(self._behavior & int(behavior))

    def _unchecked_health_effect(self, current_health, max_health):
        return max(0, current_health - self._health_damage)

    def _unchecked_mana_effect(self, current_mana, max_mana):
        return max(0, current_mana - self._mana_damage)

    def _unchecked_score_effect(self, current_score):
        return max(0, current_score - self._score_damage)

    @classmethod
    def read(cls, reader):
        """Read colour, character, name, skill, the three damages and behaviour."""
        foreground = reader.read_int()
        reader.ignore()
        character = reader.read_char()
        reader.ignore()
        name = reader.read_field()
        skill = Skill.read(reader)
        reader.ignore()
        health_damage = reader.read_int()
        reader.ignore()
        mana_damage = reader.read_int()
        reader.ignore()
        score_damage = reader.read_int()
        reader.ignore()
        behavior = reader.read_int()
        enemy = cls(
            foreground,
            character,
            name,
            skill,
            health_damage,
            mana_damage,
            score_damage,
            behavior,
        )
        reader.ignore()
        return enemy