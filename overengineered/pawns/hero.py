"""Heroes: the characters a player can choose and control."""

import copy

from ..mugshot import Mugshot
from .character import Character
from .skill import Skill


class Hero(Character):
    """A playable character with health and mana gauges and a super skill.

    Health starts full, mana and score start at zero.
    """

    SCORE_AWARD = 100  # points awarded per kill

    def __init__(
        self,
        foreground,
        character,
        name,
        description,
        skill,
        super_skill,
        max_health,
        max_mana,
    ):
        super().__init__(name, character, foreground, skill, True)
        if max_health <= 0:
            raise ValueError("health must be positive")
        if max_mana <= 0:
            raise ValueError("mana must be positive")
        self._description = description
        self.mugshot = Mugshot()
        self._super_skill = Skill() if super_skill is None else copy.deepcopy(super_skill)
        for projectile in self._super_skill.projectiles:
            projectile.casted_by_player = True
        self._current_health = max_health
        self._max_health = max_health
        self._current_mana = 0
        self._max_mana = max_mana
        self._score = 0

    @property
    def description(self):
        return self._description

    @property
    def super_skill(self):
        return self._super_skill

    @property
    def current_health(self):
        return self._current_health

    @property
    def max_health(self):
        return self._max_health

    @property
    def current_mana(self):
        return self._current_mana

    @property
    def max_mana(self):
        return self._max_mana

    @property
    def score(self):
        return self._score

    def rename(self, name):
        """Give the hero the player's chosen name."""
        self.name = name

    def interact(self, interactable):
        """Apply the effect of an Interactable to health, mana and score."""
        self._current_health = interactable.health_effect(
            self._current_health, self._max_health
        )
        self._current_mana = interactable.mana_effect(self._current_mana, self._max_mana)
        self._score = interactable.score_effect(self._score)

    def is_dead(self):
        """Return True when health has run out and the game is over."""
        return self._current_health == 0

    def award(self):
        """Reward a kill: one point of mana, if not full, and SCORE_AWARD points."""
        if self._current_mana != self._max_mana:
            self._current_mana += 1
        self._score += self.SCORE_AWARD

    def attempt_super_skill(self):
        """If mana is full, empty it and return True; otherwise return False."""
        if self._current_mana < self._max_mana:
            return False
        self._current_mana = 0
        return True

    @classmethod
    def read(cls, reader):
        """Read colour, character, name, description, both skills, health and mana."""
        foreground = reader.read_int()
        reader.ignore()
        character = reader.read_char()
        reader.ignore()
        name = reader.read_field()
        description = reader.read_field()
        skill = Skill.read(reader)
        reader.ignore()
        super_skill = Skill.read(reader)
        reader.ignore()
        max_health = reader.read_int()
        reader.ignore()
        max_mana = reader.read_int()
        hero = cls(
            foreground,
            character,
            name,
            description,
            skill,
            super_skill,
            max_health,
            max_mana,
        )
        reader.ignore()
        return hero