"""Items: consumable pawns that raise the hero's health, mana and score."""

from .interactable import Interactable


class Item(Interactable):
    """A helpful consumable.

    A mode is false when its bonus is an absolute amount and true when it is
    a percentage of the maximum.
    """

    def __init__(
        self,
        foreground,
        character,
        name,
        health_bonus,
        health_mode,
        mana_bonus,
        mana_mode,
        score_bonus,
    ):
        super().__init__(name, character, foreground)
        if health_bonus < 0:
            raise ValueError("health bonus must be non-negative")
        if health_mode and health_bonus > 100:
            raise ValueError("health bonus cannot be > 100%")
        if mana_bonus < 0:
            raise ValueError("mana bonus must be non-negative")
        if mana_mode and mana_bonus > 100:
            raise ValueError("mana bonus cannot be > 100%")
        if score_bonus < 0:
            raise ValueError("score bonus must be non-negative")
        self._health_bonus = health_bonus
        self._health_mode = bool(health_mode)
        self._mana_bonus = mana_bonus
        self._mana_mode = bool(mana_mode)
        self._score_bonus = score_bonus

    @property
    def health_bonus(self):
        return self._health_bonus

    @property
    def health_mode(self):
        return self._health_mode

    @property
    def mana_bonus(self):
        return self._mana_bonus

    @property
    def mana_mode(self):
        return self._mana_mode

    @property
    def score_bonus(self):
        return self._score_bonus

    @staticmethod
    def _bonus(amount, percentage, maximum):
        return maximum * amount // 100 if percentage else amount

    def _unchecked_health_effect(self, current_health, max_health):
        bonus = self._bonus(self._health_bonus, self._health_mode, max_health)
        return min(max_health, current_health + bonus)

    def _unchecked_mana_effect(self, current_mana, max_mana):
        bonus = self._bonus(self._mana_bonus, self._mana_mode, max_mana)
        return min(max_mana, current_mana + bonus)

    def _unchecked_score_effect(self, current_score):
        return current_score + self._score_bonus

    @classmethod
    def read(cls, reader):
        """Read colour, character, name and the bonuses with their modes."""
        foreground = reader.read_int()
        reader.ignore()
        character = reader.read_char()
        reader.ignore()
        name = reader.read_field()
        health_bonus = reader.read_int()
        reader.ignore()
        health_mode = reader.read_bool()
        reader.ignore()
        mana_bonus = reader.read_int()
        reader.ignore()
        mana_mode = reader.read_bool()
        reader.ignore()
        score_bonus = reader.read_int()
        item = cls(
            foreground,
            character,
            name,
            health_bonus,
            health_mode,
            mana_bonus,
            mana_mode,
            score_bonus,
        )
        reader.ignore()
        return item