"""Pawns that change a hero's health, mana and score when touched."""

from .pawn import Pawn


class Interactable(Pawn):
    """A pawn whose contact with the player's hero has an effect.

    The public methods check their arguments and the outcome; subclasses
    describe the effect itself by overriding the ``_unchecked_*`` methods.
    A plain Interactable leaves every statistic unchanged.
    """

    def health_effect(self, current_health, max_health):
        """Return the hero's health after the interaction."""
        if max_health <= 0:
            raise ValueError("maximum health must be positive")
        if not 0 <= current_health <= max_health:
            raise ValueError("current health out of range")
        result = self._unchecked_health_effect(current_health, max_health)
        if not 0 <= result <= max_health:
            raise ValueError("new health is invalid")
        return result

    def mana_effect(self, current_mana, max_mana):
        """Return the hero's mana after the interaction."""
        if max_mana <= 0:
            raise ValueError("maximum mana must be positive")
        if not 0 <= current_mana <= max_mana:
            raise ValueError("current mana out of range")
        result = self._unchecked_mana_effect(current_mana, max_mana)
        if not 0 <= result <= max_mana:
            raise ValueError("new mana is invalid")
        return result

    def score_effect(self, current_score):
        """Return the hero's score after the interaction."""
        if current_score < 0:
            raise ValueError("current score cannot be negative")
        result = self._unchecked_score_effect(current_score)
        if result < 0:
            raise ValueError("new score is invalid")
        return result

    def _unchecked_health_effect(self, current_health, max_health):
        return current_health

    def _unchecked_mana_effect(self, current_mana, max_mana):
        return current_mana

    def _unchecked_score_effect(self, current_score):
        return current_score