"""Results: the outcome of a single game, compared by score."""

from functools import total_ordering

from ..csvtext import TRANSPARENT
from .pawn import Pawn


@total_ordering
class Result(Pawn):
    """A player's name, the look of the hero they used and a non-negative score.

    Results compare and convert like their scores.
    """

    def __init__(self, name="???", character=" ", foreground=TRANSPARENT, score=0):
        super().__init__(name, character, foreground)
        if score < 0:
            raise ValueError("score cannot be negative")
        self._score = score

    @property
    def score(self):
        return self._score

    @classmethod
    def from_hero(cls, hero):
        """Record the final state of a hero."""
        return cls(hero.name, hero.character, hero.foreground, hero.score)

    def __repr__(self):
        return (
            f"Result({self.name!r}, character={self.character!r}, "
            f"foreground={self.foreground}, score={self._score})"
        )

    def __int__(self):
        return self._score

    def __index__(self):
        return self._score

    def __eq__(self, other):
        if isinstance(other, (Result, int)):
            return self._score == int(other)
        return NotImplemented

    def __lt__(self, other):
        if isinstance(other, (Result, int)):
            return self._score < int(other)
        return NotImplemented

    def __hash__(self):
        return hash(self._score)