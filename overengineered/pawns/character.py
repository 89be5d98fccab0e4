"""Characters: pawns that can move and fight using a single skill."""

import copy

from ..csvtext import TRANSPARENT
from .pawn import Pawn
from .skill import Skill


class Character(Pawn):
    """A pawn with one skill.

    The skill is copied, and its projectiles are marked as cast by the player
    exactly when ``player`` is true.
    """

    def __init__(
        self,
        name="???",
        character=" ",
        foreground=TRANSPARENT,
        skill=None,
        player=False,
    ):
        super().__init__(name, character, foreground)
        self._skill = Skill() if skill is None else copy.deepcopy(skill)
        for projectile in self._skill.projectiles:
            projectile.casted_by_player = bool(player)

    @property
    def skill(self):
        return self._skill