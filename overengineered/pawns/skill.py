"""Skills: the projectiles a character spawns and the effect on its caster."""

import copy

from .interactable import Interactable
from .projectile import Projectile


def _percent_of(total, percent):
    """Integer percentage, truncated toward zero."""
    product = total * percent
    quotient = abs(product) // 100
    return quotient if product >= 0 else -quotient


class Skill(Interactable):
    """Projectiles to spawn plus a health change for whoever uses the skill.

    With ``health_mode`` false the health change is absolute; with it true it
    is a percentage of the maximum health. A default Skill does nothing.
    """

    def __init__(self, name="???", projectiles=(), health_effect=0, health_mode=False):
        super().__init__(name)
        if health_mode and health_effect > 100:
            raise ValueError("health effect cannot be > 100%")
        self.projectiles = [copy.copy(projectile) for projectile in projectiles]
        self._health_change = health_effect
        self._health_mode = bool(health_mode)

    @property
    def health_change(self):
        return self._health_change

    @property
    def health_mode(self):
        return self._health_mode

    def _unchecked_health_effect(self, current_health, max_health):
        change = (
            _percent_of(max_health, self._health_change)
            if self._health_mode
            else self._health_change
        )
        return min(max_health, current_health + change)

    @classmethod
    def read(cls, reader):
        """Read a name, a projectile count, the projectiles and the health effect."""
        name = reader.read_field()
        count = reader.read_int()
        reader.ignore()
        if count < 0:
            raise ValueError("the number of projectiles cannot be negative")
        projectiles = []
        for _ in range(count):
            projectiles.append(Projectile.read(reader))
            reader.ignore()
        health_effect = reader.read_int()
        reader.ignore()
        health_mode = reader.read_bool()
        return cls(name, projectiles, health_effect, health_mode)