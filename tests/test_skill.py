import pytest

from overengineered.csvtext import Reader
from overengineered.pawns.projectile import Projectile
from overengineered.pawns.skill import Skill


def test_reads_a_skill():
    fire_magic = Skill.read(Reader("Fireball,1,1,0,9,f,Fireball,2,0,50,5,0,0\n"))
    assert fire_magic.name == "Fireball"
    assert len(fire_magic.projectiles) == 1
    projectile = fire_magic.projectiles[0]
    assert projectile.name == "Fireball"
    assert projectile.foreground == 9
    assert (projectile.x, projectile.y) == (1, 0)
    assert projectile.range == 5
    assert fire_magic.health_change == 0
    assert fire_magic.health_mode is False


def test_reads_a_skill_without_projectiles():
    tackle = Skill.read(Reader("Tackle,0,0,0"))
    assert tackle.name == "Tackle"
    assert tackle.projectiles == []


def test_default_skill_does_nothing():
    skill = Skill()
    assert skill.projectiles == []
    assert skill.health_effect(3, 10) == 3
    assert skill.mana_effect(3, 10) == 3
    assert skill.score_effect(40) == 40


def test_percentage_above_hundred_rejected():
    with pytest.raises(ValueError):
        Skill("Overheal", [], 101, True)


def test_absolute_effect_above_hundred_allowed():
    skill = Skill("Big heal", [], 101, False)
    assert skill.health_effect(0, 10) == 10


def test_percentage_heal():
    skill = Skill("Heal", [], 50, True)
    assert skill.health_effect(2, 10) == 7


def test_heal_is_capped_at_maximum():
    skill = Skill("Heal", [], 100, True)
    assert skill.health_effect(5, 10) == 10


def test_negative_count_rejected():
    with pytest.raises(ValueError):
        Skill.read(Reader("Broken,-1,0,0"))


def test_truncated_input_raises():
    with pytest.raises(EOFError):
        Skill.read(Reader("Fireball,1,"))


def test_projectiles_are_copied():
    original = Projectile(9, "f", "Fireball", 2, 0, 50, 5)
    skill = Skill("Fire", [original], 0, False)
    skill.projectiles[0].casted_by_player = True
    assert original.casted_by_player is False
    assert skill.projectiles[0].casted_by_player is True