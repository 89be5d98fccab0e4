import pytest

from overengineered.csvtext import Reader
from overengineered.pawns.interactable import Interactable
from overengineered.pawns.projectile import Projectile

RED = 9


def test_constructs_a_projectile():
    fireball = Projectile(RED, "f", "Fireball", 2, 0, 50, 5)
    assert fireball.foreground == RED
    assert fireball.character == "f"
    assert fireball.name == "Fireball"
    assert isinstance(fireball, Interactable)
    assert fireball.casted_by_player is False
    assert (fireball.x, fireball.y) == (0, 0)


def test_expires_after_its_range():
    fireball = Projectile(RED, "f", "Fireball", 2, 0, 50, 5)
    for _ in range(5):
        assert not fireball.is_expired()
        fireball.count_movement()
    assert fireball.is_expired()


def test_moving_an_expired_projectile_fails():
    spark = Projectile(RED, "*", "Spark", 1, 0, 0, 0)
    assert spark.is_expired()
    with pytest.raises(RuntimeError):
        spark.count_movement()


def test_reads_a_projectile():
    fireball = Projectile.read(Reader("0,0,9,f,Fireball,2,0,50,5\n"))
    assert fireball.foreground == RED
    assert fireball.character == "f"
    assert fireball.name == "Fireball"
    assert fireball.health_damage == 2
    assert fireball.mana_damage == 0
    assert fireball.score_damage == 50
    assert fireball.range == 5
    assert fireball.casted_by_player is False


def test_reads_spawn_offsets():
    arrow = Projectile.read(Reader("-1,1,9,>,Arrow,1,0,0,3"))
    assert (arrow.x, arrow.y) == (-1, 1)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"x": 2},
        {"y": -2},
        {"health_damage": -1},
        {"mana_damage": -1},
        {"score_damage": -1},
        {"range_": -1},
    ],
)
def test_invalid_arguments(kwargs):
    with pytest.raises(ValueError):
        Projectile(RED, "f", "Fireball", **kwargs)


def test_damage_never_goes_below_zero():
    fireball = Projectile(RED, "f", "Fireball", 2, 3, 50, 5)
    assert fireball.health_effect(1, 10) == 0
    assert fireball.mana_effect(2, 10) == 0
    assert fireball.score_effect(20) == 0


def test_damage_is_subtracted():
    fireball = Projectile(RED, "f", "Fireball", 2, 0, 50, 5)
    assert fireball.health_effect(10, 10) == 8
    assert fireball.mana_effect(4, 10) == 4
    assert fireball.score_effect(100) == 50


def test_caster_can_be_changed():
    fireball = Projectile(RED, "f", "Fireball", 2, 0, 50, 5)
    fireball.casted_by_player = True
    assert fireball.casted_by_player is True