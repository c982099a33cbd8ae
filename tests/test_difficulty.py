import pytest

from ball_tracker.difficulty import STARTING_CONFIG, config_for_level, next_config
from ball_tracker.models import LevelConfig


def test_starting_config():
    assert STARTING_CONFIG == LevelConfig(1, 3, 1, 2.0)


def test_level_one_to_two():
    assert next_config(LevelConfig(1, 3, 1, 2.0)) == LevelConfig(2, 4, 2, 2.0)


def test_level_two_to_three():
    assert next_config(LevelConfig(2, 4, 2, 2.0)) == LevelConfig(3, 5, 2, 2.25)


def test_target_count_caps_at_five():
    config = config_for_level(8)
    assert config.target_count == 5
    assert config_for_level(30).target_count == 5


def test_monotonic_over_many_levels():
    config = STARTING_CONFIG
    for _ in range(100):
        nxt = next_config(config)
        assert nxt.level == config.level + 1
        assert nxt.total_balls > config.total_balls
        assert config.target_count <= nxt.target_count <= 5
        assert nxt.speed >= config.speed
        config = nxt


def test_speed_steps_every_third_level():
    assert config_for_level(5).speed == 2.25
    assert config_for_level(6).speed == 2.5
    assert config_for_level(9).speed == 2.75


def test_config_for_level_rejects_zero():
    with pytest.raises(ValueError):
        config_for_level(0)
