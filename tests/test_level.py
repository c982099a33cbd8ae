import math
import random

import pytest

from ball_tracker.difficulty import config_for_level
from ball_tracker.level import generate
from ball_tracker.models import VisualState


@pytest.mark.parametrize("level", [1, 2, 5, 9, 20])
def test_exact_target_count(level):
    config = config_for_level(level)
    for seed in range(10):
        balls = generate(config, 350, 450, random.Random(seed))
        assert len(balls) == config.total_balls
        assert sum(b.is_target for b in balls) == config.target_count
        assert sum(not b.is_target for b in balls) == config.total_balls - config.target_count


def test_targets_come_first_and_are_highlighted():
    config = config_for_level(4)
    balls = generate(config, 350, 450, random.Random(1))
    n = config.target_count
    assert all(b.is_target and b.state is VisualState.HIGHLIGHTED for b in balls[:n])
    assert all(not b.is_target and b.state is VisualState.NEUTRAL for b in balls[n:])


def test_spawn_inside_arena_with_configured_speed():
    config = config_for_level(6)
    for b in generate(config, 350, 450, random.Random(11)):
        assert 15.0 <= b.x <= 335.0
        assert 15.0 <= b.y <= 435.0
        assert b.radius == 15.0
        assert math.hypot(b.vx, b.vy) == pytest.approx(config.speed)


def test_same_seed_same_layout():
    config = config_for_level(3)
    a = generate(config, 350, 450, random.Random(5))
    b = generate(config, 350, 450, random.Random(5))
    assert a == b
