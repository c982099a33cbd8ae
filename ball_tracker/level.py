import math
import random
from typing import List, Optional

from .config import BALL_RADIUS
from .models import Ball, LevelConfig, VisualState


def generate(config: LevelConfig, width: float, height: float,
             rng: Optional[random.Random] = None) -> List[Ball]:
    """Spawn ``config.total_balls`` balls at random, the first
    ``config.target_count`` of them highlighted as targets.

    Balls may overlap at spawn; there is no separation pass.
    """
    rng = rng or random.Random()
    r = BALL_RADIUS
    balls: List[Ball] = []
    for i in range(config.total_balls):
        x = rng.uniform(r, width - r)
        y = rng.uniform(r, height - r)
        angle = rng.random() * math.tau
        is_target = i < config.target_count
        balls.append(Ball(
            x, y,
            math.cos(angle) * config.speed,
            math.sin(angle) * config.speed,
            radius=r,
            is_target=is_target,
            state=VisualState.HIGHLIGHTED if is_target else VisualState.NEUTRAL,
        ))
    return balls
