from .config import (MAX_TARGETS, SPEED_STEP, START_LEVEL, START_SPEED,
                     START_TARGET_COUNT, START_TOTAL_BALLS)
from .models import LevelConfig

STARTING_CONFIG = LevelConfig(START_LEVEL, START_TOTAL_BALLS, START_TARGET_COUNT, START_SPEED)


def next_config(prev: LevelConfig) -> LevelConfig:
    """One more ball every level, one more target on even levels (up to
    MAX_TARGETS), a bit more speed every third level."""
    level = prev.level + 1
    targets = prev.target_count
    if level % 2 == 0 and targets < MAX_TARGETS:
        targets += 1
    speed = prev.speed
    if level % 3 == 0:
        speed += SPEED_STEP
    return LevelConfig(level, prev.total_balls + 1, targets, speed)


def config_for_level(level: int) -> LevelConfig:
    if level < START_LEVEL:
        raise ValueError(f"level must be >= {START_LEVEL}, got {level}")
    config = STARTING_CONFIG
    while config.level < level:
        config = next_config(config)
    return config
