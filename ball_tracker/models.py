import math
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Tuple

from .config import BALL_RADIUS


class VisualState(Enum):
    NEUTRAL = "neutral"
    HIGHLIGHTED = "target"
    CORRECT = "correct"
    INCORRECT = "incorrect"


@dataclass
class Ball:
    x: float
    y: float
    vx: float
    vy: float
    radius: float = BALL_RADIUS
    is_target: bool = False
    state: VisualState = VisualState.NEUTRAL

    @property
    def position(self) -> Tuple[float, float]:
        return self.x, self.y

    def contains(self, point: Tuple[float, float]) -> bool:
        return math.hypot(point[0] - self.x, point[1] - self.y) < self.radius

    @property
    def resolved(self) -> bool:
        return self.state in (VisualState.CORRECT, VisualState.INCORRECT)


@dataclass(frozen=True)
class LevelConfig:
    level: int
    total_balls: int
    target_count: int
    speed: float


@dataclass(frozen=True)
class AttemptResult:
    level: int
    elapsed_seconds: float
    completed: bool

    def to_dict(self) -> dict:
        return {"level": self.level, "time": self.elapsed_seconds, "wasCompleted": self.completed}

    @classmethod
    def from_dict(cls, data: dict) -> "AttemptResult":
        level, seconds, completed = data["level"], data["time"], data["wasCompleted"]
        if type(level) is not int:
            raise ValueError(f"level must be an integer, got {level!r}")
        if type(seconds) not in (int, float):
            raise ValueError(f"time must be a number, got {seconds!r}")
        if type(completed) is not bool:
            raise ValueError(f"wasCompleted must be a boolean, got {completed!r}")
        return cls(level, float(seconds), completed)


@dataclass
class UserProfile:
    user_id: int
    personal_best: int = 0
    history: List[AttemptResult] = field(default_factory=list)
