"""The phase state machine behind one tracking game.

A session goes IDLE -> SETUP -> REVEAL -> TRACKING -> AWAITING_INPUT ->
RESOLVED and back to SETUP on the next start. The two timed transitions
(end of reveal, end of tracking) are one-shot timers tagged with the phase
epoch at scheduling time; a timer whose epoch is stale does nothing.

Only completed and given-up attempts go to the ledger. A wrong click ends
the attempt without a ledger entry.
"""
import logging
import random
import time
from enum import Enum
from functools import partial
from typing import Callable, List, Optional, Tuple

from .clock import Scheduler, Stopwatch
from .config import ARENA_HEIGHT, ARENA_WIDTH, REVEAL_SECONDS, TRACKING_SECONDS
from .difficulty import STARTING_CONFIG, next_config
from .ledger import Ledger
from .level import generate
from .models import AttemptResult, Ball, LevelConfig, VisualState
from .motion import advance_all

logger = logging.getLogger(__name__)

START_TEXT = "Start Level"
NEXT_TEXT = "Next Level"
RETRY_TEXT = "Try Again"


class Phase(Enum):
    IDLE = "idle"
    SETUP = "setup"
    REVEAL = "reveal"
    TRACKING = "tracking"
    AWAITING_INPUT = "awaiting_input"
    RESOLVED = "resolved"


class Outcome(Enum):
    CORRECT = "correct"
    INCORRECT = "incorrect"
    GAVE_UP = "gave_up"


class TrackingSession:
    def __init__(self, ledger: Ledger, width: float = ARENA_WIDTH, height: float = ARENA_HEIGHT,
                 clock: Callable[[], float] = time.monotonic,
                 rng: Optional[random.Random] = None,
                 config: LevelConfig = STARTING_CONFIG):
        self.ledger = ledger
        self.width = width
        self.height = height
        self.rng = rng or random.Random()
        self.config = config
        self.phase = Phase.IDLE
        self.outcome: Optional[Outcome] = None
        self.epoch = 0
        self.balls: List[Ball] = []
        self.found = 0
        self.start_enabled = True
        self.button_text = START_TEXT
        self.instructions = "Click 'Start' to begin. Watch the yellow balls."
        self.scheduler = Scheduler(clock)
        self.tracking_watch = Stopwatch(clock)
        self.reaction_watch = Stopwatch(clock)

    @property
    def level(self) -> int:
        return self.config.level

    @property
    def remaining(self) -> int:
        return self.config.target_count - self.found

    def _enter(self, phase: Phase):
        self.phase = phase
        self.epoch += 1
        logger.debug("level %d: -> %s (epoch %d)", self.level, phase.value, self.epoch)

    def _stale(self, epoch: int, phase: Phase) -> bool:
        return epoch != self.epoch or self.phase is not phase

    # --- commands -------------------------------------------------------

    def start(self) -> bool:
        """Start, retry or advance to the current level. Ignored until the
        running attempt is resolved."""
        if not self.start_enabled:
            return False
        self._enter(Phase.SETUP)
        self.start_enabled = False
        self.outcome = None
        self.found = 0
        self.tracking_watch.reset()
        self.reaction_watch.reset()
        self.balls = generate(self.config, self.width, self.height, self.rng)
        self.instructions = f"Watch the {self.config.target_count} yellow ball(s)."
        self._enter(Phase.REVEAL)
        self.scheduler.schedule_once(REVEAL_SECONDS, partial(self._end_reveal, self.epoch))
        return True

    def lose_track(self) -> Optional[AttemptResult]:
        self.update()
        if self.phase is not Phase.TRACKING:
            return None
        self.tracking_watch.stop()
        seconds = round(self.tracking_watch.elapsed, 3)
        result = AttemptResult(self.level, seconds, False)
        self.ledger.append(result)
        self.instructions = f"Tracked for {seconds:.1f}s. Let's see the answer."
        self._reveal_targets()
        self._resolve(Outcome.GAVE_UP, RETRY_TEXT)
        return result

    def tap(self, point: Tuple[float, float]) -> Optional[Ball]:
        self.update()
        if self.phase is not Phase.AWAITING_INPUT:
            return None
        ball = self.hit_test(point)
        if ball is None:
            return None
        if ball.is_target:
            ball.state = VisualState.CORRECT
            self.found += 1
            if self.found == self.config.target_count:
                self._complete()
            else:
                self.instructions = f"Good job! Find the remaining {self.remaining} ball(s)."
        else:
            ball.state = VisualState.INCORRECT
            self.reaction_watch.stop()
            self.instructions = "Incorrect. Try this level again."
            self._reveal_targets()
            self._resolve(Outcome.INCORRECT, RETRY_TEXT)
        return ball

    def hit_test(self, point: Tuple[float, float]) -> Optional[Ball]:
        for ball in self.balls:
            if ball.resolved:
                continue
            if ball.contains(point):
                return ball
        return None

    # --- per frame ------------------------------------------------------

    def update(self) -> int:
        return self.scheduler.run_pending()

    def tick(self):
        if self.phase is Phase.TRACKING:
            advance_all(self.balls, self.width, self.height)

    def close(self):
        """Drop pending timers and stop both stopwatches."""
        self.scheduler.clear()
        self.tracking_watch.stop()
        self.reaction_watch.stop()

    # --- transitions ----------------------------------------------------

    def _end_reveal(self, epoch: int):
        if self._stale(epoch, Phase.REVEAL):
            return
        for ball in self.balls:
            ball.state = VisualState.NEUTRAL
        self.instructions = "Tracking... (Press SPACE if you lose track)"
        self._enter(Phase.TRACKING)
        self.tracking_watch.restart()
        self.scheduler.schedule_once(TRACKING_SECONDS, partial(self._end_tracking, self.epoch))

    def _end_tracking(self, epoch: int):
        if self._stale(epoch, Phase.TRACKING):
            return
        self.tracking_watch.stop()
        self._enter(Phase.AWAITING_INPUT)
        self.reaction_watch.restart()
        self.instructions = f"Click the {self.remaining} ball(s) you were tracking."

    def _complete(self):
        self.reaction_watch.stop()
        completed = self.config.level
        result = AttemptResult(completed, round(self.reaction_watch.elapsed, 3), True)
        self.ledger.append(result)
        self.config = next_config(self.config)
        self.ledger.update_best_if_higher(completed)
        self.instructions = "Correct! Well done!"
        self._resolve(Outcome.CORRECT, NEXT_TEXT)

    def _reveal_targets(self):
        for ball in self.balls:
            if ball.is_target:
                ball.state = VisualState.HIGHLIGHTED

    def _resolve(self, outcome: Outcome, button_text: str):
        self.outcome = outcome
        self.button_text = button_text
        self.start_enabled = True
        self._enter(Phase.RESOLVED)
        logger.info("attempt resolved: %s (now at level %d)", outcome.value, self.level)
