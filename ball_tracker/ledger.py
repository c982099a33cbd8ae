import logging
from typing import List

from .models import AttemptResult, UserProfile

logger = logging.getLogger(__name__)


class Ledger:
    """A user's attempt history and personal best, written through to a store.

    There is no deduplication: the game calls ``append`` and
    ``update_best_if_higher`` at most once per attempt.
    """

    def __init__(self, store, profile: UserProfile):
        self.store = store
        self.profile = profile

    @classmethod
    def open(cls, store, user_id: int) -> "Ledger":
        profile = store.load_profile(user_id) or UserProfile(user_id)
        return cls(store, profile)

    @property
    def user_id(self) -> int:
        return self.profile.user_id

    @property
    def history(self) -> List[AttemptResult]:
        return list(self.profile.history)

    @property
    def personal_best(self) -> int:
        return self.profile.personal_best

    def append(self, result: AttemptResult):
        self.profile.history.append(result)
        logger.info("User %s level %d: %s in %.2fs", self.user_id, result.level,
                    "answered" if result.completed else "gave up", result.elapsed_seconds)
        self.store.save_history(self.user_id, self.profile.history)

    def update_best_if_higher(self, level: int) -> bool:
        if level <= self.profile.personal_best:
            return False
        self.profile.personal_best = level
        logger.info("User %s new personal best: %d", self.user_id, level)
        self.store.save_best(self.user_id, level)
        return True
