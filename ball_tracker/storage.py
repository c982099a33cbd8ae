"""JSON-file persistence for user profiles.

Every user lives under their id in a single document::

    {"users": {"12345": {"personalBest": 4, "history": [{"level": 1, ...}]}}}

Read problems never stop the game: an unreadable file starts an empty store
and a corrupt history starts that user over with an empty one.
"""
import json
import logging
import os
from typing import Iterable, Optional

from .errors import UserIdTakenError
from .models import AttemptResult, UserProfile

logger = logging.getLogger(__name__)


class JsonStore:
    def __init__(self, path):
        self.path = path
        self.data = {"users": {}}
        self.load()

    def load(self):
        try:
            if os.path.exists(self.path):
                with open(self.path, "r") as f:
                    data = json.load(f)
                if not isinstance(data, dict) or not isinstance(data.get("users"), dict):
                    raise ValueError("missing 'users' table")
                self.data = data
        except (OSError, ValueError) as e:
            logger.warning("Could not read profiles from %s (%s); starting empty", self.path, e)
            self.data = {"users": {}}

    def save(self):
        tmp = f"{self.path}.tmp"
        try:
            folder = os.path.dirname(self.path)
            if folder:
                os.makedirs(folder, exist_ok=True)
            with open(tmp, "w") as f:
                json.dump(self.data, f, indent=2)
            os.replace(tmp, self.path)
        except OSError as e:
            logger.error("Could not save profiles to %s: %s", self.path, e)

    def _record(self, user_id) -> Optional[dict]:
        return self.data["users"].get(str(user_id))

    def exists(self, user_id) -> bool:
        return self._record(user_id) is not None

    def claim(self, user_id) -> UserProfile:
        if self.exists(user_id):
            raise UserIdTakenError(user_id)
        self.data["users"][str(user_id)] = {"personalBest": 0, "history": []}
        self.save()
        logger.info("Claimed user id %s", user_id)
        return UserProfile(int(user_id))

    def load_profile(self, user_id) -> Optional[UserProfile]:
        rec = self._record(user_id)
        if rec is None:
            return None
        if not isinstance(rec, dict):
            logger.warning("Bad record for user %s; using empty profile", user_id)
            return UserProfile(int(user_id))
        try:
            best = int(rec.get("personalBest", 0))
        except (TypeError, ValueError):
            logger.warning("Bad personal best for user %s; using 0", user_id)
            best = 0
        try:
            history = [AttemptResult.from_dict(item) for item in rec.get("history", [])]
        except (TypeError, ValueError, KeyError, AttributeError) as e:
            logger.warning("Could not decode history for user %s (%s); using empty history", user_id, e)
            history = []
        return UserProfile(int(user_id), best, history)

    def _ensure(self, user_id) -> dict:
        users = self.data["users"]
        if not isinstance(users.get(str(user_id)), dict):
            users[str(user_id)] = {"personalBest": 0, "history": []}
        return users[str(user_id)]

    def save_best(self, user_id, level: int):
        self._ensure(user_id)["personalBest"] = int(level)
        self.save()

    def save_history(self, user_id, history: Iterable[AttemptResult]):
        self._ensure(user_id)["history"] = [r.to_dict() for r in history]
        self.save()
