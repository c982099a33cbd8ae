"""
Ball Tracker - multiple-object tracking attention game

Watch the highlighted balls, keep your eyes on them while every ball looks
the same, then click the ones you were tracking.
"""

from .models import AttemptResult, Ball, LevelConfig, UserProfile, VisualState
from .difficulty import STARTING_CONFIG, config_for_level, next_config
from .game import Outcome, Phase, TrackingSession
from .ledger import Ledger
from .storage import JsonStore
from .export import export_and_share, format_history
from .errors import BallTrackerError, NothingToExportError, UserIdTakenError

__all__ = [
    "AttemptResult",
    "Ball",
    "LevelConfig",
    "UserProfile",
    "VisualState",
    "STARTING_CONFIG",
    "config_for_level",
    "next_config",
    "Outcome",
    "Phase",
    "TrackingSession",
    "Ledger",
    "JsonStore",
    "export_and_share",
    "format_history",
    "BallTrackerError",
    "NothingToExportError",
    "UserIdTakenError",
]
