"""Global constants and default settings."""
import logging
import os

WIDTH, HEIGHT = 430, 760
FPS = 60
MARGIN = 40

ARENA_WIDTH, ARENA_HEIGHT = 350, 450
BALL_RADIUS = 15.0

REVEAL_SECONDS = 2.5
TRACKING_SECONDS = 6.0

# Level 1 difficulty
START_LEVEL = 1
START_TOTAL_BALLS = 3
START_TARGET_COUNT = 1
START_SPEED = 2.0
MAX_TARGETS = 5
SPEED_STEP = 0.25

PALETTE = {
    "bg": (240, 242, 245),
    "arena": (248, 249, 250),
    "border": (222, 226, 230),
    "panel": (0, 123, 255),
    "panel_off": (160, 170, 180),
    "export": (0, 128, 128),
    "title": (0, 86, 179),
    "text": (34, 34, 34),
    "muted": (110, 110, 120),
    "white": (255, 255, 255),
    "ok": (46, 125, 50),
    "bad": (198, 40, 40),
    "target": (255, 193, 7),
    "neutral": (0, 123, 255),
    "correct": (40, 167, 69),
    "incorrect": (220, 53, 69),
}

DATA_FILE = os.environ.get(
    "BALL_TRACKER_DATA",
    os.path.join(os.path.expanduser("~"), ".ball_tracker", "profiles.json"),
)
EXPORT_NAME = "tracking_history_{user_id}.csv"

LOG_LEVEL = os.environ.get("BALL_TRACKER_LOG_LEVEL", "INFO")
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def setup_logging(level=None) -> None:
    logging.basicConfig(level=(level or LOG_LEVEL).upper(), format=LOG_FORMAT, force=True)
