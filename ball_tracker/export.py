import logging
import os
import subprocess
import sys
import tempfile
from typing import Callable, Iterable, Optional

from .config import EXPORT_NAME
from .errors import NothingToExportError
from .models import AttemptResult

logger = logging.getLogger(__name__)

HEADER = ("Level", "Result", "Time (s)")
ANSWERED = "Answered"
GAVE_UP = "Gave Up"


def format_history(history: Iterable[AttemptResult]) -> str:
    rows = [",".join(HEADER)]
    for r in history:
        rows.append(f"{r.level},{ANSWERED if r.completed else GAVE_UP},{r.elapsed_seconds:.2f}")
    return "\n".join(rows)


def open_with_system(path: str):
    """Hand a file to the desktop's default application."""
    if sys.platform.startswith("win"):
        os.startfile(path)
    elif sys.platform == "darwin":
        subprocess.Popen(["open", path])
    else:
        subprocess.Popen(["xdg-open", path])


def export_and_share(user_id: int, history, directory: Optional[str] = None,
                     share: Optional[Callable[[str], None]] = None) -> Optional[str]:
    """Write the history as CSV and hand the file to ``share``.

    Raises NothingToExportError for an empty history. Write or share
    failures are logged and give back None.
    """
    history = list(history)
    if not history:
        raise NothingToExportError()
    path = os.path.join(directory or tempfile.gettempdir(), EXPORT_NAME.format(user_id=user_id))
    try:
        with open(path, "w", newline="") as f:
            f.write(format_history(history))
    except OSError as e:
        logger.error("Could not write export %s: %s", path, e)
        return None
    logger.info("Exported %d attempts for user %s to %s", len(history), user_id, path)
    if share is not None:
        try:
            share(path)
        except Exception:
            logger.exception("Share action failed for %s", path)
    return path
