"""Last-directory bookmark stored in the user's config directory."""

import logging
import os
from pathlib import Path

logger = logging.getLogger("sciview.bookmark")

APP_DIR_NAME = "sci-file-viewer"
BOOKMARK_FILE = "last_dir.txt"


def config_dir():
    """The application's config directory, honouring ``XDG_CONFIG_HOME``."""
    base = os.environ.get("XDG_CONFIG_HOME") or Path.home() / ".config"
    return Path(base) / APP_DIR_NAME


def bookmark_path(directory=None):
    return Path(directory or config_dir()) / BOOKMARK_FILE


def load_last_directory(directory=None):
    """Return the remembered directory if it still exists, else None."""
    path = bookmark_path(directory)
    try:
        with open(path, "r", encoding="utf-8") as f:
            line = f.readline().strip()
    except OSError:
        return None
    if not line:
        return None
    last_dir = Path(line)
    return last_dir if last_dir.is_dir() else None


def save_last_directory(current_directory, directory=None):
    """Remember ``current_directory``; failures are logged, never raised."""
    path = bookmark_path(directory)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            f.write(f"{current_directory}\n")
    except OSError as e:
        logger.warning("Could not save last directory to %s: %s", path, e)
        return False
    return True
