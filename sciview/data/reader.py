"""Filesystem access for the viewer: line reading and file metadata."""

import os
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import List, Optional

KB = 1024
MB = KB * 1024
GB = MB * 1024

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


class FileReadError(Exception):
    """A file could not be read (missing, permission denied, not a file)."""

    def __init__(self, path, reason):
        super().__init__(f"{path}: {reason}")
        self.path = Path(path)
        self.reason = reason


class BinaryFileError(FileReadError):
    """A file was readable but is not valid UTF-8 text."""


def read_lines(path) -> List[str]:
    """Read a text file into a list of lines without line terminators."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            content = f.read()
    except UnicodeDecodeError:
        raise BinaryFileError(path, "binary file")
    except IsADirectoryError:
        raise FileReadError(path, "is a directory")
    except FileNotFoundError:
        raise FileReadError(path, "no such file")
    except PermissionError:
        raise FileReadError(path, "permission denied")
    except OSError as e:
        raise FileReadError(path, e.strerror or str(e))
    return content.splitlines()


def format_size(num_bytes: int) -> str:
    """Format a byte count in human-readable binary units."""
    if num_bytes >= GB:
        return f"{num_bytes / GB:.2f} GB"
    elif num_bytes >= MB:
        return f"{num_bytes / MB:.2f} MB"
    elif num_bytes >= KB:
        return f"{num_bytes / KB:.2f} KB"
    return f"{num_bytes} B"


def format_timestamp(timestamp: Optional[float]) -> str:
    if timestamp is None:
        return "unknown"
    return datetime.fromtimestamp(timestamp).strftime(TIMESTAMP_FORMAT)


@dataclass(frozen=True)
class FileInfo:
    """Size and timestamps of a file, available even when it cannot be read."""

    size: int = 0
    created: Optional[float] = None
    modified: Optional[float] = None

    @classmethod
    def from_path(cls, path) -> "FileInfo":
        try:
            stat = os.stat(path)
        except OSError:
            return cls()
        # st_birthtime only exists on some platforms
        created = getattr(stat, "st_birthtime", stat.st_ctime)
        return cls(stat.st_size, created, stat.st_mtime)

    def as_dict(self):
        return {
            "Size": format_size(self.size),
            "Created": format_timestamp(self.created),
            "Modified": format_timestamp(self.modified),
        }
