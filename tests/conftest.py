import os
import sys

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from sciview.data import DetectionConfig


@pytest.fixture
def detection_config():
    """Default detection thresholds."""
    return DetectionConfig()


@pytest.fixture
def xy_lines():
    """A small commented two-column data file."""
    return ["# header", "0.0 1.0", "1.0 5.0", "2.0 1.0"]


@pytest.fixture
def data_file(tmp_path, xy_lines):
    """The two-column data file written to disk."""
    path = tmp_path / "spectrum.dat"
    path.write_text("\n".join(xy_lines) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def prose_file(tmp_path):
    path = tmp_path / "notes.txt"
    path.write_text(
        "These are notes.\nNothing numeric here.\nJust words, 1 number.\n",
        encoding="utf-8",
    )
    return path
