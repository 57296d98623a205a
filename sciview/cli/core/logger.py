"""Root logger setup for a viewer run."""

import logging

from ...interface.io import LOG_FORMAT


def setup_logging(log_file=None, debug=False):
    """
    Configure the root logger.

    Records always reach the viewer's status bar through its own handler;
    ``log_file`` additionally keeps a full log on disk.
    """
    root = logging.getLogger()
    root.setLevel(logging.DEBUG if debug else logging.INFO)

    if log_file is not None:
        handler = logging.FileHandler(log_file, encoding="utf-8")
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)

    return root
