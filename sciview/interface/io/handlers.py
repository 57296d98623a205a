"""Logging handlers for viewer integration."""

import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class ViewerLogHandler(logging.StreamHandler):
    """Stream handler that routes log records to the viewer's status bar."""

    def __init__(self, viewer):
        super().__init__()
        self.viewer = viewer

    def emit(self, record):
        try:
            self.viewer.add_log(record.getMessage(), record.levelno)
        except Exception:
            self.handleError(record)
