"""Capture of stray stdout/stderr writes while the viewer owns the screen."""


class LogCapture:
    """File-like object that forwards writes to the viewer's status bar."""

    def __init__(self, viewer):
        self.viewer = viewer

    def write(self, data):
        if data.strip():
            self.viewer.add_log(data.rstrip())
        return len(data)

    def flush(self):
        pass

    def isatty(self):
        return False
