"""Viewer output wrapper."""


class ViewerOutput:
    """Writes frames to the real stdout while sys.stdout is captured."""

    def __init__(self, original_stdout):
        self.original_stdout = original_stdout

    def write(self, data):
        self.original_stdout.write(data)

    def flush(self):
        self.original_stdout.flush()
