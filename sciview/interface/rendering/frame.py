"""Frame building and border management."""

from .utils import TextUtils


class FrameBuilder:
    """Builds and manages viewer frames."""

    def __init__(self):
        self.text_utils = TextUtils()

    def correct_borders(self, frame):
        """Correct borders for all lines in a frame."""
        frame_visual_width = self.text_utils.visual_len(frame[0])
        for i in range(1, len(frame) - 1):
            line = frame[i]
            line_visual_len = self.text_utils.visual_len(line)
            if line_visual_len < frame_visual_width:
                padding_needed = frame_visual_width - line_visual_len
                line += " " * padding_needed
            elif line_visual_len > frame_visual_width:
                line = self.text_utils.truncate_to_width(line, frame_visual_width)
            if not line.startswith("║") and not line.startswith("╠"):
                line = "║" + line[1:]
            if not line.endswith("║") and not line.endswith("╣"):
                line = line[:-1] + "║"
            frame[i] = line
        return frame

    def check_border_alignment(self, frame):
        """Check that every line has the width of the top border."""
        expected_length = self.text_utils.visual_len(frame[0])
        return all(
            self.text_utils.visual_len(line) == expected_length for line in frame
        )

    def _titled(self, title, width):
        """A horizontal border segment of ``width`` with an embedded title."""
        if not title:
            return "═" * width
        label = self.text_utils.truncate_to_width(f" {title} ", max(0, width - 1))
        return "═" + label + "═" * (width - 1 - len(label))

    def create_top_border(self, widths, titles=()):
        """Create the top border of the frame, one titled segment per column."""
        titles = list(titles) + [""] * (len(widths) - len(titles))
        segments = [self._titled(t, w) for t, w in zip(titles, widths)]
        return "╔" + "╦".join(segments) + "╗"

    def create_footer_separator(self, widths):
        """Create the separator between the columns and the footer bars."""
        return "╠" + "╩".join("═" * w for w in widths) + "╣"

    def create_bottom_border(self, width):
        """Create the bottom border of the frame."""
        return "╚" + "═" * width + "╝"

    def create_row(self, cells):
        """Join column contents with vertical borders."""
        return "║" + "║".join(cells) + "║"

    def overlay(self, frame, block, top, left):
        """Paint ``block`` lines over ``frame`` starting at (top, left)."""
        for offset, text in enumerate(block):
            row = top + offset
            if row < 0 or row >= len(frame):
                continue
            line = frame[row]
            end = left + len(text)
            if end > len(line):
                text = text[: max(0, len(line) - left)]
                end = len(line)
            frame[row] = line[:left] + text + line[end:]
        return frame
