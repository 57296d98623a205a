"""Differential rendering for the viewer frame."""

from typing import List, Optional, Tuple

# Synchronized update markers; terminals without support ignore them
BEGIN_SYNC = "\033[?2026h"
END_SYNC = "\033[?2026l"


class TerminalDifferentialRenderer:
    """
    Character-level differential rendering for terminal output.
    Only rewrites the runs of characters that changed since the last frame.
    """

    def __init__(self, term):
        self.term = term
        self.previous_frame: Optional[List[str]] = None

    def render_frame(self, new_frame: List[str], output) -> None:
        """Render a frame with minimal terminal updates."""
        if not new_frame:
            return

        # First frame or size changed - full redraw
        if self.previous_frame is None or len(self.previous_frame) != len(
            new_frame
        ):
            self._full_redraw(new_frame, output)
            self.previous_frame = list(new_frame)
            return

        updates = []
        for row, (old_line, new_line) in enumerate(zip(self.previous_frame, new_frame)):
            if old_line != new_line:
                for col, text in self.find_line_changes(old_line, new_line):
                    updates.append((row, col, text))

        self._apply_updates(updates, output)
        self.previous_frame = list(new_frame)

    def _full_redraw(self, frame: List[str], output) -> None:
        print(
            self.term.home + self.term.clear + self.term.normal + "\n".join(frame),
            end="",
            file=output,
        )
        output.flush()

    @staticmethod
    def find_line_changes(old_line: str, new_line: str) -> List[Tuple[int, str]]:
        """
        Find contiguous blocks of changes in a line.
        Returns a list of (start_col, new_text) tuples.
        """
        if old_line == new_line:
            return []

        max_len = max(len(old_line), len(new_line))
        old_padded = old_line.ljust(max_len)
        new_padded = new_line.ljust(max_len)

        changes = []
        change_start = None
        for i in range(max_len):
            if old_padded[i] != new_padded[i]:
                if change_start is None:
                    change_start = i
            elif change_start is not None:
                changes.append((change_start, new_padded[change_start:i]))
                change_start = None

        if change_start is not None:
            changes.append((change_start, new_padded[change_start:]))

        return changes

    def _apply_updates(self, updates, output) -> None:
        """Write the changed runs using absolute cursor positioning."""
        if not updates:
            return

        chunks = [BEGIN_SYNC]
        for row, col, text in sorted(updates):
            # CSI row;col H is 1-indexed
            chunks.append(f"\033[{row + 1};{col + 1}H{text}")
        chunks.append(END_SYNC)

        print("".join(chunks), end="", file=output)
        output.flush()

    def reset(self) -> None:
        """Forget the previous frame so the next render is a full redraw."""
        self.previous_frame = None
