"""Panel rendering for the viewer's file tree, content and stats sections."""

from ..icons import icon_for
from .utils import TextUtils

SELECTION_MARKER = ">"
LINE_NUMBER_SEPARATOR = " │ "


class PanelRenderer:
    """Renders the viewer panels as lists of fixed-width lines."""

    def __init__(self):
        self.text_utils = TextUtils()

    def draw_info_panel(self, info_dict, width, height):
        """Draw the info panel with key/value pairs."""
        lines = []
        max_key_len = min(max((len(str(k)) for k in info_dict), default=0), width // 2)
        max_val_len = max(0, width - max_key_len - 3)  # -3 for ": " and padding

        display_items = []
        for key, value in info_dict.items():
            # Multi-line values continue under an empty key
            for i, part in enumerate(str(value).splitlines() or [""]):
                display_items.append((key if i == 0 else "", part))

        for i in range(height):
            if i < len(display_items):
                key, value = display_items[i]
                key_str = str(key)[:max_key_len]
                val_str = str(value)[:max_val_len]

                if key:  # Normal line with key
                    line = f" {key_str}: {val_str}"
                else:  # Continuation line
                    line = f" {' ' * len(key_str)}  {val_str}"

                lines.append(self.text_utils.fit(line, width))
            else:
                lines.append(" " * width)

        return lines

    def draw_file_tree(self, entries, selected_index, scroll, width, height,
                       use_nerd_fonts=True):
        """Draw the visible slice of directory entries with the selection marked."""
        lines = []
        for row in range(height):
            index = scroll + row
            if index < len(entries):
                entry = entries[index]
                marker = SELECTION_MARKER if index == selected_index else " "
                icon = icon_for(entry.name, entry.is_dir, use_nerd_fonts)
                line = f"{marker}{icon} {entry.name}"
            else:
                line = ""
            lines.append(self.text_utils.fit(line, width))
        return lines

    def draw_content(self, file_lines, viewport, width, height):
        """Draw the visible file lines, prefixed with right-aligned line numbers."""
        total_lines = len(file_lines)
        number_width = len(str(total_lines)) if total_lines else 1

        lines = []
        for row in range(height):
            index = viewport.scroll_offset + row
            if index < total_lines:
                prefix = f"{index + 1:>{number_width}}{LINE_NUMBER_SEPARATOR}"
                line = prefix + file_lines[index]
            else:
                line = ""
            lines.append(self.text_utils.fit(line, width))
        return lines

    def draw_popup(self, title, items, selected_index, width, height):
        """Draw a boxed selection list, e.g. the recent files popup."""
        inner = width - 2
        label = self.text_utils.truncate_to_width(f" {title} ", inner)
        lines = ["┌" + label + "─" * (inner - len(label)) + "┐"]
        body_height = height - 2
        if not items:
            rows = ["  (empty)"]
        else:
            # Keep the selection visible
            start = max(0, selected_index - body_height + 1)
            rows = []
            for index in range(start, min(len(items), start + body_height)):
                marker = SELECTION_MARKER if index == selected_index else " "
                rows.append(f"{marker} {items[index]}")
        for row in range(body_height):
            text = rows[row] if row < len(rows) else ""
            lines.append("│" + self.text_utils.fit(text, inner) + "│")
        lines.append("└" + "─" * inner + "┘")
        return lines
