"""Text rendering utilities."""

import re

import wcwidth

# Substitute for characters whose display width is not exactly one column
REPLACEMENT_CHAR = "�"

TAB_SIZE = 4


class TextUtils:
    """Utilities for text rendering and manipulation."""

    def __init__(self):
        self.ansi_escape = re.compile(r"\x1B(?:[@-Z\\-_]|\[[0-?]*[ -/]*[@-~])")

    def strip_ansi(self, text):
        """Remove ANSI escape sequences from the text."""
        return self.ansi_escape.sub("", text)

    def sanitize_text(self, text):
        """
        Sanitize text by replacing problematic characters with safe alternatives.
        Returns sanitized text where every character is one column wide.
        """
        if not text:
            return ""

        text = self.strip_ansi(text).expandtabs(TAB_SIZE)
        result = []
        for char in text:
            width = wcwidth.wcwidth(char)
            if width != 1:  # Control, combining or wide character
                result.append(REPLACEMENT_CHAR)
            else:
                result.append(char)

        return "".join(result)

    def truncate_to_width(self, text, width):
        """Truncate text to fit within a given width, accounting for wide characters."""
        if not text or width <= 0:
            return ""

        # Sanitize the input text first
        sanitized_text = self.sanitize_text(text)

        current_width = 0
        result = []
        for char in sanitized_text:
            char_width = max(wcwidth.wcwidth(char), 1)
            if current_width + char_width > width:
                break
            result.append(char)
            current_width += char_width

        return "".join(result)

    def visual_ljust(self, string, width):
        """Left-justify a string to a specified width, considering character display width."""
        if not string:
            return " " * width

        # Sanitize the input string first
        sanitized_string = self.sanitize_text(string)

        padding = max(0, width - self.visual_len(sanitized_string))
        return sanitized_string + " " * padding

    def visual_len(self, s):
        """Calculate the visual display width of a string."""
        return sum(max(wcwidth.wcwidth(char), 0) for char in s)

    def fit(self, text, width):
        """Truncate and pad text to exactly ``width`` columns."""
        return self.visual_ljust(self.truncate_to_width(text, width), width)
