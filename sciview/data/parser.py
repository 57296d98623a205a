"""Line-level extraction of two-column numeric data."""

import math
import re
from enum import Enum
from typing import NamedTuple, Optional, Sequence

from .points import DataPoint

DEFAULT_COMMENT_PREFIXES = ("#", ";")

# Runs of whitespace and/or commas, in any mixture.
TOKEN_SEPARATOR = re.compile(r"[\s,]+")

# Plain decimal or scientific notation. float() alone would also accept
# "nan", "inf", "1_000" and surrounding whitespace.
NUMERIC_LITERAL = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?$")


class LineKind(Enum):
    """Classification of a single line of text."""

    SKIP = "skip"
    POINT = "point"
    FAILURE = "failure"


class ParsedLine(NamedTuple):
    kind: LineKind
    point: Optional[DataPoint] = None


SKIPPED = ParsedLine(LineKind.SKIP)
FAILED = ParsedLine(LineKind.FAILURE)


def parse_number(token):
    """Parse a finite float from a decimal/scientific literal, or return None."""
    if not NUMERIC_LITERAL.match(token):
        return None
    value = float(token)
    # Literals such as 1e999 overflow to infinity
    if not math.isfinite(value):
        return None
    return value


class NumericLineParser:
    """Classifies lines as comment/blank, (x, y) data point, or failure."""

    def __init__(self, comment_prefixes: Sequence[str] = DEFAULT_COMMENT_PREFIXES):
        self.comment_prefixes = tuple(comment_prefixes)

    def is_skippable(self, stripped: str) -> bool:
        """Return True for blank lines and comment lines."""
        if not stripped:
            return True
        return bool(self.comment_prefixes) and stripped.startswith(
            self.comment_prefixes
        )

    def tokenize(self, stripped: str):
        return [token for token in TOKEN_SEPARATOR.split(stripped) if token]

    def parse(self, line: str) -> ParsedLine:
        """
        Parse one line of text.

        A line succeeds only when it holds exactly two numeric tokens; the
        first becomes x and the second y. Blank and comment lines are
        skipped rather than counted as failures.
        """
        stripped = line.strip()
        if self.is_skippable(stripped):
            return SKIPPED

        tokens = self.tokenize(stripped)
        if len(tokens) != 2:
            return FAILED

        x = parse_number(tokens[0])
        if x is None:
            return FAILED
        y = parse_number(tokens[1])
        if y is None:
            return FAILED

        return ParsedLine(LineKind.POINT, DataPoint(x, y))
