"""Chart detection CLI arguments."""

from ...data.parser import DEFAULT_COMMENT_PREFIXES
from ..core.types import positive_int, ratio


class DetectionGroup:
    """Thresholds that decide whether a file gets a chart."""

    name = "detection"

    @classmethod
    def add_arguments(cls, parser):
        """Add detection arguments to the parser."""
        group = parser.add_argument_group(cls.name)

        group.add_argument(
            "--sample-size",
            type=positive_int,
            default=50,
            help="Number of data lines sampled from the top of a file",
        )

        group.add_argument(
            "--min-ratio",
            type=ratio,
            default=0.8,
            help="Fraction of sampled lines that must parse as two numbers",
        )

        group.add_argument(
            "--min-successes",
            type=positive_int,
            default=3,
            help="Minimum number of sampled lines that must parse",
        )

        group.add_argument(
            "--comment-prefix",
            dest="comment_prefixes",
            type=str,
            action="append",
            default=None,
            help="Line prefix treated as a comment; repeat for several (defaults to '#' and ';')",
        )

    @classmethod
    def process_args(cls, args):
        if not args.comment_prefixes:
            args.comment_prefixes = DEFAULT_COMMENT_PREFIXES
        else:
            args.comment_prefixes = tuple(p for p in args.comment_prefixes if p)
