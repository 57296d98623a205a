"""Logging CLI arguments."""

from pathlib import Path


class LoggingGroup:
    """Logging and diagnostics arguments."""

    name = "logging"

    @classmethod
    def add_arguments(cls, parser):
        """Add logging arguments to the parser."""
        group = parser.add_argument_group(cls.name)

        group.add_argument(
            "--log-file",
            type=Path,
            default=None,
            help="Also write log records to this file",
        )

        group.add_argument(
            "--debug",
            action="store_true",
            default=False,
            help="Log debug records",
        )
