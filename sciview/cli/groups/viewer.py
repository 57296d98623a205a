"""File browsing and display CLI arguments."""

from pathlib import Path

from ..core.types import positive_float, positive_int


class ViewerGroup:
    """Where the viewer starts and how it draws the file tree."""

    name = "viewer"

    @classmethod
    def add_arguments(cls, parser):
        """Add viewer arguments to the parser."""
        group = parser.add_argument_group(cls.name)

        group.add_argument(
            "directory",
            nargs="?",
            type=Path,
            default=None,
            help="Directory to open (defaults to the last visited directory)",
        )

        group.add_argument(
            "--config",
            type=Path,
            default=None,
            help="YAML file with default values for any of these options",
        )

        group.add_argument(
            "--config-dir",
            type=Path,
            default=None,
            help="Directory holding config.yml and the last-directory bookmark (defaults to $XDG_CONFIG_HOME/sci-file-viewer)",
        )

        group.add_argument(
            "--no-nerd-fonts",
            dest="use_nerd_fonts",
            action="store_false",
            default=True,
            help="Use plain ASCII file icons instead of Nerd Font glyphs",
        )

        group.add_argument(
            "--no-remember",
            dest="remember_directory",
            action="store_false",
            default=True,
            help="Neither restore nor save the last visited directory",
        )

        group.add_argument(
            "--recent-limit",
            type=positive_int,
            default=10,
            help="How many files the recent-files popup keeps",
        )

        group.add_argument(
            "--refresh-interval",
            type=positive_float,
            default=0.1,
            help="Seconds between screen refreshes while idle",
        )
