"""Argument processing."""

import sys


class ArgumentProcessor:
    """Helpers for inspecting the raw command line."""

    @staticmethod
    def get_explicitly_provided(parser, argv=None):
        """
        Determine which options the user gave on the command line.

        Args:
            parser: The parser the arguments belong to
            argv: Command line arguments (defaults to sys.argv)

        Returns:
            set: Destination names of the explicitly provided options
        """
        if argv is None:
            argv = sys.argv[1:]  # Skip script name

        option_dests = {}
        for action in parser._actions:
            for option in action.option_strings:
                option_dests[option] = action.dest

        explicitly_provided = set()
        for arg in argv:
            if arg == "--":
                break
            if not arg.startswith("--"):
                continue
            # Handle --arg=value format
            option = arg.split("=", 1)[0]
            if option in option_dests:
                explicitly_provided.add(option_dests[option])

        return explicitly_provided
