"""Parser creation and custom help formatting."""

import argparse
import shutil


def wrap_green(text):
    """Wrap text in ANSI green color codes."""
    return f"\033[92m{text}\033[00m"


class CustomHelpFormatter(argparse.HelpFormatter):
    """Help formatter that shows each option's type, choices and default."""

    def __init__(self, prog, indent_increment=2, max_help_position=30, width=None):
        if width is None:
            width = shutil.get_terminal_size().columns

        # Adjust max_help_position based on terminal width
        max_help_position = min(max_help_position, width // 3)

        super().__init__(prog, indent_increment, max_help_position, width)

    def _format_action_invocation(self, action):
        if not action.option_strings:
            return action.metavar or action.dest
        if action.nargs == 0:
            # It's a flag (like --debug)
            return ", ".join(action.option_strings)
        return f"{', '.join(action.option_strings)} <value>"

    def _get_help_string(self, action):
        help_text = action.help or ""

        if action.type is not None and hasattr(action.type, "__name__"):
            help_text = f"({wrap_green(action.type.__name__)}) {help_text}"
        elif isinstance(action, (argparse._StoreTrueAction, argparse._StoreFalseAction)):
            help_text = f"({wrap_green('bool')}) {help_text}"

        if action.choices is not None:
            choice_str = ", ".join(str(c) for c in action.choices)
            help_text = f"{help_text} (choices: {choice_str})"

        if action.default is not argparse.SUPPRESS and action.option_strings:
            help_text = f"{help_text} (default: {action.default})"

        return help_text


def create_base_parser(description="Terminal file viewer with inline charts"):
    """Create the base argument parser with custom formatting."""
    return argparse.ArgumentParser(
        prog="sciview",
        description=description,
        formatter_class=CustomHelpFormatter,
    )
