"""Argument groups for CLI organization."""

from .chart import ChartGroup
from .detection import DetectionGroup
from .logging import LoggingGroup
from .viewer import ViewerGroup

# Registry of all argument groups
ARGUMENT_GROUPS = [
    ViewerGroup,
    ChartGroup,
    DetectionGroup,
    LoggingGroup,
]


def add_all_argument_groups(parser):
    """Add all registered argument groups to the parser."""
    for group_class in ARGUMENT_GROUPS:
        group_class.add_arguments(parser)


def process_all_arguments(args):
    """Process arguments through all groups that have processors."""
    for group_class in ARGUMENT_GROUPS:
        if hasattr(group_class, "process_args"):
            group_class.process_args(args)
    return args


__all__ = [
    "ARGUMENT_GROUPS",
    "add_all_argument_groups",
    "process_all_arguments",
    "ChartGroup",
    "DetectionGroup",
    "LoggingGroup",
    "ViewerGroup",
]
