"""sciview CLI - modular command-line interface."""

import logging
import sys

from .core import CustomHelpFormatter, create_base_parser, setup_logging
from .groups import add_all_argument_groups, process_all_arguments
from .loaders import ConfigFileLoader
from .processors import ArgumentProcessor, ConfigBuilder

logger = logging.getLogger("sciview.cli")


def initialize_cli(argv=None):
    """
    Build the parser and parse arguments, with YAML config values filling
    in any option the user did not give explicitly.

    Returns:
        tuple: (parser, args)
    """
    if argv is None:
        argv = sys.argv[1:]

    parser = create_base_parser()
    add_all_argument_groups(parser)

    args = parser.parse_args(argv)

    explicitly_provided = ArgumentProcessor.get_explicitly_provided(parser, argv)
    config_loader = ConfigFileLoader(args.config, args.config_dir)
    config_loader.load()
    args = config_loader.apply(parser, args, explicitly_provided)

    args = process_all_arguments(args)
    return parser, args


def main(argv=None):
    """Console entry point."""
    from ..interface import FileViewer

    _, args = initialize_cli(argv)
    config = ConfigBuilder.create_viewer_config(args)
    setup_logging(config.log_file, config.debug)
    logger.debug("Starting in %s", config.start_dir)

    viewer = FileViewer(config)
    try:
        viewer.run()
    except KeyboardInterrupt:
        viewer.stop()
    return 0


__all__ = [
    "ArgumentProcessor",
    "ConfigBuilder",
    "ConfigFileLoader",
    "CustomHelpFormatter",
    "initialize_cli",
    "main",
]
