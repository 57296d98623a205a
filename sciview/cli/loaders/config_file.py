"""YAML config file loading."""

import argparse
import logging
from pathlib import Path

import yaml

from ...interface.state.bookmark import config_dir

logger = logging.getLogger("sciview.cli")

CONFIG_FILE_NAME = "config.yml"

# Options that only make sense on the command line.
CLI_ONLY = {"config", "directory", "help"}


def default_config_path(directory=None):
    return Path(directory or config_dir()) / CONFIG_FILE_NAME


class ConfigFileLoader:
    """
    Loads option defaults from a YAML mapping and applies them to parsed
    arguments. Keys are option names with either hyphens or underscores
    (``chart-style`` or ``chart_style``). Unknown keys and invalid values are
    logged and ignored.
    """

    def __init__(self, path=None, directory=None):
        self.explicit = path is not None
        self.path = Path(path) if path is not None else default_config_path(directory)
        self.config = {}

    def load(self):
        """Read the config file; returns an empty mapping when there is none."""
        if not self.path.exists():
            if self.explicit:
                logger.warning("Config file %s does not exist", self.path)
            return {}

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            logger.warning("Failed to load config file %s: %s", self.path, e)
            return {}

        if data is None:
            return {}
        if not isinstance(data, dict):
            logger.warning(
                "Ignoring config file %s: expected a mapping, got %s",
                self.path,
                type(data).__name__,
            )
            return {}

        self.config = data
        return self.config

    def apply(self, parser, args, explicitly_provided=None):
        """
        Set every valid config value on ``args`` unless the user gave that
        option on the command line.
        """
        if explicitly_provided is None:
            explicitly_provided = set()

        actions = {
            action.dest: action
            for action in parser._actions
            if action.dest not in CLI_ONLY
        }

        for key, value in self.config.items():
            dest = str(key).replace("-", "_")
            action = actions.get(dest)
            if action is None:
                logger.warning("Unknown option %r in config file %s", key, self.path)
                continue
            if dest in explicitly_provided:
                continue  # User override takes precedence

            try:
                value = self._coerce(action, value)
            except (TypeError, ValueError, argparse.ArgumentTypeError) as e:
                logger.warning("Invalid value for %r in config file: %s", key, e)
                continue

            setattr(args, dest, value)

        return args

    @staticmethod
    def _coerce(action, value):
        if isinstance(action, (argparse._StoreTrueAction, argparse._StoreFalseAction)):
            if not isinstance(value, bool):
                raise ValueError(f"expected true or false, got {value!r}")
            return value

        if isinstance(action, argparse._AppendAction):
            values = value if isinstance(value, list) else [value]
            if action.type is not None:
                values = [action.type(item) for item in values]
            return values

        if action.type is not None:
            value = action.type(value)
        if action.choices is not None and value not in action.choices:
            choices = ", ".join(str(c) for c in action.choices)
            raise ValueError(f"{value!r} is not one of {choices}")
        return value
