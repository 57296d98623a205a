"""Configuration building for ViewerConfig."""

import dataclasses
from pathlib import Path

from ...configuration import ViewerConfig
from ...interface.state.bookmark import load_last_directory


class ConfigBuilder:
    """Builds a ViewerConfig from parsed arguments."""

    @staticmethod
    def resolve_start_dir(args, cwd=None):
        """
        The directory given on the command line, else the remembered one,
        else the current directory.
        """
        cwd = Path(cwd) if cwd is not None else Path.cwd()
        directory = getattr(args, "directory", None)
        if directory is not None:
            return (cwd / directory).resolve()

        if getattr(args, "remember_directory", True):
            last_dir = load_last_directory(getattr(args, "config_dir", None))
            if last_dir is not None:
                return last_dir

        return cwd

    @staticmethod
    def create_viewer_config(args, cwd=None):
        """
        Create a ViewerConfig from CLI arguments. Arguments are mapped onto
        the config's fields by name; anything else is ignored.
        """
        field_names = {f.name for f in dataclasses.fields(ViewerConfig)}
        config_kwargs = {
            name: value
            for name, value in vars(args).items()
            if name in field_names and value is not None
        }

        config_kwargs["start_dir"] = ConfigBuilder.resolve_start_dir(args, cwd)
        config_kwargs["startup_dir"] = Path(cwd) if cwd is not None else Path.cwd()

        return ViewerConfig(**config_kwargs)
