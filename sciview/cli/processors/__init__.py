"""Argument processors and config builders."""

from .args import ArgumentProcessor
from .config import ConfigBuilder

__all__ = ["ArgumentProcessor", "ConfigBuilder"]
