"""Runtime configuration for the viewer."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Tuple

from .data.detector import DetectionConfig
from .data.parser import DEFAULT_COMMENT_PREFIXES


@dataclass
class ViewerConfig:
    """
    Every user-tunable setting, after CLI arguments and the YAML config file
    have been merged.

    ``start_dir`` is where the file tree opens (the remembered directory when
    there is one); ``startup_dir`` is the directory the viewer was launched
    from, which the ``.`` key returns to.
    """

    start_dir: Path = field(default_factory=Path.cwd)
    startup_dir: Optional[Path] = None
    use_nerd_fonts: bool = True
    show_chart: bool = True
    chart_style: str = "scatter"
    marker: str = "braille"
    sample_size: int = 50
    min_ratio: float = 0.8
    min_successes: int = 3
    comment_prefixes: Tuple[str, ...] = DEFAULT_COMMENT_PREFIXES
    background_threshold: int = 0
    recent_limit: int = 10
    refresh_interval: float = 0.1
    log_file: Optional[Path] = None
    debug: bool = False
    remember_directory: bool = True
    config_dir: Optional[Path] = None

    def __post_init__(self):
        self.start_dir = Path(self.start_dir)
        if self.startup_dir is None:
            self.startup_dir = self.start_dir
        self.comment_prefixes = tuple(self.comment_prefixes)

    def detection_config(self):
        return DetectionConfig(
            sample_size=self.sample_size,
            min_ratio=self.min_ratio,
            min_successes=self.min_successes,
            comment_prefixes=self.comment_prefixes,
        )
