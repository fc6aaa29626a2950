"""Configuration management for the color ruler."""

import configparser
import logging
import os
from pathlib import Path
from typing import List

from .colors import DEFAULT_PALETTE, INTERPOLATORS


logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = 'COLOR_RULER_CONFIG'

DEFAULT_CONFIG = {
    'colors': {
        'palette': ','.join(DEFAULT_PALETTE),
        'interpolation': 'basis',
    },
    'ruler': {
        'base': '2',
    },
}


def default_config_path() -> Path:
    """Config location: $COLOR_RULER_CONFIG, else ~/.config/color_ruler/color_ruler.conf."""
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path)
    return Path.home() / '.config/color_ruler/color_ruler.conf'


class Config:
    """Configuration manager for the color ruler."""

    def __init__(self, config_path: Path = None):
        """Initialize config from file or defaults.

        Args:
            config_path: Path to config file. Uses default location if None.
        """
        if config_path is None:
            config_path = default_config_path()

        self.config_path = Path(config_path)
        self.parser = configparser.ConfigParser()

        # Load defaults
        self.parser.read_dict(DEFAULT_CONFIG)

        # Override with user config if exists
        if self.config_path.exists():
            self.parser.read(self.config_path)
            logger.debug("Loaded config from %s", self.config_path)

    def get_color_palette(self) -> List[str]:
        """Get list of hex colors from config."""
        return [c for c in self.get_list('colors', 'palette') if c]

    def get_int(self, section: str, key: str) -> int:
        """Get integer value from config."""
        return self.parser.getint(section, key)

    def get_str(self, section: str, key: str) -> str:
        """Get string value from config."""
        return self.parser.get(section, key)

    def get_list(self, section: str, key: str) -> List[str]:
        """Get comma-separated list from config."""
        value = self.parser.get(section, key)
        return [item.strip() for item in value.split(',')]

    @property
    def interpolation(self) -> str:
        return self.get_str('colors', 'interpolation').strip()

    @property
    def base(self) -> int:
        return self.get_int('ruler', 'base')

    def build_interpolator(self):
        """Build the configured scale -> color function.

        Raises:
            ValueError: If the interpolation name or palette is invalid.
        """
        name = self.interpolation
        if name not in INTERPOLATORS:
            raise ValueError(
                f"Unknown interpolation: {name!r} "
                f"(expected one of {', '.join(sorted(INTERPOLATORS))})"
            )
        return INTERPOLATORS[name](self.get_color_palette())
