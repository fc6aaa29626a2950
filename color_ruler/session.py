"""Process-wide color session.

Build one ColorSession at process start and pass it to every call site that
needs shared colors. It lives as long as the process; nothing is persisted,
so a restart begins with an empty color map.
"""

import logging

from .config import Config
from .scheme import ColorRuler


logger = logging.getLogger(__name__)


class ColorSession:
    """Shared ColorRuler built from configuration, with no initial keys."""

    def __init__(self, config: Config = None):
        self.config = config if config is not None else Config()
        self.ruler = ColorRuler(
            interpolator=self.config.build_interpolator(),
            base=self.config.base,
        )

    @classmethod
    def start(cls, config: Config = None) -> 'ColorSession':
        session = cls(config)
        logger.debug("Color session started (interpolation=%s, base=%d)",
                     session.config.interpolation, session.config.base)
        return session

    def get_color(self, item):
        return self.ruler.get_color(item)

    def colors(self):
        return self.ruler.colors()
