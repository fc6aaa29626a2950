"""Lazy map of categorical keys to stable, distinct colors.

A ColorRuler hands out a color for any key, on demand, and never changes a
color once handed out. New keys get fresh positions from RulerNumbers, which
refines the scale instead of stretching it, so earlier positions (and
therefore earlier colors) are never disturbed.

Example::

    ruler = ColorRuler()
    ruler.add_color('Jane', 0.25)   # '#...' at scale 0.25
    ruler.get_color('Smith')        # assigned automatically
    ruler.colors()                  # {'Jane': '#...', 'Smith': '#...'}

    # Initial keys and a custom interpolator are both optional
    local = ColorRuler(['Jane', 'Smith'], interpolate_rgb_basis_closed())

Prefer get_color over add_color: explicit scales can collide with positions
the ruler hands out.
"""

import logging
import threading
from typing import Callable, Dict, Hashable, Iterable, Optional

from .colors import interpolate_rgb_basis
from .ruler import DEFAULT_BASE, RulerNumbers


logger = logging.getLogger(__name__)


class ColorRuler:
    """Color space for an open-ended set of categorical keys."""

    def __init__(self, items: Optional[Iterable[Hashable]] = None,
                 interpolator: Optional[Callable] = None,
                 base: int = DEFAULT_BASE):
        """Initialize the ruler.

        Args:
            items: Keys to color up front. They are spread evenly over the
                scale, in order.
            interpolator: Function mapping a scale in [0, 1] to a color.
                Uses a B-spline over DEFAULT_PALETTE if None.
            base: Radix for the underlying RulerNumbers.

        Raises:
            ValueError: If base is invalid.
        """
        # Duplicates keep the position of their first occurrence.
        keys = list(dict.fromkeys(items or ()))

        self.interpolator = interpolator if interpolator is not None else interpolate_rgb_basis()
        self._color_map: Dict[Hashable, object] = {}
        self._lock = threading.RLock()

        # Force the first len(keys) numbers so they can be handed out sorted.
        self.numbers = RulerNumbers(len(keys), force=True, base=base)
        for key, scale in zip(keys, self.numbers.sequence):
            self.add_color(key, scale)

    def add_color(self, item: Hashable, scale):
        """Color item at an explicit scale, replacing any previous color.

        Args:
            item: Key to color.
            scale: Position in [0, 1].

        Returns:
            The color produced by the interpolator.

        Raises:
            ValueError: If scale is outside [0, 1].
        """
        if not 0 <= scale <= 1:
            raise ValueError(f"Scale must be within [0, 1]: {scale!r}")

        color = self.interpolator(float(scale))
        with self._lock:
            self._color_map[item] = color
        logger.debug("Assigned %r -> %s at scale %s", item, color, scale)
        return color

    def get_color(self, item: Hashable):
        """Return the color for item, assigning a fresh one if needed."""
        with self._lock:
            if item in self._color_map:
                return self._color_map[item]
            return self.add_color(item, next(self.numbers))

    def colors(self) -> Dict[Hashable, object]:
        """Snapshot of every key -> color assigned so far."""
        with self._lock:
            return dict(self._color_map)

    def __getitem__(self, item: Hashable):
        with self._lock:
            return self._color_map[item]

    def __contains__(self, item: Hashable) -> bool:
        with self._lock:
            return item in self._color_map

    def __len__(self) -> int:
        with self._lock:
            return len(self._color_map)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(keys={len(self._color_map)}, numbers={self.numbers!r})"
