"""Lazy ruler numbers: an unbounded, duplicate-free sequence of rationals in (0, 1).

At depth ``d`` the candidates for base ``b`` are ``n / b**d`` for
``n = 1 .. b**d - 1``. Every candidate at depth ``d`` is also a candidate at
depth ``d + 1`` (``n / b**d == n*b / b**(d+1)``), so raising the depth only
inserts new positions between the existing ones. Values already handed out
stay valid forever.

See https://en.wikipedia.org/wiki/Dyadic_rational for the base 2 case.
"""

import logging
from fractions import Fraction
from typing import Iterable, List, Optional


logger = logging.getLogger(__name__)

DEFAULT_BASE = 2
DEFAULT_DEPTH = 2
DEFAULT_SEED = frozenset({Fraction(0), Fraction(1)})


def validate_base(base) -> int:
    """Validate the radix used to enumerate fractions.

    Args:
        base: Candidate base.

    Returns:
        The base, unchanged.

    Raises:
        ValueError: If base is not an integer >= 2.
    """
    if isinstance(base, bool) or not isinstance(base, int) or base < 2:
        raise ValueError(f"Invalid base: {base!r} (must be an integer >= 2)")
    return base


def candidates_at(base: int, depth: int) -> List[Fraction]:
    """Return every candidate position at a given depth, ascending."""
    validate_base(base)
    if depth < 1:
        raise ValueError(f"Invalid depth: {depth!r} (must be >= 1)")
    denominator = base ** depth
    return [Fraction(n, denominator) for n in range(1, denominator)]


def estimate_depth(initial_size: int, base: int) -> int:
    """Smallest depth whose denominator covers initial_size values.

    Falls back to DEFAULT_DEPTH when no size hint is given.
    """
    if initial_size <= 0:
        return DEFAULT_DEPTH
    depth = 1
    while base ** depth < initial_size:
        depth += 1
    return depth


class RulerNumbers:
    """Pull-based iterator over fresh ruler numbers.

    Each ``next()`` walks the current depth from the saved numerator cursor and
    returns the first value not seen yet. When the depth is exhausted the
    depth is raised by one and the cursor restarts at numerator 1.

    The iterator never ends and cannot be rewound; build a new instance to
    start over.
    """

    def __init__(self, initial_size: int = 0, force: bool = False,
                 base: int = DEFAULT_BASE,
                 seed: Optional[Iterable] = None):
        """Initialize the generator.

        Args:
            initial_size: Size hint used to pick the starting depth.
            force: Pull ``initial_size`` values immediately.
            base: Radix of the denominators (>= 2).
            seed: Values that must never be emitted. Defaults to {0, 1}.

        Raises:
            ValueError: If base or initial_size is invalid.
        """
        self._base = validate_base(base)
        if isinstance(initial_size, bool) or not isinstance(initial_size, int) or initial_size < 0:
            raise ValueError(f"Invalid initial_size: {initial_size!r}")

        self._depth = estimate_depth(initial_size, base)
        self._numerator = 1
        self._seen = set(DEFAULT_SEED if seed is None else (Fraction(v) for v in seed))
        self._emitted: List[Fraction] = []

        if initial_size and force:
            for _ in range(initial_size):
                next(self)

    @property
    def base(self) -> int:
        return self._base

    @property
    def depth(self) -> int:
        return self._depth

    @property
    def denominator(self) -> int:
        return self._base ** self._depth

    @property
    def sequence(self) -> List[Fraction]:
        """All values emitted so far, sorted ascending."""
        return sorted(self._emitted)

    def candidates(self, depth: Optional[int] = None) -> List[Fraction]:
        """Candidate positions at ``depth`` (current depth by default)."""
        return candidates_at(self._base, self._depth if depth is None else depth)

    def __iter__(self):
        return self

    def __next__(self) -> Fraction:
        while True:
            denominator = self._base ** self._depth
            while self._numerator < denominator:
                value = Fraction(self._numerator, denominator)
                self._numerator += 1
                if value not in self._seen:
                    self._seen.add(value)
                    self._emitted.append(value)
                    return value

            # Depth exhausted: every remaining slot was claimed at a coarser depth.
            self._depth += 1
            self._numerator = 1
            logger.debug("Ruler depth raised to %d (denominator %d)",
                         self._depth, self._base ** self._depth)

    def __len__(self) -> int:
        return len(self._emitted)

    def __contains__(self, value) -> bool:
        return value in self._seen

    def __repr__(self) -> str:
        return (f"{type(self).__name__}(base={self._base}, depth={self._depth}, "
                f"emitted={len(self._emitted)})")
