"""Stable, distinct colors for open-ended sets of categorical keys."""

from .colors import (
    DEFAULT_PALETTE,
    INTERPOLATORS,
    hex_to_rgb,
    interpolate_rgb_basis,
    interpolate_rgb_basis_closed,
    rgb_to_hex,
)
from .config import Config
from .ruler import RulerNumbers, candidates_at
from .scheme import ColorRuler
from .session import ColorSession

__all__ = [
    'DEFAULT_PALETTE',
    'INTERPOLATORS',
    'ColorRuler',
    'ColorSession',
    'Config',
    'RulerNumbers',
    'candidates_at',
    'hex_to_rgb',
    'interpolate_rgb_basis',
    'interpolate_rgb_basis_closed',
    'rgb_to_hex',
]
