"""Color palette and interpolation functions for the color ruler."""

import string
from typing import Callable, List, Sequence, Tuple

from coloraide import Color


DEFAULT_PALETTE = [
    '#048845',  # green
    '#8490C8',  # periwinkle
    '#BF61A5',  # orchid
    '#EE3124',  # red
    '#FCD700',  # gold
    '#5555FF',  # blue
    '#9ACA3C',  # lime
    '#9F78AC',  # lavender
    '#F88084',  # salmon
    '#F5A4C7',  # pink
    '#CEE6C1',  # mint
    '#FFFF00',  # yellow
    '#6FC7B6',  # teal
    '#D5A768',  # tan
    '#D4D4D4',  # grey
]

Interpolator = Callable[[float], str]


def hex_to_rgb(color: str) -> Tuple[int, int, int]:
    """Parse a hex color string.

    Args:
        color: '#rrggbb' or '#rgb' (leading '#' optional)

    Returns:
        (r, g, b) tuple, 0-255

    Raises:
        ValueError: If color is not a valid hex color.
    """
    if not isinstance(color, str):
        raise ValueError(f"Invalid hex color: {color!r}")

    digits = color.strip().lstrip('#')
    if len(digits) == 3:
        digits = ''.join(c * 2 for c in digits)
    if len(digits) != 6 or not all(c in string.hexdigits for c in digits):
        raise ValueError(f"Invalid hex color: {color!r}")

    value = int(digits, 16)
    return (value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF


def rgb_to_hex(r: float, g: float, b: float) -> str:
    """Format channels as '#rrggbb', rounding and clamping each to 0-255."""
    return _to_hex(Color('srgb', [c / 255 for c in (r, g, b)]))


def _parse_palette(colors: Sequence[str]) -> List[Color]:
    if not colors:
        raise ValueError("Palette must contain at least one color")
    # Validate strictly as hex first; Color() would also accept CSS names.
    return [Color('srgb', [v / 255 for v in hex_to_rgb(c)]) for c in colors]


def _to_hex(color: Color) -> str:
    return color.to_string(hex=True, fit='clip')


def interpolate_rgb_basis(colors: Sequence[str] = None) -> Interpolator:
    """Build a scale -> color function from a palette.

    Each sRGB channel follows a uniform cubic B-spline through the palette,
    so scale 0 and scale 1 land exactly on the first and last color and the
    colors in between are blended smoothly. Scales outside [0, 1] are clamped.

    Args:
        colors: List of hex colors. Uses DEFAULT_PALETTE if None.

    Returns:
        Function mapping a scale in [0, 1] to a hex color string.
    """
    if colors is None:
        colors = DEFAULT_PALETTE
    palette = _parse_palette(colors)
    if len(palette) == 1:
        constant = _to_hex(palette[0])
        return lambda t: constant

    spline = Color.interpolate(palette, space='srgb', method='bspline')

    def interpolator(t) -> str:
        return _to_hex(spline(float(t)))

    return interpolator


def interpolate_rgb_basis_closed(colors: Sequence[str] = None) -> Interpolator:
    """Cyclical variant of interpolate_rgb_basis; scale 0 and 1 share a color."""
    if colors is None:
        colors = DEFAULT_PALETTE
    palette = _parse_palette(colors)
    if len(palette) == 1:
        constant = _to_hex(palette[0])
        return lambda t: constant

    # Wrap the palette so every inner segment sees its cyclic neighbours,
    # then map [0, 1) onto the n inner segments of the padded spline.
    n = len(palette)
    wrapped = [palette[-1]] + palette + palette[:2]
    spline = Color.interpolate(wrapped, space='srgb', method='bspline')
    span = len(wrapped) - 1

    def interpolator(t) -> str:
        t = float(t) % 1
        return _to_hex(spline((1 + t * n) / span))

    return interpolator


INTERPOLATORS = {
    'basis': interpolate_rgb_basis,
    'basis_closed': interpolate_rgb_basis_closed,
}
