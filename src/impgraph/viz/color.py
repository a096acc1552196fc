"""Color parsing, interpolation and palette resolution."""

from __future__ import annotations

import logging
import math
import re
from collections.abc import Iterable, Mapping
from typing import Any, NamedTuple

from impgraph.viz.styles import DEFAULT_COLOR

logger = logging.getLogger(__name__)

_NUMBER_RE = re.compile(r"[\d.]+")


class RGBA(NamedTuple):
    r: float
    g: float
    b: float
    a: float = 1.0

    def __str__(self) -> str:
        return format_rgba(self)


def _round_half_up(x: float) -> int:
    # Canvas-side rounding is Math.round, which rounds .5 up for negatives too
    return math.floor(x + 0.5)


def parse_color(color: str) -> RGBA:
    """Parse ``rgb()``/``rgba()`` or hex notation into components.

    Functional notation is read by pulling out the numbers in order, so
    ``"rgba(255, 87, 34, 0.5)"`` and ``"rgba(255,87,34,.5)"`` are equivalent.
    A missing alpha means fully opaque.
    """
    color = color.strip()
    if color.startswith("#"):
        digits = color[1:]
        if len(digits) in (3, 4):
            digits = "".join(ch * 2 for ch in digits)
        channels = [int(digits[i : i + 2], 16) for i in range(0, len(digits), 2)]
        alpha = channels[3] / 255 if len(channels) == 4 else 1.0
        return RGBA(channels[0], channels[1], channels[2], alpha)

    numbers = [float(n) for n in _NUMBER_RE.findall(color)]
    if len(numbers) < 3:
        raise ValueError(f"Cannot parse color {color!r}")
    return RGBA(*numbers[:4])


def format_rgba(color: RGBA) -> str:
    """Render as ``rgba(r,g,b,a)`` with integer channels and two-decimal alpha."""
    r, g, b, a = color
    return f"rgba({_round_half_up(r)},{_round_half_up(g)},{_round_half_up(b)},{a:.2f})"


def lerp_rgba(a: RGBA, b: RGBA, t: float) -> RGBA:
    """Componentwise linear blend, unrounded."""
    return RGBA(*(x + (y - x) * t for x, y in zip(a, b)))


def lerp_color(a: str, b: str, t: float) -> str:
    """Blend color strings ``a`` -> ``b`` by ``t`` in [0, 1].

    Example:
        >>> lerp_color("rgba(255,255,255,0.4)", "rgba(255,87,34,1)", 0.5)
        'rgba(255,171,145,0.70)'
    """
    return format_rgba(lerp_rgba(parse_color(a), parse_color(b), t))


def is_valid_color(value: Any) -> bool:
    """True for any non-empty string.

    The canvas accepts every CSS color syntax (names, hex, ``rgb()``,
    ``hsl()``, ...), so entries are passed through rather than parsed.
    """
    return isinstance(value, str) and bool(value.strip())


def resolve_color(
    palette: Mapping[str, Any],
    group: str,
    default: str = DEFAULT_COLOR,
) -> str:
    """Palette color for ``group``, or ``default`` if absent or malformed."""
    color = palette.get(group)
    if color is None or not is_valid_color(color):
        return default
    return color.strip()


def resolve_palette(
    palette: Mapping[str, Any],
    groups: Iterable[str],
    default: str = DEFAULT_COLOR,
) -> dict[str, str]:
    """Resolve a color for every group, warning about malformed entries."""
    resolved = {}
    for group in groups:
        color = palette.get(group)
        if color is not None and not is_valid_color(color):
            logger.warning("Palette entry for %r is not a color (%r); using %s", group, color, default)
        resolved[group] = resolve_color(palette, group, default)
    return resolved
