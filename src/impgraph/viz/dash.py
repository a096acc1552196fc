"""Traveling-dash animation for link strokes.

A four-entry line-dash pattern whose entries shift every frame, so a single
dash appears to slide along the link. The pattern always spans exactly one
``dash + gap`` period.
"""

from __future__ import annotations


def dash_phase(elapsed_ms: float, period_ms: float = 400) -> float:
    """Cyclic progress in [0, 1) for the time since the animation started."""
    return (elapsed_ms % period_ms) / period_ms


def dash_pattern(t: float, dash: float = 4, gap: float = 6) -> list[float]:
    """Line-dash pattern at phase ``t``.

    First half: the dash enters from the start while the trailing gap
    shrinks. Second half: the dash leaves from the start while the leading
    gap stays full.

    Example:
        >>> dash_pattern(0.0)
        [0, 0.0, 4, 6.0]
        >>> dash_pattern(0.5)
        [0.0, 6, 4.0, 0]
    """
    if t < 0.5:
        return [0, gap * t * 2, dash, gap * (1 - t * 2)]
    return [dash * (t - 0.5) * 2, gap, dash * (1 - (t - 0.5) * 2), 0]


def dash_at(elapsed_ms: float, dash: float = 4, gap: float = 6, period_ms: float = 400) -> list[float]:
    return dash_pattern(dash_phase(elapsed_ms, period_ms), dash, gap)
