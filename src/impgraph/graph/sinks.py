"""Sink classification and node sizing.

A sink is a terminal configuration output: a node in one of the output
categories that depends on nothing else. Sinks are drawn large and labeled;
every other node is sized from its value.
"""

from __future__ import annotations

import math
from collections.abc import Collection

from impgraph.model import Node

SINK_GROUPS: frozenset[str] = frozenset({
    "outputs.nixosConfigurations",
    "outputs.homeConfigurations",
})

SINK_RADIUS = 20
SINK_WEIGHT = 12
VALUE_OFFSET = 2
VALUE_SCALE = 4
HOVER_PADDING = 8


def is_sink(node: Node, has_outgoing: Collection[str], sink_groups: Collection[str] = SINK_GROUPS) -> bool:
    """True if ``node`` is an output category node with no outgoing edges."""
    return node.group in sink_groups and node.id not in has_outgoing


def classify_sinks(
    nodes: Collection[Node],
    has_outgoing: Collection[str],
    sink_groups: Collection[str] = SINK_GROUPS,
) -> set[str]:
    """Return ids of every sink node."""
    return {node.id for node in nodes if is_sink(node, has_outgoing, sink_groups)}


def node_radius(val: float, sink: bool) -> float:
    """Canvas radius: fixed for sinks, ``sqrt(val + 2) * 4`` (floored at 0) otherwise."""
    if sink:
        return SINK_RADIUS
    # Values below -2 draw as a point
    return math.sqrt(max(val + VALUE_OFFSET, 0)) * VALUE_SCALE


def node_weight(val: float, sink: bool) -> float:
    """Value passed to force-graph's ``nodeVal``."""
    return SINK_WEIGHT if sink else val + VALUE_OFFSET


def pointer_radius(val: float, sink: bool) -> float:
    """Hit-test radius, slightly larger than the drawn node."""
    return node_radius(val, sink) + HOVER_PADDING


def node_tooltip(node: Node, sink: bool) -> str | None:
    """Hover tooltip; sinks carry a canvas label instead."""
    if sink:
        return None
    return node.name.replace("\n", "<br>")


def node_label(node: Node, sink: bool) -> str | None:
    """Text drawn inside the node (sinks only)."""
    return node.first_line if sink else None
