"""Animated hover highlighting.

Every node and link carries an intensity in [0, 1] that eases toward a
binary target. Targets are set by the current hover focus; intensities move
a fixed fraction of the remaining distance each frame and snap to the target
once close enough, so they always settle.

Node entities are keyed by node id, link entities by link index.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from impgraph.graph.core import RegistryGraph


def step_toward(current: float, target: float, rate: float, threshold: float) -> float:
    """One easing step; returns ``target`` exactly once within ``threshold``."""
    nxt = current + (target - current) * rate
    if abs(nxt - target) < threshold:
        return target
    return nxt


@dataclass
class HighlightState:
    value: float = 0.0
    target: float = 0.0

    @property
    def settled(self) -> bool:
        return self.value == self.target


class HighlightAnimator:
    """Owns highlight state for one graph.

    Args:
        graph: Indexed registry graph
        rate: Fraction of the remaining distance covered per tick
        threshold: Residual below which the value snaps to its target

    Example:
        >>> animator = HighlightAnimator(graph)
        >>> animator.hover_node("a")
        >>> animator.tick()
        >>> animator.node_value("a")
        0.15
    """

    def __init__(self, graph: RegistryGraph, *, rate: float = 0.15, threshold: float = 0.01) -> None:
        self.graph = graph
        self.rate = rate
        self.threshold = threshold
        self.nodes: dict[str, HighlightState] = {node.id: HighlightState() for node in graph.nodes}
        self.links: dict[int, HighlightState] = {i: HighlightState() for i in range(len(graph.links))}

    # ------------------------------------------------------------------
    # Targets
    # ------------------------------------------------------------------

    def clear(self) -> None:
        """Drop every target to 0 (pointer left all nodes and links)."""
        for state in self.nodes.values():
            state.target = 0.0
        for state in self.links.values():
            state.target = 0.0

    def _focus(self, node_ids: Iterable[str], link_ids: Iterable[int]) -> None:
        self.clear()
        for node_id in node_ids:
            self.nodes[node_id].target = 1.0
        for link_id in link_ids:
            self.links[link_id].target = 1.0

    def hover_node(self, node_id: str | None) -> None:
        """Focus a node, its neighbors and its incident links."""
        if node_id is None:
            self.clear()
            return
        self._focus(
            [node_id, *self.graph.neighbors(node_id)],
            self.graph.incident_links(node_id),
        )

    def hover_link(self, link_id: int | None) -> None:
        """Focus a link and both of its endpoints."""
        if link_id is None:
            self.clear()
            return
        link = self.graph.links[link_id]
        endpoints = [n for n in (link.source, link.target) if n in self.graph]
        self._focus(endpoints, [link_id])

    @property
    def highlighted_nodes(self) -> set[str]:
        return {node_id for node_id, state in self.nodes.items() if state.target == 1.0}

    @property
    def highlighted_links(self) -> set[int]:
        return {link_id for link_id, state in self.links.items() if state.target == 1.0}

    # ------------------------------------------------------------------
    # Animation
    # ------------------------------------------------------------------

    def tick(self) -> None:
        """Advance every intensity one frame toward its target."""
        for state in (*self.nodes.values(), *self.links.values()):
            state.value = step_toward(state.value, state.target, self.rate, self.threshold)

    @property
    def settled(self) -> bool:
        return all(s.settled for s in self.nodes.values()) and all(s.settled for s in self.links.values())

    def node_value(self, node_id: str) -> float:
        return self.nodes[node_id].value

    def link_value(self, link_id: int) -> float:
        return self.links[link_id].value
