"""Render session: the state behind one interactive graph view.

Mirrors what the browser client keeps per page: the hover pointer, highlight
animation, pinned node positions and the animation clock. Event handlers
are plain methods and ``tick`` is the per-frame callback; the host calls
them from a single stream, so nothing here is synchronized.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from impgraph.graph.core import RegistryGraph
from impgraph.viz.color import lerp_color, resolve_palette
from impgraph.viz.dash import dash_at
from impgraph.viz.highlight import HighlightAnimator
from impgraph.viz.legend import LegendEntry, build_legend, group_label
from impgraph.viz.styles import DEFAULT_STYLE, RenderStyle

INFO_TITLE = "imp Registry"
INFO_HINT = "Hover over nodes to highlight connections"


@dataclass(frozen=True)
class InfoPanel:
    """Contents of the info panel next to the canvas."""

    title: str
    cluster: str | None = None
    detail: str | None = None

    @property
    def is_placeholder(self) -> bool:
        return self.cluster is None


PLACEHOLDER_PANEL = InfoPanel(INFO_TITLE)


@dataclass(frozen=True)
class Ring:
    radius: float
    color: str


@dataclass
class Frame:
    """Snapshot produced by one ``tick``."""

    elapsed_ms: float
    line_dash: list[float]
    node_highlight: dict[str, float] = field(default_factory=dict)
    link_highlight: dict[int, float] = field(default_factory=dict)


class RenderSession:
    """Hover/drag event handling and the frame loop for one graph.

    Args:
        graph: Indexed registry graph
        palette: Group -> color mapping (malformed entries use the default)
        style: Visual constants
        start_ms: Clock value at session start; dash phase is measured from it
    """

    def __init__(
        self,
        graph: RegistryGraph,
        palette: Mapping[str, Any] | None = None,
        *,
        style: RenderStyle = DEFAULT_STYLE,
        start_ms: float = 0.0,
    ) -> None:
        self.graph = graph
        self.style = style
        self.start_ms = start_ms
        self.colors = resolve_palette(palette or {}, graph.groups, style.default_color)
        self.animator = HighlightAnimator(
            graph, rate=style.transition_speed, threshold=style.snap_threshold
        )
        self.hover_node: str | None = None
        self.info = PLACEHOLDER_PANEL
        self.fixed_positions: dict[str, tuple[float, float]] = {}
        self.line_dash: list[float] = [style.dash_length, style.gap_length]

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------

    def on_node_hover(self, node_id: str | None) -> None:
        self.animator.hover_node(node_id)
        self.hover_node = node_id
        if node_id is None:
            self.info = PLACEHOLDER_PANEL
            return
        node = self.graph.node(node_id)
        self.info = InfoPanel(
            title=node.name.replace("\n", ", "),
            cluster=group_label(node.group),
            detail=node.name,
        )

    def on_link_hover(self, link_id: int | None) -> None:
        self.animator.hover_link(link_id)

    def on_node_drag_end(self, node_id: str, x: float, y: float) -> None:
        """Pin a dragged node where it was dropped."""
        self.fixed_positions[node_id] = (x, y)

    # ------------------------------------------------------------------
    # Frame loop
    # ------------------------------------------------------------------

    def tick(self, now_ms: float) -> Frame:
        """Advance highlights and recompute the dash pattern."""
        self.animator.tick()
        elapsed = now_ms - self.start_ms
        style = self.style
        self.line_dash = dash_at(elapsed, style.dash_length, style.gap_length, style.dash_period_ms)
        return Frame(
            elapsed_ms=elapsed,
            line_dash=list(self.line_dash),
            node_highlight={k: s.value for k, s in self.animator.nodes.items()},
            link_highlight={k: s.value for k, s in self.animator.links.items()},
        )

    # ------------------------------------------------------------------
    # Styling callbacks
    # ------------------------------------------------------------------

    def node_color(self, node_id: str) -> str:
        return self.colors.get(self.graph.node(node_id).group, self.style.default_color)

    def ring(self, node_id: str) -> Ring | None:
        """Highlight ring behind a node, or None while it is faded out."""
        hl = self.animator.node_value(node_id)
        if hl <= self.style.ring_threshold:
            return None
        view = self.graph.view(node_id)
        rgb = self.style.hover_ring_rgb if node_id == self.hover_node else self.style.neighbor_ring_rgb
        r, g, b = rgb
        return Ring(
            radius=view.radius * (1 + self.style.ring_growth * hl),
            color=f"rgba({r},{g},{b},{hl})",
        )

    def link_width(self, link_id: int) -> float:
        return self.style.link_width + self.animator.link_value(link_id) * self.style.link_width_boost

    def link_color(self, link_id: int) -> str:
        return lerp_color(self.style.link_color, self.style.accent_color, self.animator.link_value(link_id))

    def arrow_color(self, link_id: int) -> str:
        return lerp_color(self.style.arrow_color, self.style.accent_color, self.animator.link_value(link_id))

    def legend(self) -> list[LegendEntry]:
        return build_legend(self.graph.nodes, self.colors, self.style.default_color)
