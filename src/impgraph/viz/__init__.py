"""Visualization for registry graphs.

Usage:
    from impgraph.viz import visualize

    visualize(data, palette)                        # Jupyter widget
    visualize(data, palette, filepath="graph.html")  # Standalone page

Headless:
    session = RenderSession(graph, palette)
    session.on_node_hover("nixpkgs")
    frame = session.tick(now_ms)
"""

from impgraph.viz.color import lerp_color, resolve_color, resolve_palette
from impgraph.viz.dash import dash_at, dash_pattern, dash_phase
from impgraph.viz.highlight import HighlightAnimator
from impgraph.viz.html_generator import generate_graph_html, write_graph_html
from impgraph.viz.legend import LegendEntry, build_legend
from impgraph.viz.session import Frame, InfoPanel, RenderSession
from impgraph.viz.styles import DEFAULT_STYLE, RenderStyle
from impgraph.viz.widget import GraphWidget, visualize

__all__ = [
    "DEFAULT_STYLE",
    "Frame",
    "GraphWidget",
    "HighlightAnimator",
    "InfoPanel",
    "LegendEntry",
    "RenderSession",
    "RenderStyle",
    "build_legend",
    "dash_at",
    "dash_pattern",
    "dash_phase",
    "generate_graph_html",
    "lerp_color",
    "resolve_color",
    "resolve_palette",
    "visualize",
    "write_graph_html",
]
