"""Jupyter widget for the registry graph."""

from __future__ import annotations

import html as html_module
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from impgraph.graph.core import RegistryGraph
from impgraph.model import RegistryData
from impgraph.viz.html_generator import generate_graph_html, write_graph_html
from impgraph.viz.session import INFO_TITLE
from impgraph.viz.styles import RenderStyle


class GraphWidget:
    """Iframe wrapper so the page renders inside notebook output cells.

    The force-graph canvas fills its iframe, so the size is fixed up front
    rather than estimated from the graph.
    """

    def __init__(self, html_content: str, width: int, height: int):
        self.html_content = html_content
        self.width = width
        self.height = height

    def _repr_html_(self) -> str:
        """Return HTML representation for Jupyter display."""
        escaped_html = html_module.escape(self.html_content, quote=True)
        return (
            f'<iframe srcdoc="{escaped_html}" '
            f'width="{self.width}" height="{self.height}" frameborder="0" '
            f'style="border: none; width: {self.width}px; max-width: 100%; '
            f'height: {self.height}px; display: block; margin: 0 auto; border-radius: 8px;" '
            f'sandbox="allow-scripts allow-same-origin">'
            f"</iframe>"
        )


def _as_graph(data: RegistryGraph | RegistryData | Mapping[str, Any]) -> RegistryGraph:
    if isinstance(data, RegistryGraph):
        return data
    if isinstance(data, RegistryData):
        return RegistryGraph(data)
    return RegistryGraph(RegistryData.from_dict(dict(data)))


def visualize(
    data: RegistryGraph | RegistryData | Mapping[str, Any],
    palette: Mapping[str, Any] | None = None,
    *,
    width: int = 960,
    height: int = 640,
    style: RenderStyle | None = None,
    title: str = INFO_TITLE,
    force_graph_js: str | Path | None = None,
    filepath: str | Path | None = None,
) -> GraphWidget | None:
    """Render a registry graph in a notebook or to an HTML file.

    Args:
        data: A RegistryGraph, RegistryData or the raw ``{"nodes", "links"}`` dict
        palette: Group -> color mapping
        width: Iframe width in pixels
        height: Iframe height in pixels
        style: Visual constants override
        title: Info panel title
        force_graph_js: Local force-graph bundle to inline instead of the CDN
        filepath: Save to this HTML file instead of returning a widget

    Returns:
        GraphWidget if ``filepath`` is None, otherwise None

    Example:
        >>> widget = visualize({"nodes": [{"id": "a"}], "links": []})
        >>> visualize(data, palette, filepath="registry.html")
    """
    graph = _as_graph(data)
    kwargs: dict[str, Any] = {"style": style, "title": title, "force_graph_js": force_graph_js}

    if filepath is not None:
        write_graph_html(filepath, graph, palette, **kwargs)
        return None

    return GraphWidget(generate_graph_html(graph, palette, **kwargs), width, height)
