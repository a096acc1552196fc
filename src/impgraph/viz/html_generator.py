"""Standalone HTML document for the interactive registry graph."""

from __future__ import annotations

import html
import json
import logging
from collections.abc import Mapping
from importlib.resources import files
from pathlib import Path
from typing import Any, Optional

from impgraph.exceptions import MissingAssetError
from impgraph.graph.core import RegistryGraph
from impgraph.viz.color import resolve_palette
from impgraph.viz.legend import build_legend, render_legend_html
from impgraph.viz.session import INFO_HINT, INFO_TITLE
from impgraph.viz.styles import DEFAULT_STYLE, RenderStyle

logger = logging.getLogger(__name__)

FORCE_GRAPH_CDN = "https://unpkg.com/force-graph@1.43.5/dist/force-graph.min.js"


def _read_asset(name: str) -> Optional[str]:
    """Read a file bundled in impgraph/viz/assets, or None if missing."""
    try:
        return (files("impgraph.viz.assets") / name).read_text(encoding="utf-8")
    except (FileNotFoundError, ModuleNotFoundError):
        return None


def _force_graph_tag(force_graph_js: str | Path | None) -> str:
    """Inline a local force-graph bundle, or reference the CDN build."""
    if force_graph_js is None:
        return f'<script src="{FORCE_GRAPH_CDN}"></script>'
    path = Path(force_graph_js)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise MissingAssetError(str(path)) from e
    return f"<script>{text}</script>"


def _json_for_script(data: Any) -> str:
    # A literal "</" would end the enclosing <script> element
    return json.dumps(data).replace("</", "<\\/")


def build_payload(
    graph: RegistryGraph,
    palette: Mapping[str, Any] | None = None,
    *,
    style: RenderStyle = DEFAULT_STYLE,
    title: str = INFO_TITLE,
) -> dict[str, Any]:
    """Everything the JS client needs, as plain JSON-able data."""
    return {
        "graph": graph.to_render_data(),
        "colors": resolve_palette(palette or {}, graph.groups, style.default_color),
        "style": style.to_dict(),
        "info": {"title": title, "hint": INFO_HINT},
    }


def generate_graph_html(
    graph: RegistryGraph,
    palette: Mapping[str, Any] | None = None,
    *,
    style: RenderStyle | None = None,
    title: str = INFO_TITLE,
    force_graph_js: str | Path | None = None,
) -> str:
    """Generate an HTML document rendering ``graph`` with force-graph.

    The client script and stylesheet are bundled with the package
    (impgraph.viz.assets). force-graph itself is loaded from the CDN unless
    ``force_graph_js`` points at a local copy, which is then inlined so the
    page works offline.
    """
    style = style or DEFAULT_STYLE
    client_js = _read_asset("registry_graph.js")
    client_css = _read_asset("registry_graph.css")
    if client_js is None or client_css is None:
        missing = [
            name
            for name, asset in (("registry_graph.js", client_js), ("registry_graph.css", client_css))
            if asset is None
        ]
        raise RuntimeError(
            f"Missing bundled visualization assets: {missing}. "
            "The impgraph package may be incorrectly installed. "
            "Try reinstalling with: pip install --force-reinstall impgraph"
        )

    payload = build_payload(graph, palette, style=style, title=title)
    legend_html = render_legend_html(build_legend(graph.nodes, payload["colors"], style.default_color))
    escaped_title = html.escape(title)

    return f"""<!DOCTYPE html>
<html>
<head>
    <meta charset="UTF-8">
    <title>{escaped_title}</title>
    <style>{client_css}</style>
    {_force_graph_tag(force_graph_js)}
</head>
<body>
  <div id="graph"></div>
  <div id="info"><h3>{escaped_title}</h3><div class="hint">{html.escape(INFO_HINT)}</div></div>
  <div id="legend">
{legend_html}
  </div>
  <script type="application/json" id="impgraph-data">{_json_for_script(payload)}</script>
  <script>{client_js}</script>
</body>
</html>
"""


def write_graph_html(path: str | Path, graph: RegistryGraph, palette=None, **kwargs: Any) -> Path:
    """Render and save to ``path`` (``.html`` appended if missing)."""
    path = Path(path)
    if path.suffix != ".html":
        path = path.with_name(path.name + ".html")
    path.write_text(generate_graph_html(graph, palette, **kwargs), encoding="utf-8")
    logger.info("Wrote registry graph (%d nodes) to %s", len(graph), path)
    return path
