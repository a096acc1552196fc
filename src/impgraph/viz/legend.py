"""Legend entries: one swatch per group present in the graph."""

from __future__ import annotations

import html
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from impgraph.model import Node
from impgraph.viz.color import resolve_color
from impgraph.viz.styles import DEFAULT_COLOR


@dataclass(frozen=True)
class LegendEntry:
    group: str
    color: str
    label: str


def group_label(group: str) -> str:
    """Human-readable group name: ``outputs.nixosConfigurations`` -> ``outputs / nixosConfigurations``."""
    return group.replace(".", " / ", 1)


def build_legend(
    nodes: Iterable[Node],
    palette: Mapping[str, Any],
    default: str = DEFAULT_COLOR,
) -> list[LegendEntry]:
    """Sorted legend entries for the distinct groups in ``nodes``."""
    groups = sorted({node.group for node in nodes})
    return [LegendEntry(group, resolve_color(palette, group, default), group_label(group)) for group in groups]


def render_legend_html(entries: Iterable[LegendEntry]) -> str:
    """Legend items as HTML, matching the page's ``.legend-item`` styles."""
    items = []
    for entry in entries:
        items.append(
            '<div class="legend-item">'
            f'<div class="legend-color" style="background:{html.escape(entry.color, quote=True)}"></div>'
            f"<span>{html.escape(entry.label)}</span>"
            "</div>"
        )
    return "\n".join(items)
