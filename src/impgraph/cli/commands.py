"""Top-level CLI commands: render, inspect, legend."""

from __future__ import annotations

import webbrowser
from pathlib import Path
from typing import Annotated, Any

import typer

from impgraph.cli._config import ImpGraphConfig, load_config
from impgraph.cli._format import format_number, print_json, print_lines, print_table, truncate
from impgraph.exceptions import ImpGraphError
from impgraph.graph.core import RegistryGraph
from impgraph.model import RegistryData, load_palette
from impgraph.viz.color import resolve_palette
from impgraph.viz.html_generator import write_graph_html
from impgraph.viz.legend import build_legend
from impgraph.viz.styles import RenderStyle

DataArg = Annotated[Path, typer.Argument(help="Registry graph JSON ({nodes, links})")]
PaletteOpt = Annotated[
    Path | None, typer.Option("--palette", "-p", help="Palette JSON ({group: color})")
]
JsonOpt = Annotated[bool, typer.Option("--json", help="Output as JSON")]
JsonOutputOpt = Annotated[str | None, typer.Option("--output", help="Write JSON to file")]


def _load(data: Path, palette: Path | None) -> tuple[RegistryGraph, dict[str, Any], ImpGraphConfig]:
    """Load dataset and palette; --palette overrides [tool.impgraph]."""
    try:
        config = load_config()
        graph = RegistryGraph(RegistryData.load(data))
        colors = load_palette(palette) if palette is not None else config.palette
    except FileNotFoundError as e:
        print(f"Error: {e.strerror}: '{e.filename}'")
        raise typer.Exit(1) from e
    except ImpGraphError as e:
        print(f"Error: {e}")
        raise typer.Exit(1) from e
    return graph, colors, config


def render_cmd(
    data: DataArg,
    palette: PaletteOpt = None,
    output: Annotated[Path, typer.Option("--output", "-o", help="HTML file to write")] = Path("registry.html"),
    title: Annotated[str | None, typer.Option("--title", help="Info panel title")] = None,
    force_graph_js: Annotated[
        Path | None,
        typer.Option("--force-graph-js", help="Inline this force-graph bundle instead of the CDN build"),
    ] = None,
    open_browser: Annotated[bool, typer.Option("--open", help="Open the page when done")] = False,
):
    """Render the registry graph to a standalone HTML page."""
    graph, colors, config = _load(data, palette)
    style = RenderStyle(default_color=config.default_color)

    try:
        path = write_graph_html(
            output,
            graph,
            colors,
            style=style,
            title=title or config.title,
            force_graph_js=force_graph_js or config.force_graph_js,
        )
    except ImpGraphError as e:
        print(f"Error: {e}")
        raise typer.Exit(1) from e

    stats = graph.stats()
    print(f"Wrote {path} | {stats['nodes']} nodes | {stats['resolved_links']} links | {stats['sinks']} sinks")
    if stats["skipped_links"]:
        print(f"  Skipped {stats['skipped_links']} link(s) with unknown endpoints")
    if open_browser:
        webbrowser.open(path.resolve().as_uri())


def inspect_cmd(
    data: DataArg,
    palette: PaletteOpt = None,
    as_json: JsonOpt = False,
    output: JsonOutputOpt = None,
    limit: Annotated[int, typer.Option("--limit", help="Maximum table lines to print")] = 100,
):
    """Show nodes, sinks and link counts."""
    graph, colors, config = _load(data, palette)
    nx_graph = graph.nx_graph
    node_colors = resolve_palette(colors, graph.groups, config.default_color)

    if as_json:
        nodes_data = [
            {
                "id": view.id,
                "name": view.node.name,
                "group": view.node.group,
                "color": node_colors[view.node.group],
                "val": view.node.val,
                "sink": view.sink,
                "radius": view.radius,
                "in_degree": nx_graph.in_degree(view.id),
                "out_degree": nx_graph.out_degree(view.id),
            }
            for view in graph.iter_views()
        ]
        data_out = {
            "stats": graph.stats(),
            "nodes": nodes_data,
            "sinks": sorted(graph.sinks),
            "skipped_links": [graph.links[i].to_dict() for i in graph.skipped_links],
        }
        print_json("inspect", data_out, output)
        return

    stats = graph.stats()
    print(
        f"\nRegistry: {stats['nodes']} nodes | {stats['resolved_links']} links | "
        f"{stats['sinks']} sinks | {stats['groups']} groups\n"
    )

    headers = ["Node", "Group", "Color", "Value", "Radius", "In", "Out", "Sink"]
    rows = [
        [
            truncate(view.node.name),
            view.node.group or "-",
            node_colors[view.node.group],
            format_number(view.node.val),
            format_number(view.radius),
            str(nx_graph.in_degree(view.id)),
            str(nx_graph.out_degree(view.id)),
            "yes" if view.sink else "",
        ]
        for view in graph.iter_views()
    ]
    print_lines(print_table(headers, rows), max_lines=limit)

    if graph.skipped_links:
        print(f"\n  Skipped links ({len(graph.skipped_links)}):")
        for i in graph.skipped_links:
            link = graph.links[i]
            print(f"    #{i} {link.source} → {link.target}")

    print(f"\n  For JSON: impgraph inspect {data} --json")


def legend_cmd(
    data: DataArg,
    palette: PaletteOpt = None,
    as_json: JsonOpt = False,
    output: JsonOutputOpt = None,
):
    """List legend entries (group, color) for the dataset."""
    graph, colors, config = _load(data, palette)
    entries = build_legend(graph.nodes, colors, config.default_color)
    counts: dict[str, int] = {}
    for node in graph.nodes:
        counts[node.group] = counts.get(node.group, 0) + 1

    if as_json:
        print_json(
            "legend",
            [{"group": e.group, "label": e.label, "color": e.color, "nodes": counts[e.group]} for e in entries],
            output,
        )
        return

    rows = [[e.label, e.color, str(counts[e.group])] for e in entries]
    print()
    print_lines(print_table(["Group", "Color", "Nodes"], rows))


def register_commands(app: typer.Typer) -> None:
    """Register top-level commands on the app."""
    app.command("render")(render_cmd)
    app.command("inspect")(inspect_cmd)
    app.command("legend")(legend_cmd)
