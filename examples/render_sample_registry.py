"""Generate a sample registry dataset, palette and HTML page.

Run from project root: python examples/render_sample_registry.py
Then:                  impgraph inspect examples/data/registry.json
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from impgraph import RegistryData, RegistryGraph
from impgraph.viz import write_graph_html

OUTPUT_DIR = Path(__file__).parent / "data"

PALETTE = {
    "inputs": "#8bc34a",
    "modules.nixos": "#03a9f4",
    "modules.home": "#ab47bc",
    "modules.shared": "#26a69a",
    "outputs.nixosConfigurations": "#ff7043",
    "outputs.homeConfigurations": "#ffca28",
}


def _dump(data: dict[str, Any], name: str) -> Path:
    path = OUTPUT_DIR / name
    path.write_text(json.dumps(data, indent=2))
    return path


# ── Sample registry ─────────────────────────────────────────────


def make_registry() -> dict[str, Any]:
    """A small flake: inputs feed modules, modules feed hosts and users."""
    nodes = [
        {"id": "nixpkgs", "name": "nixpkgs", "val": 8, "group": "inputs"},
        {"id": "home-manager", "name": "home-manager", "val": 3, "group": "inputs"},
        {"id": "mod.base", "name": "base\nlocale\nnix-settings", "val": 4, "group": "modules.nixos"},
        {"id": "mod.desktop", "name": "desktop\nfonts", "val": 2, "group": "modules.nixos"},
        {"id": "mod.server", "name": "server\nssh", "val": 2, "group": "modules.nixos"},
        {"id": "mod.shell", "name": "shell\ngit", "val": 2, "group": "modules.home"},
        {"id": "mod.theme", "name": "theme", "val": 1, "group": "modules.shared"},
        {"id": "host.laptop", "name": "laptop", "val": 0, "group": "outputs.nixosConfigurations"},
        {"id": "host.server", "name": "server", "val": 0, "group": "outputs.nixosConfigurations"},
        {"id": "user.alice", "name": "alice@laptop", "val": 0, "group": "outputs.homeConfigurations"},
    ]
    edges = [
        ("nixpkgs", "mod.base"),
        ("nixpkgs", "mod.desktop"),
        ("nixpkgs", "mod.server"),
        ("home-manager", "mod.shell"),
        ("mod.theme", "mod.desktop"),
        ("mod.theme", "mod.shell"),
        ("mod.base", "host.laptop"),
        ("mod.base", "host.server"),
        ("mod.desktop", "host.laptop"),
        ("mod.server", "host.server"),
        ("mod.shell", "user.alice"),
    ]
    links = [{"source": s, "target": t} for s, t in edges]
    return {"nodes": nodes, "links": links}


def main() -> None:
    OUTPUT_DIR.mkdir(parents=True, exist_ok=True)
    registry = make_registry()
    data_path = _dump(registry, "registry.json")
    _dump(PALETTE, "palette.json")

    graph = RegistryGraph(RegistryData.from_dict(registry))
    html_path = write_graph_html(OUTPUT_DIR / "registry.html", graph, PALETTE, title="sample registry")

    stats = graph.stats()
    print(f"  {data_path.name} ({stats['nodes']} nodes, {stats['links']} links, {stats['sinks']} sinks)")
    print(f"  {html_path.name}")


if __name__ == "__main__":
    main()
