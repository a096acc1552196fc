"""Project-level configuration from pyproject.toml.

Reads the [tool.impgraph] section to provide a default palette, page title
and force-graph bundle for the CLI:

    [tool.impgraph]
    title = "my registry"
    palette = "palette.json"          # or an inline table
    force-graph-js = "vendor/force-graph.min.js"
    default-color = "#9e9e9e"

Relative paths are resolved against the directory holding pyproject.toml.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from impgraph.exceptions import ConfigError
from impgraph.model import load_palette, parse_palette
from impgraph.viz.session import INFO_TITLE
from impgraph.viz.styles import DEFAULT_COLOR


@dataclass(frozen=True)
class ImpGraphConfig:
    """Configuration from [tool.impgraph] in pyproject.toml."""

    palette: dict[str, Any] = field(default_factory=dict)
    title: str = INFO_TITLE
    force_graph_js: Path | None = None
    default_color: str = DEFAULT_COLOR


def find_pyproject(start: Path | None = None) -> Path | None:
    """Walk up from start directory to find pyproject.toml."""
    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / "pyproject.toml"
        if candidate.is_file():
            return candidate
    return None


def load_config(start: Path | None = None) -> ImpGraphConfig:
    """Load [tool.impgraph] from the nearest pyproject.toml.

    Returns default config if no pyproject.toml or no [tool.impgraph] section.
    """
    path = find_pyproject(start)
    if path is None:
        return ImpGraphConfig()

    if sys.version_info >= (3, 11):
        import tomllib
    else:
        try:
            import tomli as tomllib
        except ImportError:
            return ImpGraphConfig()

    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(str(path), str(e)) from e

    section = data.get("tool", {}).get("impgraph", {})
    if not section:
        return ImpGraphConfig()

    root = path.parent
    palette = section.get("palette", {})
    if isinstance(palette, str):
        palette = load_palette(root / palette)
    else:
        palette = parse_palette(palette, source=str(path))

    force_graph_js = section.get("force-graph-js")
    return ImpGraphConfig(
        palette=palette,
        title=section.get("title", INFO_TITLE),
        force_graph_js=root / force_graph_js if force_graph_js else None,
        default_color=section.get("default-color", DEFAULT_COLOR),
    )
