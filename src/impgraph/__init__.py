"""impgraph - interactive force-directed graphs of the imp registry."""

from impgraph.exceptions import (
    ConfigError,
    ImpGraphError,
    MissingAssetError,
    PaletteError,
    RegistryDataError,
)
from impgraph.graph import RegistryGraph
from impgraph.model import Link, Node, RegistryData, load_palette
from impgraph.viz import RenderSession, RenderStyle, generate_graph_html, visualize

__all__ = [
    # Data
    "Node",
    "Link",
    "RegistryData",
    "RegistryGraph",
    "load_palette",
    # Rendering
    "RenderSession",
    "RenderStyle",
    "generate_graph_html",
    "visualize",
    # Errors
    "ConfigError",
    "ImpGraphError",
    "MissingAssetError",
    "PaletteError",
    "RegistryDataError",
]

__version__ = "0.1.0"
