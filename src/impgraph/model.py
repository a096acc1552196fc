"""Input dataset: registry nodes, links and palette loading.

The dataset is produced upstream (e.g. at build time) and is treated as
immutable for the lifetime of a render session.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from impgraph.exceptions import PaletteError, RegistryDataError


@dataclass(frozen=True)
class Node:
    """A registry entry as delivered by the generator."""

    id: str
    name: str
    val: float = 0
    group: str = ""

    @property
    def first_line(self) -> str:
        return self.name.split("\n")[0]

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "name": self.name, "val": self.val, "group": self.group}


@dataclass(frozen=True)
class Link:
    """Directed dependency from ``source`` to ``target`` (node ids; ``None`` when absent)."""

    source: str | None
    target: str | None

    def to_dict(self) -> dict[str, Any]:
        return {"source": self.source, "target": self.target}


def _endpoint(value: Any) -> str | None:
    # A missing endpoint never matches a node id, so the link is dangling
    return None if value is None else str(value)


@dataclass(frozen=True)
class RegistryData:
    """Raw node and link collections.

    Link order matters: a link's position in ``links`` is its identity for
    highlight lookups.
    """

    nodes: tuple[Node, ...] = field(default_factory=tuple)
    links: tuple[Link, ...] = field(default_factory=tuple)

    @classmethod
    def from_dict(cls, data: Any, *, source: str | None = None) -> RegistryData:
        """Build from the generator's JSON structure.

        Example:
            >>> RegistryData.from_dict({
            ...     "nodes": [{"id": "a", "name": "a", "val": 1, "group": "x"}],
            ...     "links": [],
            ... }).nodes[0].id
            'a'
        """
        if not isinstance(data, dict):
            raise RegistryDataError("top-level value must be an object", source)

        raw_nodes = data.get("nodes")
        raw_links = data.get("links", [])
        if not isinstance(raw_nodes, list):
            raise RegistryDataError("'nodes' must be an array", source)
        if not isinstance(raw_links, list):
            raise RegistryDataError("'links' must be an array", source)

        nodes: list[Node] = []
        seen: set[str] = set()
        for index, raw in enumerate(raw_nodes):
            if not isinstance(raw, dict) or "id" not in raw:
                raise RegistryDataError(f"node #{index} has no 'id'", source)
            node_id = str(raw["id"])
            if node_id in seen:
                raise RegistryDataError(f"duplicate node id '{node_id}'", source)
            seen.add(node_id)
            nodes.append(
                Node(
                    id=node_id,
                    name=str(raw.get("name", node_id)),
                    val=raw.get("val") or 0,
                    group=str(raw.get("group") or ""),
                )
            )

        links: list[Link] = []
        for index, raw in enumerate(raw_links):
            if not isinstance(raw, dict):
                raise RegistryDataError(f"link #{index} is not an object", source)
            links.append(Link(source=_endpoint(raw.get("source")), target=_endpoint(raw.get("target"))))
        return cls(nodes=tuple(nodes), links=tuple(links))

    @classmethod
    def load(cls, path: str | Path) -> RegistryData:
        """Read a dataset JSON file."""
        path = Path(path)
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except UnicodeDecodeError as e:
            raise RegistryDataError("not valid UTF-8", str(path)) from e
        except json.JSONDecodeError as e:
            raise RegistryDataError(f"not valid JSON ({e.msg})", str(path)) from e
        return cls.from_dict(data, source=str(path))

    def to_dict(self) -> dict[str, Any]:
        return {
            "nodes": [node.to_dict() for node in self.nodes],
            "links": [link.to_dict() for link in self.links],
        }


def parse_palette(data: Any, *, source: str | None = None) -> dict[str, str]:
    """Validate the palette shape. Entry values are kept as-is."""
    if not isinstance(data, dict):
        raise PaletteError(source)
    return {str(group): color for group, color in data.items()}


def load_palette(path: str | Path) -> dict[str, str]:
    """Read a ``{group: color}`` JSON file."""
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except UnicodeDecodeError as e:
        raise PaletteError(str(path), f"Palette {path} is not valid UTF-8") from e
    except json.JSONDecodeError as e:
        raise PaletteError(str(path), f"Palette {path} is not valid JSON ({e.msg})") from e
    return parse_palette(data, source=str(path))
