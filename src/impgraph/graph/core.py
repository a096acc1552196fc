"""RegistryGraph: the dataset plus everything derived from it."""

from __future__ import annotations

from collections.abc import Collection, Iterator
from dataclasses import dataclass
from functools import cached_property
from typing import Any

import networkx as nx

from impgraph.graph.adjacency import AdjacencyIndex, index_adjacency
from impgraph.graph.sinks import (
    SINK_GROUPS,
    classify_sinks,
    node_label,
    node_radius,
    node_tooltip,
    node_weight,
)
from impgraph.model import Link, Node, RegistryData


@dataclass(frozen=True)
class NodeView:
    """A node together with its derived render attributes."""

    node: Node
    sink: bool
    neighbors: tuple[str, ...]
    links: tuple[int, ...]

    @property
    def id(self) -> str:
        return self.node.id

    @property
    def radius(self) -> float:
        return node_radius(self.node.val, self.sink)


class RegistryGraph:
    """Indexed, classified registry graph.

    Derived fields are computed once in the constructor and never
    recomputed; the dataset must not change afterwards.

    Args:
        data: The raw dataset
        sink_groups: Groups whose outgoing-edge-free nodes are sinks
    """

    def __init__(self, data: RegistryData, *, sink_groups: Collection[str] = SINK_GROUPS) -> None:
        self.data = data
        self.sink_groups = frozenset(sink_groups)
        self._nodes = {node.id: node for node in data.nodes}
        self._adjacency: AdjacencyIndex = index_adjacency(data.nodes, data.links)
        self.sinks: frozenset[str] = frozenset(
            classify_sinks(data.nodes, self._adjacency.has_outgoing, self.sink_groups)
        )

    @classmethod
    def from_dict(cls, data: dict[str, Any], **kwargs: Any) -> RegistryGraph:
        return cls(RegistryData.from_dict(data), **kwargs)

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    @property
    def nodes(self) -> tuple[Node, ...]:
        return self.data.nodes

    @property
    def links(self) -> tuple[Link, ...]:
        return self.data.links

    @property
    def nx_graph(self) -> nx.MultiDiGraph:
        """Resolvable links as a networkx graph, keyed by link index."""
        return self._adjacency.nx_graph

    @property
    def has_outgoing(self) -> set[str]:
        return self._adjacency.has_outgoing

    @property
    def skipped_links(self) -> list[int]:
        return self._adjacency.skipped

    def node(self, node_id: str) -> Node:
        return self._nodes[node_id]

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)

    def neighbors(self, node_id: str) -> list[str]:
        return self._adjacency.neighbors[node_id]

    def incident_links(self, node_id: str) -> list[int]:
        return self._adjacency.links[node_id]

    def is_sink(self, node_id: str) -> bool:
        return node_id in self.sinks

    def view(self, node_id: str) -> NodeView:
        return NodeView(
            node=self._nodes[node_id],
            sink=node_id in self.sinks,
            neighbors=tuple(self.neighbors(node_id)),
            links=tuple(self.incident_links(node_id)),
        )

    def iter_views(self) -> Iterator[NodeView]:
        for node in self.nodes:
            yield self.view(node.id)

    @cached_property
    def groups(self) -> list[str]:
        """Distinct group labels, sorted."""
        return sorted({node.group for node in self.nodes})

    # ------------------------------------------------------------------
    # Export
    # ------------------------------------------------------------------

    def to_render_data(self) -> dict[str, Any]:
        """Dataset with derived fields, as consumed by the browser client.

        Only resolvable links are emitted. Each carries its ``index`` in the
        input collection, which is the key the client uses for highlight
        state; node ``links`` refer to those indices.
        """
        nodes = []
        for node in self.nodes:
            sink = node.id in self.sinks
            nodes.append(
                {
                    **node.to_dict(),
                    "isSink": sink,
                    "radius": node_radius(node.val, sink),
                    "weight": node_weight(node.val, sink),
                    "tooltip": node_tooltip(node, sink),
                    "label": node_label(node, sink),
                    "neighbors": self.neighbors(node.id),
                    "links": self.incident_links(node.id),
                }
            )
        skipped = set(self.skipped_links)
        links = [
            {**link.to_dict(), "index": i}
            for i, link in enumerate(self.links)
            if i not in skipped
        ]
        return {"nodes": nodes, "links": links}

    def stats(self) -> dict[str, int]:
        return {
            "nodes": len(self.nodes),
            "links": len(self.links),
            "resolved_links": self.nx_graph.number_of_edges(),
            "skipped_links": len(self.skipped_links),
            "sinks": len(self.sinks),
            "groups": len(self.groups),
        }
