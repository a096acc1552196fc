"""Neighbor and incident-link indexing for registry graphs."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Sequence

import networkx as nx

from impgraph.model import Link, Node

logger = logging.getLogger(__name__)


@dataclass
class AdjacencyIndex:
    """Derived adjacency for one dataset.

    ``neighbors`` and ``links`` hold one entry per occurrence of a link, so a
    duplicated link contributes twice. Links are referenced by their index in
    the input link collection.
    """

    neighbors: dict[str, list[str]] = field(default_factory=dict)
    links: dict[str, list[int]] = field(default_factory=dict)
    has_outgoing: set[str] = field(default_factory=set)
    skipped: list[int] = field(default_factory=list)
    nx_graph: nx.MultiDiGraph = field(default_factory=nx.MultiDiGraph)

    @property
    def resolved(self) -> list[int]:
        """Indices of links whose endpoints both exist."""
        return sorted(key for _, _, key in self.nx_graph.edges(keys=True))


def index_adjacency(nodes: Sequence[Node], links: Sequence[Link]) -> AdjacencyIndex:
    """Annotate every node with its neighbors and incident links.

    For each link whose source and target both exist, the endpoints record
    each other as neighbors and both record the link. The source is marked
    as having an outgoing edge. Links with an unknown endpoint are skipped.

    Example:
        >>> idx = index_adjacency([Node("a", "a"), Node("b", "b")], [Link("a", "b")])
        >>> idx.neighbors["b"], idx.links["a"], idx.has_outgoing
        (['a'], [0], {'a'})
    """
    index = AdjacencyIndex()
    graph = index.nx_graph

    for node in nodes:
        graph.add_node(node.id, group=node.group)
        index.neighbors[node.id] = []
        index.links[node.id] = []

    for i, link in enumerate(links):
        if link.source not in graph or link.target not in graph:
            logger.debug("Skipping link #%d %s -> %s: unknown endpoint", i, link.source, link.target)
            index.skipped.append(i)
            continue

        index.has_outgoing.add(link.source)
        index.neighbors[link.source].append(link.target)
        index.neighbors[link.target].append(link.source)
        index.links[link.source].append(i)
        index.links[link.target].append(i)
        graph.add_edge(link.source, link.target, key=i)

    return index
