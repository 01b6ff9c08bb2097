from __future__ import annotations

import logging
from typing import Iterator, List, Set, Tuple

from lwwgraph.graph.edge_store import EdgeStore
from lwwgraph.graph.graph_schema import Edge
from lwwgraph.graph.vertex_store import VertexStore
from lwwgraph.utils.text import is_blank


class GraphQueryEngine:
    """
    Read-only traversal over a replica's stores.

    Presence in a store is not enough for an edge to be traversable.
    An edge counts only when:
    - the edge record is active
    - both endpoint vertices are active
    - the edge was created no earlier than either endpoint
    """

    def __init__(self, vertices: VertexStore, edges: EdgeStore) -> None:
        self.vertices = vertices
        self.edges = edges

    # ------------------------------------------------------------------
    # Adjacency
    # ------------------------------------------------------------------

    def is_valid_edge(self, edge: Edge) -> bool:
        if not edge.is_active:
            return False

        source = self.vertices.get(edge.source)
        target = self.vertices.get(edge.target)
        if source is None or target is None:
            return False
        if not (source.is_active and target.is_active):
            return False

        return (
            edge.creation_timestamp >= source.creation_timestamp
            and edge.creation_timestamp >= target.creation_timestamp
        )

    def adjacent_vertices(self, label: str) -> Set[str]:
        if is_blank(label):
            logging.getLogger("lwwgraph.query").warning(
                "adjacent_vertices rejected blank label %r", label
            )
            return set()

        if label not in self.vertices:
            return set()

        return {
            edge.target
            for edge in self.edges.out_edges(label)
            if self.is_valid_edge(edge)
        }

    def valid_edges(self) -> Iterator[Tuple[str, str]]:
        for edge in self.edges.records():
            if self.is_valid_edge(edge):
                yield edge.key

    # ------------------------------------------------------------------
    # Path finding
    # ------------------------------------------------------------------

    def find_path(self, source: str, target: str) -> List[str]:
        """
        First path found by depth-first search, not the shortest one.

        ``find_path(x, x)`` is ``[x]`` whether or not ``x`` exists.
        Returns an empty list when no path exists.
        """
        if is_blank(source) or is_blank(target):
            logging.getLogger("lwwgraph.query").warning(
                "find_path rejected blank label(s) %r -> %r", source, target
            )
            return []

        if source == target:
            return [source]

        visited: Set[str] = {source}
        path: List[str] = [source]
        # one pending-neighbour iterator per node on the current path
        stack: List[Iterator[str]] = [self._expand(source)]

        while stack:
            nxt = next(stack[-1], None)
            if nxt is None:
                stack.pop()
                path.pop()
                continue

            if nxt in visited:
                continue

            visited.add(nxt)
            path.append(nxt)
            if nxt == target:
                return path
            stack.append(self._expand(nxt))

        return []

    def _expand(self, label: str) -> Iterator[str]:
        # sorted for reproducible paths across runs
        return iter(sorted(self.adjacent_vertices(label)))
