"""Headless graph model that keeps its component coloring current."""

import re
from collections.abc import Iterable, Sequence

from graph_components.core.partitioner import ComponentPartitioner
from graph_components.logging import get_logger
from graph_components.models import DEFAULT_PALETTE, ComponentAssignment, RegistrationPolicy

logger = get_logger(__name__)

DEFAULT_VERTEX_PATTERN = r"^[a-zA-Z0-9_-]+$"


class GraphEditError(ValueError):
    """Base class for rejected graph edits."""


class InvalidVertexNameError(GraphEditError):
    pass


class DuplicateVertexError(GraphEditError):
    pass


class UnknownVertexError(GraphEditError):
    pass


class SelfLoopError(GraphEditError):
    pass


class DuplicateEdgeError(GraphEditError):
    pass


class GraphEditor:
    """Undirected graph whose components are recomputed after every edit.

    Edits are validated here so the partitioner only ever sees a clean
    graph: unique vertex names, no self-loops, at most one edge per pair.
    Removals trigger the same full recomputation as additions.
    """

    def __init__(
        self,
        *,
        palette: Sequence[str] = DEFAULT_PALETTE,
        vertex_pattern: str = DEFAULT_VERTEX_PATTERN,
        policy: RegistrationPolicy = RegistrationPolicy.TOLERANT,
    ) -> None:
        self._partitioner = ComponentPartitioner(palette=palette, policy=policy)
        self._vertex_pattern = re.compile(vertex_pattern)
        self._vertices: list[str] = []
        self._edges: list[tuple[str, str]] = []
        self._next_vertex_id = 1
        self.components: ComponentAssignment = self._partitioner.partition([], [])

    @property
    def vertices(self) -> tuple[str, ...]:
        return tuple(self._vertices)

    @property
    def edges(self) -> tuple[tuple[str, str], ...]:
        return tuple(self._edges)

    def add_vertex(self, name: str | None = None) -> str:
        """Add a vertex and return its name.

        A blank name gets the next auto-generated ``v<n>`` id.

        Raises:
            InvalidVertexNameError: If the name fails the vertex pattern.
            DuplicateVertexError: If a vertex with that name exists.
        """
        vertex = (name or "").strip() or f"v{self._next_vertex_id}"
        if not self._vertex_pattern.match(vertex):
            raise InvalidVertexNameError(
                "Vertex name can only contain letters, numbers, underscores and hyphens"
            )
        if vertex in self._vertices:
            raise DuplicateVertexError(f'Vertex "{vertex}" already exists')

        self._vertices.append(vertex)
        self._next_vertex_id += 1
        logger.info("vertex_added", vertex=vertex)
        self._recompute()
        return vertex

    def add_edge(self, source: str, target: str) -> None:
        """Connect two existing vertices.

        Raises:
            UnknownVertexError: If either endpoint is not a vertex.
            SelfLoopError: If both endpoints are the same vertex.
            DuplicateEdgeError: If the pair is already connected directly,
                in either direction.
        """
        for endpoint in (source, target):
            if endpoint not in self._vertices:
                raise UnknownVertexError(f'Vertex "{endpoint}" does not exist')
        if source == target:
            logger.info("edge_rejected", source=source, target=target, reason="self_loop")
            raise SelfLoopError("Self-loops are not allowed")
        if self._find_edge(source, target) is not None:
            logger.info("edge_rejected", source=source, target=target, reason="duplicate")
            raise DuplicateEdgeError("Edge already exists")

        self._edges.append((source, target))
        logger.info("edge_added", source=source, target=target)
        self._recompute()

    def remove_vertex(self, vertex: str) -> None:
        """Remove a vertex and every edge touching it."""
        self.delete_selected(vertices=[vertex])

    def remove_edge(self, source: str, target: str) -> None:
        """Remove the edge between two vertices, in either direction."""
        self.delete_selected(edges=[(source, target)])

    def delete_selected(
        self,
        vertices: Iterable[str] = (),
        edges: Iterable[tuple[str, str]] = (),
    ) -> None:
        """Remove a selection of vertices and edges, then recompute once.

        Selected elements that are not in the graph are ignored.
        """
        doomed_vertices = set(vertices)
        doomed_edges: set[tuple[str, str]] = set()
        for source, target in edges:
            existing = self._find_edge(source, target)
            if existing is not None:
                doomed_edges.add(existing)

        kept_edges = [
            edge
            for edge in self._edges
            if edge not in doomed_edges
            and edge[0] not in doomed_vertices
            and edge[1] not in doomed_vertices
        ]
        kept_vertices = [v for v in self._vertices if v not in doomed_vertices]
        removed_vertices = len(self._vertices) - len(kept_vertices)
        removed_edges = len(self._edges) - len(kept_edges)

        self._vertices = kept_vertices
        self._edges = kept_edges
        logger.info(
            "graph_elements_removed",
            vertices=removed_vertices,
            edges=removed_edges,
        )
        self._recompute()

    def _find_edge(self, source: str, target: str) -> tuple[str, str] | None:
        for edge in self._edges:
            if edge == (source, target) or edge == (target, source):
                return edge
        return None

    def _recompute(self) -> None:
        self.components = self._partitioner.partition(self._vertices, self._edges)
