"""Partition a graph snapshot into colored connected components."""

from collections.abc import Hashable, Sequence

from graph_components.core.disjoint_set import DisjointSet
from graph_components.logging import get_logger
from graph_components.models import (
    DEFAULT_PALETTE,
    Component,
    ComponentAssignment,
    RegistrationPolicy,
)

logger = get_logger(__name__)

Edge = tuple[Hashable, Hashable]


class ComponentPartitioner:
    """Group vertices into connected components and color them.

    Every call builds a new disjoint set from the full vertex and edge lists.
    Nothing is carried over between calls, so removals need no special
    handling: the caller passes the graph as it is now.
    """

    def __init__(
        self,
        palette: Sequence[str] = DEFAULT_PALETTE,
        policy: RegistrationPolicy = RegistrationPolicy.TOLERANT,
    ) -> None:
        """Initialize the partitioner.

        Args:
            palette: Colors handed out to components in first-seen order.
                Wraps when there are more components than colors.
            policy: Registration policy for the disjoint set. In strict mode
                an edge endpoint missing from the vertex list is an error.

        Raises:
            ValueError: If the palette is empty.
        """
        if not palette:
            raise ValueError("palette must contain at least one color")
        self.palette = tuple(palette)
        self.policy = policy

    def partition(
        self,
        vertices: Sequence[Hashable],
        edges: Sequence[Edge],
    ) -> ComponentAssignment:
        """Compute the component assignment for a graph snapshot.

        Args:
            vertices: Vertex identifiers in display order.
            edges: ``(source, target)`` pairs. Direction is ignored.

        Returns:
            Roots, color indices and components for every vertex, plus the
            disjoint-set state and a trace of the operations performed.
        """
        ds: DisjointSet[Hashable] = DisjointSet(policy=self.policy)
        operations: list[str] = []

        for vertex in vertices:
            ds.make_set(vertex)
            operations.append(f"Adding vertex {vertex} to Union-Find")

        for source, target in edges:
            operations.append(f"Union of vertices {source} and {target}")
            ds.union(source, target)

        groups: dict[Hashable, list[Hashable]] = {}
        roots: dict[Hashable, Hashable] = {}
        for vertex in vertices:
            root = ds.find(vertex)
            roots[vertex] = root
            groups.setdefault(root, []).append(vertex)

        components: list[Component] = []
        colors: dict[Hashable, int] = {}
        for index, (root, members) in enumerate(groups.items()):
            color_index = index % len(self.palette)
            color = self.palette[color_index]
            components.append(
                Component(
                    index=index,
                    root=root,
                    key=_stable_key(members),
                    members=tuple(members),
                    color_index=color_index,
                    color=color,
                )
            )
            for member in members:
                colors[member] = color_index
            operations.append(
                f"Component {root}: {', '.join(str(m) for m in members)} ({color})"
            )

        if len(components) > len(self.palette):
            logger.debug(
                "palette_wrapped",
                components=len(components),
                palette_size=len(self.palette),
            )

        logger.debug(
            "components_computed",
            vertices=len(roots),
            edges=len(edges),
            components=len(components),
        )

        return ComponentAssignment(
            roots=roots,
            colors=colors,
            components=tuple(components),
            parent=ds.parent_state(),
            rank=ds.rank_state(),
            operations=tuple(operations),
        )


def compute_components(
    vertices: Sequence[Hashable],
    edges: Sequence[Edge],
    *,
    palette: Sequence[str] | None = None,
    policy: RegistrationPolicy | None = None,
) -> ComponentAssignment:
    """Partition ``vertices`` into connected components under ``edges``.

    Convenience wrapper around ``ComponentPartitioner`` with the default
    palette and tolerant registration.
    """
    partitioner = ComponentPartitioner(
        palette=DEFAULT_PALETTE if palette is None else palette,
        policy=RegistrationPolicy.TOLERANT if policy is None else policy,
    )
    return partitioner.partition(vertices, edges)


def _stable_key(members: Sequence[Hashable]) -> Hashable:
    """Smallest member, falling back to the smallest string form."""
    try:
        return min(members)  # type: ignore[type-var]
    except TypeError:
        return min(members, key=str)
