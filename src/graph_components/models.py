"""Pydantic models for component assignments."""

from collections.abc import Hashable
from enum import StrEnum
from typing import Final

from pydantic import BaseModel, ConfigDict, Field

# Component colors, assigned in first-seen order and wrapped.
DEFAULT_PALETTE: Final[tuple[str, ...]] = (
    "#FF6B6B",
    "#4ECDC4",
    "#45B7D1",
    "#96CEB4",
    "#FFEEAD",
    "#D4A5A5",
    "#9B59B6",
    "#3498DB",
    "#E67E22",
    "#1ABC9C",
)


class RegistrationPolicy(StrEnum):
    """How a disjoint set treats identifiers it has never seen."""

    TOLERANT = "tolerant"
    STRICT = "strict"


class Component(BaseModel):
    """One connected component of a graph snapshot."""

    model_config = ConfigDict(frozen=True)

    index: int = Field(ge=0, description="First-seen order of the component")
    root: Hashable = Field(description="Representative; unstable across rebuilds")
    key: Hashable = Field(description="Smallest member; stable across rebuilds")
    members: tuple[Hashable, ...]
    color_index: int = Field(ge=0)
    color: str

    @property
    def size(self) -> int:
        return len(self.members)


class ComponentAssignment(BaseModel):
    """Result of partitioning a vertex/edge snapshot into components.

    ``roots`` and ``colors`` cover exactly the partitioned vertices.
    ``parent`` and ``rank`` are the raw disjoint-set state after every vertex
    was looked up, kept for the state inspector.

    Colors wrap around the palette, so once there are more components than
    colors two components can share a color. That is cosmetic: membership is
    always carried by ``roots``.
    """

    model_config = ConfigDict(frozen=True)

    roots: dict[Hashable, Hashable] = Field(default_factory=dict)
    colors: dict[Hashable, int] = Field(default_factory=dict)
    components: tuple[Component, ...] = ()
    parent: dict[Hashable, Hashable] = Field(default_factory=dict)
    rank: dict[Hashable, int] = Field(default_factory=dict)
    operations: tuple[str, ...] = ()

    @property
    def component_count(self) -> int:
        return len(self.components)

    def component_of(self, vertex: Hashable) -> Component:
        """Return the component containing ``vertex``.

        Raises:
            KeyError: If the vertex was not part of the snapshot.
        """
        root = self.roots[vertex]
        for component in self.components:
            if component.root == root:
                return component
        raise KeyError(vertex)

    def is_root(self, vertex: Hashable) -> bool:
        """Whether ``vertex`` is the representative of its component."""
        return self.roots.get(vertex) == vertex

    def connected(self, a: Hashable, b: Hashable) -> bool:
        return a in self.roots and b in self.roots and self.roots[a] == self.roots[b]

    def membership(self) -> set[frozenset[Hashable]]:
        """Components as a set of member sets, ignoring roots and order."""
        return {frozenset(c.members) for c in self.components}
