"""Union-Find (disjoint set) over arbitrary hashable identifiers."""

from collections.abc import Hashable, Iterable
from typing import Generic, TypeVar

from graph_components.models import RegistrationPolicy

Element = TypeVar("Element", bound=Hashable)


class UnknownElementError(KeyError):
    """Raised in strict mode when an element was never registered."""

    def __init__(self, element: Hashable) -> None:
        super().__init__(element)
        self.element = element

    def __str__(self) -> str:
        return f"element {self.element!r} is not registered"


class DisjointSet(Generic[Element]):
    """Union-Find with union by rank and path compression.

    Unknown elements are handled according to ``policy``:

    - ``TOLERANT``: ``find`` and ``union`` register them as singletons
      through ``find_or_register``.
    - ``STRICT``: ``find`` and ``union`` raise ``UnknownElementError``;
      callers must ``make_set`` every element first.

    There is no removal. Callers that need to drop elements build a new
    instance from the remaining ones.

    Example:
        >>> ds = DisjointSet[str]()
        >>> ds.union("a", "b")
        'a'
        >>> ds.connected("b", "a")
        True
    """

    def __init__(
        self,
        elements: Iterable[Element] = (),
        *,
        policy: RegistrationPolicy = RegistrationPolicy.TOLERANT,
    ) -> None:
        self.policy = policy
        self._parent: dict[Element, Element] = {}
        self._rank: dict[Element, int] = {}
        for element in elements:
            self.make_set(element)

    def __contains__(self, element: object) -> bool:
        return element in self._parent

    def __len__(self) -> int:
        return len(self._parent)

    def make_set(self, element: Element) -> None:
        """Register ``element`` as a singleton.

        Re-registering is a no-op, so an element already merged into a
        larger set stays there.
        """
        if element not in self._parent:
            self._parent[element] = element
            self._rank[element] = 0

    def find(self, element: Element) -> Element:
        """Return the root of the set containing ``element``.

        Two passes: walk up to the root, then walk the same path again
        pointing every node directly at the root.

        Raises:
            UnknownElementError: In strict mode, if ``element`` is unregistered.
        """
        if element not in self._parent:
            if self.policy is RegistrationPolicy.STRICT:
                raise UnknownElementError(element)
            return self.find_or_register(element)

        root = element
        while self._parent[root] != root:
            root = self._parent[root]

        current = element
        while self._parent[current] != root:
            next_node = self._parent[current]
            self._parent[current] = root
            current = next_node

        return root

    def find_or_register(self, element: Element) -> Element:
        """Like ``find``, but registers an unknown ``element`` first."""
        self.make_set(element)
        return self.find(element)

    def union(self, x: Element, y: Element) -> Element:
        """Merge the sets containing ``x`` and ``y``.

        The root with the lower rank goes under the other. On equal rank,
        y's root goes under x's root and x's root gains one rank.

        Returns:
            The root of the merged set.
        """
        root_x = self.find(x)
        root_y = self.find(y)

        if root_x == root_y:
            return root_x

        if self._rank[root_x] < self._rank[root_y]:
            self._parent[root_x] = root_y
            return root_y
        elif self._rank[root_x] > self._rank[root_y]:
            self._parent[root_y] = root_x
            return root_x
        else:
            self._parent[root_y] = root_x
            self._rank[root_x] += 1
            return root_x

    def connected(self, x: Element, y: Element) -> bool:
        """Check if ``x`` and ``y`` are in the same set."""
        return self.find(x) == self.find(y)

    def groups(self) -> dict[Element, list[Element]]:
        """Return mapping from root to members, both in registration order."""
        result: dict[Element, list[Element]] = {}
        for element in list(self._parent):
            result.setdefault(self.find(element), []).append(element)
        return result

    @property
    def set_count(self) -> int:
        return sum(1 for element, parent in self._parent.items() if element == parent)

    def parent_state(self) -> dict[Element, Element]:
        """Copy of the parent mapping as it stands, without compressing."""
        return dict(self._parent)

    def rank_state(self) -> dict[Element, int]:
        """Copy of the rank mapping."""
        return dict(self._rank)
