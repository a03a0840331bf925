"""Property-based tests using Hypothesis.

Invariants of the disjoint set and the partitioner: membership rather than
specific roots, since the chosen root depends on call order.
"""

import math

from hypothesis import given
from hypothesis import strategies as st

from graph_components.core.disjoint_set import DisjointSet
from graph_components.core.partitioner import compute_components

# ---------------------------------------------------------------------------
# Strategies
# ---------------------------------------------------------------------------

vertex_names = st.from_regex(r"v[0-9]{1,3}", fullmatch=True)


@st.composite
def graphs(draw: st.DrawFn) -> tuple[list[str], list[tuple[str, str]]]:
    """Unique vertex list plus edges between those vertices."""
    vertices = draw(st.lists(vertex_names, min_size=1, max_size=30, unique=True))
    edges = draw(
        st.lists(
            st.tuples(st.sampled_from(vertices), st.sampled_from(vertices)),
            max_size=40,
        )
    )
    return vertices, edges


def _reference_components(
    vertices: list[str], edges: list[tuple[str, str]]
) -> set[frozenset[str]]:
    """Connected components by breadth-first search."""
    adjacency: dict[str, set[str]] = {v: set() for v in vertices}
    for a, b in edges:
        adjacency[a].add(b)
        adjacency[b].add(a)
    seen: set[str] = set()
    result: set[frozenset[str]] = set()
    for start in vertices:
        if start in seen:
            continue
        frontier = [start]
        component = {start}
        while frontier:
            node = frontier.pop()
            for neighbour in adjacency[node] - component:
                component.add(neighbour)
                frontier.append(neighbour)
        seen |= component
        result.add(frozenset(component))
    return result


# ---------------------------------------------------------------------------
# DisjointSet
# ---------------------------------------------------------------------------


class TestDisjointSetProperties:
    @given(graphs())
    def test_find_is_idempotent(self, graph: tuple[list[str], list[tuple[str, str]]]) -> None:
        vertices, edges = graph
        ds = DisjointSet[str](vertices)
        for a, b in edges:
            ds.union(a, b)
        for v in vertices:
            first = ds.find(v)
            state = ds.parent_state()
            assert ds.find(v) == first
            assert ds.parent_state() == state

    @given(graphs())
    def test_union_order_does_not_change_membership(
        self, graph: tuple[list[str], list[tuple[str, str]]]
    ) -> None:
        vertices, edges = graph
        forward = DisjointSet[str](vertices)
        backward = DisjointSet[str](vertices)
        for a, b in edges:
            forward.union(a, b)
            backward.union(b, a)
        for a in vertices:
            for b in vertices:
                assert forward.connected(a, b) == backward.connected(a, b)

    @given(st.lists(st.tuples(vertex_names, vertex_names), max_size=50))
    def test_rank_bounded_by_log2(self, edges: list[tuple[str, str]]) -> None:
        ds = DisjointSet[str]()
        for a, b in edges:
            ds.union(a, b)
        if len(ds):
            bound = math.floor(math.log2(len(ds)))
            assert all(rank <= bound for rank in ds.rank_state().values())

    @given(vertex_names)
    def test_self_union_changes_nothing(self, v: str) -> None:
        ds = DisjointSet[str]([v])
        ds.union(v, v)
        assert ds.parent_state() == {v: v}
        assert ds.rank_state() == {v: 0}

    @given(vertex_names, vertex_names, vertex_names)
    def test_transitivity(self, a: str, b: str, c: str) -> None:
        ds = DisjointSet[str]()
        ds.union(a, b)
        ds.union(b, c)
        assert ds.find(a) == ds.find(c)


# ---------------------------------------------------------------------------
# compute_components
# ---------------------------------------------------------------------------


class TestPartitionProperties:
    @given(graphs())
    def test_every_vertex_exactly_once(
        self, graph: tuple[list[str], list[tuple[str, str]]]
    ) -> None:
        vertices, edges = graph
        result = compute_components(vertices, edges)
        members = [m for c in result.components for m in c.members]
        assert sorted(members) == sorted(vertices)
        assert set(result.roots) == set(vertices)
        assert set(result.colors) == set(vertices)

    @given(graphs())
    def test_matches_breadth_first_search(
        self, graph: tuple[list[str], list[tuple[str, str]]]
    ) -> None:
        vertices, edges = graph
        result = compute_components(vertices, edges)
        assert result.membership() == _reference_components(vertices, edges)

    @given(graphs())
    def test_roots_are_members_and_keys_are_minimal(
        self, graph: tuple[list[str], list[tuple[str, str]]]
    ) -> None:
        vertices, edges = graph
        result = compute_components(vertices, edges)
        for component in result.components:
            assert component.root in component.members
            assert component.key == min(component.members)
            assert result.is_root(component.root)

    @given(graphs())
    def test_membership_independent_of_edge_direction(
        self, graph: tuple[list[str], list[tuple[str, str]]]
    ) -> None:
        vertices, edges = graph
        flipped = [(b, a) for a, b in reversed(edges)]
        assert (
            compute_components(vertices, edges).membership()
            == compute_components(vertices, flipped).membership()
        )
