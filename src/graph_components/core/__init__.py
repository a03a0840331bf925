"""Disjoint-set engine and component partitioning."""

from graph_components.core.disjoint_set import DisjointSet, UnknownElementError
from graph_components.core.partitioner import ComponentPartitioner, compute_components

__all__ = [
    "ComponentPartitioner",
    "DisjointSet",
    "UnknownElementError",
    "compute_components",
]
