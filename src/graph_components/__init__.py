"""Connected-component coloring for interactively edited graphs."""

from graph_components.core import (
    ComponentPartitioner,
    DisjointSet,
    UnknownElementError,
    compute_components,
)
from graph_components.editor import GraphEditError, GraphEditor
from graph_components.models import (
    DEFAULT_PALETTE,
    Component,
    ComponentAssignment,
    RegistrationPolicy,
)

__all__ = [
    "Component",
    "ComponentAssignment",
    "ComponentPartitioner",
    "DEFAULT_PALETTE",
    "DisjointSet",
    "GraphEditError",
    "GraphEditor",
    "RegistrationPolicy",
    "UnknownElementError",
    "compute_components",
]
