"""Command-line entry point: print the components of a small graph."""

import argparse
import logging
import sys
from collections.abc import Sequence

from pydantic import ValidationError

from graph_components.config import Settings
from graph_components.editor import GraphEditError, GraphEditor
from graph_components.logging import configure_logging, get_logger
from graph_components.models import ComponentAssignment, RegistrationPolicy

logger = get_logger(__name__)


def parse_edge(value: str) -> tuple[str, str]:
    """Parse ``a:b`` into an edge tuple (argparse ``type``)."""
    source, sep, target = value.partition(":")
    if not sep or not source or not target or ":" in target:
        raise argparse.ArgumentTypeError(f"edge must look like SOURCE:TARGET, got {value!r}")
    return source, target


def build_editor(
    settings: Settings,
    vertices: Sequence[str],
    edges: Sequence[tuple[str, str]],
    *,
    strict: bool = False,
) -> GraphEditor:
    """Replay the command-line graph through the editor's validation.

    Vertices named only by an edge are added in order of first appearance.
    """
    editor = GraphEditor(
        palette=settings.get_palette(),
        vertex_pattern=settings.vertex_name_pattern,
        policy=RegistrationPolicy.STRICT if strict else settings.registration_policy,
    )
    for vertex in vertices:
        editor.add_vertex(vertex)
    for source, target in edges:
        for endpoint in (source, target):
            if endpoint not in editor.vertices:
                editor.add_vertex(endpoint)
        editor.add_edge(source, target)
    return editor


def format_assignment(assignment: ComponentAssignment) -> str:
    """Render one line per component, the root marked with ``*``."""
    if not assignment.components:
        return "(empty graph)"
    lines = []
    for component in assignment.components:
        members = ", ".join(
            f"*{m}" if m == component.root else str(m) for m in component.members
        )
        lines.append(f"{component.index:>3}  {component.color}  {members}")
    return "\n".join(lines)


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Graph Components - color the connected components of a graph"
    )
    parser.add_argument(
        "edges",
        nargs="*",
        type=parse_edge,
        metavar="EDGE",
        help="Undirected edge as SOURCE:TARGET",
    )
    parser.add_argument(
        "-v",
        "--vertex",
        action="append",
        default=[],
        dest="vertices",
        help="Add a vertex (repeatable); an empty value gets an auto id",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the full component assignment as JSON",
    )
    parser.add_argument(
        "--trace",
        action="store_true",
        help="Print the Union-Find operations performed",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Reject unregistered identifiers instead of auto-registering",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug-level logging for troubleshooting",
    )
    args = parser.parse_args(argv)

    try:
        settings = Settings()
    except ValidationError as e:
        configure_logging(level=logging.ERROR)
        logger.error("failed_to_load_settings", error=str(e))
        print(f"Error: Failed to load settings. {e}", file=sys.stderr)
        return 1

    debug = args.debug or settings.debug
    configure_logging(
        json_output=settings.log_json,
        level=logging.DEBUG if debug else logging.WARNING,
    )

    try:
        editor = build_editor(settings, args.vertices, args.edges, strict=args.strict)
    except GraphEditError as e:
        logger.error("invalid_graph", error=str(e))
        print(f"Error: {e}", file=sys.stderr)
        return 1

    assignment = editor.components
    if args.json:
        print(assignment.model_dump_json(indent=2))
    else:
        print(format_assignment(assignment))
        if args.trace:
            print()
            print("\n".join(assignment.operations))
    return 0


if __name__ == "__main__":
    sys.exit(main())
