"""Command line entry point: load locations and distances into a graph."""

from __future__ import annotations

import sys
from typing import Iterable, Sequence

from path_finder.graph import Graph, GraphError
from path_finder.models import Distance, Location
from path_finder.parsers import ParseError, parse_distances, parse_locations

_PROG = "path_finder"


def build_graph(
    locations: Iterable[Location],
    distances: Iterable[tuple[str, str, Distance]],
) -> Graph[Location, Distance]:
    """Build a graph of locations joined by bidirectional distance edges.

    Raises ``ValueError`` when a distance names an unknown location and
    ``GraphError`` when the same pair is connected twice.
    """
    graph: Graph[Location, Distance] = Graph()
    for location in locations:
        graph.add_node(location)

    for first, second, distance in distances:
        ids = []
        for name in (first, second):
            node_id = graph.get_node_id(name)
            if node_id is None:
                raise ValueError(
                    f"Tried to connect nodes: '{first}', '{second}' "
                    f"but node '{name}' does not exist"
                )
            ids.append(node_id)
        graph.add_bidirectional_edge(ids[0], ids[1], distance)
    return graph


def _read(path: str, kind: str, parser):
    with open(path, encoding="utf-8") as handle:
        try:
            return parser(handle)
        except (ParseError, UnicodeDecodeError) as err:
            raise ParseError(f"Error parsing {kind}: {err}") from err


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command; returns the process exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 2:
        print(f"Usage: {_PROG} <locations_file> <distances_file>", file=sys.stderr)
        return 1

    locations_path, distances_path = args[0], args[1]
    try:
        locations = _read(locations_path, "locations", parse_locations)
    except OSError as err:
        print(f"Error opening locations file {locations_path}: {err}", file=sys.stderr)
        return 1
    except ParseError as err:
        print(err, file=sys.stderr)
        return 1

    try:
        distances = _read(distances_path, "distances", parse_distances)
    except OSError as err:
        print(f"Error opening distances file {distances_path}: {err}", file=sys.stderr)
        return 1
    except ParseError as err:
        print(err, file=sys.stderr)
        return 1

    try:
        graph = build_graph(locations, distances)
    except (ValueError, GraphError) as err:
        print(err, file=sys.stderr)
        return 1

    for node_id, node in graph.nodes.items():
        print(f"{node_id}: {node!r}")
    return 0


if __name__ == "__main__":
    sys.exit(main())