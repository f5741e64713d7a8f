# path-finder

`path-finder` reads a file of locations and a file of distances between them.
It builds a graph in which each location is a node and each distance is a pair
of edges, one in each direction. It then prints every node it loaded.

## Installation

```
pip install .
```

For the tests:

```
pip install .[test]
pytest
```

## Input files

Both files are comma-separated. Their first line is a header and is skipped.
Fields are trimmed of surrounding whitespace; any fields after the fourth are
ignored.

**Locations**: `location, id, code, parking`, where `parking` is `1` or `0`:

```
location,id,code,parking
Main Hall,MH01,MH,1
Library,LB02,LB,0
```

**Distances**: `from, to, driving, walking`. Each endpoint may be a location's
id or its code; ids are matched first, then codes. The driving time may be
left empty or set to anything that is not a non-negative whole number below
2**64, which means no driving route exists. The walking time is required and
must be such a number.

```
from,to,driving,walking
MH,LB,5,12
LB02,MH01,,20
```

(The two lines above connect the same pair twice, so loading them together
fails; they only show the accepted forms.)

## Command line

```
path-finder locations.csv distances.csv
```

The command prints one line per node: its numeric id, a colon, and the node's
representation (its `Location` data and its incoming and outgoing
connections). Ids start at 1 and follow the order of the locations file.

It prints a message to standard error and exits with status 1 when fewer than
two files are given, when a file cannot be opened, when a line cannot be
parsed, when a distance names a location that does not exist, or when the
same two locations are connected twice.

## Library use

```python
from path_finder.cli import build_graph
from path_finder.parsers import parse_distances, parse_locations

with open("locations.csv") as loc, open("distances.csv") as dist:
    graph = build_graph(parse_locations(loc), parse_distances(dist))

node_id = graph.get_node_id("MH")
for target, edge_id in graph.nodes[node_id].outgoing.items():
    edge = graph.edges[edge_id]
    print(target, edge.data.walking, edge.data.driving, edge.reverse)
```

- `path_finder.models`: the frozen dataclasses `Location` (`id`, `code`,
  `parking`, `location`) and `Distance` (`walking`, `driving`, where `driving`
  may be `None`).
- `path_finder.graph`: `Graph` with `add_node`, `add_edge`,
  `add_bidirectional_edge` and `get_node_id`, and read-only `nodes` and
  `edges` mappings from id to `Node` and `Edge`. `add_edge` raises
  `NodeNotFoundError` for an unknown node and `EdgeAlreadyExistsError` for a
  duplicate edge; both are `GraphError` subclasses.
- `path_finder.parsers`: `parse_locations`, `parse_distances` and their
  single-line forms `parse_location_line` and `parse_distance_line`. Bad lines
  raise `ParseError`, a `ValueError` subclass.
- `path_finder.cli`: `build_graph`, which raises `ValueError` for an unknown
  location name, and `main`, the command above.

## What it does not do

Despite its name, the package does not search for routes: it computes no
shortest paths and no travel times between locations that are not directly
connected. It only loads the data into a graph and prints the nodes.