"""A directed graph with automatically numbered nodes and edges."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Generic, Mapping, TypeVar

N = TypeVar("N")
E = TypeVar("E")


class GraphError(Exception):
    """Base class for graph errors."""


class NodeNotFoundError(GraphError):
    """Raised when an operation refers to a node that does not exist."""

    def __init__(self, node_id: int) -> None:
        super().__init__(f"Node does not exist: {node_id}")
        self.node_id = node_id


class EdgeAlreadyExistsError(GraphError):
    """Raised when an edge between two nodes is added a second time."""

    def __init__(self, from_id: int, to_id: int, edge_id: int) -> None:
        super().__init__(f"Duplicate edge found from {from_id} to {to_id}: {edge_id}")
        self.from_id = from_id
        self.to_id = to_id
        self.edge_id = edge_id


@dataclass
class Edge(Generic[E]):
    """A directed connection between two nodes, with an optional reverse edge."""

    from_id: int
    to_id: int
    data: E
    reverse: int | None = None


@dataclass
class Node(Generic[N]):
    """A node's data and its connections, keyed by neighbour node id to edge id."""

    data: N
    incoming: dict[int, int] = field(default_factory=dict)
    outgoing: dict[int, int] = field(default_factory=dict)


class Graph(Generic[N, E]):
    """Directed graph storing nodes and edges under unique increasing ids."""

    def __init__(self) -> None:
        self._nodes: dict[int, Node[N]] = {}
        self._edges: dict[int, Edge[E]] = {}
        self._last_node_id = 0
        self._last_edge_id = 0

    @property
    def nodes(self) -> Mapping[int, Node[N]]:
        """Read-only view of the nodes by id."""
        return MappingProxyType(self._nodes)

    @property
    def edges(self) -> Mapping[int, Edge[E]]:
        """Read-only view of the edges by id."""
        return MappingProxyType(self._edges)

    def add_node(self, data: N) -> int:
        """Insert a node holding ``data`` and return its new id."""
        self._last_node_id += 1
        self._nodes[self._last_node_id] = Node(data)
        return self._last_node_id

    def add_edge(self, from_id: int, to_id: int, data: E) -> int:
        """Insert a directed edge and return its new id."""
        for node_id in (from_id, to_id):
            if node_id not in self._nodes:
                raise NodeNotFoundError(node_id)

        from_node = self._nodes[from_id]
        to_node = self._nodes[to_id]

        existing = from_node.outgoing.get(to_id)
        if existing is not None:
            raise EdgeAlreadyExistsError(from_id, to_id, existing)
        if from_id in to_node.incoming:
            raise RuntimeError("Nodes out of sync")

        self._last_edge_id += 1
        edge_id = self._last_edge_id
        self._edges[edge_id] = Edge(from_id, to_id, data)
        from_node.outgoing[to_id] = edge_id
        to_node.incoming[from_id] = edge_id
        return edge_id

    def add_bidirectional_edge(self, node_id_1: int, node_id_2: int, data: E) -> tuple[int, int]:
        """Insert edges in both directions, linked as each other's reverse."""
        edge_id_1 = self.add_edge(node_id_1, node_id_2, data)
        edge_id_2 = self.add_edge(node_id_2, node_id_1, data)
        self._edges[edge_id_1].reverse = edge_id_2
        self._edges[edge_id_2].reverse = edge_id_1
        return edge_id_1, edge_id_2

    def get_node_id(self, identifier: str) -> int | None:
        """Find a node whose data has ``identifier`` as its id, else as its code."""
        by_id = next(
            (node_id for node_id, node in self._nodes.items() if node.data.id == identifier),
            None,
        )
        if by_id is not None:
            return by_id
        return next(
            (node_id for node_id, node in self._nodes.items() if node.data.code == identifier),
            None,
        )