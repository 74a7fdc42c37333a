"""Graph info — edge list validation, node discovery, labels and ordering.

Turns a raw edge list into the canonical node set used by the rest of the
layout pipeline:

  1. Validate that the edge list is an iterable of (source, target) rows
     (lists, tuples, generators and 2-D arrays all qualify).
  2. Discover nodes in first-appearance order (row-major scan), unless an
     explicit node list is supplied.
  3. Resolve labels (supplied, or the string form of each node).
  4. Resolve the ordering permutation: explicit ordering, then sorting,
     then discovery order.
"""

from __future__ import annotations

import logging
from collections.abc import Hashable, Iterable, Mapping, Sequence, Sized
from dataclasses import dataclass
from functools import cached_property
from numbers import Integral
from typing import Any

import networkx as nx

from arcplot.errors import (
    EmptyGraphError,
    LengthMismatchError,
    ShapeError,
    UnknownLabelError,
    UnknownNodeError,
)

logger = logging.getLogger(__name__)

Node = Hashable
Edge = tuple[Node, Node]


# ─── Edge List Validation ─────────────────────────────────────────────────────


def _is_row(row: object) -> bool:
    return isinstance(row, Sized) and isinstance(row, Iterable) and not isinstance(row, (str, bytes))


def as_list(values: object, what: str) -> list[Any]:
    """Materialise a list, tuple, generator or array into a list.

    Strings, bytes and mappings are not item sequences and raise ShapeError.
    """
    if isinstance(values, (str, bytes, Mapping)) or not isinstance(values, Iterable):
        raise ShapeError(f"'{what}' must be a sequence of items, got {values!r}")
    try:
        return list(values)
    except TypeError:
        # 0-d arrays advertise __iter__ but cannot be iterated.
        raise ShapeError(f"'{what}' must be a sequence of items, got {values!r}") from None


def edgelist_from_graph(graph: nx.Graph) -> tuple[list[Edge], list[Node]]:
    """Extract (edges, nodes) from a networkx graph.

    Multigraphs yield one row per parallel edge. The node list keeps the
    graph's node insertion order so isolated nodes are preserved.
    """
    edges = [(src, tgt) for src, tgt in graph.edges()]
    return edges, list(graph.nodes)


def normalize_edgelist(edgelist: object) -> tuple[Edge, ...]:
    """Validate a raw edge list and return it as a tuple of (source, target) pairs.

    Any iterable of rows is accepted, including generators and 2-D arrays.
    Raises ShapeError unless every row is a two-item sequence of hashable ids.
    """
    try:
        rows = as_list(edgelist, "edgelist")
    except ShapeError:
        raise ShapeError("'edgelist' must be a two-column sequence of (from, to) rows") from None

    edges: list[Edge] = []
    for i, row in enumerate(rows):
        if not _is_row(row) or len(row) != 2:
            raise ShapeError(f"'edgelist' must be a two-column sequence; row {i} is {row!r}")
        src, tgt = tuple(row)
        if not isinstance(src, Hashable) or not isinstance(tgt, Hashable):
            raise ShapeError(f"Node ids must be hashable; row {i} is {row!r}")
        edges.append((src, tgt))
    return tuple(edges)


def discover_nodes(edges: Iterable[Edge]) -> list[Node]:
    """Return distinct node ids in order of first appearance (row by row, source first)."""
    seen: dict[Node, None] = {}
    for src, tgt in edges:
        seen.setdefault(src, None)
        seen.setdefault(tgt, None)
    return list(seen)


# ─── Ordering ─────────────────────────────────────────────────────────────────


def _sort_key(node: Node) -> tuple[bool, object]:
    # Numbers sort before strings when a graph mixes both kinds of id.
    return (isinstance(node, str), node)


def sort_permutation(nodes: Sequence[Node], decreasing: bool = False) -> list[int]:
    """Stable sort permutation over node values.

    Ties keep discovery order in both directions.
    """
    perm = list(range(len(nodes)))
    perm.sort(key=lambda i: _sort_key(nodes[i]), reverse=decreasing)
    return perm


def _is_integer(value: object) -> bool:
    return isinstance(value, Integral) and not isinstance(value, bool)


def resolve_ordering(ordering: Iterable[object], labels: Sequence[str]) -> list[int]:
    """Resolve an explicit ordering into positions over ``labels``.

    Integer orderings must be a permutation of ``range(len(labels))``.
    String orderings are matched against the labels; every unmatched entry
    is reported at once.
    """
    num_nodes = len(labels)
    ordering = as_list(ordering, "ordering")
    if len(ordering) != num_nodes:
        raise LengthMismatchError("ordering", num_nodes, len(ordering))

    if all(_is_integer(v) for v in ordering):
        perm = [int(v) for v in ordering]  # type: ignore[call-overload]
        if sorted(perm) != list(range(num_nodes)):
            raise ShapeError(f"Integer 'ordering' must be a permutation of 0..{num_nodes - 1}, got {perm}")
        return perm

    if all(isinstance(v, str) for v in ordering):
        position: dict[str, int] = {}
        for i, label in enumerate(labels):
            position.setdefault(label, i)
        unmatched = [v for v in ordering if v not in position]
        if unmatched:
            raise UnknownLabelError(unmatched)  # type: ignore[arg-type]
        perm = [position[v] for v in ordering]  # type: ignore[index]
        if len(set(perm)) != num_nodes:
            raise ShapeError("String 'ordering' must name every label exactly once")
        return perm

    raise ShapeError("'ordering' must be all integers or all strings")


# ─── GraphInfo ────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class GraphInfo:
    """Canonical graph description consumed by the layout pipeline.

    Attributes:
        edges: The (source, target) rows, in input order.
        nodes: Node ids in final (placement) order.
        labels: Display labels, aligned with ``nodes``.
        order: ``order[k]`` is the discovery index of the node placed at
            position ``k``. Per-node attributes supplied by the caller are
            indexed in discovery order and reordered through this.
    """

    edges: tuple[Edge, ...]
    nodes: tuple[Node, ...]
    labels: tuple[str, ...]
    order: tuple[int, ...]

    @property
    def num_nodes(self) -> int:
        return len(self.nodes)

    @property
    def num_edges(self) -> int:
        return len(self.edges)

    @cached_property
    def _positions(self) -> dict[Node, int]:
        return {node: i for i, node in enumerate(self.nodes)}

    def index_of(self, node: Node) -> int:
        """Final position of ``node``; raises UnknownNodeError if absent."""
        try:
            return self._positions[node]
        except KeyError:
            raise UnknownNodeError(node) from None

    def to_networkx(self) -> nx.MultiDiGraph:
        """Return the graph as a MultiDiGraph with ``label`` and ``position`` node attributes."""
        g: nx.MultiDiGraph = nx.MultiDiGraph()
        for pos, (node, label) in enumerate(zip(self.nodes, self.labels)):
            g.add_node(node, label=label, position=pos)
        for src, tgt in self.edges:
            g.add_edge(src, tgt)
        return g


def build_graph_info(
    edgelist: object,
    nodes: Iterable[Node] | None = None,
    sorted: bool = False,
    decreasing: bool = False,
    ordering: Iterable[object] | None = None,
    labels: Iterable[str] | None = None,
) -> GraphInfo:
    """Validate ``edgelist`` and resolve nodes, labels and ordering.

    ``edgelist`` may also be a networkx graph, whose node set then stands in
    for ``nodes`` when none is given.
    """
    if isinstance(edgelist, nx.Graph):
        raw_edges, graph_nodes = edgelist_from_graph(edgelist)
        if nodes is None:
            nodes = graph_nodes
        edgelist = raw_edges

    edges = normalize_edgelist(edgelist)

    if nodes is not None:
        node_list = as_list(nodes, "nodes")
        if len(set(node_list)) != len(node_list):
            raise ShapeError("Explicit 'nodes' must not contain duplicates")
    else:
        node_list = discover_nodes(edges)

    num_nodes = len(node_list)
    if num_nodes == 0:
        raise EmptyGraphError("Cannot lay out a graph with no nodes")

    if labels is not None:
        label_list = [str(label) for label in ([labels] if isinstance(labels, str) else as_list(labels, "labels"))]
        if len(label_list) != num_nodes:
            raise LengthMismatchError("labels", num_nodes, len(label_list))
    else:
        label_list = [str(node) for node in node_list]

    perm = list(range(num_nodes))
    source = "discovery"
    if sorted:
        perm = sort_permutation(node_list, decreasing=decreasing)
        source = "sorted (decreasing)" if decreasing else "sorted"
    if ordering is not None:
        # Applied on top of any sort: positions refer to the sorted sequence.
        current_labels = [label_list[i] for i in perm]
        perm = [perm[i] for i in resolve_ordering(ordering, current_labels)]
        source = "explicit"

    logger.debug("graph info: %d nodes, %d edges, %s ordering", num_nodes, len(edges), source)

    return GraphInfo(
        edges=edges,
        nodes=tuple(node_list[i] for i in perm),
        labels=tuple(label_list[i] for i in perm),
        order=tuple(perm),
    )
