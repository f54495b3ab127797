import logging
import math
from numbers import Real
from typing import Dict, List, Optional, Tuple

from ..errors import GraphFrozenError, InvalidInputError, UnknownVertexError
from .base import Edge, FlowGraph

logger = logging.getLogger(__name__)


class GraphBuilder:
    """
    Accumulates vertices and edges, then freezes them into a FlowGraph.

    Vertex labels are kept in an arena: the position of a label in
    ``self._labels`` is its id, and ``self._label_to_id`` is the reverse
    lookup. Parallel edges are kept as distinct instances.
    """

    def __init__(self):
        self._labels: List[str] = []
        self._label_to_id: Dict[str, int] = {}
        self._edges: List[Edge] = []
        self._graph: Optional[FlowGraph] = None

    @property
    def is_frozen(self) -> bool:
        return self._graph is not None

    @property
    def labels(self) -> List[str]:
        return list(self._labels)

    def num_edges(self) -> int:
        return len(self._edges)

    def add_vertex(self, label: str) -> int:
        """Return the id of ``label``, creating the vertex on first use."""
        vertex = self._label_to_id.get(label)
        if vertex is not None:
            return vertex

        self._check_not_frozen()
        vertex = len(self._labels)
        self._labels.append(label)
        self._label_to_id[label] = vertex
        return vertex

    def add_edge(self, from_label: str, to_label: str, capacity, cost) -> int:
        """
        Add a directed edge and return its id.

        Args:
            from_label: Tail vertex label
            to_label: Head vertex label
            capacity: Edge capacity, truncated to an integer; must be positive
            cost: Per-unit flow cost, any finite real

        Raises:
            InvalidInputError: If the capacity or cost is rejected
            GraphFrozenError: If the graph was already finalized
        """
        self._check_not_frozen()
        capacity = self._coerce_capacity(capacity)
        cost = self._coerce_cost(cost)

        tail = self.add_vertex(from_label)
        head = self.add_vertex(to_label)
        edge = Edge(len(self._edges), tail, head, capacity, cost)
        self._edges.append(edge)
        return edge.id

    def vertex_id(self, label: str) -> int:
        try:
            return self._label_to_id[label]
        except KeyError:
            raise UnknownVertexError(label) from None

    def finalize(self) -> Tuple[FlowGraph, Dict[str, int]]:
        """Freeze the graph. Later calls return the same graph."""
        if self._graph is None:
            self._graph = FlowGraph(self._labels, self._edges)
            logger.debug(f"Graph finalized with {self._graph.num_vertices()} vertices "
                         f"and {self._graph.num_edges()} edges")
        return self._graph, dict(self._label_to_id)

    def _check_not_frozen(self):
        if self._graph is not None:
            raise GraphFrozenError("Graph is finalized; no more vertices or edges can be added.")

    @staticmethod
    def _coerce_capacity(capacity) -> int:
        if isinstance(capacity, bool) or not isinstance(capacity, Real):
            raise InvalidInputError(f"Capacity must be a number, got {capacity!r}")
        try:
            value = int(capacity)
        except (ValueError, OverflowError):
            raise InvalidInputError(f"Capacity must be finite, got {capacity!r}") from None
        if value <= 0:
            raise InvalidInputError(f"Capacity must be a positive integer, got {capacity!r}")
        return value

    @staticmethod
    def _coerce_cost(cost) -> float:
        if isinstance(cost, bool) or not isinstance(cost, Real):
            raise InvalidInputError(f"Cost must be a number, got {cost!r}")
        if not math.isfinite(cost):
            raise InvalidInputError(f"Cost must be finite, got {cost!r}")
        return float(cost)
