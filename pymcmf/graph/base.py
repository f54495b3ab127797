from abc import abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, NamedTuple, Optional, Sequence, Tuple

from ..errors import UnknownVertexError


@dataclass(frozen=True)
class Edge:
    """A directed edge instance. ``id`` is its insertion index in the graph."""
    id: int
    tail: int
    head: int
    capacity: int
    cost: float


class FlowGraph:
    """Immutable directed multigraph over contiguous integer vertex ids.

    Outgoing edges of every vertex are kept in insertion order; that order is
    the adjacency order every traversal of the graph follows.
    """

    def __init__(self, labels: Sequence[str], edges: Sequence[Edge]):
        self._labels = tuple(labels)
        self._label_to_id = {label: idx for idx, label in enumerate(self._labels)}
        self._edges = tuple(edges)

        out_edges: List[List[int]] = [[] for _ in self._labels]
        in_edges: List[List[int]] = [[] for _ in self._labels]
        for edge in self._edges:
            out_edges[edge.tail].append(edge.id)
            in_edges[edge.head].append(edge.id)
        self._out_edges = tuple(tuple(ids) for ids in out_edges)
        self._in_edges = tuple(tuple(ids) for ids in in_edges)

    @property
    def edges(self) -> Tuple[Edge, ...]:
        return self._edges

    @property
    def labels(self) -> Tuple[str, ...]:
        return self._labels

    def num_vertices(self) -> int:
        return len(self._labels)

    def num_edges(self) -> int:
        return len(self._edges)

    def has_vertex(self, label: str) -> bool:
        return label in self._label_to_id

    def vertex_id(self, label: str) -> int:
        try:
            return self._label_to_id[label]
        except KeyError:
            raise UnknownVertexError(label) from None

    def label(self, vertex: int) -> str:
        return self._labels[vertex]

    def get_edge(self, edge_id: int) -> Edge:
        return self._edges[edge_id]

    def out_edges(self, vertex: int) -> Tuple[int, ...]:
        """Ids of the edges leaving ``vertex``, in adjacency order."""
        return self._out_edges[vertex]

    def in_edges(self, vertex: int) -> Tuple[int, ...]:
        return self._in_edges[vertex]

    def out_degree(self, vertex: int) -> int:
        return len(self._out_edges[vertex])

    def in_degree(self, vertex: int) -> int:
        return len(self._in_edges[vertex])

    def label_mapping(self) -> Dict[str, int]:
        return dict(self._label_to_id)


class SolverStatus(Enum):
    OPTIMAL = 'optimal'
    INFEASIBLE = 'infeasible'
    UNBOUNDED = 'unbounded'
    BAD_INPUT = 'bad_input'


class MinCostFlowResult(NamedTuple):
    status: SolverStatus
    scaled_cost: int
    flows: Tuple[int, ...]


class BaseFlowSolver:
    """Interface every max-flow / min-cost-flow backend implements."""

    name: str = 'base'

    @abstractmethod
    def max_flow(self, graph: FlowGraph, source: int, sink: int) -> int:
        """Return the maximum flow value from source to sink."""
        pass

    @abstractmethod
    def min_cost_flow(self, graph: FlowGraph, source: int, sink: int,
                      flow_value: int) -> MinCostFlowResult:
        """
        Compute a minimum-cost flow of ``flow_value`` units from source to sink.

        Args:
            graph: Frozen graph; edge costs are encoded with ``config.scale_cost``
            source: Vertex supplying ``flow_value`` units
            sink: Vertex absorbing ``flow_value`` units
            flow_value: Required flow value, normally the max flow

        Returns:
            MinCostFlowResult with the solver status, the integer (scaled) total
            cost and the flow of every edge indexed by edge id. Cost and flows
            are only meaningful when the status is OPTIMAL.
        """
        pass


class SolverCreator:
    @staticmethod
    def create_solver(solver_type: Optional[str] = None) -> BaseFlowSolver:
        """Factory method to create the requested solver backend."""
        if solver_type is None:
            from ..config import DEFAULT_SOLVER
            solver_type = DEFAULT_SOLVER

        if solver_type == 'ortools':
            from .ortools_graph import ORToolsSolver
            return ORToolsSolver()
        elif solver_type == 'networkx':
            from .networkx_graph import NetworkXSolver
            return NetworkXSolver()
        else:
            raise ValueError(f"Unsupported solver type: {solver_type}")
