import logging
from typing import Iterable, Optional, Tuple

import pandas as pd

from .config import Config
from .data_ingestion import DataIngestion
from .graph import GraphBuilder, NetworkFlowAnalysis, SolverCreator
from .solution import Solution

logger = logging.getLogger(__name__)


class GraphManager:
    def __init__(self, solver_type: Optional[str] = None):
        """
        Initialize an empty graph and a flow solver backend.

        Args:
            solver_type: 'ortools' or 'networkx'; defaults to the configured
                backend (PYMCMF_SOLVER)
        """
        if solver_type is None:
            solver_type = Config.from_env().solver_type
        self.solver = SolverCreator.create_solver(solver_type)
        self.builder = GraphBuilder()
        self._flow_analysis: Optional[NetworkFlowAnalysis] = None

    @classmethod
    def from_dataframe(cls, df_edges: pd.DataFrame, solver_type: Optional[str] = None) -> 'GraphManager':
        manager = cls(solver_type)
        manager.add_edges(DataIngestion(df_edges).rows())
        return manager

    @classmethod
    def from_csv(cls, edges_file: str, solver_type: Optional[str] = None) -> 'GraphManager':
        manager = cls(solver_type)
        manager.add_edges(DataIngestion.from_csv(edges_file).rows())
        return manager

    def add_edge(self, from_label: str, to_label: str, capacity, cost) -> int:
        return self.builder.add_edge(from_label, to_label, capacity, cost)

    def add_edges(self, rows: Iterable[Tuple[str, str, float, float]]):
        for from_label, to_label, capacity, cost in rows:
            self.builder.add_edge(from_label, to_label, capacity, cost)

    def solve(self, source: str, sink: str) -> Solution:
        """Compute the min-cost max flow between two vertex labels.

        The graph is frozen by the first call; later calls reuse it.
        """
        # Unknown labels are rejected before any solver runs
        source_id = self.builder.vertex_id(source)
        sink_id = self.builder.vertex_id(sink)

        if self._flow_analysis is None:
            graph, _ = self.builder.finalize()
            self._flow_analysis = NetworkFlowAnalysis(graph, self.solver)

        return self._flow_analysis.analyze_flow(source_id, sink_id)

    def get_graph_info(self) -> str:
        """Get information about the graph built so far."""
        labels = self.builder.labels
        return (f"Total vertices: {len(labels)}\n"
                f"Total edges: {self.builder.num_edges()}\n"
                f"Sample vertices: {', '.join(labels[:5])}")
