import logging
import time
from typing import List, Sequence

from ...config import unscale_cost
from ...errors import SolverError
from ...solution import FlowPath, Solution
from ..base import BaseFlowSolver, FlowGraph, SolverStatus
from .decomposition import DecomposedPath, decompose_flow
from .utils import verify_flow_conservation

# Configure logging for the module
logger = logging.getLogger(__name__)


class NetworkFlowAnalysis:
    """Run max flow, min cost flow and path decomposition on a frozen graph."""

    def __init__(self, graph: FlowGraph, solver: BaseFlowSolver):
        self.graph = graph
        self.solver = solver
        self.logger = logging.getLogger(__name__)

    def analyze_flow(self, source: int, sink: int) -> Solution:
        """
        Compute the min-cost maximum flow between source and sink.

        Args:
            source: Source vertex id
            sink: Sink vertex id

        Returns:
            Solution with the max flow value, its minimum total cost and the
            flow decomposed into labelled source-to-sink paths. A source equal
            to the sink yields the empty solution.

        Raises:
            SolverError: If the min cost solver is not optimal or returns a
                non-conservative flow
            DecompositionInconsistencyError: If the flow cannot be fully
                decomposed into paths
        """
        if source == sink:
            self.logger.info("Source and sink are the same vertex. No flow is computed.")
            return Solution.empty()

        # Early exit if either end is isolated
        if self.graph.out_degree(source) == 0 or self.graph.in_degree(sink) == 0:
            self.logger.info("Source has no outgoing or sink has no incoming edges. No flow is possible.")
            return Solution.empty()

        self.logger.info(f"Computing flow from {self.graph.label(source)} to "
                         f"{self.graph.label(sink)} with {self.solver.name}")

        start_time = time.time()
        flow_value = self.solver.max_flow(self.graph, source, sink)
        self.logger.info(f"Max flow: {flow_value} ({time.time() - start_time:.6f}s)")

        if flow_value == 0:
            return Solution.empty()

        start_time = time.time()
        result = self.solver.min_cost_flow(self.graph, source, sink, flow_value)
        if result.status != SolverStatus.OPTIMAL:
            raise SolverError(
                f"Min cost flow of {flow_value} units failed: {result.status.value}"
            )
        self.logger.info(f"Min cost flow scaled cost: {result.scaled_cost} "
                         f"({time.time() - start_time:.6f}s)")

        if not verify_flow_conservation(self.graph, result.flows, source, sink, flow_value):
            raise SolverError("Min cost flow solver returned a non-conservative flow assignment")

        start_time = time.time()
        paths = decompose_flow(self.graph, result.flows, source, sink)
        self.logger.info(f"Decomposed into {len(paths)} paths ({time.time() - start_time:.6f}s)")

        return Solution(
            max_flow=flow_value,
            total_cost=unscale_cost(result.scaled_cost),
            paths=self._label_paths(paths),
        )

    def _label_paths(self, paths: Sequence[DecomposedPath]) -> List[FlowPath]:
        return [
            FlowPath(flow=path.flow, nodes=[self.graph.label(v) for v in path.vertices])
            for path in paths
        ]
