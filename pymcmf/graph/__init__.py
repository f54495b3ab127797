from .base import Edge, FlowGraph, BaseFlowSolver, SolverCreator, SolverStatus, MinCostFlowResult
from .builder import GraphBuilder
from .networkx_graph import NetworkXSolver
from .ortools_graph import ORToolsSolver
from .flow.analysis import NetworkFlowAnalysis

__all__ = [
    'Edge',
    'FlowGraph',
    'BaseFlowSolver',
    'SolverCreator',
    'SolverStatus',
    'MinCostFlowResult',
    'GraphBuilder',
    'NetworkXSolver',
    'ORToolsSolver',
    'NetworkFlowAnalysis'
]
