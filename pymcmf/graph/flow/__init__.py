from .analysis import NetworkFlowAnalysis
from .decomposition import DecomposedPath, decompose_flow
from .utils import (
    verify_flow_conservation,
    edge_flows_from_paths,
    calculate_flow_cost,
    calculate_flow_metrics
)

__all__ = [
    'NetworkFlowAnalysis',
    'DecomposedPath',
    'decompose_flow',
    'verify_flow_conservation',
    'edge_flows_from_paths',
    'calculate_flow_cost',
    'calculate_flow_metrics',
]
