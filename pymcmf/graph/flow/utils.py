from typing import Dict, List, Sequence

from ..base import FlowGraph
from .decomposition import DecomposedPath


def verify_flow_conservation(graph: FlowGraph, flow: Sequence[int], source: int, sink: int,
                             flow_value: int) -> bool:
    """Verify capacity bounds, conservation at intermediate nodes and the net source/sink flow."""
    if len(flow) != graph.num_edges():
        return False

    balance = [0] * graph.num_vertices()
    for edge, edge_flow in zip(graph.edges, flow):
        if edge_flow < 0 or edge_flow > edge.capacity:
            return False
        balance[edge.tail] -= edge_flow
        balance[edge.head] += edge_flow

    for vertex, net_inflow in enumerate(balance):
        if vertex == source:
            if source != sink and net_inflow != -flow_value:
                return False
        elif vertex == sink:
            if net_inflow != flow_value:
                return False
        elif net_inflow != 0:
            return False
    return True


def edge_flows_from_paths(graph: FlowGraph, paths: Sequence[DecomposedPath]) -> List[int]:
    """Rebuild the per-edge flow carried by a set of paths, indexed by edge id."""
    edge_flows = [0] * graph.num_edges()
    for path in paths:
        for edge_id in path.edges:
            edge_flows[edge_id] += path.flow
    return edge_flows


def calculate_flow_cost(graph: FlowGraph, flow: Sequence[int]) -> float:
    """Sum of flow * cost over all edges, using the unscaled edge costs."""
    return sum(edge.cost * edge_flow for edge, edge_flow in zip(graph.edges, flow))


def calculate_flow_metrics(paths: Sequence[DecomposedPath]) -> Dict[str, float]:
    """Calculate summary metrics of a decomposition."""
    if not paths:
        return {
            'total_flow': 0,
            'num_paths': 0,
            'average_path_flow': 0,
            'max_path_flow': 0,
            'min_path_flow': 0,
            'unique_edges': 0,
            'average_path_length': 0,
            'max_path_length': 0,
            'min_path_length': 0,
        }

    flows = [path.flow for path in paths]
    total_flow = sum(flows)
    unique_edges = {edge_id for path in paths for edge_id in path.edges}

    metrics = {
        'total_flow': total_flow,
        'num_paths': len(paths),
        'average_path_flow': total_flow / len(paths),
        'max_path_flow': max(flows),
        'min_path_flow': min(flows),
        'unique_edges': len(unique_edges),
    }

    # Path length in edges
    path_lengths = [len(path.edges) for path in paths]
    metrics.update({
        'average_path_length': sum(path_lengths) / len(path_lengths),
        'max_path_length': max(path_lengths),
        'min_path_length': min(path_lengths),
    })

    return metrics
