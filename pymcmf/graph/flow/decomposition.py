import logging
import math
from typing import Iterator, List, NamedTuple, Sequence, Tuple

from ...errors import DecompositionInconsistencyError
from ..base import FlowGraph

logger = logging.getLogger(__name__)


class DecomposedPath(NamedTuple):
    """A source-to-sink path carrying ``flow`` units.

    ``edges[i]`` is the id of the edge joining ``vertices[i]`` and
    ``vertices[i + 1]``.
    """
    vertices: Tuple[int, ...]
    edges: Tuple[int, ...]
    flow: int


def decompose_flow(graph: FlowGraph, flow: Sequence[int], source: int,
                   sink: int) -> List[DecomposedPath]:
    """
    Decompose a per-edge flow into source-to-sink paths.

    Depth-first greedy path peeling: from the last vertex of the current
    prefix, out-edges with remaining flow are tried in adjacency order. Reaching
    the sink emits the prefix as a path carrying the prefix bottleneck, which
    is then subtracted from every edge of the prefix. All flow reachable
    through a prefix is drained before the walk backtracks past it.

    Args:
        graph: Frozen graph whose adjacency order decides ties
        flow: Flow of every edge, indexed by edge id; not modified
        source: Source vertex id
        sink: Sink vertex id

    Returns:
        Paths whose flows add up, edge by edge, to ``flow`` exactly

    Raises:
        DecompositionInconsistencyError: If any flow is left undecomposed,
            e.g. because ``flow`` is not conservative or contains a cycle
    """
    if len(flow) != graph.num_edges():
        raise DecompositionInconsistencyError(
            f"Flow assignment covers {len(flow)} edges, graph has {graph.num_edges()}"
        )
    if source == sink:
        return []

    residual = list(flow)
    paths: List[DecomposedPath] = []

    prefix = [source]
    prefix_edges: List[int] = []
    on_prefix = {source}
    # One frame per prefix vertex: its pending out-edges and the bottleneck of
    # the prefix ending at it
    frames: List[Iterator[int]] = [iter(graph.out_edges(source))]
    bottlenecks = [math.inf]

    while frames:
        edge_id = next(frames[-1], None) if bottlenecks[-1] > 0 else None
        if edge_id is None:
            # Backtrack
            frames.pop()
            bottlenecks.pop()
            if prefix_edges:
                on_prefix.discard(prefix.pop())
                prefix_edges.pop()
            continue

        if residual[edge_id] <= 0:
            continue

        head = graph.get_edge(edge_id).head
        if head in on_prefix:
            logger.debug(f"Edge {edge_id} closes a flow cycle at vertex {head}; not followed")
            continue

        path_flow = min(bottlenecks[-1], residual[edge_id])
        if head == sink:
            path_edges = tuple(prefix_edges) + (edge_id,)
            paths.append(DecomposedPath(tuple(prefix) + (sink,), path_edges, path_flow))
            for e in path_edges:
                residual[e] -= path_flow
            bottlenecks = [b - path_flow for b in bottlenecks]
        else:
            prefix.append(head)
            prefix_edges.append(edge_id)
            on_prefix.add(head)
            frames.append(iter(graph.out_edges(head)))
            bottlenecks.append(path_flow)

    _check_fully_decomposed(graph, residual, prefix, prefix_edges, source)
    logger.debug(f"Decomposed flow into {len(paths)} paths")
    return paths


def _check_fully_decomposed(graph: FlowGraph, residual: Sequence[int], prefix: Sequence[int],
                            prefix_edges: Sequence[int], source: int):
    if list(prefix) != [source] or prefix_edges:
        raise DecompositionInconsistencyError(
            f"Path prefix did not unwind to the source: {list(prefix)}"
        )

    leftover = {e: r for e, r in enumerate(residual) if r != 0}
    if leftover:
        described = ", ".join(
            f"{graph.label(graph.get_edge(e).tail)}->{graph.label(graph.get_edge(e).head)}"
            f" (edge {e}): {r}"
            for e, r in sorted(leftover.items())[:10]
        )
        raise DecompositionInconsistencyError(
            f"{len(leftover)} edges keep undecomposed flow after path extraction: {described}"
        )
