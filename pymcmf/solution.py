from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass(frozen=True)
class FlowPath:
    """A source-to-sink path, as vertex labels, carrying ``flow`` units."""
    flow: int
    nodes: List[str]

    def __str__(self) -> str:
        return " → ".join(self.nodes)


@dataclass(frozen=True)
class Solution:
    max_flow: int
    total_cost: float
    paths: List[FlowPath] = field(default_factory=list)

    @classmethod
    def empty(cls) -> 'Solution':
        return cls(max_flow=0, total_cost=0.0, paths=[])

    def to_dict(self) -> Dict[str, Any]:
        return {
            'max_flow': self.max_flow,
            'total_cost': self.total_cost,
            'paths': [{'flow': path.flow, 'nodes': list(path.nodes)} for path in self.paths],
        }
