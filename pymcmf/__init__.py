from .errors import (
    McmfError,
    InvalidInputError,
    UnknownVertexError,
    GraphFrozenError,
    SolverError,
    DecompositionInconsistencyError
)
from .solution import FlowPath, Solution
from .data_ingestion import DataIngestion
from .graph_manager import GraphManager

__version__ = "0.1.0"

__all__ = [
    'GraphManager',
    'DataIngestion',
    'Solution',
    'FlowPath',
    'McmfError',
    'InvalidInputError',
    'UnknownVertexError',
    'GraphFrozenError',
    'SolverError',
    'DecompositionInconsistencyError'
]
