class McmfError(Exception):
    """Base class for all errors raised by pymcmf."""


class InvalidInputError(McmfError, ValueError):
    """Rejected edge or ingestion data (non-positive capacity, non-finite cost, ...)."""


class UnknownVertexError(McmfError, ValueError):
    """A vertex label was never introduced to the graph."""

    def __init__(self, label):
        super().__init__(f"Vertex '{label}' not in graph.")
        self.label = label


class GraphFrozenError(McmfError, RuntimeError):
    """The graph was modified after it had been finalized."""


class SolverError(McmfError, RuntimeError):
    """The flow solver did not return an optimal, conservative flow."""


class DecompositionInconsistencyError(McmfError, RuntimeError):
    """Path decomposition left flow undecomposed or did not unwind cleanly.

    Signals either a non-conservative assignment or a flow-carrying cycle,
    which source-to-sink path peeling cannot express.
    """
