import pandas as pd
from typing import Iterator, List, Tuple
import logging

from .errors import InvalidInputError

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ['from', 'to', 'capacity']


class DataIngestion:
    def __init__(self, df_edges: pd.DataFrame):
        """
        Read an edge list from a DataFrame.

        Expected columns are ``from``, ``to`` and ``capacity``; ``cost`` is
        optional and defaults to 0. Row order is kept, since it decides the
        adjacency order of the built graph.
        """
        missing = [col for col in REQUIRED_COLUMNS if col not in df_edges.columns]
        if missing:
            raise InvalidInputError(f"Edge list is missing columns: {', '.join(missing)}")

        df = df_edges.copy()
        if 'cost' not in df.columns:
            df['cost'] = 0.0

        incomplete = df[df[['from', 'to', 'capacity', 'cost']].isna().any(axis=1)]
        if not incomplete.empty:
            raise InvalidInputError(
                f"Edge list has {len(incomplete)} incomplete rows (first at index {incomplete.index[0]})"
            )

        df['from'] = df['from'].astype(str).str.strip()
        df['to'] = df['to'].astype(str).str.strip()

        self.edges: List[Tuple[str, str]] = list(zip(df['from'], df['to']))
        self.capacities = df['capacity'].tolist()
        self.costs = df['cost'].tolist()
        logger.debug(f"Ingested {len(self.edges)} edges")

    def rows(self) -> Iterator[Tuple[str, str, float, float]]:
        for (u, v), capacity, cost in zip(self.edges, self.capacities, self.costs):
            yield u, v, capacity, cost

    @classmethod
    def from_csv(cls, edges_file: str) -> 'DataIngestion':
        try:
            df_edges = pd.read_csv(edges_file)
        except (OSError, pd.errors.ParserError, pd.errors.EmptyDataError) as e:
            raise InvalidInputError(f"Error reading CSV file: {str(e)}") from e
        return cls(df_edges)
