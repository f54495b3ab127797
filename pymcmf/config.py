import os
from dataclasses import dataclass

from dotenv import load_dotenv

# Costs are handed to the solvers as integers: cost * COST_MULTIPLIER, truncated.
# The reported total cost is divided by the same factor.
COST_MULTIPLIER = 1000

DEFAULT_SOLVER = 'ortools'
DEFAULT_LOG_LEVEL = 'INFO'


@dataclass(frozen=True)
class Config:
    solver_type: str = DEFAULT_SOLVER
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls) -> 'Config':
        """Load configuration from environment variables (and a .env file, if present)."""
        load_dotenv()
        return cls(
            solver_type=os.getenv('PYMCMF_SOLVER', DEFAULT_SOLVER).strip().lower(),
            log_level=os.getenv('PYMCMF_LOG_LEVEL', DEFAULT_LOG_LEVEL).strip().upper(),
        )


def scale_cost(cost: float) -> int:
    """Encode a real edge cost as the integer unit cost the solvers expect."""
    return int(cost * COST_MULTIPLIER)


def unscale_cost(scaled_cost: int) -> float:
    """Decode a solver's integer total cost."""
    return scaled_cost / COST_MULTIPLIER
