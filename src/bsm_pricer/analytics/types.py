"""
Implied volatility result types.
"""

from dataclasses import dataclass
from enum import Enum


class SolverStatus(Enum):
    """Outcome of an implied volatility solve."""

    CONVERGED = "converged"
    MAX_ITERATIONS_EXCEEDED = "max_iterations_exceeded"
    ILL_CONDITIONED = "ill_conditioned"


@dataclass(frozen=True)
class ImpliedVolResult:
    """
    Container for an implied volatility estimate.

    Attributes
    ----------
    volatility : float
        Final iterate. When the solver did not converge this is the best
        available estimate, returned unchanged.
    iterations : int
        Number of pricing evaluations performed
    status : SolverStatus
        CONVERGED, MAX_ITERATIONS_EXCEEDED, or ILL_CONDITIONED (the solve
        ended on a non-finite iterate or price)
    price_error : float
        Model price minus target price at the last evaluated iterate
    """

    volatility: float
    iterations: int
    status: SolverStatus
    price_error: float

    @property
    def converged(self) -> bool:
        return self.status is SolverStatus.CONVERGED

    def __repr__(self) -> str:
        return (
            f"ImpliedVolResult(volatility={self.volatility:.8f}, "
            f"iterations={self.iterations}, status={self.status.value}, "
            f"price_error={self.price_error:.2e})"
        )
