"""
Solver configuration.
"""

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class SolverConfig:
    """
    Tuning parameters for the implied volatility solver.

    Attributes
    ----------
    initial_volatility : float
        Starting iterate for Newton-Raphson
    tolerance : float
        Absolute price error (currency units) accepted as converged
    max_iterations : int
        Maximum number of pricing evaluations
    strict : bool
        If True, run the unguarded Newton-Raphson loop exactly: no bracket,
        no clamp, no fallback on vanishing vega
    vega_floor : float
        Guarded mode only. Below this |vega| a bisection step is taken.
    vol_lower : float
        Guarded mode only. Lower end of the volatility bracket.
    vol_upper : float
        Guarded mode only. Upper end of the volatility bracket.
    validate : bool
        Reject degenerate contracts and prices outside no-arbitrage bounds
        with InvalidParametersError before iterating
    """

    initial_volatility: float = 0.2
    tolerance: float = 1e-4
    max_iterations: int = 100
    strict: bool = False
    vega_floor: float = 1e-8
    vol_lower: float = 1e-6
    vol_upper: float = 5.0
    validate: bool = False

    def __post_init__(self) -> None:
        if self.max_iterations < 1:
            raise ValueError("max_iterations must be at least 1")
        if not self.tolerance > 0:
            raise ValueError("tolerance must be positive")
        if self.vega_floor < 0:
            raise ValueError("vega_floor must be non-negative")
        if not self.vol_lower > 0:
            raise ValueError("vol_lower must be positive")
        if not self.vol_lower < self.vol_upper:
            raise ValueError("vol_lower must be below vol_upper")
        if not math.isfinite(self.initial_volatility):
            raise ValueError("initial_volatility must be finite")


DEFAULT_SOLVER_CONFIG = SolverConfig()
