"""
Black-Scholes-Merton Option Pricer

Closed-form European option prices, Greeks, and implied volatility.
"""

from bsm_pricer._version import __version__

# Core types
from bsm_pricer.config import DEFAULT_SOLVER_CONFIG, SolverConfig
from bsm_pricer.contract import DAYS_PER_YEAR, Contract, OptionType
from bsm_pricer.validation import InvalidParametersError

# Analytics
from bsm_pricer.analytics.black_scholes import (
    bs_delta,
    bs_gamma,
    bs_price,
    bs_rho,
    bs_theta,
    bs_vega,
    norm_cdf,
    norm_pdf,
)
from bsm_pricer.analytics.implied_vol import implied_vol, solve_implied_vol
from bsm_pricer.analytics.types import ImpliedVolResult, SolverStatus

__all__ = [
    # Version
    "__version__",
    # Contract
    "Contract",
    "OptionType",
    "DAYS_PER_YEAR",
    # Configuration and errors
    "SolverConfig",
    "DEFAULT_SOLVER_CONFIG",
    "InvalidParametersError",
    # Analytics
    "norm_cdf",
    "norm_pdf",
    "bs_price",
    "bs_delta",
    "bs_gamma",
    "bs_vega",
    "bs_theta",
    "bs_rho",
    "implied_vol",
    "solve_implied_vol",
    "ImpliedVolResult",
    "SolverStatus",
]
