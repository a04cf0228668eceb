"""
Analytics module for Black-Scholes pricing and implied volatility.

Provides closed-form pricing and Greeks for European options and a
Newton-Raphson implied volatility solver, without scipy dependency.
"""

from bsm_pricer.analytics.black_scholes import (
    bs_d1_d2,
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
    "ImpliedVolResult",
    "SolverStatus",
    "bs_d1_d2",
    "bs_delta",
    "bs_gamma",
    "bs_price",
    "bs_rho",
    "bs_theta",
    "bs_vega",
    "implied_vol",
    "norm_cdf",
    "norm_pdf",
    "solve_implied_vol",
]
