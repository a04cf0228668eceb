"""
Implied volatility solver for European options.

Inverts the Black-Scholes price for volatility with Newton-Raphson,
stepping along the analytical vega.

Two modes are available through ``SolverConfig.strict``:

- strict: the plain Newton-Raphson loop. No bracket, no clamp, and no
  protection against a vanishing vega; non-finite iterates are fed back
  in until the iteration budget runs out.
- guarded (default): the same Newton steps, but a volatility bracket is
  narrowed on every evaluation and a bisection step replaces any Newton
  step that is non-finite, leaves the bracket, or divides by a vega below
  ``vega_floor``.

On well-conditioned inputs both modes take identical steps and return the
same number. Neither mode raises on non-convergence: the last iterate is
returned and the outcome is reported through ``ImpliedVolResult.status``
and a warning log record.
"""

import logging
import math

import numpy as np

from bsm_pricer.analytics.black_scholes import bs_price, bs_vega
from bsm_pricer.analytics.types import ImpliedVolResult, SolverStatus
from bsm_pricer.config import DEFAULT_SOLVER_CONFIG, SolverConfig
from bsm_pricer.contract import Contract
from bsm_pricer.validation import check_price_bounds, validate_contract

logger = logging.getLogger(__name__)


def implied_vol(contract: Contract, config: SolverConfig | None = None) -> float:
    """
    Compute implied volatility using Newton-Raphson.

    Solves for σ such that bs_price(contract, σ) = contract.price.

    Parameters
    ----------
    contract : Contract
        Option contract; its ``price`` field is the target
    config : SolverConfig | None, optional
        Solver settings (default: DEFAULT_SOLVER_CONFIG)

    Returns
    -------
    float
        Implied volatility. If the solver did not converge this is the
        last iterate, which may be inaccurate or non-finite; use
        ``solve_implied_vol`` to find out.
    """
    return solve_implied_vol(contract, config).volatility


def solve_implied_vol(
    contract: Contract, config: SolverConfig | None = None
) -> ImpliedVolResult:
    """
    Compute implied volatility and report how the solve ended.

    Parameters
    ----------
    contract : Contract
        Option contract; its ``price`` field is the target
    config : SolverConfig | None, optional
        Solver settings (default: DEFAULT_SOLVER_CONFIG)

    Returns
    -------
    ImpliedVolResult
        Volatility, iteration count, status and final price error

    Raises
    ------
    InvalidParametersError
        Only when ``config.validate`` is set and the contract is degenerate
        or its price violates no-arbitrage bounds
    """
    if config is None:
        config = DEFAULT_SOLVER_CONFIG

    if config.validate:
        validate_contract(contract)
        check_price_bounds(contract)

    if config.strict:
        result = _solve_strict(contract, config)
    else:
        result = _solve_guarded(contract, config)

    if not result.converged:
        logger.warning(
            f"Implied volatility did not converge ({result.status.value}) after "
            f"{result.iterations} iterations: sigma={result.volatility}, "
            f"price error={result.price_error}, target={contract.price}"
        )
    return result


def _exhausted(sigma: float, iterations: int, price_error: float) -> ImpliedVolResult:
    if math.isfinite(sigma) and math.isfinite(price_error):
        status = SolverStatus.MAX_ITERATIONS_EXCEEDED
    else:
        status = SolverStatus.ILL_CONDITIONED
    return ImpliedVolResult(sigma, iterations, status, price_error)


def _solve_strict(contract: Contract, config: SolverConfig) -> ImpliedVolResult:
    target = contract.price
    sigma = config.initial_volatility
    price_error = math.nan

    for iteration in range(1, config.max_iterations + 1):
        price = bs_price(contract, sigma)
        vega = bs_vega(contract, sigma)
        price_error = price - target

        logger.debug(
            f"newton iter={iteration} sigma={sigma:.10g} "
            f"price_error={price_error:.3e} vega={vega:.6g}"
        )

        if abs(price_error) < config.tolerance:
            return ImpliedVolResult(sigma, iteration, SolverStatus.CONVERGED, price_error)

        # vega may be zero; the step then becomes ±Inf/NaN instead of raising
        with np.errstate(all="ignore"):
            sigma = float(sigma - np.float64(price_error) / np.float64(vega))

    return _exhausted(sigma, config.max_iterations, price_error)


def _solve_guarded(contract: Contract, config: SolverConfig) -> ImpliedVolResult:
    target = contract.price
    sigma_l = config.vol_lower
    sigma_h = config.vol_upper
    sigma = config.initial_volatility
    if not sigma_l < sigma < sigma_h:
        sigma = 0.5 * (sigma_l + sigma_h)
    price_error = math.nan

    for iteration in range(1, config.max_iterations + 1):
        price = bs_price(contract, sigma)
        vega = bs_vega(contract, sigma)
        price_error = price - target

        logger.debug(
            f"newton iter={iteration} sigma={sigma:.10g} "
            f"price_error={price_error:.3e} vega={vega:.6g}"
        )

        if abs(price_error) < config.tolerance:
            return ImpliedVolResult(sigma, iteration, SolverStatus.CONVERGED, price_error)

        if not math.isfinite(price_error):
            return ImpliedVolResult(sigma, iteration, SolverStatus.ILL_CONDITIONED, price_error)

        # Price is increasing in sigma, so the sign of the error narrows the bracket
        if price_error > 0:
            sigma_h = sigma
        else:
            sigma_l = sigma

        candidate = math.nan
        if abs(vega) > config.vega_floor:
            candidate = sigma - price_error / vega

        if math.isfinite(candidate) and sigma_l < candidate < sigma_h:
            sigma = candidate
        else:
            logger.debug(
                f"bisection fallback at iter={iteration}: vega={vega:.3e}, "
                f"bracket=[{sigma_l:.6g}, {sigma_h:.6g}]"
            )
            sigma = 0.5 * (sigma_l + sigma_h)

    return _exhausted(sigma, config.max_iterations, price_error)
