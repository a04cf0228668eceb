"""
Black-Scholes analytical pricing formulas for European options.

This module provides closed-form Black-Scholes prices and Greeks for a
``Contract`` evaluated at a caller-supplied volatility.

Degenerate inputs (zero volatility, zero time to expiry, non-positive spot
or strike) are not special-cased: the formulas are evaluated on NumPy
scalars with floating-point warnings silenced, so they yield NaN or Inf
instead of raising. Pass ``validate=True`` to reject such inputs with
``InvalidParametersError`` up front.
"""

import math

import numpy as np

from bsm_pricer.contract import Contract, OptionType
from bsm_pricer.validation import validate_contract, validate_volatility

_SQRT_2 = math.sqrt(2.0)
_SQRT_2PI = math.sqrt(2.0 * math.pi)


def norm_cdf(x: float) -> float:
    """
    Cumulative distribution function for standard normal distribution.

    Uses math.erf for calculation without scipy dependency.

    Parameters
    ----------
    x : float
        Input value

    Returns
    -------
    float
        CDF value at x: P(Z <= x) where Z ~ N(0,1). Saturates to 0 or 1
        for large |x|; NaN in gives NaN out.
    """
    return 0.5 * (1.0 + math.erf(x / _SQRT_2))


def norm_pdf(x: float) -> float:
    """
    Probability density function for standard normal distribution.

    Parameters
    ----------
    x : float
        Input value

    Returns
    -------
    float
        PDF value at x: φ(x) = exp(-x²/2)/√(2π). Underflows to 0 for
        large |x|.
    """
    # x * x rather than x**2: float power raises OverflowError for huge x
    return math.exp(-0.5 * x * x) / _SQRT_2PI


def _market_inputs(contract: Contract) -> tuple[np.float64, np.float64, np.float64, np.float64]:
    return (
        np.float64(contract.underlying_price),
        np.float64(contract.strike),
        np.float64(contract.risk_free_rate),
        np.float64(contract.years_to_expiration),
    )


def _check(contract: Contract, volatility: float, validate: bool) -> None:
    if validate:
        validate_contract(contract)
        validate_volatility(volatility)


def bs_d1_d2(contract: Contract, volatility: float) -> tuple[float, float]:
    """
    Compute the standardized log-moneyness terms d1 and d2.

    d1 = (ln(S/K) + (r + σ²/2)T) / (σ√T),  d2 = d1 - σ√T

    Every price and Greek in this module goes through this helper so they
    all see the same d1 for a given volatility.

    Parameters
    ----------
    contract : Contract
        Option contract
    volatility : float
        Annualized volatility σ

    Returns
    -------
    tuple[float, float]
        (d1, d2), possibly NaN or ±Inf for degenerate inputs
    """
    S, K, r, T = _market_inputs(contract)
    sigma = np.float64(volatility)
    with np.errstate(all="ignore"):
        sig_sqrt_T = sigma * np.sqrt(T)
        d1 = (np.log(S / K) + (r + 0.5 * sigma * sigma) * T) / sig_sqrt_T
        d2 = d1 - sig_sqrt_T
    return float(d1), float(d2)


def bs_price(contract: Contract, volatility: float, *, validate: bool = False) -> float:
    """
    Compute European option price using Black-Scholes formula.

    Parameters
    ----------
    contract : Contract
        Option contract. Its ``price`` field is ignored.
    volatility : float
        Annualized volatility σ
    validate : bool, optional
        Raise InvalidParametersError on degenerate inputs (default: False)

    Returns
    -------
    float
        Option price

    Notes
    -----
    - Call: S·N(d1) - K·exp(-rT)·N(d2)
    - Put:  K·exp(-rT)·N(-d2) - S·N(-d1)

    σ = 0 or T = 0 divides by zero inside d1 and the result is NaN or
    Inf. This is left as-is rather than replaced by intrinsic value.
    """
    _check(contract, volatility, validate)

    d1, d2 = bs_d1_d2(contract, volatility)
    S, K, r, T = _market_inputs(contract)

    with np.errstate(all="ignore"):
        discounted_strike = K * np.exp(-r * T)
        if contract.option_type is OptionType.CALL:
            price = S * norm_cdf(d1) - discounted_strike * norm_cdf(d2)
        else:  # put
            price = discounted_strike * norm_cdf(-d2) - S * norm_cdf(-d1)

    return float(price)


def bs_delta(contract: Contract, volatility: float, *, validate: bool = False) -> float:
    """
    Compute Delta for European option using Black-Scholes formula.

    Delta = ∂V/∂S

    Parameters
    ----------
    contract : Contract
        Option contract
    volatility : float
        Annualized volatility σ
    validate : bool, optional
        Raise InvalidParametersError on degenerate inputs (default: False)

    Returns
    -------
    float
        Delta (sensitivity to spot price)

    Notes
    -----
    - Call delta: N(d1), in (0, 1)
    - Put delta: N(d1) - 1, in (-1, 0)
    """
    _check(contract, volatility, validate)

    d1, _ = bs_d1_d2(contract, volatility)

    if contract.option_type is OptionType.CALL:
        return norm_cdf(d1)
    else:  # put
        return norm_cdf(d1) - 1.0


def bs_gamma(contract: Contract, volatility: float, *, validate: bool = False) -> float:
    """
    Compute Gamma for European option using Black-Scholes formula.

    Gamma = ∂²V/∂S² (same for calls and puts)

    Parameters
    ----------
    contract : Contract
        Option contract
    volatility : float
        Annualized volatility σ
    validate : bool, optional
        Raise InvalidParametersError on degenerate inputs (default: False)

    Returns
    -------
    float
        Gamma (sensitivity of delta to spot price)

    Notes
    -----
    Gamma = φ(d1) / (S * σ * √T). Diverges as σ → 0 or T → 0.
    """
    _check(contract, volatility, validate)

    d1, _ = bs_d1_d2(contract, volatility)
    S, _, _, T = _market_inputs(contract)

    with np.errstate(all="ignore"):
        gamma = norm_pdf(d1) / (S * np.float64(volatility) * np.sqrt(T))
    return float(gamma)


def bs_vega(contract: Contract, volatility: float, *, validate: bool = False) -> float:
    """
    Compute Vega for European option using Black-Scholes formula.

    Vega = ∂V/∂σ (same for calls and puts)

    Parameters
    ----------
    contract : Contract
        Option contract
    volatility : float
        Annualized volatility σ
    validate : bool, optional
        Raise InvalidParametersError on degenerate inputs (default: False)

    Returns
    -------
    float
        Vega per unit of volatility (not per vol point)

    Notes
    -----
    Vega = S * φ(d1) * √T. This is the derivative the implied volatility
    solver steps along, so it must use the same d1 as bs_price.
    """
    _check(contract, volatility, validate)

    d1, _ = bs_d1_d2(contract, volatility)
    S, _, _, T = _market_inputs(contract)

    with np.errstate(all="ignore"):
        vega = S * np.sqrt(T) * norm_pdf(d1)
    return float(vega)


def bs_theta(contract: Contract, volatility: float, *, validate: bool = False) -> float:
    """
    Compute Theta (per year) for European option using Black-Scholes formula.

    For call: -[S*φ(d1)*σ/(2√T)] - r*K*exp(-rT)*N(d2)
    For put: -[S*φ(d1)*σ/(2√T)] + r*K*exp(-rT)*N(-d2)
    """
    _check(contract, volatility, validate)

    d1, d2 = bs_d1_d2(contract, volatility)
    S, K, r, T = _market_inputs(contract)

    with np.errstate(all="ignore"):
        term1 = -(S * norm_pdf(d1) * np.float64(volatility)) / (2.0 * np.sqrt(T))
        discounted_strike = K * np.exp(-r * T)
        if contract.option_type is OptionType.CALL:
            theta = term1 - r * discounted_strike * norm_cdf(d2)
        else:  # put
            theta = term1 + r * discounted_strike * norm_cdf(-d2)

    return float(theta)


def bs_rho(contract: Contract, volatility: float, *, validate: bool = False) -> float:
    """Compute Rho = ∂V/∂r: K*T*exp(-rT)*N(d2) for calls, -K*T*exp(-rT)*N(-d2) for puts."""
    _check(contract, volatility, validate)

    _, d2 = bs_d1_d2(contract, volatility)
    _, K, r, T = _market_inputs(contract)

    with np.errstate(all="ignore"):
        discounted_strike = K * np.exp(-r * T)
        if contract.option_type is OptionType.CALL:
            rho = T * discounted_strike * norm_cdf(d2)
        else:  # put
            rho = -T * discounted_strike * norm_cdf(-d2)

    return float(rho)
