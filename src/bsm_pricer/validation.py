"""
Opt-in input validation.

The pricing formulas never raise on degenerate inputs; they return NaN or
Inf. Callers that prefer an explicit failure can run these checks first,
either directly or through the ``validate=True`` keyword of the pricing
functions and the solver configuration.
"""

import math

import numpy as np

from bsm_pricer.contract import Contract, OptionType


class InvalidParametersError(ValueError):
    """Raised when contract or volatility inputs are outside the model's domain."""


def validate_contract(contract: Contract) -> None:
    """
    Check that a contract lies inside the Black-Scholes domain.

    Parameters
    ----------
    contract : Contract
        Contract to check

    Raises
    ------
    InvalidParametersError
        If strike, spot or days to expiration are not strictly positive
        and finite, or if the risk-free rate is not finite
    """
    for name in ("underlying_price", "strike", "days_to_expiration"):
        value = getattr(contract, name)
        if not (value > 0 and math.isfinite(value)):
            raise InvalidParametersError(f"{name} must be positive and finite")
    if not math.isfinite(contract.risk_free_rate):
        raise InvalidParametersError("risk_free_rate must be finite")


def validate_volatility(volatility: float) -> None:
    """Reject non-positive or non-finite volatility."""
    if not (volatility > 0 and math.isfinite(volatility)):
        raise InvalidParametersError(
            f"volatility must be positive and finite, got {volatility!r}"
        )


def check_price_bounds(contract: Contract) -> None:
    """
    Check the observed price against no-arbitrage bounds.

    Call: max(S - K*exp(-rT), 0) <= price <= S
    Put:  max(K*exp(-rT) - S, 0) <= price <= K*exp(-rT)

    Raises
    ------
    InvalidParametersError
        If the discount factor is not representable, or the price is
        negative or outside the bounds
    """
    S = contract.underlying_price
    K = contract.strike
    price = contract.price
    with np.errstate(all="ignore"):
        discount = float(np.exp(-contract.risk_free_rate * contract.years_to_expiration))
    if not 0 < discount < math.inf:
        raise InvalidParametersError("risk_free_rate * years_to_expiration out of range")
    discounted_strike = K * discount

    if not price >= 0:
        raise InvalidParametersError("price must be non-negative")

    if contract.option_type is OptionType.CALL:
        lower_bound = max(S - discounted_strike, 0.0)
        upper_bound = S
        upper_name = "spot price"
    else:
        lower_bound = max(discounted_strike - S, 0.0)
        upper_bound = discounted_strike
        upper_name = "discounted strike"

    if price < lower_bound:
        raise InvalidParametersError(
            f"{contract.option_type.value.capitalize()} price {price:.6f} is below "
            f"arbitrage lower bound {lower_bound:.6f} (intrinsic value)"
        )
    if price > upper_bound:
        raise InvalidParametersError(
            f"{contract.option_type.value.capitalize()} price {price:.6f} exceeds "
            f"arbitrage upper bound {upper_bound:.6f} ({upper_name})"
        )
