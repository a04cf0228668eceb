"""
Option contract value object.

A contract bundles the market and contract parameters consumed by the
pricing formulas. Volatility is deliberately not a field: pricing and
Greeks are evaluated at a caller-chosen volatility while the implied
volatility solver searches over it.
"""

from dataclasses import dataclass, replace
from enum import Enum

DAYS_PER_YEAR = 365.0


class OptionType(Enum):
    """European option right."""

    CALL = "call"
    PUT = "put"


@dataclass(frozen=True)
class Contract:
    """
    European option contract.

    Attributes
    ----------
    price : float
        Observed option price. Only used as the implied volatility target.
    strike : float
        Strike price K (must be > 0 for a finite result)
    days_to_expiration : float
        Calendar days to expiry (must be > 0 for a finite result)
    risk_free_rate : float
        Continuously compounded annual risk-free rate, may be negative
    underlying_price : float
        Spot price S of the underlying (must be > 0 for a finite result)
    option_type : OptionType
        CALL or PUT. The strings 'call' and 'put' are accepted and coerced.

    Notes
    -----
    Numeric ranges are not checked here. Degenerate contracts propagate
    NaN/Inf through the formulas; use ``bsm_pricer.validation`` to reject
    them explicitly.
    """

    price: float
    strike: float
    days_to_expiration: float
    risk_free_rate: float
    underlying_price: float
    option_type: OptionType = OptionType.CALL

    def __post_init__(self) -> None:
        if not isinstance(self.option_type, OptionType):
            try:
                option_type = OptionType(str(self.option_type).lower())
            except ValueError:
                raise ValueError(
                    f"option_type must be 'call' or 'put', got {self.option_type!r}"
                ) from None
            object.__setattr__(self, "option_type", option_type)

    @property
    def years_to_expiration(self) -> float:
        """Time to expiry in years on a flat 365-day year."""
        return self.days_to_expiration / DAYS_PER_YEAR

    @property
    def is_call(self) -> bool:
        return self.option_type is OptionType.CALL

    def with_price(self, price: float) -> "Contract":
        """Return a copy of this contract quoted at a different price."""
        return replace(self, price=price)
