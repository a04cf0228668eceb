"""
Tests for Black-Scholes pricing formulas, Greeks and normal primitives.
"""

import math

import pytest

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
from bsm_pricer.contract import Contract, OptionType
from bsm_pricer.validation import InvalidParametersError

TOL = 1e-5


def make_contract(
    option_type=OptionType.CALL,
    S0=100.0,
    K=100.0,
    days=30.0,
    r=0.05,
    price=10.0,
):
    return Contract(
        price=price,
        strike=K,
        days_to_expiration=days,
        risk_free_rate=r,
        underlying_price=S0,
        option_type=option_type,
    )


class TestNormalPrimitives:
    """Test standard normal CDF and PDF."""

    def test_cdf_known_values(self):
        assert norm_cdf(0.0) == 0.5
        assert abs(norm_cdf(1.0) - 0.8413447460685429) < 1e-14
        assert abs(norm_cdf(-1.96) - 0.024997895148220435) < 1e-14

    def test_cdf_symmetry(self):
        for x in [0.1, 0.5, 1.0, 2.5, 4.0]:
            assert abs(norm_cdf(x) + norm_cdf(-x) - 1.0) < 1e-15

    def test_cdf_saturates(self):
        """Large |x| saturates to exactly 0 or 1."""
        assert norm_cdf(40.0) == 1.0
        assert norm_cdf(-40.0) == 0.0
        assert norm_cdf(math.inf) == 1.0
        assert norm_cdf(-math.inf) == 0.0

    def test_cdf_nan_propagates(self):
        assert math.isnan(norm_cdf(math.nan))

    def test_pdf_peak_and_symmetry(self):
        assert abs(norm_pdf(0.0) - 1.0 / math.sqrt(2.0 * math.pi)) < 1e-15
        assert norm_pdf(1.3) == norm_pdf(-1.3)

    def test_pdf_underflows_without_error(self):
        """Huge arguments underflow to zero instead of overflowing."""
        assert norm_pdf(50.0) == 0.0
        assert norm_pdf(1e200) == 0.0
        assert norm_pdf(math.inf) == 0.0


class TestReferenceValues:
    """S=100, K=100, 30 days, r=5%, σ=20%."""

    def test_call_price(self):
        assert abs(bs_price(make_contract(), 0.2) - 2.493376) < TOL

    def test_put_price(self):
        assert abs(bs_price(make_contract(OptionType.PUT), 0.2) - 2.08326) < TOL

    def test_vega(self):
        assert abs(bs_vega(make_contract(), 0.2) - 11.37988) < TOL

    def test_gamma(self):
        assert abs(bs_gamma(make_contract(), 0.2) - 0.0692276) < TOL

    def test_call_delta(self):
        assert abs(bs_delta(make_contract(), 0.2) - 0.53996) < TOL

    def test_put_delta(self):
        assert abs(bs_delta(make_contract(OptionType.PUT), 0.2) - (-0.46003645)) < TOL

    def test_observed_price_is_ignored(self):
        """The contract's price field does not enter the formulas."""
        a = bs_price(make_contract(price=10.0), 0.2)
        b = bs_price(make_contract(price=123.0), 0.2)
        assert a == b


class TestModelProperties:
    """Test no-arbitrage and sign properties of the formulas."""

    CASES = [
        (100, 100, 30, 0.05, 0.2),
        (100, 90, 365, 0.05, 0.25),
        (100, 110, 365, 0.05, 0.25),
        (120, 100, 180, 0.03, 0.40),
        (80, 100, 730, 0.02, 0.15),
        (100, 100, 90, -0.01, 0.30),  # Negative rate
    ]

    @pytest.mark.parametrize("S0,K,days,r,sigma", CASES)
    def test_price_positive(self, S0, K, days, r, sigma):
        for option_type in OptionType:
            assert bs_price(make_contract(option_type, S0, K, days, r), sigma) > 0

    @pytest.mark.parametrize("S0,K,days,r,sigma", CASES)
    def test_put_call_parity(self, S0, K, days, r, sigma):
        """C - P = S - K*exp(-rT)."""
        call = make_contract(OptionType.CALL, S0, K, days, r)
        put = make_contract(OptionType.PUT, S0, K, days, r)
        T = days / 365.0

        lhs = bs_price(call, sigma) - bs_price(put, sigma)
        rhs = S0 - K * math.exp(-r * T)
        assert abs(lhs - rhs) < 1e-6

    @pytest.mark.parametrize("S0,K,days,r,sigma", CASES)
    def test_delta_bounds(self, S0, K, days, r, sigma):
        call_delta = bs_delta(make_contract(OptionType.CALL, S0, K, days, r), sigma)
        put_delta = bs_delta(make_contract(OptionType.PUT, S0, K, days, r), sigma)

        assert 0 < call_delta < 1
        assert -1 < put_delta < 0
        assert abs(call_delta - put_delta - 1.0) < 1e-12

    @pytest.mark.parametrize("S0,K,days,r,sigma", CASES)
    def test_vega_gamma_non_negative_and_type_agnostic(self, S0, K, days, r, sigma):
        call = make_contract(OptionType.CALL, S0, K, days, r)
        put = make_contract(OptionType.PUT, S0, K, days, r)

        assert bs_vega(call, sigma) >= 0
        assert bs_gamma(call, sigma) >= 0
        assert bs_vega(call, sigma) == bs_vega(put, sigma)
        assert bs_gamma(call, sigma) == bs_gamma(put, sigma)

    def test_price_increases_with_vol(self):
        contract = make_contract()
        prices = [bs_price(contract, sigma) for sigma in [0.10, 0.20, 0.30, 0.40]]
        for i in range(len(prices) - 1):
            assert prices[i] < prices[i + 1]

    def test_d2_relation(self):
        d1, d2 = bs_d1_d2(make_contract(), 0.2)
        assert abs(d1 - d2 - 0.2 * math.sqrt(30 / 365)) < 1e-15


class TestGreeksAgainstFiniteDifferences:
    """Analytical Greeks should match central differences of the price."""

    def test_vega_is_price_derivative(self):
        contract = make_contract(days=90)
        h = 1e-5
        fd = (bs_price(contract, 0.25 + h) - bs_price(contract, 0.25 - h)) / (2 * h)
        assert abs(bs_vega(contract, 0.25) - fd) < 1e-5

    @pytest.mark.parametrize("option_type", list(OptionType))
    def test_delta_and_gamma(self, option_type):
        h = 1e-3
        up = make_contract(option_type, S0=100 + h, days=90)
        mid = make_contract(option_type, S0=100, days=90)
        down = make_contract(option_type, S0=100 - h, days=90)

        fd_delta = (bs_price(up, 0.25) - bs_price(down, 0.25)) / (2 * h)
        fd_gamma = (bs_price(up, 0.25) - 2 * bs_price(mid, 0.25) + bs_price(down, 0.25)) / h**2

        assert abs(bs_delta(mid, 0.25) - fd_delta) < 1e-6
        assert abs(bs_gamma(mid, 0.25) - fd_gamma) < 1e-4

    @pytest.mark.parametrize("option_type", list(OptionType))
    def test_rho(self, option_type):
        h = 1e-6
        up = make_contract(option_type, r=0.05 + h, days=180)
        down = make_contract(option_type, r=0.05 - h, days=180)
        fd = (bs_price(up, 0.3) - bs_price(down, 0.3)) / (2 * h)
        assert abs(bs_rho(make_contract(option_type, days=180), 0.3) - fd) < 1e-4

    @pytest.mark.parametrize("option_type", list(OptionType))
    def test_theta(self, option_type):
        """Theta is the negative derivative with respect to time to expiry (per year)."""
        h_days = 1e-3
        longer = make_contract(option_type, days=180 + h_days)
        shorter = make_contract(option_type, days=180 - h_days)
        fd = -(bs_price(longer, 0.3) - bs_price(shorter, 0.3)) / (2 * h_days / 365.0)
        assert abs(bs_theta(make_contract(option_type, days=180), 0.3) - fd) < 1e-3


class TestDegenerateInputs:
    """Degenerate inputs produce NaN/Inf rather than exceptions."""

    def test_zero_time_to_expiration(self):
        contract = make_contract(days=0.0)
        assert math.isnan(bs_price(contract, 0.2))
        assert math.isnan(bs_vega(contract, 0.2))
        assert math.isnan(bs_delta(contract, 0.2))

    def test_zero_volatility(self):
        contract = make_contract(r=0.0)
        assert math.isnan(bs_price(contract, 0.0))
        assert not math.isfinite(bs_gamma(make_contract(), 0.0))

    def test_negative_strike(self):
        assert math.isnan(bs_price(make_contract(K=-1.0), 0.2))

    def test_negative_spot(self):
        assert math.isnan(bs_price(make_contract(S0=-5.0), 0.2))
        assert math.isnan(bs_gamma(make_contract(S0=-5.0), 0.2))

    def test_negative_days(self):
        assert math.isnan(bs_vega(make_contract(days=-3.0), 0.2))


class TestValidation:
    """Opt-in validation raises InvalidParametersError."""

    @pytest.mark.parametrize(
        "kwargs,message",
        [
            ({"S0": 0.0}, "underlying_price must be positive"),
            ({"K": -1.0}, "strike must be positive"),
            ({"days": 0.0}, "days_to_expiration must be positive"),
            ({"r": math.nan}, "risk_free_rate must be finite"),
        ],
    )
    def test_invalid_contract(self, kwargs, message):
        contract = make_contract(**kwargs)
        for fn in (bs_price, bs_delta, bs_gamma, bs_vega, bs_theta, bs_rho):
            with pytest.raises(InvalidParametersError, match=message):
                fn(contract, 0.2, validate=True)

    @pytest.mark.parametrize("sigma", [0.0, -0.1, math.inf, math.nan])
    def test_invalid_volatility(self, sigma):
        with pytest.raises(InvalidParametersError, match="volatility must be positive"):
            bs_price(make_contract(), sigma, validate=True)

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            bs_vega(make_contract(days=0.0), 0.2, validate=True)

    @pytest.mark.parametrize("field", ["S0", "K", "days"])
    def test_infinite_contract_values(self, field):
        contract = make_contract(**{field: math.inf})
        with pytest.raises(InvalidParametersError, match="must be positive and finite"):
            bs_price(contract, 0.2, validate=True)

    def test_valid_inputs_unchanged(self):
        contract = make_contract()
        assert bs_price(contract, 0.2, validate=True) == bs_price(contract, 0.2)
