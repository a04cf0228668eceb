#!/usr/bin/env python
"""
Implied volatility smile demonstration.

Generates a synthetic volatility smile and recovers implied volatility
from the resulting prices with both the guarded and the strict
Newton-Raphson solvers.
"""

import sys
from pathlib import Path

# Add parent directory to path to allow imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from bsm_pricer.analytics.black_scholes import bs_price
from bsm_pricer.analytics.implied_vol import solve_implied_vol
from bsm_pricer.config import SolverConfig
from bsm_pricer.contract import Contract


def main():
    """Run IV smile demonstration."""
    # Parameters
    S0 = 100.0
    r = 0.05
    days = 90.0
    option_type = "call"

    # Volatility smile parameters
    base_vol = 0.20  # ATM volatility
    skew = -0.15
    curvature = 0.25

    strikes = [70, 80, 90, 100, 110, 120, 130]
    strict = SolverConfig(strict=True, tolerance=1e-8)
    guarded = SolverConfig(tolerance=1e-8)

    print("=" * 100)
    print("Implied Volatility Smile Demonstration")
    print("=" * 100)
    print(f"\nParameters: S0={S0}, r={r}, days={days}, option_type={option_type}")
    print(f"Volatility model: σ(K) = {base_vol} + {skew}*(K/S0 - 1) + {curvature}*(K/S0 - 1)²")
    print("\n" + "-" * 100)
    print(f"{'Strike':<10} {'True Vol':<12} {'Market Price':<15} "
          f"{'Guarded IV':<14} {'Iter':<6} {'Strict IV':<14} {'Strict Status':<24}")
    print("-" * 100)

    errors = []
    for K in strikes:
        deviation = K / S0 - 1.0
        true_sigma = base_vol + skew * deviation + curvature * deviation**2

        contract = Contract(
            price=0.0,
            strike=K,
            days_to_expiration=days,
            risk_free_rate=r,
            underlying_price=S0,
            option_type=option_type,
        )
        contract = contract.with_price(bs_price(contract, true_sigma))

        guarded_result = solve_implied_vol(contract, guarded)
        strict_result = solve_implied_vol(contract, strict)
        errors.append(abs(guarded_result.volatility - true_sigma))

        print(f"{K:<10.1f} {true_sigma:<12.6f} {contract.price:<15.6f} "
              f"{guarded_result.volatility:<14.6f} {guarded_result.iterations:<6} "
              f"{strict_result.volatility:<14.6f} {strict_result.status.value:<24}")

    print("-" * 100)
    print("\nRecovery Statistics (guarded):")
    print(f"  Maximum error:  {max(errors):.2e}")
    print(f"  Average error:  {sum(errors) / len(errors):.2e}")
    print("=" * 100)


if __name__ == "__main__":
    main()
