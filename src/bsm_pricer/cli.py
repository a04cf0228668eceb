#!/usr/bin/env python
"""
Command-line interface for Black-Scholes option pricing.

This module provides the main CLI entrypoint for the bsm-price command.

Example usage:
    bsm-price --S0 100 --K 100 --days 30 --r 0.05 --sigma 0.2
    bsm-price --S0 100 --K 100 --days 30 --r 0.05 --price 10 --option_type call
"""

import argparse
import logging
import sys

from bsm_pricer.analytics.black_scholes import (
    bs_delta,
    bs_gamma,
    bs_price,
    bs_rho,
    bs_theta,
    bs_vega,
)
from bsm_pricer.analytics.implied_vol import solve_implied_vol
from bsm_pricer.config import SolverConfig
from bsm_pricer.contract import Contract


def parse_args(args: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Parameters
    ----------
    args : list[str] | None
        Command-line arguments. If None, uses sys.argv.

    Returns
    -------
    argparse.Namespace
        Parsed arguments.
    """
    parser = argparse.ArgumentParser(
        description="Black-Scholes option pricer and implied volatility solver",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )

    # Contract parameters
    parser.add_argument("--S0", type=float, required=True, help="Underlying spot price")
    parser.add_argument("--K", type=float, required=True, help="Strike price")
    parser.add_argument("--days", type=float, required=True, help="Calendar days to expiration")
    parser.add_argument("--r", type=float, required=True, help="Risk-free rate")
    parser.add_argument(
        "--option_type",
        type=str,
        choices=["call", "put"],
        default="call",
        help="Option type: call or put",
    )

    # Exactly one of: price at a volatility, or solve for it
    mode = parser.add_mutually_exclusive_group(required=True)
    mode.add_argument("--sigma", type=float, help="Volatility to price and compute Greeks at")
    mode.add_argument("--price", type=float, help="Observed option price to invert for implied vol")

    # Solver parameters
    parser.add_argument("--max_iter", type=int, default=100, help="Maximum solver iterations")
    parser.add_argument("--tol", type=float, default=1e-4, help="Price tolerance for convergence")
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Use the unguarded Newton-Raphson loop (no bracketing or bisection fallback)",
    )
    parser.add_argument(
        "--validate",
        action="store_true",
        help="Reject degenerate inputs and arbitrage-violating prices",
    )
    parser.add_argument(
        "--log_level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Logging level",
    )

    return parser.parse_args(args)


def main(args: list[str] | None = None) -> int:
    """Main entry point for CLI.

    Parameters
    ----------
    args : list[str] | None
        Command-line arguments. If None, uses sys.argv.

    Returns
    -------
    int
        Exit code (0 for success, 1 for invalid input or non-convergence).
    """
    parsed = parse_args(args)

    logging.basicConfig(
        level=getattr(logging, parsed.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    contract = Contract(
        price=parsed.price if parsed.price is not None else 0.0,
        strike=parsed.K,
        days_to_expiration=parsed.days,
        risk_free_rate=parsed.r,
        underlying_price=parsed.S0,
        option_type=parsed.option_type,
    )

    print("=" * 70)
    print("Black-Scholes Option Pricer")
    print("=" * 70)
    print("\nInput Parameters:")
    print(f"  Spot Price (S0):        {contract.underlying_price:,.2f}")
    print(f"  Strike Price (K):       {contract.strike:,.2f}")
    print(f"  Risk-free Rate (r):     {contract.risk_free_rate:.4f}")
    print(f"  Days to Expiration:     {contract.days_to_expiration:g}")
    print(f"  Time to Maturity (T):   {contract.years_to_expiration:.6f} years")
    print(f"  Option Type:            {contract.option_type.value.upper()}")

    try:
        if parsed.sigma is not None:
            greeks = {
                "Price": bs_price(contract, parsed.sigma, validate=parsed.validate),
                "Delta": bs_delta(contract, parsed.sigma, validate=parsed.validate),
                "Gamma": bs_gamma(contract, parsed.sigma, validate=parsed.validate),
                "Vega": bs_vega(contract, parsed.sigma, validate=parsed.validate),
                "Theta": bs_theta(contract, parsed.sigma, validate=parsed.validate),
                "Rho": bs_rho(contract, parsed.sigma, validate=parsed.validate),
            }
            print(f"  Volatility (σ):         {parsed.sigma:.4f}")
            print("\nBlack-Scholes Results:")
            for name, value in greeks.items():
                print(f"  {name + ':':<8}{value:.6f}")
            print("\n" + "=" * 70)
            return 0

        config = SolverConfig(
            max_iterations=parsed.max_iter,
            tolerance=parsed.tol,
            strict=parsed.strict,
            validate=parsed.validate,
        )
        result = solve_implied_vol(contract, config)
    except ValueError as e:
        print(f"\nError: {e}")
        return 1

    print("\n" + "=" * 70)
    print("Implied Volatility")
    print("=" * 70)
    print(f"\nMarket Price:      {contract.price:.6f}")
    print(f"Implied Vol:       {result.volatility:.8f}")
    print(f"Iterations:        {result.iterations}")
    print(f"Status:            {result.status.value}")
    print(f"Price Error:       {result.price_error:.2e}")
    print("\n" + "=" * 70)

    return 0 if result.converged else 1


if __name__ == "__main__":
    sys.exit(main())
