"""
Tests for the bsm-price command-line interface.
"""

import pytest

from bsm_pricer.cli import main, parse_args

BASE_ARGS = ["--S0", "100", "--K", "100", "--days", "30", "--r", "0.05"]


class TestParseArgs:
    def test_defaults(self):
        parsed = parse_args(BASE_ARGS + ["--sigma", "0.2"])
        assert parsed.option_type == "call"
        assert parsed.max_iter == 100
        assert parsed.tol == 1e-4
        assert not parsed.strict

    def test_sigma_and_price_are_exclusive(self):
        with pytest.raises(SystemExit):
            parse_args(BASE_ARGS + ["--sigma", "0.2", "--price", "10"])

    def test_one_mode_required(self):
        with pytest.raises(SystemExit):
            parse_args(BASE_ARGS)


class TestMain:
    def test_price_and_greeks(self, capsys):
        assert main(BASE_ARGS + ["--sigma", "0.2"]) == 0
        out = capsys.readouterr().out
        for label in ["Price:", "Delta:", "Gamma:", "Vega:", "Theta:", "Rho:"]:
            assert label in out

    def test_implied_vol(self, capsys):
        assert main(BASE_ARGS + ["--price", "10"]) == 0
        out = capsys.readouterr().out
        assert "Implied Vol:       0.860" in out
        assert "converged" in out

    def test_non_convergence_exit_code(self, capsys):
        assert main(BASE_ARGS + ["--price", "10", "--strict", "--max_iter", "1"]) == 1
        assert "max_iterations_exceeded" in capsys.readouterr().out

    def test_validation_error(self, capsys):
        assert main(BASE_ARGS + ["--price", "150", "--validate"]) == 1
        assert "Error: Call price" in capsys.readouterr().out

    def test_invalid_sigma_with_validation(self, capsys):
        assert main(BASE_ARGS + ["--sigma", "0", "--validate"]) == 1
        assert "volatility must be positive" in capsys.readouterr().out

    def test_discount_overflow_with_validation(self, capsys):
        args = ["--S0", "100", "--K", "100", "--days", "73000", "--r", "-5"]
        assert main(args + ["--price", "1", "--validate"]) == 1
        assert "out of range" in capsys.readouterr().out
