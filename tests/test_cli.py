"""Tests for CLI argument behavior."""

from __future__ import annotations

from unittest.mock import patch

import pytest

from wheelprime.primes.cli import main


class TestCli:
    def test_requires_an_action(self):
        with pytest.raises(SystemExit) as exc:
            main([])
        assert exc.value.code == 2

    def test_unknown_backend_rejected_by_argparse(self):
        with pytest.raises(SystemExit):
            main(["--backend", "srt", "--take", "3"])

    def test_take(self, capsys):
        assert main(["--take", "5"]) == 0
        out = capsys.readouterr().out
        assert "Backend: trial" in out
        assert "Took: 5" in out
        assert "First primes: [2, 3, 5, 7, 11]" in out

    def test_test_values(self, capsys):
        assert main(["--test", "91", "97", "2147483647"]) == 0
        out = capsys.readouterr().out
        assert "91: composite" in out
        assert "97: prime" in out
        assert "2147483647: prime" in out

    def test_upper_bound_with_stats_and_verify(self, capsys):
        assert main(["--N", "100", "--stats", "--verify", "--show", "0"]) == 0
        out = capsys.readouterr().out
        assert "Primes found: 25" in out
        assert "Expected (R(N)):" in out
        assert "Gaps: mean=" in out
        assert "twins=8" in out
        assert "Verify: ok (25 primes match sympy)" in out
        assert "First primes" not in out

    def test_sympy_backend_verifies_against_trial(self, capsys):
        assert main(["--backend", "sympy", "--N", "50", "--verify"]) == 0
        out = capsys.readouterr().out
        assert "Backend: sympy" in out
        assert "Verify: ok (15 primes match trial)" in out

    def test_verify_mismatch_exit_code(self, capsys):
        with patch(
            "wheelprime.primes.sympy_backend.SympyBackend.primes_up_to",
            return_value=[2, 3, 5, 7, 11, 13],
        ):
            assert main(["--N", "12", "--verify"]) == 1
        out = capsys.readouterr().out
        assert "Verify: MISMATCH (missing [13], extra [])" in out

    def test_out_of_domain_value(self, capsys):
        assert main(["--test", "-1"]) == 2
        assert "Error:" in capsys.readouterr().err

    def test_out_of_domain_value_sympy_backend(self, capsys):
        assert main(["--backend", "sympy", "--test", "-1"]) == 2
        captured = capsys.readouterr()
        assert "Error:" in captured.err
        assert "-1: composite" not in captured.out

    def test_out_of_domain_bound_sympy_backend(self, capsys):
        assert main(["--backend", "sympy", "--N", str(2**64)]) == 2
        assert "Error:" in capsys.readouterr().err

    def test_verify_help_names_other_backend(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["--help"])
        assert exc.value.code == 0
        assert "other backend" in capsys.readouterr().out

    def test_negative_take(self, capsys):
        assert main(["--take", "-3"]) == 2
        assert "non-negative" in capsys.readouterr().err
