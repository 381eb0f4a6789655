"""Tests for CLI."""

import json
import os
import subprocess
import sys
from pathlib import Path


def run_cli(*args):
    """Run CLI and return output."""
    result = subprocess.run(
        [sys.executable, "-m", "co_credit_estimator.cli", *args],
        capture_output=True,
        text=True,
        env={**os.environ, "PYTHONPATH": "src"},
        cwd=Path(__file__).parent.parent,
    )
    return result


class TestCLI:
    """Tests for command-line interface."""

    def test_help(self):
        """--help shows usage."""
        result = run_cli("--help")
        assert result.returncode == 0
        assert "co-credit" in result.stdout
        assert "estimate" in result.stdout

    def test_version(self):
        """--version shows version."""
        result = run_cli("--version")
        assert result.returncode == 0
        assert "0.1.0" in result.stdout

    def test_estimate_summary_to_stdout(self):
        """estimate prints a text summary."""
        result = run_cli("estimate", "--income", "50000", "--child", "4")
        assert result.returncode == 0
        assert "Colorado Child Tax Credit: Up to $2,000.00" in result.stdout

    def test_estimate_json(self):
        """estimate --json prints machine-readable results."""
        result = run_cli(
            "estimate",
            "--filing-status", "married-joint",
            "--income", "410000",
            "--child", "10",
            "--json",
        )
        assert result.returncode == 0
        data = json.loads(result.stdout)
        assert data["federalCTC"]["estimatedBenefit"] == 1500
        assert data["federalCTC"]["status"] == "eligible"

    def test_annualize(self):
        """annualize prints annual income."""
        result = run_cli("annualize", "weekly", "500")
        assert result.returncode == 0
        assert result.stdout.strip() == "26000.00"

    def test_no_command_shows_help(self):
        """No command shows help and exits 1."""
        result = run_cli()
        assert result.returncode == 1
