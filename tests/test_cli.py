"""
Tests for the cecbench Command-Line Interface
"""

import json

import pytest
from cecbench.cli import main


class TestCLI:
    """Test CLI commands and exit codes."""

    def test_no_command(self, capsys):
        """Test help is printed without a command."""
        assert main([]) == 0
        assert "cecbench" in capsys.readouterr().out

    def test_version(self, capsys):
        """Test version output."""
        from cecbench import __version__
        assert main(["version"]) == 0
        assert __version__ in capsys.readouterr().out

    def test_eval_optimum(self, tmp_path):
        """Test eval at the optimum writes the bias to JSON."""
        out = tmp_path / "eval.json"
        assert main(["eval", "--suite", "cec2014", "--problem", "3", "--dim", "10",
                     "--output", str(out)]) == 0
        data = json.loads(out.read_text())
        assert data["problem"] == 3
        assert len(data["x"]) == 10
        assert data["f"] == pytest.approx(300.0, abs=1e-6)

    def test_eval_point(self, capsys):
        """Test eval at an explicit point."""
        assert main(["eval", "--suite", "cec2013", "--problem", "1", "--dim", "2",
                     "--x", "0", "0"]) == 0
        assert "f(x)" in capsys.readouterr().out

    def test_eval_errors(self):
        """Test invalid arguments return exit code 1."""
        assert main(["eval", "--problem", "31", "--dim", "10"]) == 1
        assert main(["eval", "--problem", "1", "--dim", "10", "--x", "1", "2"]) == 1

    def test_check_clean_suite(self, tmp_path):
        """Test check exits 0 when every problem hits its bias."""
        out = tmp_path / "check.json"
        assert main(["check", "--suite", "cec2013", "--dim", "2", "--output", str(out)]) == 0
        data = json.loads(out.read_text())
        assert len(data["results"]) == 28
        assert all(r["ok"] for r in data["results"])

    def test_check_bad_dimension(self):
        """Test check rejects unsupported dimensions."""
        assert main(["check", "--suite", "cec2014", "--dim", "7"]) == 1
