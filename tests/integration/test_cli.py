"""End-to-end tests for the command-line interface."""

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from florist import __version__
from florist.cli.app import app


@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI runner."""
    return CliRunner()


class TestCli:
    """Test the florist command."""

    def test_version(self, runner: CliRunner) -> None:
        """Test --version prints the version and exits cleanly."""
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_generate_flower(self, runner: CliRunner) -> None:
        """Test a flower run prints a summary."""
        result = runner.invoke(app, ["48", "--seed", "7"])
        assert result.exit_code == 0, result.output
        assert "Complete" in result.output
        assert "seed 7" in result.output

    def test_generate_mosaic_with_preview(self, runner: CliRunner) -> None:
        """Test a mosaic run with the character preview."""
        result = runner.invoke(app, ["32", "--seed", "3", "--mosaic", "--preview"])
        assert result.exit_code == 0, result.output
        assert "Preview" in result.output

    def test_verbose_lists_layers(self, runner: CliRunner) -> None:
        """Test verbose output lists the resolved layers."""
        result = runner.invoke(app, ["48", "--seed", "7", "--verbose"])
        assert result.exit_code == 0, result.output
        assert "Layers" in result.output

    def test_json_output(self, runner: CliRunner, tmp_path: Path) -> None:
        """Test --output writes the resolved shapes as JSON."""
        output = tmp_path / "flower.json"
        result = runner.invoke(app, ["48", "--seed", "11", "--quiet", "--output", str(output)])
        assert result.exit_code == 0, result.output

        data = json.loads(output.read_text(encoding="utf-8"))
        assert data["radius"] == 48
        assert data["seed"] == 11
        assert "layers" in data

    def test_quiet_prints_nothing_on_success(self, runner: CliRunner) -> None:
        """Test --quiet suppresses the summary."""
        result = runner.invoke(app, ["48", "--seed", "7", "--quiet"])
        assert result.exit_code == 0
        assert "Complete" not in result.output

    def test_verbose_and_quiet(self, runner: CliRunner) -> None:
        """Test --verbose and --quiet are mutually exclusive."""
        result = runner.invoke(app, ["48", "--verbose", "--quiet"])
        assert result.exit_code == 1
        assert "Cannot use --verbose and --quiet together" in result.output

    def test_invalid_arrangement(self, runner: CliRunner) -> None:
        """Test unknown arrangements are rejected."""
        result = runner.invoke(app, ["48", "--arrangement", "spiral"])
        assert result.exit_code == 1
        assert "Invalid arrangement" in result.output

    def test_radius_too_small(self, runner: CliRunner) -> None:
        """Test an out-of-range radius is reported as an error."""
        result = runner.invoke(app, ["4", "--seed", "1"])
        assert result.exit_code == 1
        assert "Invalid argument" in result.output

    def test_same_seed_same_json(self, runner: CliRunner, tmp_path: Path) -> None:
        """Test two runs with one seed export identical shapes."""
        first = tmp_path / "a.json"
        second = tmp_path / "b.json"
        runner.invoke(app, ["40", "--seed", "5", "-q", "-a", "radial", "-o", str(first)])
        runner.invoke(app, ["40", "--seed", "5", "-q", "-a", "radial", "-o", str(second)])
        assert first.read_text(encoding="utf-8") == second.read_text(encoding="utf-8")
