"""Tests for the command-line entry points."""

import json
import re
import sys
from pathlib import Path

import pytest
from click.testing import CliRunner

import run
from toast_sim.cli import main
from toast_sim.config import SimulationConfig, save_config_to_json

SUMMARY = re.compile(r"^(\d+) of (\d+) attempts won$")


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


class TestClickCli:
    """Tests for the toast-sim command."""

    def test_prints_summary_line(self, runner: CliRunner) -> None:
        """First line is '<wins> of <attempts> attempts won'."""
        result = runner.invoke(main, ['--n-games', '200', '--seed', '1'])

        assert result.exit_code == 0
        match = SUMMARY.match(result.output.splitlines()[0])
        assert match is not None
        assert int(match.group(2)) == 200
        assert int(match.group(1)) <= 200

    def test_seed_reproduces_output(self, runner: CliRunner) -> None:
        """Same seed, same headline."""
        args = ['--n-games', '200', '--seed', '17']

        first = runner.invoke(main, args)
        second = runner.invoke(main, args)

        assert first.output == second.output

    def test_details(self, runner: CliRunner) -> None:
        """--details appends the win-rate interval and diagnostics."""
        result = runner.invoke(main, ['--n-games', '100', '--seed', '2', '--details'])

        assert result.exit_code == 0
        assert "Win rate:" in result.output
        assert "Outcomes:" in result.output

    def test_preset(self, runner: CliRunner) -> None:
        """Presets set the game count."""
        result = runner.invoke(main, ['--preset', 'quick', '--seed', '3'])

        assert result.exit_code == 0
        assert result.output.splitlines()[0].endswith("of 1000 attempts won")

    def test_config_file(self, runner: CliRunner, tmp_path: Path) -> None:
        """Config files set the run, command-line options override them."""
        path = tmp_path / "run.json"
        save_config_to_json(SimulationConfig(n_games=50, seed=4), str(path))

        result = runner.invoke(main, ['--config', str(path), '--n-games', '60'])

        assert result.exit_code == 0
        assert result.output.splitlines()[0].endswith("of 60 attempts won")

    def test_bad_config_version(self, runner: CliRunner, tmp_path: Path) -> None:
        """A config with the wrong version is a usage error."""
        path = tmp_path / "run.json"
        path.write_text(json.dumps({'version': '9.9', 'simulation': {}}))

        result = runner.invoke(main, ['--config', str(path)])

        assert result.exit_code == 2
        assert "Unsupported config version" in result.output

    def test_bad_config_type(self, runner: CliRunner, tmp_path: Path) -> None:
        """A wrong-typed config value is a usage error, not a crash."""
        path = tmp_path / "run.json"
        path.write_text(json.dumps({'version': '1.0', 'simulation': {'n_games': "100"}}))

        result = runner.invoke(main, ['--config', str(path)])

        assert result.exit_code == 2
        assert "n_games" in result.output

    def test_output_json(self, runner: CliRunner, tmp_path: Path) -> None:
        """--output writes the results JSON."""
        out = tmp_path / "results.json"

        result = runner.invoke(main, ['--n-games', '100', '--seed', '6', '--output', str(out)])

        assert result.exit_code == 0
        data = json.loads(out.read_text())
        assert data['summary'] == result.output.splitlines()[0]
        assert data['metadata']['config']['n_games'] == 100

    @pytest.mark.parametrize("args,hint", [
        (['--n-games', '0'], 'n-games'),
        (['--copies-per-value', '0'], 'copies-per-value'),
        (['--confidence', '1.5'], 'confidence'),
    ])
    def test_rejects_bad_numbers(self, runner: CliRunner, args, hint: str) -> None:
        """Non-positive counts and out-of-range confidence are usage errors."""
        result = runner.invoke(main, args)

        assert result.exit_code == 2
        assert hint in result.output


class TestOneButtonRunner:
    """Tests for run.py."""

    def test_prints_single_line(self, monkeypatch, capsys) -> None:
        """The fixed run prints exactly one summary line."""
        monkeypatch.setattr(run, 'DEFAULT_N_GAMES', 300)
        monkeypatch.setattr(sys, 'argv', ['run.py', '--seed', '8'])

        run.main()

        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == 1
        assert SUMMARY.match(lines[0]).group(2) == '300'
