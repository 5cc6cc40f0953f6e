"""Tests for the quicktrace CLI commands."""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from quicktrace import __version__
from quicktrace.cli.main import app

runner = CliRunner()


@pytest.fixture
def project(tmp_path: Path):
    """Run commands as if tmp_path were the project root."""
    with patch("quicktrace.cli.common.find_project_root", return_value=tmp_path):
        yield tmp_path


def _write_config(root: Path, text: str) -> None:
    (root / "quicktrace.yaml").write_text(text, encoding="utf-8")


def test_version():
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert f"quicktrace {__version__}" in result.output


# -- sort --


def test_sort_summary(project):
    result = runner.invoke(app, ["sort", "3,1,2", "--seed", "1"])
    assert result.exit_code == 0
    assert "3, 1, 2" in result.output
    assert "1, 2, 3" in result.output
    assert "Comparisons" in result.output


def test_sort_json(project):
    result = runner.invoke(app, ["sort", "3, 1, 2", "--json"])
    assert result.exit_code == 0
    steps = json.loads(result.output)
    assert steps[0]["values"] == [3, 1, 2]
    assert steps[0]["highlight"] == {}
    assert steps[-1]["values"] == [1, 2, 3]
    assert steps[-1]["highlight"] == {"sorted": True}
    assert len(steps) > 2


def test_sort_seed_is_reproducible(project):
    first = runner.invoke(app, ["sort", "--seed", "5", "--json"])
    second = runner.invoke(app, ["sort", "--seed", "5", "--json"])
    assert first.exit_code == 0
    assert first.output == second.output


def test_sort_generates_from_config(project):
    _write_config(project, "default_size: 4\nmin_value: 10\nmax_value: 20\nseed: 3\n")
    result = runner.invoke(app, ["sort", "--json"])
    assert result.exit_code == 0
    values = json.loads(result.output)[0]["values"]
    assert len(values) == 4
    assert all(10 <= v <= 20 for v in values)


def test_sort_invalid_values(project):
    result = runner.invoke(app, ["sort", "1,a,3"])
    assert result.exit_code == 1
    assert "Error:" in result.output
    assert "not a number" in result.output


def test_sort_invalid_config(project):
    _write_config(project, "bogus: 1\n")
    result = runner.invoke(app, ["sort", "1,2"])
    assert result.exit_code == 1
    assert "Invalid quicktrace.yaml" in result.output


# -- show --


def test_show_first_step(project):
    result = runner.invoke(app, ["show", "3,1,2", "--step", "1", "--height", "3"])
    assert result.exit_code == 0
    assert "Step 1/" in result.output
    assert "Initial array" in result.output


def test_show_out_of_range(project):
    result = runner.invoke(app, ["show", "3,1,2", "--step", "99"])
    assert result.exit_code == 1
    assert "out of range" in result.output


# -- play --


def test_play_runs_to_sorted(project):
    result = runner.invoke(app, ["play", "3,1,2", "--speed", "0", "--seed", "2", "--height", "2"])
    assert result.exit_code == 0
    assert "Step 1/" in result.output
    assert "Sorted" in result.output


def test_play_from_step(project):
    result = runner.invoke(app, ["play", "5", "--speed", "0", "--from", "2"])
    assert result.exit_code == 0
    assert "Step 1/" not in result.output
    assert "Step 2/2" in result.output


def test_play_from_out_of_range(project):
    result = runner.invoke(app, ["play", "5", "--speed", "0", "--from", "3"])
    assert result.exit_code == 1
    assert "out of range" in result.output


# -- browse --


def test_browse_steps_and_quits(project):
    result = runner.invoke(app, ["browse", "3,1,2", "--height", "2"], input="p\nn\ne\nn\nq\n")
    assert result.exit_code == 0
    assert "Already at the first step." in result.output
    assert "Already at the last step." in result.output
    assert "Sorted" in result.output


def test_browse_unknown_choice(project):
    result = runner.invoke(app, ["browse", "1,2"], input="x\nq\n")
    assert result.exit_code == 0
    assert "Unknown choice 'x'" in result.output
