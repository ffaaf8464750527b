"""Tests for the worked-example runner and its command line."""
from __future__ import annotations

import importlib
import logging
import os
from unittest.mock import patch

import pandas as pd
import pytest

from likert_insights import config
from likert_insights.data_prep import simulate_responses
from likert_insights.tutorial import EXAMPLE_WEIGHTS, main, run_examples

EXPECTED_PNGS = {
    "q1_distribution.png",
    "q2_distribution.png",
    "q3_two_part.png",
    "q4_by_demographic.png",
}


@pytest.fixture()
def survey() -> pd.DataFrame:
    return simulate_responses(400, seed=9, weights=EXAMPLE_WEIGHTS)


def test_run_examples_tables(survey):
    tables = run_examples(survey)

    assert set(tables) == {"Q1", "Q2", "Q3a", "Q3b", "Q4 (demographic=0)", "Q4 (demographic=1)"}
    assert tables["Q1"].n == 400
    group_sizes = tables["Q4 (demographic=0)"].n + tables["Q4 (demographic=1)"].n
    assert group_sizes == 400


def test_run_examples_writes_outputs(survey, tmp_path):
    run_examples(survey, str(tmp_path))

    assert EXPECTED_PNGS <= {p.name for p in tmp_path.iterdir()}
    summary = pd.read_csv(tmp_path / "frequencies.csv")
    assert len(summary) == 6
    assert summary.drop(columns=["chart", "n"]).sum(axis=1).round(6).eq(100).all()


def test_main_simulated(tmp_path):
    assert main(["--n", "120", "--seed", "3", "--out-dir", str(tmp_path)]) == 0
    assert EXPECTED_PNGS <= {p.name for p in tmp_path.iterdir()}


def test_main_csv_input(tmp_path):
    src = tmp_path / "survey.csv"
    simulate_responses(60, seed=2).to_csv(src, index=False)
    out = tmp_path / "out"
    assert main(["--csv", str(src), "--out-dir", str(out)]) == 0
    assert (out / "frequencies.csv").exists()


def test_main_reports_invalid_data(tmp_path, caplog):
    src = tmp_path / "bad.csv"
    df = simulate_responses(20, seed=2)
    df.loc[0, "Q2"] = 9
    df.to_csv(src, index=False)

    with caplog.at_level(logging.ERROR):
        assert main(["--csv", str(src), "--out-dir", str(tmp_path / "out")]) == 1
    assert "Cannot build charts" in caplog.text


def test_main_missing_csv(tmp_path, caplog):
    with caplog.at_level(logging.ERROR):
        assert main(["--csv", str(tmp_path / "missing.csv"), "--out-dir", str(tmp_path / "out")]) == 1
    assert "Cannot build charts" in caplog.text


def test_main_empty_csv(tmp_path):
    src = tmp_path / "empty.csv"
    src.write_text("")
    assert main(["--csv", str(src), "--out-dir", str(tmp_path / "out")]) == 1


@pytest.fixture()
def dotenv_seed(tmp_path, monkeypatch):
    """Working directory with a .env setting LIKERT_SEED=7; config reloaded."""
    (tmp_path / ".env").write_text("LIKERT_SEED=7\n")
    monkeypatch.chdir(tmp_path)
    previous = os.environ.pop("LIKERT_SEED", None)
    importlib.reload(config)
    yield
    os.environ.pop("LIKERT_SEED", None)
    if previous is not None:
        os.environ["LIKERT_SEED"] = previous
    monkeypatch.undo()
    importlib.reload(config)


def test_main_reads_seed_from_dotenv(dotenv_seed, tmp_path):
    assert config.SEED == 7
    with patch("likert_insights.tutorial.simulate_responses", wraps=simulate_responses) as sim:
        assert main(["--n", "80", "--out-dir", str(tmp_path / "out")]) == 0
    assert sim.call_args.kwargs["seed"] == 7
