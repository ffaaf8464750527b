"""Shared fixtures; charts render headless."""
from __future__ import annotations

import matplotlib

matplotlib.use("Agg")

import pandas as pd  # noqa: E402
import pytest  # noqa: E402


def _repeat(counts: list[int]) -> list[int]:
    """Expand ``[c1, c2, ...]`` into c1 ones, c2 twos, ..."""
    out: list[int] = []
    for code, count in enumerate(counts, start=1):
        out.extend([code] * count)
    return out


@pytest.fixture()
def uniform_df() -> pd.DataFrame:
    """1000 respondents, Q1 evenly spread over the five codes."""
    q1 = _repeat([200, 200, 200, 200, 200])
    return pd.DataFrame({"demographic": [i % 2 for i in range(1000)], "Q1": q1})


@pytest.fixture()
def skewed_df() -> pd.DataFrame:
    """100 respondents, Q2 answered only with 1 or 5."""
    q2 = _repeat([10, 0, 0, 0, 90])
    return pd.DataFrame({"demographic": [0] * 100, "Q2": q2})


@pytest.fixture()
def split_df() -> pd.DataFrame:
    """500 demographic-0 rows (80 answering Q4=3) and 300 demographic-1 rows."""
    q4_group0 = [3] * 80 + [4] * 250 + [5] * 170
    q4_group1 = [1] * 100 + [3] * 200
    return pd.DataFrame({
        "demographic": [0] * 500 + [1] * 300,
        "Q4": q4_group0 + q4_group1,
    })
