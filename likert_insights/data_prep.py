import logging
from typing import Mapping, Optional, Sequence

import numpy as np
import pandas as pd

from likert_insights import config
from likert_insights.exceptions import InvalidColumnError, OutOfRangeValueError

logger = logging.getLogger(__name__)

QUESTIONS = ("Q1", "Q2", "Q3a", "Q3b", "Q4")


def simulate_responses(
    n: int = config.N_RESPONDENTS,
    questions: Sequence[str] = QUESTIONS,
    *,
    seed: int = config.SEED,
    scale_size: int = config.SCALE_SIZE,
    demographic_rate: float = 0.5,
    weights: Optional[Mapping[str, Sequence[float]]] = None,
) -> pd.DataFrame:
    """
    Simulated survey answers, one row per respondent:
      demographic (0/1, P(1)=demographic_rate) + one integer column per question.

    weights: optional per-question probabilities over codes 1..scale_size;
    questions without weights are drawn uniformly. Same seed -> same frame.
    """
    if n <= 0:
        raise ValueError(f"n must be positive, got {n}")
    if not 0.0 <= demographic_rate <= 1.0:
        raise ValueError(f"demographic_rate must be within [0, 1], got {demographic_rate}")

    rng = np.random.default_rng(seed)
    codes = np.arange(1, scale_size + 1)
    weights = weights or {}

    unknown = set(weights) - set(questions)
    if unknown:
        raise InvalidColumnError(sorted(unknown)[0], questions)

    data = {config.DEMOGRAPHIC_COLUMN: (rng.random(n) < demographic_rate).astype(int)}
    for q in questions:
        p = weights.get(q)
        if p is not None:
            p = np.asarray(p, dtype=float)
            if p.shape != codes.shape:
                raise ValueError(f"weights for {q!r} need {scale_size} entries, got {p.size}")
            p = p / p.sum()
        data[q] = rng.choice(codes, size=n, p=p)

    df = pd.DataFrame(data)
    logger.debug("Simulated %d respondents x %d questions (seed=%s)", n, len(questions), seed)
    return df


def load_responses(path: str, questions: Sequence[str] = QUESTIONS) -> pd.DataFrame:
    """
    Load a survey CSV and normalize required column names
    (demographic + questions, case-insensitive).
    """
    df = pd.read_csv(path)
    cols = {c.strip().lower(): c for c in df.columns}
    required = [config.DEMOGRAPHIC_COLUMN, *questions]
    missing = [r for r in required if r.lower() not in cols]
    if missing:
        raise InvalidColumnError(missing[0], df.columns)
    df = df.rename(columns={cols[r.lower()]: r for r in required})
    logger.info("Loaded %d responses from %s", len(df), path)
    return df


def validate_responses(
    df: pd.DataFrame,
    questions: Sequence[str] = QUESTIONS,
    *,
    scale_size: int = config.SCALE_SIZE,
) -> pd.DataFrame:
    """
    Check the dataset invariants: binary demographic, integer ratings in
    1..scale_size. Returns *df* unchanged so it can be chained.
    """
    need = {config.DEMOGRAPHIC_COLUMN, *questions}
    miss = need - set(df.columns)
    if miss:
        raise InvalidColumnError(sorted(miss)[0], df.columns)

    dem = df[config.DEMOGRAPHIC_COLUMN]
    if not dem.isin([0, 1]).all():
        raise OutOfRangeValueError(f"{config.DEMOGRAPHIC_COLUMN!r} must be 0 or 1")

    for q in questions:
        ok = df[q].isin(range(1, scale_size + 1))
        if not ok.all():
            raise OutOfRangeValueError(
                f"{q!r} has {int((~ok).sum())} value(s) outside 1..{scale_size}"
            )
    return df
