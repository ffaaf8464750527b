"""Worked examples: Likert response frequencies as bar charts.

Four charts are produced from one survey dataset:

1. the distribution of answers to Q1,
2. the distribution of answers to Q2,
3. the two parts of question 3 (Q3a vs Q3b) on a shared y-axis,
4. Q4 split by the binary demographic attribute on a shared y-axis.

Run ``likert-insights --help`` for the command-line options. Without
``--csv`` the dataset is simulated from ``--seed``.
"""
from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import Dict, List, Optional

import pandas as pd

from likert_insights import config
from likert_insights.data_prep import load_responses, simulate_responses, validate_responses
from likert_insights.exceptions import LikertError
from likert_insights.metrics import aggregate, frequency_frame, split_by
from likert_insights.models import FrequencyTable, scale_labels
from likert_insights.viz import plot_faceted_bars, plot_frequency_bar

logger = logging.getLogger(__name__)

# Skewed answer profiles so the example charts differ visibly
EXAMPLE_WEIGHTS = {
    "Q1": [0.05, 0.10, 0.20, 0.40, 0.25],
    "Q2": [0.30, 0.25, 0.20, 0.15, 0.10],
    "Q3a": [0.10, 0.15, 0.30, 0.30, 0.15],
    "Q3b": [0.05, 0.10, 0.25, 0.35, 0.25],
}


def run_examples(
    df: pd.DataFrame,
    out_dir: Optional[str] = None,
    *,
    show: bool = False,
    scale_size: int = config.SCALE_SIZE,
) -> Dict[str, FrequencyTable]:
    """Compute and plot the four examples; return every table by chart name.

    When *out_dir* is given, one PNG per example and ``frequencies.csv`` are
    written there.
    """
    labels = scale_labels(scale_size)

    def _path(name: str) -> Optional[str]:
        return os.path.join(out_dir, name) if out_dir else None

    tables: Dict[str, FrequencyTable] = {}

    # 1 & 2: single questions
    for q in ("Q1", "Q2"):
        tables[q] = aggregate(df, q, scale_size=scale_size)
        plot_frequency_bar(
            tables[q], labels,
            title=f"{q}: response distribution (n={tables[q].n})",
            out_path=_path(f"{q.lower()}_distribution.png"), show=show,
        )

    # 3: two-part question
    tables["Q3a"] = aggregate(df, "Q3a", scale_size=scale_size)
    tables["Q3b"] = aggregate(df, "Q3b", scale_size=scale_size)
    plot_faceted_bars(
        [tables["Q3a"], tables["Q3b"]], ["Part a", "Part b"], labels,
        suptitle="Q3: two-part question",
        out_path=_path("q3_two_part.png"), show=show,
    )

    # 4: demographic split
    groups = split_by(df, "Q4", config.DEMOGRAPHIC_COLUMN, scale_size=scale_size)
    titles: List[str] = []
    for g, table in groups.items():
        tables[f"Q4 ({config.DEMOGRAPHIC_COLUMN}={g})"] = table
        titles.append(f"{config.DEMOGRAPHIC_COLUMN} = {g} (n={table.n})")
    plot_faceted_bars(
        list(groups.values()), titles, labels,
        suptitle="Q4 by demographic group",
        out_path=_path("q4_by_demographic.png"), show=show,
    )

    if out_dir:
        summary = frequency_frame(tables, labels)
        csv_path = _path("frequencies.csv")
        os.makedirs(out_dir, exist_ok=True)
        summary.to_csv(csv_path, index=False)
        logger.info("Wrote frequency summary to %s", csv_path)

    return tables


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="likert-insights",
        description="Plot Likert response frequencies for simulated or CSV survey data.",
    )
    parser.add_argument("--n", type=int, default=config.N_RESPONDENTS,
                        help="number of simulated respondents")
    parser.add_argument("--seed", type=int, default=config.SEED,
                        help="random seed for simulated data")
    parser.add_argument("--csv", default=None,
                        help="load responses from this CSV instead of simulating")
    parser.add_argument("--out-dir", default=config.OUTPUT_DIR,
                        help="directory for charts and frequencies.csv")
    parser.add_argument("--show", action="store_true",
                        help="open each chart in a window")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=config.LOG_LEVEL,
    )
    args = build_parser().parse_args(argv)

    try:
        if args.csv:
            df = load_responses(args.csv)
        else:
            df = simulate_responses(args.n, seed=args.seed, weights=EXAMPLE_WEIGHTS)
        validate_responses(df)
        tables = run_examples(df, args.out_dir, show=args.show)
    except (LikertError, OSError, pd.errors.ParserError, pd.errors.EmptyDataError) as exc:
        logger.error("Cannot build charts: %s", exc)
        return 1

    logger.info("Rendered %d frequency tables into %s", len(tables), args.out_dir)
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
