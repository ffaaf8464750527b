from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from typing import Any, Callable, Dict, Optional, Sequence, Union

import numpy as np
import pandas as pd

from likert_insights import config
from likert_insights.exceptions import EmptyInputError, InvalidColumnError, OutOfRangeValueError
from likert_insights.models import FrequencyTable

logger = logging.getLogger(__name__)

RowFilter = Union[Callable[[pd.DataFrame], Any], Mapping]


def _as_frame(dataset) -> pd.DataFrame:
    if isinstance(dataset, pd.DataFrame):
        return dataset
    return pd.DataFrame(list(dataset))


def _apply_filter(df: pd.DataFrame, filter: Optional[RowFilter]) -> pd.DataFrame:
    if filter is None:
        return df
    if isinstance(filter, Mapping):
        mask = pd.Series(True, index=df.index)
        for col, value in filter.items():
            if col not in df.columns:
                raise InvalidColumnError(col, df.columns)
            mask &= df[col] == value
    elif callable(filter):
        mask = filter(df)
    else:
        raise TypeError(f"filter must be a callable or a mapping, got {type(filter).__name__}")

    mask = pd.Series(mask, index=df.index) if not isinstance(mask, pd.Series) else mask
    if not pd.api.types.is_bool_dtype(mask):
        raise TypeError(f"filter must produce a boolean mask, got dtype {mask.dtype}")
    # nullable "boolean" masks carry NA where the compared value was missing
    return df.loc[mask.fillna(False).astype(bool)]


def _check_range(values: pd.Series, column: str, scale_size: int) -> pd.Series:
    # NaN, fractional and out-of-scale ratings are all rejected
    num = pd.to_numeric(values, errors="coerce").astype(float)
    bad = num.isna() | (num != np.floor(num)) | (num < 1) | (num > scale_size)
    if bad.any():
        offenders = sorted(map(str, values[bad].unique()))[:5]
        raise OutOfRangeValueError(
            f"Column {column!r} has {int(bad.sum())} value(s) outside 1..{scale_size}: {offenders}"
        )
    return num


def aggregate(
    dataset,
    column: str,
    filter: Optional[RowFilter] = None,
    *,
    scale_size: int = config.SCALE_SIZE,
) -> FrequencyTable:
    """
    Percentage of (filtered) records holding each rating in *column*.

    *filter* is either a callable returning a boolean mask over the frame
    (``lambda r: r.demographic == 0``) or a ``{column: value}`` mapping.
    Ratings nobody chose are left out of the result.
    """
    if scale_size < 2:
        raise ValueError(f"scale_size must be at least 2, got {scale_size}")

    df = _as_frame(dataset)
    if df.empty:
        raise EmptyInputError("Dataset has no records")
    if column not in df.columns:
        raise InvalidColumnError(column, df.columns)

    sub = _apply_filter(df, filter)
    total = len(sub)
    if total == 0:
        raise EmptyInputError(f"No records to aggregate for column {column!r}")

    values = sub[column]
    num = _check_range(values, column, scale_size)

    counts = num.astype(int).value_counts().sort_index()
    pct = counts / total * 100
    logger.debug("Aggregated %s over %d records (%d distinct ratings)", column, total, len(pct))
    return FrequencyTable(pct.to_dict(), column=column, n=total)


def max_percentage(tables: Sequence[Mapping[int, float]]) -> float:
    """
    Shared y-axis bound: the next whole percent above the tallest bar.

    Computed as floor(peak) + 1 rather than ceil(peak) + 1, so a 42.3% peak
    gives 43.0; the two agree whenever the peak is a whole number.
    """
    peaks = [max(t.values()) for t in tables if len(t)]
    if not peaks:
        raise EmptyInputError("No non-empty frequency tables given")
    return float(math.floor(max(peaks)) + 1)


def complete_scale(table: Mapping[int, float], scale_size: int = config.SCALE_SIZE) -> Dict[int, float]:
    """Zero-fill codes missing from *table* so every category can be drawn."""
    out = {code: 0.0 for code in range(1, scale_size + 1)}
    for code, pct in table.items():
        if code not in out:
            raise OutOfRangeValueError(f"Rating {code} outside 1..{scale_size}")
        out[code] = float(pct)
    return out


def relabel(table: Mapping[int, float], labels: Mapping[int, str]) -> Dict[str, float]:
    """Ordered ``{label: pct}`` over every code in *labels*, zero-filled."""
    extra = set(table) - set(labels)
    if extra:
        raise OutOfRangeValueError(f"No label for rating(s) {sorted(extra)}")
    return {labels[code]: float(table.get(code, 0.0)) for code in sorted(labels)}


def split_by(
    dataset,
    column: str,
    by: str = config.DEMOGRAPHIC_COLUMN,
    *,
    scale_size: int = config.SCALE_SIZE,
) -> Dict[Any, FrequencyTable]:
    """One table per distinct value of *by* (the demographic split)."""
    df = _as_frame(dataset)
    if by not in df.columns:
        raise InvalidColumnError(by, df.columns)
    groups = sorted(df[by].dropna().unique())
    if not groups:
        raise EmptyInputError(f"Column {by!r} has no values to split on")
    out = {}
    for g in groups:
        key = g.item() if isinstance(g, np.generic) else g
        out[key] = aggregate(df, column, {by: g}, scale_size=scale_size)
    return out


def frequency_frame(
    tables: Mapping[str, Mapping[int, float]],
    labels: Mapping[int, str],
) -> pd.DataFrame:
    """Tidy summary: one row per named table, one column per scale label."""
    rows = []
    for name, table in tables.items():
        row: Dict[str, Any] = {"chart": name}
        row["n"] = getattr(table, "n", None)
        row.update(relabel(table, labels))
        rows.append(row)
    return pd.DataFrame(rows, columns=["chart", "n", *[labels[c] for c in sorted(labels)]])
