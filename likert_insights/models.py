"""Data structures shared by the aggregation and charting code."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Dict, Iterator, Optional

__all__ = [
    "FrequencyTable",
    "FIVE_POINT_LABELS",
    "scale_labels",
]

# Default five-point agreement scale
FIVE_POINT_LABELS: Mapping[int, str] = MappingProxyType({
    1: "Strongly disagree",
    2: "Disagree",
    3: "Neither agree nor disagree",
    4: "Agree",
    5: "Strongly agree",
})


def scale_labels(scale_size: int = 5) -> Mapping[int, str]:
    """Return the code→label map for *scale_size*.

    Only the five-point scale has descriptive labels; other sizes fall back
    to the bare codes so charts still render.
    """
    if scale_size == len(FIVE_POINT_LABELS):
        return FIVE_POINT_LABELS
    return MappingProxyType({code: str(code) for code in range(1, scale_size + 1)})


class FrequencyTable(Mapping):
    """Read-only mapping rating code → percentage of respondents.

    ``n`` is the number of records the percentages were computed over and
    ``column`` the rating column they came from. Codes nobody chose are not
    stored; use :func:`likert_insights.metrics.complete_scale` to zero-fill.
    """

    __slots__ = ("_data", "column", "n")

    def __init__(self, percentages: Mapping[int, float], *, column: Optional[str] = None, n: int = 0):
        self._data: Dict[int, float] = {
            int(k): float(percentages[k]) for k in sorted(percentages)
        }
        self.column = column
        self.n = n

    def __getitem__(self, code: int) -> float:
        return self._data[code]

    def __iter__(self) -> Iterator[int]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"FrequencyTable({self._data!r}, column={self.column!r}, n={self.n})"

    def peak(self) -> float:
        """Largest percentage in the table (0.0 when empty)."""
        return max(self._data.values(), default=0.0)

    def to_dict(self) -> Dict[int, float]:
        return dict(self._data)
