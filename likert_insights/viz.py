from __future__ import annotations
import logging, os, textwrap
from typing import Mapping, Optional, Sequence, Tuple
import numpy as np
import matplotlib.pyplot as plt

from likert_insights import config
from likert_insights.metrics import complete_scale, max_percentage

logger = logging.getLogger(__name__)

BAR_COLOR = "#4C72B0"
FACET_COLORS = ("#4C72B0", "#DD8452")


def _ensure_dir(p: Optional[str]) -> None:
    if p:
        d = os.path.dirname(p)
        if d and not os.path.exists(d):
            os.makedirs(d, exist_ok=True)

def _wrap(s: str, width: int) -> str:
    s = (s or "").strip()
    return "\n".join(textwrap.wrap(s, width=width)) if s else ""

def _finish(fig: plt.Figure, out_path: Optional[str], show: bool) -> Optional[str]:
    fig.tight_layout()
    saved = None
    if out_path:
        _ensure_dir(out_path)
        fig.savefig(out_path, dpi=config.FIG_DPI, bbox_inches="tight")
        saved = out_path
        logger.info("Saved chart to %s", out_path)
    if show:
        plt.show()
    else:
        plt.close(fig)
    return saved


def draw_frequency_bars(
    ax: plt.Axes,
    table: Mapping[int, float],
    labels: Mapping[int, str],
    *,
    ymax: float,
    title: str = "",
    color: str = BAR_COLOR,
    wrap_label: int = 12,
) -> plt.Axes:
    """Draw one zero-filled distribution onto *ax*, y clamped to [0, ymax]."""
    full = complete_scale(table, scale_size=len(labels))
    codes = sorted(labels)
    heights = np.array([full[c] for c in codes])
    x = np.arange(len(codes))

    bars = ax.bar(x, heights, width=0.65, color=color)
    for rect, h in zip(bars, heights):
        ax.annotate(f"{h:.1f}%", (rect.get_x() + rect.get_width() / 2, h),
                    xytext=(0, 3), textcoords="offset points",
                    ha="center", va="bottom", fontsize=8)

    ax.set_xticks(x)
    ax.set_xticklabels([_wrap(labels[c], wrap_label) for c in codes], fontsize=8)
    ax.set_ylim(0, ymax)
    ax.set_ylabel("Respondents (%)")
    ax.grid(axis="y", alpha=0.3)
    ax.set_axisbelow(True)
    for side in ("top", "right"):
        ax.spines[side].set_visible(False)
    if title:
        ax.set_title(_wrap(title, 50))
    return ax


def plot_frequency_bar(
    table: Mapping[int, float],
    labels: Mapping[int, str],
    *,
    ymax: Optional[float] = None,
    title: str = "",
    color: str = BAR_COLOR,
    out_path: Optional[str] = None,
    show: bool = False,
) -> Tuple[plt.Figure, plt.Axes, Optional[str]]:
    """
    Bar chart of a single frequency table.
    ymax defaults to max_percentage([table]) so the tallest bar has headroom.
    """
    if ymax is None:
        ymax = max_percentage([table])

    fig, ax = plt.subplots(figsize=(7, 4))
    draw_frequency_bars(ax, table, labels, ymax=ymax, title=title, color=color)
    saved = _finish(fig, out_path, show)
    return fig, ax, saved


def plot_faceted_bars(
    tables: Sequence[Mapping[int, float]],
    titles: Sequence[str],
    labels: Mapping[int, str],
    *,
    suptitle: str = "",
    colors: Sequence[str] = FACET_COLORS,
    out_path: Optional[str] = None,
    show: bool = False,
) -> Tuple[plt.Figure, Tuple[plt.Axes, ...], Optional[str]]:
    """
    Side-by-side bar charts sharing one y bound (max_percentage(tables)),
    e.g. the two parts of a question or the two demographic groups.
    """
    if len(tables) != len(titles):
        raise ValueError(f"Got {len(tables)} tables but {len(titles)} titles")
    ymax = max_percentage(tables)

    fig, axes = plt.subplots(1, len(tables), figsize=(6 * len(tables), 4), sharey=True, squeeze=False)
    axes = tuple(axes[0])
    for i, (ax, table, title) in enumerate(zip(axes, tables, titles)):
        draw_frequency_bars(ax, table, labels, ymax=ymax, title=title,
                            color=colors[i % len(colors)])
        if i:
            ax.set_ylabel("")
    if suptitle:
        fig.suptitle(suptitle)

    saved = _finish(fig, out_path, show)
    return fig, axes, saved
