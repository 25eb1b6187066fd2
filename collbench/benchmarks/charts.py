from __future__ import annotations

import logging
from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
import seaborn as sns

LOGGER = logging.getLogger("collbench.benchmark.charts")

sns.set_style("whitegrid")
plt.rcParams["figure.dpi"] = 100
plt.rcParams["savefig.dpi"] = 150
plt.rcParams["font.size"] = 10
plt.rcParams["axes.labelsize"] = 11
plt.rcParams["axes.titlesize"] = 13
plt.rcParams["legend.fontsize"] = 9

BACKING_COLORS = {
    "ArrayList": "#2E86AB",
    "LinkedList": "#A23B72",
    "Vector": "#F18F01",
    "HashMap": "#2E86AB",
    "LinkedHashMap": "#A23B72",
    "TreeMap": "#6A994E",
    "ConcurrentHashMap": "#F18F01",
    "HashSet": "#2E86AB",
    "LinkedHashSet": "#A23B72",
    "TreeSet": "#6A994E",
}


def render_timing_charts(df: pd.DataFrame, menu: str, output_dir: Path) -> list[Path]:
    """Render the elapsed-time bar chart and the relative slowdown heatmap for a menu."""
    df = df[df["menu"] == menu]
    if df.empty:
        LOGGER.warning("No timings recorded for menu %s; skipping charts", menu)
        return []

    output_dir.mkdir(parents=True, exist_ok=True)
    bar_path = output_dir / f"{menu}_timings.png"
    heatmap_path = output_dir / f"{menu}_relative.png"

    # Repeated runs of the same command collapse to their median.
    summary = (
        df.groupby(["command", "backing"], sort=False)["elapsed_ms"].median().reset_index()
    )
    command_order = list(dict.fromkeys(summary["command"]))
    backing_order = list(dict.fromkeys(summary["backing"]))

    _render_bar_chart(summary, menu, command_order, backing_order, bar_path)
    _render_relative_heatmap(summary, menu, command_order, backing_order, heatmap_path)
    return [bar_path, heatmap_path]


def _render_bar_chart(
    summary: pd.DataFrame,
    menu: str,
    command_order: list[str],
    backing_order: list[str],
    chart_path: Path,
) -> None:
    fig, ax = plt.subplots(figsize=(10, 6))

    sns.barplot(
        data=summary,
        x="command",
        y="elapsed_ms",
        hue="backing",
        order=command_order,
        hue_order=backing_order,
        palette=[BACKING_COLORS.get(name, "#808080") for name in backing_order],
        ax=ax,
    )

    ax.set_xlabel("Test", fontweight="semibold")
    ax.set_ylabel("Elapsed time (ms)", fontweight="semibold")
    ax.set_title(f"Elapsed time per backing ({menu})", fontweight="bold", pad=15)
    ax.grid(True, alpha=0.3, axis="y", linestyle="--")
    ax.legend(title="Backing", frameon=True)

    plt.tight_layout()
    fig.savefig(chart_path, bbox_inches="tight", facecolor="white")
    plt.close(fig)
    LOGGER.info("Rendering chart %s", chart_path)


def _render_relative_heatmap(
    summary: pd.DataFrame,
    menu: str,
    command_order: list[str],
    backing_order: list[str],
    chart_path: Path,
) -> None:
    pivot = summary.pivot(index="command", columns="backing", values="elapsed_ms")
    pivot = pivot.reindex(index=command_order, columns=backing_order)

    fastest = pivot.min(axis=1).replace(0, np.nan)
    ratios = pivot.div(fastest, axis=0).to_numpy(dtype=float)
    ratios = np.where(np.isfinite(ratios), ratios, 1.0)

    fig, ax = plt.subplots(figsize=(10, 6))
    im = ax.imshow(ratios, cmap="YlOrRd", aspect="auto", vmin=1.0)

    ax.set_xticks(range(len(backing_order)))
    ax.set_xticklabels(backing_order)
    ax.set_yticks(range(len(command_order)))
    ax.set_yticklabels(command_order)

    max_val = ratios.max()
    for i in range(len(command_order)):
        for j in range(len(backing_order)):
            value = ratios[i, j]
            text_color = "white" if max_val > 1.0 and value > max_val * 0.6 else "black"
            ax.text(
                j,
                i,
                f"{value:.1f}x",
                ha="center",
                va="center",
                color=text_color,
                fontweight="bold",
                fontsize=9,
            )

    cbar = plt.colorbar(im, ax=ax)
    cbar.set_label("Slowdown vs fastest backing", fontweight="semibold", labelpad=10)

    ax.set_title(f"Relative cost per test ({menu})", fontweight="bold", pad=15)
    ax.set_xlabel("Backing", fontweight="semibold")
    ax.set_ylabel("Test", fontweight="semibold")
    ax.grid(False)

    plt.tight_layout()
    fig.savefig(chart_path, bbox_inches="tight", facecolor="white")
    plt.close(fig)
    LOGGER.info("Rendering chart %s", chart_path)
