"""Render report view models to PNG charts."""

from __future__ import annotations

from pathlib import Path

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt
import matplotlib.ticker as mticker

from .reports import ReportViewModel


def _save(fig, output_path: Path) -> Path:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(output_path, bbox_inches="tight", dpi=100)
    plt.close(fig)
    return output_path


def _placeholder(message: str, output_path: Path) -> Path:
    fig, ax = plt.subplots(figsize=(6, 4))
    ax.text(0.5, 0.5, message, ha="center", va="center", fontsize=12, color="#666")
    ax.axis("off")
    return _save(fig, output_path)


def giving_over_time_png(report: ReportViewModel, output_path: Path) -> Path:
    """Bar chart of the report series; zero buckets are drawn at minimum height."""

    points = report.series.points
    if not points:
        return _placeholder("No data available for the selected time period.", output_path)

    max_value = float(report.series.max_value)
    # Bars are drawn from bar_fraction so zero days keep a visible stub.
    heights = [p.bar_fraction * max_value for p in points]
    x_positions = list(range(len(points)))

    fig, ax = plt.subplots(figsize=(max(6, len(points) * 0.45), 5))
    ax.bar(x_positions, heights, color="#3F51B5", width=0.7)
    ax.set_xticks(x_positions)
    ax.set_xticklabels([p.x for p in points], rotation=45 if len(points) > 12 else 0)
    ax.yaxis.set_major_formatter(
        mticker.FuncFormatter(lambda value, _pos: f"{report.currency} {value:,.0f}")
    )
    ax.grid(True, axis="y", linestyle="--", alpha=0.3)
    ax.set_axisbelow(True)
    ax.set_title("Giving Over Time", fontsize=14, fontweight="bold", pad=12)
    plt.tight_layout()
    return _save(fig, output_path)


def giving_by_recipient_png(report: ReportViewModel, output_path: Path) -> Path:
    """Horizontal bars per recipient, coloured from the slice palette."""

    slices = report.slices
    if not slices:
        return _placeholder("No data available for recipients.", output_path)

    names = [s.name for s in slices][::-1]
    values = [float(s.value) for s in slices][::-1]
    colors = [s.color for s in slices][::-1]

    fig, ax = plt.subplots(figsize=(8, max(3, len(slices) * 0.5)))
    # Numeric positions: two recipients may share a display name.
    positions = list(range(len(names)))
    bars = ax.barh(positions, values, color=colors)
    ax.set_yticks(positions)
    ax.set_yticklabels(names)
    for bar, item in zip(bars, list(slices)[::-1]):
        ax.annotate(
            f"{item.percentage:.1f}%",
            (bar.get_width(), bar.get_y() + bar.get_height() / 2),
            textcoords="offset points",
            xytext=(4, 0),
            va="center",
            fontsize=9,
        )
    ax.xaxis.set_major_formatter(
        mticker.FuncFormatter(lambda value, _pos: f"{report.currency} {value:,.0f}")
    )
    ax.set_title("Giving By Recipient", fontsize=14, fontweight="bold", pad=12)
    plt.tight_layout()
    return _save(fig, output_path)


__all__ = ["giving_by_recipient_png", "giving_over_time_png"]
