"""
Workout data visualization.

Provides functions for charting workout minutes against the weekly goal.
Uses matplotlib for static charts.
"""

import logging
from pathlib import Path
from typing import Any, List, Optional

import matplotlib.pyplot as plt
import numpy as np

from .analyzer import calculate_daily_minutes, calculate_minutes_by_type


logger = logging.getLogger(__name__)

# plot styling
plt.style.use("seaborn-v0_8-whitegrid")
COLORS = {
    "primary": "#2563eb",
    "secondary": "#64748b",
    "accent": "#f59e0b",
    "success": "#10b981",
}


def _finish(output_path: Optional[Path], show: bool) -> None:
    plt.tight_layout()

    if output_path:
        plt.savefig(output_path, dpi=150, bbox_inches="tight")
        logger.info(f"Saved plot to {output_path}")

    if show:
        plt.show()
    else:
        plt.close()


def plot_minutes_by_type(
    rows: List[Any],
    output_path: Optional[Path] = None,
    show: bool = True,
) -> None:
    """
    Bar chart of total minutes per workout type.

    Parameters:
        rows: Workout rows as loaded from CSV.
        output_path: Optional path to save the figure.
        show: Whether to display the plot.
    """
    by_type = calculate_minutes_by_type(rows)

    if not by_type:
        logger.warning("No workout types to plot")
        return

    fig, ax = plt.subplots(figsize=(10, 6))

    labels = list(by_type.keys())
    minutes = list(by_type.values())
    x = np.arange(len(labels))
    colors = plt.cm.Set3(np.linspace(0, 1, len(labels)))

    ax.bar(x, minutes, color=colors, edgecolor="white")

    ax.set_xticks(x)
    ax.set_xticklabels(labels, rotation=45, ha="right")
    ax.set_ylabel("Minutes", fontsize=11)
    ax.set_title("Minutes by Workout Type", fontsize=14, fontweight="bold")
    ax.grid(True, alpha=0.3, axis="y")

    _finish(output_path, show)


def plot_daily_minutes(
    rows: List[Any],
    weekly_goal: Optional[float] = None,
    output_path: Optional[Path] = None,
    show: bool = True,
) -> None:
    """
    Plot daily workout minutes with the cumulative total against the goal.

    Parameters:
        rows: Workout rows as loaded from CSV.
        weekly_goal: Weekly goal in minutes; drawn as a horizontal line.
        output_path: Optional path to save the figure.
        show: Whether to display the plot.
    """
    data = calculate_daily_minutes(rows)

    if not data:
        logger.warning("No dated workouts to plot")
        return

    fig, ax = plt.subplots(figsize=(12, 6))

    x = np.arange(len(data))
    minutes = [d["minutes"] for d in data]
    cumulative = [d["cumulative"] for d in data]

    ax.bar(x, minutes, color=COLORS["primary"], alpha=0.8, label="Daily minutes")
    ax.plot(
        x,
        cumulative,
        "o-",
        color=COLORS["accent"],
        markersize=4,
        linewidth=1.5,
        label="Cumulative minutes",
    )

    if weekly_goal is not None and weekly_goal > 0:
        ax.axhline(
            weekly_goal,
            color=COLORS["success"],
            linestyle="--",
            linewidth=2,
            label=f"Weekly goal: {weekly_goal:g} min",
        )

    # x-axis labels (show every nth label to avoid crowding)
    step = max(1, len(data) // 12)
    labels = [d["date"] for d in data]
    ax.set_xticks(range(0, len(data), step))
    ax.set_xticklabels(labels[::step], rotation=45, ha="right")

    ax.set_xlabel("Date", fontsize=11)
    ax.set_ylabel("Minutes", fontsize=11)
    ax.set_title("Workout Minutes vs Weekly Goal", fontsize=14, fontweight="bold")
    ax.legend()
    ax.grid(True, alpha=0.3, axis="y")

    _finish(output_path, show)
