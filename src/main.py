"""
Main entry point for the health summary.

Provides a CLI that counts health entries and workouts, totals workout
minutes and reports progress against the weekly goal.
"""

import sys
import asyncio
import logging
import argparse
from pathlib import Path
from typing import List, Optional

from .config import AppConfig, UserConfig
from .errors import ReaderError
from .models import WorkoutSummary
from .health_reader import count_health_entries
from .workout_reader import load_workout_rows
from .analyzer import summarize_workouts, format_minutes
from .visualizations import plot_minutes_by_type, plot_daily_minutes


logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def _resolve_arg(value: Optional[str]) -> Optional[Path]:
    return Path(value).resolve() if value else None


async def report_health(health_file: Optional[Path]) -> Optional[int]:
    """
    Print the number of health entries in a JSON file.

    Parameters:
        health_file: Resolved path, or None when not given.

    Returns:
        The entry count, or None if no file was given or it failed to load.
    """
    if health_file is None:
        print("No health JSON file provided as argument.")
        return None

    try:
        count = await count_health_entries(health_file)
    except ReaderError as e:
        logger.error(f"Error reading health data: {e}")
        return None

    print(f"Found {count} health entries in {health_file}")
    return count


async def report_workouts(
    workout_file: Optional[Path], weekly_goal: Optional[float]
) -> Optional[WorkoutSummary]:
    """
    Print workout count, total minutes and goal progress for a CSV file.

    Parameters:
        workout_file: Resolved path, or None when not given.
        weekly_goal: Weekly goal in minutes, if configured.

    Returns:
        The workout summary, or None if no file was given or it failed to load.
    """
    if workout_file is None:
        print("No workout CSV file provided as argument.")
        return None

    try:
        rows = await load_workout_rows(workout_file)
    except ReaderError as e:
        logger.error(f"Error reading workout CSV: {e}")
        return None

    summary = await summarize_workouts(rows, weekly_goal)
    print(
        f"Found {summary.workouts} workouts in {workout_file}, "
        f"total minutes: {format_minutes(summary.total_minutes)}"
    )

    if summary.has_goal:
        print(
            f"Weekly goal: {format_minutes(summary.weekly_goal)} minutes. "
            f"Progress: {summary.goal_progress_percent}%"
        )
        if summary.goal_reached:
            print("Weekly goal reached!")
        else:
            print(
                f"{format_minutes(summary.remaining_minutes)} minutes "
                "left to reach the goal."
            )
    elif weekly_goal is not None:
        logger.warning(f"Ignoring non-positive weekly goal: {weekly_goal}")

    return summary


async def run_summary(
    health_file: Optional[Path], workout_file: Optional[Path], user: UserConfig
) -> None:
    """Greet the user and report on both data files independently."""
    print(f"Hello {user.user_name}!")

    await report_health(health_file)
    await report_workouts(workout_file, user.weekly_goal)


def cmd_summary(args: argparse.Namespace, config: AppConfig) -> None:
    """Print health and workout summary."""
    asyncio.run(
        run_summary(
            _resolve_arg(args.health_file),
            _resolve_arg(args.workout_file),
            config.user,
        )
    )


def cmd_visualize(args: argparse.Namespace, config: AppConfig) -> None:
    """Generate workout charts."""
    workout_file = _resolve_arg(args.workout_file)

    try:
        rows = asyncio.run(load_workout_rows(workout_file))
    except ReaderError as e:
        logger.error(f"Error reading workout CSV: {e}")
        sys.exit(1)

    output_dir = Path(args.output) if args.output else config.paths.output_dir
    output_dir.mkdir(parents=True, exist_ok=True)

    show = not args.no_show

    logger.info("Generating workout visualizations...")
    plot_minutes_by_type(rows, output_dir / "minutes_by_type.png", show)
    plot_daily_minutes(
        rows, config.user.weekly_goal, output_dir / "daily_minutes.png", show
    )


def create_parser() -> argparse.ArgumentParser:
    """Create and return the argument parser for CLI."""
    parser = argparse.ArgumentParser(
        description="Health entry and workout minutes summary"
    )
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # summary command
    summary_parser = subparsers.add_parser(
        "summary", help="Count health entries and workouts"
    )
    summary_parser.add_argument(
        "health_file", nargs="?", help="Path to health data JSON file"
    )
    summary_parser.add_argument(
        "workout_file", nargs="?", help="Path to workout CSV file"
    )

    # visualize command
    viz_parser = subparsers.add_parser("visualize", help="Generate charts")
    viz_parser.add_argument("workout_file", help="Path to workout CSV file")
    viz_parser.add_argument(
        "--output",
        "-o",
        type=str,
        help="Custom output directory (default: output/)",
    )
    viz_parser.add_argument(
        "--no-show", action="store_true", help="Save plots without displaying"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    config = AppConfig.load()

    commands = {
        "summary": cmd_summary,
        "visualize": cmd_visualize,
    }

    try:
        commands[args.command](args, config)
    except Exception as e:
        logger.error(f"Unexpected error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
