"""
Tests for the command-line entry point.
"""

import asyncio
import json
import logging

import pytest

from src.config import UserConfig
from src.main import main, report_workouts, run_summary


CSV = "date,type,minutes\n2025-11-01,run,30\n2025-11-02,yoga,45\n"


@pytest.fixture
def data_files(tmp_path):
    """Write a health JSON file and a workout CSV file."""
    health = tmp_path / "health.json"
    health.write_text(json.dumps([{"steps": 1}, {"steps": 2}]), encoding="utf-8")
    workouts = tmp_path / "workouts.csv"
    workouts.write_text(CSV, encoding="utf-8")
    return health, workouts


class TestRunSummary:
    """Tests for run_summary."""

    def test_full_summary(self, data_files, capsys):
        """Test greeting, counts and progress lines."""
        health, workouts = data_files
        user = UserConfig(user_name="Sam", weekly_goal=150)

        asyncio.run(run_summary(health, workouts, user))

        out = capsys.readouterr().out
        assert "Hello Sam!" in out
        assert f"Found 2 health entries in {health}" in out
        assert f"Found 2 workouts in {workouts}, total minutes: 75" in out
        assert "Weekly goal: 150 minutes. Progress: 50%" in out
        assert "75 minutes left to reach the goal." in out

    def test_missing_arguments(self, capsys):
        """Test messages when no files are given."""
        asyncio.run(run_summary(None, None, UserConfig()))

        out = capsys.readouterr().out
        assert "Hello unknown!" in out
        assert "No health JSON file provided as argument." in out
        assert "No workout CSV file provided as argument." in out

    def test_health_failure_does_not_stop_workouts(self, data_files, tmp_path, capsys, caplog):
        """Test a bad health file is logged and workouts are still reported."""
        _, workouts = data_files
        bad = tmp_path / "bad.json"
        bad.write_text("{not valid}", encoding="utf-8")

        with caplog.at_level(logging.ERROR):
            asyncio.run(run_summary(bad, workouts, UserConfig()))

        out = capsys.readouterr().out
        assert "Error reading health data" in caplog.text
        assert str(bad) in caplog.text
        assert "Found 2 workouts" in out

    def test_no_goal_line_without_goal(self, data_files, capsys):
        """Test progress is omitted when no weekly goal is configured."""
        health, workouts = data_files

        asyncio.run(run_summary(health, workouts, UserConfig()))

        assert "Weekly goal" not in capsys.readouterr().out


class TestReportWorkouts:
    """Tests for report_workouts."""

    def test_missing_file(self, tmp_path, caplog):
        """Test a missing CSV is logged and returns None."""
        with caplog.at_level(logging.ERROR):
            result = asyncio.run(report_workouts(tmp_path / "missing.csv", 150))

        assert result is None
        assert "Error reading workout CSV" in caplog.text

    def test_zero_goal_is_ignored(self, data_files, capsys, caplog):
        """Test a zero goal logs a warning instead of printing progress."""
        _, workouts = data_files

        with caplog.at_level(logging.WARNING):
            summary = asyncio.run(report_workouts(workouts, 0))

        assert summary.total_minutes == 75
        assert "Weekly goal" not in capsys.readouterr().out
        assert "non-positive weekly goal" in caplog.text

    def test_goal_reached(self, data_files, capsys):
        """Test meeting the goal prints a reached message instead of minutes left."""
        _, workouts = data_files

        summary = asyncio.run(report_workouts(workouts, 60))

        out = capsys.readouterr().out
        assert summary.goal_reached
        assert "Progress: 125%" in out
        assert "Weekly goal reached!" in out
        assert "left to reach the goal" not in out


class TestMain:
    """Tests for main."""

    def test_no_command_exits(self):
        """Test running without a command prints help and exits."""
        with pytest.raises(SystemExit) as exc_info:
            main([])

        assert exc_info.value.code == 1

    def test_summary_command(self, data_files, monkeypatch, capsys):
        """Test the summary subcommand reads user settings from the environment."""
        health, workouts = data_files
        monkeypatch.setenv("USER_NAME", "Alex")
        monkeypatch.setenv("WEEKLY_GOAL", "100")

        main(["summary", str(health), str(workouts)])

        out = capsys.readouterr().out
        assert "Hello Alex!" in out
        assert "Progress: 75%" in out

    def test_visualize_command(self, data_files, tmp_path, monkeypatch):
        """Test the visualize subcommand writes chart files."""
        _, workouts = data_files
        monkeypatch.setenv("WEEKLY_GOAL", "150")
        output_dir = tmp_path / "charts"

        main(["visualize", str(workouts), "--output", str(output_dir), "--no-show"])

        assert (output_dir / "minutes_by_type.png").exists()
        assert (output_dir / "daily_minutes.png").exists()

    def test_visualize_missing_file_exits(self, tmp_path):
        """Test visualize exits with an error for a missing CSV."""
        with pytest.raises(SystemExit) as exc_info:
            main(["visualize", str(tmp_path / "missing.csv"), "--no-show"])

        assert exc_info.value.code == 1
