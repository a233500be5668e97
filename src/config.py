"""Configuration management for the health summary."""

import math
import os
from pathlib import Path
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv


# load environment variables from .env file
load_dotenv()


DEFAULT_USER_NAME = "unknown"


def parse_weekly_goal(raw: Optional[str]) -> Optional[float]:
    """
    Parse the weekly goal in minutes.

    Returns None for unset, blank, non-numeric or non-finite values.
    """
    if raw is None or not raw.strip():
        return None

    try:
        goal = float(raw.strip())
    except ValueError:
        return None

    if not math.isfinite(goal):
        return None
    return goal


@dataclass(frozen=True)
class UserConfig:
    """Per-user settings read from the environment."""

    user_name: str = DEFAULT_USER_NAME
    weekly_goal: Optional[float] = None

    @classmethod
    def from_env(cls) -> "UserConfig":
        """
        Create config from USER_NAME and WEEKLY_GOAL environment variables.
        """
        return cls(
            user_name=os.getenv("USER_NAME") or DEFAULT_USER_NAME,
            weekly_goal=parse_weekly_goal(os.getenv("WEEKLY_GOAL")),
        )


@dataclass(frozen=True)
class PathConfig:
    """File path configuration."""

    base_dir: Path
    output_dir: Path

    @classmethod
    def default(cls) -> "PathConfig":
        """
        Create default path configuration.
        """
        base = Path(__file__).parent.parent
        return cls(
            base_dir=base,
            output_dir=base / "output",
        )


@dataclass(frozen=True)
class AppConfig:
    """Application-wide configuration."""

    user: UserConfig
    paths: PathConfig

    @classmethod
    def load(cls) -> "AppConfig":
        """
        Load full application configuration.
        """
        return cls(user=UserConfig.from_env(), paths=PathConfig.default())
