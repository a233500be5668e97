#!/usr/bin/env python
"""
Health summary CLI runner.

Usage:
    python run.py summary health.json workouts.csv   # counts and goal progress
    python run.py visualize workouts.csv             # generate charts

Environment (or .env):
    USER_NAME     name used in the greeting
    WEEKLY_GOAL   weekly exercise goal in minutes
"""

import sys
from pathlib import Path

# add src to path for imports
sys.path.insert(0, str(Path(__file__).parent))

from src.main import main

if __name__ == "__main__":
    main()
