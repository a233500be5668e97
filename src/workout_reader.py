"""
Workout CSV reader.

Reads workout logs exported as CSV with a header row, e.g.:

    date,type,minutes
    2025-11-01,run,30

Column names are matched case-insensitively. Only the minutes column
is interpreted; cells that do not hold a finite number count as zero.
"""

import asyncio
import csv
import logging
import math
import os
import re
from collections.abc import Mapping
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Iterator, List, Optional, Union

from .errors import ParseError, ReadError
from .models import SEQUENCE_TYPES, WorkoutRow


logger = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]

MINUTES_COLUMN = "minutes"

# plain ASCII decimal text, optionally signed, with an optional exponent
DECIMAL_PATTERN = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?", re.ASCII)


def _is_path(source: Any) -> bool:
    return isinstance(source, (str, os.PathLike))


def _normalize_headers(headers: List[str]) -> List[str]:
    """Lower-case header names."""
    return [header.lower() for header in headers]


def _rows_from_reader(reader: Iterator[List[str]], resolved: Path) -> Iterator[WorkoutRow]:
    """
    Turn raw CSV records into row mappings keyed by the header line.

    Missing trailing cells read as empty strings; surplus cells are kept
    under positional keys such as "_3".
    """
    try:
        # header is the first non-blank record
        for headers in reader:
            if headers:
                break
        else:
            return
        headers = _normalize_headers(headers)

        for record in reader:
            if not record:
                continue

            row: WorkoutRow = {}
            for idx, header in enumerate(headers):
                row[header] = record[idx] if idx < len(record) else ""
            for idx in range(len(headers), len(record)):
                row[f"_{idx}"] = record[idx]

            yield row
    except (csv.Error, UnicodeDecodeError) as e:
        raise ParseError(f"Failed to parse CSV file {resolved}: {e}", resolved) from e


@contextmanager
def iter_workout_rows(path: PathLike) -> Iterator[Iterator[WorkoutRow]]:
    """
    Open a workout CSV and yield a lazy iterator over its rows.

    The iterator is single-pass and only valid inside the ``with`` block;
    the file is closed when the block exits, whether or not it succeeded.

    Raises:
        ReadError: If the file cannot be opened.
        ParseError: While iterating, if the CSV structure is malformed.
    """
    resolved = Path(path).resolve()

    try:
        f = open(resolved, newline="", encoding="utf-8-sig")
    except OSError as e:
        raise ReadError(f"Failed to open CSV file {resolved}: {e}", resolved) from e

    with f:
        reader = csv.reader(f, strict=True)
        yield _rows_from_reader(reader, resolved)


def read_workout_rows(path: PathLike) -> List[WorkoutRow]:
    """
    Read every row from a workout CSV (blocking).

    Parameters:
        path: Path to the CSV file.

    Returns:
        List of row mappings in file order.
    """
    with iter_workout_rows(path) as rows:
        result = list(rows)

    logger.info(f"Loaded {len(result)} workout rows from {path}")
    return result


async def load_workout_rows(path: PathLike) -> List[WorkoutRow]:
    """
    Read every row from a workout CSV without blocking the event loop.

    Either all rows are returned or a single error is raised; partial
    results are never exposed.

    Raises:
        ReadError: If the file cannot be opened.
        ParseError: If the CSV structure is malformed.
    """
    return await asyncio.to_thread(read_workout_rows, path)


async def _resolve_rows(source: Any) -> Any:
    if _is_path(source):
        return await load_workout_rows(source)
    return source


def get_cell(row: Any, column: str) -> str:
    """Look up a cell by column name, ignoring case. Missing cells read as ''."""
    if not isinstance(row, Mapping):
        return ""

    if column in row:
        value = row[column]
    else:
        value = None
        for key, candidate in row.items():
            if isinstance(key, str) and key.lower() == column:
                value = candidate
                break

    return "" if value is None else str(value)


def parse_minutes(value: Optional[str]) -> float:
    """
    Parse a minutes cell, returning 0.0 for anything that is not a finite number.
    """
    if value is None:
        return 0.0

    text = str(value).strip()
    if not text:
        return 0.0

    if not DECIMAL_PATTERN.fullmatch(text):
        logger.debug(f"Ignoring non-numeric minutes value: {value!r}")
        return 0.0

    minutes = float(text)
    if not math.isfinite(minutes):
        logger.debug(f"Ignoring non-finite minutes value: {value!r}")
        return 0.0

    return minutes


async def count_workouts(source: Any) -> int:
    """
    Count workout rows in a CSV file or an already-parsed row list.

    Returns:
        Number of rows, 0 when ``source`` does not resolve to a sequence.
    """
    rows = await _resolve_rows(source)

    if isinstance(rows, SEQUENCE_TYPES):
        return len(rows)
    return 0


async def total_workout_minutes(source: Any) -> float:
    """
    Sum the minutes column over a CSV file or an already-parsed row list.

    Rows whose minutes cell is missing, blank, non-numeric or infinite
    contribute nothing to the total.

    Returns:
        Total minutes (may be fractional).
    """
    rows = await _resolve_rows(source)

    if not isinstance(rows, SEQUENCE_TYPES):
        return 0.0

    total = 0.0
    for row in rows:
        total += parse_minutes(get_cell(row, MINUTES_COLUMN))
    return total
