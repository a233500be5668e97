"""
Health data reader.

Loads a health JSON export and counts its entries. The document may be
a bare array of entries or an object holding the entry list under some
key, e.g. {"health": [...]}. Any other shape counts as zero entries.
"""

import asyncio
import json
import logging
import os
from pathlib import Path
from typing import Any, Union

from .errors import ParseError, ReadError
from .models import (
    EntryList,
    HealthShape,
    KeyedEntryList,
    SEQUENCE_TYPES,
    UnrecognizedShape,
    json_type_name,
)


logger = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]


def _is_path(source: Any) -> bool:
    return isinstance(source, (str, os.PathLike))


def read_health_document(path: PathLike) -> Any:
    """
    Read and parse a health JSON file (blocking).

    Parameters:
        path: Path to the JSON file.

    Returns:
        The parsed JSON value (list, dict or scalar).

    Raises:
        ReadError: If the file cannot be opened or read.
        ParseError: If the content is not valid UTF-8 JSON.
    """
    resolved = Path(path).resolve()

    try:
        with open(resolved, "rb") as f:
            raw = f.read()
    except OSError as e:
        raise ReadError(f"Failed to read file {resolved}: {e}", resolved) from e

    try:
        data = json.loads(raw.decode("utf-8-sig"))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise ParseError(f"Failed to parse JSON from {resolved}: {e}", resolved) from e

    logger.debug(f"Parsed {json_type_name(data)} document from {resolved}")
    return data


async def load_health_document(path: PathLike) -> Any:
    """
    Read and parse a health JSON file without blocking the event loop.

    Parameters:
        path: Path to the JSON file.

    Returns:
        The parsed JSON value.

    Raises:
        ReadError: If the file cannot be opened or read.
        ParseError: If the content is not valid JSON.
    """
    return await asyncio.to_thread(read_health_document, path)


def classify_health_document(data: Any) -> HealthShape:
    """
    Work out where the entries live in a parsed health document.

    Object keys are scanned in file order; the first list-valued
    property wins.
    """
    if isinstance(data, SEQUENCE_TYPES):
        return EntryList(entries=list(data))

    if isinstance(data, dict):
        for key, value in data.items():
            if isinstance(value, SEQUENCE_TYPES):
                return KeyedEntryList(key=key, entries=list(value))
        return UnrecognizedShape(kind="object")

    return UnrecognizedShape(kind=json_type_name(data))


async def count_health_entries(source: Any) -> int:
    """
    Count the health entries in a file or an already-parsed document.

    Parameters:
        source: Path to a JSON file, or a parsed JSON value.

    Returns:
        Number of entries, 0 when the document has no entry list.

    Raises:
        ReadError, ParseError: Only when ``source`` is a path that fails to load.
    """
    data = await load_health_document(source) if _is_path(source) else source

    shape = classify_health_document(data)
    if isinstance(shape, UnrecognizedShape):
        logger.debug(f"No entry list found in {shape.kind} document")
    elif isinstance(shape, KeyedEntryList):
        logger.debug(f"Counting entries under key '{shape.key}'")

    return shape.count
