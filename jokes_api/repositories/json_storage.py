"""
JSON-backed joke dataset.

The file must hold a top-level array; each entry is an opaque joke.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


class JokeDataError(Exception):
    """Raised when the dataset file is missing or malformed."""


def load(path: Path | str) -> tuple[Any, ...]:
    """Read the dataset once and return it as an immutable sequence."""
    source = Path(path)
    try:
        with source.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError as exc:
        raise JokeDataError(f"Joke file not found: {source}") from exc
    except OSError as exc:
        raise JokeDataError(f"Could not read joke file {source}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise JokeDataError(f"Invalid JSON in {source}: {exc}") from exc

    if not isinstance(data, list):
        raise JokeDataError(
            f"Joke file {source} must contain a JSON array, got {type(data).__name__}"
        )
    logger.info("Loaded %d jokes from %s", len(data), source)
    return tuple(data)
