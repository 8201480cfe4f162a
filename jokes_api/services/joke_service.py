"""Joke lookup use cases (random pick, lookup by index)."""

from __future__ import annotations

import logging
import random
from typing import Any, Sequence

from jokes_api.domain.indexes import parse_index

logger = logging.getLogger(__name__)

INVALID_NUMBER_MESSAGE = "Please enter a valid number"
NOT_FOUND_MESSAGE = "No jokes found"


class JokeError(Exception):
    """Base exception for joke lookups."""

    status_code = 500


class InvalidIndexFormatError(JokeError):
    """Raised when the requested token is not a base-10 integer."""

    status_code = 400


class JokeNotFoundError(JokeError):
    """Raised when no joke exists at the requested position."""

    status_code = 404


class JokeService:
    """Serves jokes from a read-only sequence loaded at startup."""

    def __init__(self, jokes: Sequence[Any], rng: random.Random | None = None) -> None:
        self.jokes = tuple(jokes)
        self._rng = rng or random.Random()

    def count(self) -> int:
        return len(self.jokes)

    def random_joke(self) -> Any:
        if not self.jokes:
            raise JokeNotFoundError(NOT_FOUND_MESSAGE)
        index = self._rng.randrange(len(self.jokes))
        logger.debug("Random joke #%d", index)
        return self.jokes[index]

    def joke_at(self, token: str) -> Any:
        try:
            index = parse_index(token, len(self.jokes))
        except ValueError:
            raise InvalidIndexFormatError(INVALID_NUMBER_MESSAGE) from None
        if index is None:
            raise JokeNotFoundError(NOT_FOUND_MESSAGE)
        logger.debug("Joke #%d", index)
        return self.jokes[index]

    def handle(self, path: str) -> tuple[int, dict]:
        """
        Resolve a request path into (status, payload).

        "/" yields a random joke, "/<n>" the joke at index n. Successful
        payloads are always wrapped as {"data": joke}; failures as {"error": msg}.
        """
        try:
            if path in ("", "/"):
                joke = self.random_joke()
            else:
                joke = self.joke_at(path[1:] if path.startswith("/") else path)
        except JokeError as exc:
            return exc.status_code, {"error": str(exc)}
        return 200, {"data": joke}
