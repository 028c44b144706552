"""HTTP client for the remote move-suggestion service."""

from __future__ import annotations

import json
import logging
from urllib.error import URLError
from urllib.request import Request, urlopen

from chesslite.config import Settings
from chesslite.game.interfaces import ISuggestionService, Suggestion, SuggestionError

_LOGGER = logging.getLogger(__name__)


class HttpSuggestionService(ISuggestionService):
    """POSTs ``{"fen": ...}`` and reads ``pgn_next_move`` / ``error`` back.

    Args:
        url: Endpoint of the service.
        timeout: Seconds to wait for the reply.
    """

    __slots__ = ("_url", "_timeout")

    def __init__(self, url: str, timeout: float = 10.0) -> None:
        self._url = url
        self._timeout = timeout

    @classmethod
    def from_settings(cls, settings: Settings) -> HttpSuggestionService:
        if not settings.suggestion_url:
            raise ValueError("No suggestion URL configured")
        return cls(settings.suggestion_url, settings.suggestion_timeout)

    def suggest(self, fen: str) -> Suggestion:
        body = json.dumps({"fen": fen}).encode("utf-8")
        request = Request(
            self._url,
            data=body,
            headers={"Content-Type": "application/json"},
            method="POST",
        )
        try:
            with urlopen(request, timeout=self._timeout) as response:
                status = response.status
                payload = response.read()
        except (URLError, OSError) as exc:
            raise SuggestionError(f"Suggestion request failed: {exc}") from exc

        if not 200 <= status < 300:
            raise SuggestionError(f"Suggestion request failed: {status}")
        return parse_suggestion(payload)


def parse_suggestion(payload: bytes | str) -> Suggestion:
    """Map a service reply body to a :class:`Suggestion`."""
    try:
        data = json.loads(payload)
    except ValueError as exc:
        raise SuggestionError(f"Invalid suggestion reply: {exc}") from exc
    if not isinstance(data, dict):
        raise SuggestionError(f"Invalid suggestion reply: {data!r}")

    error = data.get("error")
    move = data.get("pgn_next_move")
    if error:
        _LOGGER.warning("Suggestion service reported an error: %s", error)
        return Suggestion(move=None, error=str(error))
    if not isinstance(move, str) or not move.strip():
        return Suggestion(move=None, error="No move in suggestion reply")
    return Suggestion(move=move.strip())
