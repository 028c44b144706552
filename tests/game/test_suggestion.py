"""Tests for the HTTP suggestion client."""

from __future__ import annotations

import json
from typing import Any
from urllib.error import URLError

import pytest

from chesslite.config import Settings
from chesslite.core.notation import STARTING_FEN
from chesslite.game import suggestion as suggestion_module
from chesslite.game.interfaces import Suggestion, SuggestionError
from chesslite.game.suggestion import HttpSuggestionService, parse_suggestion


class _FakeResponse:
    def __init__(self, body: bytes, status: int = 200) -> None:
        self._body = body
        self.status = status

    def read(self) -> bytes:
        return self._body

    def __enter__(self) -> _FakeResponse:
        return self

    def __exit__(self, *_exc: object) -> None:
        return None


class TestParseSuggestion:
    def test_move(self) -> None:
        reply = parse_suggestion(b'{"pgn_next_move": " Nf3 "}')
        assert reply == Suggestion(move="Nf3")
        assert reply.ok

    def test_error_wins(self) -> None:
        reply = parse_suggestion('{"pgn_next_move": "e4", "error": "engine down"}')
        assert reply == Suggestion(error="engine down")
        assert not reply.ok

    @pytest.mark.parametrize(
        "body", ["{}", '{"pgn_next_move": ""}', '{"pgn_next_move": 5}']
    )
    def test_missing_move(self, body: str) -> None:
        reply = parse_suggestion(body)
        assert reply.move is None
        assert reply.error == "No move in suggestion reply"

    @pytest.mark.parametrize("body", ["not json", "[1, 2]", '"e4"'])
    def test_garbage(self, body: str) -> None:
        with pytest.raises(SuggestionError):
            parse_suggestion(body)


class TestHttpSuggestionService:
    def test_posts_fen(self, monkeypatch: pytest.MonkeyPatch) -> None:
        seen: dict[str, Any] = {}

        def fake_urlopen(request: Any, timeout: float) -> _FakeResponse:
            seen["url"] = request.full_url
            seen["method"] = request.get_method()
            seen["body"] = json.loads(request.data)
            seen["timeout"] = timeout
            return _FakeResponse(b'{"pgn_next_move": "e4"}')

        monkeypatch.setattr(suggestion_module, "urlopen", fake_urlopen)
        service = HttpSuggestionService("http://localhost:8000/move", timeout=2.5)

        reply = service.suggest(STARTING_FEN)

        assert reply.ok
        assert reply.move == "e4"
        assert seen == {
            "url": "http://localhost:8000/move",
            "method": "POST",
            "body": {"fen": STARTING_FEN},
            "timeout": 2.5,
        }

    def test_network_error(self, monkeypatch: pytest.MonkeyPatch) -> None:
        def fake_urlopen(_request: Any, timeout: float) -> _FakeResponse:
            raise URLError("connection refused")

        monkeypatch.setattr(suggestion_module, "urlopen", fake_urlopen)
        service = HttpSuggestionService("http://localhost:8000/move")
        with pytest.raises(SuggestionError, match="connection refused"):
            service.suggest(STARTING_FEN)

    def test_bad_status(self, monkeypatch: pytest.MonkeyPatch) -> None:
        def fake_urlopen(_request: Any, timeout: float) -> _FakeResponse:
            return _FakeResponse(b"", status=204)

        monkeypatch.setattr(suggestion_module, "urlopen", fake_urlopen)
        service = HttpSuggestionService("http://localhost:8000/move")
        with pytest.raises(SuggestionError):
            service.suggest(STARTING_FEN)

    def test_from_settings(self) -> None:
        settings = Settings(suggestion_url="http://example.test/", suggestion_timeout=3)
        service = HttpSuggestionService.from_settings(settings)
        assert isinstance(service, HttpSuggestionService)

    def test_from_settings_without_url(self) -> None:
        with pytest.raises(ValueError):
            HttpSuggestionService.from_settings(Settings())
