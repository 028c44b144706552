"""Tests for the Qt suggestion worker."""

from __future__ import annotations

import pytest
from PyQt6.QtTest import QSignalSpy

from chesslite.core.notation import STARTING_FEN
from chesslite.game.interfaces import ISuggestionService, Suggestion, SuggestionError
from chesslite.game.qt_bridge import SuggestionWorker


class _FixedService(ISuggestionService):
    def __init__(self, reply: Suggestion | Exception) -> None:
        self._reply = reply

    def suggest(self, fen: str) -> Suggestion:
        del fen
        if isinstance(self._reply, Exception):
            raise self._reply
        return self._reply


@pytest.mark.usefixtures("qapp")
class TestSuggestionWorker:
    def test_emits_ready(self) -> None:
        worker = SuggestionWorker(_FixedService(Suggestion(move="e4")))
        ready = QSignalSpy(worker.suggestion_ready)
        failed = QSignalSpy(worker.suggestion_failed)

        worker.request_suggestion(STARTING_FEN, 3)

        assert len(ready) == 1
        assert ready[0][0] == 3
        assert ready[0][1] == "e4"
        assert len(failed) == 0

    def test_emits_failed_on_service_error(self) -> None:
        worker = SuggestionWorker(_FixedService(Suggestion(error="engine down")))
        ready = QSignalSpy(worker.suggestion_ready)
        failed = QSignalSpy(worker.suggestion_failed)

        worker.request_suggestion(STARTING_FEN, 5)

        assert len(ready) == 0
        assert len(failed) == 1
        assert failed[0][0] == 5
        assert failed[0][1] == "engine down"

    def test_emits_failed_on_transport_error(self) -> None:
        worker = SuggestionWorker(_FixedService(SuggestionError("timed out")))
        failed = QSignalSpy(worker.suggestion_failed)

        worker.request_suggestion(STARTING_FEN, 8)

        assert len(failed) == 1
        assert failed[0][1] == "timed out"

    def test_set_service(self) -> None:
        worker = SuggestionWorker(_FixedService(Suggestion(error="old")))
        worker.set_service(_FixedService(Suggestion(move="d4")))
        ready = QSignalSpy(worker.suggestion_ready)

        worker.request_suggestion(STARTING_FEN, 1)

        assert len(ready) == 1
        assert ready[0][1] == "d4"
