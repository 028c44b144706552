"""Qt bridge to query the suggestion service from a worker thread."""

from __future__ import annotations

import logging

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from chesslite.game.interfaces import ISuggestionService, SuggestionError

_LOGGER = logging.getLogger(__name__)


class SuggestionWorker(QObject):
    """Thread-affine worker that fetches move suggestions on demand.

    Move it to a ``QThread`` and invoke :meth:`request_suggestion` through a
    queued connection; results come back as signals tagged with the
    caller's request id so stale replies can be dropped.
    """

    suggestion_ready = pyqtSignal(int, str)
    suggestion_failed = pyqtSignal(int, str)

    __slots__ = ("_service",)

    def __init__(self, service: ISuggestionService) -> None:
        super().__init__()
        self._service = service

    @pyqtSlot(str, int)
    def request_suggestion(self, fen: str, request_id: int) -> None:
        """Ask the service for a move in *fen* and emit the outcome."""
        try:
            suggestion = self._service.suggest(fen)
        except SuggestionError as exc:
            _LOGGER.warning("Suggestion request %d failed: %s", request_id, exc)
            self.suggestion_failed.emit(request_id, str(exc))
            return

        if suggestion.error is not None or not suggestion.move:
            self.suggestion_failed.emit(
                request_id, suggestion.error or "No move suggested"
            )
            return

        self.suggestion_ready.emit(request_id, suggestion.move)

    def set_service(self, service: ISuggestionService) -> None:
        """Swap the service (takes effect on the next request)."""
        self._service = service
