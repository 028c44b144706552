"""Game layer — state record, controller and its collaborators.

Quick start::

    from chesslite.game import GameController, JsonMoveStore

    ctrl = GameController(store=JsonMoveStore("moves.json"))
    ctrl.restore()
    ctrl.execute_notation("e4")
    print(ctrl.fen)

The Qt worker lives in :mod:`chesslite.game.qt_bridge` and is imported
separately so the rest of the layer works without PyQt6 loaded.
"""

from chesslite.game.controller import GameController, GameEvents
from chesslite.game.interfaces import (
    IMoveStore,
    ISuggestionService,
    Suggestion,
    SuggestionError,
)
from chesslite.game.state import GameState
from chesslite.game.storage import JsonMoveStore, MemoryMoveStore
from chesslite.game.suggestion import HttpSuggestionService, parse_suggestion

__all__ = [
    # Interfaces
    "IMoveStore",
    "ISuggestionService",
    "Suggestion",
    "SuggestionError",
    # Concrete
    "GameController",
    "GameEvents",
    "GameState",
    "HttpSuggestionService",
    "JsonMoveStore",
    "MemoryMoveStore",
    "parse_suggestion",
]
