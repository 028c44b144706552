"""Tests for GameState — move application, replay and history."""

import pytest

from chesslite.core.enums import CastlingRights, CastlingSide, Color, PieceType
from chesslite.core.errors import FenError
from chesslite.core.notation import STARTING_FEN
from chesslite.core.piece import Piece
from chesslite.core.types import E1, E2, E4, E7, E8, F1, G1, H1, Square, parse_square
from chesslite.game.state import GameState


def _sq(name: str) -> Square:
    return parse_square(name)


def _play(state: GameState, *uci: str) -> None:
    for text in uci:
        state.apply_move(_sq(text[:2]), _sq(text[2:]), timestamp=0.0)


class TestInitialState:
    def test_defaults(self) -> None:
        state = GameState()
        assert state.side_to_move == Color.WHITE
        assert state.castling == CastlingRights.ALL
        assert state.moves == []
        assert state.fen == STARTING_FEN

    def test_setup_from_fen(self) -> None:
        state = GameState()
        state.setup("r3k2r/8/8/8/8/8/8/R3K2R b Kq - 0 1")
        assert state.side_to_move == Color.BLACK
        assert state.castling == (
            CastlingRights.WHITE_KINGSIDE | CastlingRights.BLACK_QUEENSIDE
        )
        assert state.start_fen == "r3k2r/8/8/8/8/8/8/R3K2R b Kq - 0 1"

    @pytest.mark.parametrize("fen", ["", "   "])
    def test_blank_fen_rejected(self, fen: str) -> None:
        state = GameState()
        _play(state, "e2e4")
        with pytest.raises(FenError):
            state.setup(fen)
        assert state.ply_count == 1
        assert state.side_to_move == Color.BLACK

    def test_setup_without_fen_resets(self) -> None:
        state = GameState()
        _play(state, "e2e4")
        state.setup()
        assert state.fen == STARTING_FEN
        assert state.moves == []

    def test_bad_fen_leaves_state_untouched(self) -> None:
        state = GameState()
        _play(state, "e2e4")
        before = state.fen
        with pytest.raises(FenError):
            state.setup("not a fen")
        assert state.fen == before
        assert state.ply_count == 1


class TestApplyMove:
    def test_records_notation_and_flips_side(self) -> None:
        state = GameState()
        move = state.apply_move(E2, E4, timestamp=12.5)
        assert move.notation == "e4"
        assert move.timestamp == 12.5
        assert move.piece == Piece(Color.WHITE, PieceType.PAWN)
        assert state.side_to_move == Color.BLACK
        assert state.board[E4] == Piece(Color.WHITE, PieceType.PAWN)
        assert state.board[E2] is None

    def test_timestamp_defaults_to_now(self) -> None:
        state = GameState()
        move = state.apply_move(E2, E4)
        assert move.timestamp > 0

    def test_empty_origin_raises(self) -> None:
        state = GameState()
        with pytest.raises(ValueError):
            state.apply_move(E4, _sq("e5"))

    def test_capture_bookkeeping(self) -> None:
        state = GameState()
        _play(state, "e2e4", "d7d5", "e4d5")
        assert state.moves[-1].notation == "exd5"
        assert state.captured_by_white == [Piece(Color.BLACK, PieceType.PAWN)]
        assert state.captured_by_black == []

    def test_castling_moves_rook_and_drops_rights(self) -> None:
        state = GameState()
        state.setup("r3k2r/8/8/8/8/8/8/R3K2R w KQkq - 0 1")
        move = state.apply_move(E1, G1)
        assert move.castling == CastlingSide.KINGSIDE
        assert move.notation == "O-O"
        assert state.board[F1] == Piece(Color.WHITE, PieceType.ROOK)
        assert state.board[H1] is None
        assert state.castling == CastlingRights.BLACK_BOTH

    def test_rook_move_drops_one_right(self) -> None:
        state = GameState()
        state.setup("r3k2r/8/8/8/8/8/8/R3K2R w KQkq - 0 1")
        _play(state, "a1a2")
        assert state.castling == (
            CastlingRights.WHITE_KINGSIDE | CastlingRights.BLACK_BOTH
        )

    def test_notations(self) -> None:
        state = GameState()
        _play(state, "e2e4", "e7e5", "g1f3")
        assert state.notations == ["e4", "e5", "Nf3"]
        assert state.ply_count == 3


class TestValidity:
    def test_turn_is_enforced(self) -> None:
        state = GameState()
        assert state.is_valid_move(E2, E4)
        assert not state.is_valid_move(E7, _sq("e5"))

    def test_valid_moves_include_castling(self) -> None:
        state = GameState()
        state.setup("r3k2r/8/8/8/8/8/8/R3K2R w KQkq - 0 1")
        assert {G1, _sq("c1")} <= state.valid_moves(E1)

    def test_valid_moves_without_rights(self) -> None:
        state = GameState()
        state.setup("r3k2r/8/8/8/8/8/8/R3K2R w - - 0 1")
        assert G1 not in state.valid_moves(E1)


class TestReplay:
    def test_replay_rebuilds_position(self) -> None:
        original = GameState()
        _play(original, "e2e4", "e7e5", "g1f3", "b8c6", "f1c4", "g8f6", "e1g1")

        restored = GameState()
        restored.replay(original.moves)
        assert restored.board == original.board
        assert restored.castling == original.castling
        assert restored.side_to_move == Color.BLACK
        assert restored.moves == original.moves
        assert restored.fen == original.fen

    def test_replay_counts_captures(self) -> None:
        original = GameState()
        _play(original, "e2e4", "d7d5", "e4d5", "d8d5")
        restored = GameState()
        restored.replay(original.moves)
        assert restored.captured_by_white == original.captured_by_white
        assert restored.captured_by_black == [Piece(Color.WHITE, PieceType.PAWN)]

    def test_replay_empty(self) -> None:
        state = GameState()
        _play(state, "e2e4")
        state.replay([])
        assert state.fen == STARTING_FEN
        assert state.moves == []

    def test_black_king_castling_replayed(self) -> None:
        original = GameState()
        _play(
            original,
            "e2e4", "e7e5", "g1f3", "g8f6", "f1c4", "f8c5", "d2d3", "e8g8",
        )
        restored = GameState()
        restored.replay(original.moves)
        assert restored.board[E8] is None
        assert restored.board[_sq("f8")] == Piece(Color.BLACK, PieceType.ROOK)
        assert restored.castling == CastlingRights.WHITE_BOTH


class TestClearHistory:
    def test_keeps_position(self) -> None:
        state = GameState()
        _play(state, "e2e4")
        fen = state.fen
        state.clear_history()
        assert state.moves == []
        assert state.fen == fen
