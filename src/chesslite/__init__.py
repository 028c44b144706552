"""chesslite — a simplified chess rules engine with FEN and algebraic notation."""

__version__ = "0.1.0"
