"""Exceptions raised by the strict notation entry points.

The lenient ``parse_*`` functions catch these and return ``None``.
"""

from __future__ import annotations


class NotationError(ValueError):
    """Base class for malformed or unusable notation."""


class FenError(NotationError):
    """Malformed FEN text."""


class SanSyntaxError(NotationError):
    """Move text that does not match the algebraic grammar."""


class IllegalMoveError(NotationError):
    """Well-formed move text that no piece can play."""
