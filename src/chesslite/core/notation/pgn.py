"""PGN movetext helpers for the move history."""

from __future__ import annotations

import re
from collections.abc import Iterable

RESULT_TOKENS = frozenset({"1-0", "0-1", "1/2-1/2", "*"})
_MOVE_NUMBER_RE = re.compile(r"^\d+\.(?:\.\.)?$")
# "1.e4" style tokens carry the move glued to its number
_NUMBERED_MOVE_RE = re.compile(r"^\d+\.(?:\.\.)?(\S+)$")


def movetext_from_sans(sans: Iterable[str], result_token: str = "*") -> str:
    """Build numbered movetext, e.g. ``1. e4 e5 2. Nf3 *``."""
    parts: list[str] = []
    for ply, san in enumerate(sans):
        if ply % 2 == 0:
            parts.append(f"{(ply // 2) + 1}.")
        parts.append(san)
    if result_token:
        parts.append(result_token)
    return " ".join(parts)


def move_pairs(sans: Iterable[str]) -> list[tuple[int, str, str | None]]:
    """Group moves as ``(number, white, black)`` rows for display."""
    pairs: list[tuple[int, str, str | None]] = []
    sans = list(sans)
    for idx in range(0, len(sans), 2):
        black = sans[idx + 1] if idx + 1 < len(sans) else None
        pairs.append((idx // 2 + 1, sans[idx], black))
    return pairs


def sans_from_movetext(movetext: str) -> list[str]:
    """Extract the mainline move tokens from PGN movetext.

    Comments, variations, NAGs, move numbers and the result are dropped.
    """
    text = re.sub(r"\{[^}]*\}", " ", movetext)
    text = re.sub(r";[^\n\r]*", " ", text)
    previous = None
    while previous != text:
        previous = text
        text = re.sub(r"\([^()]*\)", " ", text)

    sans: list[str] = []
    for token in text.split():
        if token in RESULT_TOKENS:
            continue
        if _MOVE_NUMBER_RE.match(token):
            continue
        if token.startswith("$"):
            continue
        numbered = _NUMBERED_MOVE_RE.match(token)
        sans.append(numbered.group(1) if numbered else token)
    return sans
