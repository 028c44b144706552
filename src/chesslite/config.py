"""Runtime settings for the game layer."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

_ENV_PREFIX = "CHESSLITE_"


def default_storage_path() -> Path:
    """Where the move history is kept unless configured otherwise."""
    return Path.home() / ".chesslite" / "moves.json"


@dataclass
class Settings:
    """All user-configurable settings."""

    # Persistence
    storage_path: Path | None = None

    # Move suggestions
    suggestion_url: str | None = None
    suggestion_timeout: float = 10.0  # seconds

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """Build settings from ``CHESSLITE_*`` environment variables."""
        env = os.environ if environ is None else environ
        settings = cls(storage_path=default_storage_path())

        storage = env.get(f"{_ENV_PREFIX}STORAGE_PATH")
        if storage:
            settings.storage_path = Path(storage).expanduser()

        url = env.get(f"{_ENV_PREFIX}SUGGESTION_URL")
        if url:
            settings.suggestion_url = url

        timeout = env.get(f"{_ENV_PREFIX}SUGGESTION_TIMEOUT")
        if timeout:
            try:
                settings.suggestion_timeout = float(timeout)
            except ValueError:
                raise ValueError(
                    f"Invalid {_ENV_PREFIX}SUGGESTION_TIMEOUT: {timeout!r}"
                ) from None
            if settings.suggestion_timeout <= 0:
                raise ValueError(
                    f"Invalid {_ENV_PREFIX}SUGGESTION_TIMEOUT: {timeout!r}"
                )
        return settings
