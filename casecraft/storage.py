"""
Favorites and history persistence.

Both collections live in one JSON file. Anything missing, unreadable or
malformed loads as an empty collection so a damaged file never stops the
engine from working.
"""

import json
import logging
import os
from typing import Optional

logger = logging.getLogger(__name__)

FAVORITES_KEY = "favoriteTransformations"
HISTORY_KEY = "transformationHistory"


class PreferenceError(Exception):
    """Raised when preferences cannot be written."""
    pass


def default_path() -> str:
    """Preference file location, overridable with CASECRAFT_HOME."""
    home = os.environ.get("CASECRAFT_HOME") or os.path.join(os.path.expanduser("~"), ".casecraft")
    return os.path.join(home, "preferences.json")


class PreferenceStore:
    """
    Stores favorite transform ids and a short history of applied ids.

    Favorites are an unordered set. History is most-recent-first and keeps
    at most HISTORY_LIMIT entries.
    """

    HISTORY_LIMIT = 10

    def __init__(self, path: Optional[str] = None):
        self.path = path or default_path()

    # ------------------------------------------------------------------
    # Raw file access
    # ------------------------------------------------------------------

    def _read(self) -> dict:
        if not os.path.isfile(self.path):
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            logger.warning("Ignoring unreadable preferences at %s: %s", self.path, e)
            return {}
        if not isinstance(data, dict):
            logger.warning("Ignoring malformed preferences at %s", self.path)
            return {}
        return data

    def _write(self, data: dict) -> None:
        directory = os.path.dirname(self.path)
        try:
            if directory:
                os.makedirs(directory, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(data, f, ensure_ascii=False, indent=2)
        except OSError as e:
            raise PreferenceError(f"Cannot save preferences to {self.path}: {e}") from e

    def _update(self, key: str, value: list) -> None:
        data = self._read()
        data[key] = value
        self._write(data)

    @staticmethod
    def _string_list(value, key: str) -> list[str]:
        if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
            if value is not None:
                logger.warning("Ignoring malformed %s entry in preferences", key)
            return []
        return value

    # ------------------------------------------------------------------
    # Favorites
    # ------------------------------------------------------------------

    def load_favorites(self) -> set[str]:
        return set(self._string_list(self._read().get(FAVORITES_KEY), FAVORITES_KEY))

    def save_favorites(self, favorites: set[str]) -> None:
        self._update(FAVORITES_KEY, sorted(favorites))

    def is_favorite(self, transform_id: str) -> bool:
        return transform_id in self.load_favorites()

    def toggle_favorite(self, transform_id: str) -> bool:
        """Add or remove a favorite. Returns True if it is now a favorite."""
        favorites = self.load_favorites()
        if transform_id in favorites:
            favorites.remove(transform_id)
            added = False
        else:
            favorites.add(transform_id)
            added = True
        self.save_favorites(favorites)
        return added

    # ------------------------------------------------------------------
    # History
    # ------------------------------------------------------------------

    def load_history(self) -> list[str]:
        history = self._string_list(self._read().get(HISTORY_KEY), HISTORY_KEY)
        return history[:self.HISTORY_LIMIT]

    def save_history(self, history: list[str]) -> None:
        self._update(HISTORY_KEY, list(history[:self.HISTORY_LIMIT]))

    def add_to_history(self, transform_id: str) -> list[str]:
        """Record a transform as most recent, evicting the oldest past the limit."""
        history = [transform_id] + self.load_history()
        history = history[:self.HISTORY_LIMIT]
        self.save_history(history)
        return history

    def clear(self) -> None:
        """Forget all favorites and history."""
        if os.path.isfile(self.path):
            os.remove(self.path)
