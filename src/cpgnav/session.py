"""Per-session bookmarks, recently viewed sections, and favorites."""

from __future__ import annotations

import threading
from datetime import datetime
from typing import Callable

from .models import (
    Bookmark,
    BookmarkState,
    FavoriteState,
    RecentAccess,
    SessionSnapshot,
)
from .utils import require_id, utc_now

RECENT_LIMIT = 10


class SessionMemory:
    """Small ordered lists keyed by entry id, owned by one user session.

    Toggles and ``record_access`` are check-then-mutate sequences; each runs
    inside a single lock so the object can be shared across threads.
    """

    def __init__(
        self,
        *,
        recent_limit: int = RECENT_LIMIT,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        if recent_limit <= 0:
            raise ValueError("recent_limit must be positive")
        self.recent_limit = recent_limit
        self._clock = clock
        self._lock = threading.RLock()
        self._bookmarks: list[Bookmark] = []
        self._recent: list[RecentAccess] = []
        self._favorites: list[str] = []

    @classmethod
    def from_snapshot(
        cls,
        snapshot: SessionSnapshot,
        *,
        recent_limit: int = RECENT_LIMIT,
        clock: Callable[[], datetime] = utc_now,
    ) -> "SessionMemory":
        memory = cls(recent_limit=recent_limit, clock=clock)
        memory._bookmarks = list(snapshot.bookmarks)
        memory._recent = list(snapshot.recent)[:recent_limit]
        memory._favorites = list(dict.fromkeys(snapshot.favorites))
        return memory

    # ---- Bookmarks -----------------------------------------------------------
    def toggle_bookmark(
        self,
        document_id: str,
        entry_id: str,
        title: str,
        page: int,
        note: str | None = None,
    ) -> BookmarkState:
        document_id = require_id(document_id, "document_id")
        entry_id = require_id(entry_id, "entry_id")
        with self._lock:
            index = self._bookmark_index(document_id, entry_id)
            if index is not None:
                del self._bookmarks[index]
                return BookmarkState(action="removed", document_id=document_id, entry_id=entry_id)
            bookmark = Bookmark(
                document_id=document_id,
                entry_id=entry_id,
                title=title,
                page=page,
                note=note,
                created_at=self._clock(),
            )
            self._bookmarks.insert(0, bookmark)
            return BookmarkState(action="added", document_id=document_id, entry_id=entry_id)

    def remove_bookmark(self, document_id: str, entry_id: str) -> bool:
        with self._lock:
            index = self._bookmark_index(document_id, entry_id)
            if index is None:
                return False
            del self._bookmarks[index]
            return True

    def is_bookmarked(self, document_id: str, entry_id: str) -> bool:
        with self._lock:
            return self._bookmark_index(document_id, entry_id) is not None

    def list_bookmarks(self) -> list[Bookmark]:
        with self._lock:
            return list(self._bookmarks)

    def _bookmark_index(self, document_id: str, entry_id: str) -> int | None:
        for index, bookmark in enumerate(self._bookmarks):
            if bookmark.document_id == document_id and bookmark.entry_id == entry_id:
                return index
        return None

    # ---- Recent --------------------------------------------------------------
    def record_access(self, document_id: str, entry_id: str, title: str) -> RecentAccess:
        document_id = require_id(document_id, "document_id")
        entry_id = require_id(entry_id, "entry_id")
        access = RecentAccess(
            document_id=document_id,
            entry_id=entry_id,
            title=title,
            accessed_at=self._clock(),
        )
        with self._lock:
            remaining = [
                item
                for item in self._recent
                if not (item.document_id == document_id and item.entry_id == entry_id)
            ]
            self._recent = [access, *remaining][: self.recent_limit]
        return access

    def list_recent(self) -> list[RecentAccess]:
        with self._lock:
            return list(self._recent)

    # ---- Favorites -----------------------------------------------------------
    def toggle_favorite(self, entry_id: str) -> FavoriteState:
        entry_id = require_id(entry_id, "entry_id")
        with self._lock:
            if entry_id in self._favorites:
                self._favorites.remove(entry_id)
                return FavoriteState(action="removed", entry_id=entry_id)
            self._favorites.append(entry_id)
            return FavoriteState(action="added", entry_id=entry_id)

    def is_favorite(self, entry_id: str) -> bool:
        with self._lock:
            return entry_id in self._favorites

    def list_favorites(self) -> list[str]:
        with self._lock:
            return list(self._favorites)

    # ---- Whole-session helpers -----------------------------------------------
    def snapshot(self) -> SessionSnapshot:
        with self._lock:
            return SessionSnapshot(
                bookmarks=list(self._bookmarks),
                recent=list(self._recent),
                favorites=list(self._favorites),
            )

    def clear(self) -> None:
        with self._lock:
            self._bookmarks.clear()
            self._recent.clear()
            self._favorites.clear()


__all__ = ["RECENT_LIMIT", "SessionMemory"]
