"""Core business logic shared by the MCP tools and the REST facade."""

from __future__ import annotations

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import HTTPException, status
from redis.asyncio import Redis

from ..config import Settings
from ..matching import MatchEngine, normalize_category, normalize_query
from ..models import (
    AppNavigationResponse,
    BookmarkRemoval,
    BookmarkState,
    BookmarkStatus,
    CategoryListing,
    EntryRef,
    FavoriteState,
    FavoriteStatus,
    OpenSectionResponse,
    RecentAccess,
    ReferenceEntry,
    SearchResponse,
    SessionSnapshot,
)
from ..navigation import open_entry, resolve_app_section
from ..session import SessionMemory
from ..storage import RedisSessionStorage
from ..taxonomy import TaxonomyStore, load_default_taxonomy
from ..utils import require_id
from . import views
from .defaults import DEFAULT_SESSION_ID

logger = logging.getLogger(__name__)


class AssistantService:
    """One command per assistant tool, over a shared taxonomy and per-session memory.

    Sessions enter the in-process cache only when a command mutates them; reads
    of unknown session ids answer from storage (or with an empty session)
    without caching anything. Every mutation runs under ``_session_lock`` from
    cache lookup through persistence.
    """

    def __init__(
        self,
        settings: Settings,
        *,
        store: TaxonomyStore | None = None,
        redis: Redis | None = None,
    ) -> None:
        self.settings = settings
        self.store = store or load_default_taxonomy()
        self.engine = MatchEngine(self.store)
        if redis is None and settings.session_backend == "redis":
            redis = Redis.from_url(settings.redis_url)
        self.redis = redis
        self.storage = RedisSessionStorage(redis, settings) if redis is not None else None
        self._sessions: dict[str, SessionMemory] = {}
        self._session_lock = asyncio.Lock()

    async def close(self) -> None:
        if self.redis is not None:
            await self.redis.aclose()

    # ------------------------------------------------------------------ #
    # Session plumbing
    # ------------------------------------------------------------------ #
    async def _load_session(self, session_id: str) -> SessionMemory | None:
        memory = self._sessions.get(session_id)
        if memory is not None:
            return memory
        if self.storage is None:
            return None
        snapshot = await self.storage.load(session_id)
        if snapshot is None:
            return None
        logger.debug("restored session %s from storage", session_id)
        return SessionMemory.from_snapshot(snapshot, recent_limit=self.settings.recent_limit)

    async def find_session(self, session_id: str = DEFAULT_SESSION_ID) -> SessionMemory | None:
        """Return the session if it exists in cache or storage; never creates one."""
        return await self._load_session(require_id(session_id, "session_id"))

    @asynccontextmanager
    async def _updating(self, session_id: str) -> AsyncIterator[SessionMemory]:
        session_id = require_id(session_id, "session_id")
        async with self._session_lock:
            memory = await self._load_session(session_id)
            if memory is None:
                memory = SessionMemory(recent_limit=self.settings.recent_limit)
            self._sessions[session_id] = memory
            yield memory
            if self.storage is not None:
                await self.storage.save(session_id, memory)

    def _require_entry(self, entry_id: str) -> ReferenceEntry:
        entry = self.store.get(entry_id)
        if entry is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"entry not found: {entry_id}",
            )
        return entry

    # ------------------------------------------------------------------ #
    # Lookups
    # ------------------------------------------------------------------ #
    async def open_section(
        self,
        query: str,
        *,
        reason: str | None = None,
        session_id: str = DEFAULT_SESSION_ID,
    ) -> OpenSectionResponse:
        if not normalize_query(query):
            return OpenSectionResponse(query=query, found=False, message=views.render_empty_query())

        entry = self.engine.resolve(query)
        if entry is None:
            logger.info("open_section found no match for %r", query)
            return OpenSectionResponse(query=query, found=False, message=views.render_not_found(query))

        async with self._updating(session_id) as memory:
            target = open_entry(entry, memory)
        logger.info("open_section %r -> %s (page %d)", query, entry.id, entry.page)
        return OpenSectionResponse(
            query=query,
            found=True,
            entry=entry.ref(),
            navigation=target,
            message=views.render_opened(entry, self.store.document(entry.document_id), reason),
        )

    def search(
        self,
        query: str,
        category: str | None = None,
        limit: int | None = None,
    ) -> SearchResponse:
        if limit is not None and limit <= 0:
            raise ValueError("limit must be a positive integer")
        matches = self.engine.search(query, category)
        preview = matches[: limit if limit is not None else self.settings.search_preview_limit]
        return SearchResponse(
            query=query,
            category=category if normalize_category(category) else None,
            total=len(matches),
            results=[entry.ref() for entry in preview],
            truncated=len(matches) > len(preview),
            message=views.render_search(query, len(matches), preview),
        )

    def list_categories(self, category: str | None = None) -> CategoryListing:
        categories = self.engine.list_categories()
        if normalize_category(category) is None:
            return CategoryListing(categories=categories, message=views.render_categories(categories))

        sections = self.engine.list_category(category)
        if not sections:
            return CategoryListing(
                categories=categories,
                category=category,
                sections=[],
                message=views.render_unknown_category(
                    category or "", [item.category for item in categories]
                ),
            )
        return CategoryListing(
            categories=categories,
            category=sections[0].category,
            sections=[entry.ref() for entry in sections],
            message=views.render_category_sections(sections[0].category, sections),
        )

    def get_entry(self, entry_id: str) -> EntryRef:
        return self._require_entry(entry_id).ref()

    def navigate_to_app_section(self, section: str, reason: str | None = None) -> AppNavigationResponse:
        app_section = resolve_app_section(section)
        if app_section is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"app section not found: {section}",
            )
        return AppNavigationResponse(
            section=app_section,
            message=views.render_app_navigation(app_section, reason),
        )

    # ------------------------------------------------------------------ #
    # Session memory
    # ------------------------------------------------------------------ #
    async def toggle_bookmark(
        self,
        entry_id: str,
        *,
        session_id: str = DEFAULT_SESSION_ID,
        document_id: str | None = None,
        note: str | None = None,
    ) -> BookmarkState:
        entry = self._require_entry(entry_id)
        async with self._updating(session_id) as memory:
            state = memory.toggle_bookmark(
                document_id or entry.document_id,
                entry.id,
                entry.title,
                entry.page,
                note=note,
            )
        logger.debug("bookmark %s %s for session %s", entry.id, state.action, session_id)
        return state

    async def remove_bookmark(
        self,
        entry_id: str,
        *,
        session_id: str = DEFAULT_SESSION_ID,
        document_id: str | None = None,
    ) -> BookmarkRemoval:
        owner = self._owner_document(entry_id, document_id)
        if await self.find_session(session_id) is None:
            return BookmarkRemoval(document_id=owner, entry_id=entry_id, removed=False)
        async with self._updating(session_id) as memory:
            removed = memory.remove_bookmark(owner, entry_id)
        return BookmarkRemoval(document_id=owner, entry_id=entry_id, removed=removed)

    async def record_access(
        self,
        entry_id: str,
        *,
        session_id: str = DEFAULT_SESSION_ID,
        document_id: str | None = None,
    ) -> RecentAccess:
        entry = self._require_entry(entry_id)
        async with self._updating(session_id) as memory:
            return memory.record_access(document_id or entry.document_id, entry.id, entry.title)

    async def toggle_favorite(
        self,
        entry_id: str,
        *,
        session_id: str = DEFAULT_SESSION_ID,
    ) -> FavoriteState:
        entry = self._require_entry(entry_id)
        async with self._updating(session_id) as memory:
            return memory.toggle_favorite(entry.id)

    def _owner_document(self, entry_id: str, document_id: str | None) -> str:
        if document_id:
            return document_id
        entry = self.store.get(entry_id)
        return entry.document_id if entry else self.settings.default_document_id

    async def is_bookmarked(
        self,
        entry_id: str,
        *,
        session_id: str = DEFAULT_SESSION_ID,
        document_id: str | None = None,
    ) -> BookmarkStatus:
        owner = self._owner_document(entry_id, document_id)
        memory = await self.find_session(session_id)
        return BookmarkStatus(
            document_id=owner,
            entry_id=entry_id,
            bookmarked=memory is not None and memory.is_bookmarked(owner, entry_id),
        )

    async def is_favorite(self, entry_id: str, *, session_id: str = DEFAULT_SESSION_ID) -> FavoriteStatus:
        memory = await self.find_session(session_id)
        return FavoriteStatus(
            entry_id=entry_id,
            favorite=memory is not None and memory.is_favorite(entry_id),
        )

    async def session_state(self, session_id: str = DEFAULT_SESSION_ID) -> SessionSnapshot:
        memory = await self.find_session(session_id)
        if memory is None:
            return SessionSnapshot()
        return memory.snapshot()

    async def clear_session(self, session_id: str = DEFAULT_SESSION_ID) -> SessionSnapshot:
        """Forget the session in the cache and in storage."""
        session_id = require_id(session_id, "session_id")
        async with self._session_lock:
            memory = self._sessions.pop(session_id, None)
            if memory is not None:
                memory.clear()
            if self.storage is not None:
                await self.storage.delete(session_id)
        logger.info("cleared session %s", session_id)
        return SessionSnapshot()


__all__ = ["AssistantService"]
