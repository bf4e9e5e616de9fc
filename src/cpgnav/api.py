"""REST facade over the assistant service for non-MCP clients."""

from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI

from cpgnav import get_version
from cpgnav.config import get_settings
from cpgnav.mcp.service import AssistantService
from cpgnav.models import (
    AccessRequest,
    AppNavigationRequest,
    BookmarkRequest,
    FavoriteRequest,
    OpenSectionRequest,
    SearchRequest,
)

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    service = AssistantService(settings)
    app.state.service = service
    try:
        yield
    finally:
        await service.close()


app = FastAPI(title="cpgnav", version=get_version(), lifespan=lifespan)


@app.get("/healthz")
async def health() -> dict[str, str]:
    return {"status": "ok"}


@app.post("/cpg/open")
async def open_section(request: OpenSectionRequest):
    return await app.state.service.open_section(
        request.query, reason=request.reason, session_id=request.session_id
    )


@app.post("/cpg/search")
async def search(request: SearchRequest):
    return app.state.service.search(request.query, request.category, request.limit)


@app.get("/cpg/categories")
async def list_categories(category: str | None = None):
    return app.state.service.list_categories(category)


@app.get("/cpg/entries/{entry_id}")
async def get_entry(entry_id: str):
    return app.state.service.get_entry(entry_id)


@app.post("/app/navigate")
async def navigate(request: AppNavigationRequest):
    return app.state.service.navigate_to_app_section(request.section, request.reason)


@app.post("/session/bookmarks/toggle")
async def toggle_bookmark(request: BookmarkRequest):
    return await app.state.service.toggle_bookmark(
        request.entry_id,
        session_id=request.session_id,
        document_id=request.document_id,
        note=request.note,
    )


@app.post("/session/recent")
async def record_access(request: AccessRequest):
    return await app.state.service.record_access(
        request.entry_id, session_id=request.session_id, document_id=request.document_id
    )


@app.post("/session/favorites/toggle")
async def toggle_favorite(request: FavoriteRequest):
    return await app.state.service.toggle_favorite(request.entry_id, session_id=request.session_id)


@app.get("/session/{session_id}")
async def session_state(session_id: str):
    return await app.state.service.session_state(session_id)


@app.get("/session/{session_id}/bookmarks/{entry_id}")
async def is_bookmarked(session_id: str, entry_id: str, document_id: str | None = None):
    return await app.state.service.is_bookmarked(
        entry_id, session_id=session_id, document_id=document_id
    )


@app.delete("/session/{session_id}/bookmarks/{entry_id}")
async def remove_bookmark(session_id: str, entry_id: str, document_id: str | None = None):
    return await app.state.service.remove_bookmark(
        entry_id, session_id=session_id, document_id=document_id
    )


@app.get("/session/{session_id}/favorites/{entry_id}")
async def is_favorite(session_id: str, entry_id: str):
    return await app.state.service.is_favorite(entry_id, session_id=session_id)


@app.delete("/session/{session_id}")
async def clear_session(session_id: str):
    return await app.state.service.clear_session(session_id)
