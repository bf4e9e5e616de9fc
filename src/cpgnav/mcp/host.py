from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Literal

from fastmcp import FastMCP
from starlette.middleware import Middleware as StarletteMiddleware
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse

from cpgnav import get_version
from cpgnav.config import get_settings
from cpgnav.mcp.defaults import DEFAULT_SESSION_ID
from cpgnav.mcp.handbook import HANDBOOK
from cpgnav.mcp.service import AssistantService
from cpgnav.models import (
    AppNavigationResponse,
    AppSectionKey,
    BookmarkRemoval,
    BookmarkState,
    BookmarkStatus,
    CategoryListing,
    EntryRef,
    FavoriteState,
    FavoriteStatus,
    OpenSectionResponse,
    RecentAccess,
    SearchResponse,
    SessionSnapshot,
)

settings = get_settings()
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(levelname)s:%(name)s:%(message)s",
)
_service: AssistantService | None = None
LifespanState = dict[str, Any]
_ALL_CATEGORY_ALIASES = {"all", "any", "*", "everything"}


@asynccontextmanager
async def _lifespan(_: FastMCP[LifespanState]) -> AsyncIterator[LifespanState]:
    global _service
    service = AssistantService(settings)
    _service = service
    try:
        yield {"service": "cpgnav"}
    finally:
        await service.close()
        _service = None


class BearerAuthMiddleware(BaseHTTPMiddleware):
    """Simple bearer token authentication for FastMCP's HTTP transport."""

    def __init__(self, app, *, token: str | None):
        super().__init__(app)
        self._token = token

    async def dispatch(self, request: Request, call_next):
        if not self._token or request.scope.get("type") != "http":
            return await call_next(request)

        auth_header = request.headers.get("authorization") or ""
        scheme, _, candidate = auth_header.partition(" ")

        if scheme.lower() != "bearer" or not candidate:
            return JSONResponse(
                {"detail": "Missing or invalid Authorization header"},
                status_code=401,
                headers={"WWW-Authenticate": "Bearer"},
            )

        if candidate != self._token:
            return JSONResponse(
                {"detail": "Invalid bearer token"},
                status_code=403,
            )

        return await call_next(request)


class CPGNavFastMCP(FastMCP):
    """FastMCP subclass that injects Starlette middleware for HTTP transports."""

    def __init__(self, *args, auth_token: str | None = None, **kwargs):
        super().__init__(*args, **kwargs)
        self._auth_token = auth_token

    def http_app(
        self,
        path: str | None = None,
        middleware: list[StarletteMiddleware] | None = None,
        json_response: bool | None = None,
        stateless_http: bool | None = None,
        transport: Literal["http", "streamable-http", "sse"] = "http",
    ):
        http_middleware = list(middleware or [])
        if self._auth_token:
            http_middleware.insert(
                0,
                StarletteMiddleware(BearerAuthMiddleware, token=self._auth_token),
            )

        return super().http_app(
            path=path,
            middleware=http_middleware,
            json_response=json_response,
            stateless_http=stateless_http,
            transport=transport,
        )


mcp = CPGNavFastMCP(
    name="cpgnav-mcp",
    instructions=HANDBOOK,
    version=get_version(),
    lifespan=_lifespan,
    auth_token=settings.mcp_api_token,
)


def _require_service() -> AssistantService:
    if _service is None:
        raise RuntimeError("MCP service is not initialized")
    return _service


#
# Normalization helpers
#

def _normalize_optional_str(value: Any) -> Any:
    """Normalize empty strings or empty containers for optional str-like arguments to None."""
    if value is None:
        return None
    if value == "" or value == {} or value == []:
        return None
    if isinstance(value, str) and not value.strip():
        return None
    return value


def _normalize_category(value: Any) -> str | None:
    """Treat blank or catch-all category arguments as "no category filter"."""
    candidate = _normalize_optional_str(value)
    if candidate is None:
        return None
    if not isinstance(candidate, str):
        raise ValueError(f"category must be a string, got {type(candidate).__name__}")
    if candidate.strip().lower() in _ALL_CATEGORY_ALIASES:
        return None
    return candidate.strip()


def _normalize_session_id(value: Any) -> str:
    candidate = _normalize_optional_str(value)
    if candidate is None:
        return DEFAULT_SESSION_ID
    return str(candidate).strip()


def _normalize_section_query(value: Any) -> str:
    """Strip a leading "CPG" prefix the agent often copies from the user's wording."""
    text = str(value or "").strip()
    lowered = text.lower()
    for prefix in ("cpg section ", "cpg "):
        if lowered.startswith(prefix):
            return text[len(prefix):].strip()
    return text


# ============================
# Tools
# ============================


@mcp.tool
async def open_cpg_section(
    cpg_number: str,
    reason: str | None = None,
    session_id: str | None = None,
) -> OpenSectionResponse:
    """
    summary: Open one section of the HMCAS Clinical Practice Guidelines v2.4 (2025).
    when_to_use:
      - The user asks for a specific protocol by number ("CPG 1.6", "2.1") or by topic ("cardiac arrest", "stroke").
    arguments:
      cpg_number:
        type: string
        required: true
        description: Section number like "1.6" or a topic like "asthma".
      reason:
        type: string
        required: false
        description: Short explanation of why this section answers the user's request.
      session_id:
        type: string
        required: false
        description: Session whose recently viewed list records the opened section.
    returns:
      found:
        description: False when no section matched; relay the message instead of retrying.
      navigation:
        description: Document, section id, title and page the app should open.
    """
    return await _require_service().open_section(
        _normalize_section_query(cpg_number),
        reason=_normalize_optional_str(reason),
        session_id=_normalize_session_id(session_id),
    )


@mcp.tool
async def search_cpg(query: str, category: str | None = None) -> SearchResponse:
    """
    summary: Search CPG sections by symptom, condition, medication or procedure.
    when_to_use:
      - The user describes a presentation or asks "what protocol for ...".
    arguments:
      query:
        type: string
        required: true
        description: Search text; matched against section titles and keywords.
      category:
        type: string
        required: false
        description: Optional chapter filter (Assessment, Cardiac Arrest, Neurological, Cardiac, Respiratory, Medical, Mental Health, Toxicology, Environmental, Trauma, Airway, Obstetrics, Other, Vulnerable Patients, Transfer, Scheduled Service, COVID-19).
    returns:
      total:
        description: Number of matching sections.
      results:
        description: Up to five matches in document order.
    """
    return _require_service().search(query, _normalize_category(category))


@mcp.tool
async def list_cpg_categories(category: str | None = None) -> CategoryListing:
    """
    summary: List CPG chapters with section counts, or the sections of one chapter.
    when_to_use:
      - The user wants to browse what the guidelines cover.
    arguments:
      category:
        type: string
        required: false
        description: Chapter name; omit to list every chapter.
    """
    return _require_service().list_categories(_normalize_category(category))


@mcp.tool
async def navigate_to_app_section(section: AppSectionKey, reason: str | None = None) -> AppNavigationResponse:
    """
    summary: Open an app feature such as a calculator, timer or score tool (not CPG content).
    arguments:
      section:
        type: '"pediatric" | "scores" | "waafels" | "files" | "care" | "flowchart" | "rsi" | "cpr"'
        required: true
      reason:
        type: string
        required: false
    """
    return _require_service().navigate_to_app_section(section, _normalize_optional_str(reason))


@mcp.tool
async def get_cpg_entry(entry_id: str) -> EntryRef:
    """
    summary: Look up one CPG section by its id (e.g. "cpg-2.1").
    constraints:
      - The id must exist in the taxonomy; otherwise an error is returned.
    """
    return _require_service().get_entry(entry_id.strip())


@mcp.tool
async def toggle_bookmark(
    entry_id: str,
    session_id: str | None = None,
    note: str | None = None,
) -> BookmarkState:
    """
    summary: Bookmark a CPG section, or remove the bookmark if it already exists.
    returns:
      action:
        description: "added" or "removed".
    """
    return await _require_service().toggle_bookmark(
        entry_id.strip(),
        session_id=_normalize_session_id(session_id),
        note=_normalize_optional_str(note),
    )


@mcp.tool
async def remove_bookmark(entry_id: str, session_id: str | None = None) -> BookmarkRemoval:
    """
    summary: Delete a bookmark without toggling; does nothing if the section is not bookmarked.
    returns:
      removed:
        description: True when a bookmark was deleted.
    """
    return await _require_service().remove_bookmark(
        entry_id.strip(),
        session_id=_normalize_session_id(session_id),
    )


@mcp.tool
async def is_bookmarked(entry_id: str, session_id: str | None = None) -> BookmarkStatus:
    """
    summary: Check whether a CPG section is bookmarked in this session.
    """
    return await _require_service().is_bookmarked(
        entry_id.strip(),
        session_id=_normalize_session_id(session_id),
    )


@mcp.tool
async def is_favorite(entry_id: str, session_id: str | None = None) -> FavoriteStatus:
    """
    summary: Check whether a CPG section is marked as favorite in this session.
    """
    return await _require_service().is_favorite(
        entry_id.strip(),
        session_id=_normalize_session_id(session_id),
    )


@mcp.tool
async def toggle_favorite(entry_id: str, session_id: str | None = None) -> FavoriteState:
    """
    summary: Mark a CPG section as favorite, or unmark it.
    """
    return await _require_service().toggle_favorite(
        entry_id.strip(),
        session_id=_normalize_session_id(session_id),
    )


@mcp.tool
async def record_access(entry_id: str, session_id: str | None = None) -> RecentAccess:
    """
    summary: Add a CPG section to the session's recently viewed list.
    when_to_use:
      - The app opened a section without going through open_cpg_section.
    """
    return await _require_service().record_access(
        entry_id.strip(),
        session_id=_normalize_session_id(session_id),
    )


@mcp.tool
async def get_session_state(session_id: str | None = None) -> SessionSnapshot:
    """
    summary: Return the session's bookmarks (newest first), recently viewed sections (newest first, at most 10) and favorites.
    """
    return await _require_service().session_state(_normalize_session_id(session_id))


@mcp.tool
async def clear_session(session_id: str | None = None) -> SessionSnapshot:
    """
    summary: Forget every bookmark, recent section and favorite of the session.
    when_to_use:
      - The user explicitly asks to reset their saved sections.
    """
    return await _require_service().clear_session(_normalize_session_id(session_id))


@mcp.custom_route("/healthz", methods=["GET"], include_in_schema=False)
async def health(_: Request) -> JSONResponse:
    """Lightweight health check for load balancers hitting GET /healthz."""
    return JSONResponse({"status": "ok"})


__all__ = ["mcp"]


if __name__ == "__main__":
    mcp.run(
        transport="streamable-http",
        path="/mcp",
        host=settings.mcp_host,
        port=settings.mcp_port,
    )
