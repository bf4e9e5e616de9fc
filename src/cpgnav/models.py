"""Core models for the guideline taxonomy, session memory, and tool responses."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

AppSectionKey = Literal[
    "pediatric",
    "scores",
    "waafels",
    "files",
    "care",
    "flowchart",
    "rsi",
    "cpr",
]
ToggleAction = Literal["added", "removed"]


class DocumentInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    version: str
    last_updated: str = ""
    source_url: str | None = None


class EntryRef(BaseModel):
    id: str
    title: str
    category: str
    page: int


class ReferenceEntry(BaseModel):
    """One addressable protocol section of a reference document."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1)
    title: str
    category: str
    page: int = Field(gt=0)
    keywords: tuple[str, ...] = Field(min_length=1)
    document_id: str = "CPG"

    @field_validator("id", mode="before")
    def _strip_id(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip()
        return value

    @field_validator("keywords", mode="before")
    def _normalize_keywords(cls, value: Any) -> Any:
        if isinstance(value, str):
            value = [value]
        if not isinstance(value, (list, tuple, set, frozenset)):
            return value
        normalized: list[str] = []
        for keyword in value:
            candidate = str(keyword).strip().lower()
            if not candidate:
                raise ValueError("keywords must not contain blank values")
            if candidate not in normalized:
                normalized.append(candidate)
        return tuple(normalized)

    def ref(self) -> EntryRef:
        return EntryRef(id=self.id, title=self.title, category=self.category, page=self.page)


class CategoryCount(BaseModel):
    category: str
    count: int


class NavigationTarget(BaseModel):
    document_id: str
    section_id: str
    section_title: str
    page: int


class AppSection(BaseModel):
    model_config = ConfigDict(frozen=True)

    key: AppSectionKey
    title: str
    route: str
    description: str


# ---- Session memory ------------------------------------------------------


class Bookmark(BaseModel):
    document_id: str
    entry_id: str
    title: str
    page: int
    note: str | None = None
    created_at: datetime


class RecentAccess(BaseModel):
    document_id: str
    entry_id: str
    title: str
    accessed_at: datetime


class BookmarkState(BaseModel):
    action: ToggleAction
    document_id: str
    entry_id: str

    @property
    def added(self) -> bool:
        return self.action == "added"

    @property
    def removed(self) -> bool:
        return self.action == "removed"


class FavoriteState(BaseModel):
    action: ToggleAction
    entry_id: str

    @property
    def added(self) -> bool:
        return self.action == "added"

    @property
    def removed(self) -> bool:
        return self.action == "removed"


class BookmarkStatus(BaseModel):
    document_id: str
    entry_id: str
    bookmarked: bool


class BookmarkRemoval(BaseModel):
    document_id: str
    entry_id: str
    removed: bool


class FavoriteStatus(BaseModel):
    entry_id: str
    favorite: bool


class SessionSnapshot(BaseModel):
    bookmarks: list[Bookmark] = Field(default_factory=list)
    recent: list[RecentAccess] = Field(default_factory=list)
    favorites: list[str] = Field(default_factory=list)


# ---- Tool / API responses --------------------------------------------------


class OpenSectionResponse(BaseModel):
    query: str
    found: bool
    entry: EntryRef | None = None
    navigation: NavigationTarget | None = None
    message: str


class SearchResponse(BaseModel):
    query: str
    category: str | None = None
    total: int
    results: list[EntryRef] = Field(default_factory=list)
    truncated: bool = False
    message: str


class CategoryListing(BaseModel):
    categories: list[CategoryCount] = Field(default_factory=list)
    category: str | None = None
    sections: list[EntryRef] | None = None
    message: str


class AppNavigationResponse(BaseModel):
    section: AppSection
    message: str


# ---- REST request bodies ---------------------------------------------------


class OpenSectionRequest(BaseModel):
    query: str
    reason: str | None = None
    session_id: str = "default"


class SearchRequest(BaseModel):
    query: str
    category: str | None = None
    limit: int | None = Field(default=None, ge=1)


class BookmarkRequest(BaseModel):
    entry_id: str
    session_id: str = "default"
    document_id: str | None = None
    note: str | None = None


class AccessRequest(BaseModel):
    entry_id: str
    session_id: str = "default"
    document_id: str | None = None


class FavoriteRequest(BaseModel):
    entry_id: str
    session_id: str = "default"


class AppNavigationRequest(BaseModel):
    section: AppSectionKey
    reason: str = ""

    @field_validator("section", mode="before")
    def _normalize_section(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().lower()
        return value


__all__ = [
    "AccessRequest",
    "AppNavigationRequest",
    "AppNavigationResponse",
    "AppSection",
    "AppSectionKey",
    "Bookmark",
    "BookmarkRemoval",
    "BookmarkRequest",
    "BookmarkState",
    "BookmarkStatus",
    "CategoryCount",
    "CategoryListing",
    "DocumentInfo",
    "EntryRef",
    "FavoriteRequest",
    "FavoriteState",
    "FavoriteStatus",
    "NavigationTarget",
    "OpenSectionRequest",
    "OpenSectionResponse",
    "RecentAccess",
    "ReferenceEntry",
    "SearchRequest",
    "SearchResponse",
    "SessionSnapshot",
    "ToggleAction",
]
