"""Turn resolved entries and app-feature keys into navigation instructions."""

from __future__ import annotations

from functools import lru_cache

from .models import AppSection, NavigationTarget, ReferenceEntry
from .session import SessionMemory


def build_navigation_target(
    entry: ReferenceEntry | None,
    document_id: str | None = None,
) -> NavigationTarget:
    if entry is None:
        raise ValueError("cannot navigate to a missing entry")
    return NavigationTarget(
        document_id=document_id or entry.document_id,
        section_id=entry.id,
        section_title=entry.title,
        page=entry.page,
    )


def open_entry(
    entry: ReferenceEntry | None,
    session: SessionMemory,
    document_id: str | None = None,
) -> NavigationTarget:
    """Build the navigation target and record it as the session's latest access."""
    target = build_navigation_target(entry, document_id)
    session.record_access(target.document_id, target.section_id, target.section_title)
    return target


@lru_cache()
def app_sections() -> dict[str, AppSection]:
    from .data import APP_SECTIONS

    return {
        key: AppSection(key=key, **payload)  # type: ignore[arg-type]
        for key, payload in APP_SECTIONS.items()
    }


def resolve_app_section(key: str | None) -> AppSection | None:
    return app_sections().get((key or "").strip().lower())


__all__ = [
    "app_sections",
    "build_navigation_target",
    "open_entry",
    "resolve_app_section",
]
