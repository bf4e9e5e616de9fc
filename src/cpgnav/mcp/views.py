"""User-facing message text for tool results."""

from __future__ import annotations

from typing import Sequence

from cpgnav.models import (
    AppSection,
    CategoryCount,
    DocumentInfo,
    ReferenceEntry,
)
from cpgnav.utils import truncate_field

from .defaults import EXAMPLE_SECTION_NUMBERS, EXAMPLE_TOPICS, REASON_MAX_CHARS


def _quoted(values: Sequence[str]) -> str:
    return ", ".join(f'"{value}"' for value in values)


def _document_label(document: DocumentInfo | None) -> str:
    if document is None:
        return "CPG"
    return f"{document.id} {document.version}"


def render_opened(
    entry: ReferenceEntry,
    document: DocumentInfo | None,
    reason: str | None = None,
) -> str:
    lines = [f"Opening: **{entry.title}** ({_document_label(document)} page {entry.page})"]
    if reason:
        lines.append(truncate_field(reason.strip(), REASON_MAX_CHARS))
    if document is not None:
        lines.append(f"Source: {document.title} {document.version} ({document.last_updated})")
        if document.source_url:
            lines.append(f"Full PDF: {document.source_url}")
    return "\n\n".join(lines)


def render_not_found(query: str) -> str:
    return (
        f'Could not find CPG section "{query}". Please try searching by topic name '
        f"(e.g., {_quoted(EXAMPLE_TOPICS)}) or CPG number (e.g., {_quoted(EXAMPLE_SECTION_NUMBERS)})."
    )


def render_empty_query() -> str:
    return (
        "Tell me which protocol you need, either by topic "
        f"(e.g., {_quoted(EXAMPLE_TOPICS)}) or by CPG number (e.g., {_quoted(EXAMPLE_SECTION_NUMBERS)})."
    )


def render_search(query: str, total: int, preview: Sequence[ReferenceEntry]) -> str:
    if not query.strip():
        return render_empty_query()
    if total == 0:
        return (
            f'No CPG sections found for "{query}". '
            "Try different keywords or ask me to list available sections."
        )
    bullets = "\n".join(
        f"- {entry.title} ({entry.category}) - Page {entry.page}" for entry in preview
    )
    return (
        f'Found {total} protocol(s) matching "{query}":\n\n{bullets}\n\n'
        'Would you like me to open any of these? Just ask "open [protocol name]" '
        'or "open CPG [number]".'
    )


def render_categories(categories: Sequence[CategoryCount]) -> str:
    bullets = "\n".join(f"- {item.category} ({item.count} protocols)" for item in categories)
    return (
        f"CPG Categories:\n\n{bullets}\n\n"
        "Ask me to list a specific category or search for a protocol!"
    )


def render_category_sections(category: str, sections: Sequence[ReferenceEntry]) -> str:
    bullets = "\n".join(f"- {entry.title} - Page {entry.page}" for entry in sections)
    return f"{category} Protocols:\n\n{bullets}"


def render_unknown_category(category: str, available: Sequence[str]) -> str:
    return f'Category "{category}" not found. Available categories: {", ".join(available)}'


def render_app_navigation(section: AppSection, reason: str | None = None) -> str:
    if reason:
        return f"Navigating to {section.title}: {truncate_field(reason.strip(), REASON_MAX_CHARS)}"
    return f"Navigating to {section.title}"


__all__ = [
    "render_app_navigation",
    "render_categories",
    "render_category_sections",
    "render_empty_query",
    "render_not_found",
    "render_opened",
    "render_search",
    "render_unknown_category",
]
