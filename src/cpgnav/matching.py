"""Query normalization and keyword containment matching over the taxonomy.

Two lookup modes share one match rule:

- ``resolve`` returns the first entry (in dataset order) with a keyword that
  contains the query or is contained by it. It backs "open this protocol".
- ``search`` returns every entry whose title contains the query or whose
  keywords match, optionally scoped to one category. It backs exploratory
  lookups; callers cap the preview themselves.

An empty normalized query would be contained by every keyword, so both modes
short-circuit it to "no match".
"""

from __future__ import annotations

import logging
from collections import Counter

from .models import CategoryCount, ReferenceEntry
from .taxonomy import TaxonomyStore

logger = logging.getLogger(__name__)


def normalize_query(query: str | None) -> str:
    return (query or "").strip().lower()


def normalize_category(category: str | None) -> str | None:
    candidate = (category or "").strip().lower()
    return candidate or None


def keyword_matches(keyword: str, normalized_query: str) -> bool:
    """Bidirectional containment between one keyword and a normalized query."""
    if not normalized_query:
        return False
    return normalized_query in keyword or keyword in normalized_query


def entry_matches_keywords(entry: ReferenceEntry, normalized_query: str) -> bool:
    return any(keyword_matches(keyword, normalized_query) for keyword in entry.keywords)


def entry_matches(entry: ReferenceEntry, normalized_query: str) -> bool:
    if not normalized_query:
        return False
    if normalized_query in entry.title.lower():
        return True
    return entry_matches_keywords(entry, normalized_query)


def category_matches(entry: ReferenceEntry, normalized_category: str | None) -> bool:
    if normalized_category is None:
        return True
    return entry.category.lower() == normalized_category


class MatchEngine:
    """Deterministic lookups against an injected TaxonomyStore."""

    def __init__(self, store: TaxonomyStore) -> None:
        self.store = store

    def resolve(self, query: str | None) -> ReferenceEntry | None:
        normalized = normalize_query(query)
        if not normalized:
            logger.debug("resolve skipped for empty query")
            return None
        for entry in self.store.all():
            if entry_matches_keywords(entry, normalized):
                logger.debug("resolve %r -> %s", normalized, entry.id)
                return entry
        logger.debug("resolve %r -> no match", normalized)
        return None

    def search(self, query: str | None, category: str | None = None) -> list[ReferenceEntry]:
        normalized = normalize_query(query)
        if not normalized:
            return []
        wanted_category = normalize_category(category)
        matches = [
            entry
            for entry in self.store.all()
            if category_matches(entry, wanted_category) and entry_matches(entry, normalized)
        ]
        logger.debug(
            "search %r (category=%s) matched %d entries",
            normalized,
            wanted_category,
            len(matches),
        )
        return matches

    def list_categories(self) -> list[CategoryCount]:
        counts = Counter(entry.category for entry in self.store.all())
        return [
            CategoryCount(category=category, count=counts[category])
            for category in self.store.categories()
        ]

    def list_category(self, category: str | None) -> list[ReferenceEntry]:
        return self.store.by_category(category or "")


__all__ = [
    "MatchEngine",
    "category_matches",
    "entry_matches",
    "entry_matches_keywords",
    "keyword_matches",
    "normalize_category",
    "normalize_query",
]
