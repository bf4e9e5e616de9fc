"""Read-only, in-memory index of reference documents and their sections."""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any, Iterable, Iterator

from .models import DocumentInfo, ReferenceEntry

logger = logging.getLogger(__name__)


class EntryNotFoundError(KeyError):
    """Raised by TaxonomyStore.require for ids that are not in the dataset."""

    def __init__(self, entry_id: str) -> None:
        super().__init__(entry_id)
        self.entry_id = entry_id

    def __str__(self) -> str:
        return f"unknown entry id: {self.entry_id!r}"


class TaxonomyStore:
    """Immutable snapshot of the reference taxonomy.

    Entries keep dataset order; every lookup helper preserves it so callers get
    a stable, restartable sequence.
    """

    def __init__(
        self,
        entries: Iterable[ReferenceEntry],
        documents: Iterable[DocumentInfo] = (),
    ) -> None:
        self._entries: tuple[ReferenceEntry, ...] = tuple(entries)
        self._by_id: dict[str, ReferenceEntry] = {}
        for entry in self._entries:
            if entry.id in self._by_id:
                raise ValueError(f"duplicate entry id in taxonomy: {entry.id!r}")
            self._by_id[entry.id] = entry
        self._documents: dict[str, DocumentInfo] = {doc.id: doc for doc in documents}

    @classmethod
    def from_records(
        cls,
        records: Iterable[dict[str, Any]],
        documents: Iterable[dict[str, Any]] = (),
    ) -> "TaxonomyStore":
        return cls(
            (ReferenceEntry.model_validate(record) for record in records),
            (DocumentInfo.model_validate(doc) for doc in documents),
        )

    # ---- Entries -----------------------------------------------------------
    def get(self, entry_id: str) -> ReferenceEntry | None:
        return self._by_id.get(entry_id)

    def require(self, entry_id: str) -> ReferenceEntry:
        entry = self._by_id.get(entry_id)
        if entry is None:
            raise EntryNotFoundError(entry_id)
        return entry

    def all(self) -> tuple[ReferenceEntry, ...]:
        return self._entries

    def by_category(self, category: str) -> list[ReferenceEntry]:
        wanted = (category or "").strip().lower()
        if not wanted:
            return []
        return [entry for entry in self._entries if entry.category.lower() == wanted]

    def categories(self) -> list[str]:
        seen: dict[str, None] = {}
        for entry in self._entries:
            seen.setdefault(entry.category, None)
        return list(seen)

    # ---- Documents ---------------------------------------------------------
    def document(self, document_id: str) -> DocumentInfo | None:
        return self._documents.get(document_id)

    def documents(self) -> tuple[DocumentInfo, ...]:
        return tuple(self._documents.values())

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[ReferenceEntry]:
        return iter(self._entries)

    def __contains__(self, entry_id: object) -> bool:
        return entry_id in self._by_id


@lru_cache()
def load_default_taxonomy() -> TaxonomyStore:
    """Build the bundled CPG v2.4 taxonomy once per process."""

    from .data import CPG_SECTIONS, DOCUMENTS

    store = TaxonomyStore.from_records(CPG_SECTIONS, DOCUMENTS)
    logger.info(
        "TaxonomyStore loaded %d entries in %d categories from %d documents",
        len(store),
        len(store.categories()),
        len(store.documents()),
    )
    return store


__all__ = ["EntryNotFoundError", "TaxonomyStore", "load_default_taxonomy"]
