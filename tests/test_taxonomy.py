from __future__ import annotations

import pytest

from cpgnav.models import ReferenceEntry
from cpgnav.taxonomy import EntryNotFoundError, TaxonomyStore


def test_get_returns_entry_or_none(small_store: TaxonomyStore) -> None:
    entry = small_store.get("cpg-2.1")
    assert entry is not None
    assert entry.title == "Adult Medical Cardiac Arrest"
    assert entry.page == 34
    assert small_store.get("cpg-99.9") is None


def test_require_raises_for_unknown_id(small_store: TaxonomyStore) -> None:
    with pytest.raises(EntryNotFoundError) as excinfo:
        small_store.require("cpg-99.9")
    assert excinfo.value.entry_id == "cpg-99.9"
    assert isinstance(excinfo.value, KeyError)


def test_all_preserves_dataset_order_and_is_restartable(small_store: TaxonomyStore) -> None:
    first = [entry.id for entry in small_store.all()]
    second = [entry.id for entry in small_store]
    assert first == ["cpg-1.6", "cpg-2.1", "cpg-2.9", "cpg-6.2", "cpg-8.6"]
    assert first == second
    assert len(small_store) == 5
    assert "cpg-6.2" in small_store


def test_by_category_is_case_insensitive(small_store: TaxonomyStore) -> None:
    ids = [entry.id for entry in small_store.by_category("cardiac ARREST")]
    assert ids == ["cpg-2.1", "cpg-2.9"]
    assert small_store.by_category("NoSuchCategory") == []
    assert small_store.by_category("") == []


def test_categories_in_first_seen_order(small_store: TaxonomyStore) -> None:
    assert small_store.categories() == ["Assessment", "Cardiac Arrest", "Medical", "Toxicology"]


def test_duplicate_ids_are_rejected() -> None:
    entry = ReferenceEntry(id="cpg-1.1", title="A", category="X", page=1, keywords=["a"])
    with pytest.raises(ValueError):
        TaxonomyStore([entry, entry])


def test_default_taxonomy_covers_cpg_v2_4(cpg_store: TaxonomyStore) -> None:
    assert len(cpg_store) == 101
    assert cpg_store.categories()[0] == "Assessment"
    assert cpg_store.categories()[-1] == "COVID-19"
    assert len(cpg_store.categories()) == 17
    cpg = cpg_store.document("CPG")
    assert cpg is not None and cpg.version == "2.4v"
    assert {doc.id for doc in cpg_store.documents()} == {"CPG", "PAT", "SOP", "CPM"}
    assert all(entry.document_id == "CPG" for entry in cpg_store)


def test_default_taxonomy_keywords_are_normalized(cpg_store: TaxonomyStore) -> None:
    for entry in cpg_store:
        assert entry.keywords
        assert all(keyword == keyword.strip().lower() and keyword for keyword in entry.keywords)
        assert entry.page > 0
