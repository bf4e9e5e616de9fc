from __future__ import annotations

import pytest

from cpgnav.matching import (
    MatchEngine,
    entry_matches,
    keyword_matches,
    normalize_query,
)


def test_normalize_query_lowercases_and_trims() -> None:
    assert normalize_query("  Cardiac ARREST \n") == "cardiac arrest"
    assert normalize_query(None) == ""
    assert normalize_query("1.6") == "1.6"


def test_keyword_matches_is_bidirectional() -> None:
    assert keyword_matches("cardiac arrest", "cardiac arrest")
    assert keyword_matches("adult cardiac arrest", "cardiac")
    assert keyword_matches("cardiac arrest", "cardiac arrest protocol")
    assert not keyword_matches("stroke", "asthma")
    assert not keyword_matches("stroke", "")


def test_resolve_by_section_number(small_engine: MatchEngine) -> None:
    entry = small_engine.resolve("2.1")
    assert entry is not None and entry.id == "cpg-2.1"


def test_resolve_keyword_contains_query(small_engine: MatchEngine) -> None:
    entry = small_engine.resolve("cardiac arrest")
    # "adult cardiac arrest" on cpg-2.1 comes before the exact keyword on cpg-2.9
    assert entry is not None and entry.id == "cpg-2.1"


def test_resolve_query_contains_keyword(small_engine: MatchEngine) -> None:
    entry = small_engine.resolve("I think this is cardiac arrest now")
    assert entry is not None and entry.id == "cpg-2.9"


def test_resolve_is_deterministic(small_engine: MatchEngine) -> None:
    first = small_engine.resolve("adrenaline")
    second = small_engine.resolve("adrenaline")
    assert first is not None and second is not None
    assert first.id == second.id == "cpg-2.1"


def test_resolve_no_match_returns_none(small_engine: MatchEngine) -> None:
    assert small_engine.resolve("tracheostomy") is None


@pytest.mark.parametrize("query", ["", "   ", "\t\n", None])
def test_empty_queries_never_match(small_engine: MatchEngine, query) -> None:
    assert small_engine.resolve(query) is None
    assert small_engine.search(query) == []
    assert small_engine.search(query, category="Cardiac Arrest") == []


def test_search_matches_title_or_keywords_in_store_order(small_engine: MatchEngine) -> None:
    ids = [entry.id for entry in small_engine.search("cardiac")]
    assert ids == ["cpg-2.1", "cpg-2.9"]
    ids = [entry.id for entry in small_engine.search("Adrenaline")]
    assert ids == ["cpg-2.1", "cpg-6.2"]


def test_search_title_only_match(small_engine: MatchEngine) -> None:
    ids = [entry.id for entry in small_engine.search("allergic")]
    assert ids == ["cpg-6.2"]


def test_search_category_scoping(small_engine: MatchEngine) -> None:
    scoped = small_engine.search("adrenaline", category="medical")
    assert [entry.id for entry in scoped] == ["cpg-6.2"]
    assert all(entry.category.lower() == "medical" for entry in scoped)
    assert small_engine.search("adrenaline", category="NoSuchCategory") == []


@pytest.mark.parametrize("query", ["2.1", "cardiac arrest", "overdose", "pulse", "epipen", "cpr now"])
def test_search_contains_resolve_result(small_engine: MatchEngine, query: str) -> None:
    resolved = small_engine.resolve(query)
    assert resolved is not None
    assert resolved in small_engine.search(query)


def test_list_categories_counts_first_seen(small_engine: MatchEngine) -> None:
    counts = [(item.category, item.count) for item in small_engine.list_categories()]
    assert counts == [
        ("Assessment", 1),
        ("Cardiac Arrest", 2),
        ("Medical", 1),
        ("Toxicology", 1),
    ]


def test_list_category_returns_sections(small_engine: MatchEngine) -> None:
    assert [entry.id for entry in small_engine.list_category("toxicology")] == ["cpg-8.6"]
    assert small_engine.list_category(None) == []


# ---- Bundled CPG v2.4 dataset ------------------------------------------------


def test_cpg_resolve_section_numbers(cpg_engine: MatchEngine) -> None:
    assert cpg_engine.resolve("1.6").id == "cpg-1.6"
    assert cpg_engine.resolve("2.1").id == "cpg-2.1"
    assert cpg_engine.resolve("stroke").id == "cpg-3.1"
    assert cpg_engine.resolve("asthma").id == "cpg-5.1"


def test_cpg_documented_number_overlap(cpg_engine: MatchEngine) -> None:
    # "12.1" contains the keyword "2.1"; first match in document order wins
    assert cpg_engine.resolve("12.1").id == "cpg-2.1"
    assert cpg_engine.resolve("11.1").id == "cpg-1.1"


def test_cpg_resolve_every_keyword_hits_a_legitimate_entry(cpg_engine: MatchEngine) -> None:
    for entry in cpg_engine.store.all():
        for keyword in entry.keywords:
            resolved = cpg_engine.resolve(keyword)
            assert resolved is not None
            if resolved.id != entry.id:
                assert any(keyword_matches(other, keyword) for other in resolved.keywords)


def test_cpg_end_to_end_cardiac_arrest(cpg_engine: MatchEngine) -> None:
    entry = cpg_engine.resolve("2.1")
    assert entry is not None
    assert (entry.id, entry.title, entry.category, entry.page) == (
        "cpg-2.1",
        "Adult Medical Cardiac Arrest",
        "Cardiac Arrest",
        34,
    )
    assert entry in cpg_engine.search("cardiac")
    counts = {item.category: item.count for item in cpg_engine.list_categories()}
    assert counts["Cardiac Arrest"] >= 1


def test_cpg_search_cpr_and_scoped_overdose(cpg_engine: MatchEngine) -> None:
    assert [entry.id for entry in cpg_engine.search("CPR")] == [
        "cpg-2.1",
        "cpg-2.3",
        "cpg-2.8",
        "cpg-2.9",
    ]
    overdose = cpg_engine.search("overdose", category="Toxicology")
    assert [entry.id for entry in overdose] == ["cpg-8.1", "cpg-8.2", "cpg-8.3", "cpg-8.6"]


def test_cpg_list_categories_totals(cpg_engine: MatchEngine) -> None:
    categories = cpg_engine.list_categories()
    assert sum(item.count for item in categories) == len(cpg_engine.store)
    assert [item.category for item in categories][:4] == [
        "Assessment",
        "Cardiac Arrest",
        "Neurological",
        "Cardiac",
    ]


def test_entry_matches_title(cpg_engine: MatchEngine) -> None:
    entry = cpg_engine.store.require("cpg-13.6")
    assert entry_matches(entry, "imist-ambo")
    assert not entry_matches(entry, "")
