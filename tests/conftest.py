from __future__ import annotations

import pytest

from cpgnav.matching import MatchEngine
from cpgnav.taxonomy import TaxonomyStore, load_default_taxonomy

SMALL_DATASET = [
    {
        "id": "cpg-1.6",
        "title": "Perfusion Status Assessment",
        "category": "Assessment",
        "page": 30,
        "keywords": ["1.6", "perfusion", "shock", "pulse"],
    },
    {
        "id": "cpg-2.1",
        "title": "Adult Medical Cardiac Arrest",
        "category": "Cardiac Arrest",
        "page": 34,
        "keywords": ["2.1", "adult cardiac arrest", "cpr", "adrenaline"],
    },
    {
        "id": "cpg-2.9",
        "title": "Cardiac Arrest - Special Circumstances",
        "category": "Cardiac Arrest",
        "page": 55,
        "keywords": ["2.9", "cardiac arrest", "hypothermia"],
    },
    {
        "id": "cpg-6.2",
        "title": "Anaphylaxis and Allergic Reactions",
        "category": "Medical",
        "page": 104,
        "keywords": ["6.2", "anaphylaxis", "adrenaline", "epipen"],
    },
    {
        "id": "cpg-8.6",
        "title": "Opioids",
        "category": "Toxicology",
        "page": 137,
        "keywords": ["8.6", "opioid", "overdose", "naloxone"],
    },
]


@pytest.fixture
def small_store() -> TaxonomyStore:
    return TaxonomyStore.from_records(SMALL_DATASET)


@pytest.fixture
def small_engine(small_store: TaxonomyStore) -> MatchEngine:
    return MatchEngine(small_store)


@pytest.fixture
def cpg_store() -> TaxonomyStore:
    return load_default_taxonomy()


@pytest.fixture
def cpg_engine(cpg_store: TaxonomyStore) -> MatchEngine:
    return MatchEngine(cpg_store)
