"""Regression guards for the taxonomy and session Pydantic models."""

from __future__ import annotations

from typing import get_args

import pytest
from pydantic import ValidationError

from cpgnav.models import AppSectionKey, BookmarkState, FavoriteState, ReferenceEntry


def test_reference_entry_normalizes_keywords() -> None:
    entry = ReferenceEntry(
        id=" cpg-4.1 ",
        title="Acute Coronary Syndrome",
        category="Cardiac",
        page=65,
        keywords=["4.1", " STEMI ", "stemi", "Chest Pain"],
    )
    assert entry.id == "cpg-4.1"
    assert entry.keywords == ("4.1", "stemi", "chest pain")
    assert entry.document_id == "CPG"


@pytest.mark.parametrize(
    "overrides",
    [
        {"keywords": []},
        {"keywords": ["ok", "   "]},
        {"page": 0},
        {"id": ""},
    ],
)
def test_reference_entry_rejects_invalid_rows(overrides: dict) -> None:
    payload = {"id": "cpg-1.1", "title": "T", "category": "C", "page": 1, "keywords": ["1.1"]}
    payload.update(overrides)
    with pytest.raises(ValidationError):
        ReferenceEntry(**payload)


def test_reference_entry_is_frozen() -> None:
    entry = ReferenceEntry(id="cpg-1.1", title="T", category="C", page=1, keywords=["1.1"])
    with pytest.raises(ValidationError):
        entry.title = "changed"  # type: ignore[misc]


def test_entry_ref_projection() -> None:
    entry = ReferenceEntry(id="cpg-1.1", title="T", category="C", page=17, keywords=["1.1"])
    assert entry.ref().model_dump() == {"id": "cpg-1.1", "title": "T", "category": "C", "page": 17}


def test_toggle_states_expose_flags() -> None:
    added = BookmarkState(action="added", document_id="CPG", entry_id="cpg-1.1")
    removed = FavoriteState(action="removed", entry_id="cpg-1.1")
    assert added.added and not added.removed
    assert removed.removed and not removed.added


def test_app_section_keys() -> None:
    assert set(get_args(AppSectionKey)) == {
        "pediatric",
        "scores",
        "waafels",
        "files",
        "care",
        "flowchart",
        "rsi",
        "cpr",
    }
