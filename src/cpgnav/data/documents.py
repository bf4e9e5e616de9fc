"""Reference documents carried by the app."""

from __future__ import annotations

from typing import Any

from .cpg_v2_4 import CPG_SOURCE_URL

DOCUMENTS: list[dict[str, Any]] = [
    {
        "id": "CPG",
        "title": "Clinical Practice Guidelines",
        "version": "2.4v",
        "last_updated": "January 2025",
        "source_url": CPG_SOURCE_URL,
    },
    {
        "id": "PAT",
        "title": "Paediatric Assessment and Treatment Guide",
        "version": "1.0",
        "last_updated": "October 2024",
    },
    {
        "id": "SOP",
        "title": "Standard Operating Procedures",
        "version": "4.4",
        "last_updated": "November 2024",
    },
    {
        "id": "CPM",
        "title": "Clinical Procedure Manual",
        "version": "4.0",
        "last_updated": "November 2024",
    },
]

__all__ = ["DOCUMENTS"]
