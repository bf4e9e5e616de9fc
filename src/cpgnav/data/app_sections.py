"""In-app tools the assistant can route to (calculators, timers, viewers)."""

from __future__ import annotations

APP_SECTIONS: dict[str, dict[str, str]] = {
    "pediatric": {
        "title": "Pediatric Guidelines",
        "route": "/pediatric",
        "description": "Pediatric dosing, weight-based calculations, and age-specific protocols",
    },
    "scores": {
        "title": "Clinical Scores",
        "route": "/scores",
        "description": "GCS, APGAR, AVPU, and other clinical scoring systems",
    },
    "waafels": {
        "title": "WAAFELS Protocol",
        "route": "/waafels",
        "description": "Wound assessment and fluid estimation guidelines",
    },
    "files": {
        "title": "Clinical Files",
        "route": "/files",
        "description": "Complete CPG 2.4v documentation and reference files",
    },
    "care": {
        "title": "Patient Care",
        "route": "/care",
        "description": "Patient care protocols and procedures",
    },
    "flowchart": {
        "title": "Clinical Flowcharts",
        "route": "/flowchart",
        "description": "Decision trees and clinical pathways for various conditions",
    },
    "rsi": {
        "title": "RSI Protocol",
        "route": "/rsi",
        "description": "Rapid Sequence Intubation guidelines and medications",
    },
    "cpr": {
        "title": "CPR Timer",
        "route": "/cpr",
        "description": "CPR timing and compression guidelines",
    },
}

__all__ = ["APP_SECTIONS"]
