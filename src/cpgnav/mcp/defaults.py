"""Canonical defaults for the assistant tool surface."""

from __future__ import annotations

DEFAULT_SESSION_ID = "default"
REASON_MAX_CHARS = 280

EXAMPLE_TOPICS = ("cardiac arrest", "stroke", "asthma")
EXAMPLE_SECTION_NUMBERS = ("1.6", "2.1")
