"""Shared helpers for timestamps and text shaping."""

from __future__ import annotations

from datetime import datetime, timezone


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def truncate_field(value: str, max_chars: int) -> str:
    if max_chars <= 0:
        return ""
    if len(value) <= max_chars:
        return value
    ellipsis = "..." if max_chars > 3 else ""
    slice_len = max_chars - len(ellipsis)
    return value[:slice_len] + ellipsis


def require_id(value: str | None, name: str) -> str:
    """Return the stripped identifier, raising ValueError when it is blank."""
    candidate = (value or "").strip()
    if not candidate:
        raise ValueError(f"{name} must be a non-empty string")
    return candidate


__all__ = ["utc_now", "truncate_field", "require_id"]
