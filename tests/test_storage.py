from __future__ import annotations

from datetime import datetime, timezone

import fakeredis.aioredis as fakeredis
import pytest

from cpgnav.config import Settings
from cpgnav.session import SessionMemory
from cpgnav.storage import RedisSessionStorage


def _fixed_clock() -> datetime:
    return datetime(2025, 1, 15, 8, 30, tzinfo=timezone.utc)


def _populated_memory() -> SessionMemory:
    memory = SessionMemory(clock=_fixed_clock)
    memory.toggle_bookmark("CPG", "cpg-2.1", "Adult Medical Cardiac Arrest", 34, note="ALS")
    memory.record_access("CPG", "cpg-1.6", "Perfusion Status Assessment")
    memory.record_access("CPG", "cpg-2.1", "Adult Medical Cardiac Arrest")
    memory.toggle_favorite("cpg-3.1")
    return memory


@pytest.mark.integration
@pytest.mark.asyncio
async def test_save_and_load_round_trip_preserves_order() -> None:
    redis = fakeredis.FakeRedis()
    storage = RedisSessionStorage(redis, Settings())
    memory = _populated_memory()

    try:
        await storage.save("crew-7", memory)
        snapshot = await storage.load("crew-7")

        assert snapshot is not None
        assert snapshot == memory.snapshot()
        assert [item.entry_id for item in snapshot.recent] == ["cpg-2.1", "cpg-1.6"]
        assert snapshot.bookmarks[0].note == "ALS"
        assert snapshot.bookmarks[0].created_at == _fixed_clock()
    finally:
        await redis.aclose()


@pytest.mark.integration
@pytest.mark.asyncio
async def test_save_sets_session_ttl() -> None:
    redis = fakeredis.FakeRedis()
    storage = RedisSessionStorage(redis, Settings(SESSION_TTL_HOURS=2))

    try:
        await storage.save("crew-7", _populated_memory())
        key = RedisSessionStorage.session_key("crew-7")
        assert key == "h:session:crew-7"
        ttl = await redis.ttl(key)
        assert 0 < ttl <= 2 * 3600
        fields = await redis.hgetall(key)
        assert {b"bookmarks", b"recent", b"favorites", b"updated_at"} <= set(fields)
    finally:
        await redis.aclose()


@pytest.mark.integration
@pytest.mark.asyncio
async def test_load_missing_and_delete() -> None:
    redis = fakeredis.FakeRedis()
    storage = RedisSessionStorage(redis, Settings())

    try:
        assert await storage.load("nobody") is None
        await storage.save("crew-7", _populated_memory())
        await storage.delete("crew-7")
        assert await storage.load("crew-7") is None
    finally:
        await redis.aclose()


@pytest.mark.integration
@pytest.mark.asyncio
async def test_empty_session_round_trips_as_empty_lists() -> None:
    redis = fakeredis.FakeRedis()
    storage = RedisSessionStorage(redis, Settings())

    try:
        await storage.save("fresh", SessionMemory())
        snapshot = await storage.load("fresh")
        assert snapshot is not None
        assert snapshot.model_dump() == {"bookmarks": [], "recent": [], "favorites": []}
    finally:
        await redis.aclose()
