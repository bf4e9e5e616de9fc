"""Redis persistence helpers for session memory."""

from __future__ import annotations

import json
import time
from typing import Any

from redis.asyncio import Redis

from .config import Settings
from .models import Bookmark, RecentAccess, SessionSnapshot
from .session import SessionMemory


def _decode(value: Any) -> Any:
    return value.decode("utf-8") if isinstance(value, bytes) else value


class RedisSessionStorage:
    """Typed helpers over Redis for per-session bookmarks, recents, and favorites."""

    def __init__(self, redis: Redis, settings: Settings) -> None:
        self.redis = redis
        self.settings = settings

    # ---- Key helpers -----------------------------------------------------
    @staticmethod
    def session_key(session_id: str) -> str:
        return f"h:session:{session_id}"

    # ---- Persistence -----------------------------------------------------
    async def save(self, session_id: str, memory: SessionMemory) -> None:
        snapshot = memory.snapshot()
        key = self.session_key(session_id)
        ttl = self.settings.session_ttl_hours * 3600
        payload = {
            "bookmarks": json.dumps([item.model_dump(mode="json") for item in snapshot.bookmarks]),
            "recent": json.dumps([item.model_dump(mode="json") for item in snapshot.recent]),
            "favorites": json.dumps(snapshot.favorites),
            "updated_at": int(time.time()),
        }
        pipe = self.redis.pipeline(transaction=True)
        pipe.hset(key, mapping=payload)
        pipe.expire(key, ttl)
        await pipe.execute()

    async def load(self, session_id: str) -> SessionSnapshot | None:
        raw = await self.redis.hgetall(self.session_key(session_id))
        if not raw:
            return None
        data = {_decode(key): _decode(value) for key, value in raw.items()}

        def _load_list(field: str) -> list[Any]:
            value = data.get(field)
            if not value:
                return []
            return json.loads(value)

        return SessionSnapshot(
            bookmarks=[Bookmark.model_validate(item) for item in _load_list("bookmarks")],
            recent=[RecentAccess.model_validate(item) for item in _load_list("recent")],
            favorites=[str(item) for item in _load_list("favorites")],
        )

    async def delete(self, session_id: str) -> None:
        await self.redis.delete(self.session_key(session_id))


__all__ = ["RedisSessionStorage"]
