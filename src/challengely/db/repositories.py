"""Data access layer for challengely."""

import json
from pathlib import Path
from typing import Any

import aiosqlite

from .engine import get_db_path


class KeyValueRepository:
    """Repository for JSON blobs stored under string keys."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def get(self, key: str) -> str | None:
        """Get the raw stored text for a key."""
        async with aiosqlite.connect(self.db_path) as db:
            cursor = await db.execute(
                "SELECT value FROM kv_store WHERE key = ?", (key,)
            )
            row = await cursor.fetchone()
            if row is None:
                return None
            return row[0]

    async def get_json(self, key: str) -> Any:
        """Get a decoded JSON value, or None if the key is absent.

        Raises:
            json.JSONDecodeError: If the stored text is not valid JSON
        """
        raw = await self.get(key)
        if raw is None:
            return None
        return json.loads(raw)

    async def set(self, key: str, value: str) -> None:
        """Insert or replace the raw text for a key."""
        async with aiosqlite.connect(self.db_path) as db:
            await db.execute(
                """
                INSERT INTO kv_store (key, value, updated_at)
                VALUES (?, ?, CURRENT_TIMESTAMP)
                ON CONFLICT(key) DO UPDATE SET
                    value = excluded.value,
                    updated_at = CURRENT_TIMESTAMP
                """,
                (key, value),
            )
            await db.commit()

    async def set_json(self, key: str, value: Any) -> None:
        """Encode a value as JSON and store it."""
        await self.set(key, json.dumps(value, ensure_ascii=False))
