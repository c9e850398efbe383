"""
Notes service - notes joined with their folder name and tags
"""

import json
import logging
from typing import Any, Dict, List, Optional

import asyncpg
from fastapi import Depends

from noteful.database.connection import get_db_pool
from noteful.services.base_service import BaseService, ServiceResult, error_result

logger = logging.getLogger(__name__)

NOTE_SELECT = """
    SELECT
        n.id, n.title, n.content, n.created, n.folder_id,
        f.name AS folder_name,
        COALESCE(
            json_agg(json_build_object('id', t.id, 'name', t.name) ORDER BY t.id)
                FILTER (WHERE t.id IS NOT NULL),
            '[]'
        ) AS tags
    FROM notes n
    LEFT JOIN folders f ON f.id = n.folder_id
    LEFT JOIN notes_tags nt ON nt.note_id = n.id
    LEFT JOIN tags t ON t.id = nt.tag_id
"""


def _note_from_row(row: asyncpg.Record) -> Dict[str, Any]:
    note = dict(row)
    if isinstance(note["tags"], str):
        note["tags"] = json.loads(note["tags"])
    return note


class NotesService(BaseService):
    """Service for note operations"""

    def __init__(self, pool: asyncpg.Pool):
        super().__init__(pool, "notes", ("title", "content", "folder_id"))

    async def search_notes(
        self,
        search_term: Optional[str] = None,
        folder_id: Optional[int] = None,
        tag_id: Optional[int] = None
    ) -> ServiceResult:
        """
        List notes, optionally filtered

        Args:
            search_term: Substring matched against the title with LIKE
            folder_id: Only notes in this folder
            tag_id: Only notes carrying this tag
        """
        conditions = []
        params: List[Any] = []

        if search_term:
            params.append(f"%{search_term}%")
            conditions.append(f"n.title LIKE ${len(params)}")
        if folder_id is not None:
            params.append(folder_id)
            conditions.append(f"n.folder_id = ${len(params)}")
        if tag_id is not None:
            params.append(tag_id)
            conditions.append(f"n.id IN (SELECT note_id FROM notes_tags WHERE tag_id = ${len(params)})")

        query = NOTE_SELECT
        if conditions:
            query += " WHERE " + " AND ".join(conditions)
        query += " GROUP BY n.id, f.name ORDER BY n.id"

        try:
            async with self.pool.acquire() as conn:
                rows = await conn.fetch(query, *params)
        except Exception as e:
            return error_result(self.resource_name, "Search", e)

        data = [_note_from_row(row) for row in rows]
        return ServiceResult(success=True, data=data, count=len(data))

    async def get_note(self, note_id: int) -> ServiceResult:
        """Get one note with folder name and tags"""
        try:
            async with self.pool.acquire() as conn:
                row = await self._fetch_note(conn, note_id)
        except Exception as e:
            return error_result(self.resource_name, "Read", e)

        if row is None:
            return ServiceResult(
                success=False,
                error=f"Record not found with ID: {note_id}",
                error_type="RESOURCE_NOT_FOUND"
            )
        return ServiceResult(success=True, data=[row], count=1)

    async def create_note(
        self,
        title: str,
        content: Optional[str] = None,
        folder_id: Optional[int] = None,
        tags: Optional[List[int]] = None
    ) -> ServiceResult:
        """Insert a note and its tag links in one transaction"""
        try:
            async with self.pool.acquire() as conn:
                async with conn.transaction():
                    note_id = await conn.fetchval(
                        "INSERT INTO notes (title, content, folder_id) VALUES ($1, $2, $3) RETURNING id",
                        title, content, folder_id
                    )
                    await self._replace_tags(conn, note_id, tags or [])
                row = await self._fetch_note(conn, note_id)
        except Exception as e:
            return error_result(self.resource_name, "Create", e)

        logger.info(f"Created note {note_id}")
        return ServiceResult(success=True, data=[row], count=1)

    async def update_note(
        self,
        note_id: int,
        updates: Dict[str, Any],
        tags: Optional[List[int]] = None
    ) -> ServiceResult:
        """
        Update note columns and, when `tags` is given, replace its tag links

        Returns:
            ServiceResult with the updated note, or RESOURCE_NOT_FOUND
        """
        values = {k: v for k, v in updates.items() if k in self.fields}

        try:
            async with self.pool.acquire() as conn:
                async with conn.transaction():
                    exists = await conn.fetchval("SELECT 1 FROM notes WHERE id = $1", note_id)
                    if not exists:
                        return ServiceResult(
                            success=False,
                            error=f"Record with id {note_id} not found",
                            error_type="RESOURCE_NOT_FOUND"
                        )
                    if values:
                        assignments = ", ".join(
                            f"{column} = ${i}" for i, column in enumerate(values, start=2)
                        )
                        await conn.execute(
                            f"UPDATE notes SET {assignments} WHERE id = $1",
                            note_id, *values.values()
                        )
                    if tags is not None:
                        await self._replace_tags(conn, note_id, tags)
                row = await self._fetch_note(conn, note_id)
        except Exception as e:
            return error_result(self.resource_name, "Update", e)

        return ServiceResult(success=True, data=[row], count=1)

    async def _replace_tags(self, conn: asyncpg.Connection, note_id: int, tags: List[int]) -> None:
        await conn.execute("DELETE FROM notes_tags WHERE note_id = $1", note_id)
        if tags:
            await conn.executemany(
                "INSERT INTO notes_tags (note_id, tag_id) VALUES ($1, $2)",
                [(note_id, tag_id) for tag_id in dict.fromkeys(tags)]
            )

    async def _fetch_note(self, conn: asyncpg.Connection, note_id: int) -> Optional[Dict[str, Any]]:
        row = await conn.fetchrow(NOTE_SELECT + " WHERE n.id = $1 GROUP BY n.id, f.name", note_id)
        return _note_from_row(row) if row else None


def get_notes_service(pool: asyncpg.Pool = Depends(get_db_pool)) -> NotesService:
    return NotesService(pool)
