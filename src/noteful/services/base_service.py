"""
Base service layer for table-backed CRUD operations
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence

import asyncpg

logger = logging.getLogger(__name__)


@dataclass
class ServiceResult:
    """Result from service operation"""
    success: bool
    data: Optional[List[Dict[str, Any]]] = None
    count: int = 0
    error: Optional[str] = None
    error_type: Optional[str] = None


def error_result(resource_name: str, operation: str, e: Exception) -> ServiceResult:
    """Translate a database exception into a failed ServiceResult"""
    if isinstance(e, asyncpg.UniqueViolationError):
        return ServiceResult(
            success=False,
            error=f"{resource_name.rstrip('s').capitalize()} name already exists",
            error_type="CONFLICT_ERROR"
        )
    if isinstance(e, asyncpg.ForeignKeyViolationError):
        return ServiceResult(
            success=False,
            error="Referenced record not found",
            error_type="FOREIGN_KEY_ERROR"
        )

    logger.error(f"{operation} operation failed for {resource_name}: {e}", exc_info=True)
    return ServiceResult(
        success=False,
        error=f"Database operation failed: {e}",
        error_type="DATABASE_ERROR"
    )


class BaseService:
    """CRUD over a single table with an integer `id` primary key"""

    def __init__(self, pool: asyncpg.Pool, resource_name: str, fields: Sequence[str]):
        self.pool = pool
        self.resource_name = resource_name
        self.fields = tuple(fields)

    def _select_list(self) -> str:
        return ", ".join(("id",) + self.fields)

    async def list_all(self) -> ServiceResult:
        """List every record ordered by id"""
        try:
            async with self.pool.acquire() as conn:
                rows = await conn.fetch(
                    f"SELECT {self._select_list()} FROM {self.resource_name} ORDER BY id"
                )
            data = [dict(row) for row in rows]
            return ServiceResult(success=True, data=data, count=len(data))
        except Exception as e:
            return error_result(self.resource_name, "List", e)

    async def get_by_id(self, record_id: int) -> ServiceResult:
        """
        Get a single record by primary key

        Returns:
            ServiceResult with one record, or RESOURCE_NOT_FOUND
        """
        try:
            async with self.pool.acquire() as conn:
                row = await conn.fetchrow(
                    f"SELECT {self._select_list()} FROM {self.resource_name} WHERE id = $1",
                    record_id
                )
        except Exception as e:
            return error_result(self.resource_name, "Read", e)

        if row is None:
            return ServiceResult(
                success=False,
                error=f"Record not found with ID: {record_id}",
                error_type="RESOURCE_NOT_FOUND"
            )
        return ServiceResult(success=True, data=[dict(row)], count=1)

    async def create(self, data: Dict[str, Any]) -> ServiceResult:
        """
        Insert a record

        Args:
            data: Column values, restricted to this service's fields
        """
        values = {k: v for k, v in data.items() if k in self.fields}
        columns = ", ".join(values)
        placeholders = ", ".join(f"${i}" for i in range(1, len(values) + 1))

        try:
            async with self.pool.acquire() as conn:
                row = await conn.fetchrow(
                    f"INSERT INTO {self.resource_name} ({columns}) VALUES ({placeholders}) "
                    f"RETURNING {self._select_list()}",
                    *values.values()
                )
            logger.info(f"Created {self.resource_name} record {row['id']}")
            return ServiceResult(success=True, data=[dict(row)], count=1)
        except Exception as e:
            return error_result(self.resource_name, "Create", e)

    async def update(self, record_id: int, data: Dict[str, Any]) -> ServiceResult:
        """
        Update a record by primary key

        Args:
            record_id: Primary key value of record to update
            data: Column values to change; unknown keys are ignored
        """
        values = {k: v for k, v in data.items() if k in self.fields}
        if not values:
            return await self.get_by_id(record_id)

        assignments = ", ".join(f"{column} = ${i}" for i, column in enumerate(values, start=2))

        try:
            async with self.pool.acquire() as conn:
                row = await conn.fetchrow(
                    f"UPDATE {self.resource_name} SET {assignments} WHERE id = $1 "
                    f"RETURNING {self._select_list()}",
                    record_id, *values.values()
                )
        except Exception as e:
            return error_result(self.resource_name, "Update", e)

        if row is None:
            return ServiceResult(
                success=False,
                error=f"Record with id {record_id} not found",
                error_type="RESOURCE_NOT_FOUND"
            )
        return ServiceResult(success=True, data=[dict(row)], count=1)

    async def delete(self, record_id: int) -> ServiceResult:
        """Delete a record by primary key"""
        try:
            async with self.pool.acquire() as conn:
                status = await conn.execute(
                    f"DELETE FROM {self.resource_name} WHERE id = $1", record_id
                )
        except Exception as e:
            return error_result(self.resource_name, "Delete", e)

        deleted = int(status.split()[-1]) if status else 0
        if deleted == 0:
            return ServiceResult(
                success=False,
                error=f"Record not found with ID: {record_id}",
                error_type="RESOURCE_NOT_FOUND"
            )
        logger.info(f"Deleted {self.resource_name} record {record_id}")
        return ServiceResult(success=True, count=deleted)
