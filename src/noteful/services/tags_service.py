"""
Tags service
"""

import asyncpg
from fastapi import Depends

from noteful.database.connection import get_db_pool
from noteful.services.base_service import BaseService


class TagsService(BaseService):
    """Service for tag operations"""

    def __init__(self, pool: asyncpg.Pool):
        super().__init__(pool, "tags", ("name",))


def get_tags_service(pool: asyncpg.Pool = Depends(get_db_pool)) -> TagsService:
    return TagsService(pool)
