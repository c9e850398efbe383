"""
Folders service
"""

import asyncpg
from fastapi import Depends

from noteful.database.connection import get_db_pool
from noteful.services.base_service import BaseService


class FoldersService(BaseService):
    """Service for folder operations"""

    def __init__(self, pool: asyncpg.Pool):
        super().__init__(pool, "folders", ("name",))


def get_folders_service(pool: asyncpg.Pool = Depends(get_db_pool)) -> FoldersService:
    return FoldersService(pool)
