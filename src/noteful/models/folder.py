"""
Folder-related Pydantic models
"""

from typing import Optional
from pydantic import BaseModel, Field


class FolderCreateRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)


class FolderUpdateRequest(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=200)


class FolderResponse(BaseModel):
    id: int
    name: str
