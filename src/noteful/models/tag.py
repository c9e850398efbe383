"""
Tag-related Pydantic models
"""

from typing import Optional
from pydantic import BaseModel, Field


class TagCreateRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)


class TagUpdateRequest(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=200)


class TagResponse(BaseModel):
    id: int
    name: str
