"""
Note-related Pydantic models
"""

from typing import List, Optional
from datetime import datetime
from pydantic import BaseModel, Field

from noteful.models.tag import TagResponse


class NoteCreateRequest(BaseModel):
    title: str = Field(..., min_length=1, max_length=200, description="Short title for the note")
    content: Optional[str] = Field(None, description="Full note content (plain text)")
    folder_id: Optional[int] = Field(None, description="Folder the note belongs to")
    tags: List[int] = Field(default_factory=list, description="Ids of tags attached to the note")


class NoteUpdateRequest(BaseModel):
    """Fields left out of the request are not changed"""
    title: Optional[str] = Field(None, min_length=1, max_length=200)
    content: Optional[str] = None
    folder_id: Optional[int] = None
    tags: Optional[List[int]] = None


class NoteResponse(BaseModel):
    id: int
    title: str
    content: Optional[str] = None
    created: datetime
    folder_id: Optional[int] = None
    folder_name: Optional[str] = None
    tags: List[TagResponse] = Field(default_factory=list)
