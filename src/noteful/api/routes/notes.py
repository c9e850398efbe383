"""
Note API routes
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response

from noteful.models.note import NoteCreateRequest, NoteResponse, NoteUpdateRequest
from noteful.services.notes_service import NotesService, get_notes_service
from noteful.utils.error_handling import raise_for_result

router = APIRouter()


@router.get("", response_model=List[NoteResponse])
async def list_notes(
    search_term: Optional[str] = Query(None, description="Substring match on note title"),
    folder_id: Optional[int] = Query(None, description="Only notes in this folder"),
    tag_id: Optional[int] = Query(None, description="Only notes carrying this tag"),
    service: NotesService = Depends(get_notes_service)
):
    """List notes, optionally filtered by search term, folder and tag"""
    result = await service.search_notes(search_term=search_term, folder_id=folder_id, tag_id=tag_id)
    raise_for_result(result)
    return result.data


@router.get("/{note_id}", response_model=NoteResponse)
async def get_note(note_id: int, service: NotesService = Depends(get_notes_service)):
    """Get note details"""
    result = await service.get_note(note_id)
    raise_for_result(result)
    return result.data[0]


@router.post("", response_model=NoteResponse, status_code=201)
async def create_note(
    request: NoteCreateRequest,
    response: Response,
    service: NotesService = Depends(get_notes_service)
):
    """Create a new note"""
    result = await service.create_note(
        title=request.title,
        content=request.content,
        folder_id=request.folder_id,
        tags=request.tags
    )
    raise_for_result(result)

    note = result.data[0]
    response.headers["Location"] = f"/api/notes/{note['id']}"
    return note


@router.put("/{note_id}", response_model=NoteResponse)
async def update_note(
    note_id: int,
    request: NoteUpdateRequest,
    service: NotesService = Depends(get_notes_service)
):
    """Update a note; fields missing from the body are left unchanged"""
    updates = request.model_dump(exclude_unset=True)
    if "title" in updates and updates["title"] is None:
        raise HTTPException(status_code=422, detail="title cannot be null")

    tags = updates.pop("tags", None)
    result = await service.update_note(note_id, updates, tags=tags)
    raise_for_result(result)
    return result.data[0]


@router.delete("/{note_id}", status_code=204)
async def delete_note(note_id: int, service: NotesService = Depends(get_notes_service)):
    """Delete a note"""
    result = await service.delete(note_id)
    raise_for_result(result)
    return Response(status_code=204)
