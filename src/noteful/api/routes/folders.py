"""
Folder API routes
"""

from typing import List

from fastapi import APIRouter, Depends, Response

from noteful.models.folder import FolderCreateRequest, FolderResponse, FolderUpdateRequest
from noteful.services.folders_service import FoldersService, get_folders_service
from noteful.utils.error_handling import raise_for_result

router = APIRouter()


@router.get("", response_model=List[FolderResponse])
async def list_folders(service: FoldersService = Depends(get_folders_service)):
    """List all folders"""
    result = await service.list_all()
    raise_for_result(result)
    return result.data


@router.get("/{folder_id}", response_model=FolderResponse)
async def get_folder(folder_id: int, service: FoldersService = Depends(get_folders_service)):
    """Get folder details"""
    result = await service.get_by_id(folder_id)
    raise_for_result(result)
    return result.data[0]


@router.post("", response_model=FolderResponse, status_code=201)
async def create_folder(
    request: FolderCreateRequest,
    response: Response,
    service: FoldersService = Depends(get_folders_service)
):
    """Create a new folder"""
    result = await service.create({"name": request.name})
    raise_for_result(result)

    folder = result.data[0]
    response.headers["Location"] = f"/api/folders/{folder['id']}"
    return folder


@router.put("/{folder_id}", response_model=FolderResponse)
async def update_folder(
    folder_id: int,
    request: FolderUpdateRequest,
    service: FoldersService = Depends(get_folders_service)
):
    """Rename a folder"""
    result = await service.update(folder_id, request.model_dump(exclude_none=True))
    raise_for_result(result)
    return result.data[0]


@router.delete("/{folder_id}", status_code=204)
async def delete_folder(folder_id: int, service: FoldersService = Depends(get_folders_service)):
    """Delete a folder; its notes are kept without a folder"""
    result = await service.delete(folder_id)
    raise_for_result(result)
    return Response(status_code=204)
