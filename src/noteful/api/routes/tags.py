"""
Tag API routes
"""

from typing import List

from fastapi import APIRouter, Depends, Response

from noteful.models.tag import TagCreateRequest, TagResponse, TagUpdateRequest
from noteful.services.tags_service import TagsService, get_tags_service
from noteful.utils.error_handling import raise_for_result

router = APIRouter()


@router.get("", response_model=List[TagResponse])
async def list_tags(service: TagsService = Depends(get_tags_service)):
    result = await service.list_all()
    raise_for_result(result)
    return result.data


@router.get("/{tag_id}", response_model=TagResponse)
async def get_tag(tag_id: int, service: TagsService = Depends(get_tags_service)):
    result = await service.get_by_id(tag_id)
    raise_for_result(result)
    return result.data[0]


@router.post("", response_model=TagResponse, status_code=201)
async def create_tag(
    request: TagCreateRequest,
    response: Response,
    service: TagsService = Depends(get_tags_service)
):
    """Create a new tag"""
    result = await service.create({"name": request.name})
    raise_for_result(result)

    tag = result.data[0]
    response.headers["Location"] = f"/api/tags/{tag['id']}"
    return tag


@router.put("/{tag_id}", response_model=TagResponse)
async def update_tag(
    tag_id: int,
    request: TagUpdateRequest,
    service: TagsService = Depends(get_tags_service)
):
    result = await service.update(tag_id, request.model_dump(exclude_none=True))
    raise_for_result(result)
    return result.data[0]


@router.delete("/{tag_id}", status_code=204)
async def delete_tag(tag_id: int, service: TagsService = Depends(get_tags_service)):
    """Delete a tag and detach it from every note"""
    result = await service.delete(tag_id)
    raise_for_result(result)
    return Response(status_code=204)
