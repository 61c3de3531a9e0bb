"""Collection endpoints."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.auth import CurrentUser, get_current_user
from app.database import get_db
from app.schemas.collection import (
    CollectionCreate,
    CollectionEnvelope,
    CollectionResponse,
    CollectionUpdate,
)
from app.schemas.common import ListResponse
from app.services import collection_service

router = APIRouter()


@router.get("/", response_model=ListResponse[CollectionResponse])
async def list_collections(
    user: CurrentUser = Depends(get_current_user), db: AsyncSession = Depends(get_db)
):
    collections = await collection_service.list_collections(db, user.id)
    return {"success": True, "data": {"items": collections, "total": len(collections)}}


@router.post("/", response_model=CollectionEnvelope, status_code=201)
async def create_collection(
    data: CollectionCreate,
    user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    collection = await collection_service.create_collection(db, user.id, data)
    return {"success": True, "data": {"collection": collection}}


@router.patch("/{collection_id}", response_model=CollectionEnvelope)
async def update_collection(
    collection_id: str,
    data: CollectionUpdate,
    user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    collection = await collection_service.update_collection(db, user.id, collection_id, data)
    return {"success": True, "data": {"collection": collection}}
