"""Collection service — per-user groupings of prompt templates."""

from __future__ import annotations

import logging

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.collection import PromptCollection
from app.schemas.collection import CollectionCreate, CollectionUpdate
from app.services.ownership import get_owned_collection

logger = logging.getLogger(__name__)


async def list_collections(db: AsyncSession, user_id: str) -> list[PromptCollection]:
    stmt = (
        select(PromptCollection)
        .where(PromptCollection.user_id == user_id)
        .order_by(PromptCollection.created_at)
    )
    result = await db.execute(stmt)
    return list(result.scalars().all())


async def create_collection(
    db: AsyncSession, user_id: str, data: CollectionCreate
) -> PromptCollection:
    collection = PromptCollection(
        user_id=user_id,
        name=data.name,
        description=data.description,
        icon=data.icon,
        is_default=data.is_default,
    )
    db.add(collection)
    await db.commit()
    await db.refresh(collection)
    logger.info("Created collection %s for user %s", collection.id, user_id)
    return collection


async def update_collection(
    db: AsyncSession, user_id: str, collection_id: str, data: CollectionUpdate
) -> PromptCollection:
    collection = await get_owned_collection(db, collection_id, user_id)

    for field, value in data.changes().items():
        setattr(collection, field, value)
    collection.updated_at = func.now()

    await db.commit()
    await db.refresh(collection)
    return collection
