"""Template service — user-owned prompt templates."""

from __future__ import annotations

import logging

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.template import PromptTemplate
from app.schemas.template import TemplateCreate, TemplateUpdate
from app.services.ownership import get_owned_collection, get_owned_template

logger = logging.getLogger(__name__)


async def list_templates(
    db: AsyncSession, user_id: str, favorites_only: bool = False
) -> list[PromptTemplate]:
    stmt = (
        select(PromptTemplate)
        .where(PromptTemplate.user_id == user_id)
        .order_by(PromptTemplate.created_at)
    )
    if favorites_only:
        stmt = stmt.where(PromptTemplate.is_favorite.is_(True))
    result = await db.execute(stmt)
    return list(result.scalars().all())


async def create_template(db: AsyncSession, user_id: str, data: TemplateCreate) -> PromptTemplate:
    if data.collection_id:
        await get_owned_collection(db, data.collection_id, user_id)

    tpl = PromptTemplate(
        collection_id=data.collection_id,
        user_id=user_id,
        name=data.name,
        description=data.description,
        model_hint=data.model_hint,
        prompt_body=data.prompt_body,
        tags=data.tags,
        is_favorite=data.is_favorite,
        is_system=False,
    )
    db.add(tpl)
    await db.commit()
    await db.refresh(tpl)
    logger.info("Created template %s for user %s", tpl.id, user_id)
    return tpl


async def update_template(
    db: AsyncSession, user_id: str, template_id: str, data: TemplateUpdate
) -> PromptTemplate:
    tpl = await get_owned_template(db, template_id, user_id)

    changes = data.changes()
    if changes.get("collection_id") is not None:
        await get_owned_collection(db, changes["collection_id"], user_id)

    for field, value in changes.items():
        setattr(tpl, field, value)
    tpl.updated_at = func.now()

    await db.commit()
    await db.refresh(tpl)
    return tpl
