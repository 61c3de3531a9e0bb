"""Ownership resolvers — fetch an entity and check it belongs to the caller.

Collections and templates answer differently for rows owned by someone else:
a foreign collection looks exactly like a missing one (NOT_FOUND), while a
foreign template is reported as FORBIDDEN. Existing clients rely on this.
"""

from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.errors import ForbiddenError, NotFoundError
from app.models.collection import PromptCollection
from app.models.template import PromptTemplate

logger = logging.getLogger(__name__)


async def get_owned_collection(
    db: AsyncSession, collection_id: str, user_id: str
) -> PromptCollection:
    stmt = select(PromptCollection).where(
        PromptCollection.id == collection_id, PromptCollection.user_id == user_id
    )
    result = await db.execute(stmt)
    collection = result.scalar_one_or_none()
    if not collection:
        raise NotFoundError("Collection not found.")
    return collection


async def get_owned_template(db: AsyncSession, template_id: str, user_id: str) -> PromptTemplate:
    result = await db.execute(select(PromptTemplate).where(PromptTemplate.id == template_id))
    template = result.scalar_one_or_none()
    if not template:
        raise NotFoundError("Template not found.")

    if template.user_id != user_id:
        logger.warning("User %s denied access to template %s", user_id, template_id)
        raise ForbiddenError("You do not have access to this template.")

    return template
