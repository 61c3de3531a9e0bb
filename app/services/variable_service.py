"""Prompt variable service — placeholder metadata scoped to an owned template."""

from __future__ import annotations

import logging

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.errors import NotFoundError
from app.models.variable import PromptVariable
from app.schemas.variable import VariableCreate, VariableUpdate
from app.services.ownership import get_owned_template

logger = logging.getLogger(__name__)


async def list_variables(db: AsyncSession, user_id: str, template_id: str) -> list[PromptVariable]:
    await get_owned_template(db, template_id, user_id)

    # Unordered variables sort after the ordered ones
    stmt = (
        select(PromptVariable)
        .where(PromptVariable.template_id == template_id)
        .order_by(
            PromptVariable.order_index.is_(None),
            PromptVariable.order_index,
            PromptVariable.created_at,
        )
    )
    result = await db.execute(stmt)
    return list(result.scalars().all())


async def create_variable(
    db: AsyncSession, user_id: str, template_id: str, data: VariableCreate
) -> PromptVariable:
    await get_owned_template(db, template_id, user_id)

    variable = PromptVariable(template_id=template_id, **data.model_dump())
    db.add(variable)
    await db.commit()
    await db.refresh(variable)
    logger.info("Created variable %r on template %s", variable.name, template_id)
    return variable


async def update_variable(
    db: AsyncSession, user_id: str, template_id: str, variable_id: str, data: VariableUpdate
) -> PromptVariable:
    await get_owned_template(db, template_id, user_id)

    stmt = select(PromptVariable).where(
        PromptVariable.id == variable_id, PromptVariable.template_id == template_id
    )
    result = await db.execute(stmt)
    variable = result.scalar_one_or_none()
    if not variable:
        raise NotFoundError("Prompt variable not found.")

    for field, value in data.changes().items():
        setattr(variable, field, value)

    await db.commit()
    await db.refresh(variable)
    return variable


async def delete_variable(
    db: AsyncSession, user_id: str, template_id: str, variable_id: str
) -> None:
    await get_owned_template(db, template_id, user_id)

    result = await db.execute(
        delete(PromptVariable).where(
            PromptVariable.id == variable_id, PromptVariable.template_id == template_id
        )
    )
    if result.rowcount == 0:
        await db.rollback()
        raise NotFoundError("Prompt variable not found.")

    await db.commit()
    logger.info("Deleted variable %s from template %s", variable_id, template_id)
