"""Prompt variable endpoints, nested under their template."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.auth import CurrentUser, get_current_user
from app.database import get_db
from app.schemas.common import ListResponse, SuccessResponse
from app.schemas.variable import (
    VariableCreate,
    VariableEnvelope,
    VariableResponse,
    VariableUpdate,
)
from app.services import variable_service

router = APIRouter()


@router.get("/", response_model=ListResponse[VariableResponse])
async def list_prompt_variables(
    template_id: str,
    user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    variables = await variable_service.list_variables(db, user.id, template_id)
    return {"success": True, "data": {"items": variables, "total": len(variables)}}


@router.post("/", response_model=VariableEnvelope, status_code=201)
async def create_prompt_variable(
    template_id: str,
    data: VariableCreate,
    user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    variable = await variable_service.create_variable(db, user.id, template_id, data)
    return {"success": True, "data": {"variable": variable}}


@router.patch("/{variable_id}", response_model=VariableEnvelope)
async def update_prompt_variable(
    template_id: str,
    variable_id: str,
    data: VariableUpdate,
    user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    variable = await variable_service.update_variable(db, user.id, template_id, variable_id, data)
    return {"success": True, "data": {"variable": variable}}


@router.delete("/{variable_id}", response_model=SuccessResponse)
async def delete_prompt_variable(
    template_id: str,
    variable_id: str,
    user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    await variable_service.delete_variable(db, user.id, template_id, variable_id)
    return {"success": True}
