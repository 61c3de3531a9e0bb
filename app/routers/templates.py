"""Template endpoints."""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.auth import CurrentUser, get_current_user
from app.database import get_db
from app.schemas.common import ListResponse
from app.schemas.template import (
    TemplateCreate,
    TemplateEnvelope,
    TemplateResponse,
    TemplateUpdate,
)
from app.services import template_service

router = APIRouter()


@router.get("/", response_model=ListResponse[TemplateResponse])
async def list_templates(
    favorites_only: bool = Query(False, alias="favoritesOnly"),
    user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    templates = await template_service.list_templates(db, user.id, favorites_only=favorites_only)
    return {"success": True, "data": {"items": templates, "total": len(templates)}}


@router.post("/", response_model=TemplateEnvelope, status_code=201)
async def create_template(
    data: TemplateCreate,
    user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    tpl = await template_service.create_template(db, user.id, data)
    return {"success": True, "data": {"template": tpl}}


@router.patch("/{template_id}", response_model=TemplateEnvelope)
async def update_template(
    template_id: str,
    data: TemplateUpdate,
    user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    tpl = await template_service.update_template(db, user.id, template_id, data)
    return {"success": True, "data": {"template": tpl}}
