"""
Template API endpoints.
"""
from typing import Optional
from fastapi import APIRouter, Depends, status

from letterdesk.db import schemas
from letterdesk.services import CallerContext, TemplateService
from letterdesk.api.deps import get_caller_context, get_template_service

router = APIRouter(prefix="/templates", tags=["templates"])


@router.post("/", response_model=schemas.TemplateResult, status_code=status.HTTP_201_CREATED)
def create_template_endpoint(
    template: schemas.TemplateCreate,
    caller: Optional[CallerContext] = Depends(get_caller_context),
    service: TemplateService = Depends(get_template_service),
):
    return service.create_template(caller, template)


@router.get("/", response_model=schemas.TemplateListResult)
def list_templates_endpoint(
    caller: Optional[CallerContext] = Depends(get_caller_context),
    service: TemplateService = Depends(get_template_service),
):
    return service.list_templates(caller)


@router.patch("/{template_id}", response_model=schemas.TemplateResult)
def update_template_endpoint(
    template_id: str,
    template: schemas.TemplateUpdate,
    caller: Optional[CallerContext] = Depends(get_caller_context),
    service: TemplateService = Depends(get_template_service),
):
    return service.update_template(caller, template_id, template)
