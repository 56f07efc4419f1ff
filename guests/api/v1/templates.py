"""
Template endpoints.
"""

from datetime import date
from typing import List

from fastapi import APIRouter, Depends, Path, status

from guests.api import deps
from guests.schemas.registration import RegistrationResponse
from guests.schemas.template import TemplateCreate, TemplateResponse, TemplateUpdate
from guests.services.template_service import TemplateService

router = APIRouter(prefix="/templates")


@router.get("", response_model=List[TemplateResponse], summary="List templates")
def list_templates(service: TemplateService = Depends(deps.get_template_service)):
    return service.find_all()


@router.post(
    "",
    response_model=TemplateResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create template",
)
def create_template(payload: TemplateCreate, service: TemplateService = Depends(deps.get_template_service)):
    return service.insert(payload)


@router.get("/{template_id}", response_model=TemplateResponse, summary="Get template")
def get_template(
    template_id: int = Path(..., description="Template ID"),
    service: TemplateService = Depends(deps.get_template_service),
):
    return service.find(template_id)


@router.put("/{template_id}", response_model=TemplateResponse, summary="Update template")
def update_template(
    payload: TemplateUpdate,
    template_id: int = Path(..., description="Template ID"),
    service: TemplateService = Depends(deps.get_template_service),
):
    return service.update(template_id, payload)


@router.delete("/{template_id}", response_model=TemplateResponse, summary="Delete template")
def delete_template(
    template_id: int = Path(..., description="Template ID"),
    service: TemplateService = Depends(deps.get_template_service),
):
    return service.delete(template_id)


@router.post(
    "/{template_id}/registrations/{registration_date}",
    response_model=List[RegistrationResponse],
    status_code=status.HTTP_201_CREATED,
    summary="Generate registrations from template",
    description="Creates one unassigned registration per mat for the date.",
)
def generate_registrations(
    registration_date: date,
    template_id: int = Path(..., description="Template ID"),
    service: TemplateService = Depends(deps.get_template_service),
):
    return service.generate(template_id, registration_date)
