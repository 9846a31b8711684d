"""
Cover letter API endpoints.

Thin HTTP wrappers over ``CoverLetterService``; ownership checks live in
the service.
"""
from typing import Optional
from fastapi import APIRouter, Depends, status

from letterdesk.db import schemas
from letterdesk.services import CallerContext, CoverLetterService
from letterdesk.api.deps import get_caller_context, get_cover_letter_service

router = APIRouter(prefix="/cover-letters", tags=["cover-letters"])


@router.post("/", response_model=schemas.CoverLetterResult, status_code=status.HTTP_201_CREATED)
def create_cover_letter_endpoint(
    cover_letter: schemas.CoverLetterCreate,
    caller: Optional[CallerContext] = Depends(get_caller_context),
    service: CoverLetterService = Depends(get_cover_letter_service),
):
    return service.create_cover_letter(caller, cover_letter)


@router.get("/", response_model=schemas.CoverLetterListResult)
def list_cover_letters_endpoint(
    caller: Optional[CallerContext] = Depends(get_caller_context),
    service: CoverLetterService = Depends(get_cover_letter_service),
):
    return service.list_cover_letters(caller)


@router.get("/{cover_letter_id}", response_model=schemas.CoverLetterResult)
def get_cover_letter_endpoint(
    cover_letter_id: str,
    caller: Optional[CallerContext] = Depends(get_caller_context),
    service: CoverLetterService = Depends(get_cover_letter_service),
):
    return service.get_cover_letter(caller, cover_letter_id)


@router.patch("/{cover_letter_id}", response_model=schemas.CoverLetterResult)
def update_cover_letter_endpoint(
    cover_letter_id: str,
    cover_letter: schemas.CoverLetterUpdate,
    caller: Optional[CallerContext] = Depends(get_caller_context),
    service: CoverLetterService = Depends(get_cover_letter_service),
):
    return service.update_cover_letter(caller, cover_letter_id, cover_letter)


@router.delete("/{cover_letter_id}", response_model=schemas.CoverLetterResult)
def delete_cover_letter_endpoint(
    cover_letter_id: str,
    caller: Optional[CallerContext] = Depends(get_caller_context),
    service: CoverLetterService = Depends(get_cover_letter_service),
):
    return service.delete_cover_letter(caller, cover_letter_id)
