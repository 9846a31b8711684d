"""
API dependency helpers.

Resolves the caller context and wires the per-request session into the
action services. A missing identity resolves to ``None``; the services
themselves reject it as unauthorized.
"""
from typing import Optional
from fastapi import Depends, Header
from sqlalchemy.orm import Session

from letterdesk.db.database import get_db
from letterdesk.api.auth import caller_from_headers
from letterdesk.services import CallerContext, CoverLetterService, TemplateService


def get_caller_context(
    x_auth_request_user: Optional[str] = Header(default=None),
    x_auth_request_email: Optional[str] = Header(default=None),
    x_forwarded_user: Optional[str] = Header(default=None),
    x_forwarded_email: Optional[str] = Header(default=None),
) -> Optional[CallerContext]:
    return caller_from_headers(
        x_auth_request_user=x_auth_request_user,
        x_auth_request_email=x_auth_request_email,
        x_forwarded_user=x_forwarded_user,
        x_forwarded_email=x_forwarded_email,
    )


def get_cover_letter_service(db: Session = Depends(get_db)) -> CoverLetterService:
    return CoverLetterService(db)


def get_template_service(db: Session = Depends(get_db)) -> TemplateService:
    return TemplateService(db)
