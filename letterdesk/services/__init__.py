"""Action handlers for cover letters and templates."""

from .context import CallerContext, require_caller
from .errors import ActionError, UnauthorizedError, NotFoundError
from .cover_letter_service import CoverLetterService
from .template_service import TemplateService

__all__ = [
    "CallerContext",
    "require_caller",
    "ActionError",
    "UnauthorizedError",
    "NotFoundError",
    "CoverLetterService",
    "TemplateService",
]
